"""Display and input surfaces the stepper talks to.

The core never draws anything itself. It writes strings, sprites, textures
and colors into these surfaces and listens to a trigger for "advance"
requests. The in-memory implementations here count every write so hosts and
tests can observe exactly which changes were pushed.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol

from ..models.color import Color, WHITE

ChangeCallback = Callable[[str, str, object], None]


class TextSurface(Protocol):
    """A widget that shows a single string."""

    text: str

    def set_text(self, text: str) -> None: ...


class ImageSurface(Protocol):
    """A widget that shows a sprite."""

    sprite: Optional[str]

    def set_sprite(self, sprite: Optional[str]) -> None: ...


class RawImageSurface(Protocol):
    """A widget that shows a texture tinted by a color."""

    texture: Optional[str]
    color: Color

    def set_texture(self, texture: Optional[str]) -> None: ...

    def set_color(self, color: Color) -> None: ...


@dataclass
class TextBox:
    """In-memory text widget."""

    name: str
    text: str = ""
    on_change: Optional[ChangeCallback] = None
    writes: int = 0

    def set_text(self, text: str) -> None:
        self.text = text
        self.writes += 1
        if self.on_change:
            self.on_change(self.name, "text", text)


@dataclass
class SpriteImage:
    """In-memory sprite widget."""

    name: str
    sprite: Optional[str] = None
    on_change: Optional[ChangeCallback] = None
    writes: int = 0

    def set_sprite(self, sprite: Optional[str]) -> None:
        self.sprite = sprite
        self.writes += 1
        if self.on_change:
            self.on_change(self.name, "sprite", sprite)


@dataclass
class RawImage:
    """In-memory texture + color widget."""

    name: str
    texture: Optional[str] = None
    color: Color = WHITE
    on_change: Optional[ChangeCallback] = None
    texture_writes: int = 0
    color_writes: int = 0

    def set_texture(self, texture: Optional[str]) -> None:
        self.texture = texture
        self.texture_writes += 1
        if self.on_change:
            self.on_change(self.name, "texture", texture)

    def set_color(self, color: Color) -> None:
        self.color = color
        self.color_writes += 1
        if self.on_change:
            self.on_change(self.name, "color", color.hex)


@dataclass
class Trigger:
    """Click-style event source."""

    listeners: List[Callable[[], None]] = field(default_factory=list)

    def add_listener(self, listener: Callable[[], None]) -> None:
        self.listeners.append(listener)

    def remove_all_listeners(self) -> None:
        self.listeners.clear()

    def fire(self) -> None:
        for listener in list(self.listeners):
            listener()
