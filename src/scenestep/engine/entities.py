"""Visual entities: characters and backgrounds driven by override tracks."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..models.color import Color
from ..models.scene import BackgroundSlot, BackgroundSpec, CharacterSpec
from ..stage.surfaces import ImageSurface, RawImageSurface
from .tracks import Resolution, color_track, sprite_track, texture_track

logger = logging.getLogger(__name__)


class VisualEntity(ABC):
    """Something on screen whose look depends on the scene position.

    An entity owns the surface it draws into; the surface's current value is
    the entity's display cache and only the entity writes to it. Entities
    that are not in use are skipped entirely by the scene manager.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def is_in_use(self) -> bool:
        """Return whether the entity has both a surface and override slots."""
        ...

    @abstractmethod
    def initialize(self) -> None:
        """Seed slot 0 from the surface's startup value."""
        ...

    @abstractmethod
    def apply(self, position: int) -> bool:
        """Show the resolved value for ``position``; returns True on change."""
        ...

    def _warn_misconfigured(self, has_surface: bool, slot_count: int) -> None:
        if has_surface and slot_count == 0:
            logger.warning(
                f"{type(self).__name__} '{self.name}' has a surface but no override "
                "slots; it will be skipped"
            )
        elif not has_surface and slot_count > 0:
            logger.warning(
                f"{type(self).__name__} '{self.name}' has {slot_count} override slots "
                "but no surface on the stage; it will be skipped"
            )


class Character(VisualEntity):
    """An actor whose sprite follows the expression track."""

    def __init__(self, spec: CharacterSpec, image: Optional[ImageSurface]) -> None:
        super().__init__(spec.name)
        self.image = image
        self.expressions = sprite_track(spec.expressions)

    def is_in_use(self) -> bool:
        return self.image is not None and self.expressions.is_in_use()

    def initialize(self) -> None:
        if not self.is_in_use():
            self._warn_misconfigured(self.image is not None, len(self.expressions))
            return
        if self.expressions[0] is None:
            self.expressions[0] = self.image.sprite

    def resolve(self, position: int) -> Resolution[str]:
        return self.expressions.resolve(position, self.image.sprite)

    def apply(self, position: int) -> bool:
        if not self.is_in_use():
            return False
        resolved = self.resolve(position)
        if resolved.apply and resolved.value != self.image.sprite:
            self.image.set_sprite(resolved.value)
            return True
        return False


class Background(VisualEntity):
    """A raw image whose texture and color follow the same slot list."""

    def __init__(self, spec: BackgroundSpec, raw_image: Optional[RawImageSurface]) -> None:
        super().__init__(spec.name)
        self.raw_image = raw_image
        self.textures = texture_track(spec.values)
        self.colors = color_track(spec.values)

    def is_in_use(self) -> bool:
        return self.raw_image is not None and self.textures.is_in_use()

    def initialize(self) -> None:
        if not self.is_in_use():
            self._warn_misconfigured(self.raw_image is not None, len(self.textures))
            return

        first: BackgroundSlot = self.textures[0]
        update = {}
        if not first.uses_color:
            update["color"] = self.raw_image.color
            update["use_color"] = True
        if first.texture is None and not first.suppress:
            update["texture"] = self.raw_image.texture
        if update:
            first = first.model_copy(update=update)
            self.textures[0] = first
            self.colors[0] = first

    def resolve_texture(self, position: int) -> Resolution[str]:
        return self.textures.resolve(position, self.raw_image.texture)

    def resolve_color(self, position: int) -> Resolution[Color]:
        return self.colors.resolve(position, self.raw_image.color)

    def apply(self, position: int) -> bool:
        if not self.is_in_use():
            return False

        changed = False
        texture = self.resolve_texture(position)
        if texture.apply and texture.value != self.raw_image.texture:
            self.raw_image.set_texture(texture.value)
            changed = True

        color = self.resolve_color(position)
        if color.apply and not color.value.same_as(self.raw_image.color):
            self.raw_image.set_color(color.value)
            changed = True
        return changed
