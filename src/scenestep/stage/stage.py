"""Named collection of surfaces a scene manifest is played on."""

from dataclasses import dataclass, field
from typing import Dict, Optional

from ..models.manifest import Manifest
from .surfaces import (
    ChangeCallback,
    ImageSurface,
    RawImage,
    RawImageSurface,
    SpriteImage,
    TextBox,
    TextSurface,
    Trigger,
)


@dataclass
class Stage:
    """Surfaces for one scene.

    Characters and backgrounds are looked up by name; one without a surface
    on the stage is left inert by the scene manager.
    """

    speaker: Optional[TextSurface] = None
    speech: Optional[TextSurface] = None
    images: Dict[str, ImageSurface] = field(default_factory=dict)
    raw_images: Dict[str, RawImageSurface] = field(default_factory=dict)
    trigger: Trigger = field(default_factory=Trigger)

    @classmethod
    def for_manifest(
        cls,
        manifest: Manifest,
        on_change: Optional[ChangeCallback] = None,
    ) -> "Stage":
        """Build in-memory surfaces for every entity in a manifest.

        Args:
            manifest: Scene manifest to build surfaces for.
            on_change: Optional callback invoked with (surface name, attribute,
                value) every time a surface is written.

        Returns:
            Stage whose surfaces start at the manifest's startup values.
        """
        images: Dict[str, ImageSurface] = {
            character.name: SpriteImage(
                name=character.name, sprite=character.sprite, on_change=on_change
            )
            for character in manifest.characters
        }
        raw_images: Dict[str, RawImageSurface] = {
            background.name: RawImage(
                name=background.name,
                texture=background.texture,
                color=background.color,
                on_change=on_change,
            )
            for background in manifest.backgrounds
        }
        return cls(
            speaker=TextBox(name="speaker", on_change=on_change),
            speech=TextBox(name="speech", on_change=on_change),
            images=images,
            raw_images=raw_images,
        )
