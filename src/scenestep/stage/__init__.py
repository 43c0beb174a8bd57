"""Surfaces the scene stepper renders into and takes input from."""

from .surfaces import (
    ImageSurface,
    RawImage,
    RawImageSurface,
    SpriteImage,
    TextBox,
    TextSurface,
    Trigger,
)
from .stage import Stage

__all__ = [
    "ImageSurface",
    "RawImage",
    "RawImageSurface",
    "SpriteImage",
    "TextBox",
    "TextSurface",
    "Trigger",
    "Stage",
]
