"""Data models for the scene stepper."""

from .color import Color
from .scene import BackgroundSlot, BackgroundSpec, CharacterSpec, DialogueLine
from .manifest import HistorySettings, Manifest

__all__ = [
    "Color",
    "BackgroundSlot",
    "BackgroundSpec",
    "CharacterSpec",
    "DialogueLine",
    "HistorySettings",
    "Manifest",
]
