"""Scene stepping core: override tracks, entities, position state, history."""

from .tracks import OverrideTrack, Resolution, color_track, sprite_track, texture_track
from .dialogue import DialogueTrack, SpeechArea
from .entities import Background, Character, VisualEntity
from .state import PositionState
from .history import HistoryStore
from .manager import SceneManager

__all__ = [
    # Tracks
    "OverrideTrack",
    "Resolution",
    "color_track",
    "sprite_track",
    "texture_track",
    # Dialogue
    "DialogueTrack",
    "SpeechArea",
    # Entities
    "Background",
    "Character",
    "VisualEntity",
    # State
    "PositionState",
    "HistoryStore",
    "SceneManager",
]
