"""Scene manager: the position state machine wired to visuals and history."""

import logging
import threading
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..models.manifest import Manifest
from ..stage.stage import Stage
from ..stage.surfaces import Trigger
from .dialogue import DialogueTrack, SpeechArea
from .entities import Background, Character, VisualEntity
from .history import HistoryStore
from .state import PositionState

logger = logging.getLogger(__name__)


class SceneManager:
    """Shows one scene position at a time and remembers what was seen.

    The manager is host-agnostic: whatever loop owns it calls
    :meth:`initialize` once, :meth:`enable` to wire the click trigger,
    :meth:`tick` with the scroll input every frame and :meth:`teardown` at
    the end. Every :meth:`show` resolves all visuals, writes the dialogue,
    marks the position visited and saves history before returning.

    Args:
        speech: Mandatory dialogue area.
        characters: Character entities; inert ones are skipped.
        backgrounds: Background entities; inert ones are skipped.
        history: Where progress is persisted, or None to keep it in memory.
        trigger: Click-style trigger that advances to the next position.
        start_position: Position shown when there is no history.
    """

    def __init__(
        self,
        speech: SpeechArea,
        characters: Sequence[Character] = (),
        backgrounds: Sequence[Background] = (),
        history: Optional[HistoryStore] = None,
        trigger: Optional[Trigger] = None,
        start_position: int = 0,
    ) -> None:
        self.speech = speech
        self.characters: List[Character] = list(characters)
        self.backgrounds: List[Background] = list(backgrounds)
        self.history = history
        self.trigger = trigger
        self.state = PositionState(len(speech), start_position)
        self._lock = threading.RLock()

    @classmethod
    def from_manifest(
        cls,
        manifest: Manifest,
        stage: Stage,
        data_dir: Optional[Union[str, Path]] = None,
        persist: bool = True,
    ) -> "SceneManager":
        """Build a manager for ``manifest`` drawing into ``stage``.

        Args:
            manifest: Scene manifest.
            stage: Surfaces to render into; entities without one stay inert.
            data_dir: Base directory for the history path. Defaults to
                ``config.data_dir``.
            persist: Whether to read and write the history file.
        """
        speech = SpeechArea(DialogueTrack(manifest.dialogue), stage.speaker, stage.speech)
        characters = [
            Character(spec, stage.images.get(spec.name)) for spec in manifest.characters
        ]
        backgrounds = [
            Background(spec, stage.raw_images.get(spec.name))
            for spec in manifest.backgrounds
        ]
        history = HistoryStore.for_manifest(manifest, data_dir) if persist else None
        return cls(
            speech,
            characters,
            backgrounds,
            history=history,
            trigger=stage.trigger,
            start_position=manifest.start_position,
        )

    @property
    def entities(self) -> List[VisualEntity]:
        return [*self.characters, *self.backgrounds]

    @property
    def current_position(self) -> int:
        return self.state.current_index

    @property
    def current_is_visited(self) -> bool:
        return self.state.current_is_visited

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def initialize(self) -> None:
        """Validate surfaces, seed entities, load history and show the scene.

        Raises:
            ConfigurationError: If the speech area cannot be shown.
        """
        self.speech.initialize()
        for entity in self.entities:
            entity.initialize()
        if self.history is not None:
            self.history.load(self.state)
        self.show(advance=False)

    def enable(self) -> None:
        """Advance and show whenever the trigger fires."""
        if self.trigger is not None:
            self.trigger.add_listener(self._on_trigger)

    def disable(self) -> None:
        if self.trigger is not None:
            self.trigger.remove_all_listeners()

    def teardown(self) -> None:
        self.disable()

    def tick(self, scroll: float) -> bool:
        """Handle one frame of scroll input.

        Negative scroll moves forward, but only onto a position already
        seen; positive scroll moves back. Returns True if the scene changed
        position.
        """
        if scroll < 0:
            return self.advance_if_visited()
        if scroll > 0:
            return self.retreat()
        return False

    def _on_trigger(self) -> None:
        self.show()

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def show(self, advance: bool = True) -> None:
        """Show the current position, first moving forward one if ``advance``."""
        with self._lock:
            if advance:
                self.state.advance_to_next()
            position = self.state.current_index

            for entity in self.entities:
                if entity.is_in_use():
                    entity.apply(position)
            self.speech.show(position)

            self.state.mark_visited()
            self._save()

    def advance_if_visited(self) -> bool:
        """Move forward and show, only if the next position was seen before."""
        with self._lock:
            if not self.state.advance_if_visited():
                return False
            self.show(advance=False)
            return True

    def retreat(self) -> bool:
        """Move back one position and show it."""
        with self._lock:
            if not self.state.retreat():
                return False
            self.show(advance=False)
            return True

    def _save(self) -> None:
        if self.history is None:
            return
        try:
            self.history.save(self.state)
        except OSError as e:
            logger.warning(f"Could not save history to {self.history.path}: {e}")
