"""Dialogue track and the text area it is shown in."""

import logging
from typing import Optional, Sequence, Tuple

from ..config import config
from ..errors import ConfigurationError
from ..models.scene import DialogueLine
from ..stage.surfaces import TextSurface

logger = logging.getLogger(__name__)


class DialogueTrack:
    """Immutable (speaker, line) pair per scene position.

    Args:
        lines: Dialogue in scene order.
        out_of_bounds_message: Line returned for positions past the end.
    """

    def __init__(
        self,
        lines: Sequence[DialogueLine],
        out_of_bounds_message: Optional[str] = None,
    ) -> None:
        self._lines: Tuple[DialogueLine, ...] = tuple(lines)
        self._out_of_bounds_message = (
            out_of_bounds_message
            if out_of_bounds_message is not None
            else config.out_of_bounds_message
        )

    def __len__(self) -> int:
        return len(self._lines)

    def at(self, position: int, current_speaker: str = "") -> Tuple[str, str]:
        """Return the (speaker, line) pair shown at ``position``.

        Out-of-range positions do not raise: the current speaker is kept and
        the line is replaced by a placeholder error message.
        """
        if not 0 <= position < len(self._lines):
            logger.warning(
                f"Dialogue requested at position {position}, "
                f"outside a track of {len(self._lines)} lines"
            )
            return current_speaker, self._out_of_bounds_message

        entry = self._lines[position]
        if not entry.speaker:
            logger.warning(f"No speaker text at scene position {position}")
        if not entry.line:
            logger.warning(f"No speech text at scene position {position}")
        return entry.speaker, entry.line


class SpeechArea:
    """Speaker and speech surfaces plus the dialogue they display.

    This is the one mandatory part of a scene: without it there is nowhere
    to show text, so :meth:`initialize` fails hard.
    """

    def __init__(
        self,
        track: DialogueTrack,
        speaker: Optional[TextSurface],
        speech: Optional[TextSurface],
    ) -> None:
        self.track = track
        self.speaker = speaker
        self.speech = speech

    def __len__(self) -> int:
        return len(self.track)

    def initialize(self) -> None:
        if self.speaker is None or self.speech is None:
            raise ConfigurationError("Speech area needs both a speaker and a speech surface")
        if len(self.track) == 0:
            raise ConfigurationError("Dialogue track is empty")

    def show(self, position: int) -> bool:
        """Write the dialogue for ``position``; returns True if any text changed."""
        speaker, line = self.track.at(position, self.speaker.text)
        changed = False
        if speaker != self.speaker.text:
            self.speaker.set_text(speaker)
            changed = True
        if line != self.speech.text:
            self.speech.set_text(line)
            changed = True
        return changed
