"""Flat-file persistence of the position state.

The history file is plain newline-delimited text::

    <current position>
    True|False      # visited flag for position 0
    True|False      # visited flag for position 1
    ...

Loading is forgiving: a line that fails to parse leaves the matching field
at its pre-load value and is reported as a warning.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from ..config import config
from ..models.manifest import Manifest
from .state import PositionState

logger = logging.getLogger(__name__)

HISTORY_SUFFIX = ".txt"


def format_history(state: PositionState) -> str:
    """Render a state as history file text."""
    lines = [str(state.current_index)]
    lines.extend(str(flag) for flag in state.visited)
    return "".join(f"{line}\n" for line in lines)


def parse_bool(text: str) -> bool:
    """Parse a ``True``/``False`` literal, ignoring case and surrounding blanks."""
    value = text.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"Not a boolean literal: {text!r}")


class HistoryStore:
    """Reads and writes a :class:`PositionState` at ``<directory>/<file_name>.txt``.

    Args:
        directory: Directory holding the history file; created on first save.
        file_name: File name without the ``.txt`` suffix.
    """

    def __init__(self, directory: Union[str, Path], file_name: str) -> None:
        self.directory = Path(directory)
        self.file_name = file_name

    @classmethod
    def for_manifest(
        cls, manifest: Manifest, data_dir: Optional[Union[str, Path]] = None
    ) -> "HistoryStore":
        """History store at the manifest's configured path under ``data_dir``.

        ``data_dir`` defaults to ``config.data_dir``.
        """
        base = Path(data_dir) if data_dir is not None else config.data_dir
        return cls(base / manifest.history.path, manifest.history.file_name)

    @property
    def path(self) -> Path:
        return self.directory / f"{self.file_name}{HISTORY_SUFFIX}"

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, state: PositionState) -> None:
        """Overwrite the history file with ``state``.

        The text goes to a temporary file in the same directory which then
        replaces the target, so a crash never leaves a torn file behind.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        tmp_path: Optional[Path] = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.directory,
                prefix=f".{self.file_name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_path = Path(handle.name)
                handle.write(format_history(state))
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise
        logger.debug(f"Saved history to {self.path}")

    def load(self, state: PositionState) -> bool:
        """Read the history file into ``state``.

        Returns:
            False if there is no history file and ``state`` was left untouched.
        """
        if not self.exists():
            logger.debug(f"No history at {self.path}, keeping defaults")
            return False

        # Undecodable bytes become U+FFFD and fail to parse like any other
        # corrupt line; only "\n" separates lines so one bad line never shifts
        # the ones after it.
        try:
            with open(self.path, "r", encoding="utf-8", errors="replace", newline="") as f:
                text = f.read()
        except OSError as e:
            logger.warning(f"Could not read history at {self.path}, keeping defaults: {e}")
            return False
        lines = text.split("\n")

        position = state.current_index
        try:
            parsed = int(lines[0])
        except (IndexError, ValueError):
            logger.warning(
                f"Could not parse the saved position in {self.path}; "
                "the file may be corrupt"
            )
        else:
            if 0 <= parsed < len(state):
                position = parsed
            else:
                logger.warning(
                    f"Saved position {parsed} in {self.path} is outside "
                    f"0..{len(state) - 1}; ignoring it"
                )

        visited: List[bool] = state.visited
        for i in range(len(state)):
            line_number = i + 1
            try:
                visited[i] = parse_bool(lines[line_number])
            except (IndexError, ValueError):
                logger.warning(
                    f"Could not parse the visited value at line {line_number} "
                    f"for position {i} in {self.path}; the file may be corrupt"
                )

        state.restore(position, visited)
        return True

    def clear(self) -> bool:
        """Delete the history file; returns False if there was none."""
        if not self.exists():
            return False
        self.path.unlink()
        return True
