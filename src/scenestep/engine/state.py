"""Current scene position and which positions have been seen."""

from typing import List, Optional, Sequence

from ..errors import ConfigurationError


class PositionState:
    """Position index plus a visited flag per position.

    Transitions move by exactly one position and are no-ops at the
    boundaries. A visited flag, once set, is never cleared by a transition;
    only :meth:`restore` (used when loading history) may overwrite it.

    Args:
        length: Number of scene positions.
        start: Position shown on first run.
        visited: Optional initial visited flags, padded or cut to ``length``.
    """

    def __init__(
        self,
        length: int,
        start: int = 0,
        visited: Optional[Sequence[bool]] = None,
    ) -> None:
        if length < 1:
            raise ConfigurationError("A scene needs at least one position")
        if not 0 <= start < length:
            raise ConfigurationError(
                f"Start position {start} is outside 0..{length - 1}"
            )
        self._current = start
        self._shown = False
        self._visited: List[bool] = [False] * length
        for i, flag in enumerate(list(visited or [])[:length]):
            self._visited[i] = bool(flag)

    def __len__(self) -> int:
        return len(self._visited)

    @property
    def current_index(self) -> int:
        return self._current

    @current_index.setter
    def current_index(self, value: int) -> None:
        if not 0 <= value < len(self._visited):
            raise IndexError(f"Position {value} is outside 0..{len(self._visited) - 1}")
        self._current = value

    @property
    def visited(self) -> List[bool]:
        """Snapshot of the visited flags."""
        return list(self._visited)

    def is_visited(self, position: int) -> bool:
        return self._visited[position]

    @property
    def current_is_visited(self) -> bool:
        return self._visited[self._current]

    def advance_to_next(self) -> bool:
        """Move forward one position regardless of visited state."""
        if self._current + 1 < len(self._visited):
            self._current += 1
            return True
        return False

    def advance_if_visited(self) -> bool:
        """Move forward one position only if it has been shown before."""
        following = self._current + 1
        if following < len(self._visited) and self._visited[following]:
            self._current = following
            return True
        return False

    def retreat(self) -> bool:
        """Move back one position."""
        if self._current - 1 >= 0:
            self._current -= 1
            return True
        return False

    def mark_visited(self) -> None:
        self._visited[self._current] = True
        self._shown = True

    def restore(self, position: int, visited: Sequence[bool]) -> None:
        """Replace the whole state, as read back from history.

        Only valid before the first position is shown; afterwards it could
        clear visited flags.

        Raises:
            RuntimeError: If a position has already been marked visited.
        """
        if self._shown:
            raise RuntimeError("History can only be restored before the first show")
        self.current_index = position
        for i, flag in enumerate(list(visited)[:len(self._visited)]):
            self._visited[i] = bool(flag)
