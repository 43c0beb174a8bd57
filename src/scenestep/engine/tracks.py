"""Sparse, position-indexed override tracks.

Every visual attribute that changes with the scene position (sprite,
texture, color) is configured as a sparse list of slots. Most slots are left
undefined; the value shown at a position is the one in the nearest defined
slot at or before it. What counts as "defined" differs per attribute, so a
track is parameterized by a predicate and a value extractor instead of
repeating the backward scan for each kind.
"""

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from ..models.color import Color
from ..models.scene import BackgroundSlot

SlotT = TypeVar("SlotT")
ValueT = TypeVar("ValueT")


@dataclass(frozen=True)
class Resolution(Generic[ValueT]):
    """Outcome of resolving a track at a position.

    Attributes:
        value: Value to display. May be None for an explicitly blank texture.
        apply: False when no slot was defined and ``value`` is just the
            fallback handed in by the caller.
    """

    value: Optional[ValueT]
    apply: bool


class OverrideTrack(Generic[SlotT, ValueT]):
    """Fixed-length sparse array with nearest-backward resolution.

    Args:
        slots: One slot per scene position.
        is_defined: Whether a slot terminates the backward scan.
        value_of: Value to return for a slot that terminated the scan.
    """

    def __init__(
        self,
        slots: Sequence[SlotT],
        is_defined: Callable[[SlotT], bool],
        value_of: Callable[[SlotT], Optional[ValueT]],
    ) -> None:
        self._slots: List[SlotT] = list(slots)
        self._is_defined = is_defined
        self._value_of = value_of

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> SlotT:
        return self._slots[index]

    def __setitem__(self, index: int, slot: SlotT) -> None:
        self._slots[index] = slot

    def is_in_use(self) -> bool:
        """A track with no slots is inert."""
        return len(self._slots) > 0

    def resolve(self, position: int, fallback: Optional[ValueT]) -> Resolution[ValueT]:
        """Return the value in the nearest defined slot at or before ``position``.

        Positions past the end are clamped to the last slot and negative ones
        to the first. When nothing is defined down to slot 0 the fallback is
        returned with ``apply=False``.
        """
        if not self._slots:
            return Resolution(fallback, False)

        index = min(max(position, 0), len(self._slots) - 1)
        for i in range(index, -1, -1):
            slot = self._slots[i]
            if self._is_defined(slot):
                return Resolution(self._value_of(slot), True)
        return Resolution(fallback, False)


def sprite_track(expressions: Sequence[Optional[str]]) -> OverrideTrack[Optional[str], str]:
    """Track where any non-null sprite is defined."""
    return OverrideTrack(
        expressions,
        is_defined=lambda sprite: sprite is not None,
        value_of=lambda sprite: sprite,
    )


def texture_track(slots: Sequence[BackgroundSlot]) -> OverrideTrack[BackgroundSlot, str]:
    """Track where a texture or an explicit suppress flag is defined.

    A suppressed slot resolves to None with ``apply=True``: show nothing.
    """
    return OverrideTrack(
        slots,
        is_defined=lambda slot: slot.suppress or slot.texture is not None,
        value_of=lambda slot: None if slot.suppress else slot.texture,
    )


def color_track(slots: Sequence[BackgroundSlot]) -> OverrideTrack[BackgroundSlot, Color]:
    """Track where only slots flagged with ``use_color`` are defined."""
    return OverrideTrack(
        slots,
        is_defined=lambda slot: slot.uses_color,
        value_of=lambda slot: slot.color,
    )
