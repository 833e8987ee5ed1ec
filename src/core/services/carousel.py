"""Index tracker for the horizontally scrolling trip card list."""

from enum import Enum
from typing import Callable, Sequence

from core.models.trip import Trip

CARD_GAP = 20


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class TripCarousel:
    def __init__(
        self,
        trips: Sequence[Trip],
        card_width: int,
        gap: int = CARD_GAP,
        on_select: Callable[[Trip], None] | None = None,
    ) -> None:
        self._trips = tuple(trips)
        self._step = card_width + gap
        self._on_select = on_select
        self.index: int | None = 0 if self._trips else None

    @property
    def has_previous(self) -> bool:
        return self.index is not None and self.index > 0

    @property
    def has_next(self) -> bool:
        return self.index is not None and self.index < len(self._trips) - 1

    @property
    def selected_trip(self) -> Trip | None:
        return None if self.index is None else self._trips[self.index]

    def advance(self, direction: Direction) -> int:
        """Move one card and return the signed scroll offset, 0 at either end."""
        if self.index is None:
            return 0

        step = 1 if direction is Direction.FORWARD else -1
        new_index = min(max(self.index + step, 0), len(self._trips) - 1)
        moved = new_index != self.index
        self.index = new_index

        if self._on_select is not None:
            self._on_select(self._trips[new_index])
        return step * self._step if moved else 0
