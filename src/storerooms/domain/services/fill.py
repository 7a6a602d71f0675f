"""Fill-order strategies for choosing empty slots.

Both strategies start at a given slot, skip occupied slots, and wrap around
so that every slot of the room is visited at most once.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import chain, islice

from storerooms.contracts.strategies import FillStrategy
from storerooms.domain.entities import Room, Slot
from storerooms.domain.value_objects import FillMode, GridPosition


def _take_empty(slots: Iterable[Slot], quantity: int) -> list[str]:
    if quantity <= 0:
        return []
    empty = (slot.id for slot in slots if slot.is_empty)
    return list(islice(empty, quantity))


class HorizontalFillStrategy:
    """Row-major fill: ``[start..end)`` then ``[0..start)``."""

    def candidates(
        self,
        room: Room,
        slots: Sequence[Slot],
        start_index: int,
        quantity: int,
    ) -> list[str]:
        ordered = chain(
            (slots[i] for i in range(start_index, len(slots))),
            (slots[i] for i in range(start_index)),
        )
        return _take_empty(ordered, quantity)


class VerticalFillStrategy:
    """Column-major fill with the starting column handled specially.

    Order of visit:
    1. the starting column, from the starting row down to the last row;
    2. the rows above the starting row in that same column;
    3. every following column, top to bottom;
    4. the columns before the starting column, top to bottom.
    """

    def candidates(
        self,
        room: Room,
        slots: Sequence[Slot],
        start_index: int,
        quantity: int,
    ) -> list[str]:
        start = slots[start_index]
        ordered = (
            slots[room.index_of(GridPosition(row, column))]
            for row, column in self.visit_order(room, start.row, start.column)
        )
        return _take_empty(ordered, quantity)

    @staticmethod
    def visit_order(
        room: Room, start_row: int, start_column: int
    ) -> Iterator[tuple[int, int]]:
        """Yield ``(row, column)`` positions in vertical fill order."""
        all_rows = range(1, room.rows + 1)
        for row in range(start_row, room.rows + 1):
            yield row, start_column
        for row in range(1, start_row):
            yield row, start_column
        for column in range(start_column + 1, room.columns + 1):
            for row in all_rows:
                yield row, column
        for column in range(1, start_column):
            for row in all_rows:
                yield row, column


class FillStrategyFactory:
    """Maps a ``FillMode`` to its strategy instance.

    Example:
        ```python
        factory = FillStrategyFactory()
        strategy = factory.create(FillMode.VERTICAL)
        ids = strategy.candidates(room, slots, start_index=4, quantity=8)
        ```
    """

    def __init__(self, overrides: dict[FillMode, FillStrategy] | None = None) -> None:
        self._strategies: dict[FillMode, FillStrategy] = {
            FillMode.HORIZONTAL: HorizontalFillStrategy(),
            FillMode.VERTICAL: VerticalFillStrategy(),
        }
        if overrides:
            self._strategies.update(overrides)

    def create(self, mode: FillMode | str) -> FillStrategy:
        try:
            return self._strategies[FillMode(mode)]
        except (KeyError, ValueError):
            available = ", ".join(m.value for m in self._strategies)
            raise ValueError(
                f"Unknown fill mode: {mode!r}. Available: {available}"
            ) from None
