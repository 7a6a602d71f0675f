"""Strategy protocol for directional slot filling.

A fill strategy decides the order in which empty slots of a room are handed
out, starting from a given slot. Strategies are read-only: they never change
the slot array they scan.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from storerooms.domain.entities import Room, Slot


@runtime_checkable
class FillStrategy(Protocol):
    """Protocol for fill-order strategies.

    Implementations:
    - HorizontalFillStrategy: row-major scan with wraparound
    - VerticalFillStrategy: column-major scan with wraparound

    Example:
        ```python
        class DiagonalFillStrategy:
            def candidates(self, room, slots, start_index, quantity):
                ...
        ```
    """

    def candidates(
        self,
        room: "Room",
        slots: Sequence["Slot"],
        start_index: int,
        quantity: int,
    ) -> list[str]:
        """Return up to ``quantity`` empty slot ids in fill order.

        Args:
            room: Room whose grid is scanned.
            slots: The room's row-major slot array.
            start_index: Array index of the starting slot.
            quantity: Number of slots wanted.

        Returns:
            Empty slot ids, at most ``quantity`` of them, in the order they
            should be filled.
        """
        ...
