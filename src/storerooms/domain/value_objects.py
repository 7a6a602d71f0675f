"""Value objects for the warehouse domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SlotStatus(str, Enum):
    """Occupancy state of a storage slot.

    Attributes:
        EMPTY: Slot holds nothing and carries no occupant data.
        OCCUPIED: Slot holds one unit of a pending item.
    """

    EMPTY = "empty"
    OCCUPIED = "occupied"


class FillMode(str, Enum):
    """Directional strategy used to pick the next empty slots.

    Attributes:
        HORIZONTAL: Row by row, following the row-major slot array.
        VERTICAL: Column by column, top to bottom.
    """

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class OperationKind(str, Enum):
    """Kinds of mutation recorded in the undo history."""

    ALLOCATION = "allocation"
    REMOVAL = "removal"


class AdviceKind(str, Enum):
    """Outcome categories of a capacity check.

    Attributes:
        CURRENT_ROOM: The current room can hold the quantity.
        ALTERNATE_ROOM: Another room can hold it; the caller decides whether to switch.
        INSUFFICIENT: No single room can hold it.
    """

    CURRENT_ROOM = "current_room"
    ALTERNATE_ROOM = "alternate_room"
    INSUFFICIENT = "insufficient"


class PendingSortKey(str, Enum):
    """Orderings offered for the pending items list."""

    DEFAULT = "default"
    QUANTITY = "quantity"
    WEIGHT = "weight"


@dataclass(frozen=True)
class GridPosition:
    """1-based row/column coordinate within a room grid."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if self.row < 1 or self.column < 1:
            raise ValueError(
                f"Grid positions are 1-based, got row={self.row} column={self.column}"
            )


@dataclass(frozen=True)
class RoomStats:
    """Capacity summary for a single room.

    Attributes:
        room_id: Room the figures belong to.
        total: Room capacity (rows x columns).
        occupied: Number of occupied slots.
        free: Number of empty slots.
        percent_free: Free share of capacity, rounded to a whole percent.
    """

    room_id: str
    total: int
    occupied: int
    free: int

    @property
    def percent_free(self) -> int:
        if self.total == 0:
            return 0
        return round(self.free / self.total * 100)
