"""Domain entities for warehouse slot allocation."""

from dataclasses import dataclass, field, replace
from datetime import datetime

from .value_objects import GridPosition, OperationKind, SlotStatus


def slot_id_for(short_code: str, row: int, column: int) -> str:
    """Build the deterministic id of a slot, e.g. ``A-R01-C05``."""
    return f"{short_code}-R{row:02d}-C{column:02d}"


@dataclass(frozen=True)
class Room:
    """A named grid of storage slots.

    Attributes:
        id: Stable room identifier (e.g. ``room-a``).
        name: Display name shown to the operator.
        short_code: Prefix used in slot ids; unique across rooms.
        rows: Number of grid rows.
        columns: Number of grid columns.
    """

    id: str
    name: str
    short_code: str
    rows: int
    columns: int

    def __post_init__(self) -> None:
        if self.rows < 1 or self.columns < 1:
            raise ValueError(
                f"Room {self.id} must have at least one row and column, "
                f"got {self.rows}x{self.columns}"
            )
        if not self.short_code:
            raise ValueError(f"Room {self.id} needs a short code")

    @property
    def capacity(self) -> int:
        """Number of slots in the room."""
        return self.rows * self.columns

    def index_of(self, position: GridPosition) -> int:
        """Row-major array index of a grid position."""
        return (position.row - 1) * self.columns + (position.column - 1)


@dataclass(frozen=True)
class Occupant:
    """Metadata identifying what is stored in an occupied slot.

    Attributes:
        content_id: Id of the pending item this unit came from.
        display_label: Short label shown on the grid (item prefix or placeholder).
        source_reference: Consignment the item belongs to.
        contents: Free-text description of the goods.
        packing: Packing type (bag, box, bundle, ...).
        allocated_at: When the slot was filled.
    """

    content_id: str
    display_label: str
    source_reference: str
    contents: str
    packing: str
    allocated_at: datetime


@dataclass(frozen=True)
class Slot:
    """A single storage position in a room.

    Slots are immutable; occupying or vacating one produces a new instance so
    that slot arrays can be replaced wholesale.
    """

    id: str
    room_id: str
    row: int
    column: int
    status: SlotStatus = SlotStatus.EMPTY
    occupant: Occupant | None = None

    def __post_init__(self) -> None:
        if self.status is SlotStatus.EMPTY and self.occupant is not None:
            raise ValueError(f"Empty slot {self.id} cannot carry occupant data")
        if self.status is SlotStatus.OCCUPIED and self.occupant is None:
            raise ValueError(f"Occupied slot {self.id} is missing its occupant")

    @property
    def is_empty(self) -> bool:
        return self.status is SlotStatus.EMPTY

    @property
    def position(self) -> GridPosition:
        return GridPosition(self.row, self.column)

    def occupy(self, occupant: Occupant) -> "Slot":
        """Return a copy of this slot holding ``occupant``."""
        return replace(self, status=SlotStatus.OCCUPIED, occupant=occupant)

    def vacate(self) -> "Slot":
        """Return a copy of this slot with status and occupant cleared."""
        return replace(self, status=SlotStatus.EMPTY, occupant=None)


@dataclass(frozen=True)
class PendingItem:
    """A unit of cargo awaiting a storage assignment.

    Attributes:
        id: Item identifier within its consignment.
        quantity: Number of slots the item needs.
        contents: Description of the goods.
        packing: Packing type.
        prefix: Label written onto the slots it fills (optional).
        weight: Display-only weight; allocation never reads it.
    """

    id: str
    quantity: int
    contents: str = ""
    packing: str = ""
    prefix: str = ""
    weight: float = 0.0

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError(f"Item {self.id} has negative quantity {self.quantity}")


@dataclass(frozen=True)
class HistoryEntry:
    """Pre-mutation snapshot used to undo one operation.

    Attributes:
        kind: Whether the mutation was an allocation or a removal.
        room_id: The single room the mutation touched.
        slots: The room's full slot array before the mutation.
        pending_items: The pending items list before the mutation.
        timestamp: When the snapshot was taken.
        description: Human-readable summary, e.g. "Allocated 5 slots".
    """

    kind: OperationKind
    room_id: str
    slots: tuple[Slot, ...]
    pending_items: tuple[PendingItem, ...]
    timestamp: datetime
    description: str = field(default="")
