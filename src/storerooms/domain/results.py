"""Result values returned by warehouse operations.

Each result carries an operator-facing ``message`` with the concrete numbers
involved. Presentation layers decide how to show it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import AdviceKind, FillMode, OperationKind


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


@dataclass(frozen=True)
class AllocationResult:
    """Outcome of a committed allocation.

    Attributes:
        room_id: Room whose slots were filled.
        allocated: Number of slots that moved from empty to occupied.
        slot_ids: Filled slot ids in fill order.
        item_ids: Pending items consumed by the allocation.
        mode: Fill mode used to choose the slots.
    """

    room_id: str
    allocated: int
    slot_ids: tuple[str, ...] = ()
    item_ids: tuple[str, ...] = ()
    mode: FillMode = FillMode.HORIZONTAL

    @property
    def noop(self) -> bool:
        return self.allocated == 0

    @property
    def message(self) -> str:
        if self.noop:
            return "Nothing to allocate"
        return f"Successfully allocated {_plural(self.allocated, 'slot')}"


@dataclass(frozen=True)
class CapacityAdvice:
    """Read-only recommendation for where a quantity could be stored.

    Attributes:
        kind: Which branch of the check produced the advice.
        needed: Quantity the advice was computed for.
        room_id: Recommended room (current or alternate); None when insufficient.
        room_name: Display name of the recommended room.
        available: Empty slots in the recommended room, or in the current room
            when nothing fits.
        suggested_slot_id: First empty slot of the current room (current room only).
        total_available: Empty slots summed across every room (insufficient only).
        current_available: Empty slots in the current room, for every branch.
    """

    kind: AdviceKind
    needed: int
    room_id: str | None = None
    room_name: str | None = None
    available: int = 0
    suggested_slot_id: str | None = None
    total_available: int | None = None
    current_available: int = 0

    @property
    def fits(self) -> bool:
        return self.kind is not AdviceKind.INSUFFICIENT

    @property
    def message(self) -> str:
        if self.kind is AdviceKind.CURRENT_ROOM:
            return (
                f"Found space! {self.available} slots available. "
                f"Suggested start: {self.suggested_slot_id}"
            )
        if self.kind is AdviceKind.ALTERNATE_ROOM:
            return (
                f"Current room has only {self.current_available} slots. "
                f'"{self.room_name}" has {self.available} available!'
            )
        return (
            f"Not enough space! Need {self.needed} slots. "
            f"Total available across all rooms: {self.total_available}"
        )


@dataclass(frozen=True)
class RemovalResult:
    """Outcome of a removal or room clear.

    Attributes:
        room_id: Room that was (or would have been) modified.
        removed: Number of slots freed.
        slot_ids: Ids of the freed slots.
        room_name: Display name, set for whole-room clears.
    """

    room_id: str
    removed: int
    slot_ids: tuple[str, ...] = ()
    room_name: str | None = None

    @property
    def noop(self) -> bool:
        return self.removed == 0

    @property
    def message(self) -> str:
        if self.room_name is not None:
            if self.noop:
                return "Room is already empty"
            return f"Cleared all {_plural(self.removed, 'item')} from {self.room_name}"
        if self.noop:
            return "No occupied slots to remove"
        if self.removed == 1 and len(self.slot_ids) == 1:
            return f"Removed item from slot {self.slot_ids[0]}"
        return f"Removed {_plural(self.removed, 'item')} from warehouse"


@dataclass(frozen=True)
class UndoResult:
    """Outcome of an undo request.

    Attributes:
        undone: False when the history was empty.
        room_id: Room whose slot array was restored.
        kind: Kind of the reversed operation.
        description: Description of the reversed operation.
    """

    undone: bool
    room_id: str | None = None
    kind: OperationKind | None = None
    description: str = field(default="")

    @property
    def message(self) -> str:
        if not self.undone:
            return "Nothing to undo"
        return f"Undo: {self.description or 'Action reversed'}"
