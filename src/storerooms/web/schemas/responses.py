"""Pydantic response schemas for the REST API."""

from datetime import datetime

from pydantic import BaseModel, Field

from storerooms.domain import (
    AllocationResult,
    CapacityAdvice,
    PendingItem,
    RemovalResult,
    Room,
    RoomStats,
    Slot,
    UndoResult,
)
from storerooms.domain.entities import HistoryEntry


class RoomSchema(BaseModel):
    """Room with its capacity figures."""

    id: str
    name: str
    short_code: str
    rows: int
    columns: int
    capacity: int
    free: int = Field(..., description="Empty slots")
    occupied: int = Field(..., description="Occupied slots")
    percent_free: int = Field(..., description="Free share of capacity, %")

    @classmethod
    def from_domain(cls, room: Room, stats: RoomStats) -> "RoomSchema":
        return cls(
            id=room.id,
            name=room.name,
            short_code=room.short_code,
            rows=room.rows,
            columns=room.columns,
            capacity=room.capacity,
            free=stats.free,
            occupied=stats.occupied,
            percent_free=stats.percent_free,
        )


class SlotSchema(BaseModel):
    """A slot and, when occupied, what it holds."""

    id: str
    room_id: str
    row: int
    column: int
    status: str
    content_id: str | None = None
    display_label: str | None = None
    source_reference: str | None = None
    contents: str | None = None
    packing: str | None = None
    allocated_at: datetime | None = None

    @classmethod
    def from_domain(cls, slot: Slot) -> "SlotSchema":
        occupant = slot.occupant
        return cls(
            id=slot.id,
            room_id=slot.room_id,
            row=slot.row,
            column=slot.column,
            status=slot.status.value,
            content_id=occupant.content_id if occupant else None,
            display_label=occupant.display_label if occupant else None,
            source_reference=occupant.source_reference if occupant else None,
            contents=occupant.contents if occupant else None,
            packing=occupant.packing if occupant else None,
            allocated_at=occupant.allocated_at if occupant else None,
        )


class PendingItemSchema(BaseModel):
    """Pending item awaiting storage."""

    id: str
    qty: int
    contents: str
    packing: str
    prefix: str
    weight: float

    @classmethod
    def from_domain(cls, item: PendingItem) -> "PendingItemSchema":
        return cls(
            id=item.id,
            qty=item.quantity,
            contents=item.contents,
            packing=item.packing,
            prefix=item.prefix,
            weight=item.weight,
        )


class PendingListSchema(BaseModel):
    """Active consignment and its pending items."""

    reference: str
    items: list[PendingItemSchema]
    total_quantity: int
    selected_item_ids: list[str] = Field(default_factory=list)


class AdviceSchema(BaseModel):
    """Capacity advice."""

    kind: str
    message: str
    needed: int
    room_id: str | None = None
    room_name: str | None = None
    available: int
    suggested_slot_id: str | None = None
    total_available: int | None = None

    @classmethod
    def from_domain(cls, advice: CapacityAdvice) -> "AdviceSchema":
        return cls(
            kind=advice.kind.value,
            message=advice.message,
            needed=advice.needed,
            room_id=advice.room_id,
            room_name=advice.room_name,
            available=advice.available,
            suggested_slot_id=advice.suggested_slot_id,
            total_available=advice.total_available,
        )


class AllocationSchema(BaseModel):
    """Result of an allocation request."""

    room_id: str
    allocated: int
    slot_ids: list[str]
    item_ids: list[str]
    mode: str
    message: str

    @classmethod
    def from_domain(cls, result: AllocationResult) -> "AllocationSchema":
        return cls(
            room_id=result.room_id,
            allocated=result.allocated,
            slot_ids=list(result.slot_ids),
            item_ids=list(result.item_ids),
            mode=result.mode.value,
            message=result.message,
        )


class RemovalSchema(BaseModel):
    """Result of a removal or room clear."""

    room_id: str
    removed: int
    slot_ids: list[str]
    noop: bool
    message: str

    @classmethod
    def from_domain(cls, result: RemovalResult) -> "RemovalSchema":
        return cls(
            room_id=result.room_id,
            removed=result.removed,
            slot_ids=list(result.slot_ids),
            noop=result.noop,
            message=result.message,
        )


class UndoSchema(BaseModel):
    """Result of an undo request."""

    undone: bool
    room_id: str | None = None
    kind: str | None = None
    message: str

    @classmethod
    def from_domain(cls, result: UndoResult) -> "UndoSchema":
        return cls(
            undone=result.undone,
            room_id=result.room_id,
            kind=result.kind.value if result.kind else None,
            message=result.message,
        )


class HistoryEntrySchema(BaseModel):
    """Summary of one undo history entry (snapshots are not exposed)."""

    kind: str
    room_id: str
    description: str
    timestamp: datetime

    @classmethod
    def from_domain(cls, entry: HistoryEntry) -> "HistoryEntrySchema":
        return cls(
            kind=entry.kind.value,
            room_id=entry.room_id,
            description=entry.description,
            timestamp=entry.timestamp,
        )


class SearchResultSchema(BaseModel):
    """Slot ids matching a search query."""

    room_id: str
    query: str
    slot_ids: list[str]
