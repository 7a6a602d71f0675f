"""Pydantic request schemas for the REST API."""

from pydantic import BaseModel, Field

from storerooms.domain.value_objects import FillMode
from storerooms.infrastructure.item_sources import PendingItemRecord


class LoadConsignmentRequest(BaseModel):
    """Request for making a consignment the active one."""

    reference: str = Field(..., min_length=1, description="Consignment (GC) number")
    items: list[PendingItemRecord] | None = Field(
        default=None,
        description="Pending items; fetched from the item source when omitted",
    )


class AdviceRequest(BaseModel):
    """Request for capacity advice on one pending item."""

    item_id: str = Field(..., description="Pending item to place")
    room_id: str | None = Field(default=None, description="Room to check first")


class AllocationRequest(BaseModel):
    """Request for allocating pending items starting at a slot."""

    target_slot_id: str = Field(..., description="Slot the fill starts from")
    item_ids: list[str] | None = Field(
        default=None, description="Items to allocate; the selection when omitted"
    )
    mode: FillMode | None = Field(default=None, description="Fill direction")
    room_id: str | None = Field(
        default=None, description="Room to allocate in; the current room when omitted"
    )


class RemovalRequest(BaseModel):
    """Request for freeing several slots of one room."""

    slot_ids: list[str] = Field(..., min_length=1, description="Slots to free")


class SelectionRequest(BaseModel):
    """Request for replacing the selected pending items."""

    item_ids: list[str] = Field(default_factory=list)
