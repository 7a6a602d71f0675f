"""Slot detail and removal endpoints."""

from fastapi import APIRouter

from storerooms.web.dependencies import SessionDep
from storerooms.web.schemas.requests import RemovalRequest
from storerooms.web.schemas.responses import RemovalSchema, SlotSchema

router = APIRouter(tags=["slots"])


@router.get("/slots/{slot_id}", response_model=SlotSchema)
async def get_slot(slot_id: str, session: SessionDep) -> SlotSchema:
    return SlotSchema.from_domain(session.slot_detail(slot_id))


@router.delete("/slots/{slot_id}", response_model=RemovalSchema)
async def remove_slot(slot_id: str, session: SessionDep) -> RemovalSchema:
    """Free one slot; an empty slot is reported as a no-op."""
    return RemovalSchema.from_domain(session.remove_slot(slot_id))


@router.post("/removals", response_model=RemovalSchema)
async def remove_slots(request: RemovalRequest, session: SessionDep) -> RemovalSchema:
    """Free several slots of one room under a single undo step."""
    return RemovalSchema.from_domain(session.remove_slots(request.slot_ids))
