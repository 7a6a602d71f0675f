"""Capacity advice and allocation endpoints."""

from fastapi import APIRouter, HTTPException

from storerooms.web.dependencies import SessionDep
from storerooms.web.schemas.requests import AdviceRequest, AllocationRequest
from storerooms.web.schemas.responses import AdviceSchema, AllocationSchema

router = APIRouter(tags=["allocations"])


@router.post("/advice", response_model=AdviceSchema)
async def advise(request: AdviceRequest, session: SessionDep) -> AdviceSchema:
    """Suggest where a pending item fits without changing anything."""
    if request.room_id is not None:
        session.select_room(request.room_id)
    try:
        advice = session.assist(request.item_id)
    except KeyError as e:
        raise HTTPException(
            status_code=404,
            detail={"error": f"Unknown pending item: {request.item_id}",
                    "error_type": "unknown_item"},
        ) from e
    return AdviceSchema.from_domain(advice)


@router.post("/allocations", response_model=AllocationSchema)
async def allocate(request: AllocationRequest, session: SessionDep) -> AllocationSchema:
    """Allocate pending items into the current room from a target slot.

    A shortfall is answered with 409 and the needed/available numbers; the
    room is left untouched.
    """
    if request.room_id is not None:
        session.select_room(request.room_id)
    result = session.request_allocation(
        request.target_slot_id, item_ids=request.item_ids, mode=request.mode
    )
    return AllocationSchema.from_domain(result)
