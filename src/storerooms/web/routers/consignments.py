"""Active consignment and pending item endpoints."""

from fastapi import APIRouter, HTTPException, Query

from storerooms.application import WarehouseSession
from storerooms.domain.value_objects import PendingSortKey
from storerooms.domain.services import total_quantity
from storerooms.web.dependencies import SessionDep
from storerooms.web.schemas.requests import LoadConsignmentRequest, SelectionRequest
from storerooms.web.schemas.responses import PendingItemSchema, PendingListSchema

router = APIRouter(tags=["consignments"])


def _pending_list(session: WarehouseSession, items) -> PendingListSchema:
    return PendingListSchema(
        reference=session.pending.source_reference,
        items=[PendingItemSchema.from_domain(item) for item in items],
        total_quantity=total_quantity(items),
        selected_item_ids=sorted(session.selected_item_ids),
    )


@router.post("/consignments", response_model=PendingListSchema)
async def load_consignment(
    request: LoadConsignmentRequest,
    session: SessionDep,
) -> PendingListSchema:
    """Make a consignment active and list its pending items.

    Raises:
        HTTPException: If no items were given and no item source is configured.
    """
    items = [r.to_domain() for r in request.items] if request.items is not None else None
    try:
        loaded = session.load_consignment(request.reference, items)
    except RuntimeError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": str(e), "error_type": "no_item_source"},
        ) from e
    return _pending_list(session, loaded)


@router.get("/pending", response_model=PendingListSchema)
async def list_pending(
    session: SessionDep,
    q: str = Query(default="", description="Filter on contents, packing or prefix"),
    sort_by: PendingSortKey = Query(default=PendingSortKey.DEFAULT),
    descending: bool = Query(default=True),
) -> PendingListSchema:
    return _pending_list(session, session.pending_items(q, sort_by, descending))


@router.put("/pending/selection", response_model=PendingListSchema)
async def set_selection(
    request: SelectionRequest,
    session: SessionDep,
) -> PendingListSchema:
    """Replace the set of items ticked for the next allocation."""
    known = {item.id for item in session.pending.items}
    unknown = sorted(set(request.item_ids) - known)
    if unknown:
        raise HTTPException(
            status_code=404,
            detail={"error": f"Unknown pending items: {', '.join(unknown)}",
                    "error_type": "unknown_item"},
        )
    session.selected_item_ids = set(request.item_ids)
    session.suggested_slot_id = None
    return _pending_list(session, session.pending.items)
