"""Room, slot grid and search endpoints."""

from fastapi import APIRouter, Query

from storerooms.web.dependencies import SessionDep
from storerooms.web.schemas.responses import (
    RemovalSchema,
    RoomSchema,
    SearchResultSchema,
    SlotSchema,
)

router = APIRouter(prefix="/rooms", tags=["rooms"])


@router.get("", response_model=list[RoomSchema])
async def list_rooms(session: SessionDep) -> list[RoomSchema]:
    """List every room with its free and occupied counts."""
    return [
        RoomSchema.from_domain(room, session.stats(room.id))
        for room in session.registry
    ]


@router.get("/{room_id}", response_model=RoomSchema)
async def get_room(room_id: str, session: SessionDep) -> RoomSchema:
    room = session.registry.get(room_id)
    return RoomSchema.from_domain(room, session.stats(room_id))


@router.post("/{room_id}/select", response_model=RoomSchema)
async def select_room(room_id: str, session: SessionDep) -> RoomSchema:
    """Make ``room_id`` the operator's current room."""
    session.select_room(room_id)
    return RoomSchema.from_domain(session.registry.get(room_id), session.stats(room_id))


@router.get("/{room_id}/slots", response_model=list[SlotSchema])
async def list_slots(room_id: str, session: SessionDep) -> list[SlotSchema]:
    """All slots of a room in row-major order."""
    return [SlotSchema.from_domain(slot) for slot in session.slots(room_id)]


@router.get("/{room_id}/search", response_model=SearchResultSchema)
async def search_room(
    room_id: str,
    session: SessionDep,
    q: str = Query(default="", description="Substring to look for"),
) -> SearchResultSchema:
    """Occupied slots whose id, GC number, label or contents contain ``q``."""
    matches = session.search(q, room_id)
    return SearchResultSchema(room_id=room_id, query=q, slot_ids=sorted(matches))


@router.post("/{room_id}/clear", response_model=RemovalSchema)
async def clear_room(room_id: str, session: SessionDep) -> RemovalSchema:
    """Free every occupied slot of a room."""
    return RemovalSchema.from_domain(session.clear_room(room_id))
