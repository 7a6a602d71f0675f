"""Undo history endpoints."""

from fastapi import APIRouter

from storerooms.web.dependencies import SessionDep
from storerooms.web.schemas.responses import HistoryEntrySchema, UndoSchema

router = APIRouter(tags=["history"])


@router.post("/undo", response_model=UndoSchema)
async def undo(session: SessionDep) -> UndoSchema:
    """Reverse the most recent allocation or removal."""
    return UndoSchema.from_domain(session.undo())


@router.get("/history", response_model=list[HistoryEntrySchema])
async def list_history(session: SessionDep) -> list[HistoryEntrySchema]:
    """Undo entries, most recent first."""
    return [
        HistoryEntrySchema.from_domain(entry)
        for entry in reversed(session.history.entries)
    ]
