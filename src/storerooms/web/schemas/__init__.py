"""Request and response schemas for the REST API."""

from storerooms.web.schemas.requests import (
    AdviceRequest,
    AllocationRequest,
    LoadConsignmentRequest,
    RemovalRequest,
    SelectionRequest,
)
from storerooms.web.schemas.responses import (
    AdviceSchema,
    AllocationSchema,
    HistoryEntrySchema,
    PendingItemSchema,
    PendingListSchema,
    RemovalSchema,
    RoomSchema,
    SearchResultSchema,
    SlotSchema,
    UndoSchema,
)

__all__ = [
    "AdviceRequest",
    "AdviceSchema",
    "AllocationRequest",
    "AllocationSchema",
    "HistoryEntrySchema",
    "LoadConsignmentRequest",
    "PendingItemSchema",
    "PendingListSchema",
    "RemovalRequest",
    "RemovalSchema",
    "RoomSchema",
    "SearchResultSchema",
    "SelectionRequest",
    "SlotSchema",
    "UndoSchema",
]
