"""Domain services for slot allocation.

This package provides:
- RoomRegistry: Static room catalog
- SlotStore: Copy-on-write owner of every room's slot array
- PendingQueue: Items of the active consignment still awaiting a slot
- AllocationEngine: Fill-order slot selection and atomic commit
- CapacityAdvisor: Read-only cross-room capacity advice
- RemovalService: Freeing slots and clearing rooms
- HistoryManager: Bounded snapshot-based undo
- SearchIndex: Substring search over occupied slots
"""

from .allocation import DEFAULT_PLACEHOLDER_LABEL, AllocationEngine
from .capacity import CapacityAdvisor
from .fill import (
    FillStrategyFactory,
    HorizontalFillStrategy,
    VerticalFillStrategy,
)
from .history import DEFAULT_HISTORY_DEPTH, HistoryManager
from .pending import PendingQueue, total_quantity
from .registry import RoomRegistry
from .removal import RemovalService
from .search import SearchIndex
from .slot_store import SlotStore, count_empty, count_occupied, first_empty

__all__ = [
    "AllocationEngine",
    "CapacityAdvisor",
    "DEFAULT_HISTORY_DEPTH",
    "DEFAULT_PLACEHOLDER_LABEL",
    "FillStrategyFactory",
    "HistoryManager",
    "HorizontalFillStrategy",
    "PendingQueue",
    "RemovalService",
    "RoomRegistry",
    "SearchIndex",
    "SlotStore",
    "VerticalFillStrategy",
    "count_empty",
    "count_occupied",
    "first_empty",
    "total_quantity",
]
