"""Domain layer - slot allocation logic."""

from .entities import HistoryEntry, Occupant, PendingItem, Room, Slot, slot_id_for
from .errors import CapacityError, ConfigError, WarehouseError
from .results import AllocationResult, CapacityAdvice, RemovalResult, UndoResult
from .services import (
    AllocationEngine,
    CapacityAdvisor,
    HistoryManager,
    PendingQueue,
    RemovalService,
    RoomRegistry,
    SearchIndex,
    SlotStore,
    count_empty,
    count_occupied,
    first_empty,
)
from .value_objects import (
    AdviceKind,
    FillMode,
    GridPosition,
    OperationKind,
    PendingSortKey,
    RoomStats,
    SlotStatus,
)

__all__ = [
    "AdviceKind",
    "AllocationEngine",
    "AllocationResult",
    "CapacityAdvice",
    "CapacityAdvisor",
    "CapacityError",
    "ConfigError",
    "FillMode",
    "GridPosition",
    "HistoryEntry",
    "HistoryManager",
    "Occupant",
    "OperationKind",
    "PendingItem",
    "PendingQueue",
    "PendingSortKey",
    "RemovalResult",
    "RemovalService",
    "Room",
    "RoomRegistry",
    "RoomStats",
    "SearchIndex",
    "Slot",
    "SlotStatus",
    "SlotStore",
    "UndoResult",
    "WarehouseError",
    "count_empty",
    "count_occupied",
    "first_empty",
    "slot_id_for",
]
