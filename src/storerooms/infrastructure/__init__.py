"""Infrastructure layer - item sources and formatters."""

from .formatters import (
    GridFormatter,
    PendingItemsFormatter,
    SlotDetailFormatter,
    StatsFormatter,
)
from .item_sources import (
    InMemoryPendingItemSource,
    JsonPendingItemSource,
    PendingItemRecord,
)

__all__ = [
    "GridFormatter",
    "InMemoryPendingItemSource",
    "JsonPendingItemSource",
    "PendingItemRecord",
    "PendingItemsFormatter",
    "SlotDetailFormatter",
    "StatsFormatter",
]
