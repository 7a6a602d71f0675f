"""Bounded, snapshot-based undo history.

Every mutating operation records the full slot array of the room it is about
to change, plus the pending items list, before touching anything. Undo swaps
both back wholesale instead of replaying inverse operations.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from datetime import datetime, timezone

from storerooms.domain.entities import HistoryEntry
from storerooms.domain.results import UndoResult
from storerooms.domain.services.pending import PendingQueue
from storerooms.domain.services.slot_store import SlotStore
from storerooms.domain.value_objects import OperationKind

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_DEPTH = 10


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HistoryManager:
    """Undo stack capped at ``max_depth`` entries.

    Pushing past the cap silently drops the oldest entry.
    """

    def __init__(
        self,
        store: SlotStore,
        pending: PendingQueue,
        max_depth: int = DEFAULT_HISTORY_DEPTH,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        if max_depth < 1:
            raise ValueError(f"History depth must be at least 1, got {max_depth}")
        self._store = store
        self._pending = pending
        self._clock = clock
        self._entries: deque[HistoryEntry] = deque(maxlen=max_depth)

    @property
    def max_depth(self) -> int:
        assert self._entries.maxlen is not None
        return self._entries.maxlen

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        """Recorded entries, oldest first."""
        return tuple(self._entries)

    @property
    def can_undo(self) -> bool:
        return bool(self._entries)

    def record(self, entry: HistoryEntry) -> None:
        if len(self._entries) == self.max_depth:
            logger.debug(f"History full, evicting: {self._entries[0].description}")
        self._entries.append(entry)

    def snapshot(
        self, kind: OperationKind, room_id: str, description: str
    ) -> HistoryEntry:
        """Capture the current state of ``room_id`` and record it."""
        entry = HistoryEntry(
            kind=kind,
            room_id=room_id,
            slots=self._store.get(room_id),
            pending_items=self._pending.items,
            timestamp=self._clock(),
            description=description,
        )
        self.record(entry)
        logger.debug(f"Snapshot of {room_id} before: {description}")
        return entry

    def peek(self) -> HistoryEntry | None:
        return self._entries[-1] if self._entries else None

    def undo(self) -> UndoResult:
        """Reverse the most recent mutation.

        Returns an ``UndoResult`` with ``undone=False`` when there is nothing
        to undo; that case is informational and changes nothing.
        """
        if not self._entries:
            return UndoResult(undone=False)
        entry = self._entries.pop()
        self._store.set(entry.room_id, entry.slots)
        self._pending.replace(entry.pending_items)
        logger.info(f"Undid {entry.kind.value} in {entry.room_id}: {entry.description}")
        return UndoResult(
            undone=True,
            room_id=entry.room_id,
            kind=entry.kind,
            description=entry.description,
        )

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
