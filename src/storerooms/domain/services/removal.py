"""Freeing occupied slots."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from storerooms.domain.results import RemovalResult
from storerooms.domain.services.history import HistoryManager
from storerooms.domain.services.slot_store import SlotStore
from storerooms.domain.value_objects import OperationKind

logger = logging.getLogger(__name__)


class RemovalService:
    """Clears single slots, batches of slots, or whole rooms.

    A history snapshot is taken only when at least one slot actually changes.
    """

    def __init__(self, store: SlotStore, history: HistoryManager) -> None:
        self._store = store
        self._history = history

    def remove_slot(self, slot_id: str) -> RemovalResult:
        """Free one slot; a no-op when it is already empty."""
        room = self._store.room_of(slot_id)
        slots = self._store.get(room.id)
        index = self._store.index_of(room.id, slot_id)
        if slots[index].is_empty:
            return RemovalResult(room_id=room.id, removed=0)

        self._history.snapshot(
            OperationKind.REMOVAL, room.id, f"Removed item from {slot_id}"
        )
        updated = list(slots)
        updated[index] = updated[index].vacate()
        self._store.set(room.id, updated)
        logger.info(f"Removed item from {slot_id}")
        return RemovalResult(room_id=room.id, removed=1, slot_ids=(slot_id,))

    def remove_slots(self, slot_ids: Iterable[str]) -> RemovalResult:
        """Free every occupied slot among ``slot_ids`` under one snapshot.

        All ids must belong to the same room.

        Raises:
            ConfigError: If an id is unknown.
            ValueError: If the ids span more than one room.
        """
        wanted = list(dict.fromkeys(slot_ids))
        if not wanted:
            raise ValueError("No slot ids given")
        rooms = {self._store.room_of(slot_id).id for slot_id in wanted}
        if len(rooms) > 1:
            raise ValueError(
                f"Slots span several rooms ({', '.join(sorted(rooms))}); "
                "remove them one room at a time"
            )
        room_id = rooms.pop()
        slots = self._store.get(room_id)
        targets = set(wanted)
        freed = tuple(
            slot.id for slot in slots if slot.id in targets and not slot.is_empty
        )
        if not freed:
            return RemovalResult(room_id=room_id, removed=0)

        self._history.snapshot(
            OperationKind.REMOVAL, room_id, f"Removed {len(freed)} items"
        )
        freed_set = set(freed)
        self._store.set(
            room_id,
            [slot.vacate() if slot.id in freed_set else slot for slot in slots],
        )
        logger.info(f"Removed {len(freed)} items from {room_id}")
        return RemovalResult(room_id=room_id, removed=len(freed), slot_ids=freed)

    def clear_room(self, room_id: str) -> RemovalResult:
        """Free every occupied slot of a room.

        An already-empty room is reported with ``removed=0`` and no history
        entry.
        """
        room = self._store.registry.get(room_id)
        slots = self._store.get(room_id)
        freed = tuple(slot.id for slot in slots if not slot.is_empty)
        if not freed:
            return RemovalResult(room_id=room_id, removed=0, room_name=room.name)

        self._history.snapshot(OperationKind.REMOVAL, room_id, f"Cleared {room.name}")
        self._store.set(room_id, [slot.vacate() for slot in slots])
        logger.info(f"Cleared {len(freed)} items from {room_id}")
        return RemovalResult(
            room_id=room_id, removed=len(freed), slot_ids=freed, room_name=room.name
        )
