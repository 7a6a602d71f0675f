"""Slot allocation: choose empty slots in fill order, then commit atomically."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime

from storerooms.domain.entities import Occupant, PendingItem, Slot
from storerooms.domain.errors import CapacityError, ConfigError
from storerooms.domain.results import AllocationResult
from storerooms.domain.services.fill import FillStrategyFactory
from storerooms.domain.services.history import HistoryManager, utc_now
from storerooms.domain.services.pending import PendingQueue, total_quantity
from storerooms.domain.services.slot_store import SlotStore
from storerooms.domain.value_objects import FillMode, OperationKind

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER_LABEL = "PKG"


class AllocationEngine:
    """Assigns pending items to empty slots of a single room.

    Allocation happens in two steps. ``find_available_slots`` computes the
    ordered candidate ids without touching anything. ``commit`` then writes
    occupants into those slots, or refuses outright when there are too few
    candidates. A commit never leaves a room partially filled.
    """

    def __init__(
        self,
        store: SlotStore,
        history: HistoryManager,
        pending: PendingQueue,
        strategies: FillStrategyFactory | None = None,
        placeholder_label: str = DEFAULT_PLACEHOLDER_LABEL,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._history = history
        self._pending = pending
        self._strategies = strategies or FillStrategyFactory()
        self._placeholder_label = placeholder_label
        self._clock = clock

    def find_available_slots(
        self,
        room_id: str,
        start_slot_id: str,
        quantity: int,
        mode: FillMode | str = FillMode.HORIZONTAL,
    ) -> list[str]:
        """Ordered empty slot ids for ``quantity`` units starting at a slot.

        The result holds ``min(quantity, empty slots in room)`` ids.

        Raises:
            ConfigError: If the room or the start slot is unknown.
            ValueError: If ``mode`` is not a known fill mode.
        """
        room = self._store.registry.get(room_id)
        slots = self._store.get(room_id)
        start_index = self._store.index_of(room_id, start_slot_id)
        strategy = self._strategies.create(mode)
        found = strategy.candidates(room, slots, start_index, quantity)
        logger.debug(
            f"{FillMode(mode).value} fill from {start_slot_id} wants {quantity}, "
            f"found {len(found)}"
        )
        return found

    def commit(
        self,
        room_id: str,
        items: Sequence[PendingItem],
        target_ids: Sequence[str],
        source_reference: str | None = None,
        mode: FillMode | str = FillMode.HORIZONTAL,
    ) -> AllocationResult:
        """Write ``items`` into ``target_ids``, one slot per unit of quantity.

        Target ids are consumed in order. The room's previous state is
        recorded in the history before the new slot array is swapped in, and
        the committed items leave the pending list.

        Raises:
            CapacityError: If fewer usable target ids than the total quantity
                were supplied. Nothing is changed in that case.
            ConfigError: If a target id is not a slot of the room.
            ValueError: If ``mode`` is not a known fill mode.
        """
        fill_mode = FillMode(mode)
        needed = total_quantity(items)
        if needed == 0:
            return AllocationResult(room_id=room_id, allocated=0, mode=fill_mode)

        slots = self._store.get(room_id)
        positions = {slot.id: index for index, slot in enumerate(slots)}
        usable: list[str] = []
        for slot_id in dict.fromkeys(target_ids):
            if slot_id not in positions:
                raise ConfigError.unknown_slot(slot_id, room_id)
            if slots[positions[slot_id]].is_empty:
                usable.append(slot_id)
        if len(usable) < needed:
            raise CapacityError(needed=needed, available=len(usable), room_id=room_id)

        reference = (
            source_reference
            if source_reference is not None
            else self._pending.source_reference
        )
        self._history.snapshot(
            OperationKind.ALLOCATION, room_id, f"Allocated {needed} slots"
        )

        updated: list[Slot] = list(slots)
        allocated_at = self._clock()
        targets = iter(usable)
        filled: list[str] = []
        for item in items:
            occupant = Occupant(
                content_id=item.id,
                display_label=item.prefix or self._placeholder_label,
                source_reference=reference,
                contents=item.contents,
                packing=item.packing,
                allocated_at=allocated_at,
            )
            for _ in range(item.quantity):
                slot_id = next(targets)
                index = positions[slot_id]
                updated[index] = updated[index].occupy(occupant)
                filled.append(slot_id)

        self._store.set(room_id, updated)
        item_ids = tuple(item.id for item in items)
        self._pending.remove(item_ids)
        logger.info(f"Allocated {needed} slots in {room_id} for {reference or 'n/a'}")
        return AllocationResult(
            room_id=room_id,
            allocated=needed,
            slot_ids=tuple(filled),
            item_ids=item_ids,
            mode=fill_mode,
        )

    def allocate(
        self,
        room_id: str,
        start_slot_id: str,
        items: Sequence[PendingItem],
        mode: FillMode | str = FillMode.HORIZONTAL,
        source_reference: str | None = None,
    ) -> AllocationResult:
        """Check capacity, pick slots from ``start_slot_id`` and commit.

        This is the entry point any presentation layer calls when the
        operator drops, clicks, or otherwise targets a slot.

        Raises:
            CapacityError: If the room has fewer empty slots than needed.
            ConfigError: If the room or start slot is unknown.
            ValueError: If ``mode`` is not a known fill mode.
        """
        fill_mode = FillMode(mode)
        needed = total_quantity(items)
        if needed == 0:
            return AllocationResult(room_id=room_id, allocated=0, mode=fill_mode)

        available = self._store.count_empty(room_id)
        if available < needed:
            raise CapacityError(needed=needed, available=available, room_id=room_id)

        targets = self.find_available_slots(room_id, start_slot_id, needed, fill_mode)
        return self.commit(room_id, items, targets, source_reference, fill_mode)
