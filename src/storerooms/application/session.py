"""Operator session: the use cases a presentation layer drives.

A ``WarehouseSession`` bundles the allocation services with the state a
single operator works with: the room on screen, the active consignment, the
items ticked for the next allocation, and the last slot suggestion.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from storerooms.domain.entities import PendingItem, Slot
from storerooms.domain.errors import CapacityError
from storerooms.domain.results import (
    AllocationResult,
    CapacityAdvice,
    RemovalResult,
    UndoResult,
)
from storerooms.domain.services import (
    AllocationEngine,
    CapacityAdvisor,
    HistoryManager,
    PendingQueue,
    RemovalService,
    RoomRegistry,
    SearchIndex,
    SlotStore,
    total_quantity,
)
from storerooms.domain.value_objects import AdviceKind, FillMode, PendingSortKey, RoomStats

if TYPE_CHECKING:
    from storerooms.contracts.sources import PendingItemSource

logger = logging.getLogger(__name__)


class WarehouseSession:
    """Single-operator facade over the slot allocation services."""

    def __init__(
        self,
        registry: RoomRegistry,
        store: SlotStore,
        pending: PendingQueue,
        history: HistoryManager,
        engine: AllocationEngine,
        advisor: CapacityAdvisor,
        removal: RemovalService,
        search_index: SearchIndex,
        default_fill_mode: FillMode = FillMode.HORIZONTAL,
        item_source: "PendingItemSource | None" = None,
    ) -> None:
        self.registry = registry
        self.store = store
        self.pending = pending
        self.history = history
        self.engine = engine
        self.advisor = advisor
        self.removal = removal
        self.search_index = search_index
        self.default_fill_mode = default_fill_mode
        self.item_source = item_source

        self.current_room_id = registry.rooms[0].id
        self.selected_item_ids: set[str] = set()
        self.suggested_slot_id: str | None = None

    # --- Rooms -------------------------------------------------------------

    def select_room(self, room_id: str) -> None:
        self.registry.get(room_id)
        self.current_room_id = room_id
        self.suggested_slot_id = None

    def slots(self, room_id: str | None = None) -> tuple[Slot, ...]:
        return self.store.get(room_id or self.current_room_id)

    def stats(self, room_id: str | None = None) -> RoomStats:
        return self.store.stats(room_id or self.current_room_id)

    def slot_detail(self, slot_id: str) -> Slot:
        return self.store.find_slot(slot_id)

    # --- Pending items -----------------------------------------------------

    def load_consignment(
        self, reference: str, items: Iterable[PendingItem] | None = None
    ) -> tuple[PendingItem, ...]:
        """Make ``reference`` the active consignment.

        Items are taken from ``items`` when given, otherwise fetched from the
        session's item source.
        """
        if items is None:
            if self.item_source is None:
                raise RuntimeError("No pending item source configured")
            items = self.item_source.fetch(reference)
        self.pending.load(reference, items)
        self.selected_item_ids.clear()
        self.suggested_slot_id = None
        logger.debug(f"Loaded {len(self.pending)} pending items for {reference}")
        return self.pending.items

    def pending_items(
        self,
        query: str | None = None,
        sort_by: PendingSortKey | str = PendingSortKey.DEFAULT,
        descending: bool = True,
    ) -> list[PendingItem]:
        items = self.search_index.filter_pending(query, self.pending.items)
        return self.search_index.sort_pending(items, sort_by, descending)

    def toggle_item(self, item_id: str) -> None:
        if item_id in self.selected_item_ids:
            self.selected_item_ids.discard(item_id)
        else:
            self.selected_item_ids.add(item_id)
        self.suggested_slot_id = None

    def select_all(self, selected: bool = True) -> None:
        if selected:
            self.selected_item_ids = {item.id for item in self.pending.items}
        else:
            self.selected_item_ids = set()
        self.suggested_slot_id = None

    def clear_selection(self) -> None:
        self.selected_item_ids = set()

    # --- Allocation --------------------------------------------------------

    def assist(self, item_id: str) -> CapacityAdvice:
        """Capacity advice for one pending item; selects that item.

        When the current room fits, the first empty slot becomes the
        suggested allocation start. The current room is never switched.
        """
        item = self.pending.get(item_id)
        if item is None:
            raise KeyError(f"No pending item {item_id!r}")
        self.selected_item_ids = {item_id}
        advice = self.advisor.advise(self.current_room_id, item.quantity)
        if advice.kind is AdviceKind.CURRENT_ROOM:
            self.suggested_slot_id = advice.suggested_slot_id
        else:
            self.suggested_slot_id = None
        return advice

    def request_allocation(
        self,
        target_slot_id: str,
        item_ids: Iterable[str] | None = None,
        mode: FillMode | str | None = None,
    ) -> AllocationResult:
        """Allocate items starting at ``target_slot_id`` in the current room.

        Uses the selected items when ``item_ids`` is None.

        Raises:
            CapacityError: If the current room cannot hold the total quantity.
            ConfigError: If the slot is not part of the current room.
        """
        ids = self.selected_item_ids if item_ids is None else set(item_ids)
        items = self.pending.select(ids)
        fill_mode = FillMode(mode) if mode is not None else self.default_fill_mode
        if total_quantity(items) == 0:
            return AllocationResult(room_id=self.current_room_id, allocated=0, mode=fill_mode)

        try:
            result = self.engine.allocate(
                self.current_room_id,
                target_slot_id,
                items,
                mode=fill_mode,
                source_reference=self.pending.source_reference,
            )
        except CapacityError:
            logger.debug(f"Allocation at {target_slot_id} refused for lack of space")
            raise
        self.selected_item_ids = set()
        self.suggested_slot_id = None
        return result

    # --- Removal and undo --------------------------------------------------

    def remove_slot(self, slot_id: str) -> RemovalResult:
        return self.removal.remove_slot(slot_id)

    def remove_slots(self, slot_ids: Iterable[str]) -> RemovalResult:
        return self.removal.remove_slots(slot_ids)

    def clear_room(self, room_id: str | None = None) -> RemovalResult:
        return self.removal.clear_room(room_id or self.current_room_id)

    def undo(self) -> UndoResult:
        """Reverse the last mutation and show the room it touched."""
        result = self.history.undo()
        if result.undone and result.room_id is not None:
            self.current_room_id = result.room_id
            self.selected_item_ids = set()
            self.suggested_slot_id = None
        return result

    # --- Search ------------------------------------------------------------

    def search(self, query: str | None, room_id: str | None = None) -> frozenset[str]:
        return self.search_index.search_room(room_id or self.current_room_id, query)
