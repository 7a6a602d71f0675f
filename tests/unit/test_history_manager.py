"""Tests for HistoryManager snapshot undo."""

from __future__ import annotations

import pytest

from storerooms.domain import (
    AllocationEngine,
    HistoryManager,
    OperationKind,
    PendingItem,
    PendingQueue,
    RemovalService,
    Room,
    RoomRegistry,
    SlotStore,
)


@pytest.fixture
def bounded() -> tuple[HistoryManager, AllocationEngine, SlotStore]:
    store = SlotStore(
        RoomRegistry([Room(id="yard", name="Yard", short_code="Y", rows=4, columns=5)])
    )
    pending = PendingQueue()
    history = HistoryManager(store, pending, max_depth=3)
    return history, AllocationEngine(store, history, pending), store


class TestUndo:
    """Tests for reversing mutations."""

    def test_nothing_to_undo(self, history: HistoryManager) -> None:
        result = history.undo()
        assert not result.undone
        assert result.message == "Nothing to undo"
        assert not history.can_undo

    def test_undo_is_lifo(
        self, engine: AllocationEngine, history: HistoryManager, store: SlotStore
    ) -> None:
        engine.allocate("room-a", "A-R01-C01", [PendingItem(id="1", quantity=2)])
        engine.allocate("room-b", "B-R01-C01", [PendingItem(id="2", quantity=3)])

        result = history.undo()
        assert result.room_id == "room-b"
        assert result.message == "Undo: Allocated 3 slots"
        assert store.count_empty("room-b") == 96
        assert store.count_empty("room-a") == 98

        assert history.undo().room_id == "room-a"
        assert store.count_empty("room-a") == 100

    def test_undo_restores_pending_items(
        self, engine: AllocationEngine, history: HistoryManager, pending: PendingQueue, rice_items
    ) -> None:
        pending.load("GC-1001", rice_items)
        engine.allocate("room-a", "A-R01-C01", rice_items[:1])
        assert [item.id for item in pending.items] == ["2", "3"]
        history.undo()
        assert pending.items == tuple(rice_items)

    def test_undo_of_removal_does_not_touch_pending(
        self,
        removal: RemovalService,
        history: HistoryManager,
        pending: PendingQueue,
        rice_items,
        occupy,
    ) -> None:
        pending.load("GC-1001", rice_items)
        occupy("room-a", ["A-R01-C01"])
        removal.remove_slot("A-R01-C01")
        result = history.undo()
        assert result.kind is OperationKind.REMOVAL
        assert pending.items == tuple(rice_items)

    def test_alternating_operations(
        self,
        engine: AllocationEngine,
        removal: RemovalService,
        history: HistoryManager,
        store: SlotStore,
    ) -> None:
        engine.allocate("room-c", "C-R01-C01", [PendingItem(id="1", quantity=4)])
        after_alloc = store.get("room-c")
        removal.remove_slots(["C-R01-C01", "C-R01-C02"])
        history.undo()
        assert store.get("room-c") == after_alloc
        history.undo()
        assert store.count_empty("room-c") == 48


    def test_slot_count_is_conserved(
        self,
        engine: AllocationEngine,
        removal: RemovalService,
        history: HistoryManager,
        store: SlotStore,
    ) -> None:
        capacity = store.registry.get("room-b").capacity

        def assert_conserved() -> None:
            slots = store.get("room-b")
            empty = sum(1 for slot in slots if slot.occupant is None)
            occupied = sum(1 for slot in slots if slot.occupant is not None)
            assert empty + occupied == capacity
            assert len(slots) == capacity

        engine.allocate("room-b", "B-R01-C11", [PendingItem(id="1", quantity=7)])
        assert_conserved()
        removal.remove_slots(["B-R01-C11", "B-R01-C12", "B-R02-C03"])
        assert_conserved()
        removal.clear_room("room-b")
        assert_conserved()
        history.undo()
        assert_conserved()
        assert store.count_empty("room-b") == capacity - 4
        history.undo()
        assert_conserved()
        history.undo()
        assert_conserved()
        assert store.count_empty("room-b") == capacity


class TestBoundedDepth:
    """Tests for eviction of the oldest entries."""

    def test_depth_is_capped(self, bounded) -> None:
        history, engine, store = bounded
        for column in range(1, 6):
            engine.allocate("yard", f"Y-R01-C{column:02d}", [PendingItem(id=str(column), quantity=1)])
        assert len(history) == 3
        assert history.max_depth == 3

    def test_oldest_entries_are_lost(self, bounded) -> None:
        history, engine, store = bounded
        for column in range(1, 6):
            engine.allocate("yard", f"Y-R01-C{column:02d}", [PendingItem(id=str(column), quantity=1)])
        for _ in range(3):
            assert history.undo().undone
        assert not history.undo().undone
        # the first two allocations can no longer be reversed
        assert store.count_empty("yard") == 18
        assert not store.find_slot("Y-R01-C01").is_empty
        assert not store.find_slot("Y-R01-C02").is_empty

    def test_default_depth(self, history: HistoryManager) -> None:
        assert history.max_depth == 10

    def test_invalid_depth(self, store: SlotStore, pending: PendingQueue) -> None:
        with pytest.raises(ValueError):
            HistoryManager(store, pending, max_depth=0)


class TestSnapshot:
    def test_entries_oldest_first(
        self, engine: AllocationEngine, history: HistoryManager
    ) -> None:
        engine.allocate("room-a", "A-R01-C01", [PendingItem(id="1", quantity=1)])
        engine.allocate("room-a", "A-R01-C01", [PendingItem(id="2", quantity=2)])
        assert [e.description for e in history.entries] == [
            "Allocated 1 slots",
            "Allocated 2 slots",
        ]

    def test_timestamp_from_clock(
        self, engine: AllocationEngine, history: HistoryManager
    ) -> None:
        engine.allocate("room-a", "A-R01-C01", [PendingItem(id="1", quantity=1)])
        assert history.peek().timestamp.isoformat() == "2026-01-15T09:30:00+00:00"

    def test_clear(self, engine: AllocationEngine, history: HistoryManager) -> None:
        engine.allocate("room-a", "A-R01-C01", [PendingItem(id="1", quantity=1)])
        history.clear()
        assert not history.can_undo
        assert history.peek() is None
