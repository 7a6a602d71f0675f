"""Tests for horizontal and vertical fill ordering."""

from __future__ import annotations

import pytest

from storerooms.contracts import FillStrategy
from storerooms.domain import FillMode, SlotStore
from storerooms.domain.services.fill import (
    FillStrategyFactory,
    HorizontalFillStrategy,
    VerticalFillStrategy,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def room_c(store: SlotStore):
    return store.registry.get("room-c")


def _candidates(strategy, store: SlotStore, room_id: str, start_id: str, quantity: int):
    room = store.registry.get(room_id)
    slots = store.get(room_id)
    return strategy.candidates(room, slots, store.index_of(room_id, start_id), quantity)


class TestHorizontalFill:
    """Row-major fill with wrap-around."""

    def test_fills_forward_from_start(self, store: SlotStore) -> None:
        ids = _candidates(HorizontalFillStrategy(), store, "room-a", "A-R01-C01", 5)
        assert ids == [f"A-R01-C{c:02d}" for c in range(1, 6)]

    def test_continues_onto_next_row(self, store: SlotStore) -> None:
        ids = _candidates(HorizontalFillStrategy(), store, "room-a", "A-R01-C09", 4)
        assert ids == ["A-R01-C09", "A-R01-C10", "A-R02-C01", "A-R02-C02"]

    def test_wraps_to_start_of_room(self, store: SlotStore) -> None:
        ids = _candidates(HorizontalFillStrategy(), store, "room-c", "C-R06-C05", 6)
        assert ids == [
            "C-R06-C05",
            "C-R06-C06",
            "C-R06-C07",
            "C-R06-C08",
            "C-R01-C01",
            "C-R01-C02",
        ]

    def test_skips_occupied_slots(self, store: SlotStore, occupy) -> None:
        occupy("room-a", ["A-R01-C02", "A-R01-C03"])
        ids = _candidates(HorizontalFillStrategy(), store, "room-a", "A-R01-C01", 3)
        assert ids == ["A-R01-C01", "A-R01-C04", "A-R01-C05"]

    def test_occupied_start_slot_is_skipped(self, store: SlotStore, occupy) -> None:
        occupy("room-a", ["A-R01-C01"])
        ids = _candidates(HorizontalFillStrategy(), store, "room-a", "A-R01-C01", 2)
        assert ids == ["A-R01-C02", "A-R01-C03"]

    def test_returns_fewer_when_room_is_short(self, store: SlotStore, occupy) -> None:
        occupy("room-c", [s.id for s in store.get("room-c")][:45])
        ids = _candidates(HorizontalFillStrategy(), store, "room-c", "C-R01-C01", 5)
        assert ids == ["C-R06-C06", "C-R06-C07", "C-R06-C08"]

    def test_zero_quantity(self, store: SlotStore) -> None:
        assert _candidates(HorizontalFillStrategy(), store, "room-a", "A-R01-C01", 0) == []


class TestVerticalFill:
    """Column-major fill starting in the chosen column."""

    def test_visit_order_covers_every_slot_once(self, room_c) -> None:
        order = list(VerticalFillStrategy.visit_order(room_c, 4, 2))
        assert len(order) == room_c.capacity
        assert len(set(order)) == room_c.capacity

    def test_visit_order_sequence(self, room_c) -> None:
        order = list(VerticalFillStrategy.visit_order(room_c, 4, 2))
        assert order[:8] == [(4, 2), (5, 2), (6, 2), (1, 2), (2, 2), (3, 2), (1, 3), (2, 3)]
        # columns before the start column come last
        assert order[-6:] == [(r, 1) for r in range(1, 7)]

    def test_wraps_inside_start_column_first(self, store: SlotStore) -> None:
        ids = _candidates(VerticalFillStrategy(), store, "room-c", "C-R04-C02", 8)
        assert ids == [
            "C-R04-C02",
            "C-R05-C02",
            "C-R06-C02",
            "C-R01-C02",
            "C-R02-C02",
            "C-R03-C02",
            "C-R01-C03",
            "C-R02-C03",
        ]

    def test_last_column_wraps_to_first(self, store: SlotStore) -> None:
        ids = _candidates(VerticalFillStrategy(), store, "room-c", "C-R01-C08", 8)
        assert ids == [f"C-R{r:02d}-C08" for r in range(1, 7)] + [
            "C-R01-C01",
            "C-R02-C01",
        ]

    def test_skips_occupied_in_column(self, store: SlotStore, occupy) -> None:
        occupy("room-a", [f"A-R{r:02d}-C03" for r in range(1, 5)])
        ids = _candidates(VerticalFillStrategy(), store, "room-a", "A-R05-C03", 8)
        assert ids == [f"A-R{r:02d}-C03" for r in range(5, 11)] + [
            "A-R01-C04",
            "A-R02-C04",
        ]

    def test_zero_quantity(self, store: SlotStore) -> None:
        assert _candidates(VerticalFillStrategy(), store, "room-a", "A-R01-C01", 0) == []


class TestFillStrategyFactory:
    """Tests for FillStrategyFactory."""

    def test_creates_by_mode(self) -> None:
        factory = FillStrategyFactory()
        assert isinstance(factory.create(FillMode.HORIZONTAL), HorizontalFillStrategy)
        assert isinstance(factory.create("vertical"), VerticalFillStrategy)

    def test_strategies_satisfy_protocol(self) -> None:
        factory = FillStrategyFactory()
        for mode in FillMode:
            assert isinstance(factory.create(mode), FillStrategy)

    def test_unknown_mode(self) -> None:
        with pytest.raises(ValueError, match="Unknown fill mode"):
            FillStrategyFactory().create("diagonal")

    def test_override(self) -> None:
        class Backwards:
            def candidates(self, room, slots, start_index, quantity):
                return [s.id for s in reversed(slots) if s.is_empty][:quantity]

        factory = FillStrategyFactory({FillMode.HORIZONTAL: Backwards()})
        assert isinstance(factory.create(FillMode.HORIZONTAL), Backwards)
