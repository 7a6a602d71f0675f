"""Tests for SearchIndex."""

from __future__ import annotations

import pytest

from storerooms.domain import PendingItem, PendingSortKey, SearchIndex, SlotStore


@pytest.fixture
def stocked(store: SlotStore, occupy) -> SlotStore:
    occupy("room-a", ["A-R01-C01", "A-R01-C02"], label="RICE")
    occupy("room-a", ["A-R02-C01"], label="TEA")
    return store


class TestSlotSearch:
    """Tests for matching occupied slots."""

    def test_matches_label_case_insensitive(self, stocked: SlotStore) -> None:
        assert SearchIndex.search("rice", stocked.get("room-a")) == {"A-R01-C01", "A-R01-C02"}

    def test_matches_source_reference(self, stocked: SlotStore) -> None:
        assert len(SearchIndex.search("gc-0000", stocked.get("room-a"))) == 3

    def test_matches_slot_id_of_occupied_only(self, stocked: SlotStore) -> None:
        assert SearchIndex.search("A-R02", stocked.get("room-a")) == {"A-R02-C01"}

    def test_blank_query_matches_nothing(self, stocked: SlotStore) -> None:
        assert SearchIndex.search("   ", stocked.get("room-a")) == frozenset()
        assert SearchIndex.search(None, stocked.get("room-a")) == frozenset()

    def test_search_room(self, stocked: SlotStore) -> None:
        index = SearchIndex(stocked)
        assert index.search_room("room-a", " Tea ") == {"A-R02-C01"}
        assert index.search_room("room-b", "tea") == frozenset()

    def test_search_room_needs_store(self) -> None:
        with pytest.raises(RuntimeError):
            SearchIndex().search_room("room-a", "rice")


class TestPendingFilters:
    """Tests for filtering and sorting pending items."""

    def test_filter_by_contents(self, rice_items: list[PendingItem]) -> None:
        assert [i.id for i in SearchIndex.filter_pending("sug", rice_items)] == ["2"]

    def test_filter_by_packing(self, rice_items: list[PendingItem]) -> None:
        assert [i.id for i in SearchIndex.filter_pending("BAG", rice_items)] == ["1", "2"]

    def test_blank_filter_keeps_all(self, rice_items: list[PendingItem]) -> None:
        assert SearchIndex.filter_pending("", rice_items) == rice_items

    def test_sort_by_quantity(self, rice_items: list[PendingItem]) -> None:
        ordered = SearchIndex.sort_pending(rice_items, PendingSortKey.QUANTITY)
        assert [i.quantity for i in ordered] == [3, 2, 1]

    def test_sort_by_weight_ascending(self, rice_items: list[PendingItem]) -> None:
        ordered = SearchIndex.sort_pending(rice_items, "weight", descending=False)
        assert [i.id for i in ordered] == ["3", "2", "1"]

    def test_default_keeps_order(self, rice_items: list[PendingItem]) -> None:
        assert SearchIndex.sort_pending(rice_items) == rice_items
