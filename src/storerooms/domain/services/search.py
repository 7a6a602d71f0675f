"""Substring search over occupied slots and pending items."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from storerooms.domain.entities import PendingItem, Slot
from storerooms.domain.services.slot_store import SlotStore
from storerooms.domain.value_objects import PendingSortKey


def _normalize(query: str | None) -> str:
    return (query or "").strip().lower()


def _matches(needle: str, *fields: str | None) -> bool:
    return any(needle in value.lower() for value in fields if value)


class SearchIndex:
    """Case-insensitive substring matching.

    A blank query means search is inactive and matches nothing.
    """

    def __init__(self, store: SlotStore | None = None) -> None:
        self._store = store

    @staticmethod
    def search(query: str | None, slots: Iterable[Slot]) -> frozenset[str]:
        """Ids of occupied slots whose id, reference, label or contents match."""
        needle = _normalize(query)
        if not needle:
            return frozenset()
        return frozenset(
            slot.id
            for slot in slots
            if slot.occupant is not None
            and _matches(
                needle,
                slot.id,
                slot.occupant.source_reference,
                slot.occupant.display_label,
                slot.occupant.contents,
            )
        )

    def search_room(self, room_id: str, query: str | None) -> frozenset[str]:
        if self._store is None:
            raise RuntimeError("SearchIndex was created without a slot store")
        return self.search(query, self._store.get(room_id))

    @staticmethod
    def filter_pending(
        query: str | None, items: Sequence[PendingItem]
    ) -> list[PendingItem]:
        """Pending items matching ``query``; a blank query keeps them all."""
        needle = _normalize(query)
        if not needle:
            return list(items)
        return [
            item
            for item in items
            if _matches(needle, item.contents, item.packing, item.prefix, item.id)
        ]

    @staticmethod
    def sort_pending(
        items: Sequence[PendingItem],
        key: PendingSortKey | str = PendingSortKey.DEFAULT,
        descending: bool = True,
    ) -> list[PendingItem]:
        """Order pending items by quantity or weight; DEFAULT keeps list order."""
        key = PendingSortKey(key)
        if key is PendingSortKey.QUANTITY:
            return sorted(items, key=lambda item: item.quantity, reverse=descending)
        if key is PendingSortKey.WEIGHT:
            return sorted(items, key=lambda item: item.weight, reverse=descending)
        return list(items)
