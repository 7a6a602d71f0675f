"""The pending items list of the active consignment."""

from __future__ import annotations

from collections.abc import Iterable

from storerooms.domain.entities import PendingItem


def total_quantity(items: Iterable[PendingItem]) -> int:
    """Total slots needed by ``items``."""
    return sum(item.quantity for item in items)


class PendingQueue:
    """Holds the consignment being stored and the items still awaiting a slot.

    The list is replaced wholesale on every change, like slot arrays.
    """

    def __init__(self) -> None:
        self._source_reference = ""
        self._items: tuple[PendingItem, ...] = ()

    @property
    def source_reference(self) -> str:
        return self._source_reference

    @property
    def items(self) -> tuple[PendingItem, ...]:
        return self._items

    def load(self, source_reference: str, items: Iterable[PendingItem]) -> None:
        """Make ``source_reference`` the active consignment."""
        self._source_reference = source_reference
        self._items = tuple(items)

    def replace(self, items: Iterable[PendingItem]) -> None:
        self._items = tuple(items)

    def remove(self, item_ids: Iterable[str]) -> None:
        drop = set(item_ids)
        self._items = tuple(item for item in self._items if item.id not in drop)

    def get(self, item_id: str) -> PendingItem | None:
        return next((item for item in self._items if item.id == item_id), None)

    def select(self, item_ids: Iterable[str]) -> list[PendingItem]:
        """Items whose ids are in ``item_ids``, in list order."""
        wanted = set(item_ids)
        return [item for item in self._items if item.id in wanted]

    def __len__(self) -> int:
        return len(self._items)
