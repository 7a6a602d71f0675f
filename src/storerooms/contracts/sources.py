"""Protocol for the collaborator that supplies pending items.

Fetching a consignment's contents happens outside the allocation core; the
core only ever sees the resulting ``PendingItem`` list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from storerooms.domain.entities import PendingItem


@runtime_checkable
class PendingItemSource(Protocol):
    """Supplies the items of a consignment that still need storage."""

    def fetch(self, reference: str) -> list["PendingItem"]:
        """Return the pending items for ``reference``.

        Returns an empty list when the consignment is unknown or has no items.
        """
        ...
