"""Read-only advice on where a quantity of items could be stored."""

from __future__ import annotations

import logging

from storerooms.domain.results import CapacityAdvice
from storerooms.domain.services.slot_store import SlotStore
from storerooms.domain.value_objects import AdviceKind

logger = logging.getLogger(__name__)


class CapacityAdvisor:
    """Checks the current room first, then recommends the emptiest other room.

    The advisor never changes the current room or any slot; acting on an
    alternate-room recommendation is left to the caller.
    """

    def __init__(self, store: SlotStore) -> None:
        self._store = store

    def advise(self, current_room_id: str, quantity: int) -> CapacityAdvice:
        """Advise where ``quantity`` slots could be found.

        A quantity of zero or less is treated as one slot.

        Raises:
            ConfigError: If ``current_room_id`` is unknown.
        """
        needed = quantity if quantity > 0 else 1
        current = self._store.registry.get(current_room_id)
        current_empty = self._store.count_empty(current.id)

        if current_empty >= needed:
            start = self._store.first_empty(current.id)
            assert start is not None
            return CapacityAdvice(
                kind=AdviceKind.CURRENT_ROOM,
                needed=needed,
                room_id=current.id,
                room_name=current.name,
                available=current_empty,
                suggested_slot_id=start.id,
                current_available=current_empty,
            )

        best_room = None
        best_empty = -1
        for room in self._store.registry:
            if room.id == current.id:
                continue
            empty = self._store.count_empty(room.id)
            if empty > best_empty:
                best_room, best_empty = room, empty

        if best_room is not None and best_empty >= needed:
            logger.debug(
                f"{current.id} has {current_empty}/{needed}; recommending "
                f"{best_room.id} with {best_empty}"
            )
            return CapacityAdvice(
                kind=AdviceKind.ALTERNATE_ROOM,
                needed=needed,
                room_id=best_room.id,
                room_name=best_room.name,
                available=best_empty,
                current_available=current_empty,
            )

        total = sum(self._store.count_empty(room.id) for room in self._store.registry)
        logger.debug(f"No room holds {needed} slots; {total} free in total")
        return CapacityAdvice(
            kind=AdviceKind.INSUFFICIENT,
            needed=needed,
            available=current_empty,
            total_available=total,
            current_available=current_empty,
        )
