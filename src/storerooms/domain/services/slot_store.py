"""In-memory owner of every room's slot array.

Slot arrays are tuples of frozen ``Slot`` objects. Mutations build a new
tuple and swap it in with ``set``; a reader holding the previous tuple keeps
seeing the complete pre-mutation state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from storerooms.domain.entities import Room, Slot, slot_id_for
from storerooms.domain.errors import ConfigError
from storerooms.domain.services.registry import RoomRegistry
from storerooms.domain.value_objects import GridPosition, RoomStats

logger = logging.getLogger(__name__)

SlotArray = tuple[Slot, ...]


def count_empty(slots: Iterable[Slot]) -> int:
    """Number of empty slots in ``slots``."""
    return sum(1 for slot in slots if slot.is_empty)


def count_occupied(slots: Iterable[Slot]) -> int:
    """Number of occupied slots in ``slots``."""
    return sum(1 for slot in slots if not slot.is_empty)


def first_empty(slots: Iterable[Slot]) -> Slot | None:
    """First empty slot in array order, or None when the room is full."""
    return next((slot for slot in slots if slot.is_empty), None)


class SlotStore:
    """Owns the room -> slot array mapping for all configured rooms."""

    def __init__(self, registry: RoomRegistry) -> None:
        self._registry = registry
        self._slots: dict[str, SlotArray] = {}
        self._positions: dict[str, tuple[str, GridPosition]] = {}
        self.reset()

    @property
    def registry(self) -> RoomRegistry:
        return self._registry

    @staticmethod
    def initialize(room: Room) -> SlotArray:
        """Create the empty, row-major slot array for ``room``."""
        return tuple(
            Slot(
                id=slot_id_for(room.short_code, row, column),
                room_id=room.id,
                row=row,
                column=column,
            )
            for row in range(1, room.rows + 1)
            for column in range(1, room.columns + 1)
        )

    def reset(self) -> None:
        """Rebuild every room with all slots empty."""
        self._slots.clear()
        self._positions.clear()
        for room in self._registry:
            slots = self.initialize(room)
            self._slots[room.id] = slots
            for slot in slots:
                self._positions[slot.id] = (room.id, slot.position)
        logger.debug(f"Initialized {len(self._slots)} rooms")

    def get(self, room_id: str) -> SlotArray:
        """Return the current slot array of a room."""
        try:
            return self._slots[room_id]
        except KeyError:
            raise ConfigError.unknown_room(room_id) from None

    def set(self, room_id: str, slots: Sequence[Slot]) -> None:
        """Replace a room's whole slot array.

        Raises:
            ConfigError: If the room is unknown.
            ValueError: If ``slots`` does not describe exactly that room's grid.
        """
        room = self._registry.get(room_id)
        replacement = tuple(slots)
        if len(replacement) != room.capacity:
            raise ValueError(
                f"Room {room_id} holds {room.capacity} slots, got {len(replacement)}"
            )
        for index, slot in enumerate(replacement):
            if slot.room_id != room_id:
                raise ValueError(f"Slot {slot.id} does not belong to room {room_id}")
            if room.index_of(slot.position) != index:
                raise ValueError(f"Slot {slot.id} is out of row-major order")
        self._slots[room_id] = replacement

    def room_of(self, slot_id: str) -> Room:
        """Return the room that contains ``slot_id``."""
        try:
            room_id, _ = self._positions[slot_id]
        except KeyError:
            raise ConfigError.unknown_slot(slot_id) from None
        return self._registry.get(room_id)

    def find_slot(self, slot_id: str) -> Slot:
        """Look up a slot by id across all rooms."""
        room = self.room_of(slot_id)
        return self._slots[room.id][self.index_of(room.id, slot_id)]

    def index_of(self, room_id: str, slot_id: str) -> int:
        """Array index of ``slot_id`` within ``room_id``.

        Raises:
            ConfigError: If the room is unknown or does not contain the slot.
        """
        room = self._registry.get(room_id)
        owner, position = self._positions.get(slot_id, (None, None))
        if owner != room_id or position is None:
            raise ConfigError.unknown_slot(slot_id, room_id)
        return room.index_of(position)

    def count_empty(self, room_id: str) -> int:
        return count_empty(self.get(room_id))

    def first_empty(self, room_id: str) -> Slot | None:
        return first_empty(self.get(room_id))

    def stats(self, room_id: str) -> RoomStats:
        """Capacity figures for a room."""
        room = self._registry.get(room_id)
        occupied = count_occupied(self.get(room_id))
        return RoomStats(
            room_id=room_id,
            total=room.capacity,
            occupied=occupied,
            free=room.capacity - occupied,
        )
