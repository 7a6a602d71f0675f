"""Static catalog of warehouse rooms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from storerooms.domain.entities import Room
from storerooms.domain.errors import ConfigError


class RoomRegistry:
    """Read-only lookup of rooms by id.

    Rooms keep the order they were registered in; that order breaks ties when
    the capacity advisor compares rooms.
    """

    def __init__(self, rooms: Iterable[Room]) -> None:
        self._rooms: dict[str, Room] = {}
        short_codes: dict[str, str] = {}
        for room in rooms:
            if room.id in self._rooms:
                raise ConfigError(
                    message=f"Duplicate room id: {room.id}",
                    error_type="duplicate_room",
                    details=[{"room_id": room.id}],
                )
            owner = short_codes.get(room.short_code)
            if owner is not None:
                raise ConfigError(
                    message=(
                        f"Rooms {owner} and {room.id} share short code "
                        f"{room.short_code!r}; slot ids would collide"
                    ),
                    error_type="duplicate_room",
                    details=[{"room_id": room.id, "short_code": room.short_code}],
                )
            self._rooms[room.id] = room
            short_codes[room.short_code] = room.id
        if not self._rooms:
            raise ConfigError(
                message="At least one room must be configured",
                error_type="validation",
            )

    @property
    def rooms(self) -> tuple[Room, ...]:
        return tuple(self._rooms.values())

    def get(self, room_id: str) -> Room:
        """Return the room with ``room_id``.

        Raises:
            ConfigError: If no such room is configured.
        """
        try:
            return self._rooms[room_id]
        except KeyError:
            raise ConfigError.unknown_room(room_id) from None

    def __contains__(self, room_id: object) -> bool:
        return room_id in self._rooms

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms.values())

    def __len__(self) -> int:
        return len(self._rooms)
