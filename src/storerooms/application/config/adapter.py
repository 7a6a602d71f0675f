"""Conversion of validated configuration models into domain objects."""

from storerooms.application.config.schema import RoomConfig, WarehouseConfiguration
from storerooms.domain.entities import Room


def room_config_to_room(config: RoomConfig) -> Room:
    return Room(
        id=config.id,
        name=config.name,
        short_code=config.short_code,
        rows=config.rows,
        columns=config.columns,
    )


def config_to_rooms(config: WarehouseConfiguration) -> list[Room]:
    """Convert the configured rooms to domain ``Room`` entities, in order."""
    return [room_config_to_room(room) for room in config.rooms]
