"""Configuration loading, validation and conversion."""

from storerooms.application.config.adapter import config_to_rooms, room_config_to_room
from storerooms.application.config.loader import (
    default_config,
    load_config,
    load_config_from_dict,
)
from storerooms.application.config.schema import (
    DEFAULT_ROOMS,
    SUPPORTED_VERSIONS,
    RoomConfig,
    WarehouseConfiguration,
)
from storerooms.domain.errors import ConfigError

__all__ = [
    "ConfigError",
    "DEFAULT_ROOMS",
    "RoomConfig",
    "SUPPORTED_VERSIONS",
    "WarehouseConfiguration",
    "config_to_rooms",
    "default_config",
    "load_config",
    "load_config_from_dict",
    "room_config_to_room",
]
