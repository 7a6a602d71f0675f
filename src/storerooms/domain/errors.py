"""Exceptions raised by the warehouse domain.

Two categories exist:

- ``ConfigError`` is fatal. It signals a caller or configuration bug such as
  an unknown room id, and is also raised when a configuration file cannot be
  loaded or validated.
- ``CapacityError`` is recoverable. The requested quantity does not fit and
  the operation was abandoned before any slot was touched.

Informational conditions (nothing to undo, room already empty) are not
exceptions; they are reported through result values.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class WarehouseError(Exception):
    """Base class for all warehouse errors."""


class ConfigError(WarehouseError):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (unknown_room, unknown_slot,
            duplicate_room, file_not_found, json_parse, validation, ...)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def unknown_room(cls, room_id: str) -> ConfigError:
        return cls(
            message=f"Unknown room: {room_id}",
            error_type="unknown_room",
            details=[{"room_id": room_id}],
        )

    @classmethod
    def unknown_slot(cls, slot_id: str, room_id: str | None = None) -> ConfigError:
        where = f" in room {room_id}" if room_id else ""
        return cls(
            message=f"Unknown slot: {slot_id}{where}",
            error_type="unknown_slot",
            details=[{"slot_id": slot_id, "room_id": room_id}],
        )


class CapacityError(WarehouseError):
    """Raised when a requested quantity exceeds the empty slots available.

    Attributes:
        needed: Number of slots the operation required.
        available: Number of empty slots that were available.
        room_id: Room the check was made against, if a single room.
    """

    def __init__(self, needed: int, available: int, room_id: str | None = None) -> None:
        self.needed = needed
        self.available = available
        self.room_id = room_id
        super().__init__(f"Not enough space: need {needed}, have {available}")
