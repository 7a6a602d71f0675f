"""Pydantic models for warehouse configuration files.

A configuration lists the rooms of the godown plus a few engine settings.
When no file is given the built-in three-room layout is used.

Example:
    ```json
    {
        "schema_version": "1.0",
        "rooms": [
            {"id": "room-a", "name": "Room A - Main Storage",
             "short_code": "A", "rows": 10, "columns": 10}
        ],
        "history_depth": 10
    }
    ```
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from storerooms.domain.value_objects import FillMode

# Supported schema versions for configuration files
# Version 1.0: Rooms, history depth, placeholder label, default fill mode
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class RoomConfig(BaseModel):
    """Configuration for one storage room.

    Attributes:
        id: Stable room identifier
        name: Display name
        short_code: Slot id prefix, unique across rooms
        rows: Number of grid rows
        columns: Number of grid columns
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1, description="Room identifier")
    name: str = Field(..., min_length=1, description="Display name")
    short_code: str = Field(
        ...,
        min_length=1,
        max_length=4,
        pattern=r"^[A-Za-z0-9]+$",
        description="Slot id prefix",
    )
    rows: int = Field(..., ge=1, le=99, description="Grid rows")
    columns: int = Field(..., ge=1, le=99, description="Grid columns")

    @property
    def capacity(self) -> int:
        return self.rows * self.columns


class WarehouseConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Configuration format version
        rooms: Rooms of the warehouse, in display order
        history_depth: Number of undo steps kept
        placeholder_label: Slot label used when an item has no prefix
        default_fill_mode: Fill mode used when a request names none
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    rooms: list[RoomConfig] = Field(..., min_length=1)
    history_depth: int = Field(default=10, ge=1, le=100)
    placeholder_label: str = Field(default="PKG", min_length=1, max_length=16)
    default_fill_mode: FillMode = FillMode.HORIZONTAL

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version {v!r}; supported: {supported}"
            )
        return v

    @model_validator(mode="after")
    def validate_unique_rooms(self) -> "WarehouseConfiguration":
        seen_ids: set[str] = set()
        seen_codes: set[str] = set()
        for room in self.rooms:
            if room.id in seen_ids:
                raise ValueError(f"Duplicate room id: {room.id}")
            if room.short_code in seen_codes:
                raise ValueError(
                    f"Duplicate short code {room.short_code!r} (room {room.id})"
                )
            seen_ids.add(room.id)
            seen_codes.add(room.short_code)
        return self


DEFAULT_ROOMS: tuple[dict[str, object], ...] = (
    {"id": "room-a", "name": "Room A - Main Storage", "short_code": "A", "rows": 10, "columns": 10},
    {"id": "room-b", "name": "Room B - Overflow", "short_code": "B", "rows": 8, "columns": 12},
    {"id": "room-c", "name": "Room C - Cold Storage", "short_code": "C", "rows": 6, "columns": 8},
)
