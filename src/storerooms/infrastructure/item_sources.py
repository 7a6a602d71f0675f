"""Pending item sources backed by JSON files or in-memory data.

The JSON layout maps consignment references to their content items::

    {
        "GC-1001": [
            {"id": "1", "qty": 3, "contents": "Rice", "packing": "Bag",
             "prefix": "RICE", "weight": 150}
        ]
    }
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from storerooms.application.config.loader import _extract_validation_errors
from storerooms.domain.entities import PendingItem
from storerooms.domain.errors import ConfigError

logger = logging.getLogger(__name__)


class PendingItemRecord(BaseModel):
    """Wire form of a pending item; ``qty`` is accepted as an alias."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0, alias="qty")
    contents: str = ""
    packing: str = ""
    prefix: str = ""
    weight: float = Field(default=0.0, ge=0)

    def to_domain(self) -> PendingItem:
        return PendingItem(
            id=self.id,
            quantity=self.quantity,
            contents=self.contents,
            packing=self.packing,
            prefix=self.prefix,
            weight=self.weight,
        )


_CATALOG = TypeAdapter(dict[str, list[PendingItemRecord]])


class InMemoryPendingItemSource:
    """Serves pending items from a mapping of reference -> items."""

    def __init__(self, items: Mapping[str, Sequence[PendingItem]] | None = None) -> None:
        self._items = {ref: list(entries) for ref, entries in (items or {}).items()}

    def add(self, reference: str, items: Sequence[PendingItem]) -> None:
        self._items[reference] = list(items)

    def references(self) -> list[str]:
        return list(self._items)

    def fetch(self, reference: str) -> list[PendingItem]:
        return list(self._items.get(reference, []))


class JsonPendingItemSource(InMemoryPendingItemSource):
    """Reads a JSON catalog of consignments once, at construction."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(self._read(path))
        logger.debug(f"Loaded {len(self.references())} consignments from {path}")

    @staticmethod
    def _read(path: Path) -> dict[str, list[PendingItem]]:
        if not path.exists():
            raise ConfigError(
                message=f"Items file not found: {path}",
                error_type="file_not_found",
                path=path,
            )
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(
                message=f"Invalid JSON in items file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
                error_type="json_parse",
                path=path,
                details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
            )
        try:
            catalog = _CATALOG.validate_python(data)
        except PydanticValidationError as e:
            details = _extract_validation_errors(e)
            raise ConfigError(
                message=f"Invalid items file: {path}: {len(details)} errors",
                error_type="validation",
                path=path,
                details=details,
            )
        return {
            reference: [record.to_domain() for record in records]
            for reference, records in catalog.items()
        }
