"""Simulate command: replay a scripted operator session.

A script is a JSON list of steps executed in order against one session::

    [
        {"op": "load", "reference": "GC-1001",
         "items": [{"id": "1", "qty": 5, "prefix": "RICE"}]},
        {"op": "assist", "item_id": "1"},
        {"op": "allocate", "slot": "A-R01-C01", "item_ids": ["1"], "mode": "vertical"},
        {"op": "search", "query": "rice"},
        {"op": "undo"},
        {"op": "grid"}
    ]

Capacity shortfalls are printed and the script continues; configuration
errors stop it.
"""

import json
from pathlib import Path
from typing import Annotated, Literal

import typer
from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from storerooms.application import WarehouseSession
from storerooms.domain import CapacityError, ConfigError, FillMode
from storerooms.infrastructure import (
    GridFormatter,
    JsonPendingItemSource,
    PendingItemRecord,
    PendingItemsFormatter,
    SlotDetailFormatter,
    StatsFormatter,
)

StepOp = Literal[
    "load",
    "room",
    "select",
    "assist",
    "allocate",
    "remove",
    "clear",
    "undo",
    "search",
    "grid",
    "stats",
    "pending",
    "detail",
]


class ScriptStep(BaseModel):
    """One operation of a simulation script."""

    model_config = ConfigDict(extra="forbid")

    op: StepOp
    reference: str | None = None
    items: list[PendingItemRecord] | None = None
    room_id: str | None = None
    item_id: str | None = None
    item_ids: list[str] | None = None
    slot: str | None = None
    slots: list[str] | None = None
    mode: FillMode | None = None
    query: str | None = None


_SCRIPT = TypeAdapter(list[ScriptStep])


def load_script(path: Path) -> list[ScriptStep]:
    if not path.exists():
        raise ConfigError(
            message=f"Script not found: {path}", error_type="file_not_found", path=path
        )
    try:
        return _SCRIPT.validate_python(json.loads(path.read_text(encoding="utf-8")))
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in script: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
        )
    except PydanticValidationError as e:
        raise ConfigError(
            message=f"Invalid script {path}: {e.error_count()} errors\n{e}",
            error_type="validation",
            path=path,
        )


def run_step(session: WarehouseSession, step: ScriptStep) -> str:
    """Execute one step and return the text to print."""
    if step.op == "load":
        if step.reference is None:
            raise ConfigError("load step needs a reference", error_type="validation")
        items = [r.to_domain() for r in step.items] if step.items is not None else None
        loaded = session.load_consignment(step.reference, items)
        return f"Loaded {len(loaded)} items for {step.reference}"
    if step.op == "room":
        session.select_room(_required(step.room_id, "room_id"))
        return f"Current room: {session.current_room_id}"
    if step.op == "select":
        session.selected_item_ids = set(step.item_ids or [])
        return f"Selected {len(session.selected_item_ids)} items"
    if step.op == "assist":
        return session.assist(_required(step.item_id, "item_id")).message
    if step.op == "allocate":
        result = session.request_allocation(
            _required(step.slot, "slot"), item_ids=step.item_ids, mode=step.mode
        )
        if result.noop:
            return result.message
        return f"{result.message}: {', '.join(result.slot_ids)}"
    if step.op == "remove":
        if step.slot is not None:
            return session.remove_slot(step.slot).message
        return session.remove_slots(step.slots or []).message
    if step.op == "clear":
        return session.clear_room(step.room_id).message
    if step.op == "undo":
        return session.undo().message
    if step.op == "search":
        matches = session.search(step.query, step.room_id)
        return f"{len(matches)} matches: {', '.join(sorted(matches))}"
    if step.op == "detail":
        return SlotDetailFormatter().format(session.slot_detail(_required(step.slot, "slot")))
    if step.op == "pending":
        return PendingItemsFormatter().format(session.pending_items(step.query))
    room_id = step.room_id or session.current_room_id
    room = session.registry.get(room_id)
    if step.op == "stats":
        return StatsFormatter().format(room, session.stats(room_id))
    highlight = session.search(step.query, room_id) if step.query else frozenset()
    return GridFormatter().format(room, session.slots(room_id), highlight)


def _required(value: str | None, name: str) -> str:
    if value is None:
        raise ConfigError(f"Step is missing {name}", error_type="validation")
    return value


def simulate_command(
    ctx: typer.Context,
    script: Annotated[
        Path,
        typer.Argument(help="Path to a JSON list of session steps"),
    ],
    items_file: Annotated[
        Path | None,
        typer.Option("--items", "-i", help="JSON file mapping consignment ids to items"),
    ] = None,
) -> None:
    """Run a scripted operator session against an in-memory warehouse."""
    from storerooms.cli.main import get_state

    state = get_state(ctx)
    try:
        steps = load_script(script)
        source = JsonPendingItemSource(items_file) if items_file else None
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    session = state.factory.create_session(item_source=source)
    for number, step in enumerate(steps, start=1):
        typer.echo(f"[{number}] {step.op}")
        try:
            typer.echo(run_step(session, step))
        except CapacityError as e:
            typer.echo(f"Error: {e}", err=True)
        except (ConfigError, KeyError, ValueError, RuntimeError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
