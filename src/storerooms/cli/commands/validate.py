"""Validate command for checking warehouse configuration files."""

from pathlib import Path
from typing import Annotated

import typer

from storerooms.application.config import ConfigError, load_config


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a warehouse configuration file.

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors (cannot be used)

    Example:
        storerooms validate godown.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    total = sum(room.capacity for room in config.rooms)
    typer.echo(f"Rooms: {len(config.rooms)} ({total} slots)")
    for room in config.rooms:
        typer.echo(f"  {room.id}: {room.name} [{room.short_code}] {room.rows}x{room.columns}")
    typer.echo(f"History depth: {config.history_depth}")
    typer.echo()
    typer.echo("Validation passed.")


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            path = detail.get("path") or "<root>"
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)
