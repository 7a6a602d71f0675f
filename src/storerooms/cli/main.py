"""Typer CLI for the warehouse slot allocator."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from storerooms.application import ServiceFactory, get_factory
from storerooms.application.config import ConfigError, default_config, load_config
from storerooms.cli.commands import simulate_command, validate_command
from storerooms.cli.commands.validate import display_load_error
from storerooms.infrastructure import GridFormatter, StatsFormatter


@dataclass
class CliState:
    """Objects shared by every command of one invocation."""

    factory: ServiceFactory


def get_state(ctx: typer.Context) -> CliState:
    if ctx.obj is None:
        ctx.obj = CliState(factory=get_factory())
    return ctx.obj


app = typer.Typer(
    name="storerooms",
    help="Allocate pending consignment items to warehouse storage slots.",
)

app.command(name="validate")(validate_command)
app.command(name="simulate")(simulate_command)


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON warehouse configuration"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log allocation decisions to stderr"),
    ] = False,
) -> None:
    """Warehouse slot allocation tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand == "validate":
        return
    if config_file is None:
        config = default_config()
    else:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            display_load_error(e)
            raise typer.Exit(code=1)
    ctx.obj = CliState(factory=get_factory(config))


@app.command()
def rooms(ctx: typer.Context) -> None:
    """List configured rooms with their capacity."""
    factory = get_state(ctx).factory
    store = factory.get_store()
    for room in factory.get_registry():
        typer.echo(StatsFormatter().format(room, store.stats(room.id)))


@app.command()
def grid(
    ctx: typer.Context,
    room_id: Annotated[str, typer.Argument(help="Room id, e.g. room-a")],
) -> None:
    """Print the slot grid of a room."""
    factory = get_state(ctx).factory
    try:
        room = factory.get_registry().get(room_id)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(GridFormatter().format(room, factory.get_store().get(room_id)))


@app.command()
def serve(
    ctx: typer.Context,
    host: Annotated[str, typer.Option("--host", help="Bind address")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", "-p", help="Bind port")] = 8000,
) -> None:
    """Run the REST API with uvicorn."""
    import uvicorn

    from storerooms.web.app import create_app

    uvicorn.run(create_app(get_state(ctx).factory), host=host, port=port)


if __name__ == "__main__":
    app()
