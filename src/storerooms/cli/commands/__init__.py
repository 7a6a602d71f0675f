"""CLI command implementations for the storerooms application.

This package contains subcommands for the storerooms CLI, including:
- validate: Validate a configuration file
- simulate: Replay a scripted operator session
"""

from storerooms.cli.commands.simulate import simulate_command
from storerooms.cli.commands.validate import validate_command

__all__ = ["simulate_command", "validate_command"]
