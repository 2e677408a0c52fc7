"""Subcommand modules for bentoctl.

Provides register_commands() which uses deferred imports to keep
``bentoctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from bentoctl.commands.inspect import inspect_cmd
    from bentoctl.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(inspect_cmd)
