"""Subcommand modules for nestform.

Provides register_commands() which uses deferred imports to keep
``nestform --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from nestform.commands.limits import limits
    from nestform.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(limits)
