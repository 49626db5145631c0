"""Subcommand modules for optica.

Provides register_commands() which uses deferred imports to keep
``optica --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from optica.commands.laws import laws
    from optica.commands.validate import validate

    cli.add_command(laws)
    cli.add_command(validate)
