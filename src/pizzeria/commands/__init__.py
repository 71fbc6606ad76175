"""Subcommand modules for pizzeria.

Provides register_commands() which uses deferred imports to keep
``pizzeria --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from pizzeria.commands.menu import menu

    cli.add_command(menu)

    # --- Standalone commands ---
    from pizzeria.commands.order import order
    from pizzeria.commands.run import run

    cli.add_command(order)
    cli.add_command(run)
