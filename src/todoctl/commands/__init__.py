"""Subcommand modules for todoctl.

Provides register_commands() which uses deferred imports so that
``todoctl --help`` does not load the services.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from todoctl.commands.init_cmd import init_cmd
    from todoctl.commands.list_cmd import list_cmd
    from todoctl.commands.new import new

    cli.add_command(new)
    cli.add_command(init_cmd)
    cli.add_command(list_cmd)
