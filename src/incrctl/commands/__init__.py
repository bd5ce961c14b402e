"""Subcommand modules for incrctl.

Provides register_commands() which uses deferred imports to keep
``incrctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from incrctl.commands.increment import increment_cmd
    from incrctl.commands.variants import variants

    cli.add_command(increment_cmd)
    cli.add_command(variants)
