"""Command: list registered operand variants."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from incrctl.commands._base import IncrCommand

if TYPE_CHECKING:
    from incrctl.commands._context import AppContext


@click.command(
    cls=IncrCommand,
    examples="""\
  incrctl variants
  incrctl --no-plugins variants
  incrctl -q variants""",
)
@click.pass_obj
def variants(app: AppContext) -> None:
    """List operand variants available to 'increment'."""
    from incrctl.services.increment import IncrementService

    svc = IncrementService(app.registry, default_variant=app.settings.operands.default_variant)
    app.emit(svc.list_variants())
