"""Command: increment a raw value through an operand variant."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from incrctl.commands._base import IncrCommand

if TYPE_CHECKING:
    from incrctl.commands._context import AppContext


@click.command(
    "increment",
    cls=IncrCommand,
    examples="""\
  incrctl increment 41
  incrctl increment 2.5 --as numeric
  incrctl increment 3/4 --as rational
  incrctl --json increment 1
  incrctl increment -- -1""",
)
@click.argument("value")
@click.option(
    "--as",
    "variant",
    default=None,
    help="Operand variant tag (default from [operands] default_variant).",
)
@click.pass_obj
def increment_cmd(app: AppContext, value: str, variant: str | None) -> None:
    """Add one to VALUE."""
    from incrctl.services.increment import IncrementService

    svc = IncrementService(app.registry, default_variant=app.settings.operands.default_variant)
    app.emit(svc.increment(value, variant))
