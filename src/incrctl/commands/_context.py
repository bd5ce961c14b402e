"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Builds the operand registry lazily and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from incrctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from incrctl.adapters.registry import OperandRegistry
    from incrctl.config.settings import IncrSettings
    from incrctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


def build_registry(settings: IncrSettings) -> OperandRegistry:
    """Assemble and seal the operand registry for one process.

    Order: built-in variants, then built-in plugins, then discovered
    plugins (unless disabled). Tags listed in ``[operands] disabled``
    are never registered.
    """
    from incrctl.adapters.registry import OperandRegistry, builtin_variants
    from incrctl.plugins.manager import PluginManager

    disabled = {tag.strip().lower() for tag in settings.operands.disabled}
    registry = OperandRegistry([s for s in builtin_variants() if s.tag not in disabled])

    pm = PluginManager()
    pm.register_builtins()
    if not settings.no_plugins:
        pm.discover_and_load(
            local_dir=settings.local_plugin_dir,
            entry_points=settings.plugins.entry_points,
        )
    pm.collect_variants(registry, disabled=disabled)
    registry.seal()
    logger.debug("Operand variants available: %s", ", ".join(registry.tags()))
    return registry


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The registry is built on first use so ``--help`` and ``--version``
    never trigger plugin discovery.
    """

    def __init__(self, settings: IncrSettings) -> None:
        self.settings = settings
        self._registry: OperandRegistry | None = None

        from incrctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> OperandRegistry:
        """The sealed operand registry (built lazily on first access)."""
        if self._registry is None:
            self._registry = build_registry(self.settings)
        return self._registry

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
