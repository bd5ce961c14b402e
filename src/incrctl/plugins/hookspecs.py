"""Pluggy hook specifications for incrctl extensions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from incrctl.adapters.registry import VariantSpec

hookspec = pluggy.HookspecMarker("incrctl")


class IncrctlHookSpec:
    """Hook specifications for the incrctl plugin system."""

    @hookspec
    def register_operand_variants(self) -> list[VariantSpec] | None:
        """Return operand variants to add to the registry at start-up."""
