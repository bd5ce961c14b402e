"""Built-in rational operand plugin.

Adds a ``rational`` variant backed by :class:`fractions.Fraction`. The
module depends only on the capability contract and the domain errors;
neither the dispatcher nor the other variants know it exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any

import pluggy

from incrctl.adapters.registry import VariantSpec
from incrctl.domain.capability import Number
from incrctl.domain.errors import ParseError

hookimpl = pluggy.HookimplMarker("incrctl")


@dataclass(frozen=True)
class RationalOperand:
    """An exact rational operand, e.g. ``3/4``."""

    value: Fraction

    @classmethod
    def from_raw(cls, raw: Any) -> RationalOperand:
        """Build from a ``Fraction``-compatible number or literal such as ``"3/4"``."""
        if isinstance(raw, bool):
            msg = "RationalOperand does not accept bool"
            raise TypeError(msg)
        if isinstance(raw, str):
            try:
                return cls(Fraction(raw.strip()))
            except (ValueError, ZeroDivisionError):
                raise ParseError(raw) from None
        try:
            return cls(Fraction(raw))
        except (ValueError, OverflowError):
            # nan / inf floats
            raise ParseError(str(raw)) from None

    def combine(self, increment: Number) -> Number:
        return self.value + Fraction(increment)


class RationalPlugin:
    """Contributes the ``rational`` operand variant."""

    @hookimpl
    def register_operand_variants(self) -> list[VariantSpec]:
        return [
            VariantSpec("rational", RationalOperand.from_raw, "Exact fraction such as 3/4"),
        ]
