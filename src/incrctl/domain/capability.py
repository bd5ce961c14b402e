"""Capability contract shared by every operand variant.

Variants satisfy :class:`Combinable` structurally. They never need to
import or subclass anything from this module, so independently shipped
modules can provide new variants.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Protocol, TypeAlias, runtime_checkable

Number: TypeAlias = int | float | Fraction | Decimal


@runtime_checkable
class Combinable(Protocol):
    """Anything that can be combined with a numeric increment."""

    def combine(self, increment: Number) -> Number:
        """Return a new number: this operand's value plus *increment*."""
        ...
