"""Built-in operand variants.

Each variant owns its representation and implements ``combine()``.
Variants are frozen: ``combine()`` returns a new number and never
mutates the operand. Validation happens in ``__post_init__`` so an
invalid operand can never exist.
"""

from __future__ import annotations

import math
from contextlib import suppress
from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction

from incrctl.domain.capability import Number
from incrctl.domain.errors import ParseError

_NUMERIC_TYPES = (int, float, Fraction, Decimal)
_INFINITY_SPELLINGS = frozenset({"inf", "infinity"})


def parse_number(text: str) -> int | float:
    """Parse a numeric literal.

    Integer literals yield ``int``; anything else ``float()`` accepts
    yields ``float``. Surrounding whitespace is ignored.

    Raises:
        ParseError: Empty, non-numeric, or non-finite (``nan``/``inf``) text,
            or a valid literal too large to represent (an integer beyond the
            interpreter's digit limit, or a float that overflows).
    """
    if not isinstance(text, str):
        msg = f"Expected str, got {type(text).__name__}"
        raise TypeError(msg)

    literal = text.strip()
    with suppress(ValueError):
        return int(literal)
    try:
        value = float(literal)
    except ValueError:
        raise ParseError(text) from None
    if math.isnan(value) or literal.lstrip("+-").lower() in _INFINITY_SPELLINGS:
        raise ParseError(text)
    if math.isinf(value):
        raise ParseError(text, reason="Numeric literal out of range")
    return value


@dataclass(frozen=True)
class NumericOperand:
    """An operand backed by a number."""

    value: Number

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, _NUMERIC_TYPES):
            msg = f"NumericOperand requires a number, got {type(self.value).__name__}"
            raise TypeError(msg)

    def combine(self, increment: Number) -> Number:
        return self.value + increment


@dataclass(frozen=True)
class TextNumericOperand:
    """An operand backed by a numeric literal held as text.

    The literal is parsed once, at construction. ``combine()`` works on
    the parsed value and cannot fail with :class:`ParseError`.
    """

    text: str
    value: int | float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", parse_number(self.text))

    def combine(self, increment: Number) -> Number:
        return self.value + increment
