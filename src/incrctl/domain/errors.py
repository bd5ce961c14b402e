"""Typed failures raised by the domain layer.

The dispatcher performs no recovery; these propagate unchanged to the
caller, which decides how to present them.
"""

from __future__ import annotations

_PREVIEW_LIMIT = 40


def _preview(text: str) -> str:
    if len(text) <= _PREVIEW_LIMIT:
        return repr(text)
    return f"{text[:_PREVIEW_LIMIT]!r}... ({len(text)} chars)"


class OperandError(Exception):
    """Base class for operand construction and dispatch failures."""


class ParseError(OperandError, ValueError):
    """Raised when text is not a valid numeric literal.

    Always raised at construction time, never from ``combine()``.
    """

    def __init__(self, text: str, reason: str = "Not a numeric literal") -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"{reason}: {_preview(text)}")


class UnsupportedOperand(OperandError, TypeError):
    """Raised when an object without ``combine()`` reaches the dispatcher."""

    def __init__(self, operand: object) -> None:
        self.operand = operand
        super().__init__(
            f"Operand of type {type(operand).__name__} does not implement combine()"
        )
