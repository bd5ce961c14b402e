"""IncrementService: adapt raw input, dispatch, report.

This is where the boundary meets the core. Raw values are turned into
operand variants through the registry, handed to the dispatcher, and
any failure is converted into a :class:`ServiceResult` error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from incrctl.adapters.registry import UnknownVariantError
from incrctl.domain.dispatch import increment
from incrctl.domain.errors import ParseError, UnsupportedOperand
from incrctl.services.result import ServiceResult

if TYPE_CHECKING:
    from incrctl.adapters.registry import OperandRegistry
    from incrctl.domain.capability import Number

logger = logging.getLogger(__name__)


def _serialize_number(value: Number) -> int | float | str:
    """JSON-safe form of a result: exact types are rendered as strings."""
    if isinstance(value, (int, float)):
        return value
    return str(value)


class IncrementService:
    """Increment raw input through a chosen operand variant."""

    def __init__(self, registry: OperandRegistry, *, default_variant: str = "text") -> None:
        self._registry = registry
        self._default_variant = default_variant

    def increment(self, raw: Any, variant: str | None = None) -> ServiceResult:
        """Adapt *raw* into *variant* (or the default) and increment it."""
        op = "increment"
        tag = variant or self._default_variant
        try:
            operand = self._registry.adapt(tag, raw)
            value = increment(operand)
        except ParseError as exc:
            return ServiceResult.failure(
                op, "PARSE_ERROR", str(exc), input=exc.text, reason=exc.reason, variant=tag
            )
        except UnknownVariantError as exc:
            return ServiceResult.failure(
                op, "UNKNOWN_VARIANT", str(exc), variant=tag, known=exc.known
            )
        except UnsupportedOperand as exc:
            return ServiceResult.failure(op, "UNSUPPORTED_OPERAND", str(exc), variant=tag)
        except TypeError as exc:
            return ServiceResult.failure(op, "INVALID_OPERAND", str(exc), variant=tag)

        logger.debug("Incremented %r via %s -> %r", raw, tag, value)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "variant": tag,
                "input": raw,
                "result": _serialize_number(value),
                "result_type": type(value).__name__,
            },
        )

    def list_variants(self) -> ServiceResult:
        """List every registered variant tag with its description."""
        items = [{"tag": spec.tag, "description": spec.description} for spec in self._registry]
        return ServiceResult(
            ok=True,
            op="list_variants",
            data={"items": items, "count": len(items), "default": self._default_variant},
        )
