"""The dispatcher: a single operation over the capability contract."""

from __future__ import annotations

from typing import TYPE_CHECKING

from incrctl.domain.errors import UnsupportedOperand

if TYPE_CHECKING:
    from incrctl.domain.capability import Combinable, Number


def increment(operand: Combinable) -> Number:
    """Return *operand* combined with one.

    INVARIANT: no branching on the operand's concrete type. The operand
    computes its own result.

    Raises:
        UnsupportedOperand: If *operand* has no callable ``combine``.
    """
    try:
        # a non-callable ``combine`` has no ``__call__``
        combine = operand.combine.__call__
    except AttributeError as exc:
        raise UnsupportedOperand(operand) from exc
    return combine(1)
