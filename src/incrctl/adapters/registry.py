"""Operand registry: variant tag -> construction logic.

The registry only grows. Variants are registered at start-up (built-ins,
then plugins), after which the registry is sealed and only read.
Registration is serialized by a lock. Lookups take no lock because the
table no longer changes once sealed.

Only boundary code consults the registry. The dispatcher never does.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any

from incrctl.domain.capability import Combinable
from incrctl.domain.errors import UnsupportedOperand
from incrctl.domain.operands import NumericOperand, TextNumericOperand, parse_number

logger = logging.getLogger(__name__)

OperandFactory = Callable[[Any], Combinable]


class RegistrationError(ValueError):
    """Raised when a variant cannot be added to the registry."""


class UnknownVariantError(LookupError):
    """Raised when no variant is registered under a tag."""

    def __init__(self, tag: str, known: list[str]) -> None:
        self.tag = tag
        self.known = known
        super().__init__(f"No operand variant registered for {tag!r} (known: {', '.join(known)})")


@dataclass(frozen=True)
class VariantSpec:
    """A registrable variant: its tag and how to build it from raw input."""

    tag: str
    factory: OperandFactory
    description: str = ""


def normalize_tag(tag: str) -> str:
    return tag.strip().lower()


class OperandRegistry:
    """Process-wide table of operand variants."""

    def __init__(self, specs: list[VariantSpec] | None = None) -> None:
        self._specs: dict[str, VariantSpec] = {}
        self._lock = threading.Lock()
        self._sealed = False
        for spec in specs or []:
            self.register(spec)

    # ------------------------------------------------------------------
    # Start-up
    # ------------------------------------------------------------------

    def register(self, spec: VariantSpec) -> None:
        """Add *spec* to the registry.

        Re-registering the identical spec is a no-op.

        Raises:
            RegistrationError: Empty tag, non-callable factory, a different
                spec already registered under the tag, or a sealed registry.
        """
        tag = normalize_tag(spec.tag)
        if not tag:
            msg = "Variant tag must not be empty"
            raise RegistrationError(msg)
        if not callable(spec.factory):
            msg = f"Variant {tag!r} factory is not callable"
            raise RegistrationError(msg)
        spec = replace(spec, tag=tag)

        with self._lock:
            if self._sealed:
                msg = f"Registry is sealed; cannot register {tag!r}"
                raise RegistrationError(msg)
            existing = self._specs.get(tag)
            if existing is not None:
                if existing == spec:
                    return
                msg = f"Variant {tag!r} is already registered"
                raise RegistrationError(msg)
            self._specs[tag] = spec

        logger.debug("Registered operand variant: %s", tag)

    def seal(self) -> None:
        """End start-up: refuse any further registration."""
        with self._lock:
            self._sealed = True
        logger.debug("Operand registry sealed with %d variants", len(self._specs))

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, tag: str) -> VariantSpec:
        """Return the spec registered under *tag*.

        Raises:
            UnknownVariantError: If *tag* is not registered.
        """
        try:
            return self._specs[normalize_tag(tag)]
        except KeyError:
            raise UnknownVariantError(tag, self.tags()) from None

    def adapt(self, tag: str, raw: Any) -> Combinable:
        """Build the operand variant registered under *tag* from *raw*.

        Factory errors (``ParseError``, ``TypeError``) propagate unchanged.

        Raises:
            UnknownVariantError: If *tag* is not registered.
            UnsupportedOperand: If the factory output has no callable ``combine``.
        """
        operand = self.get(tag).factory(raw)
        if not callable(getattr(operand, "combine", None)):
            raise UnsupportedOperand(operand)
        return operand

    def tags(self) -> list[str]:
        return sorted(self._specs)

    def specs(self) -> MappingProxyType[str, VariantSpec]:
        """Read-only view of the registration table."""
        return MappingProxyType(self._specs)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and normalize_tag(tag) in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[VariantSpec]:
        return iter([self._specs[tag] for tag in self.tags()])


# ---------------------------------------------------------------------------
# Built-in variants
# ---------------------------------------------------------------------------


def _numeric_from_raw(raw: Any) -> NumericOperand:
    if isinstance(raw, str):
        return NumericOperand(parse_number(raw))
    return NumericOperand(raw)


def _text_from_raw(raw: Any) -> TextNumericOperand:
    return TextNumericOperand(str(raw))


def builtin_variants() -> list[VariantSpec]:
    """Return the variants every registry starts with."""
    return [
        VariantSpec("numeric", _numeric_from_raw, "Number, or text parsed to a number up front"),
        VariantSpec("text", _text_from_raw, "Numeric literal kept as text"),
    ]
