"""Boundary layer: adapts raw external input into operand variants.

Adapters may import from the domain layer. The domain layer never
imports from here.
"""

from incrctl.adapters.registry import (
    OperandRegistry,
    RegistrationError,
    UnknownVariantError,
    VariantSpec,
    builtin_variants,
)

__all__ = [
    "OperandRegistry",
    "RegistrationError",
    "UnknownVariantError",
    "VariantSpec",
    "builtin_variants",
]
