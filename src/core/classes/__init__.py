"""
Type classes — capability probing, делегирование и show.

Внешний collaborator для Pair: определяет, поддерживает ли значение
equality / ordering / combination, и выполняет эти операции через
собственную реализацию значения.
"""

from src.core.classes.capabilities import (
    COMBINABLE_TYPES,
    NAN_HASH,
    NUMERIC_TYPES,
    ORDERED_SCALAR_TYPES,
    SCALAR_TYPES,
    Capability,
    MissingCapabilityError,
    concat,
    equals,
    fmap,
    lte,
    probe_capabilities,
    structural_hash,
    test_combinable,
    test_equality,
    test_functor,
    test_order,
)
from src.core.classes.show import SHOW_CIRCULAR, show
from src.core.classes.type_classes import TypeClass, supported_type_classes

__all__ = [
    # Capabilities — Constants
    "COMBINABLE_TYPES",
    "NAN_HASH",
    "NUMERIC_TYPES",
    "ORDERED_SCALAR_TYPES",
    "SCALAR_TYPES",
    # Capabilities — Types
    "Capability",
    # Capabilities — Exceptions
    "MissingCapabilityError",
    # Capabilities — Tests
    "probe_capabilities",
    "test_combinable",
    "test_equality",
    "test_functor",
    "test_order",
    # Capabilities — Delegation
    "concat",
    "equals",
    "fmap",
    "lte",
    # Capabilities — Hash
    "structural_hash",
    # Show
    "SHOW_CIRCULAR",
    "show",
    # Type classes
    "TypeClass",
    "supported_type_classes",
]
