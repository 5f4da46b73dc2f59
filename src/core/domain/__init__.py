"""
Domain models and value objects.

Contains the Pair product type and its free functions.
"""

from src.core.domain.pair import (
    PAIR_TYPE_IDENT,
    CapabilityMethod,
    Pair,
    fst,
    pair,
    pair_of,
    requires,
    snd,
    swap,
)

__all__ = [
    # Constants
    "PAIR_TYPE_IDENT",
    # Pair model
    "Pair",
    "CapabilityMethod",
    "requires",
    # Free functions
    "pair_of",
    "pair",
    "fst",
    "snd",
    "swap",
]
