"""Laws — проверка алгебраических законов type classes.

- checks: отдельные законы (Setoid, Ord, Semigroup, Functor, ...)
- suite: прогон всех применимых законов для набора примеров
"""

import logging

from .checks import (
    DEFAULT_MAX_LAW_CASES,
    LawResult,
    apply_composition,
    bifunctor_composition,
    bifunctor_identity,
    chain_associativity,
    comonad_left_identity,
    comonad_right_identity,
    extend_associativity,
    functor_composition,
    functor_identity,
    ord_antisymmetry,
    ord_totality,
    ord_transitivity,
    semigroup_associativity,
    semigroupoid_associativity,
    setoid_reflexivity,
    setoid_symmetry,
    setoid_transitivity,
    swap_involution,
)
from .suite import LawSuiteConfig, LawSuiteReport, LawViolation, run_law_suite

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_MAX_LAW_CASES",
    "LawResult",
    "apply_composition",
    "bifunctor_composition",
    "bifunctor_identity",
    "chain_associativity",
    "comonad_left_identity",
    "comonad_right_identity",
    "extend_associativity",
    "functor_composition",
    "functor_identity",
    "ord_antisymmetry",
    "ord_totality",
    "ord_transitivity",
    "semigroup_associativity",
    "semigroupoid_associativity",
    "setoid_reflexivity",
    "setoid_symmetry",
    "setoid_transitivity",
    "swap_involution",
    "LawSuiteConfig",
    "LawSuiteReport",
    "LawViolation",
    "run_law_suite",
]
