"""Algebraic law checks — проверка законов type classes на наборе примеров.

Каждая проверка перебирает комбинации примеров (ограничено max_cases) и
возвращает LawResult. Сравнение результатов — структурная equality из
capabilities, поэтому результаты должны быть Setoid.

Законы:
- Setoid: reflexivity, symmetry, transitivity
- Ord: totality, antisymmetry, transitivity
- Semigroup: associativity
- Semigroupoid: associativity
- Functor: identity, composition
- Bifunctor: identity, composition
- Apply: composition
- Chain: associativity
- Extend: associativity
- Comonad: left identity, right identity
- Pair: swap involution
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Final, Iterable, Iterator, Sequence, Tuple

from src.core.classes import capabilities
from src.core.domain.pair import swap

logger = logging.getLogger(__name__)

# Ограничение на число проверяемых комбинаций (тройки растут как n^3)
DEFAULT_MAX_LAW_CASES: Final[int] = 1000


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class LawResult:
    """Результат проверки одного закона."""

    law: str
    holds: bool
    cases_checked: int

    # Первый контрпример (пусто, если закон выполняется)
    details: str


def _identity(value: Any) -> Any:
    return value


def _compose2(f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return lambda value: f(g(value))


def _check(
    law: str,
    cases: Iterable[Tuple[Any, ...]],
    predicate: Callable[..., bool],
    max_cases: int,
) -> LawResult:
    checked = 0
    for case in itertools.islice(cases, max_cases):
        checked += 1
        if not predicate(*case):
            details = f"counterexample: {', '.join(repr(value) for value in case)}"
            logger.debug("Law %s failed after %d cases (%s)", law, checked, details)
            return LawResult(law=law, holds=False, cases_checked=checked, details=details)
    return LawResult(law=law, holds=True, cases_checked=checked, details="")


def _singles(values: Sequence[Any]) -> Iterator[Tuple[Any]]:
    return ((value,) for value in values)


def _pairs(values: Sequence[Any]) -> Iterator[Tuple[Any, ...]]:
    return itertools.product(values, repeat=2)


def _triples(values: Sequence[Any]) -> Iterator[Tuple[Any, ...]]:
    return itertools.product(values, repeat=3)


# =============================================================================
# SETOID
# =============================================================================


def setoid_reflexivity(values: Sequence[Any], max_cases: int = DEFAULT_MAX_LAW_CASES) -> LawResult:
    """``equals(a, a)``"""
    return _check(
        "Setoid.reflexivity",
        _singles(values),
        lambda a: capabilities.equals(a, a),
        max_cases,
    )


def setoid_symmetry(values: Sequence[Any], max_cases: int = DEFAULT_MAX_LAW_CASES) -> LawResult:
    """``equals(a, b) == equals(b, a)``"""
    return _check(
        "Setoid.symmetry",
        _pairs(values),
        lambda a, b: capabilities.equals(a, b) == capabilities.equals(b, a),
        max_cases,
    )


def setoid_transitivity(values: Sequence[Any], max_cases: int = DEFAULT_MAX_LAW_CASES) -> LawResult:
    """``equals(a, b) and equals(b, c)`` → ``equals(a, c)``"""
    return _check(
        "Setoid.transitivity",
        _triples(values),
        lambda a, b, c: not (capabilities.equals(a, b) and capabilities.equals(b, c))
        or capabilities.equals(a, c),
        max_cases,
    )


# =============================================================================
# ORD
# =============================================================================


def ord_totality(values: Sequence[Any], max_cases: int = DEFAULT_MAX_LAW_CASES) -> LawResult:
    """``lte(a, b) or lte(b, a)``"""
    return _check(
        "Ord.totality",
        _pairs(values),
        lambda a, b: capabilities.lte(a, b) or capabilities.lte(b, a),
        max_cases,
    )


def ord_antisymmetry(values: Sequence[Any], max_cases: int = DEFAULT_MAX_LAW_CASES) -> LawResult:
    """``lte(a, b) and lte(b, a)`` → ``equals(a, b)``"""
    return _check(
        "Ord.antisymmetry",
        _pairs(values),
        lambda a, b: not (capabilities.lte(a, b) and capabilities.lte(b, a))
        or capabilities.equals(a, b),
        max_cases,
    )


def ord_transitivity(values: Sequence[Any], max_cases: int = DEFAULT_MAX_LAW_CASES) -> LawResult:
    """``lte(a, b) and lte(b, c)`` → ``lte(a, c)``"""
    return _check(
        "Ord.transitivity",
        _triples(values),
        lambda a, b, c: not (capabilities.lte(a, b) and capabilities.lte(b, c))
        or capabilities.lte(a, c),
        max_cases,
    )


# =============================================================================
# SEMIGROUP / SEMIGROUPOID
# =============================================================================


def semigroup_associativity(
    values: Sequence[Any], max_cases: int = DEFAULT_MAX_LAW_CASES
) -> LawResult:
    """``concat(concat(a, b), c)`` равно ``concat(a, concat(b, c))``"""
    return _check(
        "Semigroup.associativity",
        _triples(values),
        lambda a, b, c: capabilities.equals(
            capabilities.concat(capabilities.concat(a, b), c),
            capabilities.concat(a, capabilities.concat(b, c)),
        ),
        max_cases,
    )


def semigroupoid_associativity(
    values: Sequence[Any], max_cases: int = DEFAULT_MAX_LAW_CASES
) -> LawResult:
    """``a.compose(b).compose(c)`` равно ``a.compose(b.compose(c))``"""
    return _check(
        "Semigroupoid.associativity",
        _triples(values),
        lambda a, b, c: capabilities.equals(a.compose(b).compose(c), a.compose(b.compose(c))),
        max_cases,
    )


# =============================================================================
# FUNCTOR / BIFUNCTOR
# =============================================================================


def functor_identity(values: Sequence[Any], max_cases: int = DEFAULT_MAX_LAW_CASES) -> LawResult:
    """``fmap(id, u)`` равно ``u``"""
    return _check(
        "Functor.identity",
        _singles(values),
        lambda u: capabilities.equals(capabilities.fmap(_identity, u), u),
        max_cases,
    )


def functor_composition(
    values: Sequence[Any],
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    max_cases: int = DEFAULT_MAX_LAW_CASES,
) -> LawResult:
    """``fmap(f ∘ g, u)`` равно ``fmap(f, fmap(g, u))``"""
    return _check(
        "Functor.composition",
        _singles(values),
        lambda u: capabilities.equals(
            capabilities.fmap(_compose2(f, g), u),
            capabilities.fmap(f, capabilities.fmap(g, u)),
        ),
        max_cases,
    )


def bifunctor_identity(values: Sequence[Any], max_cases: int = DEFAULT_MAX_LAW_CASES) -> LawResult:
    """``p.bimap(id, id)`` равно ``p``"""
    return _check(
        "Bifunctor.identity",
        _singles(values),
        lambda p: capabilities.equals(p.bimap(_identity, _identity), p),
        max_cases,
    )


def bifunctor_composition(
    values: Sequence[Any],
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    h: Callable[[Any], Any],
    i: Callable[[Any], Any],
    max_cases: int = DEFAULT_MAX_LAW_CASES,
) -> LawResult:
    """``p.bimap(f ∘ g, h ∘ i)`` равно ``p.bimap(g, i).bimap(f, h)``"""
    return _check(
        "Bifunctor.composition",
        _singles(values),
        lambda p: capabilities.equals(
            p.bimap(_compose2(f, g), _compose2(h, i)), p.bimap(g, i).bimap(f, h)
        ),
        max_cases,
    )


# =============================================================================
# APPLY / CHAIN
# =============================================================================


def apply_composition(
    values: Sequence[Any],
    function_values: Sequence[Any],
    max_cases: int = DEFAULT_MAX_LAW_CASES,
) -> LawResult:
    """
    ``v.ap(u.ap(a.map(compose)))`` равно ``v.ap(u).ap(a)``

    Args:
        values: Примеры v
        function_values: Примеры u и a (Apply с функциями внутри)
    """
    def curried_compose(f: Callable[[Any], Any]) -> Callable[[Callable[[Any], Any]], Any]:
        return lambda g: _compose2(f, g)

    cases = (
        (v, u, a)
        for v in values
        for u, a in itertools.product(function_values, repeat=2)
    )
    return _check(
        "Apply.composition",
        cases,
        lambda v, u, a: capabilities.equals(
            v.ap(u.ap(a.map(curried_compose))), v.ap(u).ap(a)
        ),
        max_cases,
    )


def chain_associativity(
    values: Sequence[Any],
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    max_cases: int = DEFAULT_MAX_LAW_CASES,
) -> LawResult:
    """``m.chain(f).chain(g)`` равно ``m.chain(lambda x: f(x).chain(g))``"""
    return _check(
        "Chain.associativity",
        _singles(values),
        lambda m: capabilities.equals(
            m.chain(f).chain(g), m.chain(lambda value: f(value).chain(g))
        ),
        max_cases,
    )


# =============================================================================
# EXTEND / COMONAD
# =============================================================================


def extend_associativity(
    values: Sequence[Any],
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    max_cases: int = DEFAULT_MAX_LAW_CASES,
) -> LawResult:
    """``w.extend(g).extend(f)`` равно ``w.extend(lambda w_: f(w_.extend(g)))``"""
    return _check(
        "Extend.associativity",
        _singles(values),
        lambda w: capabilities.equals(
            w.extend(g).extend(f), w.extend(lambda inner: f(inner.extend(g)))
        ),
        max_cases,
    )


def comonad_left_identity(
    values: Sequence[Any], max_cases: int = DEFAULT_MAX_LAW_CASES
) -> LawResult:
    """``w.extend(lambda w_: w_.extract())`` равно ``w``"""
    return _check(
        "Comonad.left_identity",
        _singles(values),
        lambda w: capabilities.equals(w.extend(lambda inner: inner.extract()), w),
        max_cases,
    )


def comonad_right_identity(
    values: Sequence[Any],
    f: Callable[[Any], Any],
    max_cases: int = DEFAULT_MAX_LAW_CASES,
) -> LawResult:
    """``w.extend(f).extract()`` равно ``f(w)``"""
    return _check(
        "Comonad.right_identity",
        _singles(values),
        lambda w: capabilities.equals(w.extend(f).extract(), f(w)),
        max_cases,
    )


# =============================================================================
# PAIR
# =============================================================================


def swap_involution(values: Sequence[Any], max_cases: int = DEFAULT_MAX_LAW_CASES) -> LawResult:
    """``swap(swap(p))`` равно ``p``"""
    return _check(
        "Pair.swap_involution",
        _singles(values),
        lambda p: capabilities.equals(swap(swap(p)), p),
        max_cases,
    )
