"""
Functions — curried dispatch-функции над type classes

Каждая функция принимает аргументы по одному и делегирует:
- встроенным значениям — через capabilities (equals / lte / concat / fmap)
- Pair и другим значениям с протоколом — их собственному методу

Отсутствующая операция → MissingCapabilityError.

Examples:
    >>> from src.core.domain import Pair
    >>> concat(Pair("abc", [1, 2, 3]))(Pair("xyz", [4, 5, 6]))
    Pair ("abcxyz") ([1, 2, 3, 4, 5, 6])
    >>> map_(str.upper)(Pair(1, "abc"))
    Pair (1) ("ABC")
"""

from functools import reduce as fold
from typing import Any, Callable

from src.core.classes import capabilities
from src.core.classes.capabilities import MissingCapabilityError


def _method(value: Any, name: str, requirement: str) -> Callable[..., Any]:
    if not hasattr(value, name):
        raise MissingCapabilityError(name, requirement, value)
    return getattr(value, name)


# =============================================================================
# SETOID / ORD / SEMIGROUP
# =============================================================================


def equals(x: Any) -> Callable[[Any], bool]:
    """``equals(x)(y)`` — структурная equality."""
    return lambda y: capabilities.equals(x, y)


def lte(y: Any) -> Callable[[Any], bool]:
    """
    ``lte(y)(x)`` → ``x <= y``.

    Порядок аргументов позволяет фильтровать: ``filter(lte(q), values)``
    оставляет значения, не превосходящие q.
    """
    return lambda x: capabilities.lte(x, y)


def concat(x: Any) -> Callable[[Any], Any]:
    """``concat(x)(y)`` — комбинация semigroup."""
    return lambda y: capabilities.concat(x, y)


# =============================================================================
# SEMIGROUPOID
# =============================================================================


def compose(f: Any) -> Callable[[Any], Any]:
    """
    ``compose(f)(g)`` — композиция semigroupoid: сначала g, затем f.

    Для Pair: ``compose(Pair(x, y))(Pair(v, w))`` → ``Pair(v, y)``.
    """
    return lambda g: _method(g, "compose", "Semigroupoid")(f)


# =============================================================================
# FUNCTOR / BIFUNCTOR / APPLY / CHAIN
# =============================================================================


def map_(f: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """``map_(f)(functor)`` — map для Pair, list, tuple, dict."""
    return lambda functor: capabilities.fmap(f, functor)


def bimap(f: Callable[[Any], Any]) -> Callable[[Callable[[Any], Any]], Callable[[Any], Any]]:
    """``bimap(f)(g)(Pair(x, y))`` → ``Pair(f(x), g(y))``"""
    return lambda g: lambda bifunctor: _method(bifunctor, "bimap", "Bifunctor")(f, g)


def ap(apply_f: Any) -> Callable[[Any], Any]:
    """``ap(Pair(v, f))(Pair(x, y))`` → ``Pair(concat(v, x), f(y))``"""
    return lambda apply_x: _method(apply_x, "ap", "Apply")(apply_f)


def chain(f: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """``chain(f)(m)`` — monadic bind."""
    return lambda m: _method(m, "chain", "Chain")(f)


# =============================================================================
# FOLDABLE / TRAVERSABLE
# =============================================================================


def reduce(f: Callable[[Any, Any], Any], initial: Any) -> Callable[[Any], Any]:
    """
    ``reduce(f, x)(foldable)`` — левая свёртка.

    Pair сворачивается только по snd; list / tuple поэлементно,
    dict по значениям.
    """

    def reducer(foldable: Any) -> Any:
        if isinstance(foldable, (list, tuple)):
            return fold(f, foldable, initial)
        if isinstance(foldable, dict):
            return fold(f, foldable.values(), initial)
        return _method(foldable, "reduce", "Foldable")(f, initial)

    return reducer


def traverse(type_rep: Any, f: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """``traverse(list, f)(Pair(x, y))`` → ``fmap(Pair(x, _), f(y))``"""
    return lambda traversable: _method(traversable, "traverse", "Traversable")(type_rep, f)


# =============================================================================
# EXTEND / COMONAD
# =============================================================================


def extend(f: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """``extend(f)(Pair(x, y))`` → ``Pair(x, f(Pair(x, y)))``"""
    return lambda w: _method(w, "extend", "Extend")(f)


def extract(w: Any) -> Any:
    """``extract(Pair(x, y))`` → ``y``"""
    return _method(w, "extract", "Comonad")()
