"""
Pair — канонический product type

Значение типа ``Pair[A, B]`` всегда содержит ровно два значения:
``fst`` типа A и ``snd`` типа B.

Immutable Pydantic модель (frozen=True). Любое «изменение» создаёт новый
экземпляр; содержимое слотов не копируется.

Conditional capabilities:
При конструировании оба слота однократно проверяются (probe_capabilities),
результат хранится как Capability bitset. Опциональные методы доступны,
только если bitset содержит нужный флаг:

- equals       → SETOID    (fst и snd Setoid)
- lte          → ORD       (fst и snd Ord)
- concat       → SEMIGROUP (fst и snd Semigroup)
- ap, chain    → APPLY / CHAIN (fst Semigroup)

Отсутствующий метод не виден через ``hasattr``; обращение к нему
поднимает MissingCapabilityError.
"""

import copy
from functools import partial
from typing import Any, Callable, ClassVar, Dict, Final, Generic, Iterator, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, PrivateAttr

from src.core.classes import capabilities
from src.core.classes.capabilities import Capability, MissingCapabilityError
from src.core.classes.show import show as show_value

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")

# =============================================================================
# CONSTANTS
# =============================================================================

# Идентификатор типа (версия 1 структуры Pair)
PAIR_TYPE_IDENT: Final[str] = "pair/Pair@1"

# Какой type class требует каждая опциональная capability (для сообщений об ошибках)
_REQUIREMENTS: Final[Dict[Capability, str]] = {
    Capability.SETOID: "Setoid fst and snd",
    Capability.ORD: "Ord fst and snd",
    Capability.SEMIGROUP: "Semigroup fst and snd",
    Capability.APPLY: "Semigroup fst",
    Capability.CHAIN: "Semigroup fst",
}


# =============================================================================
# CAPABILITY-GATED METHODS
# =============================================================================


class CapabilityMethod:
    """
    Descriptor опционального метода.

    Возвращает bound method, только если экземпляр имеет capability;
    иначе поднимает MissingCapabilityError (подкласс AttributeError).
    """

    def __init__(self, capability: Capability, function: Callable[..., Any]):
        self.capability = capability
        self.function = function
        self.name = function.__name__
        self.__doc__ = function.__doc__

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        if not instance.capabilities & self.capability:
            raise MissingCapabilityError(self.name, _REQUIREMENTS[self.capability], instance)
        return self.function.__get__(instance, owner)


def requires(capability: Capability) -> Callable[[Callable[..., Any]], CapabilityMethod]:
    """Decorator: метод доступен только при наличии capability."""

    def decorator(function: Callable[..., Any]) -> CapabilityMethod:
        return CapabilityMethod(capability, function)

    return decorator


# =============================================================================
# PAIR MODEL
# =============================================================================


class Pair(BaseModel, Generic[A, B]):
    """
    Pair[A, B] — единственный data constructor.

    Examples:
        >>> Pair(1, 2)
        Pair (1) (2)
        >>> Pair("abc", [1, 2, 3]).snd
        [1, 2, 3]
    """

    fst: A
    snd: B

    model_config = ConfigDict(frozen=True, ignored_types=(CapabilityMethod,))

    type_ident: ClassVar[str] = PAIR_TYPE_IDENT

    _capabilities: Capability = PrivateAttr(default=Capability.NONE)

    def __init__(self, fst: A, snd: B) -> None:
        super().__init__(fst=fst, snd=snd)

    def model_post_init(self, __context: Any) -> None:
        self._capabilities = capabilities.probe_capabilities(self.fst, self.snd)

    def model_copy(self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False) -> "Pair":
        """Копия через конструктор: capabilities вычисляются заново."""
        values = {"fst": self.fst, "snd": self.snd, **(update or {})}
        if deep:
            values = copy.deepcopy(values)
        return type(self)(values["fst"], values["snd"])

    @property
    def capabilities(self) -> Capability:
        """Capability bitset, вычисленный при конструировании."""
        return self._capabilities

    # -------------------------------------------------------------------------
    # Show
    # -------------------------------------------------------------------------

    def show(self) -> str:
        """
        ``Pair (x) (y)`` → ``'Pair (' + show(x) + ') (' + show(y) + ')'``

        Examples:
            >>> Pair("abc", [1, 2, 3]).show()
            'Pair ("abc") ([1, 2, 3])'
        """
        return "Pair (" + show_value(self.fst) + ") (" + show_value(self.snd) + ")"

    def __repr__(self) -> str:
        return self.show()

    def __str__(self) -> str:
        return self.show()

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        yield self.fst
        yield self.snd

    # -------------------------------------------------------------------------
    # Setoid / Ord
    # -------------------------------------------------------------------------

    @requires(Capability.SETOID)
    def equals(self, other: Any) -> bool:
        """
        ``Pair(x, y)`` равна ``Pair(v, w)`` тогда и только тогда, когда
        x равно v и y равно w (по equality самих значений).
        """
        if not isinstance(other, Pair):
            return False
        return capabilities.equals(self.fst, other.fst) and capabilities.equals(
            self.snd, other.snd
        )

    @requires(Capability.ORD)
    def lte(self, other: "Pair[A, B]") -> bool:
        """
        Лексикографический порядок: fst решает, если fst не равны,
        иначе решает snd.
        """
        if not isinstance(other, Pair):
            return False
        if capabilities.equals(self.fst, other.fst):
            return capabilities.lte(self.snd, other.snd)
        return capabilities.lte(self.fst, other.fst)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(
            (capabilities.structural_hash(self.fst), capabilities.structural_hash(self.snd))
        )

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.lte(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return other.lte(self)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.lte(other) and not other.lte(self)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return other.lte(self) and not self.lte(other)

    # -------------------------------------------------------------------------
    # Semigroupoid / Semigroup
    # -------------------------------------------------------------------------

    def compose(self, other: "Pair[B, C]") -> "Pair[A, C]":
        """``Pair(x, y).compose(Pair(v, w))`` → ``Pair(x, w)``"""
        return Pair(self.fst, other.snd)

    @requires(Capability.SEMIGROUP)
    def concat(self, other: "Pair[A, B]") -> "Pair[A, B]":
        """
        ``Pair(x, y).concat(Pair(v, w))`` → ``Pair(concat(x, v), concat(y, w))``

        Examples:
            >>> Pair("abc", [1, 2, 3]).concat(Pair("xyz", [4, 5, 6]))
            Pair ("abcxyz") ([1, 2, 3, 4, 5, 6])
        """
        return Pair(
            capabilities.concat(self.fst, other.fst),
            capabilities.concat(self.snd, other.snd),
        )

    # -------------------------------------------------------------------------
    # Functor / Bifunctor
    # -------------------------------------------------------------------------

    def map(self, f: Callable[[B], C]) -> "Pair[A, C]":
        """``Pair(x, y).map(f)`` → ``Pair(x, f(y))``"""
        return Pair(self.fst, f(self.snd))

    def bimap(self, f: Callable[[A], C], g: Callable[[B], D]) -> "Pair[C, D]":
        """``Pair(x, y).bimap(f, g)`` → ``Pair(f(x), g(y))``"""
        return Pair(f(self.fst), g(self.snd))

    # -------------------------------------------------------------------------
    # Apply / Chain
    # -------------------------------------------------------------------------

    @requires(Capability.APPLY)
    def ap(self, other: "Pair[A, Callable[[B], C]]") -> "Pair[A, C]":
        """
        ``Pair(x, y).ap(Pair(v, f))`` → ``Pair(concat(v, x), f(y))``

        Порядок комбинации: сначала fst аргумента, затем fst этой пары.
        """
        return Pair(capabilities.concat(other.fst, self.fst), other.snd(self.snd))

    @requires(Capability.CHAIN)
    def chain(self, f: Callable[[B], "Pair[A, C]"]) -> "Pair[A, C]":
        """
        ``Pair(x, y).chain(f)`` → ``Pair(concat(x, fst(f(y))), snd(f(y)))``

        Накопленный fst растёт слева направо по ходу цепочки.
        """
        other = f(self.snd)
        return Pair(capabilities.concat(self.fst, other.fst), other.snd)

    # -------------------------------------------------------------------------
    # Foldable / Traversable
    # -------------------------------------------------------------------------

    def reduce(self, f: Callable[[C, B], C], initial: C) -> C:
        """``Pair(v, w).reduce(f, x)`` → ``f(x, w)``"""
        return f(initial, self.snd)

    def traverse(self, type_rep: Any, f: Callable[[B], Any]) -> Any:
        """
        ``Pair(x, y).traverse(type_rep, f)`` → ``fmap(Pair(x, _), f(y))``

        type_rep не используется: effect context определяется результатом f.
        """
        return capabilities.fmap(partial(Pair, self.fst), f(self.snd))

    # -------------------------------------------------------------------------
    # Extend / Comonad
    # -------------------------------------------------------------------------

    def extend(self, f: Callable[["Pair[A, B]"], C]) -> "Pair[A, C]":
        """``Pair(x, y).extend(f)`` → ``Pair(x, f(Pair(x, y)))``"""
        return Pair(self.fst, f(self))

    def extract(self) -> B:
        """``Pair(x, y).extract()`` → ``y``"""
        return self.snd


# =============================================================================
# FREE FUNCTIONS
# =============================================================================


def pair_of(fst: A) -> Callable[[B], Pair[A, B]]:
    """
    Curried конструктор: ``pair_of(x)(y)`` эквивалентно ``Pair(x, y)``.
    """
    return partial(Pair, fst)


def pair(f: Callable[[A], Callable[[B], C]]) -> Callable[[Pair[A, B]], C]:
    """
    Case-folding функция.

    ``pair(f)(Pair(x, y))`` эквивалентно ``f(x)(y)``.

    Examples:
        >>> pair(lambda a: lambda b: a + b)(Pair("foo", "bar"))
        'foobar'
    """
    return lambda p: f(p.fst)(p.snd)


def fst(p: Pair[A, B]) -> A:
    """``fst(Pair(x, y))`` → ``x``"""
    return p.fst


def snd(p: Pair[A, B]) -> B:
    """``snd(Pair(x, y))`` → ``y``"""
    return p.snd


def swap(p: Pair[A, B]) -> Pair[B, A]:
    """
    ``swap(Pair(x, y))`` → ``Pair(y, x)``

    Capabilities результата вычисляются заново для новой раскладки слотов.
    """
    return Pair(p.snd, p.fst)
