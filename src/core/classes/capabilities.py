"""
Capabilities — runtime probing алгебраических возможностей значений

Модуль определяет, какие type classes (Setoid, Ord, Semigroup, Functor)
поддерживает произвольное значение, и делегирует equality / ordering /
combination собственной реализации этого значения.

Протокол для пользовательских типов:
- метод ``equals(other)``  → Setoid
- метод ``lte(other)``     → Ord (только вместе с Setoid)
- метод ``concat(other)``  → Semigroup
- метод ``map(f)``         → Functor

Если класс объявляет такой метод, но экземпляр его не предоставляет
(``hasattr`` → False, как у Pair без нужной capability), значение
соответствующий type class НЕ поддерживает.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ord ⊂ Setoid: test_order(v) → test_equality(v)
2. equals рефлексивен, включая NaN (NaN equals NaN)
3. lte — тотальный порядок для чисел: NaN меньше любого числа
4. Операции над неподдерживаемыми значениями → MissingCapabilityError,
   никогда не молчаливое сравнение ссылок
"""

import logging
import math
import sys
from enum import IntFlag
from typing import Any, Callable, Final, FrozenSet, Tuple

logger = logging.getLogger(__name__)


# =============================================================================
# ВСТРОЕННЫЕ ТИПЫ
# =============================================================================

# Скалярные значения с собственной equality
SCALAR_TYPES: Final[Tuple[type, ...]] = (type(None), bool, int, float, complex, str, bytes)

# Скалярные значения с тотальным порядком (bool — подкласс int)
ORDERED_SCALAR_TYPES: Final[Tuple[type, ...]] = (int, float, str, bytes)

# Встроенные semigroups: конкатенация, для dict — right-biased merge
COMBINABLE_TYPES: Final[Tuple[type, ...]] = (str, bytes, list, tuple, dict)

# Числовые типы образуют один «тип» для equals / lte (1 равно 1.0; bool и complex отдельно)
NUMERIC_TYPES: Final[Tuple[type, ...]] = (int, float)

# Hash всех NaN (NaN equals NaN, поэтому hash обязан совпадать)
NAN_HASH: Final[int] = sys.hash_info.nan


# =============================================================================
# CAPABILITY FLAGS
# =============================================================================


class Capability(IntFlag):
    """Набор capability флагов Pair (bitset).

    - SETOID: оба слота поддерживают equality
    - ORD: оба слота поддерживают порядок (влечёт SETOID)
    - SEMIGROUP: оба слота combinable
    - APPLY / CHAIN: fst combinable (snd не важен)
    """

    NONE = 0
    SETOID = 1
    ORD = 2
    SEMIGROUP = 4
    APPLY = 8
    CHAIN = 16


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MissingCapabilityError(AttributeError):
    """
    Вызов операции, которую значение не предоставляет.

    Это ошибка программирования (absent operation), а не ошибка данных.
    Наследуется от AttributeError, поэтому ``hasattr`` на отсутствующем
    методе Pair возвращает False.
    """

    def __init__(self, operation: str, requirement: str, value: Any = None):
        self.operation = operation
        self.requirement = requirement
        message = f"'{operation}' requires {requirement}"
        if value is not None:
            message += f", which {type(value).__name__} value does not provide"
        super().__init__(message)


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def _declares(value: Any, method: str) -> bool:
    """Объявляет ли класс значения метод протокола (без учёта capability gating)."""
    return any(method in vars(klass) for klass in type(value).__mro__)


def _overrides(value: Any, dunder: str) -> bool:
    return getattr(type(value), dunder, None) is not getattr(object, dunder)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _kind(value: Any) -> type:
    """Тип значения для equals / lte: числа — один тип, bool — отдельный."""
    if isinstance(value, bool):
        return bool
    if isinstance(value, NUMERIC_TYPES):
        return float
    return type(value)


def _enter(value: Any, seen: FrozenSet[int]) -> FrozenSet[int]:
    return seen | {id(value)}


# =============================================================================
# CAPABILITY TESTS
# =============================================================================


def test_equality(value: Any) -> bool:
    """
    Поддерживает ли значение equality (Setoid).

    Args:
        value: Произвольное значение

    Returns:
        True для скаляров, контейнеров из equatable элементов, объектов с
        доступным методом ``equals`` и объектов с собственным ``__eq__``.
        Функции и объекты с identity-equality не поддерживают Setoid.
        Самоссылающийся контейнер на текущем пути считается Setoid.
    """
    return _test_equality(value, frozenset())


def _test_equality(value: Any, seen: FrozenSet[int]) -> bool:
    if _declares(value, "equals"):
        return hasattr(value, "equals")
    if isinstance(value, SCALAR_TYPES):
        return True
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        if id(value) in seen:
            return True
        items = value.values() if isinstance(value, dict) else value
        return all(_test_equality(item, _enter(value, seen)) for item in items)
    if callable(value):
        return False
    return _overrides(value, "__eq__")


def test_order(value: Any) -> bool:
    """
    Поддерживает ли значение тотальный порядок (Ord).

    Ord требует Setoid. complex, None, set и dict порядка не имеют.
    """
    return test_equality(value) and _test_order(value, frozenset())


def _test_order(value: Any, seen: FrozenSet[int]) -> bool:
    if _declares(value, "lte"):
        return hasattr(value, "lte")
    if isinstance(value, ORDERED_SCALAR_TYPES):
        return True
    if isinstance(value, (list, tuple)):
        if id(value) in seen:
            return True
        return all(_test_order(item, _enter(value, seen)) for item in value)
    if isinstance(value, SCALAR_TYPES + (set, frozenset, dict)):
        return False
    return _overrides(value, "__le__")


def test_combinable(value: Any) -> bool:
    """Поддерживает ли значение ассоциативную комбинацию (Semigroup)."""
    if _declares(value, "concat"):
        return hasattr(value, "concat")
    return isinstance(value, COMBINABLE_TYPES)


def test_functor(value: Any) -> bool:
    """Поддерживает ли значение map (Functor)."""
    if _declares(value, "map"):
        return hasattr(value, "map")
    return isinstance(value, (list, tuple, dict))


def probe_capabilities(fst: Any, snd: Any) -> Capability:
    """
    Однократный probe обоих слотов при конструировании Pair.

    Args:
        fst: Значение первого слота
        snd: Значение второго слота

    Returns:
        Capability bitset для пары
    """
    capabilities = Capability.NONE
    if test_equality(fst) and test_equality(snd):
        capabilities |= Capability.SETOID
        if test_order(fst) and test_order(snd):
            capabilities |= Capability.ORD
    if test_combinable(fst):
        capabilities |= Capability.APPLY | Capability.CHAIN
        if test_combinable(snd):
            capabilities |= Capability.SEMIGROUP

    logger.debug(
        "Probed capabilities %r for slots (%s, %s)",
        capabilities,
        type(fst).__name__,
        type(snd).__name__,
    )
    return capabilities


# =============================================================================
# ДЕЛЕГИРУЮЩИЕ ОПЕРАЦИИ
# =============================================================================


def equals(x: Any, y: Any) -> bool:
    """
    Структурная equality по собственному определению значения.

    - NaN equals NaN (рефлексивность)
    - значения разных типов не равны (int и float — один числовой тип,
      bool и complex отдельно: 1 не равно True)
    - list / tuple: поэлементно, тип контейнера должен совпадать
    - dict: одинаковые ключи и равные значения
    - объекты с ``equals``: делегирование

    Raises:
        MissingCapabilityError: Если x не поддерживает Setoid
    """
    if not test_equality(x):
        raise MissingCapabilityError("equals", "Setoid", x)
    return _equals(x, y)


def _equals(x: Any, y: Any) -> bool:
    if x is y:
        return True
    if _declares(x, "equals"):
        return x.equals(y)
    if _is_nan(x) or _is_nan(y):
        return _is_nan(x) and _is_nan(y)
    for kind in (list, tuple):
        if isinstance(x, kind):
            return (
                isinstance(y, kind)
                and len(x) == len(y)
                and all(_equals(a, b) for a, b in zip(x, y))
            )
    if isinstance(x, dict):
        return (
            isinstance(y, dict)
            and x.keys() == y.keys()
            and all(_equals(x[key], y[key]) for key in x)
        )
    return _kind(x) is _kind(y) and x == y


def lte(x: Any, y: Any) -> bool:
    """
    ``x <= y`` по собственному порядку значения.

    - NaN меньше любого числа
    - значения разных типов несравнимы: результат False
    - list / tuple: лексикографически (первый неравный элемент решает,
      иначе более короткая последовательность меньше)
    - объекты с ``lte``: делегирование

    Raises:
        MissingCapabilityError: Если x не поддерживает Ord
    """
    if not test_order(x):
        raise MissingCapabilityError("lte", "Ord", x)
    return _lte(x, y)


def _lte(x: Any, y: Any) -> bool:
    if _declares(x, "lte"):
        return x.lte(y)
    if _kind(x) is not _kind(y):
        return False
    if _is_nan(x):
        return True
    if _is_nan(y):
        return False
    if isinstance(x, (list, tuple)):
        for a, b in zip(x, y):
            if not _equals(a, b):
                return _lte(a, b)
        return len(x) <= len(y)
    return x <= y


def concat(x: Any, y: Any) -> Any:
    """
    Ассоциативная комбинация двух значений одного semigroup.

    Raises:
        MissingCapabilityError: Если x не поддерживает Semigroup
    """
    if not test_combinable(x):
        raise MissingCapabilityError("concat", "Semigroup", x)
    if _declares(x, "concat"):
        return x.concat(y)
    if isinstance(x, dict):
        return {**x, **y}
    return x + y


def fmap(f: Callable[[Any], Any], functor: Any) -> Any:
    """
    Применение f внутри effect context (mapInsideEffect для traverse).

    Raises:
        MissingCapabilityError: Если значение не поддерживает Functor
    """
    if not test_functor(functor):
        raise MissingCapabilityError("map", "Functor", functor)
    if _declares(functor, "map"):
        return functor.map(f)
    if isinstance(functor, list):
        return [f(item) for item in functor]
    if isinstance(functor, tuple):
        return tuple(f(item) for item in functor)
    return {key: f(item) for key, item in functor.items()}


# =============================================================================
# HASH
# =============================================================================


def structural_hash(value: Any) -> int:
    """
    Hash, согласованный с ``equals``: равные значения имеют равный hash.

    - NaN → NAN_HASH (все NaN равны между собой)
    - tuple: по structural_hash элементов
    - объекты с ``equals`` хэшируются только через собственный ``__hash__``

    Raises:
        TypeError: Если значение unhashable (list, dict, set) или объявляет
            ``equals`` без ``__hash__``
    """
    if _is_nan(value):
        return NAN_HASH
    if isinstance(value, tuple):
        return hash(tuple(structural_hash(item) for item in value))
    if _declares(value, "equals") and not _overrides(value, "__hash__"):
        raise TypeError(
            f"unhashable type: '{type(value).__name__}' (declares equals without __hash__)"
        )
    return hash(value)
