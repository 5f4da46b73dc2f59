"""
Type Classes — таблица алгебраических спецификаций

Каждый type class задан:
- зависимостями (например, Chain требует Apply)
- методами протокола, которые значение должно предоставлять
- опционально встроенным предикатом для builtins (list, dict, str, ...)

Для Pair membership вычисляется по доступным методам, поэтому
Setoid / Ord / Semigroup / Apply / Chain зависят от capabilities слотов:

    Setoid        ✅ *  (если fst и snd Setoid)
    Ord           ✅ *  (если fst и snd Ord)
    Semigroupoid  ✅
    Semigroup     ✅ *  (если fst и snd Semigroup)
    Functor       ✅
    Bifunctor     ✅
    Apply         ✅ *  (если fst Semigroup)
    Chain         ✅ *  (если fst Semigroup)
    Foldable      ✅
    Traversable   ✅
    Extend        ✅
    Comonad       ✅
    остальные     ❌
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from src.core.classes import capabilities


class TypeClass(str, Enum):
    """Алгебраические type classes (порядок — как в таблице выше)."""

    SETOID = "Setoid"
    ORD = "Ord"
    SEMIGROUPOID = "Semigroupoid"
    CATEGORY = "Category"
    SEMIGROUP = "Semigroup"
    MONOID = "Monoid"
    GROUP = "Group"
    FILTERABLE = "Filterable"
    FUNCTOR = "Functor"
    BIFUNCTOR = "Bifunctor"
    PROFUNCTOR = "Profunctor"
    APPLY = "Apply"
    APPLICATIVE = "Applicative"
    CHAIN = "Chain"
    CHAIN_REC = "ChainRec"
    MONAD = "Monad"
    ALT = "Alt"
    PLUS = "Plus"
    ALTERNATIVE = "Alternative"
    FOLDABLE = "Foldable"
    TRAVERSABLE = "Traversable"
    EXTEND = "Extend"
    COMONAD = "Comonad"
    CONTRAVARIANT = "Contravariant"

    def test(self, value: Any) -> bool:
        """Удовлетворяет ли значение этому type class."""
        definition = _DEFINITIONS[self]
        if not all(dependency.test(value) for dependency in definition.dependencies):
            return False
        if definition.predicate is not None:
            return definition.predicate(value)
        # Встроенные типы участвуют только через predicate (list.extend — не Extend)
        if isinstance(value, _BUILTINS):
            return False
        return all(hasattr(value, method) for method in definition.methods)


@dataclass(frozen=True)
class _Definition:
    dependencies: Tuple[TypeClass, ...] = ()
    methods: Tuple[str, ...] = ()
    predicate: Optional[Callable[[Any], bool]] = None


def _builtin_or_methods(kinds: Tuple[type, ...], *methods: str) -> Callable[[Any], bool]:
    def predicate(value: Any) -> bool:
        if isinstance(value, kinds):
            return True
        return all(hasattr(value, method) for method in methods)

    return predicate


_CONTAINERS = (list, tuple, dict)
_BUILTINS = capabilities.SCALAR_TYPES + (list, tuple, dict, set, frozenset)

_DEFINITIONS: Dict[TypeClass, _Definition] = {
    TypeClass.SETOID: _Definition(predicate=capabilities.test_equality),
    TypeClass.ORD: _Definition(predicate=capabilities.test_order),
    TypeClass.SEMIGROUPOID: _Definition(methods=("compose",)),
    TypeClass.CATEGORY: _Definition((TypeClass.SEMIGROUPOID,), ("id",)),
    TypeClass.SEMIGROUP: _Definition(predicate=capabilities.test_combinable),
    TypeClass.MONOID: _Definition(
        (TypeClass.SEMIGROUP,),
        predicate=_builtin_or_methods(capabilities.COMBINABLE_TYPES, "empty"),
    ),
    TypeClass.GROUP: _Definition((TypeClass.MONOID,), ("invert",)),
    TypeClass.FILTERABLE: _Definition(predicate=_builtin_or_methods(_CONTAINERS, "filter")),
    TypeClass.FUNCTOR: _Definition(predicate=capabilities.test_functor),
    TypeClass.BIFUNCTOR: _Definition((TypeClass.FUNCTOR,), ("bimap",)),
    TypeClass.PROFUNCTOR: _Definition((TypeClass.FUNCTOR,), ("promap",)),
    TypeClass.APPLY: _Definition((TypeClass.FUNCTOR,), ("ap",)),
    TypeClass.APPLICATIVE: _Definition((TypeClass.APPLY,), ("of",)),
    TypeClass.CHAIN: _Definition((TypeClass.APPLY,), ("chain",)),
    TypeClass.CHAIN_REC: _Definition((TypeClass.CHAIN,), ("chain_rec",)),
    TypeClass.MONAD: _Definition((TypeClass.APPLICATIVE, TypeClass.CHAIN)),
    TypeClass.ALT: _Definition((TypeClass.FUNCTOR,), ("alt",)),
    TypeClass.PLUS: _Definition((TypeClass.ALT,), ("zero",)),
    TypeClass.ALTERNATIVE: _Definition((TypeClass.APPLICATIVE, TypeClass.PLUS)),
    TypeClass.FOLDABLE: _Definition(predicate=_builtin_or_methods(_CONTAINERS, "reduce")),
    TypeClass.TRAVERSABLE: _Definition(
        (TypeClass.FUNCTOR, TypeClass.FOLDABLE), ("traverse",)
    ),
    TypeClass.EXTEND: _Definition((TypeClass.FUNCTOR,), ("extend",)),
    TypeClass.COMONAD: _Definition((TypeClass.EXTEND,), ("extract",)),
    TypeClass.CONTRAVARIANT: _Definition(methods=("contramap",)),
}


def supported_type_classes(value: Any) -> List[TypeClass]:
    """
    Все type classes, которым удовлетворяет значение.

    Args:
        value: Произвольное значение (в том числе Pair)

    Returns:
        Список TypeClass в порядке объявления enum
    """
    return [type_class for type_class in TypeClass if type_class.test(value)]
