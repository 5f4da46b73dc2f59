"""
Тесты для таблицы type classes

Проверяет, что Pair удовлетворяет ровно тем type classes, которые
допускают capabilities её слотов.
"""

import pytest

from src.core.classes import TypeClass, supported_type_classes
from src.core.domain import Pair

ALWAYS = [
    TypeClass.SEMIGROUPOID,
    TypeClass.FUNCTOR,
    TypeClass.BIFUNCTOR,
    TypeClass.FOLDABLE,
    TypeClass.TRAVERSABLE,
    TypeClass.EXTEND,
    TypeClass.COMONAD,
]


class TestPairTypeClasses:
    """Membership Pair"""

    def test_opaque_slots(self) -> None:
        """Слоты без capabilities → только безусловные type classes"""
        assert supported_type_classes(Pair(object(), object())) == ALWAYS

    def test_semigroup_slots(self) -> None:
        """Pair (["foo"]) (["bar"]) → все условные type classes"""
        assert supported_type_classes(Pair(["foo"], ["bar"])) == [
            TypeClass.SETOID,
            TypeClass.ORD,
            TypeClass.SEMIGROUPOID,
            TypeClass.SEMIGROUP,
            TypeClass.FUNCTOR,
            TypeClass.BIFUNCTOR,
            TypeClass.APPLY,
            TypeClass.CHAIN,
            TypeClass.FOLDABLE,
            TypeClass.TRAVERSABLE,
            TypeClass.EXTEND,
            TypeClass.COMONAD,
        ]

    @pytest.mark.parametrize(
        "type_class",
        [
            TypeClass.CATEGORY,
            TypeClass.MONOID,
            TypeClass.GROUP,
            TypeClass.FILTERABLE,
            TypeClass.PROFUNCTOR,
            TypeClass.APPLICATIVE,
            TypeClass.CHAIN_REC,
            TypeClass.MONAD,
            TypeClass.ALT,
            TypeClass.PLUS,
            TypeClass.ALTERNATIVE,
            TypeClass.CONTRAVARIANT,
        ],
    )
    def test_never_supported(self, type_class: TypeClass) -> None:
        assert not type_class.test(Pair(["foo"], ["bar"]))

    def test_apply_without_semigroup(self) -> None:
        """fst Semigroup, snd нет → Apply и Chain без Semigroup"""
        classes = supported_type_classes(Pair("abc", 1))
        assert TypeClass.APPLY in classes
        assert TypeClass.CHAIN in classes
        assert TypeClass.SEMIGROUP not in classes


class TestBuiltinTypeClasses:
    """Membership встроенных типов"""

    def test_list(self) -> None:
        assert supported_type_classes([1]) == [
            TypeClass.SETOID,
            TypeClass.ORD,
            TypeClass.SEMIGROUP,
            TypeClass.MONOID,
            TypeClass.FILTERABLE,
            TypeClass.FUNCTOR,
            TypeClass.FOLDABLE,
        ]

    def test_str(self) -> None:
        assert supported_type_classes("abc") == [
            TypeClass.SETOID,
            TypeClass.ORD,
            TypeClass.SEMIGROUP,
            TypeClass.MONOID,
        ]

    def test_opaque(self) -> None:
        assert supported_type_classes(object()) == []

    def test_values(self) -> None:
        assert TypeClass.SETOID.value == "Setoid"
        assert TypeClass("Comonad") is TypeClass.COMONAD
