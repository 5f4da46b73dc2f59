"""
Тесты для curried free functions

Примеры из документации Pair, записанные через dispatch-функции,
плюс поведение на встроенных типах и отсутствующих операциях.
"""

import math
import operator

import pytest

from src.core import functions as F
from src.core.classes import MissingCapabilityError, concat, show
from src.core.domain import Pair


class TestDocumentedExamples:
    """Примеры из документации"""

    def test_equals(self) -> None:
        assert F.equals(Pair("abc", [1, 2, 3]))(Pair("abc", [1, 2, 3]))
        assert not F.equals(Pair("abc", [1, 2, 3]))(Pair("abc", [3, 2, 1]))

    def test_lte_filter(self) -> None:
        grid = [Pair(letter, number) for letter in "abc" for number in (1, 2, 3)]
        assert list(filter(F.lte(Pair("b", 2)), grid)) == [
            Pair("a", 1),
            Pair("a", 2),
            Pair("a", 3),
            Pair("b", 1),
            Pair("b", 2),
        ]

    def test_compose(self) -> None:
        """compose(Pair(x, y))(Pair(v, w)) → Pair(v, y)"""
        assert F.compose(Pair("a", 0))(Pair([1, 2, 3], "b")) == Pair([1, 2, 3], 0)

    def test_concat(self) -> None:
        result = F.concat(Pair("abc", [1, 2, 3]))(Pair("xyz", [4, 5, 6]))
        assert result == Pair("abcxyz", [1, 2, 3, 4, 5, 6])

    def test_map(self) -> None:
        assert F.map_(math.sqrt)(Pair("abc", 256)) == Pair("abc", 16)

    def test_bimap(self) -> None:
        assert F.bimap(str.upper)(math.sqrt)(Pair("abc", 256)) == Pair("ABC", 16)

    def test_ap(self) -> None:
        assert F.ap(Pair("abc", math.sqrt))(Pair("xyz", 256)) == Pair("abcxyz", 16)

    def test_chain(self) -> None:
        result = F.chain(lambda n: Pair(show(n), math.sqrt(n)))(Pair("abc", 256))
        assert result == Pair("abc256", 16)

    def test_reduce(self) -> None:
        assert F.reduce(concat, [1, 2, 3])(Pair("abc", [4, 5, 6])) == [1, 2, 3, 4, 5, 6]

    def test_traverse(self) -> None:
        assert F.traverse(list, str.split)(Pair(123, "foo bar baz")) == [
            Pair(123, "foo"),
            Pair(123, "bar"),
            Pair(123, "baz"),
        ]

    def test_extract(self) -> None:
        assert F.extract(Pair("abc", [1, 2, 3])) == [1, 2, 3]

    def test_extend(self) -> None:
        assert F.extend(F.reduce(operator.add, 1))(Pair("abc", 99)) == Pair("abc", 100)


class TestBuiltins:
    """Dispatch на встроенные типы"""

    def test_map_list(self) -> None:
        assert F.map_(abs)([-1, 2]) == [1, 2]

    def test_reduce_sequences_and_dicts(self) -> None:
        assert F.reduce(operator.add, 0)([1, 2, 3]) == 6
        assert F.reduce(operator.add, 0)((1, 2)) == 3
        assert F.reduce(operator.add, "")({"a": "x", "b": "y"}) == "xy"

    def test_concat_and_lte(self) -> None:
        assert F.concat([1])([2]) == [1, 2]
        assert F.lte(2)(1)
        assert not F.lte(1)(2)


class TestMissingOperations:
    """Отсутствующие операции → MissingCapabilityError"""

    def test_concat_without_semigroup(self) -> None:
        with pytest.raises(MissingCapabilityError):
            F.concat(Pair("abc", 1))(Pair("xyz", 2))

    def test_equals_without_setoid(self) -> None:
        p = Pair(object(), 1)
        with pytest.raises(MissingCapabilityError):
            F.equals(p)(p)

    def test_bimap_on_list(self) -> None:
        with pytest.raises(MissingCapabilityError, match="Bifunctor"):
            F.bimap(str)(str)([1])

    def test_ap_without_semigroup_fst(self) -> None:
        with pytest.raises(MissingCapabilityError):
            F.ap(Pair(1, abs))(Pair(2, -3))

    def test_extract_on_scalar(self) -> None:
        with pytest.raises(MissingCapabilityError, match="Comonad"):
            F.extract(42)

    def test_reduce_on_scalar(self) -> None:
        with pytest.raises(MissingCapabilityError, match="Foldable"):
            F.reduce(operator.add, 0)(42)
