"""
Тесты для алгебраических законов Pair

Проверяет:
1. Отдельные законы на корректных и некорректных примерах
2. Ограничение max_cases
3. Прогон suite: выбор законов по type classes, пропуски, ошибки
"""

import logging

import pytest

from src.core.domain import Pair
from src.laws import (
    LawSuiteConfig,
    LawViolation,
    apply_composition,
    bifunctor_composition,
    chain_associativity,
    comonad_right_identity,
    extend_associativity,
    functor_composition,
    ord_transitivity,
    run_law_suite,
    semigroup_associativity,
    setoid_transitivity,
    swap_involution,
)


class Minus:
    """Неассоциативная «комбинация» (вычитание) — нарушает Semigroup."""

    def __init__(self, n: int):
        self.n = n

    def equals(self, other: object) -> bool:
        return isinstance(other, Minus) and self.n == other.n

    def concat(self, other: "Minus") -> "Minus":
        return Minus(self.n - other.n)

    def __repr__(self) -> str:
        return f"Minus({self.n})"


@pytest.fixture
def samples() -> list:
    """Пары str × list: Setoid, Ord, Semigroup"""
    return [Pair("a", [1]), Pair("b", []), Pair("", [2, 3]), Pair("a", [1, 0])]


# =============================================================================
# ОТДЕЛЬНЫЕ ЗАКОНЫ
# =============================================================================


class TestIndividualLaws:
    """Тесты отдельных законов"""

    def test_semigroup_associativity_holds(self, samples: list) -> None:
        result = semigroup_associativity(samples)
        assert result.holds
        assert result.cases_checked == len(samples) ** 3
        assert result.details == ""

    def test_semigroup_associativity_violated(self) -> None:
        result = semigroup_associativity([Minus(1), Minus(2), Minus(3)])
        assert not result.holds
        assert result.details.startswith("counterexample: ")
        assert "Minus" in result.details

    def test_max_cases_limits_combinations(self) -> None:
        result = setoid_transitivity(list(range(10)), max_cases=50)
        assert result.holds
        assert result.cases_checked == 50

    def test_ord_transitivity(self, samples: list) -> None:
        assert ord_transitivity(samples).holds

    def test_swap_involution(self, samples: list) -> None:
        assert swap_involution(samples).holds

    def test_functor_composition(self, samples: list) -> None:
        result = functor_composition(samples, len, lambda xs: xs + [0])
        assert result.holds

    def test_bifunctor_composition(self) -> None:
        values = [Pair("ab", "cd"), Pair("", "x")]
        result = bifunctor_composition(
            values, str.upper, lambda s: s + "!", len, lambda s: s * 2
        )
        assert result.holds

    def test_apply_composition(self) -> None:
        values = [Pair("v", 1), Pair("w", 5)]
        functions = [Pair("f", lambda n: n + 1), Pair("g", lambda n: n * 2)]
        assert apply_composition(values, functions).holds

    def test_chain_associativity(self) -> None:
        values = [Pair("a", 1), Pair("b", 2)]
        result = chain_associativity(
            values, lambda n: Pair("x", n + 1), lambda n: Pair("y", n * 2)
        )
        assert result.holds

    def test_extend_associativity(self, samples: list) -> None:
        result = extend_associativity(
            samples, lambda w: len(w.extract()), lambda w: w.fst + "!"
        )
        assert result.holds

    def test_comonad_right_identity(self, samples: list) -> None:
        assert comonad_right_identity(samples, lambda w: w.fst).holds


# =============================================================================
# SUITE
# =============================================================================


class TestLawSuite:
    """Тесты run_law_suite"""

    def test_all_laws_hold(self, samples: list) -> None:
        report = run_law_suite(samples, endomorphisms=[lambda xs: xs + [0], lambda xs: xs[::-1]])
        assert report.all_hold
        laws = {result.law for result in report.results}
        assert {
            "Setoid.reflexivity",
            "Ord.totality",
            "Semigroup.associativity",
            "Semigroupoid.associativity",
            "Functor.identity",
            "Functor.composition",
            "Bifunctor.identity",
            "Extend.associativity",
            "Comonad.left_identity",
            "Comonad.right_identity",
            "Pair.swap_involution",
        } <= laws
        report.raise_for_failures()

    def test_skips_unsupported_type_classes(self) -> None:
        """Пары str × int не Semigroup: закон пропускается"""
        report = run_law_suite([Pair("a", 1), Pair("b", 2)])
        assert "Semigroup" in report.skipped
        assert "Semigroup.associativity" not in {result.law for result in report.results}
        assert report.all_hold

    def test_non_setoid_samples_skip_everything(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="src.laws.suite"):
            report = run_law_suite([Pair(object(), 1)])
        assert report.results == ()
        assert "not Setoid" in caplog.text

    def test_violation_reported(self, caplog) -> None:
        broken = [Pair("a", Minus(1)), Pair("b", Minus(2)), Pair("c", Minus(3))]
        with caplog.at_level(logging.WARNING, logger="src.laws.suite"):
            report = run_law_suite(broken)
        assert not report.all_hold
        assert [result.law for result in report.failures] == ["Semigroup.associativity"]
        assert "Semigroup.associativity violated" in caplog.text

        with pytest.raises(LawViolation) as exc_info:
            report.raise_for_failures()
        assert isinstance(exc_info.value, AssertionError)
        assert exc_info.value.failures == report.failures

    def test_stop_on_first_failure(self) -> None:
        broken = [Pair("a", Minus(1)), Pair("b", Minus(2)), Pair("c", Minus(3))]
        full = run_law_suite(broken)
        stopped = run_law_suite(broken, LawSuiteConfig(stop_on_first_failure=True))
        assert not stopped.results[-1].holds
        assert len(stopped.results) < len(full.results)
