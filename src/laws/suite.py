"""Law suite — прогон всех применимых законов для набора примеров Pair.

Набор законов определяется type classes, которым удовлетворяют ВСЕ
примеры (supported_type_classes). Структурные законы требуют Setoid:
без него результаты сравнить невозможно, и они пропускаются.
"""

import itertools
import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, List, Optional, Sequence, Tuple

from src.core.classes.type_classes import TypeClass
from src.laws import checks
from src.laws.checks import DEFAULT_MAX_LAW_CASES, LawResult

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LawViolation(AssertionError):
    """Хотя бы один алгебраический закон не выполняется."""

    def __init__(self, failures: Sequence[LawResult]):
        self.failures = tuple(failures)
        summary = "; ".join(f"{result.law} ({result.details})" for result in self.failures)
        super().__init__(f"{len(self.failures)} law(s) violated: {summary}")


# =============================================================================
# CONFIG / REPORT
# =============================================================================


@dataclass(frozen=True)
class LawSuiteConfig:
    """Конфигурация прогона законов."""

    # Максимум комбинаций примеров на один закон
    max_cases: int = DEFAULT_MAX_LAW_CASES

    # Прекратить прогон после первого невыполненного закона
    stop_on_first_failure: bool = False


@dataclass(frozen=True)
class LawSuiteReport:
    """Результаты прогона законов."""

    results: Tuple[LawResult, ...]
    skipped: Tuple[str, ...]

    @property
    def all_hold(self) -> bool:
        return all(result.holds for result in self.results)

    @property
    def failures(self) -> Tuple[LawResult, ...]:
        return tuple(result for result in self.results if not result.holds)

    def raise_for_failures(self) -> None:
        """
        Raises:
            LawViolation: Если хотя бы один закон не выполняется
        """
        if self.failures:
            raise LawViolation(self.failures)


# =============================================================================
# SUITE
# =============================================================================


def _common_type_classes(samples: Sequence[Any]) -> List[TypeClass]:
    return [
        type_class
        for type_class in TypeClass
        if all(type_class.test(sample) for sample in samples)
    ]


def _on_snd(f: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def on_snd(w: Any) -> Any:
        return f(w.extract())

    return on_snd


def _planned_laws(
    samples: Sequence[Any],
    supported: List[TypeClass],
    endomorphisms: Sequence[Callable[[Any], Any]],
    max_cases: int,
) -> List[Tuple[TypeClass, Callable[[], LawResult]]]:
    plan: List[Tuple[TypeClass, Callable[[], LawResult]]] = [
        (TypeClass.SETOID, partial(checks.setoid_reflexivity, samples, max_cases)),
        (TypeClass.SETOID, partial(checks.setoid_symmetry, samples, max_cases)),
        (TypeClass.SETOID, partial(checks.setoid_transitivity, samples, max_cases)),
        (TypeClass.ORD, partial(checks.ord_totality, samples, max_cases)),
        (TypeClass.ORD, partial(checks.ord_antisymmetry, samples, max_cases)),
        (TypeClass.ORD, partial(checks.ord_transitivity, samples, max_cases)),
        (TypeClass.SEMIGROUP, partial(checks.semigroup_associativity, samples, max_cases)),
        (TypeClass.SEMIGROUPOID, partial(checks.semigroupoid_associativity, samples, max_cases)),
        (TypeClass.FUNCTOR, partial(checks.functor_identity, samples, max_cases)),
        (TypeClass.BIFUNCTOR, partial(checks.bifunctor_identity, samples, max_cases)),
        (TypeClass.COMONAD, partial(checks.comonad_left_identity, samples, max_cases)),
        (TypeClass.SETOID, partial(checks.swap_involution, samples, max_cases)),
    ]

    # Endomorphisms действуют на snd: fst может иметь другой тип
    for f, g in itertools.product(endomorphisms, repeat=2):
        plan.extend(
            [
                (
                    TypeClass.FUNCTOR,
                    partial(checks.functor_composition, samples, f, g, max_cases=max_cases),
                ),
                (
                    TypeClass.EXTEND,
                    partial(
                        checks.extend_associativity,
                        samples,
                        _on_snd(f),
                        _on_snd(g),
                        max_cases=max_cases,
                    ),
                ),
                (
                    TypeClass.COMONAD,
                    partial(checks.comonad_right_identity, samples, _on_snd(f), max_cases=max_cases),
                ),
            ]
        )

    return [(type_class, law) for type_class, law in plan if type_class in supported]


def run_law_suite(
    samples: Sequence[Any],
    config: Optional[LawSuiteConfig] = None,
    endomorphisms: Sequence[Callable[[Any], Any]] = (),
) -> LawSuiteReport:
    """
    Прогон законов всех type classes, общих для samples.

    Args:
        samples: Примеры (обычно Pair) одной формы
        config: Конфигурация прогона
        endomorphisms: Функции над snd для законов composition / Extend /
            Comonad right identity (проверяются все упорядоченные пары)

    Returns:
        LawSuiteReport с результатами и пропущенными type classes
    """
    config = config or LawSuiteConfig()
    supported = _common_type_classes(samples)
    if TypeClass.SETOID not in supported:
        logger.warning(
            "Samples are not Setoid; structural laws cannot be compared and are skipped"
        )
        supported = []

    skipped = tuple(
        type_class.value for type_class in TypeClass if type_class not in supported
    )

    results: List[LawResult] = []
    for type_class, law in _planned_laws(samples, supported, endomorphisms, config.max_cases):
        result = law()
        results.append(result)
        logger.debug("%s: %s (%d cases)", type_class.value, result.law, result.cases_checked)
        if not result.holds:
            logger.warning("Law %s violated: %s", result.law, result.details)
            if config.stop_on_first_failure:
                break

    report = LawSuiteReport(results=tuple(results), skipped=skipped)
    logger.info(
        "Law suite: %d checked, %d failed, %d type classes skipped",
        len(report.results),
        len(report.failures),
        len(report.skipped),
    )
    return report
