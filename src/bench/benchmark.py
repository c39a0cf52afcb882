"""
Benchmark — замер времени сортировки вставками

Генерирует последовательности int, str и Rational одного размера,
сортирует каждую insertion_sort и фиксирует время выполнения.

Отчёт (BenchmarkReport) сериализуется в JSON и проверяется
контрактом benchmark_report.
"""

import logging
import operator
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final, List, Optional, Sequence, TypeVar

from pydantic import BaseModel, Field

from src.bench.generators import (
    DEFAULT_INT_UPPER,
    DEFAULT_RATIONAL_UPPER,
    DEFAULT_STRING_LENGTH,
    make_rng,
    random_ints,
    random_rationals,
    random_strings,
)
from src.core.contracts import validate_benchmark_report
from src.core.domain.rational import Rational
from src.core.sorting import LessThan, insertion_sort

LOG = logging.getLogger(__name__)

T = TypeVar("T")

# Размер списков по умолчанию
DEFAULT_BENCH_SIZE: Final[int] = 10000

# Часы с наносекундным разрешением
Clock = Callable[[], int]


# =============================================================================
# ENUMS
# =============================================================================


class ElementKind(str, Enum):
    """Тип элементов сортируемого списка"""

    INTEGERS = "integers"
    STRINGS = "strings"
    RATIONALS = "rational numbers"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BenchmarkConfig:
    """Конфигурация бенчмарка.

    seed=None — каждый запуск со своими данными; фиксированный seed
    делает входные данные воспроизводимыми.
    """

    size: int = DEFAULT_BENCH_SIZE
    seed: Optional[int] = None
    int_upper: int = DEFAULT_INT_UPPER
    string_length: int = DEFAULT_STRING_LENGTH
    rational_upper: int = DEFAULT_RATIONAL_UPPER

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")


# =============================================================================
# RESULTS
# =============================================================================


class SortTiming(BaseModel):
    """Время сортировки одного списка."""

    element_kind: ElementKind = Field(..., description="Тип элементов")
    size: int = Field(..., ge=0, description="Длина списка")
    elapsed_us: int = Field(..., ge=0, description="Время сортировки (микросекунды)")
    is_sorted: bool = Field(..., description="Результат упорядочен по неубыванию")

    model_config = {"frozen": True}

    def describe(self) -> str:
        """Строка отчёта в формате демонстрационного вывода."""
        return (
            f"Sorting for the list of {self.size} {self.element_kind.value} "
            f"took {self.elapsed_us} microseconds to execute!"
        )


class BenchmarkReport(BaseModel):
    """Отчёт бенчмарка по всем типам элементов."""

    size: int = Field(..., ge=0)
    seed: Optional[int] = Field(None, description="Seed генератора (None — случайный)")
    timings: List[SortTiming] = Field(..., min_length=1)

    model_config = {"frozen": True}

    def to_dict(self) -> dict:
        """
        JSON-совместимое представление, проверенное контрактом.

        Raises:
            ValidationError: Если отчёт не соответствует benchmark_report.json
        """
        data = self.model_dump(mode="json")
        validate_benchmark_report(data)
        return data


# =============================================================================
# TIMING
# =============================================================================


def is_sorted(items: Sequence[T], less_than: LessThan = operator.lt) -> bool:
    """True, если ни один элемент не меньше своего предшественника."""
    return not any(less_than(items[i], items[i - 1]) for i in range(1, len(items)))


def time_sort(
    kind: ElementKind,
    items: Sequence[T],
    less_than: LessThan = operator.lt,
    clock: Clock = time.perf_counter_ns,
) -> SortTiming:
    """
    Замер времени insertion_sort над items.

    Args:
        kind: Тип элементов (для отчёта)
        items: Входные данные (не изменяются)
        less_than: Предикат сравнения
        clock: Источник времени в наносекундах (default: time.perf_counter_ns)

    Returns:
        SortTiming с временем в микросекундах
    """
    start = clock()
    result = insertion_sort(items, less_than)
    elapsed_ns = clock() - start

    timing = SortTiming(
        element_kind=kind,
        size=len(result),
        elapsed_us=max(elapsed_ns, 0) // 1000,
        is_sorted=is_sorted(result, less_than),
    )
    LOG.info("%s", timing.describe())
    return timing


def run_benchmark(
    config: Optional[BenchmarkConfig] = None, clock: Clock = time.perf_counter_ns
) -> BenchmarkReport:
    """
    Бенчмарк сортировки для int, str и Rational.

    Все три списка генерируются одним генератором, созданным из config.seed.
    """
    config = config or BenchmarkConfig()
    rng = make_rng(config.seed)

    LOG.debug("Running sort benchmark: %s", config)

    ints = random_ints(config.size, config.int_upper, rng)
    strings = random_strings(config.size, config.string_length, rng)
    rationals = random_rationals(config.size, config.rational_upper, rng)

    timings = [
        time_sort(ElementKind.INTEGERS, ints, operator.lt, clock),
        time_sort(ElementKind.STRINGS, strings, operator.lt, clock),
        time_sort(ElementKind.RATIONALS, rationals, Rational.less_than, clock),
    ]
    return BenchmarkReport(size=config.size, seed=config.seed, timings=timings)
