"""
Тесты для генераторов данных и бенчмарка сортировки

Проверяет:
1. Воспроизводимость генераторов при фиксированном seed
2. Диапазоны генерируемых значений
3. Замер времени с подменённым источником времени
4. Отчёт бенчмарка и его соответствие контракту
"""

import itertools
import logging

import pytest

from src.bench import (
    BenchmarkConfig,
    BenchmarkReport,
    ElementKind,
    make_rng,
    random_ints,
    random_rationals,
    random_strings,
    run_benchmark,
    time_sort,
)
from src.bench.benchmark import is_sorted
from src.bench.generators import LETTERS
from src.core.domain import Rational


def fake_clock(step_ns: int = 5_000):
    """Часы, сдвигающиеся на step_ns при каждом вызове"""
    counter = itertools.count(start=0, step=step_ns)
    return lambda: next(counter)


# =============================================================================
# GENERATORS
# =============================================================================


class TestGenerators:
    """Тесты для генераторов случайных данных"""

    def test_reproducible_with_seed(self) -> None:
        assert random_ints(50, rng=make_rng(7)) == random_ints(50, rng=make_rng(7))
        assert random_strings(5, rng=make_rng(7)) == random_strings(5, rng=make_rng(7))
        assert random_rationals(20, rng=make_rng(7)) == random_rationals(20, rng=make_rng(7))

    def test_int_range(self) -> None:
        values = random_ints(500, upper=10, rng=make_rng(1))
        assert len(values) == 500
        assert all(0 <= v < 10 for v in values)

    def test_strings_alphabet(self) -> None:
        values = random_strings(100, length=10, rng=make_rng(2))
        assert all(len(s) == 10 for s in values)
        assert all(c in LETTERS for s in values for c in s)

    def test_rational_ranges(self) -> None:
        """Знаменатель никогда не равен 0"""
        values = random_rationals(500, upper=50, rng=make_rng(3))
        assert all(isinstance(r, Rational) for r in values)
        assert all(0 <= r.numerator < 50 for r in values)
        assert all(1 <= r.denominator < 50 for r in values)

    def test_empty(self) -> None:
        assert random_ints(0) == []
        assert random_strings(0) == []
        assert random_rationals(0) == []

    def test_invalid_arguments(self) -> None:
        with pytest.raises(ValueError, match="n must be >= 0"):
            random_ints(-1)
        with pytest.raises(ValueError, match="upper must be >= 1"):
            random_ints(3, upper=0)
        with pytest.raises(ValueError, match="length must be >= 0"):
            random_strings(3, length=-2)
        with pytest.raises(ValueError, match="upper must be >= 2"):
            random_rationals(3, upper=1)


# =============================================================================
# BENCHMARK
# =============================================================================


class TestTimeSort:
    """Тесты для time_sort"""

    def test_elapsed_from_clock(self) -> None:
        timing = time_sort(ElementKind.INTEGERS, [3, 1, 2], clock=fake_clock(5_000))
        assert timing.elapsed_us == 5
        assert timing.size == 3
        assert timing.is_sorted

    def test_rationals(self) -> None:
        items = [Rational(3, 4), Rational(1, 2), Rational(1, 3)]
        timing = time_sort(ElementKind.RATIONALS, items, Rational.less_than, fake_clock())
        assert timing.is_sorted
        assert items == [Rational(3, 4), Rational(1, 2), Rational(1, 3)]

    def test_describe(self) -> None:
        timing = time_sort(ElementKind.STRINGS, ["b", "a"], clock=fake_clock(12_000))
        assert timing.describe() == (
            "Sorting for the list of 2 strings took 12 microseconds to execute!"
        )

    def test_logged_at_info(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="src.bench.benchmark"):
            time_sort(ElementKind.INTEGERS, [2, 1], clock=fake_clock())
        assert "Sorting for the list of 2 integers" in caplog.text


class TestIsSorted:
    """Тесты для is_sorted"""

    def test_sorted_sequences(self) -> None:
        assert is_sorted([])
        assert is_sorted([1, 1, 2])
        assert is_sorted([Rational(1, 3), Rational(2, 4)], Rational.less_than)

    def test_unsorted_sequences(self) -> None:
        assert not is_sorted([2, 1])
        assert not is_sorted([Rational(1, 2), Rational(1, 3)], Rational.less_than)


class TestRunBenchmark:
    """Тесты для run_benchmark"""

    def test_report(self) -> None:
        report = run_benchmark(BenchmarkConfig(size=30, seed=5), clock=fake_clock())
        assert isinstance(report, BenchmarkReport)
        assert report.size == 30
        assert report.seed == 5
        assert [t.element_kind for t in report.timings] == [
            ElementKind.INTEGERS,
            ElementKind.STRINGS,
            ElementKind.RATIONALS,
        ]
        assert all(t.is_sorted and t.size == 30 for t in report.timings)

    def test_report_matches_contract(self) -> None:
        data = run_benchmark(BenchmarkConfig(size=10, seed=1), clock=fake_clock()).to_dict()
        assert data["timings"][2]["element_kind"] == "rational numbers"
        assert data["seed"] == 1

    def test_zero_size(self) -> None:
        report = run_benchmark(BenchmarkConfig(size=0), clock=fake_clock())
        assert all(t.size == 0 for t in report.timings)
        report.to_dict()

    def test_invalid_config(self) -> None:
        with pytest.raises(ValueError, match="size must be >= 0"):
            BenchmarkConfig(size=-1)
