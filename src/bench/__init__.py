"""Bench — генерация данных, бенчмарк сортировки и CLI.

Внешний слой поверх src.core: использует только публичные операции
Rational и insertion_sort.
"""

from .benchmark import (
    BenchmarkConfig,
    BenchmarkReport,
    ElementKind,
    SortTiming,
    run_benchmark,
    time_sort,
)
from .generators import make_rng, random_ints, random_rationals, random_strings

__all__ = [
    "BenchmarkConfig",
    "BenchmarkReport",
    "ElementKind",
    "SortTiming",
    "run_benchmark",
    "time_sort",
    "make_rng",
    "random_ints",
    "random_strings",
    "random_rationals",
]
