"""
Sorting — обобщённая сортировка вставками по предикату less_than.
"""

from src.core.sorting.insertion_sort import (
    LessThan,
    insertion_sort,
    sort_ints,
    sort_rationals,
    sort_strings,
)

__all__ = [
    "LessThan",
    "insertion_sort",
    "sort_ints",
    "sort_strings",
    "sort_rationals",
]
