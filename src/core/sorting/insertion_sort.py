"""
Insertion Sort — обобщённая сортировка по предикату less_than

Один алгоритм для любых типов элементов: int, str, Rational.
Тип задаётся только предикатом строгого сравнения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входная последовательность никогда не изменяется (возвращается новый list)
2. Результат упорядочен по неубыванию относительно less_than
3. Стабильность: равные элементы сохраняют относительный порядок
4. O(n²) сравнений и перестановок в худшем и среднем случае
"""

import operator
from typing import Callable, Iterable, List, TypeVar

from src.core.domain.rational import Rational

T = TypeVar("T")

LessThan = Callable[[T, T], bool]


def insertion_sort(items: Iterable[T], less_than: LessThan = operator.lt) -> List[T]:
    """
    Сортировка вставками.

    Поддерживает отсортированный префикс и сдвигает каждый следующий элемент
    влево, пока предшественник строго больше него. Сдвиг останавливается на
    первом не-большем предшественнике, поэтому сортировка стабильна.

    Args:
        items: Исходная последовательность (не изменяется)
        less_than: Строгий предикат "меньше" (default: operator.lt)

    Returns:
        Новый list, упорядоченный по неубыванию

    Examples:
        >>> insertion_sort([3, 1, 2])
        [1, 2, 3]
        >>> insertion_sort(["banana", "apple"])
        ['apple', 'banana']
    """
    result = list(items)

    for i in range(1, len(result)):
        current = result[i]
        j = i
        while j > 0 and less_than(current, result[j - 1]):
            result[j] = result[j - 1]
            j -= 1
        result[j] = current

    return result


def sort_ints(items: Iterable[int]) -> List[int]:
    """Сортировка целых чисел."""
    return insertion_sort(items, operator.lt)


def sort_strings(items: Iterable[str]) -> List[str]:
    """Лексикографическая сортировка строк."""
    return insertion_sort(items, operator.lt)


def sort_rationals(items: Iterable[Rational]) -> List[Rational]:
    """Сортировка дробей по значению (Rational.less_than)."""
    return insertion_sort(items, Rational.less_than)
