"""
Number Theory — НОД для сокращения дробей

Модуль содержит стратегии вычисления наибольшего общего делителя (НОД),
которые использует Rational.to_lowest_terms:
- TRIAL_DIVISION: перебор всех кандидатов 1..min(n, d) (legacy, O(min(n, d)))
- EUCLID: алгоритм Евклида через math.gcd (O(log min(n, d)))

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Обе стратегии возвращают одинаковый результат для любых входов
2. Если любой из аргументов <= 0, НОД = 0 (делитель не найден)
3. Функции чистые и детерминированные
"""

import math
from enum import Enum


# =============================================================================
# STRATEGIES
# =============================================================================


class GcdStrategy(str, Enum):
    """Стратегия вычисления НОД"""

    TRIAL_DIVISION = "trial_division"
    EUCLID = "euclid"


# =============================================================================
# GCD
# =============================================================================


def gcd_trial_division(n: int, d: int) -> int:
    """
    НОД перебором делителей.

    Проверяет каждое i от 1 до min(n, d) и запоминает наибольший общий
    делитель. Если n <= 0 или d <= 0, цикл не выполняется и результат 0.

    Args:
        n: Первое число (ожидается неотрицательным)
        d: Второе число (ожидается неотрицательным)

    Returns:
        Наибольший общий делитель или 0, если делитель не найден

    Examples:
        >>> gcd_trial_division(12, 18)
        6
        >>> gcd_trial_division(0, 5)
        0
    """
    gcd = 0
    for i in range(1, min(n, d) + 1):
        if n % i == 0 and d % i == 0:
            gcd = i
    return gcd


def gcd_euclid(n: int, d: int) -> int:
    """
    НОД алгоритмом Евклида с семантикой gcd_trial_division.

    math.gcd(0, d) == d, поэтому неположительные аргументы
    обрабатываются отдельно, чтобы результат совпадал с перебором.

    Examples:
        >>> gcd_euclid(12, 18)
        6
        >>> gcd_euclid(0, 5)
        0
    """
    if n <= 0 or d <= 0:
        return 0
    return math.gcd(n, d)


def greatest_common_divisor(
    n: int, d: int, strategy: GcdStrategy = GcdStrategy.EUCLID
) -> int:
    """
    НОД выбранной стратегией.

    Args:
        n: Первое число
        d: Второе число
        strategy: Стратегия вычисления (default: EUCLID)

    Returns:
        НОД (0, если n <= 0 или d <= 0)

    Raises:
        ValueError: Если стратегия неизвестна
    """
    # GcdStrategy("...") сам бросает ValueError для неизвестных значений
    strategy = GcdStrategy(strategy)

    if strategy is GcdStrategy.TRIAL_DIVISION:
        return gcd_trial_division(n, d)
    return gcd_euclid(n, d)
