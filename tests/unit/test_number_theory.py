"""
Тесты для модуля Number Theory

Проверяет:
1. НОД перебором и алгоритмом Евклида
2. Совпадение стратегий на всех входах, включая нули
3. Выбор стратегии и обработку неизвестной стратегии
"""

import math

import pytest

from src.core.math.number_theory import (
    GcdStrategy,
    gcd_euclid,
    gcd_trial_division,
    greatest_common_divisor,
)


class TestGcdTrialDivision:
    """Тесты для gcd_trial_division"""

    def test_common_divisor(self) -> None:
        assert gcd_trial_division(12, 18) == 6
        assert gcd_trial_division(49, 20) == 1
        assert gcd_trial_division(7, 7) == 7

    def test_non_positive_yields_zero(self) -> None:
        """Цикл не выполняется при n <= 0 или d <= 0"""
        assert gcd_trial_division(0, 5) == 0
        assert gcd_trial_division(5, 0) == 0
        assert gcd_trial_division(-4, 8) == 0


class TestGcdEuclid:
    """Тесты для gcd_euclid"""

    def test_matches_math_gcd_for_positive(self) -> None:
        for n in range(1, 40):
            for d in range(1, 40):
                assert gcd_euclid(n, d) == math.gcd(n, d)

    def test_non_positive_yields_zero(self) -> None:
        assert gcd_euclid(0, 5) == 0
        assert gcd_euclid(5, 0) == 0
        assert gcd_euclid(0, 0) == 0


class TestGreatestCommonDivisor:
    """Тесты для greatest_common_divisor"""

    def test_strategies_agree(self) -> None:
        for n in range(-5, 60):
            for d in range(-5, 60):
                assert greatest_common_divisor(
                    n, d, GcdStrategy.TRIAL_DIVISION
                ) == greatest_common_divisor(n, d, GcdStrategy.EUCLID)

    def test_default_strategy(self) -> None:
        assert greatest_common_divisor(30, 42) == 6

    def test_strategy_by_value(self) -> None:
        assert greatest_common_divisor(30, 42, "trial_division") == 6

    def test_unknown_strategy_raises(self) -> None:
        with pytest.raises(ValueError):
            greatest_common_divisor(30, 42, "binary")
