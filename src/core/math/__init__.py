"""
Core math modules для rational-engine

Теоретико-числовые примитивы, используемые при сокращении дробей.
Гармонические суммы — в src.core.math.harmonic (зависит от domain).
"""

# Number Theory (НОД)
from src.core.math.number_theory import (
    GcdStrategy,
    gcd_euclid,
    gcd_trial_division,
    greatest_common_divisor,
)

__all__ = [
    # Number Theory — Types
    "GcdStrategy",
    # Number Theory — Functions
    "gcd_euclid",
    "gcd_trial_division",
    "greatest_common_divisor",
]
