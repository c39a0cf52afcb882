"""
Harmonic Sum — частичные суммы гармонического ряда

H(n) = 1/1 + 1/2 + ... + 1/n, вычисляется точно через Rational.add.
"""

from src.core.domain.rational import Rational


def make_harmonic_sum(n: int) -> Rational:
    """
    Точная частичная сумма гармонического ряда.

    Args:
        n: Количество слагаемых (>= 1)

    Returns:
        H(n) в несократимом виде

    Raises:
        ValueError: Если n < 1

    Examples:
        >>> make_harmonic_sum(6)
        Rational(49/20)
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    total = Rational(1, 1)
    for i in range(2, n + 1):
        total = total.add(Rational(1, i))
    return total
