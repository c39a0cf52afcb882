"""
Тесты для гармонических сумм
"""

import pytest

from src.core.domain import Rational
from src.core.math.harmonic import make_harmonic_sum


class TestMakeHarmonicSum:
    """Тесты для make_harmonic_sum"""

    def test_h6_exact(self) -> None:
        """1/1 + 1/2 + ... + 1/6 = 49/20 точно"""
        h6 = make_harmonic_sum(6)
        assert h6 == Rational(49, 20)
        assert h6.equal(Rational(98, 40))

    def test_first_terms(self) -> None:
        assert make_harmonic_sum(1) == Rational(1, 1)
        assert make_harmonic_sum(2) == Rational(3, 2)
        assert make_harmonic_sum(3) == Rational(11, 6)
        assert make_harmonic_sum(10) == Rational(7381, 2520)

    def test_inverse_of_h6(self) -> None:
        inverted = make_harmonic_sum(6).invert()
        assert inverted.ok
        assert inverted.value == Rational(20, 49)
        assert not inverted.value.equal(make_harmonic_sum(6))

    def test_invalid_n(self) -> None:
        with pytest.raises(ValueError, match="n must be >= 1"):
            make_harmonic_sum(0)
