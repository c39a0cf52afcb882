"""
Generators — случайные входные данные для бенчмарка сортировки

Источник случайности всегда передаётся явно (random.Random) и живёт только
в рамках одного запуска: глобальный seed процесса не используется.
"""

import random
import string
from typing import Final, List, Optional

from src.core.domain.rational import Rational

# Алфавит случайных строк: a-z, A-Z
LETTERS: Final[str] = string.ascii_lowercase + string.ascii_uppercase

DEFAULT_INT_UPPER: Final[int] = 100
DEFAULT_STRING_LENGTH: Final[int] = 10
DEFAULT_RATIONAL_UPPER: Final[int] = 50


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Отдельный генератор для одного запуска (seed=None — из энтропии ОС)."""
    return random.Random(seed)


def random_ints(
    n: int, upper: int = DEFAULT_INT_UPPER, rng: Optional[random.Random] = None
) -> List[int]:
    """
    n случайных целых из [0, upper).

    Raises:
        ValueError: Если n < 0 или upper < 1
    """
    _validate_size(n)
    if upper < 1:
        raise ValueError(f"upper must be >= 1, got {upper}")

    rng = rng or make_rng()
    return [rng.randrange(upper) for _ in range(n)]


def random_strings(
    n: int, length: int = DEFAULT_STRING_LENGTH, rng: Optional[random.Random] = None
) -> List[str]:
    """
    n случайных строк длины length из LETTERS.

    Raises:
        ValueError: Если n < 0 или length < 0
    """
    _validate_size(n)
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")

    rng = rng or make_rng()
    return ["".join(rng.choice(LETTERS) for _ in range(length)) for _ in range(n)]


def random_rationals(
    n: int, upper: int = DEFAULT_RATIONAL_UPPER, rng: Optional[random.Random] = None
) -> List[Rational]:
    """
    n случайных дробей: числитель из [0, upper), знаменатель из [1, upper).

    Знаменатель никогда не равен 0, поэтому все дроби участвуют
    в строгом порядке less_than.

    Raises:
        ValueError: Если n < 0 или upper < 2
    """
    _validate_size(n)
    if upper < 2:
        raise ValueError(f"upper must be >= 2, got {upper}")

    rng = rng or make_rng()
    return [Rational(rng.randrange(upper), rng.randrange(1, upper)) for _ in range(n)]


def _validate_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
