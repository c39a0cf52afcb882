"""
Rational — Точная дробь numerator/denominator

Immutable Pydantic модель рационального числа и операции над ним:
- Валидированное создание (make_rational)
- Сокращение до несократимой дроби (to_lowest_terms)
- Сравнение перекрёстным умножением (equal, less_than)
- Арифметика (add, multiply, divide, invert)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая операция возвращает новый экземпляр, входы не изменяются
2. После сокращения знаменатель >= 0 (знак хранится в числителе)
3. Ошибки (InvalidDenominator, NotDivisible, NoInverse) возвращаются
   в RationalResult вместе с fallback значением, а не бросаются
4. Прямое создание Rational(n, d) не нормализует значение: числитель и
   знаменатель сохраняются буквально (для str/split/accessors)

СЕНТИНЕЛ d == 0:
Rational(6, 0) допустим как сырое значение. Его поведение определено явно:
to_float даёт ±inf/nan, is_int == False, to_lowest_terms возвращает его без
изменений, less_than с таким правым операндом сравнивает левый с нулём как
float (legacy-совместимость, не строгий порядок).

ПЕРЕПОЛНЕНИЕ:
int в Python не ограничен по ширине, переполнение при умножении невозможно.
"""

import logging
import math
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple, Union

from pydantic import BaseModel, Field, StrictInt

from src.core.contracts import validate_rational
from src.core.math.number_theory import GcdStrategy, greatest_common_divisor

LOG = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RationalConfig:
    """Конфигурация движка рациональных чисел.

    gcd_strategy — стратегия НОД для to_lowest_terms по умолчанию.
    """

    gcd_strategy: GcdStrategy = GcdStrategy.EUCLID


_CONFIG: ContextVar[RationalConfig] = ContextVar("rational_config", default=RationalConfig())


def get_rational_config() -> RationalConfig:
    """Текущая конфигурация движка (default вне rational_config)."""
    return _CONFIG.get()


@contextmanager
def rational_config(config: RationalConfig) -> Iterator[RationalConfig]:
    """
    Конфигурация движка в пределах блока with.

    Значение хранится в ContextVar и восстанавливается при выходе,
    поэтому глобальное состояние процесса не меняется.

    Examples:
        >>> with rational_config(RationalConfig(GcdStrategy.TRIAL_DIVISION)):
        ...     Rational(2, 4).to_lowest_terms()
        Rational(1/2)
    """
    token = _CONFIG.set(config)
    try:
        yield config
    finally:
        _CONFIG.reset(token)


# =============================================================================
# ERRORS
# =============================================================================


class RationalErrorKind(str, Enum):
    """Вид ошибки операции над Rational"""

    INVALID_DENOMINATOR = "invalid_denominator"
    NOT_DIVISIBLE = "not_divisible"
    NO_INVERSE = "no_inverse"


class RationalError(Exception):
    """
    Базовая ошибка движка рациональных чисел.

    Операции движка не бросают эти ошибки, а возвращают их в RationalResult.
    Бросает только RationalResult.unwrap() (и оператор `/`).
    """

    kind: RationalErrorKind


class InvalidDenominator(RationalError):
    """Создание дроби со знаменателем 0"""

    kind = RationalErrorKind.INVALID_DENOMINATOR


class NotDivisible(RationalError):
    """Деление при делимом с d == 0 или делителе с n == 0"""

    kind = RationalErrorKind.NOT_DIVISIBLE


class NoInverse(RationalError):
    """Обращение дроби с нулевым числителем"""

    kind = RationalErrorKind.NO_INVERSE


# =============================================================================
# RATIONAL MODEL
# =============================================================================


class Rational(BaseModel):
    """
    Рациональное число numerator/denominator.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    Структурное равенство (==) и hash сравнивают поля буквально,
    равенство по значению — метод equal().
    Операторы <, <=, >, >= сравнивают значения, поэтому
    Rational(1, 2) <= Rational(2, 4) истинно, хотя == ложно.
    """

    numerator: StrictInt = Field(..., description="Числитель")
    denominator: StrictInt = Field(..., description="Знаменатель (0 только как сентинел)")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, numerator: int, denominator: int) -> None:
        super().__init__(numerator=numerator, denominator=denominator)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def split(self) -> Tuple[int, int]:
        """Пара (numerator, denominator) без нормализации."""
        return self.numerator, self.denominator

    def to_float(self) -> float:
        """
        Приближение float (с потерей точности).

        Для d == 0 возвращает ±inf (n != 0) или nan (n == 0), не бросая
        ZeroDivisionError.
        """
        if self.denominator == 0:
            if self.numerator == 0:
                return math.nan
            return math.copysign(math.inf, self.numerator)
        return self.numerator / self.denominator

    def is_int(self) -> bool:
        """True, если значение — целое число (для d == 0 всегда False)."""
        if self.denominator == 0:
            return False
        return self.numerator % self.denominator == 0

    # -------------------------------------------------------------------------
    # Reduction
    # -------------------------------------------------------------------------

    def to_lowest_terms(self, strategy: Optional[GcdStrategy] = None) -> "Rational":
        """
        Равная дробь в несократимом виде.

        Алгоритм:
        1. Если d < 0: меняем знак у n и d (единственная коррекция знака)
        2. НОД(|n|, d) выбранной стратегией
        3. Если НОД > 1: делим n и d на НОД

        НОД равен 0, когда n == 0 или d == 0, поэтому 0/d и n/0 возвращаются
        только с нормализованным знаком, без сокращения.

        Args:
            strategy: Стратегия НОД (default: из RationalConfig)

        Returns:
            Новый Rational с d >= 0
        """
        if strategy is None:
            strategy = _CONFIG.get().gcd_strategy

        n, d = _sign_normalized(self.numerator, self.denominator)
        gcd = greatest_common_divisor(abs(n), d, strategy)

        if gcd > 1:
            return Rational(n // gcd, d // gcd)
        return Rational(n, d)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def equal(self, other: "RationalLike") -> bool:
        """
        Равенство по значению: 2/4 равно 1/2.

        Обе дроби сокращаются, затем сравниваются перекрёстным умножением:
        a.n * b.d == a.d * b.n
        """
        a = self.to_lowest_terms()
        b = _coerce(other).to_lowest_terms()
        return a.numerator * b.denominator == a.denominator * b.numerator

    def less_than(self, other: "RationalLike") -> bool:
        """
        Строго меньше: a.n * b.d < b.n * a.d после нормализации знаков.

        Если знаменатель other равен 0, self сравнивается с нулём как float.
        Это legacy-поведение, не строгий порядок: сентинелы не участвуют
        в гарантиях сортировки.
        """
        n, d = _sign_normalized(self.numerator, self.denominator)
        reduced = _coerce(other).to_lowest_terms()

        if reduced.denominator == 0:
            return Rational(n, d).to_float() < 0
        return n * reduced.denominator < reduced.numerator * d

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "RationalLike") -> "Rational":
        """
        Сумма.

        Нулевая сумма всегда 0/1, сумма равная единице — 1/1,
        иначе результат нормализован по знаку и сокращён.
        """
        other = _coerce(other)
        new_num = self.numerator * other.denominator + other.numerator * self.denominator

        if new_num == 0:
            return Rational(0, 1)

        new_den = self.denominator * other.denominator
        if new_num == new_den:
            return Rational(1, 1)

        return Rational(*_sign_normalized(new_num, new_den)).to_lowest_terms()

    def multiply(self, other: "RationalLike") -> "Rational":
        """
        Произведение.

        В отличие от add, нулевое произведение не приводится к 0/1:
        возвращается 0/(a.d * b.d) с сырым знаменателем.
        """
        other = _coerce(other)
        new_num = self.numerator * other.numerator
        new_den = self.denominator * other.denominator

        if new_num == 0:
            return Rational(0, new_den)
        if new_num == new_den:
            return Rational(1, 1)

        return Rational(*_sign_normalized(new_num, new_den)).to_lowest_terms()

    def divide(self, other: "RationalLike") -> "RationalResult":
        """
        Частное self / other.

        Returns:
            RationalResult:
            - NotDivisible (value = self), если self.d == 0 или other.n == 0
            - 0/(self.d * other.n) без ошибки, если other.d == 0
            - иначе сокращённое частное
        """
        other = _coerce(other)
        new_den = self.denominator * other.numerator

        if self.denominator != 0 and other.numerator != 0 and other.denominator != 0:
            new_num = self.numerator * other.denominator
            if new_num == new_den:
                return RationalResult(Rational(1, 1))

            result = make_rational(*_sign_normalized(new_num, new_den))
            return RationalResult(result.value.to_lowest_terms(), result.error)

        if self.denominator == 0 or other.numerator == 0:
            return _failure(
                self,
                NotDivisible(
                    f"{self} is not divisible by {other}: either denominator of "
                    f"the dividend or numerator of the divisor is 0"
                ),
            )

        # other.d == 0: деление на неограниченный сентинел
        return make_rational(0, new_den)

    def invert(self) -> "RationalResult":
        """
        Обратная дробь d/n (без сокращения).

        Returns:
            RationalResult с NoInverse (value = self), если n == 0
        """
        if self.numerator == 0:
            return _failure(self, NoInverse(f"numerator of {self} is 0, so it has no inverse"))
        return RationalResult(Rational(self.denominator, self.numerator))

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """
        JSON-совместимое представление {"numerator": n, "denominator": d},
        проверенное контрактом rational.

        Raises:
            jsonschema.ValidationError: Если dict не соответствует rational.json
        """
        data = self.model_dump()
        validate_rational(data)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Rational":
        """
        Создание из dict без нормализации.

        Сначала dict проверяется контрактом rational: отсутствующие поля,
        лишние ключи и нецелые значения отклоняются до создания модели.

        Raises:
            jsonschema.ValidationError: Если dict не соответствует rational.json
        """
        validate_rational(data)
        return cls(data["numerator"], data["denominator"])

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Rational({self.numerator}/{self.denominator})"

    def __float__(self) -> float:
        return self.to_float()

    def __lt__(self, other: object) -> bool:
        if not _is_rational_like(other):
            return NotImplemented
        return self.less_than(other)

    def __gt__(self, other: object) -> bool:
        if not _is_rational_like(other):
            return NotImplemented
        return _coerce(other).less_than(self)

    def __le__(self, other: object) -> bool:
        if not _is_rational_like(other):
            return NotImplemented
        return self.less_than(other) or self.equal(other)

    def __ge__(self, other: object) -> bool:
        if not _is_rational_like(other):
            return NotImplemented
        return _coerce(other).less_than(self) or self.equal(other)

    def __add__(self, other: object) -> "Rational":
        if not _is_rational_like(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> "Rational":
        if not _is_rational_like(other):
            return NotImplemented
        return _coerce(other).add(self)

    def __mul__(self, other: object) -> "Rational":
        if not _is_rational_like(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: object) -> "Rational":
        if not _is_rational_like(other):
            return NotImplemented
        return _coerce(other).multiply(self)

    def __truediv__(self, other: object) -> "Rational":
        """Деление оператором: бросает NotDivisible вместо fallback."""
        if not _is_rational_like(other):
            return NotImplemented
        return self.divide(other).unwrap()

    def __rtruediv__(self, other: object) -> "Rational":
        if not _is_rational_like(other):
            return NotImplemented
        return _coerce(other).divide(self).unwrap()


RationalLike = Union[Rational, int]


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class RationalResult:
    """
    Результат операции, которая может завершиться ошибкой.

    value всегда заполнен (при ошибке — fallback значение), поэтому
    вызывающий код обязан проверить error перед использованием value.
    """

    value: Rational
    error: Optional[RationalError] = None

    @property
    def ok(self) -> bool:
        """True, если операция прошла без ошибки."""
        return self.error is None

    def unwrap(self) -> Rational:
        """
        Значение успешной операции.

        Raises:
            RationalError: Ошибка операции (InvalidDenominator/NotDivisible/NoInverse)
        """
        if self.error is not None:
            raise self.error
        return self.value


# =============================================================================
# CONSTRUCTION
# =============================================================================


def make_rational(n: int, d: int) -> RationalResult:
    """
    Валидированное создание дроби.

    Дробь не сокращается и не нормализуется по знаку.

    Args:
        n: Числитель
        d: Знаменатель

    Returns:
        RationalResult с Rational(n, d) или InvalidDenominator
        (value = Rational(0, 0)), если d == 0

    Examples:
        >>> make_rational(2, 4).value
        Rational(2/4)
        >>> make_rational(1, 0).ok
        False
    """
    if d == 0:
        return _failure(
            Rational(0, 0),
            InvalidDenominator(
                f"cannot make a rational number {n}/{d}: denominator equals to 0"
            ),
        )
    return RationalResult(Rational(n, d))


# =============================================================================
# HELPERS
# =============================================================================


def _sign_normalized(n: int, d: int) -> Tuple[int, int]:
    """Перенос знака в числитель: d >= 0."""
    if d < 0:
        return -n, -d
    return n, d


def _is_rational_like(value: object) -> bool:
    return isinstance(value, Rational) or (isinstance(value, int) and not isinstance(value, bool))


def _coerce(value: object) -> Rational:
    """Приведение int к n/1; остальные типы кроме Rational — TypeError."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value, 1)
    raise TypeError(f"Expected Rational or int, got {type(value).__name__}")


def _failure(fallback: Rational, error: RationalError) -> RationalResult:
    LOG.debug("%s: %s (fallback %s)", error.kind.value, error, fallback)
    return RationalResult(fallback, error)
