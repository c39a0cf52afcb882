"""
Domain models and value objects.

Contains the Rational value type, its error kinds and operation results.
"""

from src.core.domain.rational import (
    InvalidDenominator,
    NoInverse,
    NotDivisible,
    Rational,
    RationalConfig,
    RationalError,
    RationalErrorKind,
    RationalLike,
    RationalResult,
    get_rational_config,
    make_rational,
    rational_config,
)

__all__ = [
    # Rational model
    "Rational",
    "RationalLike",
    "RationalResult",
    "make_rational",
    # Config
    "RationalConfig",
    "get_rational_config",
    "rational_config",
    # Errors
    "RationalError",
    "RationalErrorKind",
    "InvalidDenominator",
    "NotDivisible",
    "NoInverse",
]
