"""
Contract Validation Module

Модуль для валидации JSON контрактов rational-engine.
"""

from .validators import (
    BenchmarkReportValidator,
    ContractValidator,
    RationalValidator,
    SchemaLoader,
    validate_benchmark_report,
    validate_rational,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RationalValidator",
    "BenchmarkReportValidator",
    # Functions
    "validate_rational",
    "validate_benchmark_report",
]
