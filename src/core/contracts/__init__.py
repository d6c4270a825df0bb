"""
Contract Validation Module

Модуль для валидации JSON контрактов отчётов.
"""

from .validators import (
    CoincidenceReportValidator,
    ContractValidator,
    SchemaLoader,
    validate_coincidence_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CoincidenceReportValidator",
    # Functions
    "validate_coincidence_report",
]
