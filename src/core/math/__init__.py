"""
Core math modules для точного подсчёта совпадений

Точная рациональная арифметика фиксированной ширины и ограниченные
арифметические прогрессии.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Integer width constants
    INT_MAX,
    INT_MIN,
    INT_WIDTH_BITS,
    # Exceptions
    RationalOverflowError,
    # Checked arithmetic
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    ensure_representable,
    gcd_abs,
    is_representable,
    sign,
    # Validation
    validate_int,
)

# Rational
from src.core.math.rational import (
    Rational,
    ZeroDenominatorError,
)

# Progression
from src.core.math.progression import (
    Interval,
    InvalidPeriodError,
    PeriodicGenerator,
)

__all__ = [
    # Numerical Safeguards — Constants
    "INT_MAX",
    "INT_MIN",
    "INT_WIDTH_BITS",
    # Numerical Safeguards — Exceptions
    "RationalOverflowError",
    # Numerical Safeguards — Checked arithmetic
    "checked_add",
    "checked_mul",
    "checked_neg",
    "checked_sub",
    "ensure_representable",
    "gcd_abs",
    "is_representable",
    "sign",
    # Numerical Safeguards — Validation
    "validate_int",
    # Rational
    "Rational",
    "ZeroDenominatorError",
    # Progression
    "Interval",
    "InvalidPeriodError",
    "PeriodicGenerator",
]
