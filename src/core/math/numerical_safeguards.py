"""
Numerical Safeguards — Checked Fixed-Width Integer Primitives

Модуль обеспечивает целочисленную арифметику фиксированной ширины для
точных рациональных вычислений:
- Проверенные операции (add/sub/mul/neg) с детекцией переполнения
- Знак значения и gcd для канонизации дробей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой операции лежит в [INT_MIN, INT_MAX]
2. Переполнение никогда не "заворачивается": всегда RationalOverflowError
3. Операнды не изменяются (все функции чистые)
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# ШИРИНА ЦЕЛЫХ
# =============================================================================

# Ширина знакового целого для числителя и знаменателя
INT_WIDTH_BITS: Final[int] = 64

# Границы представимого диапазона (two's complement)
INT_MIN: Final[int] = -(2 ** (INT_WIDTH_BITS - 1))
INT_MAX: Final[int] = 2 ** (INT_WIDTH_BITS - 1) - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RationalOverflowError(ArithmeticError):
    """
    Переполнение фиксированной ширины при целочисленной операции.

    Переполнение портит порядок и равенство дробей, поэтому вычисление
    прерывается, а не продолжается на "завернувшемся" значении.
    """
    pass


# =============================================================================
# ПРОВЕРЕННАЯ АРИФМЕТИКА
# =============================================================================


def is_representable(value: int) -> bool:
    """
    Проверка, помещается ли целое в фиксированную ширину.

    Args:
        value: Проверяемое значение

    Returns:
        True если INT_MIN <= value <= INT_MAX
    """
    return INT_MIN <= value <= INT_MAX


def ensure_representable(value: int, operation: str = "value") -> int:
    """
    Возвращает value, если оно помещается в INT_WIDTH_BITS.

    Args:
        value: Результат операции
        operation: Описание операции (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        RationalOverflowError: Если value вне [INT_MIN, INT_MAX]
    """
    if not is_representable(value):
        raise RationalOverflowError(
            f"{operation} overflows {INT_WIDTH_BITS}-bit signed range: {value}"
        )
    return value


def checked_add(a: int, b: int) -> int:
    """
    Сложение с контролем переполнения.

    Examples:
        >>> checked_add(2, 3)
        5
        >>> checked_add(INT_MAX, 1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        RationalOverflowError: ...
    """
    return ensure_representable(a + b, f"{a} + {b}")


def checked_sub(a: int, b: int) -> int:
    """Вычитание с контролем переполнения."""
    return ensure_representable(a - b, f"{a} - {b}")


def checked_mul(a: int, b: int) -> int:
    """
    Умножение с контролем переполнения.

    Examples:
        >>> checked_mul(6, 7)
        42
        >>> checked_mul(-4, 5)
        -20
    """
    return ensure_representable(a * b, f"{a} * {b}")


def checked_neg(a: int) -> int:
    """
    Смена знака с контролем переполнения.

    -INT_MIN не представимо в дополнительном коде.
    """
    return ensure_representable(-a, f"-({a})")


def sign(value: int) -> int:
    """
    Знак целого.

    Returns:
        -1 если value < 0, 0 если value == 0, +1 если value > 0
    """
    if value < 0:
        return -1
    elif value > 0:
        return 1
    return 0


def gcd_abs(a: int, b: int) -> int:
    """
    Наибольший общий делитель по модулю.

    gcd(0, b) == |b|; gcd(0, 0) == 0.
    """
    return math.gcd(abs(a), abs(b))


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_int(value: object, name: str) -> int:
    """
    Валидация, что значение — целое (bool не допускается).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        TypeError: Если value не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}: {value!r}")
    return value
