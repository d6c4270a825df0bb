"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Границы фиксированной ширины
2. Проверенную арифметику (add/sub/mul/neg)
3. Знак и gcd
4. Валидацию параметров
"""


import pytest

from src.core.math.numerical_safeguards import (
    INT_MAX,
    INT_MIN,
    INT_WIDTH_BITS,
    RationalOverflowError,
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    ensure_representable,
    gcd_abs,
    is_representable,
    sign,
    validate_int,
)

# =============================================================================
# ТЕСТЫ ГРАНИЦ
# =============================================================================


class TestIntegerWidth:
    """Тесты для констант ширины"""

    def test_bounds_match_width(self) -> None:
        """Границы соответствуют дополнительному коду"""
        assert INT_WIDTH_BITS == 64
        assert INT_MAX == 9223372036854775807
        assert INT_MIN == -9223372036854775808

    def test_is_representable_edges(self) -> None:
        """Граничные значения представимы, соседние за ними — нет"""
        assert is_representable(INT_MAX)
        assert is_representable(INT_MIN)
        assert not is_representable(INT_MAX + 1)
        assert not is_representable(INT_MIN - 1)

    def test_ensure_representable_message(self) -> None:
        """Сообщение об ошибке содержит описание операции"""
        with pytest.raises(RationalOverflowError, match="numerator overflows 64-bit"):
            ensure_representable(INT_MAX + 1, "numerator")


# =============================================================================
# ТЕСТЫ ПРОВЕРЕННОЙ АРИФМЕТИКИ
# =============================================================================


class TestCheckedArithmetic:
    """Тесты для checked_add/sub/mul/neg"""

    def test_regular_values(self) -> None:
        assert checked_add(2, 3) == 5
        assert checked_sub(2, 3) == -1
        assert checked_mul(-4, 5) == -20
        assert checked_neg(7) == -7

    def test_add_overflow_raises(self) -> None:
        with pytest.raises(RationalOverflowError):
            checked_add(INT_MAX, 1)

    def test_sub_overflow_raises(self) -> None:
        with pytest.raises(RationalOverflowError):
            checked_sub(INT_MIN, 1)

    def test_mul_overflow_raises(self) -> None:
        with pytest.raises(RationalOverflowError):
            checked_mul(2 ** 32, 2 ** 31)

    def test_mul_at_boundary(self) -> None:
        """Произведение ровно INT_MIN представимо"""
        assert checked_mul(-(2 ** 32), 2 ** 31) == INT_MIN

    def test_neg_of_min_overflows(self) -> None:
        """-INT_MIN не представимо"""
        with pytest.raises(RationalOverflowError):
            checked_neg(INT_MIN)

    def test_overflow_is_arithmetic_error(self) -> None:
        with pytest.raises(ArithmeticError):
            checked_add(INT_MAX, INT_MAX)


# =============================================================================
# ТЕСТЫ ЗНАКА И GCD
# =============================================================================


class TestSignAndGcd:
    """Тесты для sign и gcd_abs"""

    def test_sign(self) -> None:
        assert sign(-5) == -1
        assert sign(0) == 0
        assert sign(12) == 1

    def test_gcd_ignores_sign(self) -> None:
        assert gcd_abs(-4, 6) == 2
        assert gcd_abs(4, -6) == 2

    def test_gcd_with_zero(self) -> None:
        """gcd(0, b) == |b|, gcd(0, 0) == 0"""
        assert gcd_abs(0, 5) == 5
        assert gcd_abs(0, -5) == 5
        assert gcd_abs(0, 0) == 0


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты для validate_int"""

    def test_validate_int_accepts_int(self) -> None:
        assert validate_int(3, "x") == 3

    def test_validate_int_rejects_bool(self) -> None:
        with pytest.raises(TypeError, match="x must be an int"):
            validate_int(True, "x")

    def test_validate_int_rejects_float(self) -> None:
        with pytest.raises(TypeError, match="got float"):
            validate_int(1.5, "x")
