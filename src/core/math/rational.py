"""
Rational — Точная дробь фиксированной ширины

Модуль реализует точную дробь с целыми числителем и знаменателем:
- Сложение/вычитание без потери точности (с контролем переполнения)
- Сравнение через знак перекрёстного произведения (корректно для несокращённых дробей)
- Чистое равенство и хеш по канонической форме (без мутаций операндов)
- Ленивое сокращение на месте (единственная допустимая мутация)
- Приближённое float-значение только для кросс-валидации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0 всегда (знак несёт числитель)
2. numerator, denominator лежат в [INT_MIN, INT_MAX]
3. После reduce(): gcd(|numerator|, denominator) == 1, ноль хранится как 0/1
4. Равенство, хеш и порядок используют одно каноническое правило
"""

from functools import total_ordering
from typing import Union

from src.core.math.numerical_safeguards import (
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    ensure_representable,
    gcd_abs,
    sign,
    validate_int,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================


class ZeroDenominatorError(ValueError):
    """Дробь с нулевым знаменателем не существует."""
    pass


# =============================================================================
# RATIONAL
# =============================================================================


@total_ordering
class Rational:
    """
    Точная дробь numerator/denominator.

    Значение хранится несокращённым до первого вызова reduce().
    Сокращение меняет представление, но не значение.

    Examples:
        >>> Rational(2, 4) == Rational(1, 2)
        True
        >>> str(Rational(1, 3) + Rational(1, 6))
        '9/18'
        >>> str((Rational(1, 3) + Rational(1, 6)).reduce())
        '1/2'
    """

    __slots__ = ("numerator", "denominator", "_reduced")

    def __init__(self, numerator: int, denominator: int = 1):
        """
        Args:
            numerator: Числитель (знаковое целое)
            denominator: Знаменатель (ненулевое целое, default: 1)

        Raises:
            TypeError: Если части не int
            ZeroDenominatorError: Если denominator == 0
            RationalOverflowError: Если части не помещаются в фиксированную ширину
        """
        numerator = validate_int(numerator, "numerator")
        denominator = validate_int(denominator, "denominator")

        if denominator == 0:
            raise ZeroDenominatorError(
                f"denominator must be non-zero, got {numerator}/{denominator}"
            )

        ensure_representable(numerator, "numerator")
        ensure_representable(denominator, "denominator")

        # Знак переносим в числитель
        if denominator < 0:
            numerator = checked_neg(numerator)
            denominator = checked_neg(denominator)

        self.numerator = numerator
        self.denominator = denominator
        self._reduced = False

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, value: Union["Rational", int]) -> "Rational":
        """Приведение int или Rational к Rational."""
        if isinstance(value, Rational):
            return value
        return cls(value, 1)

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """
        Разбор строки вида "n/d" или "n".

        Raises:
            ValueError: Если строка не является дробью
        """
        parts = text.strip().split("/")
        if len(parts) > 2 or not all(p.strip() for p in parts):
            raise ValueError(f"Malformed rational: {text!r}")
        try:
            numbers = [int(p) for p in parts]
        except ValueError:
            raise ValueError(f"Malformed rational: {text!r}") from None
        return cls(*numbers)

    # -------------------------------------------------------------------------
    # Каноническая форма
    # -------------------------------------------------------------------------

    @property
    def reduced(self) -> bool:
        """True если дробь уже в канонической форме."""
        return self._reduced

    def _canonical_pair(self) -> tuple[int, int]:
        if self._reduced:
            return (self.numerator, self.denominator)
        divisor = gcd_abs(self.numerator, self.denominator)
        return (self.numerator // divisor, self.denominator // divisor)

    def reduce(self) -> "Rational":
        """
        Сокращение на месте. Идемпотентно.

        0/d сокращается до 0/1 (gcd(0, d) == d).

        Returns:
            self (для цепочек)
        """
        if not self._reduced:
            self.numerator, self.denominator = self._canonical_pair()
            self._reduced = True
        return self

    def canonical(self) -> "Rational":
        """Сокращённая копия; self не изменяется."""
        result = Rational(*self._canonical_pair())
        result._reduced = True
        return result

    def as_pair(self) -> tuple[int, int]:
        """Текущее (возможно несокращённое) представление."""
        return (self.numerator, self.denominator)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "Rational") -> "Rational":
        if not isinstance(other, Rational):
            return NotImplemented
        # (a.n*b.d + b.n*a.d) / (a.d*b.d), без сокращения
        numerator = checked_add(
            checked_mul(self.numerator, other.denominator),
            checked_mul(other.numerator, self.denominator),
        )
        denominator = checked_mul(self.denominator, other.denominator)
        return Rational(numerator, denominator)

    def __sub__(self, other: "Rational") -> "Rational":
        if not isinstance(other, Rational):
            return NotImplemented
        numerator = checked_sub(
            checked_mul(self.numerator, other.denominator),
            checked_mul(other.numerator, self.denominator),
        )
        denominator = checked_mul(self.denominator, other.denominator)
        return Rational(numerator, denominator)

    def __neg__(self) -> "Rational":
        return Rational(checked_neg(self.numerator), self.denominator)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "Rational") -> int:
        """
        Трёхзначное сравнение через перекрёстное произведение.

        sign(a.n*b.d - a.d*b.n); знаменатели всегда положительны,
        поэтому результат корректен и для несокращённых дробей.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        return sign(
            checked_sub(
                checked_mul(self.numerator, other.denominator),
                checked_mul(self.denominator, other.numerator),
            )
        )

    def equals(self, other: "Rational") -> bool:
        """Чистое равенство значений. Операнды не сокращаются."""
        return self.compare(other) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: "Rational") -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(self._canonical_pair())

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def to_float(self) -> float:
        """
        Приближённое значение (с потерей точности).

        Используется только для кросс-валидации, никогда для генерации
        или упорядочивания.
        """
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"
