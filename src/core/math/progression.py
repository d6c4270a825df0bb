"""
PeriodicGenerator — Арифметическая прогрессия в открытом интервале

Модуль перечисляет точные моменты shift + k·period (k целое), лежащие
строго внутри интервала (lower, upper):
- Позиционирование на первый член >= lower (в обе стороны от shift)
- Исключение обеих границ интервала
- Сокращение после каждого шага (ограничение роста числителя/знаменателя)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. period > 0 (иначе InvalidPeriodError при конструировании)
2. Для каждого члена: lower < term < upper строго
3. Члены строго возрастают
4. lower >= upper → пустая последовательность (цикл не выполняется ни разу)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union

from src.core.math.rational import Rational

logger = logging.getLogger(__name__)

Bound = Union[Rational, int]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidPeriodError(ValueError):
    """Период прогрессии должен быть строго положительным."""
    pass


# =============================================================================
# INTERVAL
# =============================================================================


@dataclass(frozen=True)
class Interval:
    """
    Открытый интервал (lower, upper) с точными границами.

    lower >= upper описывает пустой интервал.
    """

    lower: Rational
    upper: Rational

    def __post_init__(self) -> None:
        if not isinstance(self.lower, Rational) or not isinstance(self.upper, Rational):
            raise TypeError(
                f"Interval bounds must be Rational, got "
                f"{type(self.lower).__name__}, {type(self.upper).__name__}"
            )

    @classmethod
    def of(cls, lower: Bound, upper: Bound) -> "Interval":
        """Интервал из int или Rational границ."""
        return cls(Rational.of(lower), Rational.of(upper))

    @property
    def is_empty(self) -> bool:
        return self.lower >= self.upper

    def contains(self, value: Rational) -> bool:
        """Строгая принадлежность: lower < value < upper."""
        return self.lower < value < self.upper

    def __str__(self) -> str:
        return f"({self.lower}, {self.upper})"


# =============================================================================
# PERIODIC GENERATOR
# =============================================================================


class PeriodicGenerator:
    """
    Генератор моментов shift + k·period внутри открытого интервала.

    Все параметры задаются в конструкторе; после конструирования объект
    неизменяем. with_interval() возвращает копию с другим интервалом.

    Examples:
        >>> gen = PeriodicGenerator(Rational(0), Rational(1), Interval.of(0, 5))
        >>> [str(t) for t in gen.generate()]
        ['1/1', '2/1', '3/1', '4/1']
    """

    def __init__(
        self,
        shift: Rational,
        period: Rational,
        interval: Interval,
        name: Optional[str] = None,
    ):
        """
        Args:
            shift: Начальная фаза
            period: Период (строго > 0)
            interval: Открытый интервал генерации
            name: Имя для логов и отчётов (optional)

        Raises:
            TypeError: Если параметры не Rational / Interval
            InvalidPeriodError: Если period <= 0
        """
        if not isinstance(shift, Rational) or not isinstance(period, Rational):
            raise TypeError("shift and period must be Rational")
        if not isinstance(interval, Interval):
            raise TypeError(f"interval must be Interval, got {type(interval).__name__}")
        if period.numerator <= 0:
            raise InvalidPeriodError(f"period must be positive, got {period}")

        self._shift = shift.canonical()
        self._period = period.canonical()
        self._interval = interval
        self._name = name or f"{self._shift} + k*{self._period}"

    @property
    def shift(self) -> Rational:
        return self._shift

    @property
    def period(self) -> Rational:
        return self._period

    @property
    def interval(self) -> Interval:
        return self._interval

    @property
    def name(self) -> str:
        return self._name

    def with_interval(
        self,
        lower: Union[Bound, Interval],
        upper: Optional[Bound] = None,
    ) -> "PeriodicGenerator":
        """
        Копия генератора с новым интервалом.

        Args:
            lower: Нижняя граница или готовый Interval
            upper: Верхняя граница (если lower не Interval)
        """
        if isinstance(lower, Interval):
            interval = lower
        else:
            if upper is None:
                raise TypeError("upper bound is required when lower is not an Interval")
            interval = Interval.of(lower, upper)
        return PeriodicGenerator(self._shift, self._period, interval, name=self._name)

    def _first_at_or_above(self, lower: Rational) -> Rational:
        term = self._shift
        if term < lower:
            while term < lower:
                term = (term + self._period).reduce()
        else:
            # shift выше lower: шагаем назад, пока предыдущий член >= lower
            while True:
                previous = (term - self._period).reduce()
                if previous < lower:
                    break
                term = previous
        return term.reduce()

    def generate(self) -> Iterator[Rational]:
        """
        Члены прогрессии строго внутри интервала, по возрастанию.

        Yields:
            Сокращённые Rational моменты

        Raises:
            RationalOverflowError: Если шаг выходит за фиксированную ширину
        """
        lower, upper = self._interval.lower, self._interval.upper
        if self._interval.is_empty:
            logger.debug("Generator %s: empty interval %s", self._name, self._interval)
            return

        term = self._first_at_or_above(lower)
        if term == lower:
            term = (term + self._period).reduce()

        while term < upper:
            yield term
            term = (term + self._period).reduce()

    def generate_into(
        self,
        distinct_sink: Callable[[Rational], None],
        all_sink: Callable[[Rational], None],
    ) -> int:
        """
        Передача каждого члена в оба приёмника.

        Returns:
            Количество сгенерированных членов
        """
        emitted = 0
        for term in self.generate():
            distinct_sink(term)
            all_sink(term)
            emitted += 1
        return emitted

    def __repr__(self) -> str:
        return (
            f"PeriodicGenerator(shift={self._shift}, period={self._period}, "
            f"interval={self._interval}, name={self._name!r})"
        )
