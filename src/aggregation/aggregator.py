"""CoincidenceAggregator — сбор и дедупликация моментов нескольких генераторов.

Агрегатор владеет генераторами и двумя коллекциями результата:
- distinct_instants: различные моменты по возрастанию (точное равенство)
- all_instants: все моменты в порядке генератор → появление (с дубликатами)

Производные отчёты: счётчики, float кросс-валидация, отчёт о дубликатах.
"""

import bisect
import logging
from collections import defaultdict
from typing import Iterable, Optional

from src.core.domain.report import CoincidenceSummary
from src.core.math.progression import Interval, PeriodicGenerator
from src.core.math.rational import Rational

logger = logging.getLogger(__name__)


class AggregationStateError(RuntimeError):
    """Нарушение жизненного цикла: compute() ровно один раз, отчёты только после него."""
    pass


class CoincidenceAggregator:
    """Агрегатор моментов совпадения.

    Жизненный цикл:
    1. add_generator() — наполнение генераторами
    2. compute() — единственный проход генерации
    3. отчёты: distinct_count(), total_count(), validate_against_approximation(),
       duplicate_report(), summary()

    Если задан общий интервал, каждый генератор перепривязывается к нему
    в compute(); иначе генератор работает на собственном интервале.
    """

    def __init__(self, interval: Optional[Interval] = None):
        """
        Args:
            interval: общий рабочий интервал (optional)
        """
        if interval is not None and not isinstance(interval, Interval):
            raise TypeError(f"interval must be Interval, got {type(interval).__name__}")

        self.interval = interval
        self._generators: list[PeriodicGenerator] = []
        self._distinct: list[Rational] = []
        self._all: list[Rational] = []
        self._per_generator: list[tuple[str, tuple[Rational, ...]]] = []
        self._computed = False

    # -------------------------------------------------------------------------
    # Наполнение
    # -------------------------------------------------------------------------

    def add_generator(self, generator: PeriodicGenerator) -> None:
        if not isinstance(generator, PeriodicGenerator):
            raise TypeError(
                f"generator must be PeriodicGenerator, got {type(generator).__name__}"
            )
        if self._computed:
            raise AggregationStateError("cannot add generators after compute()")
        self._generators.append(generator)

    def add_generators(self, generators: Iterable[PeriodicGenerator]) -> None:
        for generator in generators:
            self.add_generator(generator)

    @property
    def generators(self) -> tuple[PeriodicGenerator, ...]:
        return tuple(self._generators)

    @property
    def computed(self) -> bool:
        return self._computed

    # -------------------------------------------------------------------------
    # Вычисление
    # -------------------------------------------------------------------------

    def compute(self) -> None:
        """Единственный проход генерации по всем генераторам.

        Коллекции строятся локально и публикуются только при успехе:
        переполнение в любом генераторе не оставляет частичного состояния.

        Raises:
            AggregationStateError: при повторном вызове
            RationalOverflowError: если генерация выходит за фиксированную ширину
        """
        if self._computed:
            raise AggregationStateError("compute() must be called exactly once")

        distinct: list[Rational] = []
        seen: set[Rational] = set()
        all_instants: list[Rational] = []
        per_generator: list[tuple[str, tuple[Rational, ...]]] = []

        def insert_distinct(instant: Rational) -> None:
            if instant not in seen:
                seen.add(instant)
                bisect.insort(distinct, instant)

        for generator in self._generators:
            if self.interval is not None:
                generator = generator.with_interval(self.interval)
            start = len(all_instants)
            emitted = generator.generate_into(insert_distinct, all_instants.append)
            per_generator.append((generator.name, tuple(all_instants[start:])))
            logger.debug(
                "Generator %s over %s emitted %d instants",
                generator.name, generator.interval, emitted,
            )

        self._distinct = distinct
        self._all = all_instants
        self._per_generator = per_generator
        self._computed = True

        logger.info(
            "Computed %d instants (%d distinct) from %d generators",
            len(all_instants), len(distinct), len(self._generators),
        )

    def _require_computed(self) -> None:
        if not self._computed:
            raise AggregationStateError("compute() must be called before reading results")

    # -------------------------------------------------------------------------
    # Отчёты
    # -------------------------------------------------------------------------

    @property
    def distinct_instants(self) -> tuple[Rational, ...]:
        """Различные моменты по возрастанию."""
        self._require_computed()
        return tuple(self._distinct)

    @property
    def all_instants(self) -> tuple[Rational, ...]:
        """Все моменты в порядке генерации."""
        self._require_computed()
        return tuple(self._all)

    def instants_by_generator(self) -> list[tuple[str, tuple[Rational, ...]]]:
        """Моменты каждого генератора в порядке добавления.

        Одноимённые генераторы остаются отдельными записями.
        """
        self._require_computed()
        return list(self._per_generator)

    def distinct_count(self) -> int:
        self._require_computed()
        return len(self._distinct)

    def total_count(self) -> int:
        self._require_computed()
        return len(self._all)

    def validate_against_approximation(self) -> bool:
        """Сверка точной дедупликации с дедупликацией по float.

        Несовпадение — не ошибка ядра: это сигнал о float-артефактах
        либо об ошибке точной арифметики, который вызывающий код
        выносит наружу (например, ненулевым кодом выхода).
        """
        self._require_computed()
        approximate = {instant.to_float() for instant in self._all}
        consistent = len(approximate) == len(self._distinct)
        if not consistent:
            logger.warning(
                "Approximate deduplication mismatch: %d float values vs %d exact values",
                len(approximate), len(self._distinct),
            )
        return consistent

    def duplicate_report(self) -> list[Rational]:
        """Значения, встретившиеся минимум дважды.

        Каждое значение выдаётся один раз, в момент второго появления.
        Счётчик ключуется тем же каноническим равенством, что и distinct.
        """
        self._require_computed()
        counts: defaultdict[Rational, int] = defaultdict(int)
        duplicates = []
        for instant in self._all:
            counts[instant] += 1
            if counts[instant] == 2:
                duplicates.append(instant)
        return duplicates

    def summary(self) -> CoincidenceSummary:
        """Сводка результата для вывода и сериализации."""
        self._require_computed()
        duplicates = self.duplicate_report()
        return CoincidenceSummary(
            interval_lower=str(self.interval.lower) if self.interval else None,
            interval_upper=str(self.interval.upper) if self.interval else None,
            generator_names=[generator.name for generator in self._generators],
            total_count=len(self._all),
            distinct_count=len(self._distinct),
            duplicate_count=len(duplicates),
            approximation_consistent=self.validate_against_approximation(),
            distinct_instants=[str(instant) for instant in self._distinct],
            duplicates=[str(instant) for instant in duplicates],
        )
