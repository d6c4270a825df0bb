"""Aggregation — сбор моментов совпадения от нескольких генераторов.

- Точная дедупликация и полный журнал моментов
- Кросс-валидация с float-дедупликацией
- Отчёт о дубликатах
"""

from .aggregator import (
    AggregationStateError,
    CoincidenceAggregator,
)

__all__ = [
    "AggregationStateError",
    "CoincidenceAggregator",
]
