"""
Clock — Конфигурация часовых стрелок и фабрика генераторов

Immutable Pydantic модели, описывающие циферблат:
- ClockHand: стрелка и число её оборотов за базовый период
- ClockConfig: базовый период, целевое угловое расстояние, набор стрелок

Для каждой пары стрелок (медленная, быстрая) относительная скорость равна
разности оборотов, поэтому моменты, когда стрелки разнесены на заданную
долю оборота, образуют две арифметические прогрессии:

    period = basic_period / (fast.revolutions - slow.revolutions)
    shift  = ±separation * period

С параметрами по умолчанию (12 часов, 1/6 оборота, часовая/минутная/секундная)
фабрика даёт шесть генераторов: minute -> hour, hour -> minute, и т.д.
"""

from itertools import combinations
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.progression import Interval, PeriodicGenerator
from src.core.math.rational import Rational

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Базовый период циферблата (часы)
DEFAULT_BASIC_PERIOD: Final[int] = 12

# Целевое угловое расстояние между стрелками (доля оборота)
DEFAULT_SEPARATION_NUMERATOR: Final[int] = 1
DEFAULT_SEPARATION_DENOMINATOR: Final[int] = 6

# Длительность суток (часы)
HOURS_PER_DAY: Final[int] = 24


# =============================================================================
# MODELS
# =============================================================================


class ClockHand(BaseModel):
    """Стрелка циферблата."""

    name: str = Field(..., min_length=1, description="Имя стрелки")
    revolutions: int = Field(
        ..., gt=0, description="Число оборотов за базовый период"
    )

    model_config = {"frozen": True}


DEFAULT_HANDS: Final[tuple[ClockHand, ...]] = (
    ClockHand(name="hour", revolutions=1),
    ClockHand(name="minute", revolutions=12),
    ClockHand(name="second", revolutions=720),
)


class ClockConfig(BaseModel):
    """
    Параметры расчёта совпадений для циферблата.

    Интервал расчёта: (0, basic_period), обе границы исключены.
    """

    basic_period: int = Field(
        DEFAULT_BASIC_PERIOD, gt=0, description="Базовый период циферблата (часы)"
    )
    separation_numerator: int = Field(
        DEFAULT_SEPARATION_NUMERATOR, ge=0, description="Числитель углового расстояния"
    )
    separation_denominator: int = Field(
        DEFAULT_SEPARATION_DENOMINATOR,
        gt=0,
        validate_default=True,
        description="Знаменатель углового расстояния",
    )
    hands: tuple[ClockHand, ...] = Field(
        DEFAULT_HANDS, min_length=2, description="Стрелки циферблата"
    )
    hours_per_day: int = Field(
        HOURS_PER_DAY,
        gt=0,
        validate_default=True,
        description="Длительность суток (часы)",
    )

    model_config = {"frozen": True}

    @field_validator("separation_denominator")
    @classmethod
    def validate_separation_below_turn(cls, v: int, info) -> int:
        """Проверка, что угловое расстояние меньше полного оборота"""
        if "separation_numerator" in info.data:
            numerator = info.data["separation_numerator"]
            if numerator >= v:
                raise ValueError(
                    f"separation {numerator}/{v} must be less than one full turn"
                )
        return v

    @field_validator("hands")
    @classmethod
    def validate_hands_distinct(cls, v: tuple[ClockHand, ...]) -> tuple[ClockHand, ...]:
        """Проверка уникальности имён и скоростей стрелок"""
        names = [hand.name for hand in v]
        if len(set(names)) != len(names):
            raise ValueError(f"hand names must be unique, got {names}")
        revolutions = [hand.revolutions for hand in v]
        if len(set(revolutions)) != len(revolutions):
            raise ValueError(f"hand revolutions must be distinct, got {revolutions}")
        return v

    @field_validator("hours_per_day")
    @classmethod
    def validate_day_multiple(cls, v: int, info) -> int:
        """Проверка, что сутки содержат целое число базовых периодов"""
        if "basic_period" in info.data:
            basic_period = info.data["basic_period"]
            if v % basic_period != 0:
                raise ValueError(
                    f"hours_per_day {v} must be a multiple of basic_period {basic_period}"
                )
        return v

    @property
    def separation(self) -> Rational:
        return Rational(self.separation_numerator, self.separation_denominator)

    @property
    def interval(self) -> Interval:
        return Interval.of(0, self.basic_period)


# =============================================================================
# ФАБРИКА ГЕНЕРАТОРОВ
# =============================================================================


def hand_pair_generators(config: ClockConfig | None = None) -> list[PeriodicGenerator]:
    """
    Генераторы моментов углового расстояния для каждой пары стрелок.

    Для пары (slow, fast) создаются два генератора: быстрая стрелка
    отстаёт ("fast -> slow", отрицательная фаза) и опережает
    ("slow -> fast", положительная фаза).

    Args:
        config: Параметры циферблата (default: ClockConfig())

    Returns:
        Список генераторов в порядке пар по возрастанию скорости
    """
    config = config or ClockConfig()
    hands = sorted(config.hands, key=lambda hand: hand.revolutions)
    interval = config.interval

    generators = []
    for slow, fast in combinations(hands, 2):
        relative = fast.revolutions - slow.revolutions
        period = Rational(config.basic_period, relative)
        shift = Rational(
            config.separation_numerator * config.basic_period,
            config.separation_denominator * relative,
        )

        generators.append(
            PeriodicGenerator(
                -shift,
                period,
                interval,
                name=f"{fast.name} -> {slow.name}",
            )
        )
        generators.append(
            PeriodicGenerator(
                shift,
                period,
                interval,
                name=f"{slow.name} -> {fast.name}",
            )
        )
    return generators


def day_count(distinct_count: int, config: ClockConfig | None = None) -> int:
    """
    Число различных моментов за сутки.

    Расчёт ведётся на одном базовом периоде; сутки содержат
    hours_per_day / basic_period таких периодов.
    """
    config = config or ClockConfig()
    return distinct_count * (config.hours_per_day // config.basic_period)
