"""
Domain models and value objects.

Contains clock configuration, the hand-pair generator factory and the
coincidence summary model.
"""

from src.core.domain.clock import (
    DEFAULT_BASIC_PERIOD,
    DEFAULT_HANDS,
    DEFAULT_SEPARATION_DENOMINATOR,
    DEFAULT_SEPARATION_NUMERATOR,
    HOURS_PER_DAY,
    ClockConfig,
    ClockHand,
    day_count,
    hand_pair_generators,
)
from src.core.domain.report import CoincidenceSummary

__all__ = [
    # Clock — Constants
    "DEFAULT_BASIC_PERIOD",
    "DEFAULT_HANDS",
    "DEFAULT_SEPARATION_DENOMINATOR",
    "DEFAULT_SEPARATION_NUMERATOR",
    "HOURS_PER_DAY",
    # Clock — Models
    "ClockConfig",
    "ClockHand",
    # Clock — Functions
    "day_count",
    "hand_pair_generators",
    # Report
    "CoincidenceSummary",
]
