"""
Domain layer - Pure sleep cycle arithmetic without external dependencies.
"""

from .cycle_calculator import CycleCalculator, calculate_sleep_times, calculate_wake_times
from .exceptions import InvalidTimeFormat, MissingTimeError, SleepCycleError
from .models import ClockTime, RecommendationPolicy, SuggestedTime

__all__ = [
    "ClockTime",
    "CycleCalculator",
    "InvalidTimeFormat",
    "MissingTimeError",
    "RecommendationPolicy",
    "SleepCycleError",
    "SuggestedTime",
    "calculate_sleep_times",
    "calculate_wake_times",
]
