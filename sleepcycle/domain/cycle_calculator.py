"""
Core business logic for suggesting bedtimes and wake times.

This is the heart of the application - pure domain logic without any
external dependencies (no configuration, no I/O, no clock reads).
"""

from typing import List

from .models import SuggestedTime, TimeLike
from .time_utils import add_minutes, format_duration, minutes_between, parse_time

REM_CYCLE_MINUTES = 90
FALL_ASLEEP_MINUTES = 15
MIN_WAKE_CYCLES = 3
BEDTIME_MAX_CYCLES = 6
BEDTIME_MIN_CYCLES = 4
DEFAULT_RECOMMENDATION_COUNT = 5


class CycleCalculator:
    """
    Suggests times that complete a whole number of sleep cycles.

    Two directions are supported:
    1. Bedtime known: suggest wake times inside the window up to a wake hint
    2. Wake time known: suggest bedtimes that end exactly at the wake time

    Every suggestion assumes a fixed fall-asleep latency before the first
    cycle starts.
    """

    def __init__(
        self,
        cycle_minutes: int = REM_CYCLE_MINUTES,
        fall_asleep_minutes: int = FALL_ASLEEP_MINUTES,
        min_wake_cycles: int = MIN_WAKE_CYCLES,
        bedtime_max_cycles: int = BEDTIME_MAX_CYCLES,
        bedtime_min_cycles: int = BEDTIME_MIN_CYCLES,
    ):
        if cycle_minutes <= 0:
            raise ValueError(f"cycle_minutes must be greater than zero, got {cycle_minutes}")
        if fall_asleep_minutes < 0:
            raise ValueError(f"fall_asleep_minutes must not be negative, got {fall_asleep_minutes}")
        if min_wake_cycles < 1:
            raise ValueError(f"min_wake_cycles must be at least 1, got {min_wake_cycles}")
        if not 1 <= bedtime_min_cycles <= bedtime_max_cycles:
            raise ValueError(
                f"Bedtime cycle range {bedtime_min_cycles}-{bedtime_max_cycles} is invalid"
            )

        self.cycle_minutes = cycle_minutes
        self.fall_asleep_minutes = fall_asleep_minutes
        self.min_wake_cycles = min_wake_cycles
        self.bedtime_max_cycles = bedtime_max_cycles
        self.bedtime_min_cycles = bedtime_min_cycles

    def wake_times(
        self,
        sleep_time: TimeLike,
        wake_time_hint: TimeLike,
        count: int = DEFAULT_RECOMMENDATION_COUNT,
    ) -> List[SuggestedTime]:
        """
        Suggest wake times for someone going to bed at ``sleep_time``.

        Args:
            sleep_time: When the person goes to bed (HH:MM)
            wake_time_hint: Latest acceptable wake time (HH:MM)
            count: Maximum number of suggestions to return

        Returns:
            Suggestions ordered by cycle count, highest first. The first
            entry is the one closest to the wake hint. An empty list means
            the window is too short for the minimum number of cycles.
        """
        _validate_count(count)
        sleep = parse_time(sleep_time)

        window = minutes_between(sleep, wake_time_hint)
        max_cycles = (window - self.fall_asleep_minutes) // self.cycle_minutes

        cycle_counts = range(max_cycles, self.min_wake_cycles - 1, -1)[:count]

        return [
            SuggestedTime(
                time=add_minutes(sleep, self.fall_asleep_minutes + self._sleep_minutes(cycles)),
                cycles=cycles,
                total_sleep=format_duration(self._sleep_minutes(cycles)),
            )
            for cycles in cycle_counts
        ]

    def bedtimes(
        self,
        wake_time: TimeLike,
        count: int = DEFAULT_RECOMMENDATION_COUNT,
    ) -> List[SuggestedTime]:
        """
        Suggest bedtimes for someone who has to wake up at ``wake_time``.

        The cycle range is fixed (6 down to 4 by default) regardless of
        ``count``; ``count`` only truncates it. The first entry is the
        earliest bedtime, i.e. the longest sleep.
        """
        _validate_count(count)
        wake = parse_time(wake_time)

        cycle_counts = range(self.bedtime_max_cycles, self.bedtime_min_cycles - 1, -1)[:count]

        return [
            SuggestedTime(
                time=add_minutes(wake, -(self.fall_asleep_minutes + self._sleep_minutes(cycles))),
                cycles=cycles,
                total_sleep=format_duration(self._sleep_minutes(cycles)),
            )
            for cycles in cycle_counts
        ]

    def _sleep_minutes(self, cycles: int) -> int:
        return cycles * self.cycle_minutes


def _validate_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"count must be an integer, got {type(count).__name__}")
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")


_default_calculator = CycleCalculator()


def calculate_wake_times(
    sleep_time: TimeLike,
    wake_time_hint: TimeLike,
    count: int = DEFAULT_RECOMMENDATION_COUNT,
) -> List[SuggestedTime]:
    """Suggest wake times using the standard 90-minute cycle and 15-minute latency."""
    return _default_calculator.wake_times(sleep_time, wake_time_hint, count)


def calculate_sleep_times(
    wake_time: TimeLike,
    count: int = DEFAULT_RECOMMENDATION_COUNT,
) -> List[SuggestedTime]:
    """Suggest bedtimes using the standard 90-minute cycle and 15-minute latency."""
    return _default_calculator.bedtimes(wake_time, count)
