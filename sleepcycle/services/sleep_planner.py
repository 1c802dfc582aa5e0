"""
Application service for turning raw user input into sleep suggestions.

The service validates the text the user typed, delegates the arithmetic to
the domain-level ``CycleCalculator`` and wraps the result in a ``SleepPlan``
that knows which entry to highlight. This keeps the CLI thin and lets the
calculator stay free of input handling.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..domain.cycle_calculator import DEFAULT_RECOMMENDATION_COUNT, CycleCalculator
from ..domain.exceptions import InvalidTimeFormat, MissingTimeError
from ..domain.models import ClockTime, RecommendationPolicy, SuggestedTime
from ..domain.time_utils import is_valid_time, parse_time

logger = logging.getLogger(__name__)


class PlanDirection(str, Enum):
    """Which time the user already knows."""
    WAKE_TIMES = "wake_times"  # bedtime known, suggest wake times
    BEDTIMES = "bedtimes"  # wake time known, suggest bedtimes


@dataclass(frozen=True)
class SleepPlan:
    """Result of a planning request, ready for rendering."""
    direction: PlanDirection
    anchor: ClockTime
    suggestions: List[SuggestedTime]
    policy: RecommendationPolicy

    @property
    def is_empty(self) -> bool:
        """True when the window was too short to suggest anything."""
        return not self.suggestions

    @property
    def recommended(self) -> Optional[SuggestedTime]:
        """The suggestion to highlight, chosen by the plan's policy."""
        return self.policy.pick(self.suggestions)


class SleepPlanner:
    """
    Orchestrates input validation and suggestion calculation.
    """

    def __init__(
        self,
        calculator: Optional[CycleCalculator] = None,
        recommendation_count: int = DEFAULT_RECOMMENDATION_COUNT,
    ) -> None:
        if recommendation_count < 1:
            raise ValueError(f"recommendation_count must be at least 1, got {recommendation_count}")
        self._calculator = calculator or CycleCalculator()
        self._recommendation_count = recommendation_count

    def plan_wake_times(self, sleep_time: Optional[str], wake_time: Optional[str]) -> SleepPlan:
        """
        Suggest wake times between a known bedtime and a latest wake time.

        Raises:
            MissingTimeError: If either input is blank
            InvalidTimeFormat: If either input is not HH:MM
        """
        sleep = self._require_time(sleep_time, "sleep_time")
        wake = self._require_time(wake_time, "wake_time")

        suggestions = self._calculator.wake_times(sleep, wake, self._recommendation_count)
        logger.debug(
            "Wake times for %s -> %s (count=%d): %s",
            sleep, wake, self._recommendation_count, [s.time for s in suggestions],
        )
        if not suggestions:
            logger.info("Window %s -> %s is too short for a full set of cycles", sleep, wake)

        return SleepPlan(
            direction=PlanDirection.WAKE_TIMES,
            anchor=sleep,
            suggestions=suggestions,
            policy=RecommendationPolicy.CLOSEST_TO_CEILING,
        )

    def plan_bedtimes(self, wake_time: Optional[str]) -> SleepPlan:
        """
        Suggest bedtimes that end exactly at a known wake time.

        Raises:
            MissingTimeError: If the input is blank
            InvalidTimeFormat: If the input is not HH:MM
        """
        wake = self._require_time(wake_time, "wake_time")

        suggestions = self._calculator.bedtimes(wake, self._recommendation_count)
        logger.debug(
            "Bedtimes for wake time %s (count=%d): %s",
            wake, self._recommendation_count, [s.time for s in suggestions],
        )

        return SleepPlan(
            direction=PlanDirection.BEDTIMES,
            anchor=wake,
            suggestions=suggestions,
            policy=RecommendationPolicy.LONGEST_SLEEP,
        )

    @staticmethod
    def validate_custom_alarm(value: Optional[str]) -> str:
        """
        Validate a custom alarm time typed by the user.

        Only the strict ``HH:MM`` form is accepted here, unlike the more
        lenient calculator inputs.

        Returns:
            The alarm time in canonical HH:MM form

        Raises:
            MissingTimeError: If the input is blank
            InvalidTimeFormat: If the input is not exactly HH:MM
        """
        if value is None or not value.strip():
            raise MissingTimeError("alarm_time")
        if not is_valid_time(value):
            raise InvalidTimeFormat(value, "custom alarms must be entered as HH:MM")
        return str(parse_time(value))

    @staticmethod
    def _require_time(value: Optional[str], field: str) -> ClockTime:
        if value is None or not value.strip():
            raise MissingTimeError(field)
        return parse_time(value)
