"""
Domain models for wall-clock times and sleep suggestions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Sequence, Union

from .exceptions import InvalidTimeFormat

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR


@dataclass(frozen=True)
class ClockTime:
    """
    A point on a 24-hour wall clock with no date attached.

    Invariant: 0 <= hours <= 23 and 0 <= minutes <= 59.
    """
    hours: int
    minutes: int

    def __post_init__(self):
        for field_name in ("hours", "minutes"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidTimeFormat(
                    f"{self.hours}:{self.minutes}",
                    f"{field_name} must be an integer, got {type(value).__name__}",
                )
        if not 0 <= self.hours <= 23:
            raise InvalidTimeFormat(str(self), f"hours must be between 0 and 23, got {self.hours}")
        if not 0 <= self.minutes <= 59:
            raise InvalidTimeFormat(str(self), f"minutes must be between 0 and 59, got {self.minutes}")

    @classmethod
    def from_minutes(cls, total_minutes: int) -> "ClockTime":
        """Build a ClockTime from minutes since midnight, wrapping at 24:00."""
        hours, minutes = divmod(total_minutes % MINUTES_PER_DAY, MINUTES_PER_HOUR)
        return cls(hours=hours, minutes=minutes)

    def total_minutes(self) -> int:
        """Return the number of minutes since midnight."""
        return self.hours * MINUTES_PER_HOUR + self.minutes

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"


TimeLike = Union[str, ClockTime]


@dataclass(frozen=True)
class SuggestedTime:
    """
    A candidate bedtime or wake time produced by the calculator.
    """
    time: str  # HH:MM
    cycles: int
    total_sleep: str  # e.g. "7h 30m"

    def to_dict(self) -> Dict[str, object]:
        """Return the record in the shape stored alongside saved alarms."""
        return {
            "time": self.time,
            "cycles": self.cycles,
            "totalSleep": self.total_sleep,
        }


class RecommendationPolicy(str, Enum):
    """
    Which suggestion a caller should highlight as recommended.

    Wake-time suggestions favour the time closest to the requested wake
    ceiling, bedtime suggestions favour the longest sleep. Both end up at the
    head of the result list because of the enumeration order, but the two
    directions mean different things by "best".
    """
    CLOSEST_TO_CEILING = "closest_to_ceiling"
    LONGEST_SLEEP = "longest_sleep"

    def pick(self, suggestions: Sequence[SuggestedTime]) -> Optional[SuggestedTime]:
        """Return the recommended entry, or None for an empty result."""
        if not suggestions:
            return None
        # Wake times: the most cycles that still fit lands closest to the
        # ceiling. Bedtimes: the most cycles is the longest sleep.
        return max(suggestions, key=lambda s: s.cycles)

    @property
    def description(self) -> str:
        """Short human-readable explanation of the policy."""
        if self is RecommendationPolicy.CLOSEST_TO_CEILING:
            return "closest to the requested wake time"
        return "longest sleep"
