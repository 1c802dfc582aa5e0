"""
Tests for domain models.
"""

from dataclasses import FrozenInstanceError

import pytest

from sleepcycle.domain.exceptions import InvalidTimeFormat
from sleepcycle.domain.models import ClockTime, RecommendationPolicy, SuggestedTime


class TestClockTime:
    """Tests for ClockTime model."""

    def test_create_valid_clock_time(self):
        """Test creating a valid time of day."""
        clock = ClockTime(hours=7, minutes=5)

        assert clock.total_minutes() == 425
        assert str(clock) == "07:05"

    @pytest.mark.parametrize(("hours", "minutes"), [(24, 0), (-1, 0), (12, 60), (12, -1)])
    def test_out_of_range_raises(self, hours, minutes):
        """Test that fields outside the wall clock raise InvalidTimeFormat."""
        with pytest.raises(InvalidTimeFormat, match="must be between"):
            ClockTime(hours=hours, minutes=minutes)

    def test_from_minutes_wraps(self):
        """Test building from minutes since midnight, in both directions."""
        assert ClockTime.from_minutes(0) == ClockTime(0, 0)
        assert ClockTime.from_minutes(1440 + 61) == ClockTime(1, 1)
        assert ClockTime.from_minutes(-15) == ClockTime(23, 45)

    @pytest.mark.parametrize(("hours", "minutes"), [(7.5, 0), (7, 0.0), (True, 0), ("7", 0)])
    def test_non_integer_fields_raise(self, hours, minutes):
        """Test that only integer fields are accepted."""
        with pytest.raises(InvalidTimeFormat, match="must be an integer"):
            ClockTime(hours=hours, minutes=minutes)

    def test_is_immutable(self):
        clock = ClockTime(hours=7, minutes=0)

        with pytest.raises(FrozenInstanceError):
            clock.hours = 8


class TestSuggestedTime:
    """Tests for SuggestedTime model."""

    def test_to_dict(self):
        """Test the record shape used when a suggestion is saved."""
        suggestion = SuggestedTime(time="05:45", cycles=5, total_sleep="7h 30m")

        assert suggestion.to_dict() == {"time": "05:45", "cycles": 5, "totalSleep": "7h 30m"}


class TestRecommendationPolicy:
    """Tests for picking the recommended suggestion."""

    suggestions = [
        SuggestedTime(time="05:45", cycles=5, total_sleep="7h 30m"),
        SuggestedTime(time="04:15", cycles=4, total_sleep="6h"),
        SuggestedTime(time="02:45", cycles=3, total_sleep="4h 30m"),
    ]

    @pytest.mark.parametrize("policy", list(RecommendationPolicy))
    def test_empty_result_has_no_recommendation(self, policy):
        assert policy.pick([]) is None

    @pytest.mark.parametrize("policy", list(RecommendationPolicy))
    def test_picks_most_cycles(self, policy):
        """Test that both policies resolve to the head of a descending list."""
        assert policy.pick(self.suggestions) == self.suggestions[0]
        assert policy.pick(list(reversed(self.suggestions))) == self.suggestions[0]

    def test_descriptions_differ(self):
        assert RecommendationPolicy.CLOSEST_TO_CEILING.description != RecommendationPolicy.LONGEST_SLEEP.description
