"""
Tests for the cycle calculator.
"""

import re

import pytest

from sleepcycle.domain.cycle_calculator import (
    CycleCalculator,
    calculate_sleep_times,
    calculate_wake_times,
)
from sleepcycle.domain.exceptions import InvalidTimeFormat
from sleepcycle.domain.time_utils import format_duration

TIME_PATTERN = re.compile(r"^\d{2}:\d{2}$")


def _as_tuples(suggestions):
    return [(s.time, s.cycles, s.total_sleep) for s in suggestions]


def _assert_invariants(suggestions):
    for suggestion in suggestions:
        assert TIME_PATTERN.match(suggestion.time)
        hours, minutes = (int(part) for part in suggestion.time.split(":"))
        assert hours < 24 and minutes < 60
        assert suggestion.total_sleep == format_duration(suggestion.cycles * 90)
    for current, following in zip(suggestions, suggestions[1:]):
        assert following.cycles == current.cycles - 1


class TestWakeTimes:
    """Tests for calculate_wake_times."""

    def test_overnight_window(self):
        """Test a 22:00 -> 07:00 window: only 5, 4 and 3 cycles fit."""
        suggestions = calculate_wake_times("22:00", "07:00", 5)

        # window = 540, max cycles = (540 - 15) // 90 = 5
        assert _as_tuples(suggestions) == [
            ("05:45", 5, "7h 30m"),
            ("04:15", 4, "6h"),
            ("02:45", 3, "4h 30m"),
        ]
        _assert_invariants(suggestions)

    def test_result_is_not_padded_to_count(self):
        """Test that fewer entries than requested are returned when fewer fit."""
        assert len(calculate_wake_times("22:00", "07:00", 10)) == 3

    def test_count_truncates_highest_first(self):
        """Test that count keeps the suggestions closest to the wake hint."""
        suggestions = calculate_wake_times("21:00", "09:00", 3)

        # window = 720, max cycles = 7
        assert [s.cycles for s in suggestions] == [7, 6, 5]
        assert suggestions[0].time == "07:45"

    @pytest.mark.parametrize(
        ("sleep_time", "wake_time", "count", "expected_size"),
        [
            ("21:00", "09:00", 5, 5),   # max 7 -> 7..3
            ("21:00", "09:00", 2, 2),
            ("22:00", "07:00", 5, 3),   # max 5 -> 5..3
            ("22:00", "02:45", 5, 1),   # max 3 -> exactly the floor
        ],
    )
    def test_result_size(self, sleep_time, wake_time, count, expected_size):
        """Test that the result size is min(count, max_cycles - 2)."""
        assert len(calculate_wake_times(sleep_time, wake_time, count)) == expected_size

    def test_window_exactly_at_floor(self):
        """Test the minimum window that still fits three cycles."""
        assert _as_tuples(calculate_wake_times("22:00", "02:45")) == [("02:45", 3, "4h 30m")]
        assert calculate_wake_times("22:00", "02:44") == []

    @pytest.mark.parametrize("count", [1, 3, 5])
    def test_short_window_returns_empty(self, count):
        """Test that a 20 minute window yields no suggestions at all."""
        assert calculate_wake_times("23:50", "00:10", count) == []

    def test_equal_times_use_a_full_day(self):
        """Test that identical times are treated as a 24 hour window."""
        suggestions = calculate_wake_times("07:00", "07:00", 1)

        # (1440 - 15) // 90 = 15 cycles
        assert _as_tuples(suggestions) == [("05:45", 15, "22h 30m")]

    def test_default_count_is_five(self):
        suggestions = calculate_wake_times("20:00", "12:00")

        assert [s.cycles for s in suggestions] == [10, 9, 8, 7, 6]
        _assert_invariants(suggestions)

    def test_idempotent(self):
        """Test that identical inputs give identical outputs."""
        first = calculate_wake_times("23:15", "07:30", 5)
        second = calculate_wake_times("23:15", "07:30", 5)

        assert first == second

    def test_invalid_input_raises(self):
        with pytest.raises(InvalidTimeFormat):
            calculate_wake_times("22:00", "7 am")

    @pytest.mark.parametrize("count", [0, -1])
    def test_invalid_count_raises(self, count):
        with pytest.raises(ValueError, match="count must be at least 1"):
            calculate_wake_times("22:00", "07:00", count)

    def test_non_integer_count_raises(self):
        with pytest.raises(TypeError):
            calculate_wake_times("22:00", "07:00", 2.5)


class TestSleepTimes:
    """Tests for calculate_sleep_times."""

    def test_bedtimes_for_seven_am(self):
        """Test the fixed 6, 5, 4 cycle range, longest sleep first."""
        suggestions = calculate_sleep_times("07:00")

        assert _as_tuples(suggestions) == [
            ("21:45", 6, "9h"),
            ("23:15", 5, "7h 30m"),
            ("00:45", 4, "6h"),
        ]
        _assert_invariants(suggestions)

    @pytest.mark.parametrize("count", [3, 5, 10])
    def test_range_is_fixed_regardless_of_count(self, count):
        """Test that a count above three still yields three bedtimes."""
        assert [s.cycles for s in calculate_sleep_times("07:00", count)] == [6, 5, 4]

    def test_count_truncates_range(self):
        assert _as_tuples(calculate_sleep_times("07:00", 1)) == [("21:45", 6, "9h")]

    def test_wraps_back_across_midnight(self):
        """Test that a wake time just after midnight gives afternoon bedtimes."""
        suggestions = calculate_sleep_times("00:30")

        assert [s.time for s in suggestions] == ["15:15", "16:45", "18:15"]

    def test_idempotent(self):
        assert calculate_sleep_times("06:15", 5) == calculate_sleep_times("06:15", 5)

    def test_invalid_input_raises(self):
        with pytest.raises(InvalidTimeFormat):
            calculate_sleep_times("25:00")


class TestCycleCalculator:
    """Tests for a calculator with custom cycle settings."""

    def test_custom_cycle_length_and_latency(self):
        """Test 60 minute cycles with no latency."""
        calculator = CycleCalculator(cycle_minutes=60, fall_asleep_minutes=0, min_wake_cycles=1)

        suggestions = calculator.wake_times("22:00", "01:00", 5)

        assert _as_tuples(suggestions) == [
            ("01:00", 3, "3h"),
            ("00:00", 2, "2h"),
            ("23:00", 1, "1h"),
        ]

    def test_custom_bedtime_range(self):
        calculator = CycleCalculator(bedtime_max_cycles=5, bedtime_min_cycles=5)

        assert _as_tuples(calculator.bedtimes("07:00")) == [("23:15", 5, "7h 30m")]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"cycle_minutes": 0},
            {"fall_asleep_minutes": -5},
            {"min_wake_cycles": 0},
            {"bedtime_max_cycles": 3, "bedtime_min_cycles": 4},
        ],
    )
    def test_invalid_settings_raise(self, kwargs):
        with pytest.raises(ValueError):
            CycleCalculator(**kwargs)
