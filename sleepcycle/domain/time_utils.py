"""
Wall-clock parsing, formatting and wraparound arithmetic.

Everything here works on time-of-day values only. There is no date, so all
arithmetic is modulo 24 hours and every result is a valid ``HH:MM`` string.
"""

import re

from .exceptions import InvalidTimeFormat
from .models import MINUTES_PER_DAY, MINUTES_PER_HOUR, ClockTime, TimeLike

_PARSE_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")
_STRICT_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")


def parse_time(value: TimeLike) -> ClockTime:
    """
    Parse an ``HH:MM`` string into a ClockTime.

    A single-digit hour (``7:05``) is accepted. Anything else, including
    out-of-range fields, raises InvalidTimeFormat.
    """
    if isinstance(value, ClockTime):
        return value
    if not isinstance(value, str):
        raise InvalidTimeFormat(value, "expected a string in HH:MM form")

    match = _PARSE_PATTERN.fullmatch(value.strip())
    if not match:
        raise InvalidTimeFormat(value)

    hours, minutes = (int(part) for part in match.groups())
    try:
        return ClockTime(hours=hours, minutes=minutes)
    except InvalidTimeFormat as exc:
        raise InvalidTimeFormat(value, exc.reason) from exc


def is_valid_time(value: str) -> bool:
    """Strict check used before accepting a custom alarm: exactly ``HH:MM``, in range."""
    if not isinstance(value, str) or not _STRICT_PATTERN.fullmatch(value):
        return False
    hours, minutes = value.split(":")
    return int(hours) < 24 and int(minutes) < 60


def format_time(hours: int, minutes: int) -> str:
    """Render a zero-padded ``HH:MM``, normalizing each field modulo its period."""
    return f"{hours % 24:02d}:{minutes % MINUTES_PER_HOUR:02d}"


def add_minutes(value: TimeLike, delta: int) -> str:
    """
    Shift a time of day by ``delta`` minutes, wrapping around midnight.

    ``delta`` may be negative; the result wraps back into the previous day.
    """
    clock = parse_time(value)
    total = (clock.total_minutes() + delta) % MINUTES_PER_DAY
    hours, minutes = divmod(total, MINUTES_PER_HOUR)
    return format_time(hours, minutes)


def minutes_between(start: TimeLike, end: TimeLike) -> int:
    """
    Minutes elapsed from ``start`` until the next occurrence of ``end``.

    ``end`` is assumed to be later the same day or on the following day, so
    the result is in (0, 1440]. Equal times mean a full day, never zero.
    """
    diff = parse_time(end).total_minutes() - parse_time(start).total_minutes()
    if diff <= 0:
        diff += MINUTES_PER_DAY
    return diff


def format_duration(minutes: int) -> str:
    """
    Format a sleep duration compactly.

    Examples: 45 -> "45m", 360 -> "6h", 450 -> "7h 30m".
    """
    if minutes < 0:
        raise ValueError(f"Duration must not be negative, got {minutes}")

    hours, mins = divmod(minutes, MINUTES_PER_HOUR)
    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"
