"""
Domain-specific exception hierarchy for the sleep cycle calculator.
"""


class SleepCycleError(Exception):
    """Base class for all application-level errors."""


class InvalidTimeFormat(SleepCycleError, ValueError):
    """Raised when a time-of-day string is not a valid HH:MM value."""

    def __init__(self, value: object, reason: str = "expected HH:MM") -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid time {value!r}: {reason}")


class MissingTimeError(SleepCycleError, ValueError):
    """Raised when a required time input was left blank."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing value for {field}")
