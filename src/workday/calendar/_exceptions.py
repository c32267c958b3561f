class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class InvalidDateError(CalendarError, ValueError):
    """A date or time-of-day fails calendar validation or cannot be parsed."""


class UnconfiguredError(CalendarError):
    """The workday window has not been configured (or was cleared)."""
