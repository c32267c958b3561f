from workday.calendar import (
    Calendar,
    CalendarError,
    Date,
    GregorianCalendar,
    InvalidDateError,
    UnconfiguredError,
)
from workday.engine import WorkdayCalendar, WorkdaySettings, load_settings

__all__ = [
    "Calendar",
    "CalendarError",
    "Date",
    "GregorianCalendar",
    "InvalidDateError",
    "UnconfiguredError",
    "WorkdayCalendar",
    "WorkdaySettings",
    "load_settings",
]
