# src/workday/calendar/__init__.py
"""
workday.calendar
~~~~~~~~~~~~~~~~

Date values, time-of-day arithmetic and the calendar rules the workday
engine is built on.  A Calendar validates dates, classifies holidays and
steps a Date one civil day forward or backward.

Basic usage::

    from workday.calendar import Date, GregorianCalendar

    cal = GregorianCalendar()
    cal.set_holiday(Date(2024, 7, 4))           # one-time holiday
    cal.set_recurring_holiday(Date(2024, 12, 25))  # every Dec 25
    cal.is_holiday(Date(2031, 12, 25))          # → True

    d = Date(2024, 2, 28, 9, 0)
    cal.add_day(d)                              # in place → 2024-02-29 09:00

Public API
----------
Date               Year/month/day/hour/minute value with an invalid sentinel.
Calendar           Abstract capability set.
GregorianCalendar  Civil calendar with Saturday/Sunday weekends.
CalendarError      Base exception for all calendar-related errors.
"""

from __future__ import annotations

from workday.calendar._exceptions import (
    CalendarError,
    InvalidDateError,
    UnconfiguredError,
)
from workday.calendar.base import Calendar
from workday.calendar.date import Date
from workday.calendar.gregorian import GregorianCalendar

__all__ = [
    "Calendar",
    "CalendarError",
    "Date",
    "GregorianCalendar",
    "InvalidDateError",
    "UnconfiguredError",
]
