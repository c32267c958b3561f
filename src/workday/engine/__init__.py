# src/workday/engine/__init__.py
"""
workday.engine
~~~~~~~~~~~~~~

Fractional workday arithmetic.  A WorkdayCalendar combines a daily work
window with a Calendar's weekends and holidays, and moves a Date forward or
backward by a (possibly fractional, possibly negative) number of workdays.

Basic usage::

    from workday.calendar import Date
    from workday.engine import WorkdayCalendar

    wc = WorkdayCalendar()
    wc.set_workday_start_and_stop(Date(2004, 1, 1, 8, 0), Date(2004, 1, 1, 16, 0))
    wc.set_recurring_holiday(Date(2004, 5, 17))
    wc.set_holiday(Date(2004, 5, 27))
    wc.get_workday_increment(Date(2004, 5, 24, 18, 5), -5.5)   # → 2004-05-14 12:00

NumPy arrays of increments are accepted by the batch entry point::

    import numpy as np
    wc.get_workday_increments(Date(2004, 1, 1, 15, 7), np.array([0.25, 1.0]))

Failures never raise: check ``result.is_invalid``.

Public API
----------
WorkdayCalendar  The increment engine.
WorkdaySettings  pydantic model describing a configured engine.
load_settings    Read WorkdaySettings from JSON plus environment overrides.
"""

from __future__ import annotations

from workday.engine.settings import WorkdaySettings, load_settings
from workday.engine.workday import WORKWEEK_DURATION, WorkdayCalendar

__all__ = [
    "WORKWEEK_DURATION",
    "WorkdayCalendar",
    "WorkdaySettings",
    "load_settings",
]
