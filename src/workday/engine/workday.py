from __future__ import annotations

import logging
import math
import threading
from typing import TYPE_CHECKING, Sequence, Union

import numpy as np

from workday.calendar import Calendar, CalendarError, Date, GregorianCalendar
from workday.calendar._exceptions import InvalidDateError, UnconfiguredError
from workday.calendar.timeutils import (
    TimeOfDay,
    add_minutes,
    convert_to_minutes,
    subtract_minutes,
    subtract_time,
)

if TYPE_CHECKING:
    from workday.engine.settings import WorkdaySettings

logger = logging.getLogger(__name__)

ArrayLike = Union[float, "np.ndarray"]

WORKWEEK_DURATION: int = 5


class WorkdayCalendar:
    """
    Workday arithmetic on top of a Calendar.

    A workday is the configured start→stop window on a day the calendar does
    not classify as a holiday.  ``get_workday_increment`` moves a Date by a
    fractional number of such workdays, forward or backward.

    Public entry points never raise: invalid input and unconfigured use are
    logged and reported through the invalid Date sentinel (or, for
    configuration, by clearing the window).  Every public call runs under a
    single engine lock.
    """

    def __init__(self, calendar: Calendar | None = None) -> None:
        self._calendar: Calendar = calendar if calendar is not None else GregorianCalendar()
        self._start: Date | None = None
        self._stop: Date | None = None
        self._duration: TimeOfDay | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: WorkdaySettings) -> WorkdayCalendar:
        cal = cls()
        cal.set_workday_start_and_stop(settings.start_date(), settings.stop_date())
        for d in settings.holiday_dates():
            cal.set_holiday(d)
        for d in settings.recurring_holiday_dates():
            cal.set_recurring_holiday(d)
        return cal

    # ── configuration ────────────────────────────────────────────────────

    def set_workday_start_and_stop(self, start: Date, stop: Date) -> None:
        with self._lock:
            for name, value in (("start", start), ("stop", stop)):
                if not self._calendar.is_valid_date(value):
                    logger.info("Invalid workday %s %s; clearing workday window.", name, value)
                    self._clear()
                    return
            self._start = start.copy()
            self._stop = stop.copy()
            self._duration = subtract_time(self._stop.get_time(), self._start.get_time())
            logger.debug(
                "Workday window %02d:%02d-%02d:%02d, duration %s",
                *self._start.get_time(), *self._stop.get_time(), self._duration,
            )

    def _clear(self) -> None:
        self._start = None
        self._stop = None
        self._duration = None

    # ── holiday management ───────────────────────────────────────────────

    def set_holiday(self, date: Date) -> None:
        with self._lock:
            self._calendar.set_holiday(date)

    def set_recurring_holiday(self, date: Date) -> None:
        with self._lock:
            self._calendar.set_recurring_holiday(date)

    def is_holiday(self, date: Date) -> bool:
        with self._lock:
            return self._calendar.is_holiday(date)

    # ── public increment ─────────────────────────────────────────────────

    def get_workday_increment(self, start_date: Date, increment_in_workdays: float) -> Date:
        """
        Date reached after ``increment_in_workdays`` workdays from
        ``start_date``; negative increments move backward.  Returns
        ``Date.invalid()`` when the start date is invalid, the window is not
        configured, or the computation fails.
        """
        with self._lock:
            return self._increment(start_date, increment_in_workdays)

    def get_workday_increments(
        self,
        start_date: Date | Sequence[Date] | np.ndarray,
        increments: ArrayLike,
    ) -> Date | np.ndarray:
        """
        Vectorised ``get_workday_increment``.  ``start_date`` and
        ``increments`` broadcast against each other; the result is an object
        array of Dates with the broadcast shape, or a single Date when both
        inputs are scalar.
        """
        if isinstance(start_date, Date):
            starts = np.empty((), dtype=object)
            starts[()] = start_date
        elif isinstance(start_date, np.ndarray):
            starts = start_date.astype(object)
        else:
            dates = list(start_date)
            starts = np.empty(len(dates), dtype=object)
            starts[:] = dates
        scalar = starts.ndim == 0 and np.ndim(increments) == 0

        s = np.atleast_1d(starts)
        d = np.atleast_1d(np.asarray(increments, dtype=np.float64))
        s, d = np.broadcast_arrays(s, d)

        shape = s.shape
        result = np.empty(s.size, dtype=object)
        with self._lock:
            for i, (start, inc) in enumerate(zip(s.ravel(), d.ravel())):
                result[i] = self._increment(start, float(inc))
        result = result.reshape(shape)
        return result.flat[0] if scalar else result

    # ── increment engine ─────────────────────────────────────────────────

    def _increment(self, start_date: Date, increment: float) -> Date:
        try:
            return self._compute_increment(start_date, increment)
        except CalendarError as exc:
            logger.info("%s", exc)
        except Exception:
            logger.exception("Workday increment from %s by %r failed.", start_date, increment)
        return Date.invalid()

    def _require_window(self) -> tuple[int, int, int]:
        if self._start is None or self._stop is None or self._duration is None:
            raise UnconfiguredError("Workday start/stop not configured.")
        start_minutes = convert_to_minutes(self._start.get_time())
        stop_minutes = convert_to_minutes(self._stop.get_time())
        if start_minutes >= stop_minutes:
            raise UnconfiguredError(
                f"Workday window {self._start.get_time()}-{self._stop.get_time()} "
                "must start before it stops."
            )
        return start_minutes, stop_minutes, convert_to_minutes(self._duration)

    def _compute_increment(self, start_date: Date, increment: float) -> Date:
        if not self._calendar.is_valid_date(start_date):
            raise InvalidDateError(f"Invalid start date {start_date}")
        _, _, workday_minutes = self._require_window()
        if not math.isfinite(increment):
            raise CalendarError(f"Increment must be finite; got {increment}.")

        decrement = increment < 0
        total_minutes = int(abs(increment) * workday_minutes)

        whole_days, remaining_minutes = divmod(total_minutes, workday_minutes)
        whole_weeks, remaining_days = divmod(whole_days, WORKWEEK_DURATION)
        logger.debug(
            "Increment %r: %d weeks, %d days, %d minutes (decrement=%s)",
            increment, whole_weeks, remaining_days, remaining_minutes, decrement,
        )

        current = start_date.copy()
        self._snap_to_workday(current, decrement)

        for _ in range(whole_weeks):
            self._step_workweek(current, decrement)
        for _ in range(remaining_days):
            self._step_workday(current, decrement)

        if decrement:
            self._remove_remaining_minutes(remaining_minutes, current)
        else:
            self._add_remaining_minutes(remaining_minutes, current)
        return current

    def _snap_to_workday(self, current: Date, decrement: bool) -> None:
        # A holiday start begins at the next (previous) workday's boundary.
        while self._calendar.is_holiday(current):
            if decrement:
                self._calendar.remove_day(current)
                current.set_time(self._stop.get_time())
            else:
                self._calendar.add_day(current)
                current.set_time(self._start.get_time())

    def _step_workweek(self, current: Date, decrement: bool = False) -> None:
        for _ in range(WORKWEEK_DURATION):
            self._step_workday(current, decrement)

    def _step_workday(self, current: Date, decrement: bool = False) -> None:
        step = self._calendar.remove_day if decrement else self._calendar.add_day
        step(current)
        while self._calendar.is_holiday(current):
            step(current)

    # ── minute placement ─────────────────────────────────────────────────

    def add_remaining_minutes(self, minutes: int, current: Date) -> None:
        """Place ``minutes`` (< one workday) forward from ``current``, in place."""
        with self._lock:
            self._add_remaining_minutes(minutes, current)

    def _add_remaining_minutes(self, minutes: int, current: Date) -> None:
        start_minutes, stop_minutes, _ = self._require_window()
        current_minutes = convert_to_minutes(current.get_time())

        if current_minutes >= stop_minutes:
            self._step_workday(current)
            current_minutes = start_minutes
        elif current_minutes < start_minutes:
            current_minutes = start_minutes

        if current_minutes + minutes <= stop_minutes:
            current.set_time(add_minutes(current_minutes, minutes))
        else:
            self._step_workday(current)
            overflow = current_minutes + minutes - stop_minutes
            current.set_time(add_minutes(start_minutes, overflow))

    def remove_remaining_minutes(self, minutes: int, current: Date) -> None:
        """Place ``minutes`` (< one workday) backward from ``current``, in place."""
        with self._lock:
            self._remove_remaining_minutes(minutes, current)

    def _remove_remaining_minutes(self, minutes: int, current: Date) -> None:
        start_minutes, stop_minutes, _ = self._require_window()
        current_minutes = convert_to_minutes(current.get_time())

        if current_minutes >= stop_minutes:
            current_minutes = stop_minutes
        elif current_minutes < start_minutes:
            self._step_workday(current, decrement=True)
            current_minutes = stop_minutes

        if current_minutes - minutes >= start_minutes:
            current.set_time(subtract_minutes(current_minutes, minutes))
        else:
            self._step_workday(current, decrement=True)
            underflow = start_minutes - (current_minutes - minutes)
            current.set_time(subtract_minutes(stop_minutes, underflow))

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def calendar(self) -> Calendar:
        return self._calendar

    @property
    def workday_start(self) -> Date | None:
        with self._lock:
            return self._start.copy() if self._start is not None else None

    @property
    def workday_stop(self) -> Date | None:
        with self._lock:
            return self._stop.copy() if self._stop is not None else None

    @property
    def workday_duration(self) -> TimeOfDay | None:
        with self._lock:
            return self._duration

    @property
    def is_configured(self) -> bool:
        with self._lock:
            return self._duration is not None

    def __repr__(self) -> str:
        window = (
            f"{self._start.get_time()}-{self._stop.get_time()}"
            if self._start is not None and self._stop is not None
            else None
        )
        return (
            f"WorkdayCalendar(window={window}, "
            f"duration={self._duration}, "
            f"calendar={self._calendar!r})"
        )
