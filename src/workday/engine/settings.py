from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from workday.calendar import Date, GregorianCalendar, InvalidDateError
from workday.calendar.timeutils import convert_to_minutes

# Date part given to time-of-day and (month, day) values so they pass
# calendar validation; a leap year so that 02-29 is accepted.
_ANCHOR_YEAR: int = 2000

_GREGORIAN = GregorianCalendar()


def _parse(value: str) -> Date:
    try:
        return Date.parse(value)
    except InvalidDateError as exc:
        raise ValueError(str(exc)) from exc


def _time_of_day(value: str) -> Date:
    d = Date.parse(value)
    return Date(_ANCHOR_YEAR, 1, 1, d.hour, d.minute)


def _parse_valid(value: str) -> Date:
    d = _parse(value)
    if not _GREGORIAN.is_valid_date(d):
        raise ValueError(f"not a calendar date: {value!r}")
    return d


class WorkdaySettings(BaseModel, frozen=True):
    """Configuration for a WorkdayCalendar: daily window and holidays."""

    start: str = Field(default="08:00", description="Workday start, HH:MM")
    stop: str = Field(default="16:00", description="Workday stop, HH:MM")
    holidays: list[str] = Field(default_factory=list, description="YYYY-MM-DD")
    recurring_holidays: list[str] = Field(default_factory=list, description="MM-DD")

    @field_validator("start", "stop")
    @classmethod
    def validate_time(cls, value: str) -> str:
        d = _parse(value)
        if d.year or d.month or d.day:
            raise ValueError(f"expected HH:MM, got {value!r}")
        if not (0 <= d.hour < 24 and 0 <= d.minute < 60):
            raise ValueError(f"time out of range: {value!r}")
        return f"{d.hour:02d}:{d.minute:02d}"

    @field_validator("holidays")
    @classmethod
    def validate_holidays(cls, values: list[str]) -> list[str]:
        return [_parse_valid(v).get_date() for v in values]

    @field_validator("recurring_holidays")
    @classmethod
    def validate_recurring(cls, values: list[str]) -> list[str]:
        out: list[str] = []
        for v in values:
            d = _parse_valid(f"{_ANCHOR_YEAR}-{v.strip()}")
            out.append(f"{d.month:02d}-{d.day:02d}")
        return out

    @model_validator(mode="after")
    def validate_window(self) -> "WorkdaySettings":
        if convert_to_minutes(self.start_date().get_time()) >= convert_to_minutes(
            self.stop_date().get_time()
        ):
            raise ValueError(f"start ({self.start}) must be < stop ({self.stop})")
        return self

    # ── conversions ──────────────────────────────────────────────────────

    def start_date(self) -> Date:
        return _time_of_day(self.start)

    def stop_date(self) -> Date:
        return _time_of_day(self.stop)

    def holiday_dates(self) -> list[Date]:
        return [Date.parse(v) for v in self.holidays]

    def recurring_holiday_dates(self) -> list[Date]:
        return [Date.parse(f"{_ANCHOR_YEAR}-{v}") for v in self.recurring_holidays]


def _split_env(name: str) -> list[str]:
    return [part.strip() for part in os.getenv(name, "").split(",") if part.strip()]


def load_settings(path: str | Path | None = None) -> WorkdaySettings:
    """
    Read settings from a JSON file (if given and present), then apply
    environment overrides: ``WORKDAY_START`` and ``WORKDAY_STOP`` replace the
    window, ``WORKDAY_HOLIDAYS`` and ``WORKDAY_RECURRING_HOLIDAYS`` (comma
    separated) extend the holiday lists.
    """
    data: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            data = WorkdaySettings.model_validate_json(p.read_text(encoding="utf-8")).model_dump()

    if os.getenv("WORKDAY_START"):
        data["start"] = os.environ["WORKDAY_START"]
    if os.getenv("WORKDAY_STOP"):
        data["stop"] = os.environ["WORKDAY_STOP"]
    data["holidays"] = list(data.get("holidays", [])) + _split_env("WORKDAY_HOLIDAYS")
    data["recurring_holidays"] = list(data.get("recurring_holidays", [])) + _split_env(
        "WORKDAY_RECURRING_HOLIDAYS"
    )
    return WorkdaySettings.model_validate(data)
