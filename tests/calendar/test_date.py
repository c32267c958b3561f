"""
tests/calendar/test_date.py

Covers:
  - Construction, mutation and copying
  - Fixed-width string forms
  - Day-of-week (against the standard library)
  - Invalid sentinel
  - Ordering
  - Parsing and datetime bridging
"""

import datetime as dt

import pytest

from workday.calendar import Date, InvalidDateError


# ── Construction / mutation ───────────────────────────────────────────────────

class TestConstruction:

    def test_default_is_all_zero(self):
        d = Date()
        assert (d.year, d.month, d.day, d.hour, d.minute) == (0, 0, 0, 0, 0)

    def test_fields(self):
        d = Date(2024, 5, 20, 8, 30)
        assert d.year == 2024
        assert d.month == 5
        assert d.day == 20
        assert d.get_time() == (8, 30)

    def test_set_date_overwrites_in_place(self):
        d = Date(2024, 5, 20, 8, 30)
        d.set_date(2004, 1, 2, 9, 7)
        assert d == Date(2004, 1, 2, 9, 7)

    def test_set_time_keeps_date(self):
        d = Date(2024, 5, 20, 8, 30)
        d.set_time((16, 0))
        assert d == Date(2024, 5, 20, 16, 0)

    def test_copy_is_not_aliased(self):
        d = Date(2024, 5, 20, 8, 30)
        c = d.copy()
        c.set_time((9, 0))
        assert d.get_time() == (8, 30)
        assert c is not d


# ── Formatting ────────────────────────────────────────────────────────────────

class TestFormatting:

    def test_get_date_zero_padded(self):
        assert Date(2024, 3, 1, 9, 5).get_date() == "2024-03-01"

    def test_get_date_and_time_zero_padded(self):
        assert Date(2024, 3, 1, 9, 5).get_date_and_time() == "2024-03-01 09:05"

    def test_small_year_padded(self):
        assert Date(33, 1, 1).get_date() == "0033-01-01"

    def test_str_is_date_and_time(self):
        assert str(Date(2004, 1, 2, 12, 0)) == "2004-01-02 12:00"


# ── Day of week ───────────────────────────────────────────────────────────────

class TestDayOfWeek:

    @pytest.mark.parametrize(
        "date, expected",
        [
            (Date(2024, 5, 11), 6),   # Saturday
            (Date(2024, 5, 12), 0),   # Sunday
            (Date(2004, 1, 1), 4),    # Thursday
            (Date(2000, 1, 1), 6),    # Saturday
            (Date(2000, 2, 29), 2),   # Tuesday
            (Date(1900, 3, 1), 4),    # Thursday
        ],
    )
    def test_known_days(self, date, expected):
        assert date.day_of_week() == expected

    def test_matches_standard_library_over_four_years(self):
        cur = dt.date(2023, 1, 1)
        while cur < dt.date(2027, 1, 1):
            assert Date.from_datetime(cur).day_of_week() == cur.isoweekday() % 7, cur
            cur += dt.timedelta(days=1)

    def test_time_of_day_does_not_matter(self):
        assert Date(2024, 5, 11, 0, 0).day_of_week() == Date(2024, 5, 11, 23, 59).day_of_week()


# ── Invalid sentinel ──────────────────────────────────────────────────────────

class TestInvalid:

    def test_all_fields_minus_one(self):
        d = Date.invalid()
        assert (d.year, d.month, d.day, d.hour, d.minute) == (-1, -1, -1, -1, -1)

    def test_is_invalid(self):
        assert Date.invalid().is_invalid
        assert not Date(2024, 1, 1).is_invalid

    def test_generate_invalid_date_from_instance(self):
        d = Date(2024, 1, 1)
        assert d.generate_invalid_date() == Date.invalid()
        assert d == Date(2024, 1, 1)


# ── Ordering ──────────────────────────────────────────────────────────────────

class TestOrdering:

    def test_lexicographic(self):
        a = Date(2024, 1, 1, 9, 0)
        b = Date(2024, 1, 1, 9, 1)
        c = Date(2024, 1, 2, 0, 0)
        d = Date(2025, 1, 1, 0, 0)
        assert a < b < c < d
        assert sorted([d, b, c, a]) == [a, b, c, d]

    def test_equality_by_value(self):
        assert Date(2024, 1, 1, 9, 0) == Date(2024, 1, 1, 9, 0)
        assert Date(2024, 1, 1, 9, 0) != Date(2024, 1, 1, 9, 1)


# ── Parsing / bridging ────────────────────────────────────────────────────────

class TestParse:

    def test_date_only(self):
        assert Date.parse("2024-07-04") == Date(2024, 7, 4, 0, 0)

    def test_date_and_time(self):
        assert Date.parse("2004-01-01 15:07") == Date(2004, 1, 1, 15, 7)

    def test_iso_t_separator(self):
        assert Date.parse("2004-01-01T15:07") == Date(2004, 1, 1, 15, 7)

    def test_time_only(self):
        assert Date.parse("08:00") == Date(0, 0, 0, 8, 0)

    def test_surrounding_whitespace(self):
        assert Date.parse("  2024-7-4 ") == Date(2024, 7, 4)

    @pytest.mark.parametrize("text", ["", "tomorrow", "2024/07/04", "8h00", "2024-07-04 8"])
    def test_malformed_raises(self, text):
        with pytest.raises(InvalidDateError):
            Date.parse(text)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            Date.parse("nope")

    def test_to_datetime(self):
        assert Date(2024, 2, 29, 9, 30).to_datetime() == dt.datetime(2024, 2, 29, 9, 30)

    def test_to_datetime_rejects_impossible_date(self):
        with pytest.raises(InvalidDateError):
            Date(2023, 2, 29).to_datetime()

    def test_from_datetime(self):
        assert Date.from_datetime(dt.datetime(2024, 5, 20, 8, 15)) == Date(2024, 5, 20, 8, 15)
