"""
tests/week/test_week.py

Covers:
  - Weekday anchor (1-Jan-1601 is a Monday) and known dates
  - Weekday advances by one per day
  - next_weekday_after: strictly later, at most a week ahead, ceiling failure
  - last_weekday_of_month: stays in the month, within the final week
  - Invalid day-of-week input
"""

import datetime

import pytest

from gregorian import (
    MAX_DATE,
    MIN_DATE,
    BoundaryError,
    Date,
    DayOfWeek,
    ValidationError,
    add,
    difference,
    increment,
    last_weekday_of_month,
    next_weekday_after,
    weekday,
)
from gregorian.validation import days_in_month
from gregorian.week import check_day_of_week


# ── Weekday ───────────────────────────────────────────────────────────────────

class TestWeekday:

    def test_anchor_is_monday(self):
        assert weekday(MIN_DATE) is DayOfWeek.MONDAY

    @pytest.mark.parametrize(
        "date, expected",
        [
            (Date(12, 24, 2023), DayOfWeek.SUNDAY),
            (Date(12, 30, 2023), DayOfWeek.SATURDAY),
            (Date(12, 19, 2023), DayOfWeek.TUESDAY),
            (Date(1, 1, 2000), DayOfWeek.SATURDAY),
            (Date(12, 31, 3999), DayOfWeek.FRIDAY),
        ],
    )
    def test_known_dates(self, date, expected):
        assert weekday(date) is expected

    def test_agrees_with_stdlib_on_sample(self):
        for offset in range(0, 876216, 4999):
            d = add(MIN_DATE, offset)
            iso = datetime.date(d.year, d.month, d.day).isoweekday()
            assert weekday(d) == iso % 7

    def test_advances_by_one(self):
        d = Date(2, 25, 2024)
        for _ in range(14):
            nxt = increment(d)
            assert weekday(nxt) == (weekday(d) + 1) % 7
            d = nxt


# ── Next weekday ──────────────────────────────────────────────────────────────

class TestNextWeekdayAfter:

    def test_next_tuesday(self):
        assert next_weekday_after(Date(12, 19, 2023), DayOfWeek.TUESDAY) == Date(12, 26, 2023)

    def test_next_day(self):
        assert next_weekday_after(Date(12, 19, 2023), DayOfWeek.WEDNESDAY) == Date(12, 20, 2023)

    def test_across_year_end(self):
        assert next_weekday_after(Date(12, 30, 2023), DayOfWeek.MONDAY) == Date(1, 1, 2024)

    def test_every_target_within_a_week(self):
        start = Date(2, 27, 2024)
        for target in DayOfWeek:
            result = next_weekday_after(start, target)
            assert weekday(result) is target
            assert 1 <= difference(result, start) <= 7

    def test_plain_int_target(self):
        assert next_weekday_after(Date(12, 19, 2023), 5) == Date(12, 22, 2023)

    def test_ceiling_fails(self):
        with pytest.raises(BoundaryError):
            next_weekday_after(MAX_DATE, DayOfWeek.MONDAY)

    def test_search_past_ceiling_fails(self):
        # 31-Dec-3999 is a Friday; no Saturday follows 28-Dec-3999.
        with pytest.raises(BoundaryError):
            next_weekday_after(Date(12, 28, 3999), DayOfWeek.SATURDAY)


# ── Last weekday of month ─────────────────────────────────────────────────────

class TestLastWeekdayOfMonth:

    def test_last_friday(self):
        assert last_weekday_of_month(12, 2023, DayOfWeek.FRIDAY) == Date(12, 29, 2023)

    def test_month_ending_on_target(self):
        assert last_weekday_of_month(12, 2023, DayOfWeek.SUNDAY) == Date(12, 31, 2023)

    def test_leap_february(self):
        # 29-Feb-2024 is a Thursday.
        assert last_weekday_of_month(2, 2024, DayOfWeek.THURSDAY) == Date(2, 29, 2024)
        assert last_weekday_of_month(2, 2024, DayOfWeek.FRIDAY) == Date(2, 23, 2024)

    @pytest.mark.parametrize("month", range(1, 13))
    def test_in_final_week(self, month):
        last = days_in_month(month, 2025)
        for target in DayOfWeek:
            result = last_weekday_of_month(month, 2025, target)
            assert weekday(result) is target
            assert result.month == month
            assert last - 7 < result.day <= last

    def test_first_month_of_calendar(self):
        result = last_weekday_of_month(1, 1601, DayOfWeek.MONDAY)
        assert result == Date(1, 29, 1601)

    def test_invalid_month(self):
        with pytest.raises(ValidationError):
            last_weekday_of_month(13, 2023, DayOfWeek.FRIDAY)


# ── Day-of-week validation ────────────────────────────────────────────────────

class TestDayOfWeekValidation:

    @pytest.mark.parametrize("value", [-1, 7, 1.0, "1", None, True])
    def test_check_rejects(self, value):
        assert isinstance(check_day_of_week(value), ValidationError)

    def test_check_accepts(self):
        for value in range(7):
            assert check_day_of_week(value) is None

    def test_search_rejects_invalid_target(self):
        with pytest.raises(ValidationError):
            next_weekday_after(Date(1, 1, 2023), 7)
        with pytest.raises(ValidationError):
            last_weekday_of_month(1, 2023, -1)
