"""
tests/absolute/test_absolute.py

Covers:
  - Known conversions (min, max, 19-Dec-2023)
  - Closed-form past-year day counts
  - Year recovery on cycle boundaries (leap days ending 4- and 400-year cycles)
  - Round trip in both directions (exhaustive on the NumPy path)
  - Scalar and NumPy paths agree
  - Out-of-range input raises, never clamps
"""

import numpy as np
import pytest

from gregorian import ValidationError
from gregorian.absolute import (
    DAYS_IN_100_YEAR_CYCLE,
    DAYS_IN_400_YEAR_CYCLE,
    DAYS_IN_4_YEAR_CYCLE,
    MAX_ABSOLUTE_DATE,
    MIN_ABSOLUTE_DATE,
    check_absolute_date,
    days_in_past_years,
    from_absolute,
    from_absolute_array,
    to_absolute,
    to_absolute_array,
    year_from_absolute,
)
from gregorian.validation import days_in_year


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture(scope="module")
def every_absolute():
    return np.arange(MIN_ABSOLUTE_DATE, MAX_ABSOLUTE_DATE + 1, dtype=np.int64)


# ── Known values ──────────────────────────────────────────────────────────────

class TestKnownValues:

    @pytest.mark.parametrize(
        "absolute, mdy",
        [
            (1, (1, 1, 1601)),
            (876216, (12, 31, 3999)),
            (154485, (12, 19, 2023)),
            (365, (12, 31, 1601)),
            (366, (1, 1, 1602)),
        ],
    )
    def test_both_directions(self, absolute, mdy):
        assert from_absolute(absolute) == mdy
        assert to_absolute(*mdy) == absolute

    def test_cycle_constants(self):
        assert DAYS_IN_400_YEAR_CYCLE == 146097
        assert DAYS_IN_100_YEAR_CYCLE == 36524
        assert DAYS_IN_4_YEAR_CYCLE == 1461

    def test_min_and_max_constants(self):
        assert MIN_ABSOLUTE_DATE == 1
        assert MAX_ABSOLUTE_DATE == 876216


# ── Past-year day counts ──────────────────────────────────────────────────────

class TestDaysInPastYears:

    def test_first_year_is_zero(self):
        assert days_in_past_years(1601) == 0

    def test_matches_iterative_sum(self):
        total = 0
        for year in range(1601, 4000):
            assert days_in_past_years(year) == total
            total += days_in_year(year)
        assert total == MAX_ABSOLUTE_DATE

    def test_invalid_year_raises(self):
        with pytest.raises(ValidationError):
            days_in_past_years(4000)


# ── Cycle boundaries ──────────────────────────────────────────────────────────

class TestCycleBoundaries:

    @pytest.mark.parametrize(
        "mdy",
        [
            (12, 31, 2000),   # last day of a 400-year cycle
            (1, 1, 2001),
            (12, 31, 1604),   # last day of a 4-year cycle
            (1, 1, 1605),
            (12, 31, 1700),   # century, not leap
            (12, 31, 1999),
            (2, 29, 2000),
            (2, 29, 2400),
        ],
    )
    def test_round_trip_at_boundary(self, mdy):
        assert from_absolute(to_absolute(*mdy)) == mdy

    def test_leap_day_ending_400_year_cycle(self):
        a = DAYS_IN_400_YEAR_CYCLE
        assert year_from_absolute(a) == 2000
        assert year_from_absolute(a + 1) == 2001
        assert from_absolute(a) == (12, 31, 2000)

    def test_leap_day_ending_4_year_cycle(self):
        a = DAYS_IN_4_YEAR_CYCLE
        assert year_from_absolute(a) == 1604
        assert from_absolute(a) == (12, 31, 1604)

    def test_every_year_start_and_end(self):
        for year in range(1601, 4000):
            first = to_absolute(1, 1, year)
            last = to_absolute(12, 31, year)
            assert last - first + 1 == days_in_year(year)
            assert year_from_absolute(first) == year
            assert year_from_absolute(last) == year


# ── Round trips ───────────────────────────────────────────────────────────────

class TestRoundTrip:

    def test_scalar_strided(self):
        for a in range(MIN_ABSOLUTE_DATE, MAX_ABSOLUTE_DATE + 1, 97):
            assert to_absolute(*from_absolute(a)) == a

    def test_scalar_every_day_of_one_cycle(self):
        # 2000-2003 covers a 400-year leap day and a 4-year cycle.
        for a in range(to_absolute(1, 1, 2000), to_absolute(12, 31, 2003) + 1):
            assert to_absolute(*from_absolute(a)) == a

    def test_array_exhaustive(self, every_absolute):
        months, days, years = from_absolute_array(every_absolute)
        np.testing.assert_array_equal(
            to_absolute_array(months, days, years), every_absolute
        )

    def test_array_is_strictly_increasing_by_date(self, every_absolute):
        months, days, years = from_absolute_array(every_absolute)
        key = years * 10_000 + months * 100 + days
        assert np.all(np.diff(key) > 0)

    def test_array_agrees_with_scalar(self, every_absolute):
        sample = every_absolute[::1013]
        months, days, years = from_absolute_array(sample)
        for a, m, d, y in zip(sample, months, days, years):
            assert from_absolute(int(a)) == (int(m), int(d), int(y))


# ── NumPy inputs ──────────────────────────────────────────────────────────────

class TestArrayInputs:

    def test_scalar_returns_ints(self):
        assert to_absolute_array(12, 19, 2023) == 154485
        assert isinstance(to_absolute_array(12, 19, 2023), int)
        assert from_absolute_array(154485) == (12, 19, 2023)

    def test_shape_preserved(self):
        a = np.array([[1, 2], [154485, 876216]])
        months, days, years = from_absolute_array(a)
        assert months.shape == (2, 2)
        np.testing.assert_array_equal(years, [[1601, 1601], [2023, 3999]])
        np.testing.assert_array_equal(days, [[1, 2], [19, 31]])

    def test_broadcast_scalar_year(self):
        result = to_absolute_array(np.array([1, 2, 3]), 1, 2024)
        np.testing.assert_array_equal(np.diff(result), [31, 29])

    def test_invalid_day_raises(self):
        with pytest.raises(ValidationError, match="Element 1"):
            to_absolute_array([2, 2], [28, 29], [2023, 2023])

    def test_invalid_month_raises(self):
        with pytest.raises(ValidationError):
            to_absolute_array([0], [1], [2023])

    def test_invalid_year_raises(self):
        with pytest.raises(ValidationError):
            to_absolute_array([1], [1], [4000])

    def test_out_of_range_absolute_raises(self):
        with pytest.raises(ValidationError):
            from_absolute_array(np.array([1, 0]))
        with pytest.raises(ValidationError):
            from_absolute_array([MAX_ABSOLUTE_DATE + 1])

    def test_float_input_raises(self):
        with pytest.raises(ValidationError):
            from_absolute_array(np.array([1.0, 2.0]))


# ── Scalar errors ─────────────────────────────────────────────────────────────

class TestErrors:

    @pytest.mark.parametrize("absolute", [0, -1, MAX_ABSOLUTE_DATE + 1])
    def test_out_of_range(self, absolute):
        assert isinstance(check_absolute_date(absolute), ValidationError)
        with pytest.raises(ValidationError):
            from_absolute(absolute)

    def test_invalid_date(self):
        with pytest.raises(ValidationError):
            to_absolute(2, 29, 2023)

    def test_non_integer(self):
        assert isinstance(check_absolute_date(1.0), ValidationError)
        with pytest.raises(ValidationError):
            year_from_absolute("1")
