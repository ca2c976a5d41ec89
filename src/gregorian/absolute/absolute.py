from __future__ import annotations

import operator
from typing import Any, Callable, Final, Optional, Tuple, Union

import numpy as np

from .._exceptions import ValidationError
from ..validation import (
    DAYS_IN_MONTH,
    MAX_YEAR,
    MIN_YEAR,
    check_date,
    check_year,
    days_in_month,
    days_in_prior_months,
)

ArrayLike = Union[int, "np.ndarray"]

# Absolute date 1 is 1-Jan-1601; day 0 is 31-Dec-1600.
MIN_ABSOLUTE_DATE: Final[int] = 1
MAX_ABSOLUTE_DATE: Final[int] = 876216

DAYS_IN_400_YEAR_CYCLE: Final[int] = 400 * 365 + 100 - 3
DAYS_IN_100_YEAR_CYCLE: Final[int] = 100 * 365 + 25 - 1
DAYS_IN_4_YEAR_CYCLE: Final[int] = 4 * 365 + 1
DAYS_IN_1_YEAR_CYCLE: Final[int] = 365


def _cumulative_table() -> np.ndarray:
    # Row 0: common year, row 1: leap year.  Column m holds the days in
    # months 1 .. m, so column 0 is always 0 and column 12 the year length.
    table = np.zeros((2, 13), dtype=np.int64)
    lengths = np.array(DAYS_IN_MONTH, dtype=np.int64)
    table[0, 1:] = np.cumsum(lengths)
    lengths[1] += 1
    table[1, 1:] = np.cumsum(lengths)
    table.setflags(write=False)
    return table


_CUMULATIVE_DAYS: Final[np.ndarray] = _cumulative_table()
_MONTH_LENGTHS: Final[np.ndarray] = np.diff(_CUMULATIVE_DAYS, axis=1)
_MONTH_LENGTHS.setflags(write=False)


# ── closed-form helpers (int or ndarray) ─────────────────────────────────

def _days_in_past_years(year: ArrayLike) -> ArrayLike:
    y = year - MIN_YEAR
    return 365 * y + y // 4 - y // 100 + y // 400


def _year_from_absolute(absolute: ArrayLike) -> ArrayLike:
    # Reingold & Dershowitz, Calendrical Calculations.  Works element-wise
    # on int64 arrays as well as on plain ints.
    n400, r100 = divmod(absolute - 1, DAYS_IN_400_YEAR_CYCLE)
    n100, r4 = divmod(r100, DAYS_IN_100_YEAR_CYCLE)
    n4, r1 = divmod(r4, DAYS_IN_4_YEAR_CYCLE)
    n1 = r1 // DAYS_IN_1_YEAR_CYCLE
    year = 400 * n400 + 100 * n100 + 4 * n4 + n1 + MIN_YEAR
    # The last day of a 400- or 4-year cycle is day 366 of the previous year.
    on_leap_day = (n100 == 4) | (n1 == 4)
    return year - on_leap_day


# ── scalar conversion ────────────────────────────────────────────────────

def check_absolute_date(absolute: Any) -> Optional[ValidationError]:
    if isinstance(absolute, bool):
        return ValidationError(f"Absolute date must be an integer: {absolute!r}")
    try:
        a = operator.index(absolute)
    except TypeError:
        return ValidationError(f"Absolute date must be an integer: {absolute!r}")
    if a < MIN_ABSOLUTE_DATE or a > MAX_ABSOLUTE_DATE:
        return ValidationError(
            f"Absolute date must be between {MIN_ABSOLUTE_DATE} and "
            f"{MAX_ABSOLUTE_DATE}: {a}"
        )
    return None


def days_in_past_years(year: int) -> int:
    """Days from 1-Jan-1601 up to, but not including, 1-Jan-``year``.

    ``days_in_past_years(1601) == 0``.
    """
    err = check_year(year)
    if err is not None:
        raise err
    return _days_in_past_years(operator.index(year))


def year_from_absolute(absolute: int) -> int:
    err = check_absolute_date(absolute)
    if err is not None:
        raise err
    return int(_year_from_absolute(operator.index(absolute)))


def to_absolute(month: int, day: int, year: int) -> int:
    """Convert a calendar date into its absolute date.

    Raises:
        ValidationError: if ``month``/``day``/``year`` is not a date.
    """
    err = check_date(month, day, year)
    if err is not None:
        raise err
    m, d, y = operator.index(month), operator.index(day), operator.index(year)
    absolute = _days_in_past_years(y) + days_in_prior_months(m, y) + d
    assert MIN_ABSOLUTE_DATE <= absolute <= MAX_ABSOLUTE_DATE, absolute
    return absolute


def from_absolute(absolute: int) -> Tuple[int, int, int]:
    """Convert an absolute date into ``(month, day, year)``.

    Raises:
        ValidationError: if ``absolute`` is outside 1 .. 876216.
    """
    err = check_absolute_date(absolute)
    if err is not None:
        raise err
    a = operator.index(absolute)
    year = int(_year_from_absolute(a))
    remaining = a - _days_in_past_years(year)

    month = 1
    length = days_in_month(month, year)
    while remaining > length:
        remaining -= length
        month += 1
        length = days_in_month(month, year)

    assert to_absolute(month, remaining, year) == a, (a, month, remaining, year)
    return month, remaining, year


# ── bulk conversion ──────────────────────────────────────────────────────

def _as_int64(values: Any, name: str) -> np.ndarray:
    arr = np.asarray(values)
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValidationError(f"{name} values must be integers; got dtype {arr.dtype}.")
    return arr.astype(np.int64, copy=False)


def _raise_first(bad: np.ndarray, describe: Callable[[int], str]) -> None:
    if bad.any():
        i = int(np.argmax(bad))
        raise ValidationError(f"Element {i}: {describe(i)}")


def _leap_index(year: np.ndarray) -> np.ndarray:
    leap = ((year % 4 == 0) & (year % 100 != 0)) | (year % 400 == 0)
    return leap.astype(np.intp)


def to_absolute_array(month: Any, day: Any, year: Any) -> ArrayLike:
    """Vectorised ``to_absolute``.

    Inputs broadcast against each other; the result has the broadcast shape.
    All-scalar input returns a plain ``int``.
    """
    scalar = np.ndim(month) == 0 and np.ndim(day) == 0 and np.ndim(year) == 0
    m, d, y = np.broadcast_arrays(
        np.atleast_1d(_as_int64(month, "month")),
        np.atleast_1d(_as_int64(day, "day")),
        np.atleast_1d(_as_int64(year, "year")),
    )
    shape = m.shape
    m, d, y = m.ravel(), d.ravel(), y.ravel()

    _raise_first((m < 1) | (m > 12), lambda i: f"invalid month {m[i]}")
    _raise_first(
        (y < MIN_YEAR) | (y > MAX_YEAR),
        lambda i: f"year must be between {MIN_YEAR} and {MAX_YEAR}: {y[i]}",
    )
    leap = _leap_index(y)
    limits = _MONTH_LENGTHS[leap, m - 1]
    _raise_first(
        (d < 1) | (d > limits),
        lambda i: f"invalid day {d[i]} for month {m[i]} of {y[i]}",
    )

    result = _days_in_past_years(y) + _CUMULATIVE_DAYS[leap, m - 1] + d
    if scalar:
        return int(result[0])
    return result.reshape(shape)


def from_absolute_array(
    absolute: Any,
) -> Tuple[ArrayLike, ArrayLike, ArrayLike]:
    """Vectorised ``from_absolute``; returns ``(month, day, year)`` arrays."""
    scalar = np.ndim(absolute) == 0
    a = np.atleast_1d(_as_int64(absolute, "absolute date"))
    shape = a.shape
    a = a.ravel()

    _raise_first(
        (a < MIN_ABSOLUTE_DATE) | (a > MAX_ABSOLUTE_DATE),
        lambda i: f"absolute date must be between {MIN_ABSOLUTE_DATE} and "
        f"{MAX_ABSOLUTE_DATE}: {a[i]}",
    )

    year = _year_from_absolute(a)
    day_of_year = a - _days_in_past_years(year)
    cumulative = _CUMULATIVE_DAYS[_leap_index(year)]
    month = (cumulative[:, 1:] < day_of_year[:, None]).sum(axis=1) + 1
    day = day_of_year - cumulative[np.arange(a.size), month - 1]

    if scalar:
        return int(month[0]), int(day[0]), int(year[0])
    return month.reshape(shape), day.reshape(shape), year.reshape(shape)
