from __future__ import annotations

import operator
from typing import Any, Final, Optional

from .._exceptions import ValidationError

MIN_YEAR: Final[int] = 1601
MAX_YEAR: Final[int] = 3999

DAYS_IN_MONTH: Final[tuple[int, ...]] = (
    31,  # Jan
    28,  # Feb
    31,  # Mar
    30,  # Apr
    31,  # May
    30,  # Jun
    31,  # Jul
    31,  # Aug
    30,  # Sep
    31,  # Oct
    30,  # Nov
    31,  # Dec
)

MONTH_NAMES: Final[tuple[str, ...]] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


# ── integer coercion ─────────────────────────────────────────────────────

def _as_int(value: Any) -> Optional[int]:
    # bool is an int subclass but never a calendar field.
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


# ── checks (return the error, never raise it) ────────────────────────────

def check_month(month: Any) -> Optional[ValidationError]:
    m = _as_int(month)
    if m is None:
        return ValidationError(f"Month must be an integer: {month!r}")
    if m < 1:
        return ValidationError(f"Month cannot be less than 1: {m}")
    if m > 12:
        return ValidationError(f"Month cannot be greater than 12: {m}")
    return None


def check_year(year: Any) -> Optional[ValidationError]:
    y = _as_int(year)
    if y is None:
        return ValidationError(f"Year must be an integer: {year!r}")
    if y < MIN_YEAR:
        return ValidationError(f"Year cannot be less than {MIN_YEAR}: {y}")
    if y > MAX_YEAR:
        return ValidationError(f"Year cannot be greater than {MAX_YEAR}: {y}")
    return None


def check_day(month: Any, day: Any, year: Any) -> Optional[ValidationError]:
    """Check ``day`` against the length of ``month`` in ``year``.

    Month and year are checked first; their error is returned unchanged.
    """
    err = check_month(month) or check_year(year)
    if err is not None:
        return err
    d = _as_int(day)
    if d is None:
        return ValidationError(f"Day must be an integer: {day!r}")
    if d < 1:
        return ValidationError(f"Day cannot be less than 1: {d}")
    limit = _days_in_month(operator.index(month), operator.index(year))
    if d > limit:
        return ValidationError(
            f"Day cannot be greater than the number of days in "
            f"{MONTH_NAMES[operator.index(month) - 1]} {operator.index(year)} ({limit}): {d}"
        )
    return None


def check_date(month: Any, day: Any, year: Any) -> Optional[ValidationError]:
    return check_month(month) or check_year(year) or check_day(month, day, year)


def check_day_of_year(day_of_year: Any, year: Any) -> Optional[ValidationError]:
    err = check_year(year)
    if err is not None:
        return err
    doy = _as_int(day_of_year)
    if doy is None:
        return ValidationError(f"Day of year must be an integer: {day_of_year!r}")
    if doy < 1:
        return ValidationError(f"Day of year cannot be less than 1: {doy}")
    limit = _days_in_year(operator.index(year))
    if doy > limit:
        return ValidationError(
            f"Day of year cannot be greater than the number of days in "
            f"{operator.index(year)} ({limit}): {doy}"
        )
    return None


def is_valid_date(month: Any, day: Any, year: Any) -> bool:
    return check_date(month, day, year) is None


# ── definitional functions ───────────────────────────────────────────────

def is_leap_year(year: int) -> bool:
    """Return True if ``year`` has 366 days under the Gregorian rule."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def _days_in_month(month: int, year: int) -> int:
    days = DAYS_IN_MONTH[month - 1]
    if month == 2 and is_leap_year(year):
        days += 1
    return days


def _days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(month: int, year: int) -> int:
    """Return the number of days (28..31) in ``month`` of ``year``.

    Raises:
        ValidationError: if the month or year is invalid.
    """
    err = check_month(month) or check_year(year)
    if err is not None:
        raise err
    days = _days_in_month(operator.index(month), operator.index(year))
    assert 28 <= days <= 31, days
    return days


def days_in_year(year: int) -> int:
    err = check_year(year)
    if err is not None:
        raise err
    return _days_in_year(operator.index(year))


def days_in_prior_months(month: int, year: int) -> int:
    """Days in months 1 .. ``month`` - 1 of ``year``."""
    err = check_month(month) or check_year(year)
    if err is not None:
        raise err
    m, y = operator.index(month), operator.index(year)
    return sum(_days_in_month(k, y) for k in range(1, m))
