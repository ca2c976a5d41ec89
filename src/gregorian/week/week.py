from __future__ import annotations

import operator
from enum import IntEnum
from typing import Any, Final, Optional

from .._exceptions import ValidationError
from ..date import Date, decrement, increment
from ..validation import days_in_month


class DayOfWeek(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


# Absolute date 1 (1-Jan-1601) is a Monday and MONDAY == 1.
ANCHOR_OFFSET: Final[int] = 0


def check_day_of_week(value: Any) -> Optional[ValidationError]:
    if isinstance(value, bool):
        return ValidationError(f"Day of week must be an integer: {value!r}")
    try:
        v = operator.index(value)
    except TypeError:
        return ValidationError(f"Day of week must be an integer: {value!r}")
    if not 0 <= v <= 6:
        return ValidationError(f"Day of week must be between 0 and 6, not {v}")
    return None


def _as_day_of_week(value: Any) -> DayOfWeek:
    err = check_day_of_week(value)
    if err is not None:
        raise err
    return DayOfWeek(operator.index(value))


def weekday(date: Date) -> DayOfWeek:
    return DayOfWeek((date.to_absolute() + ANCHOR_OFFSET) % 7)


def next_weekday_after(date: Date, target: int) -> Date:
    """Closest date strictly after ``date`` that falls on ``target``.

    Raises:
        ValidationError: if ``target`` is not 0..6.
        BoundaryError: if the search runs past 31-Dec-3999.
    """
    target = _as_day_of_week(target)
    result = increment(date)
    for _ in range(6):
        if weekday(result) == target:
            break
        result = increment(result)
    assert weekday(result) == target
    return result


def last_weekday_of_month(month: int, year: int, target: int) -> Date:
    """Last date in ``month`` of ``year`` that falls on ``target``."""
    target = _as_day_of_week(target)
    result = Date(month, days_in_month(month, year), year)
    for _ in range(6):
        if weekday(result) == target:
            break
        result = decrement(result)
    assert weekday(result) == target and result.month == month
    return result
