from __future__ import annotations

import logging
import operator

from .._exceptions import BoundaryError, RangeError, ValidationError
from ..absolute import MAX_ABSOLUTE_DATE, MIN_ABSOLUTE_DATE
from .date import MAX_DATE, MIN_DATE, Date

logger = logging.getLogger(__name__)


def increment(date: Date) -> Date:
    """Return the day after ``date``.

    Raises:
        BoundaryError: if ``date`` is 31-Dec-3999.
    """
    if date == MAX_DATE:
        logger.debug("increment refused at %s", date)
        raise BoundaryError(f"cannot increment maximum date {date}")
    result = Date.from_absolute(date.to_absolute() + 1)
    assert difference(result, date) == 1
    return result


def decrement(date: Date) -> Date:
    """Return the day before ``date``.

    Raises:
        BoundaryError: if ``date`` is 1-Jan-1601.
    """
    if date == MIN_DATE:
        logger.debug("decrement refused at %s", date)
        raise BoundaryError(f"cannot decrement minimum date {date}")
    result = Date.from_absolute(date.to_absolute() - 1)
    assert difference(date, result) == 1
    return result


def add(date: Date, days: int) -> Date:
    """Add ``days`` to ``date``; negative values subtract.

    Raises:
        RangeError: if the result would fall before 1-Jan-1601 or after
            31-Dec-3999.  ``too_early`` tells which side was crossed.
    """
    if isinstance(days, bool):
        raise ValidationError(f"Number of days must be an integer: {days!r}")
    try:
        n = operator.index(days)
    except TypeError:
        raise ValidationError(f"Number of days must be an integer: {days!r}") from None

    result = date.to_absolute() + n
    if result < MIN_ABSOLUTE_DATE:
        logger.debug("add(%s, %d) underflows to absolute date %d", date, n, result)
        raise RangeError(
            f"value {n} is too negative to subtract from date {date}", too_early=True
        )
    if result > MAX_ABSOLUTE_DATE:
        logger.debug("add(%s, %d) overflows to absolute date %d", date, n, result)
        raise RangeError(f"value {n} is too large to add to date {date}", too_early=False)
    return Date.from_absolute(result)


def difference(date1: Date, date2: Date) -> int:
    """Signed number of days from ``date2`` to ``date1``.

    Positive when ``date1`` is later, so ``add(date2, difference(date1, date2))``
    is ``date1``.
    """
    diff = date1.to_absolute() - date2.to_absolute()
    assert add(date2, diff) == date1, (date1, date2, diff)
    return diff
