from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .date import Date


class Order(IntEnum):
    BEFORE = -1
    EQUAL = 0
    AFTER = 1


def compare(date1: Date, date2: Date) -> Order:
    """Three-way comparison, lexicographic on (year, month, day)."""
    key1 = (date1.year, date1.month, date1.day)
    key2 = (date2.year, date2.month, date2.day)
    if key1 < key2:
        return Order.BEFORE
    if key1 == key2:
        return Order.EQUAL
    return Order.AFTER


def before(date1: Date, date2: Date) -> bool:
    return compare(date1, date2) is Order.BEFORE


def after(date1: Date, date2: Date) -> bool:
    return compare(date1, date2) is Order.AFTER


def earliest(date1: Date, date2: Date) -> Date:
    """Return the earlier of two dates (``date2`` when they are equal)."""
    return date1 if before(date1, date2) else date2


def latest(date1: Date, date2: Date) -> Date:
    """Return the later of two dates (``date2`` when they are equal)."""
    return date1 if after(date1, date2) else date2
