from __future__ import annotations

from typing import Any

from .._exceptions import ValidationError
from ..date import Date, after, before, difference


class DateRange:
    """Inclusive range of dates with ``first <= last``."""

    __slots__ = ("_first", "_last")

    def __init__(self, first: Date, last: Date) -> None:
        if not isinstance(first, Date) or not isinstance(last, Date):
            raise ValidationError(
                f"range endpoints must be dates, got {first!r} and {last!r}"
            )
        if after(first, last):
            raise ValidationError(
                f"first date {first} must not be after last date {last}"
            )
        object.__setattr__(self, "_first", first)
        object.__setattr__(self, "_last", last)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def first(self) -> Date:
        return self._first

    @property
    def last(self) -> Date:
        return self._last

    def size(self) -> int:
        """Days from ``first`` to ``last``; 0 for a single-day range."""
        return difference(self._last, self._first)

    def contains(self, date: Date) -> bool:
        return not (before(date, self._first) or after(date, self._last))

    def overlaps(self, other: DateRange) -> bool:
        return overlaps(self, other)

    def __contains__(self, date: object) -> bool:
        return isinstance(date, Date) and self.contains(date)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateRange):
            return NotImplemented
        return self._first == other._first and self._last == other._last

    def __hash__(self) -> int:
        return hash((self._first, self._last))

    def __reduce__(self):
        return (type(self), (self._first, self._last))

    def __str__(self) -> str:
        return f"({self._first},{self._last})"

    def __repr__(self) -> str:
        return f"DateRange(first={self._first!r}, last={self._last!r})"


def overlaps(range1: DateRange, range2: DateRange) -> bool:
    """True if the two ranges share at least one day."""
    if before(range1.last, range2.first):
        return False
    if after(range1.first, range2.last):
        return False
    return True

