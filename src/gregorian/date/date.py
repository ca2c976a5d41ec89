from __future__ import annotations

import datetime as _dt
from typing import Any, Final

from ..absolute import from_absolute, to_absolute
from ..validation import (
    MAX_YEAR,
    MIN_YEAR,
    MONTH_NAMES,
    check_date,
    check_day_of_year,
    days_in_month,
    days_in_prior_months,
)
from .order import Order, after, before, compare


class Date:
    """
    Immutable Gregorian date between 1-Jan-1601 and 31-Dec-3999.

    Every instance is validated on construction; all operations return new
    values.  Instances compare, hash and sort by calendar order.
    """

    __slots__ = ("_month", "_day", "_year")

    def __init__(self, month: int, day: int, year: int) -> None:
        err = check_date(month, day, year)
        if err is not None:
            raise err
        object.__setattr__(self, "_month", int(month))
        object.__setattr__(self, "_day", int(day))
        object.__setattr__(self, "_year", int(year))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ── factories ────────────────────────────────────────────────────────

    @classmethod
    def from_absolute(cls, absolute: int) -> Date:
        month, day, year = from_absolute(absolute)
        return cls(month, day, year)

    @classmethod
    def from_day_of_year(cls, day_of_year: int, year: int) -> Date:
        err = check_day_of_year(day_of_year, year)
        if err is not None:
            raise err
        remaining = int(day_of_year)
        month = 1
        length = days_in_month(month, year)
        while remaining > length:
            remaining -= length
            month += 1
            length = days_in_month(month, year)
        date = cls(month, remaining, year)
        assert date.day_of_year() == day_of_year
        return date

    @classmethod
    def today(cls) -> Date:
        now = _dt.date.today()
        return cls(now.month, now.day, now.year)

    # ── properties ───────────────────────────────────────────────────────

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def year(self) -> int:
        return self._year

    # ── queries ──────────────────────────────────────────────────────────

    def to_absolute(self) -> int:
        return to_absolute(self._month, self._day, self._year)

    def day_of_year(self) -> int:
        return days_in_prior_months(self._month, self._year) + self._day

    def compare(self, other: Date) -> Order:
        return compare(self, other)

    def before(self, other: Date) -> bool:
        return before(self, other)

    def after(self, other: Date) -> bool:
        return after(self, other)

    # ── dunder ───────────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare(self, other) is Order.EQUAL

    def __lt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare(self, other) is Order.BEFORE

    def __le__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare(self, other) is not Order.AFTER

    def __gt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare(self, other) is Order.AFTER

    def __ge__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return compare(self, other) is not Order.BEFORE

    def __hash__(self) -> int:
        return hash((self._year, self._month, self._day))

    def __reduce__(self):
        return (type(self), (self._month, self._day, self._year))

    def __str__(self) -> str:
        return f"{self._day:02d}-{MONTH_NAMES[self._month - 1]}-{self._year}"

    def __repr__(self) -> str:
        return f"Date(month={self._month}, day={self._day}, year={self._year})"


MIN_DATE: Final[Date] = Date(1, 1, MIN_YEAR)
MAX_DATE: Final[Date] = Date(12, 31, MAX_YEAR)
