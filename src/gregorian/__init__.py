"""
gregorian
~~~~~~~~~

Proleptic Gregorian calendar arithmetic over 1-Jan-1601 .. 31-Dec-3999.
Dates map one-to-one onto absolute dates (days since 31-Dec-1600); all
arithmetic, ordering and weekday queries are defined through that mapping.

Basic usage::

    from gregorian import Date, DayOfWeek, add, last_weekday_of_month, weekday

    d = Date(12, 19, 2023)
    d.to_absolute()                                   # → 154485
    add(d, -365)                                      # → 19-Dec-2022
    weekday(d)                                        # → DayOfWeek.TUESDAY
    last_weekday_of_month(12, 2023, DayOfWeek.FRIDAY) # → 29-Dec-2023

Public API
----------
Date, MIN_DATE, MAX_DATE                  Validated immutable dates.
add, difference, increment, decrement     Day arithmetic.
compare, before, after, earliest, latest  Ordering.
to_absolute, from_absolute (+ _array)     Absolute date conversion.
weekday, next_weekday_after, last_weekday_of_month
DateRange, YearMonth, ReportingWindow     Collaborators for reporting code.
DateError                                 Base exception for all errors.
"""

from __future__ import annotations

import logging

from gregorian._exceptions import BoundaryError, DateError, RangeError, ValidationError
from gregorian.absolute import (
    MAX_ABSOLUTE_DATE,
    MIN_ABSOLUTE_DATE,
    from_absolute,
    from_absolute_array,
    to_absolute,
    to_absolute_array,
)
from gregorian.date import (
    MAX_DATE,
    MIN_DATE,
    Date,
    Order,
    add,
    after,
    before,
    compare,
    decrement,
    difference,
    earliest,
    format_date,
    increment,
    latest,
    parse_date,
)
from gregorian.daterange import DateRange
from gregorian.validation import days_in_month, days_in_year, is_leap_year
from gregorian.week import DayOfWeek, last_weekday_of_month, next_weekday_after, weekday
from gregorian.yearmonth import ReportingWindow, YearMonth

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BoundaryError",
    "Date",
    "DateError",
    "DateRange",
    "DayOfWeek",
    "MAX_ABSOLUTE_DATE",
    "MAX_DATE",
    "MIN_ABSOLUTE_DATE",
    "MIN_DATE",
    "Order",
    "RangeError",
    "ReportingWindow",
    "ValidationError",
    "YearMonth",
    "add",
    "after",
    "before",
    "compare",
    "days_in_month",
    "days_in_year",
    "decrement",
    "difference",
    "earliest",
    "format_date",
    "from_absolute",
    "from_absolute_array",
    "increment",
    "is_leap_year",
    "last_weekday_of_month",
    "latest",
    "next_weekday_after",
    "parse_date",
    "to_absolute",
    "to_absolute_array",
    "weekday",
]
