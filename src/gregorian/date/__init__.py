"""
gregorian.date
~~~~~~~~~~~~~~

The Date value type with its ordering, day arithmetic and text form.

Basic usage::

    from gregorian.date import Date, add, difference, parse_date

    d = Date(12, 19, 2023)
    d.to_absolute()                      # → 154485
    add(d, 13)                           # → Date(month=1, day=1, year=2024)
    difference(Date(1, 1, 2024), d)      # → 13
    str(parse_date("12/19/2023"))        # → '19-Dec-2023'

Public API
----------
Date                   Validated, immutable (month, day, year).
MIN_DATE, MAX_DATE     1-Jan-1601 and 31-Dec-3999.
Order                  BEFORE / EQUAL / AFTER.
compare, before, after, earliest, latest
increment, decrement, add, difference
parse_date, format_date
"""

from gregorian.date.arithmetic import add, decrement, difference, increment
from gregorian.date.date import MAX_DATE, MIN_DATE, Date
from gregorian.date.order import Order, after, before, compare, earliest, latest
from gregorian.date.text import format_date, parse_date

__all__ = [
    "Date",
    "MAX_DATE",
    "MIN_DATE",
    "Order",
    "add",
    "after",
    "before",
    "compare",
    "decrement",
    "difference",
    "earliest",
    "format_date",
    "increment",
    "latest",
    "parse_date",
]
