"""
gregorian.daterange
~~~~~~~~~~~~~~~~~~~

Inclusive date ranges built on the core comparison and difference
operations.

Basic usage::

    from gregorian.date import Date
    from gregorian.daterange import DateRange

    january = DateRange(Date(1, 1, 2023), Date(2, 1, 2023))
    january.size()                 # → 31
    Date(1, 15, 2023) in january   # → True
"""

from gregorian.daterange.daterange import DateRange, overlaps

__all__ = [
    "DateRange",
    "overlaps",
]
