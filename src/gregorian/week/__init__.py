"""
gregorian.week
~~~~~~~~~~~~~~

Day of the week and bounded weekday searches.  Sunday is 0.

Basic usage::

    from gregorian.date import Date
    from gregorian.week import DayOfWeek, last_weekday_of_month, next_weekday_after

    last_weekday_of_month(12, 2023, DayOfWeek.FRIDAY)        # → 29-Dec-2023
    next_weekday_after(Date(12, 19, 2023), DayOfWeek.TUESDAY) # → 26-Dec-2023
"""

from gregorian.week.week import (
    ANCHOR_OFFSET,
    DayOfWeek,
    check_day_of_week,
    last_weekday_of_month,
    next_weekday_after,
    weekday,
)

__all__ = [
    "ANCHOR_OFFSET",
    "DayOfWeek",
    "check_day_of_week",
    "last_weekday_of_month",
    "next_weekday_after",
    "weekday",
]
