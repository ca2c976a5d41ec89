"""
gregorian.yearmonth
~~~~~~~~~~~~~~~~~~~

Year-month keys for grouping report rows by calendar month, over a
configurable window.

Basic usage::

    from gregorian.yearmonth import ReportingWindow, YearMonth, keys

    keys()                                                     # Sep-2022 .. Dec-2025
    keys(ReportingWindow(YearMonth(2022, 9), YearMonth(2024, 5)))
    ReportingWindow.from_env()          # GREGORIAN_WINDOW_START / _END (MM/YYYY)
"""

from gregorian.yearmonth.yearmonth import ReportingWindow, YearMonth, keys

__all__ = [
    "ReportingWindow",
    "YearMonth",
    "keys",
]
