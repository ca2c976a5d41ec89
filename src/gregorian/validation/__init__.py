"""
gregorian.validation
~~~~~~~~~~~~~~~~~~~~

Range predicates for months, days, years and days of year, plus the
definitional leap-year and month-length rules every other component uses.

The ``check_*`` functions never raise: they return ``None`` when the input
is valid and a ``ValidationError`` instance otherwise::

    from gregorian.validation import check_date

    err = check_date(2, 30, 2024)
    if err is not None:
        raise err          # Day cannot be greater than ... (29): 30
"""

from gregorian.validation.validation import (
    DAYS_IN_MONTH,
    MAX_YEAR,
    MIN_YEAR,
    MONTH_NAMES,
    check_date,
    check_day,
    check_day_of_year,
    check_month,
    check_year,
    days_in_month,
    days_in_prior_months,
    days_in_year,
    is_leap_year,
    is_valid_date,
)

__all__ = [
    "DAYS_IN_MONTH",
    "MAX_YEAR",
    "MIN_YEAR",
    "MONTH_NAMES",
    "check_date",
    "check_day",
    "check_day_of_year",
    "check_month",
    "check_year",
    "days_in_month",
    "days_in_prior_months",
    "days_in_year",
    "is_leap_year",
    "is_valid_date",
]
