"""
gregorian.absolute
~~~~~~~~~~~~~~~~~~

Bidirectional mapping between calendar dates and absolute dates, the number
of days since 31-Dec-1600.  1-Jan-1601 is absolute date 1 and 31-Dec-3999 is
absolute date 876216.

Basic usage::

    from gregorian.absolute import from_absolute, to_absolute

    to_absolute(12, 19, 2023)      # → 154485
    from_absolute(154485)          # → (12, 19, 2023)

NumPy arrays are accepted by the bulk variants::

    import numpy as np
    from gregorian.absolute import from_absolute_array, to_absolute_array

    months, days, years = from_absolute_array(np.arange(1, 366))
    absolute = to_absolute_array(months, days, years)
"""

from gregorian.absolute.absolute import (
    DAYS_IN_1_YEAR_CYCLE,
    DAYS_IN_4_YEAR_CYCLE,
    DAYS_IN_100_YEAR_CYCLE,
    DAYS_IN_400_YEAR_CYCLE,
    MAX_ABSOLUTE_DATE,
    MIN_ABSOLUTE_DATE,
    check_absolute_date,
    days_in_past_years,
    from_absolute,
    from_absolute_array,
    to_absolute,
    to_absolute_array,
    year_from_absolute,
)

__all__ = [
    "DAYS_IN_1_YEAR_CYCLE",
    "DAYS_IN_4_YEAR_CYCLE",
    "DAYS_IN_100_YEAR_CYCLE",
    "DAYS_IN_400_YEAR_CYCLE",
    "MAX_ABSOLUTE_DATE",
    "MIN_ABSOLUTE_DATE",
    "check_absolute_date",
    "days_in_past_years",
    "from_absolute",
    "from_absolute_array",
    "to_absolute",
    "to_absolute_array",
    "year_from_absolute",
]
