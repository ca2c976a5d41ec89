from __future__ import annotations

from .._exceptions import ValidationError
from ..validation import check_day, check_month, check_year
from .date import Date


def _field(text: str, name: str, value: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ValidationError(f"Invalid {name} {text!r} in date string {value!r}")
    return int(text)


def parse_date(value: str) -> Date:
    """Parse ``MM/DD/YYYY`` into a Date.

    Surrounding whitespace is ignored; anything else malformed raises
    ``ValidationError``.
    """
    value = value.strip()
    if not value:
        raise ValidationError("String date must not be an empty string")
    parts = value.split("/")
    if len(parts) != 3:
        raise ValidationError(f"Invalid date format for string: {value!r}")

    month = _field(parts[0], "month", value)
    err = check_month(month)
    if err is not None:
        raise err
    year = _field(parts[2], "year", value)
    err = check_year(year)
    if err is not None:
        raise err
    day = _field(parts[1], "day", value)
    err = check_day(month, day, year)
    if err is not None:
        raise err
    return Date(month, day, year)


def format_date(date: Date) -> str:
    """Format as ``dd-MMM-yyyy``, e.g. ``19-Dec-2023``."""
    return str(date)
