from __future__ import annotations


class DateError(Exception):
    """Base exception for all gregorian errors."""


class ValidationError(DateError, ValueError):
    """An input lies outside the legal calendar domain."""


class RangeError(DateError, OverflowError):
    """An arithmetic result falls outside 1-Jan-1601 .. 31-Dec-3999."""

    def __init__(self, message: str, too_early: bool) -> None:
        super().__init__(message)
        self.too_early = too_early


class BoundaryError(DateError, OverflowError):
    """Increment of the maximum date or decrement of the minimum date."""
