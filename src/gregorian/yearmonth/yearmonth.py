from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import ClassVar, Iterator, List, Mapping, Optional

from .._exceptions import BoundaryError, ValidationError
from ..date import Date
from ..validation import MAX_YEAR, MONTH_NAMES, check_month, check_year

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class YearMonth:
    """A validated (year, month) pair; orders chronologically."""

    year: int
    month: int

    def __post_init__(self) -> None:
        err = check_year(self.year) or check_month(self.month)
        if err is not None:
            raise err

    @classmethod
    def from_date(cls, date: Date) -> YearMonth:
        return cls(date.year, date.month)

    @classmethod
    def parse(cls, value: str) -> YearMonth:
        """Parse ``MM/YYYY`` (the form produced by ``str``)."""
        parts = value.strip().split("/")
        if len(parts) != 2 or not all(p.isascii() and p.isdigit() for p in parts):
            raise ValidationError(f"Invalid year month format for string: {value!r}")
        return cls(int(parts[1]), int(parts[0]))

    @property
    def month_abbr(self) -> str:
        return MONTH_NAMES[self.month - 1]

    def next(self) -> YearMonth:
        if self.month < 12:
            return YearMonth(self.year, self.month + 1)
        if self.year == MAX_YEAR:
            raise BoundaryError(f"cannot advance past {self}")
        return YearMonth(self.year + 1, 1)

    def __str__(self) -> str:
        return f"{self.month}/{self.year}"


@dataclass(frozen=True)
class ReportingWindow:
    """
    Inclusive span of consecutive year-months used to group report rows.

    Defaults to Sep-2022 .. Dec-2025.  ``from_env`` lets a deployment move
    either bound without code changes.
    """

    ENV_START: ClassVar[str] = "GREGORIAN_WINDOW_START"
    ENV_END: ClassVar[str] = "GREGORIAN_WINDOW_END"

    start: YearMonth = YearMonth(2022, 9)
    end: YearMonth = YearMonth(2025, 12)

    def __post_init__(self) -> None:
        if not isinstance(self.start, YearMonth) or not isinstance(self.end, YearMonth):
            raise ValidationError(
                f"window bounds must be YearMonth values, got {self.start!r} and {self.end!r}"
            )
        if self.start > self.end:
            raise ValidationError(
                f"window start {self.start} must not be after window end {self.end}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ReportingWindow:
        env = os.environ if environ is None else environ
        defaults = cls()
        start = cls._read(env, cls.ENV_START, defaults.start)
        end = cls._read(env, cls.ENV_END, defaults.end)
        window = cls(start, end)
        logger.info("Reporting window %s .. %s", window.start, window.end)
        return window

    @staticmethod
    def _read(env: Mapping[str, str], key: str, default: YearMonth) -> YearMonth:
        raw = env.get(key)
        if raw is None or not raw.strip():
            return default
        try:
            return YearMonth.parse(raw)
        except ValidationError as e:
            logger.warning("Invalid %s=%r: %s", key, raw, e)
            raise

    def months(self) -> Iterator[YearMonth]:
        current = self.start
        yield current
        while current < self.end:
            current = current.next()
            yield current

    def __len__(self) -> int:
        return (self.end.year - self.start.year) * 12 + self.end.month - self.start.month + 1

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Date):
            item = YearMonth.from_date(item)
        if not isinstance(item, YearMonth):
            return False
        return self.start <= item <= self.end


def keys(window: Optional[ReportingWindow] = None) -> List[YearMonth]:
    """All year-months of ``window`` (the default window when omitted)."""
    if window is None:
        window = ReportingWindow()
    return list(window.months())
