"""Calendar dates stored as day, month and year."""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass

_DATE_PATTERN = re.compile(
    r"\s*([+-]?[0-9]+)(?![0-9])\s*(\S)\s*([+-]?[0-9]+)(?![0-9])\s*(\S)\s*([+-]?[0-9]+)"
)


@dataclass(frozen=True)
class Date:
    """A day/month/year date; fields may be out of range until normalised."""

    day: int = 1
    month: int = 1
    year: int = 1970

    def __str__(self) -> str:
        return f"{self.day:02d}/{self.month:02d}/{self.year}"

    @classmethod
    def today(cls) -> Date:
        """Return the current local date."""
        now = _dt.date.today()
        return cls(now.day, now.month, now.year)

    @classmethod
    def from_tokens(cls, day: int, month: int, year: int) -> Date:
        """Build a date from its three parts."""
        return cls(day, month, year)

    @classmethod
    def from_string(cls, text: str) -> Date:
        """Parse ``D<sep>M<sep>Y`` where each separator is any single character."""
        match = _DATE_PATTERN.match(text)
        if match is None:
            raise ValueError(f"Invalid date string: {text}")
        day, _, month, _, year = match.groups()
        return cls(int(day), int(month), int(year))

    def add_days(self, days: int) -> Date:
        """Return the date ``days`` days later, normalising out-of-range fields."""
        try:
            year, month0 = divmod(self.year * 12 + (self.month - 1), 12)
            first = _dt.date(year, month0 + 1, 1)
            result = first + _dt.timedelta(days=self.day - 1 + days)
        except (ValueError, OverflowError) as exc:
            raise ValueError("Invalid base date for addDays") from exc
        return Date(result.day, result.month, result.year)