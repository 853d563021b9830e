"""Calendar dates and their validation."""

from __future__ import annotations

from dataclasses import dataclass

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """True for Gregorian leap years."""
    return year % 4 == 0 and not (year % 100 == 0 and year % 400 != 0)


@dataclass(frozen=True)
class Date:
    """A day, month (1-12) and year."""

    day: int
    month: int
    year: int

    def is_valid(self, min_year: int, max_year: int) -> bool:
        """True if the date exists and its year lies in ``[min_year, max_year]``."""
        return is_valid_date(self, min_year, max_year)


def is_valid_date(date: Date, min_year: int, max_year: int) -> bool:
    """True if ``date`` exists and its year lies in ``[min_year, max_year]``."""
    if not min_year <= date.year <= max_year:
        return False
    if not 1 <= date.month <= 12:
        return False
    days = _DAYS_IN_MONTH[date.month - 1]
    if date.month == 2 and is_leap_year(date.year):
        days += 1
    return 1 <= date.day <= days