"""Proleptic-Gregorian date helpers covering years 0000-9999.

datetime.date stops at year 1, but identity numbers may carry year 0000.
Year 0 is a leap year (divisible by 400), so it is exactly 366 days long
and every later date sits at date.toordinal() - 1 + 366 days from the
epoch 0000-01-01.
"""

from __future__ import annotations

import calendar as _cal
from datetime import date

MIN_YEAR = 0
MAX_YEAR = 9999

_YEAR_ZERO_DAYS = 366
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Day offset of 9999-12-31 from 0000-01-01.
MAX_DAY_OFFSET = date.max.toordinal() - 1 + _YEAR_ZERO_DAYS


def is_leap_year(year: int) -> bool:
    return _cal.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Length of month (1-12) in year."""
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def month_name(month: int) -> str:
    """Upper-case English month name, e.g. APRIL."""
    return _cal.month_name[month].upper()


def date_violation(year: int, month: int, day: int) -> str | None:
    """Describe why (year, month, day) is not a calendar date, or None if it is.

    February 29 of a common year gets its own message.
    """
    if not MIN_YEAR <= year <= MAX_YEAR:
        return f"invalid year '{year}'"
    if not 1 <= month <= 12:
        return f"invalid month '{month}'"
    if day < 1:
        return f"invalid day '{day}'"
    if day > days_in_month(year, month):
        if month == 2 and day == 29:
            return f"invalid date 'February 29' as '{year}' is not a leap year"
        return f"invalid date '{month_name(month)} {day}'"
    return None


def days_since_epoch(year: int, month: int, day: int) -> int:
    """Days from 0000-01-01 to the given (valid) date."""
    if year == 0:
        return sum(days_in_month(0, m) for m in range(1, month)) + day - 1
    return date(year, month, day).toordinal() - 1 + _YEAR_ZERO_DAYS


def date_from_days(offset: int) -> tuple[int, int, int] | None:
    """Inverse of days_since_epoch. None if offset falls outside years 0-9999."""
    if offset < 0 or offset > MAX_DAY_OFFSET:
        return None
    if offset < _YEAR_ZERO_DAYS:
        month = 1
        remaining = offset
        while remaining >= days_in_month(0, month):
            remaining -= days_in_month(0, month)
            month += 1
        return (0, month, remaining + 1)
    d = date.fromordinal(offset - _YEAR_ZERO_DAYS + 1)
    return (d.year, d.month, d.day)
