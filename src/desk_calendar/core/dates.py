"""Calendar arithmetic for the proleptic Gregorian calendar.

Everything here works on plain integers (``month_index`` is 0-based, as in the
month selector) so that arbitrarily distant years can be rendered without
running into the ``datetime`` range limits.
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import List, Optional, Tuple

MONDAY = calendar.MONDAY
SUNDAY = calendar.SUNDAY

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_SAKAMOTO_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month_index: int) -> int:
    if month_index == 1 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month_index]


def weekday(year: int, month_index: int, day: int) -> int:
    """Return the weekday of a date with Monday as 0, like :meth:`date.weekday`."""

    shifted_year = year - 1 if month_index < 2 else year
    sunday_based = (
        shifted_year
        + shifted_year // 4
        - shifted_year // 100
        + shifted_year // 400
        + _SAKAMOTO_OFFSETS[month_index]
        + day
    ) % 7
    return (sunday_based + 6) % 7


def first_weekday(year: int, month_index: int, week_start: int = SUNDAY) -> int:
    """Column (0-6) of the first day of the month in a week starting on ``week_start``."""

    return (weekday(year, month_index, 1) - week_start) % 7


def is_today(year: int, month_index: int, day: int, today: Optional[date] = None) -> bool:
    current = today or date.today()
    return (year, month_index, day) == (current.year, current.month - 1, current.day)


def format_long(year: int, month_index: int, day: int) -> str:
    return f"{MONTH_NAMES[month_index]} {day}, {year}"


def shift_month(year: int, month_index: int, delta: int) -> Tuple[int, int]:
    """Move ``delta`` months forward or back, rolling the year past January/December."""

    return divmod(year * 12 + month_index + delta, 12)


def year_range(center: int, span: int = 100) -> range:
    return range(center - span, center + span + 1)


def weekday_headers(week_start: int = SUNDAY) -> List[str]:
    return [WEEKDAY_ABBREVIATIONS[(week_start + offset) % 7] for offset in range(7)]


__all__ = [
    "MONDAY",
    "MONTH_NAMES",
    "SUNDAY",
    "days_in_month",
    "first_weekday",
    "format_long",
    "is_leap_year",
    "is_today",
    "shift_month",
    "weekday",
    "weekday_headers",
    "year_range",
]
