"""Calendar dates with day stepping and year-month-day intervals."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

_MONTH_DAYS = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def _days_in_month(year: int, month: int) -> int:
    if month == 2 and _is_leap(year):
        return 29
    return _MONTH_DAYS[month]


@dataclass(frozen=True)
class DateInterval:
    """A span of whole years, months and days."""

    years: int = 0
    months: int = 0
    days: int = 0

    def __str__(self) -> str:
        return f"{self.years} {self.months} {self.days}"


@dataclass(frozen=True, order=True)
class Date:
    """A day of the Gregorian calendar."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month {self.month} outside 1..12")
        if not 1 <= self.day <= _days_in_month(self.year, self.month):
            raise ValueError(f"day {self.day} does not exist in {self.year}-{self.month}")

    def __str__(self) -> str:
        return f"{self.year} {self.month} {self.day}"

    def is_leap_year(self) -> bool:
        """Whether the date's year has a 29th of February."""
        return _is_leap(self.year)

    def is_national_day(self) -> bool:
        """Whether the date falls on the first of October."""
        return self.month == 10 and self.day == 1

    def next_day(self) -> Date:
        """The following day."""
        if self.day < _days_in_month(self.year, self.month):
            return Date(self.year, self.month, self.day + 1)
        if self.month == 12:
            return Date(self.year + 1, 1, 1)
        return Date(self.year, self.month + 1, 1)

    def previous_day(self) -> Date:
        """The day before."""
        if self.day > 1:
            return Date(self.year, self.month, self.day - 1)
        if self.month == 1:
            return Date(self.year - 1, 12, 31)
        return Date(self.year, self.month - 1, _days_in_month(self.year, self.month - 1))

    def __sub__(self, other: object) -> DateInterval:
        """The interval between two dates, whichever comes first.

        Adding the result to the earlier date gives back the later one.
        """
        if not isinstance(other, Date):
            return NotImplemented
        later, earlier = max(self, other), min(self, other)
        years = later.year - earlier.year
        months = later.month - earlier.month
        days = later.day - earlier.day
        if days < 0:
            months -= 1
            if later.month > 1:
                span = _days_in_month(later.year, later.month - 1)
            else:
                span = _days_in_month(later.year - 1, 12)
            days = span - min(earlier.day, span) + later.day
        if months < 0:
            years -= 1
            months += 12
        return DateInterval(years, months, days)

    def __add__(self, interval: object) -> Date:
        """Move by the interval's years and months, then by its days.

        A day past the end of the target month is pulled back to its last day.
        """
        if not isinstance(interval, DateInterval):
            return NotImplemented
        total = self.year * 12 + (self.month - 1) + interval.years * 12 + interval.months
        year, month_index = divmod(total, 12)
        month = month_index + 1
        day = min(self.day, _days_in_month(year, month))
        moved = datetime.date(year, month, day) + datetime.timedelta(days=interval.days)
        return Date(moved.year, moved.month, moved.day)

    def __radd__(self, interval: object) -> Date:
        return self.__add__(interval)