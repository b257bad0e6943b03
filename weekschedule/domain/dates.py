"""
Calendar dates without time of day or timezone.
"""

import re
from dataclasses import dataclass
from datetime import date as _date
from typing import Optional

import pendulum
from pendulum import Date

from .exceptions import InvalidDateStringError
from .weekday import Weekday


YMD_LENGTH = len("2006-01-02")

_YMD = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


@dataclass(frozen=True, order=True)
class CalendarDate:
    """
    An immutable proleptic Gregorian day.

    ``CalendarDate()`` is the zero date, meaning "not set". Every other
    value is normalized on construction, so out-of-range months and days
    overflow into the following valid date (2020-13-01 is 2021-01-01).
    Ordering is chronological and the zero date sorts first.
    """
    year: int = 0
    month: int = 0
    day: int = 0

    def __post_init__(self):
        if self.is_zero():
            return
        normalized = pendulum.date(self.year, 1, 1).add(
            months=self.month - 1,
            days=self.day - 1
        )
        object.__setattr__(self, "year", normalized.year)
        object.__setattr__(self, "month", normalized.month)
        object.__setattr__(self, "day", normalized.day)

    @classmethod
    def today(cls) -> "CalendarDate":
        return cls.from_date(pendulum.today())

    @classmethod
    def from_date(cls, value: _date) -> "CalendarDate":
        """Take the calendar day of a date or datetime, dropping any time."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def parse(cls, text: str) -> "CalendarDate":
        """
        Parse ``YYYY-MM-DD`` text; anything after the first 10 characters
        (such as a time of day) is ignored.

        Raises:
            InvalidDateStringError: If the text is not a valid date
        """
        match = _YMD.match(text[:YMD_LENGTH])
        if not match:
            raise InvalidDateStringError(text)
        try:
            parsed = pendulum.date(*(int(part) for part in match.groups()))
        except ValueError:
            raise InvalidDateStringError(text) from None
        return cls.from_date(parsed)

    @classmethod
    def try_parse(cls, text: str) -> Optional["CalendarDate"]:
        """Lenient variant of ``parse`` returning None on malformed input."""
        try:
            return cls.parse(text)
        except InvalidDateStringError:
            return None

    def is_zero(self) -> bool:
        return self.year == 0 and self.month == 0 and self.day == 0

    def to_pendulum(self) -> Date:
        if self.is_zero():
            raise ValueError("the zero date has no calendar representation")
        return pendulum.date(self.year, self.month, self.day)

    @property
    def weekday(self) -> Weekday:
        return Weekday(self.to_pendulum().isoweekday() % 7)

    def add(self, years: int = 0, months: int = 0, days: int = 0) -> "CalendarDate":
        """
        Add calendar units, overflowing rather than clamping.

        Jan 31 plus one month is Mar 2 (or Mar 3 outside leap years).
        """
        return CalendarDate(self.year + years, self.month + months, self.day + days)

    def next(self) -> "CalendarDate":
        return self.add(days=1)

    def days_since(self, other: "CalendarDate") -> int:
        """
        Signed number of days between two dates.

        today.days_since(yesterday) == 1, yesterday.days_since(today) == -1
        """
        return self._ordinal() - other._ordinal()

    def _ordinal(self) -> int:
        if self.is_zero():
            return 0
        return self.to_pendulum().toordinal()

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def min_date(a: Optional[CalendarDate], b: Optional[CalendarDate]) -> Optional[CalendarDate]:
    """Earlier of two optional dates; a missing date never wins over a set one."""
    if a is None:
        return b
    if b is None:
        return a
    return min(a, b)


def max_date(a: Optional[CalendarDate], b: Optional[CalendarDate]) -> Optional[CalendarDate]:
    """Later of two optional dates; a missing date never wins over a set one."""
    if a is None:
        return b
    if b is None:
        return a
    return max(a, b)
