"""
Inclusive date ranges with an optional open upper bound.
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from .dates import CalendarDate, max_date, min_date
from .exceptions import FromRequiredError, PastUntilError


# Reported by day_count() for open-ended ranges. Positive so that
# ``day_count() > 0`` still means "has days".
INFINITE_DAYS = 2**31 - 1


@dataclass(frozen=True)
class DateRange:
    """
    A set of days from ``valid_from`` through ``valid_until``, both included.

    ``valid_until`` of None means the range never ends. From Jan 1 until
    Jan 1 is one day; from Jan 1 until Jan 2 is two days.

    Construction never fails; call ``validate()`` to check the invariants.
    """
    valid_from: CalendarDate = field(default_factory=CalendarDate)
    valid_until: Optional[CalendarDate] = None

    @classmethod
    def starting_today(cls) -> "DateRange":
        return cls(CalendarDate.today())

    @classmethod
    def zero(cls) -> "DateRange":
        """The empty range returned when a merge finds no common days."""
        return cls(CalendarDate(), CalendarDate())

    def with_from(self, date: CalendarDate) -> "DateRange":
        return replace(self, valid_from=date)

    def with_until(self, date: Optional[CalendarDate]) -> "DateRange":
        return replace(self, valid_until=date)

    def validate(self) -> None:
        """
        Check that the range is usable.

        Raises:
            FromRequiredError: If no start date is set
            PastUntilError: If the end date precedes the start date
        """
        if self.valid_from.is_zero():
            raise FromRequiredError()

        if self.valid_until is None or self.valid_until.is_zero():
            return

        if self.valid_until < self.valid_from:
            raise PastUntilError()

    def is_zero(self) -> bool:
        return self.valid_from.is_zero() and (
            self.valid_until is None or self.valid_until.is_zero()
        )

    def is_unbounded(self) -> bool:
        return self.valid_until is None

    def contains_date(self, date: CalendarDate) -> bool:
        if date < self.valid_from:
            return False
        return self.valid_until is None or date <= self.valid_until

    def overlaps(self, other: "DateRange") -> bool:
        """Check whether the two ranges share at least one day."""
        if self == other:
            return True

        a, b = self, other
        if a.valid_until is None and b.valid_until is None:
            return True

        if a.valid_until is None:
            return b.valid_until >= a.valid_from

        if b.valid_until is None:
            return a.valid_until >= b.valid_from

        return (
            b.contains_date(a.valid_from)
            or b.contains_date(a.valid_until)
            or a.contains_date(b.valid_from)
            or a.contains_date(b.valid_until)
        )

    def exceeds(self, parent: "DateRange") -> bool:
        """Check whether this range starts before or ends after ``parent``."""
        if self.valid_from < parent.valid_from:
            return True
        if parent.valid_until is None:
            return False
        return self.valid_until is None or self.valid_until > parent.valid_until

    def merge(self, other: "DateRange") -> "DateRange":
        """
        Intersect two ranges.

        Jan 1 - Jan 30 merged with Jan 15 - forever gives Jan 15 - Jan 30.
        Ranges without common days give ``DateRange.zero()``.
        """
        if not self.overlaps(other):
            return DateRange.zero()

        valid_from = max_date(self.valid_from, other.valid_from)
        valid_until = min_date(self.valid_until, other.valid_until)

        if valid_until is not None and valid_from > valid_until:
            return DateRange.zero()

        return DateRange(valid_from, valid_until)

    def day_count(self) -> int:
        """
        Number of days in the range.

        0 when no start is set or the end precedes the start,
        ``INFINITE_DAYS`` when the range never ends.
        """
        if self.valid_from.is_zero():
            return 0

        if self.valid_until is None:
            return INFINITE_DAYS

        days = self.valid_until.days_since(self.valid_from)
        if days >= 0:
            return days + 1
        return 0

    def has_days(self) -> bool:
        return self.day_count() > 0

    def __str__(self) -> str:
        until = "forever"
        if self.valid_until is not None and not self.valid_until.is_zero():
            until = str(self.valid_until)
        return f"from {self.valid_from} until {until}"
