"""
Weekday enumeration with Sunday as day zero.
"""

from enum import IntEnum

import pendulum

from .exceptions import InvalidDayNameError


class Weekday(IntEnum):
    """
    Day of the week, numbered Sunday=0 through Saturday=6.

    The numbering is part of the persisted slot encoding, so it must not
    follow pendulum's Monday-first convention.
    """
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def parse(cls, name: str) -> "Weekday":
        """
        Parse an English day name, ignoring case.

        Raises:
            InvalidDayNameError: If the name is not a weekday
        """
        try:
            return cls[name.upper()]
        except KeyError:
            raise InvalidDayNameError(name) from None

    @classmethod
    def from_int(cls, value: int) -> "Weekday":
        """Convert an integer, rolling values past Saturday into the next week."""
        return cls(value % 7)

    @classmethod
    def today(cls) -> "Weekday":
        return cls(pendulum.today().isoweekday() % 7)

    def next(self) -> "Weekday":
        if self is Weekday.SATURDAY:
            return Weekday.SUNDAY
        return Weekday(self + 1)

    def __str__(self) -> str:
        return self.name.title()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)
