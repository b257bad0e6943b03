"""
Minute-of-day clock values.
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

import pendulum
from pendulum import DateTime, Duration

from .exceptions import InvalidClockStringError

if TYPE_CHECKING:
    from .dates import CalendarDate


MINUTES_PER_DAY = 24 * 60

_STRICT_CLOCK = re.compile(r"^(\d{1,2}):(\d{2})$")


def _lenient_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


@dataclass(frozen=True, order=True)
class Clock:
    """
    An immutable time of day, stored as minutes since midnight.

    Invariant: 0 <= minutes < 1440. Any input is wrapped into range, so
    negative values count backwards from midnight.
    """
    minutes: int = 0

    def __post_init__(self):
        object.__setattr__(self, "minutes", self.minutes % MINUTES_PER_DAY)

    @classmethod
    def of(cls, hour: int, minute: int) -> "Clock":
        """Build a clock from hour and minute, wrapping around midnight."""
        return cls(hour * 60 + minute)

    @classmethod
    def try_parse(cls, text: str) -> "Clock":
        """
        Parse ``HH:MM`` text, never failing.

        Malformed input yields the zero clock (00:00); unparseable hour or
        minute parts count as zero.
        """
        parts = text.split(":")
        if len(parts) < 2:
            return cls()
        return cls.of(_lenient_int(parts[0]), _lenient_int(parts[1]))

    @classmethod
    def parse(cls, text: str) -> "Clock":
        """
        Parse ``HH:MM`` text strictly.

        Raises:
            InvalidClockStringError: If the text is not a valid time of day
        """
        match = _STRICT_CLOCK.match(text.strip())
        if not match:
            raise InvalidClockStringError(text)
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour >= 24 or minute >= 60:
            raise InvalidClockStringError(text)
        return cls.of(hour, minute)

    @property
    def hour(self) -> int:
        return self.minutes // 60

    @property
    def minute(self) -> int:
        return self.minutes % 60

    def add(self, minutes: int) -> "Clock":
        """Return a new clock moved forward, wrapping past midnight."""
        return Clock(self.minutes + minutes)

    def subtract(self, minutes: int) -> "Clock":
        """Return a new clock moved backward, wrapping before midnight."""
        return Clock(self.minutes - minutes)

    def is_zero(self) -> bool:
        return self.minutes == 0

    def to_duration(self) -> Duration:
        """Time elapsed since midnight."""
        return pendulum.duration(minutes=self.minutes)

    def on(self, date: "CalendarDate", tz: str = "UTC") -> DateTime:
        """Combine with a calendar date into a concrete datetime."""
        return pendulum.datetime(
            date.year, date.month, date.day,
            self.hour, self.minute,
            tz=tz
        )

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"
