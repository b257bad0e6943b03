"""
Persisted-scalar representation of schedule values.

Readers accept the column types a database driver typically hands back
(integers, text, bytes, native dates) and writers produce plain text. Any
other source type raises TypeError.
"""

import logging
from datetime import date as _date
from typing import Any, Optional, Union

import pendulum

from ..domain.clock import Clock
from ..domain.dates import CalendarDate
from ..domain.exceptions import ScheduleError
from ..domain.timeslots import WeekdaySlot
from ..domain.weekday import Weekday


logger = logging.getLogger(__name__)

DbScalar = Union[int, str, bytes]


def _as_text(value: Union[str, bytes]) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def clock_to_db(clock: Clock) -> str:
    return str(clock)


def clock_from_db(value: DbScalar) -> Clock:
    """Read minutes since midnight or ``HH:MM`` text."""
    if _is_int(value):
        return Clock(value)
    if isinstance(value, (str, bytes)):
        return Clock.try_parse(_as_text(value))
    raise TypeError(f"clock requires an int, string or bytes, got {type(value).__name__}")


def date_to_db(date: CalendarDate) -> Optional[str]:
    """The zero date is stored as NULL."""
    if date.is_zero():
        return None
    return str(date)


def date_from_db(value: Union[DbScalar, _date, None]) -> Optional[CalendarDate]:
    """
    Read a date column.

    Integers are Unix timestamps in seconds (UTC), native dates and
    datetimes keep their calendar day, text must be ``YYYY-MM-DD``.

    Raises:
        InvalidDateStringError: If text is not a valid date
        TypeError: If the value has an unsupported type
    """
    if value is None:
        return None
    if _is_int(value):
        return CalendarDate.from_date(pendulum.from_timestamp(value))
    if isinstance(value, _date):
        return CalendarDate.from_date(value)
    if isinstance(value, (str, bytes)):
        return CalendarDate.parse(_as_text(value))
    raise TypeError(
        f"date requires a string or bytes in yyyy-mm-dd format, got {type(value).__name__} {value!r}"
    )


def weekday_to_db(weekday: Weekday) -> str:
    return str(weekday)


def weekday_from_db(value: DbScalar) -> Weekday:
    """
    Read a day-of-week number or weekday name.

    Raises:
        InvalidDayNameError: If text is not a weekday name
        TypeError: If the value has an unsupported type
    """
    if _is_int(value):
        return Weekday.from_int(value)
    if isinstance(value, (str, bytes)):
        return Weekday.parse(_as_text(value))
    raise TypeError(f"weekday requires an int, string or bytes, got {type(value).__name__}")


def weekday_slot_to_db(weekday_slot: WeekdaySlot, as_int: bool = False) -> Union[int, str]:
    """Write ``"Monday 07:00-08:00"`` text, or the packed integer key."""
    if as_int:
        return weekday_slot.to_int()
    return str(weekday_slot)


def weekday_slot_from_db(value: Optional[DbScalar]) -> Optional[WeekdaySlot]:
    """
    Read a packed integer key or slot text.

    Text is parsed leniently; an unreadable value becomes the zero slot
    (Sunday, all day) and is logged.
    """
    if value is None:
        return None
    if _is_int(value):
        return WeekdaySlot.from_int(value)
    if isinstance(value, (str, bytes)):
        text = _as_text(value)
        weekday_slot = WeekdaySlot.try_parse(text)
        try:
            WeekdaySlot.parse(text)
        except ScheduleError:
            logger.warning("Could not parse weekday slot %r, using %s", text, weekday_slot)
        return weekday_slot
    raise TypeError(
        f"weekday slot requires an int, string or bytes, got {type(value).__name__} {value!r}"
    )
