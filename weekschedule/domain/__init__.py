"""
Domain layer - Pure value types and algorithms without I/O.
"""

from .clock import Clock
from .date_range import INFINITE_DAYS, DateRange
from .dates import CalendarDate, max_date, min_date
from .exceptions import (
    FromRequiredError,
    InvalidClockStringError,
    InvalidDateStringError,
    InvalidDayNameError,
    PastUntilError,
    ScheduleError,
)
from .schedule import Calendar, CalendarMap, Schedule
from .timeslots import (
    TimeSlot,
    WeekdaySlot,
    WeekdaySlotSet,
    merge_weekday_slots,
    slot_keys,
    sort_weekday_slots,
    unique_weekday_slots,
)
from .weekday import Weekday

__all__ = [
    "Calendar",
    "CalendarDate",
    "CalendarMap",
    "Clock",
    "DateRange",
    "FromRequiredError",
    "INFINITE_DAYS",
    "InvalidClockStringError",
    "InvalidDateStringError",
    "InvalidDayNameError",
    "PastUntilError",
    "Schedule",
    "ScheduleError",
    "TimeSlot",
    "Weekday",
    "WeekdaySlot",
    "WeekdaySlotSet",
    "max_date",
    "merge_weekday_slots",
    "min_date",
    "slot_keys",
    "sort_weekday_slots",
    "unique_weekday_slots",
]
