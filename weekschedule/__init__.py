"""
Recurring weekly availability: date ranges, weekday time slots, schedule
merging and per-date calendar expansion.
"""

from .domain import (
    Calendar,
    CalendarDate,
    CalendarMap,
    Clock,
    DateRange,
    Schedule,
    TimeSlot,
    Weekday,
    WeekdaySlot,
    WeekdaySlotSet,
)

__version__ = "0.1.0"

__all__ = [
    "Calendar",
    "CalendarDate",
    "CalendarMap",
    "Clock",
    "DateRange",
    "Schedule",
    "TimeSlot",
    "Weekday",
    "WeekdaySlot",
    "WeekdaySlotSet",
    "__version__",
]
