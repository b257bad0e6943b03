"""
Adapters layer - JSON and persisted-scalar representations of domain values.
"""

from .db_codec import (
    clock_from_db,
    clock_to_db,
    date_from_db,
    date_to_db,
    weekday_from_db,
    weekday_slot_from_db,
    weekday_slot_to_db,
    weekday_to_db,
)
from .json_codec import (
    DateRangeModel,
    ScheduleModel,
    TimeSlotModel,
    WeekdaySlotModel,
    clock_from_json,
    clock_to_json,
    date_from_json,
    date_range_from_json,
    date_range_to_json,
    date_to_json,
    schedule_from_json,
    schedule_to_json,
    weekday_from_json,
    weekday_slot_from_json,
    weekday_slot_to_json,
    weekday_to_json,
)

__all__ = [
    "DateRangeModel",
    "ScheduleModel",
    "TimeSlotModel",
    "WeekdaySlotModel",
    "clock_from_db",
    "clock_from_json",
    "clock_to_db",
    "clock_to_json",
    "date_from_db",
    "date_from_json",
    "date_range_from_json",
    "date_range_to_json",
    "date_to_db",
    "date_to_json",
    "schedule_from_json",
    "schedule_to_json",
    "weekday_from_db",
    "weekday_from_json",
    "weekday_slot_from_db",
    "weekday_slot_from_json",
    "weekday_slot_to_db",
    "weekday_slot_to_json",
    "weekday_to_db",
    "weekday_to_json",
]
