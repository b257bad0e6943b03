"""
JSON representation of schedule values using pydantic models.

Wire formats:
    Clock        "HH:MM", the zero clock as ""
    CalendarDate "YYYY-MM-DD", the zero date as ""
    Weekday      "Monday"; decoding also accepts integers, rolling over modulo 7
    WeekdaySlot  {"weekday": "Monday", "timeSlot": {"start": "07:00", "end": "08:00"}}
    DateRange    {"validFrom": "2020-01-01", "validUntil": "2020-01-30"}
                 with validUntil left out for open-ended ranges
    Schedule     {"dateRange": {...}, "timeSlots": [...]}
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    TypeAdapter,
)

from ..domain.clock import Clock
from ..domain.date_range import DateRange
from ..domain.dates import YMD_LENGTH, CalendarDate
from ..domain.exceptions import InvalidClockStringError, InvalidDateStringError
from ..domain.schedule import Schedule
from ..domain.timeslots import TimeSlot, WeekdaySlot
from ..domain.weekday import Weekday


logger = logging.getLogger(__name__)


def decode_clock(value: Any) -> Clock:
    """Lenient: malformed text decodes as 00:00."""
    if isinstance(value, Clock):
        return value
    if not isinstance(value, str):
        raise ValueError(f"clock must be an HH:MM string, got {type(value).__name__}")

    clock = Clock.try_parse(value)
    if value and clock.is_zero():
        try:
            Clock.parse(value)
        except InvalidClockStringError:
            logger.warning("Could not parse clock %r, using 00:00", value)
    return clock


def encode_clock(clock: Clock) -> str:
    if clock.is_zero():
        return ""
    return str(clock)


def decode_date(value: Any) -> CalendarDate:
    """
    Strict: an empty string is the zero date, longer text is cut to its
    first 10 characters (so datetimes decode to their day), anything else
    raises InvalidDateStringError.
    """
    if isinstance(value, CalendarDate):
        return value
    if not isinstance(value, str):
        raise InvalidDateStringError(repr(value))
    if value == "":
        return CalendarDate()
    if len(value) < YMD_LENGTH:
        raise InvalidDateStringError(value)
    return CalendarDate.parse(value[:YMD_LENGTH])


def encode_date(date: CalendarDate) -> str:
    if date.is_zero():
        return ""
    return str(date)


def decode_weekday(value: Any) -> Weekday:
    if isinstance(value, Weekday):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Weekday.from_int(value)
    if isinstance(value, str):
        return Weekday.parse(value)
    raise ValueError(f"weekday must be a name or an integer, got {type(value).__name__}")


def encode_weekday(weekday: Weekday) -> str:
    return str(weekday)


JsonClock = Annotated[
    Clock,
    PlainValidator(decode_clock),
    PlainSerializer(encode_clock, return_type=str),
]

JsonDate = Annotated[
    CalendarDate,
    PlainValidator(decode_date),
    PlainSerializer(encode_date, return_type=str),
]

JsonWeekday = Annotated[
    Weekday,
    PlainValidator(decode_weekday),
    PlainSerializer(encode_weekday, return_type=str),
]


class TimeSlotModel(BaseModel):
    """JSON shape of a TimeSlot."""
    start: JsonClock = Field(default_factory=Clock)
    end: JsonClock = Field(default_factory=Clock)

    @classmethod
    def from_domain(cls, slot: TimeSlot) -> "TimeSlotModel":
        return cls(start=slot.start, end=slot.end)

    def to_domain(self) -> TimeSlot:
        return TimeSlot(self.start, self.end)


class WeekdaySlotModel(BaseModel):
    """JSON shape of a WeekdaySlot."""
    model_config = ConfigDict(populate_by_name=True)

    weekday: JsonWeekday
    time_slot: TimeSlotModel = Field(default_factory=TimeSlotModel, alias="timeSlot")

    @classmethod
    def from_domain(cls, weekday_slot: WeekdaySlot) -> "WeekdaySlotModel":
        return cls(
            weekday=weekday_slot.weekday,
            time_slot=TimeSlotModel.from_domain(weekday_slot.slot)
        )

    def to_domain(self) -> WeekdaySlot:
        return WeekdaySlot(self.weekday, self.time_slot.to_domain())


class DateRangeModel(BaseModel):
    """JSON shape of a DateRange; dump with ``exclude_none=True``."""
    model_config = ConfigDict(populate_by_name=True)

    valid_from: JsonDate = Field(default_factory=CalendarDate, alias="validFrom")
    valid_until: Optional[JsonDate] = Field(default=None, alias="validUntil")

    @classmethod
    def from_domain(cls, date_range: DateRange) -> "DateRangeModel":
        return cls(valid_from=date_range.valid_from, valid_until=date_range.valid_until)

    def to_domain(self) -> DateRange:
        return DateRange(self.valid_from, self.valid_until)


class ScheduleModel(BaseModel):
    """JSON shape of a Schedule."""
    model_config = ConfigDict(populate_by_name=True)

    date_range: DateRangeModel = Field(default_factory=DateRangeModel, alias="dateRange")
    time_slots: List[WeekdaySlotModel] = Field(default_factory=list, alias="timeSlots")

    @classmethod
    def from_domain(cls, schedule: Schedule) -> "ScheduleModel":
        return cls(
            date_range=DateRangeModel.from_domain(schedule.date_range),
            time_slots=[WeekdaySlotModel.from_domain(slot) for slot in schedule.time_slots]
        )

    def to_domain(self) -> Schedule:
        return Schedule(
            self.date_range.to_domain(),
            tuple(slot.to_domain() for slot in self.time_slots)
        )


_clock_adapter = TypeAdapter(JsonClock)
_date_adapter = TypeAdapter(JsonDate)
_weekday_adapter = TypeAdapter(JsonWeekday)


def clock_to_json(clock: Clock) -> str:
    return _clock_adapter.dump_json(clock).decode()


def clock_from_json(text: str) -> Clock:
    return decode_clock(json.loads(text))


def date_to_json(date: CalendarDate) -> str:
    return _date_adapter.dump_json(date).decode()


def date_from_json(text: str) -> CalendarDate:
    """
    Raises:
        InvalidDateStringError: If the decoded value is not a usable date
    """
    return decode_date(json.loads(text))


def weekday_to_json(weekday: Weekday) -> str:
    return _weekday_adapter.dump_json(weekday).decode()


def weekday_from_json(text: str) -> Weekday:
    """
    Raises:
        InvalidDayNameError: If a decoded name is not a weekday
    """
    return decode_weekday(json.loads(text))


def weekday_slot_to_json(weekday_slot: WeekdaySlot) -> str:
    return WeekdaySlotModel.from_domain(weekday_slot).model_dump_json(by_alias=True)


def weekday_slot_from_json(text: str) -> WeekdaySlot:
    return WeekdaySlotModel.model_validate_json(text).to_domain()


def date_range_to_json(date_range: DateRange) -> str:
    return DateRangeModel.from_domain(date_range).model_dump_json(
        by_alias=True,
        exclude_none=True
    )


def date_range_from_json(text: str) -> DateRange:
    return DateRangeModel.model_validate_json(text).to_domain()


def schedule_to_json(schedule: Schedule) -> str:
    return ScheduleModel.from_domain(schedule).model_dump_json(
        by_alias=True,
        exclude_none=True
    )


def schedule_from_json(text: str) -> Schedule:
    return ScheduleModel.model_validate_json(text).to_domain()
