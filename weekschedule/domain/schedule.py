"""
Schedules and their expansion into a per-date calendar.

This is pure domain logic: schedules and calendars are immutable values,
every operation returns a new object.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Tuple

from .dates import CalendarDate
from .date_range import DateRange
from .timeslots import TimeSlot, WeekdaySlot, merge_weekday_slots, unique_weekday_slots


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Schedule:
    """
    A recurring weekly pattern applied during a span of days.
    """
    date_range: DateRange = field(default_factory=DateRange)
    time_slots: Tuple[WeekdaySlot, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "time_slots", tuple(self.time_slots))

    def with_date_range(self, date_range: DateRange) -> "Schedule":
        return replace(self, date_range=date_range)

    def with_from(self, date: CalendarDate) -> "Schedule":
        return replace(self, date_range=self.date_range.with_from(date))

    def with_until(self, date: Optional[CalendarDate]) -> "Schedule":
        return replace(self, date_range=self.date_range.with_until(date))

    def with_time_slots(self, *slots: WeekdaySlot) -> "Schedule":
        """Return a copy with ``slots`` appended."""
        return replace(self, time_slots=self.time_slots + slots)

    @property
    def valid_from(self) -> CalendarDate:
        return self.date_range.valid_from

    @property
    def valid_until(self) -> Optional[CalendarDate]:
        return self.date_range.valid_until

    def has_time_slots(self) -> bool:
        return len(self.time_slots) > 0

    def is_empty(self) -> bool:
        """True when there are no days in range or no time slots."""
        return not self.date_range.has_days() or not self.has_time_slots()

    def merge(self, *schedules: "Schedule") -> "Schedule":
        """
        Merge this schedule with each of ``schedules`` in turn.

        Intended for applying a sub schedule to a parent schedule:

        - date ranges are intersected
          (Jan 1 - Jan 30 with Jan 15 - Feb 15 gives Jan 15 - Jan 30)
        - time slots are kept only when every schedule has them; an all-day
          slot gives way to the other schedule's specific slots on that day
          (Mon, Tue 08:00-09:00 with Mon 07:00-08:00, Tue 06:00-07:00
          gives Mon 07:00-08:00)

        Merging stops as soon as the date range or the slot list runs empty.
        An empty date range also clears the slots; an empty slot list leaves
        the date range computed so far in place.
        """
        if not schedules:
            return self

        date_range = self.date_range
        time_slots: List[WeekdaySlot] = list(self.time_slots)

        for schedule in schedules:
            date_range = date_range.merge(schedule.date_range)
            if date_range.is_zero():
                time_slots = []
                break

            time_slots = merge_weekday_slots(time_slots, schedule.time_slots)
            if not time_slots:
                break

        return Schedule(date_range, tuple(time_slots))

    def __str__(self) -> str:
        slots = ", ".join(str(slot) for slot in self.time_slots)
        return f"{self.date_range}: {slots or 'no time slots'}"


class CalendarMap(Dict[CalendarDate, List[WeekdaySlot]]):
    """Concrete weekday slots per date, as produced by ``Calendar.by_date``."""

    def has_date(self, date: CalendarDate) -> bool:
        return date in self

    def time_slots_on(self, date: CalendarDate) -> List[TimeSlot]:
        return [weekday_slot.slot for weekday_slot in self.get(date, [])]

    def all_time_slots(self) -> List[WeekdaySlot]:
        """Every weekday slot in the calendar, in date order."""
        return [
            weekday_slot
            for date in sorted(self)
            for weekday_slot in self[date]
        ]


@dataclass(frozen=True)
class Calendar:
    """
    A collection of schedules that can be laid out day by day.
    """
    schedules: Tuple[Schedule, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "schedules", tuple(self.schedules))

    def with_schedules(self, *schedules: Schedule) -> "Calendar":
        """Return a copy with ``schedules`` appended."""
        return replace(self, schedules=self.schedules + schedules)

    def by_date(self, limit: CalendarDate) -> CalendarMap:
        """
        Expand all schedules into the time slots of each date.

        Open-ended date ranges, and ranges reaching past ``limit``, are cut
        at ``limit``. Every date in a schedule's range gets an entry, empty
        when none of its slots fall on that weekday. Slots per date are
        deduplicated and sorted once all schedules are laid out.

        Args:
            limit: Last date to expand

        Returns:
            CalendarMap of date -> weekday slots on that date
        """
        calendar = CalendarMap()

        for schedule in self.schedules:
            date_range = schedule.date_range
            if date_range.valid_from.is_zero():
                logger.debug("Skipping schedule without a start date: %s", schedule)
                continue

            until = date_range.valid_until
            if until is None or until > limit:
                until = limit

            date = date_range.valid_from
            while date <= until:
                weekday = date.weekday
                day_slots = calendar.setdefault(date, [])
                day_slots.extend(
                    slot for slot in schedule.time_slots
                    if slot.weekday == weekday
                )
                date = date.next()

        for date, day_slots in calendar.items():
            calendar[date] = unique_weekday_slots(*day_slots)

        return calendar
