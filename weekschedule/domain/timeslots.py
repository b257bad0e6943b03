"""
Weekday-scoped time slots and their canonical forms.

A ``WeekdaySlot`` packs into a single integer key (3 bits weekday, 11 bits
start minute, 11 bits end minute). The key defines ordering, equality and
deduplication, and is also the persisted integer form.
"""

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Dict, Iterable, List

import pendulum
from pendulum import Duration

from .clock import Clock
from .exceptions import InvalidClockStringError, InvalidDayNameError
from .weekday import Weekday


MINUTE_BITS = 11
MINUTE_MASK = (1 << MINUTE_BITS) - 1  # 0b11111111111
WEEKDAY_SHIFT = 2 * MINUTE_BITS


@dataclass(frozen=True)
class TimeSlot:
    """
    A window within a single day.

    The zero slot (00:00-00:00) means "all day". End before start means the
    slot runs past midnight.
    """
    start: Clock = field(default_factory=Clock)
    end: Clock = field(default_factory=Clock)

    @classmethod
    def try_parse(cls, text: str) -> "TimeSlot":
        """Parse ``HH:MM-HH:MM``; malformed input yields the zero slot."""
        parts = text.split("-")
        if len(parts) != 2:
            return cls()
        return cls(Clock.try_parse(parts[0]), Clock.try_parse(parts[1]))

    @classmethod
    def parse(cls, text: str) -> "TimeSlot":
        """
        Parse ``HH:MM-HH:MM`` strictly.

        Raises:
            InvalidClockStringError: If either side is not a valid clock
        """
        parts = text.split("-")
        if len(parts) != 2:
            raise InvalidClockStringError(text)
        return cls(Clock.parse(parts[0]), Clock.parse(parts[1]))

    @property
    def minutes(self) -> int:
        """Length in minutes; negative when the slot crosses midnight."""
        return self.end.minutes - self.start.minutes

    def duration(self) -> Duration:
        return pendulum.duration(minutes=self.minutes)

    def is_zero(self) -> bool:
        return self.start.is_zero() and self.end.is_zero()

    def crosses_midnight(self) -> bool:
        return self.end < self.start

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


@total_ordering
@dataclass(frozen=True, eq=False)
class WeekdaySlot:
    """
    A time slot recurring on one weekday.

    Equality, hashing and ordering all go through ``to_int()``.
    """
    weekday: Weekday = Weekday.SUNDAY
    slot: TimeSlot = field(default_factory=TimeSlot)

    @classmethod
    def all_day(cls, weekday: Weekday) -> "WeekdaySlot":
        return cls(weekday, TimeSlot())

    @classmethod
    def try_parse(cls, text: str) -> "WeekdaySlot":
        """
        Parse one of ``"Monday 07:00-08:00"``, ``"Monday"`` (all day) or
        ``"07:00-08:00"`` (Sunday).

        Never fails: an unknown day name falls back to Sunday and a malformed
        time range to the all-day slot, so ``"invalid string"`` parses as the
        zero value.
        """
        if not text:
            return cls()

        parts = text.split(" ")
        if len(parts) == 2:
            try:
                weekday = Weekday.parse(parts[0])
            except InvalidDayNameError:
                weekday = Weekday.SUNDAY
            return cls(weekday, TimeSlot.try_parse(parts[1]))

        try:
            return cls.all_day(Weekday.parse(text))
        except InvalidDayNameError:
            return cls(Weekday.SUNDAY, TimeSlot.try_parse(text))

    @classmethod
    def parse(cls, text: str) -> "WeekdaySlot":
        """
        Strict counterpart of ``try_parse`` accepting the same three shapes.

        Raises:
            InvalidDayNameError: If the day name is not a weekday
            InvalidClockStringError: If the time range is malformed
        """
        parts = text.strip().split()
        if len(parts) == 2:
            return cls(Weekday.parse(parts[0]), TimeSlot.parse(parts[1]))
        if len(parts) == 1 and "-" in parts[0]:
            return cls(Weekday.SUNDAY, TimeSlot.parse(parts[0]))
        if len(parts) == 1:
            return cls.all_day(Weekday.parse(parts[0]))
        raise InvalidDayNameError(text)

    @classmethod
    def from_int(cls, value: int) -> "WeekdaySlot":
        """Inverse of ``to_int``."""
        weekday = value >> WEEKDAY_SHIFT
        start = (value >> MINUTE_BITS) & MINUTE_MASK
        end = value & MINUTE_MASK
        return cls(Weekday(weekday), TimeSlot(Clock(start), Clock(end)))

    def to_int(self) -> int:
        return (
            (int(self.weekday) << WEEKDAY_SHIFT)
            + (self.start.minutes << MINUTE_BITS)
            + self.end.minutes
        )

    @property
    def start(self) -> Clock:
        return self.slot.start

    @property
    def end(self) -> Clock:
        return self.slot.end

    @property
    def minutes(self) -> int:
        return self.slot.minutes

    def duration(self) -> Duration:
        return self.slot.duration()

    def is_all_day(self) -> bool:
        return self.slot.is_zero()

    def crosses_midnight(self) -> bool:
        return self.slot.crosses_midnight()

    def overlaps_with(self, other: "WeekdaySlot") -> bool:
        """
        Check whether two recurring slots overlap, including slots that run
        past midnight into the next day or across the Saturday/Sunday week
        boundary.

        The rules are written against the lower-keyed slot, so the pair is
        sorted first; the result is symmetric.
        """
        s0, s1 = sort_weekday_slots(self, other)

        if s0.weekday == s1.weekday:
            return s1.start < s0.end or s0.crosses_midnight()

        if s0.crosses_midnight() and s1.weekday == s0.weekday.next():
            # Monday 23:30-00:30 against Tuesday 00:15-01:15
            return s1.start < s0.end

        if s0.weekday == Weekday.SUNDAY and s1.weekday == Weekday.SATURDAY:
            # Sunday 00:15-01:15 against Saturday 23:30-00:30
            return s0.start < s1.end and s1.crosses_midnight()

        return False

    def __eq__(self, other):
        if not isinstance(other, WeekdaySlot):
            return NotImplemented
        return self.to_int() == other.to_int()

    def __lt__(self, other):
        if not isinstance(other, WeekdaySlot):
            return NotImplemented
        return self.to_int() < other.to_int()

    def __hash__(self):
        return hash(self.to_int())

    def __str__(self) -> str:
        return f"{self.weekday} {self.slot}"


class WeekdaySlotSet(Dict[Weekday, List[TimeSlot]]):
    """
    Canonical, unordered form of a collection of weekday slots.

    Maps each weekday to its distinct time slots. A weekday present with an
    empty list stands for "all day"; once a weekday has specific slots the
    all-day marker is absorbed by them.
    """

    def add(self, day: Weekday, *slots: TimeSlot) -> "WeekdaySlotSet":
        """Return a copy with the slots added to ``day``."""
        result = self.copy()
        result._insert(day, *slots)
        return result

    def add_time_slot(self, day: Weekday, start: Clock, end: Clock) -> "WeekdaySlotSet":
        return self.add(day, TimeSlot(start, end))

    def has(self, day: Weekday, slot: TimeSlot) -> bool:
        return slot in self.get(day, [])

    def time_slots(self, day: Weekday) -> List[TimeSlot]:
        return list(self.get(day, []))

    def copy(self) -> "WeekdaySlotSet":
        return WeekdaySlotSet({day: list(slots) for day, slots in self.items()})

    def to_weekday_slots(self) -> List[WeekdaySlot]:
        """Expand into a sorted list of weekday slots."""
        result: List[WeekdaySlot] = []
        for day, slots in self.items():
            if not slots:
                result.append(WeekdaySlot.all_day(day))
                continue
            result.extend(WeekdaySlot(day, slot) for slot in slots)
        return sort_weekday_slots(*result)

    @classmethod
    def from_slots(cls, weekday_slots: Iterable[WeekdaySlot]) -> "WeekdaySlotSet":
        result = cls()
        for weekday_slot in weekday_slots:
            if weekday_slot.is_all_day():
                result._insert(weekday_slot.weekday)
                continue
            result._insert(weekday_slot.weekday, weekday_slot.slot)
        return result

    def _insert(self, day: Weekday, *slots: TimeSlot) -> None:
        day_slots = self.setdefault(day, [])
        for slot in slots:
            if slot not in day_slots:
                day_slots.append(slot)


def sort_weekday_slots(*weekday_slots: WeekdaySlot) -> List[WeekdaySlot]:
    """Return a new list ordered by the canonical integer key."""
    return sorted(weekday_slots, key=WeekdaySlot.to_int)


def unique_weekday_slots(*weekday_slots: WeekdaySlot) -> List[WeekdaySlot]:
    """Sort and remove duplicates by round-tripping through the set form."""
    if not weekday_slots:
        return []
    return WeekdaySlotSet.from_slots(weekday_slots).to_weekday_slots()


def slot_keys(*weekday_slots: WeekdaySlot) -> List[int]:
    return [weekday_slot.to_int() for weekday_slot in weekday_slots]


def merge_weekday_slots(
    a: Iterable[WeekdaySlot],
    b: Iterable[WeekdaySlot]
) -> List[WeekdaySlot]:
    """
    Intersect two slot collections, treating all-day slots as wildcards.

    - A slot present in both inputs is kept once.
    - An all-day slot yields to the specific slots the other input has on
      the same weekday.
    - Anything found in only one input is dropped.

    Example: {Mon, Tue 08:00-09:00} merged with
    {Mon 07:00-08:00, Tue 08:00-09:00} gives
    {Mon 07:00-08:00, Tue 08:00-09:00}.
    """
    result: List[WeekdaySlot] = []
    unique_a = unique_weekday_slots(*a)
    unique_b = unique_weekday_slots(*b)

    for a_slot in unique_a:
        a_key = a_slot.to_int()
        for b_slot in unique_b:
            same_day = a_slot.weekday == b_slot.weekday

            if same_day and a_slot.is_all_day() and not b_slot.is_all_day():
                result.append(b_slot)
                continue

            if same_day and b_slot.is_all_day() and not a_slot.is_all_day():
                result.append(a_slot)
                continue

            if a_key == b_slot.to_int():
                result.append(b_slot)

    return result
