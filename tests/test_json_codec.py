"""
Tests for the JSON codec.
"""

import json
import logging

import pytest
from pydantic import ValidationError

from weekschedule.adapters.json_codec import (
    DateRangeModel,
    ScheduleModel,
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
from weekschedule.domain.clock import Clock
from weekschedule.domain.date_range import DateRange
from weekschedule.domain.dates import CalendarDate
from weekschedule.domain.exceptions import InvalidDateStringError, InvalidDayNameError
from weekschedule.domain.schedule import Schedule
from weekschedule.domain.timeslots import WeekdaySlot
from weekschedule.domain.weekday import Weekday


class TestScalarCodecs:
    """Tests for clocks, dates and weekdays."""

    def test_clock(self):
        """Test clocks encode as HH:MM and the zero clock as an empty string."""
        assert clock_to_json(Clock.of(7, 30)) == '"07:30"'
        assert clock_to_json(Clock()) == '""'
        assert clock_from_json('"07:30"') == Clock.of(7, 30)
        assert clock_from_json('""') == Clock()

    def test_clock_decoding_is_lenient(self, caplog):
        """Test malformed clocks decode as 00:00 and are logged."""
        with caplog.at_level(logging.WARNING, logger="weekschedule.adapters.json_codec"):
            assert clock_from_json('"invalid string"') == Clock()

        assert "invalid string" in caplog.text

    def test_clock_rejects_non_string(self):
        """Test a number is not a clock."""
        with pytest.raises(ValueError):
            clock_from_json("420")

    def test_date(self):
        """Test dates encode as YYYY-MM-DD and the zero date as an empty string."""
        assert date_to_json(CalendarDate(2020, 1, 5)) == '"2020-01-05"'
        assert date_to_json(CalendarDate()) == '""'
        assert date_from_json('"2020-01-05"') == CalendarDate(2020, 1, 5)
        assert date_from_json('""') == CalendarDate()

    def test_date_truncates_time(self):
        """Test datetimes decode to their calendar day."""
        assert date_from_json('"2020-01-05T23:59:59Z"') == CalendarDate(2020, 1, 5)

    @pytest.mark.parametrize("text", [
        pytest.param('"2020"', id="too short"),
        pytest.param('"2020/01/05"', id="wrong separator"),
        pytest.param('"2020-02-30"', id="impossible day"),
        pytest.param("20200105", id="number"),
        pytest.param("null", id="null"),
    ])
    def test_date_rejects_invalid(self, text):
        """Test date decoding is strict."""
        with pytest.raises(InvalidDateStringError):
            date_from_json(text)

    def test_weekday(self):
        """Test weekdays encode as names and decode from names or numbers."""
        assert weekday_to_json(Weekday.TUESDAY) == '"Tuesday"'
        assert weekday_from_json('"tuesday"') is Weekday.TUESDAY
        assert weekday_from_json("2") is Weekday.TUESDAY
        assert weekday_from_json("7") is Weekday.SUNDAY
        assert weekday_from_json("8") is Weekday.MONDAY

    def test_weekday_rejects_unknown_name(self):
        """Test unknown names fail."""
        with pytest.raises(InvalidDayNameError):
            weekday_from_json('"Funday"')


class TestWeekdaySlotJson:
    """Tests for the weekday slot object shape."""

    def test_encode(self):
        """Test the nested object layout."""
        slot = WeekdaySlot.try_parse("Tuesday 08:00-09:30")

        assert weekday_slot_to_json(slot) == (
            '{"weekday":"Tuesday","timeSlot":{"start":"08:00","end":"09:30"}}'
        )

    def test_decode(self):
        """Test decoding the nested object layout."""
        text = '{"weekday": "Tuesday", "timeSlot": {"start": "08:00", "end": "09:30"}}'

        assert weekday_slot_from_json(text) == WeekdaySlot.try_parse("Tuesday 08:00-09:30")

    def test_all_day(self):
        """Test an all-day slot round-trips through empty clocks."""
        slot = WeekdaySlot.all_day(Weekday.FRIDAY)
        text = weekday_slot_to_json(slot)

        assert json.loads(text) == {"weekday": "Friday", "timeSlot": {"start": "", "end": ""}}
        assert weekday_slot_from_json(text) == slot
        assert weekday_slot_from_json('{"weekday": 5}') == slot

    def test_decode_invalid(self):
        """Test model validation errors surface from pydantic."""
        with pytest.raises(ValidationError):
            weekday_slot_from_json('{"weekday": "Funday"}')

        with pytest.raises(ValidationError):
            weekday_slot_from_json('{"timeSlot": {"start": "08:00", "end": "09:00"}}')

    def test_populate_by_name(self):
        """Test models accept field names as well as aliases."""
        model = WeekdaySlotModel(weekday=Weekday.MONDAY, time_slot={"start": "07:00", "end": "08:00"})

        assert model.to_domain() == WeekdaySlot.try_parse("Monday 07:00-08:00")


class TestDateRangeJson:
    """Tests for the date range object shape."""

    def test_open_range_omits_until(self):
        """Test open-ended ranges leave validUntil out."""
        date_range = DateRange(CalendarDate(2020, 1, 1))

        assert date_range_to_json(date_range) == '{"validFrom":"2020-01-01"}'
        assert date_range_from_json('{"validFrom":"2020-01-01"}') == date_range

    def test_bounded_range(self):
        """Test both ends are written."""
        date_range = DateRange(CalendarDate(2020, 1, 1), CalendarDate(2020, 1, 30))
        text = date_range_to_json(date_range)

        assert text == '{"validFrom":"2020-01-01","validUntil":"2020-01-30"}'
        assert date_range_from_json(text) == date_range

    def test_null_until_is_open(self):
        """Test an explicit null means no end."""
        date_range = date_range_from_json('{"validFrom": "2020-01-01", "validUntil": null}')

        assert date_range.is_unbounded()

    def test_invalid_date(self):
        """Test invalid dates are reported."""
        with pytest.raises(ValidationError):
            date_range_from_json('{"validFrom": "01/01/2020"}')

    def test_model_round_trip(self):
        """Test the pydantic model converts both ways."""
        date_range = DateRange(CalendarDate(2020, 1, 1), CalendarDate(2020, 1, 30))

        assert DateRangeModel.from_domain(date_range).to_domain() == date_range


class TestScheduleJson:
    """Tests for the schedule object shape."""

    def test_encode(self):
        """Test the schedule object layout."""
        schedule = Schedule(
            DateRange(CalendarDate(2020, 1, 1)),
            (WeekdaySlot.try_parse("Monday 07:00-08:00"), WeekdaySlot.try_parse("Wednesday")),
        )

        assert json.loads(schedule_to_json(schedule)) == {
            "dateRange": {"validFrom": "2020-01-01"},
            "timeSlots": [
                {"weekday": "Monday", "timeSlot": {"start": "07:00", "end": "08:00"}},
                {"weekday": "Wednesday", "timeSlot": {"start": "", "end": ""}},
            ],
        }

    def test_decode(self):
        """Test decoding keeps slot order."""
        text = json.dumps({
            "dateRange": {"validFrom": "2020-01-01", "validUntil": "2020-01-30"},
            "timeSlots": [
                {"weekday": "Tuesday", "timeSlot": {"start": "08:00", "end": "09:00"}},
                {"weekday": 1, "timeSlot": {"start": "07:00", "end": "08:00"}},
            ],
        })

        schedule = schedule_from_json(text)

        assert schedule.date_range == DateRange(CalendarDate(2020, 1, 1), CalendarDate(2020, 1, 30))
        assert schedule.time_slots == (
            WeekdaySlot.try_parse("Tuesday 08:00-09:00"),
            WeekdaySlot.try_parse("Monday 07:00-08:00"),
        )

    def test_empty_object(self):
        """Test defaults for a bare object."""
        schedule = ScheduleModel.model_validate({}).to_domain()

        assert schedule == Schedule()
