"""
Tests for YAML configuration loading and validation.
"""

import logging
from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from weekschedule.config import AppConfig, ScheduleConfig
from weekschedule.domain.date_range import DateRange
from weekschedule.domain.dates import CalendarDate
from weekschedule.domain.timeslots import WeekdaySlot


CONFIG_YAML = """
horizon_days: 14
log_level: info
schedules:
  - name: office
    valid_from: 2024-01-01
    time_slots:
      - Monday 07:00-08:00
      - Wednesday
  - name: january
    valid_from: 2024-01-01
    valid_until: 2024-01-31
    time_slots:
      - Monday
"""


def _write(tmp_path: Path, text: str) -> Path:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(text, encoding="utf-8")
    return config_path


class TestAppConfig:
    """Tests for AppConfig."""

    def test_load_from_yaml(self, tmp_path):
        """Test a complete configuration file."""
        config = AppConfig.load_from_yaml(_write(tmp_path, CONFIG_YAML))

        assert config.horizon_days == 14
        assert config.log_level == "INFO"
        assert config.get_log_level() == logging.INFO
        assert [schedule.name for schedule in config.schedules] == ["office", "january"]

        january = config.schedules[1]
        assert january.valid_from == date(2024, 1, 1)
        assert january.valid_until == date(2024, 1, 31)

    def test_defaults(self, tmp_path):
        """Test an empty file gives the defaults."""
        config = AppConfig.load_from_yaml(_write(tmp_path, ""))

        assert config.horizon_days == 28
        assert config.log_level == "WARNING"
        assert config.schedules == []

    def test_missing_file(self, tmp_path):
        """Test a missing file points at the example config."""
        with pytest.raises(FileNotFoundError, match="config.example.yaml"):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(_write(tmp_path, "schedules: [unclosed"))

    def test_root_must_be_mapping(self, tmp_path):
        with pytest.raises(ValueError, match="mapping at the root"):
            AppConfig.load_from_yaml(_write(tmp_path, "- just\n- a list\n"))

    def test_horizon_must_be_positive(self):
        with pytest.raises(ValidationError, match="horizon_days"):
            AppConfig(horizon_days=0)

    def test_log_level_must_be_known(self):
        with pytest.raises(ValidationError, match="log_level"):
            AppConfig(log_level="LOUD")

    def test_duplicate_schedule_names(self):
        """Test names are unique regardless of case."""
        schedules = [
            {"name": "Office", "valid_from": "2024-01-01"},
            {"name": "office", "valid_from": "2024-02-01"},
        ]

        with pytest.raises(ValidationError, match="Duplicate schedule name"):
            AppConfig(schedules=schedules)

    def test_find_schedule(self, tmp_path):
        """Test lookup by name ignores case."""
        config = AppConfig.load_from_yaml(_write(tmp_path, CONFIG_YAML))

        assert config.find_schedule("JANUARY").name == "january"
        assert config.find_schedule("unknown") is None


class TestScheduleConfig:
    """Tests for ScheduleConfig."""

    def test_to_schedule(self):
        """Test conversion into a domain schedule."""
        schedule_config = ScheduleConfig(
            name="office",
            valid_from=date(2024, 1, 1),
            valid_until=date(2024, 1, 31),
            time_slots=["Monday 07:00-08:00", "wednesday"],
        )

        schedule = schedule_config.to_schedule()

        assert schedule.date_range == DateRange(CalendarDate(2024, 1, 1), CalendarDate(2024, 1, 31))
        assert schedule.time_slots == (
            WeekdaySlot.try_parse("Monday 07:00-08:00"),
            WeekdaySlot.try_parse("Wednesday"),
        )

    def test_open_ended(self):
        schedule_config = ScheduleConfig(name="office", valid_from=date(2024, 1, 1))

        assert schedule_config.date_range().is_unbounded()
        assert schedule_config.weekday_slots() == []

    def test_invalid_time_slot(self):
        """Test slot text is parsed strictly."""
        with pytest.raises(ValidationError, match="invalid day name"):
            ScheduleConfig(name="office", valid_from=date(2024, 1, 1), time_slots=["Funday 07:00-08:00"])

        with pytest.raises(ValidationError, match="HH:MM"):
            ScheduleConfig(name="office", valid_from=date(2024, 1, 1), time_slots=["Monday 7-8"])

    def test_until_before_from(self):
        with pytest.raises(ValidationError, match="until can not be before from"):
            ScheduleConfig(name="office", valid_from=date(2024, 2, 1), valid_until=date(2024, 1, 1))

    def test_valid_from_required(self):
        with pytest.raises(ValidationError, match="valid_from"):
            ScheduleConfig(name="office")
