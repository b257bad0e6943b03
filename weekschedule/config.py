"""
Configuration management using Pydantic models loaded from YAML.

Example config.yaml:

    horizon_days: 28
    log_level: INFO
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
          - Wednesday 09:00-10:00
"""

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.date_range import DateRange
from .domain.dates import CalendarDate
from .domain.schedule import Schedule
from .domain.timeslots import WeekdaySlot


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ScheduleConfig(BaseModel):
    """One named schedule: a date range plus weekday slots."""
    name: str
    valid_from: date
    valid_until: Optional[date] = None
    time_slots: List[str] = Field(default_factory=list)

    @field_validator("time_slots")
    @classmethod
    def validate_time_slots(cls, value: List[str]) -> List[str]:
        """Reject slot strings that do not parse, instead of zeroing them."""
        for text in value:
            WeekdaySlot.parse(text)
        return value

    @model_validator(mode="after")
    def validate_date_range(self) -> "ScheduleConfig":
        """Ensure the date range does not end before it starts."""
        self.date_range().validate()
        return self

    def date_range(self) -> DateRange:
        until = CalendarDate.from_date(self.valid_until) if self.valid_until else None
        return DateRange(CalendarDate.from_date(self.valid_from), until)

    def weekday_slots(self) -> List[WeekdaySlot]:
        return [WeekdaySlot.parse(text) for text in self.time_slots]

    def to_schedule(self) -> Schedule:
        return Schedule(self.date_range(), tuple(self.weekday_slots()))


class AppConfig(BaseModel):
    """Application configuration."""
    horizon_days: int = 28
    log_level: str = "WARNING"
    schedules: List[ScheduleConfig] = Field(default_factory=list)

    @field_validator("horizon_days")
    @classmethod
    def validate_horizon(cls, value: int) -> int:
        """Ensure the expansion horizon is positive."""
        if value <= 0:
            raise ValueError("horizon_days must be greater than zero")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value}")
        return level

    @field_validator("schedules")
    @classmethod
    def validate_schedules(cls, value: List[ScheduleConfig]) -> List[ScheduleConfig]:
        """Ensure schedule names are unique."""
        seen_names: set[str] = set()
        for schedule in value:
            name_key = schedule.name.lower()
            if name_key in seen_names:
                raise ValueError(f"Duplicate schedule name detected: {schedule.name}")
            seen_names.add(name_key)
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    def get_log_level(self) -> int:
        return logging.getLevelName(self.log_level)

    def find_schedule(self, name: str) -> ScheduleConfig | None:
        """Find a schedule by name, ignoring case."""
        for schedule in self.schedules:
            if schedule.name.lower() == name.lower():
                return schedule
        return None


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
