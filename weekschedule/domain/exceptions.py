"""
Domain-specific exception hierarchy for weekly schedules.

Every error derives from ``ValueError`` so pydantic validators surface them
as ``ValidationError`` at configuration and JSON boundaries.
"""


class ScheduleError(ValueError):
    """Base class for all schedule-level errors."""


class FromRequiredError(ScheduleError):
    """Raised when a date range has no start date."""

    def __init__(self, message: str = "from is required"):
        super().__init__(message)


class PastUntilError(ScheduleError):
    """Raised when a date range ends before it starts."""

    def __init__(self, message: str = "until can not be before from"):
        super().__init__(message)


class InvalidDayNameError(ScheduleError):
    """Raised when text does not name a weekday."""

    def __init__(self, value: str = ""):
        self.value = value
        super().__init__(f"invalid day name: {value!r}")


class InvalidDateStringError(ScheduleError):
    """Raised when a date is not in yyyy-mm-dd format."""

    def __init__(self, value: str = ""):
        self.value = value
        super().__init__(
            f"can not parse date, must use yyyy-mm-dd format: {value!r}"
        )


class InvalidClockStringError(ScheduleError):
    """Raised when a clock value is not in HH:MM format."""

    def __init__(self, value: str = ""):
        self.value = value
        super().__init__(f"can not parse clock, must use HH:MM format: {value!r}")
