"""Errors raised while analysing appliance profiles."""


class ApplianceError(ValueError):
    """Base exception for appliance profile errors."""
    pass


class InvalidTimestamp(ApplianceError):
    """An event timestamp falls outside the measured period."""

    def __init__(self, timestamp: int, period: int):
        self.timestamp = timestamp
        self.period = period
        super().__init__(
            f"Invalid timestamp: Expected between 0 and {period}, but got {timestamp}"
        )


class InvalidDay(ApplianceError):
    """The requested day is not an integer."""

    def __init__(self, message: str = "Day must be an integer"):
        super().__init__(message)


class DayOutOfRange(ApplianceError):
    """The requested day is outside the calendar."""

    def __init__(self, message: str = "Day out of range"):
        super().__init__(message)


class ProfileFormatError(ApplianceError):
    """A profile file could not be parsed."""
    pass


class ProfileConfigError(ApplianceError):
    """No usable profile file is configured."""
    pass
