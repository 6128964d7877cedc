"""Errors raised by the scheduler for invalid inputs or configuration."""

from typing import Any


class SchedulerError(ValueError):
    """Base class for rejected scheduler inputs."""

    def __init__(self, message: str, value: Any = None):
        self.message = message
        self.value = value
        super().__init__(self.message)


class InvalidGrade(SchedulerError):
    """Raised when a grade is not one of AGAIN, HARD, GOOD, EASY."""

    def __init__(self, value: Any):
        super().__init__(f"grade must be one of 1, 2, 3, 4 (again/hard/good/easy), got {value!r}", value)


class InvalidStability(SchedulerError):
    """Raised when a stability is not a finite positive number."""

    def __init__(self, value: Any):
        super().__init__(f"stability must be a finite number > 0, got {value!r}", value)


class InvalidElapsedDays(SchedulerError):
    """Raised when the elapsed time since the last review is negative."""

    def __init__(self, value: Any):
        super().__init__(f"days since review must be a finite number >= 0, got {value!r}", value)


class InvalidRetentionRate(SchedulerError):
    """Raised when the requested retention rate is outside (0, 1]."""

    def __init__(self, value: Any):
        super().__init__(f"requested retention rate must be in (0, 1], got {value!r}", value)


class InvalidConfiguration(SchedulerError):
    """Raised when deck parameters or settings are malformed."""

    pass


class InvalidCard(SchedulerError):
    """Raised when card data is missing a field or holds a non-numeric value."""

    pass
