"""Exception hierarchy for millisecond.

All library errors derive from MillisecondError so callers can catch
everything raised by this package with a single except clause. Input
errors additionally derive from ValueError.
"""

from __future__ import annotations


class MillisecondError(Exception):
    """Base exception for the millisecond package."""

    pass


class InvalidDurationError(MillisecondError, ValueError):
    """Duration value outside the accepted input domain.

    Raised when a duration is negative, a bool, or not an integer.

    Attributes:
        value: The rejected value.
        unit: Name of the unit the value was given in.

    """

    def __init__(self, message: str, value: object = None, unit: str | None = None) -> None:
        """Initialize InvalidDurationError with context.

        Args:
            message: Human-readable error message.
            value: The rejected value.
            unit: Name of the unit the value was given in.

        """
        super().__init__(message)
        self.value = value
        self.unit = unit


class InvalidUnitError(MillisecondError, ValueError):
    """Unknown time unit name.

    Attributes:
        value: The unit name that could not be resolved.

    """

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidStyleError(MillisecondError, ValueError):
    """Unknown rendering style name.

    Attributes:
        value: The style name that could not be resolved.

    """

    def __init__(self, message: str, value: str | None = None) -> None:
        super().__init__(message)
        self.value = value


class ConfigError(MillisecondError):
    """Display configuration could not be loaded or validated."""

    pass
