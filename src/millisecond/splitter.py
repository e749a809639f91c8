"""Decomposition of a scalar duration into calendar-like unit fields.

A duration given in a single unit is split into years, days, hours,
minutes, seconds, milliseconds, microseconds and nanoseconds using a fixed
calendar model: 1000 ns per µs, 1000 µs per ms, 1000 ms per s, 60 s per
minute, 60 minutes per hour, 24 hours per day and 365 days per year. Leap
years are not modeled.

Usage:
    from millisecond import Millisecond

    ms = Millisecond.from_millis(33_023_448_000)
    ms.years, ms.days, ms.hours  # (1, 17, 5)
    str(ms)                      # '1y 17d 5h 10m 48s'
    ms.to_long_string()          # '1 year 17 days 5 hours 10 minutes 48 seconds'

All fields are Python ints, so there is no overflow: the years field grows
as needed for arbitrarily large inputs.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field

from millisecond.core.exceptions import InvalidDurationError
from millisecond.core.types import TimeUnit, parse_time_unit
from millisecond.formatter import Component, components_of, long_string, short_string

logger = logging.getLogger(__name__)

# Ratios of the fixed calendar model
NANOS_PER_MICRO = 1_000
MICROS_PER_MILLI = 1_000
MILLIS_PER_SECOND = 1_000
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_PER_YEAR = 365

NANOS_PER_MILLI = NANOS_PER_MICRO * MICROS_PER_MILLI
NANOS_PER_SECOND = NANOS_PER_MILLI * MILLIS_PER_SECOND
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY
SECONDS_PER_YEAR = SECONDS_PER_DAY * DAYS_PER_YEAR


def _check_duration(value: object, unit: str) -> int:
    """Return value as a non-negative int or raise InvalidDurationError."""
    if isinstance(value, bool):
        logger.debug("Rejected bool duration: %r %s", value, unit)
        raise InvalidDurationError(f"Duration must be an integer, got {value!r}", value, unit)
    try:
        number = operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        logger.debug("Rejected non-integer duration: %r %s", value, unit)
        raise InvalidDurationError(
            f"Duration must be an integer, got {type(value).__name__}: {value!r}", value, unit
        ) from None
    if number < 0:
        logger.debug("Rejected negative duration: %d %s", number, unit)
        raise InvalidDurationError(f"Duration must be non-negative, got {number}", value, unit)
    return number


def _split_seconds(total_seconds: int) -> tuple[int, int, int, int, int]:
    """Split whole seconds into (years, days, hours, minutes, seconds)."""
    total_minutes, seconds = divmod(total_seconds, SECONDS_PER_MINUTE)
    total_hours, minutes = divmod(total_minutes, MINUTES_PER_HOUR)
    total_days, hours = divmod(total_hours, HOURS_PER_DAY)
    years, days = divmod(total_days, DAYS_PER_YEAR)
    return years, days, hours, minutes, seconds


class Millisecond(BaseModel):
    """A duration split into mixed-radix unit fields.

    Every field is a non-negative int. Values produced by the from_*
    constructors stay below their carry bound (days < 365, hours < 24,
    minutes < 60, seconds < 60, millis/micros/nanos < 1000); directly
    constructed records are not normalized and compare field by field.

    Attributes:
        years: Whole 365-day years.
        days: Day-of-year remainder.
        hours: Hour-of-day remainder.
        minutes: Minute-of-hour remainder.
        seconds: Second-of-minute remainder.
        millis: Millisecond-of-second remainder.
        micros: Microsecond-of-millisecond remainder.
        nanos: Nanosecond-of-microsecond remainder.

    """

    model_config = ConfigDict(frozen=True, strict=True)

    years: int = Field(default=0, ge=0)
    days: int = Field(default=0, ge=0)
    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0)
    seconds: int = Field(default=0, ge=0)
    millis: int = Field(default=0, ge=0)
    micros: int = Field(default=0, ge=0)
    nanos: int = Field(default=0, ge=0)

    # -----------------------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------------------

    @classmethod
    def _from_total_seconds(
        cls, total_seconds: int, millis: int = 0, micros: int = 0, nanos: int = 0
    ) -> Millisecond:
        years, days, hours, minutes, seconds = _split_seconds(total_seconds)
        return cls(
            years=years,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            millis=millis,
            micros=micros,
            nanos=nanos,
        )

    @classmethod
    def from_nanos(cls, nanos: int) -> Millisecond:
        """Decompose a duration given in nanoseconds.

        Examples:
            >>> ms = Millisecond.from_nanos(1_800)
            >>> ms.micros, ms.nanos
            (1, 800)

        """
        total_nanos = _check_duration(nanos, TimeUnit.NANOS)
        total_micros, nanos = divmod(total_nanos, NANOS_PER_MICRO)
        total_millis, micros = divmod(total_micros, MICROS_PER_MILLI)
        total_seconds, millis = divmod(total_millis, MILLIS_PER_SECOND)
        return cls._from_total_seconds(total_seconds, millis, micros, nanos)

    @classmethod
    def from_micros(cls, micros: int) -> Millisecond:
        """Decompose a duration given in microseconds."""
        total_micros = _check_duration(micros, TimeUnit.MICROS)
        total_millis, micros = divmod(total_micros, MICROS_PER_MILLI)
        total_seconds, millis = divmod(total_millis, MILLIS_PER_SECOND)
        return cls._from_total_seconds(total_seconds, millis, micros)

    @classmethod
    def from_millis(cls, millis: int) -> Millisecond:
        """Decompose a duration given in milliseconds.

        Examples:
            >>> str(Millisecond.from_millis(33_023_448_000))
            '1y 17d 5h 10m 48s'

        """
        total_millis = _check_duration(millis, TimeUnit.MILLIS)
        total_seconds, millis = divmod(total_millis, MILLIS_PER_SECOND)
        return cls._from_total_seconds(total_seconds, millis)

    @classmethod
    def from_secs(cls, seconds: int) -> Millisecond:
        """Decompose a duration given in seconds. Sub-second fields are 0."""
        return cls._from_total_seconds(_check_duration(seconds, TimeUnit.SECONDS))

    @classmethod
    def from_minutes(cls, minutes: int) -> Millisecond:
        """Decompose a duration given in minutes."""
        total_minutes = _check_duration(minutes, TimeUnit.MINUTES)
        return cls._from_total_seconds(total_minutes * SECONDS_PER_MINUTE)

    @classmethod
    def from_hours(cls, hours: int) -> Millisecond:
        """Decompose a duration given in hours."""
        total_hours = _check_duration(hours, TimeUnit.HOURS)
        return cls._from_total_seconds(total_hours * SECONDS_PER_HOUR)

    @classmethod
    def from_days(cls, days: int) -> Millisecond:
        """Decompose a duration given in days.

        Years are fixed at 365 days, so 366 days is 1 year and 1 day.

        Examples:
            >>> str(Millisecond.from_days(366))
            '1y 1d'

        """
        total_days = _check_duration(days, TimeUnit.DAYS)
        return cls._from_total_seconds(total_days * SECONDS_PER_DAY)

    @classmethod
    def from_years(cls, years: int) -> Millisecond:
        """Build a record holding only whole years."""
        return cls(years=_check_duration(years, TimeUnit.YEARS))

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Millisecond:
        """Decompose a non-negative timedelta at microsecond precision.

        Raises:
            InvalidDurationError: If delta is negative.

        """
        if delta < timedelta(0):
            logger.debug("Rejected negative timedelta: %r", delta)
            raise InvalidDurationError(f"Duration must be non-negative, got {delta}", delta, None)
        total_seconds = delta.days * SECONDS_PER_DAY + delta.seconds
        total_micros = total_seconds * MILLIS_PER_SECOND * MICROS_PER_MILLI + delta.microseconds
        return cls.from_micros(total_micros)

    @classmethod
    def from_unit(cls, value: int, unit: TimeUnit | str) -> Millisecond:
        """Decompose a duration given in any supported unit.

        Args:
            value: Non-negative integer duration.
            unit: TimeUnit member or unit name/alias ("ms", "hours", ...).

        Raises:
            InvalidUnitError: If unit is not a known unit name.
            InvalidDurationError: If value is negative or not an integer.

        """
        return _ENTRY_POINTS[parse_time_unit(unit)](value)

    # -----------------------------------------------------------------------------
    # Inspection and rendering
    # -----------------------------------------------------------------------------

    def total_nanos(self) -> int:
        """Reassemble the total duration in nanoseconds."""
        total_seconds = (
            self.years * SECONDS_PER_YEAR
            + self.days * SECONDS_PER_DAY
            + self.hours * SECONDS_PER_HOUR
            + self.minutes * SECONDS_PER_MINUTE
            + self.seconds
        )
        return (
            total_seconds * NANOS_PER_SECOND
            + self.millis * NANOS_PER_MILLI
            + self.micros * NANOS_PER_MICRO
            + self.nanos
        )

    def is_zero(self) -> bool:
        """Check whether every field is zero."""
        return self.total_nanos() == 0

    def components(self, merge_millis: bool = True) -> list[Component]:
        """Non-zero components, largest unit first. See components_of()."""
        return components_of(self, merge_millis)

    def to_short_string(self, merge_millis: bool = True) -> str:
        """Compact rendering, e.g. "1y 17d 5h 10m 48s"."""
        return short_string(self, merge_millis)

    def to_long_string(self, merge_millis: bool = True) -> str:
        """English rendering, e.g. "1 year 17 days 5 hours 10 minutes 48 seconds"."""
        return long_string(self, merge_millis)

    def __str__(self) -> str:
        return self.to_short_string()


_ENTRY_POINTS: dict[TimeUnit, Callable[[int], Millisecond]] = {
    TimeUnit.NANOS: Millisecond.from_nanos,
    TimeUnit.MICROS: Millisecond.from_micros,
    TimeUnit.MILLIS: Millisecond.from_millis,
    TimeUnit.SECONDS: Millisecond.from_secs,
    TimeUnit.MINUTES: Millisecond.from_minutes,
    TimeUnit.HOURS: Millisecond.from_hours,
    TimeUnit.DAYS: Millisecond.from_days,
    TimeUnit.YEARS: Millisecond.from_years,
}
