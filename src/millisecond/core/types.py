"""Core type definitions for millisecond.

This module provides the enumerations shared by the decomposer, the
renderer and the command line: the unit a duration is given in and the
rendering style.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from millisecond.core.exceptions import InvalidStyleError, InvalidUnitError

logger = logging.getLogger(__name__)


class TimeUnit(StrEnum):
    """Unit of an input duration, from nanoseconds up to 365-day years."""

    NANOS = "ns"
    MICROS = "us"
    MILLIS = "ms"
    SECONDS = "s"
    MINUTES = "m"
    HOURS = "h"
    DAYS = "d"
    YEARS = "y"


class Style(StrEnum):
    """Rendering style.

    - short: compact suffixes, e.g. "1y 17d 5h"
    - long: English unit words, e.g. "1 year 17 days 5 hours"
    """

    SHORT = "short"
    LONG = "long"


# Accepted spellings per unit, in addition to the canonical enum value
_UNIT_ALIASES: dict[TimeUnit, tuple[str, ...]] = {
    TimeUnit.NANOS: ("nanos", "nanosecond", "nanoseconds"),
    TimeUnit.MICROS: ("µs", "μs", "micros", "microsecond", "microseconds"),
    TimeUnit.MILLIS: ("millis", "millisecond", "milliseconds"),
    TimeUnit.SECONDS: ("sec", "secs", "second", "seconds"),
    TimeUnit.MINUTES: ("min", "mins", "minute", "minutes"),
    TimeUnit.HOURS: ("hr", "hrs", "hour", "hours"),
    TimeUnit.DAYS: ("day", "days"),
    TimeUnit.YEARS: ("yr", "yrs", "year", "years"),
}

_UNIT_LOOKUP: dict[str, TimeUnit] = {
    alias: unit for unit, aliases in _UNIT_ALIASES.items() for alias in (unit.value, *aliases)
}


def parse_time_unit(value: TimeUnit | str) -> TimeUnit:
    """Resolve a unit name or alias to a TimeUnit.

    Matching is case-insensitive and ignores surrounding whitespace.

    Args:
        value: TimeUnit member, canonical value ("ms") or alias ("millis").

    Returns:
        The matching TimeUnit.

    Raises:
        InvalidUnitError: If the name is not a known unit.

    Examples:
        >>> parse_time_unit("ms")
        <TimeUnit.MILLIS: 'ms'>
        >>> parse_time_unit("Hours")
        <TimeUnit.HOURS: 'h'>

    """
    if isinstance(value, TimeUnit):
        return value
    key = value.strip().lower()
    try:
        return _UNIT_LOOKUP[key]
    except KeyError:
        logger.debug("Unknown time unit: %r", value)
        valid = ", ".join(unit.value for unit in TimeUnit)
        raise InvalidUnitError(
            f"Unknown time unit {value!r} (expected one of: {valid})", value=value
        ) from None


def parse_style(value: Style | str) -> Style:
    """Resolve a style name ("short" or "long", case-insensitive) to a Style.

    Raises:
        InvalidStyleError: If the name is not a known style.

    """
    if isinstance(value, Style):
        return value
    try:
        return Style(value.strip().lower())
    except ValueError:
        logger.debug("Unknown style: %r", value)
        raise InvalidStyleError(
            f"Unknown style {value!r} (expected short or long)", value=value
        ) from None
