"""Rendering of decomposed durations as human-readable text.

A Millisecond record is first reduced to an ordered list of non-zero
components (years down to nanoseconds), then each component is rendered
either in short form ("5h") or long form ("5 hours") and the pieces are
joined with single spaces.

Example:
    >>> from millisecond import Millisecond
    >>> ms = Millisecond.from_millis(33_023_448_000)
    >>> short_string(ms)
    '1y 17d 5h 10m 48s'
    >>> long_string(ms)
    '1 year 17 days 5 hours 10 minutes 48 seconds'

Seconds and milliseconds are merged into a single component by default:
    >>> short_string(Millisecond.from_millis(1_400))
    '1.400s'
    >>> short_string(Millisecond.from_millis(1_400), merge_millis=False)
    '1s 400ms'

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, TypeAlias

if TYPE_CHECKING:
    from millisecond.splitter import Millisecond


def with_pluralization(value: int, word: str) -> str:
    """Render "<value> <word>", pluralized unless value is exactly 1.

    Examples:
        >>> with_pluralization(1, "day")
        '1 day'
        >>> with_pluralization(17, "day")
        '17 days'

    """
    if value == 1:
        return f"{value} {word}"
    return f"{value} {word}s"


class Component(ABC):
    """One non-zero part of a decomposed duration."""

    @abstractmethod
    def to_short_string(self) -> str:
        """Compact rendering, e.g. "5h"."""
        ...

    @abstractmethod
    def to_long_string(self) -> str:
        """English rendering, e.g. "5 hours"."""
        ...

    def __str__(self) -> str:
        return self.to_short_string()


@dataclass(frozen=True)
class _UnitComponent(Component):
    """Component carrying a single magnitude in one unit."""

    value: int

    suffix: ClassVar[str]
    word: ClassVar[str]

    def to_short_string(self) -> str:
        return f"{self.value}{self.suffix}"

    def to_long_string(self) -> str:
        return with_pluralization(self.value, self.word)


@dataclass(frozen=True)
class Years(_UnitComponent):
    suffix: ClassVar[str] = "y"
    word: ClassVar[str] = "year"


@dataclass(frozen=True)
class Days(_UnitComponent):
    suffix: ClassVar[str] = "d"
    word: ClassVar[str] = "day"


@dataclass(frozen=True)
class Hours(_UnitComponent):
    suffix: ClassVar[str] = "h"
    word: ClassVar[str] = "hour"


@dataclass(frozen=True)
class Minutes(_UnitComponent):
    suffix: ClassVar[str] = "m"
    word: ClassVar[str] = "minute"


@dataclass(frozen=True)
class Seconds(_UnitComponent):
    suffix: ClassVar[str] = "s"
    word: ClassVar[str] = "second"


@dataclass(frozen=True)
class Millis(_UnitComponent):
    suffix: ClassVar[str] = "ms"
    word: ClassVar[str] = "millisecond"


@dataclass(frozen=True)
class Micros(_UnitComponent):
    suffix: ClassVar[str] = "µs"
    word: ClassVar[str] = "microsecond"


@dataclass(frozen=True)
class Nanos(_UnitComponent):
    suffix: ClassVar[str] = "ns"
    word: ClassVar[str] = "nanosecond"


@dataclass(frozen=True)
class SecsAndMillis(Component):
    """Whole seconds and the millisecond remainder shown as one value.

    The millisecond magnitude is printed as-is, without zero padding, so
    SecsAndMillis(1, 5) renders as "1.5s". The long form is always
    "seconds", whatever the magnitude.
    """

    seconds: int
    millis: int

    def to_short_string(self) -> str:
        return f"{self.seconds}.{self.millis}s"

    def to_long_string(self) -> str:
        return f"{self.seconds}.{self.millis} seconds"


Renderable: TypeAlias = "Millisecond | Component | Iterable[Component]"


def components_of(record: Millisecond, merge_millis: bool = True) -> list[Component]:
    """List the non-zero components of a record, largest unit first.

    Args:
        record: Decomposed duration.
        merge_millis: When both seconds and millis are non-zero, emit a
            single SecsAndMillis instead of Seconds followed by Millis.

    Returns:
        Components in years -> nanoseconds order. Zero fields are omitted,
        so an all-zero record yields an empty list.

    """
    parts: list[Component] = []
    if record.years > 0:
        parts.append(Years(record.years))
    if record.days > 0:
        parts.append(Days(record.days))
    if record.hours > 0:
        parts.append(Hours(record.hours))
    if record.minutes > 0:
        parts.append(Minutes(record.minutes))
    if record.seconds > 0:
        if merge_millis and record.millis > 0:
            parts.append(SecsAndMillis(record.seconds, record.millis))
        else:
            parts.append(Seconds(record.seconds))
    # Millis without seconds is never merged
    if record.millis > 0 and not (merge_millis and record.seconds > 0):
        parts.append(Millis(record.millis))
    if record.micros > 0:
        parts.append(Micros(record.micros))
    if record.nanos > 0:
        parts.append(Nanos(record.nanos))
    return parts


def short_text(component: Component) -> str:
    """Render one component in short form ("48s", "1.400s", "800µs")."""
    return component.to_short_string()


def long_text(component: Component) -> str:
    """Render one component in long form ("48 seconds", "1 minute")."""
    return component.to_long_string()


def _parts(value: Renderable, merge_millis: bool) -> Iterable[Component]:
    from millisecond.splitter import Millisecond

    if isinstance(value, Millisecond):
        return components_of(value, merge_millis)
    if isinstance(value, Component):
        return [value]
    return value


def short_string(value: Renderable, merge_millis: bool = True) -> str:
    """Join the short form of every component with single spaces.

    Args:
        value: A Millisecond record, one component or an iterable of components.
        merge_millis: Merge seconds and millis (records only).

    Returns:
        Rendered duration, or "" when there are no non-zero components.

    """
    return " ".join(short_text(part) for part in _parts(value, merge_millis))


def long_string(value: Renderable, merge_millis: bool = True) -> str:
    """Join the long form of every component with single spaces.

    Args:
        value: A Millisecond record, one component or an iterable of components.
        merge_millis: Merge seconds and millis (records only).

    Returns:
        Rendered duration, or "" when there are no non-zero components.

    """
    return " ".join(long_text(part) for part in _parts(value, merge_millis))
