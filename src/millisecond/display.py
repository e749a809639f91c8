"""One-call duration formatting.

Combines decomposition and rendering for callers that only want text.

Example:
    >>> from millisecond import format_duration
    >>> format_duration(33_023_448_000)
    '1y 17d 5h 10m 48s'
    >>> format_duration(90, "minutes", style="long")
    '1 hour 30 minutes'
    >>> format_duration(1_400, merge_millis=False)
    '1s 400ms'

"""

from __future__ import annotations

from millisecond.core.types import Style, TimeUnit, parse_style
from millisecond.formatter import long_string, short_string
from millisecond.splitter import Millisecond


def render(record: Millisecond, style: Style | str = Style.SHORT, merge_millis: bool = True) -> str:
    """Render a record in the given style.

    Args:
        record: Decomposed duration.
        style: "short" or "long".
        merge_millis: Merge seconds and milliseconds into one component.

    Returns:
        Rendered duration, "" for a zero duration.

    Raises:
        InvalidStyleError: If style is not a known style name.

    """
    if parse_style(style) is Style.LONG:
        return long_string(record, merge_millis)
    return short_string(record, merge_millis)


def format_duration(
    value: int,
    unit: TimeUnit | str = TimeUnit.MILLIS,
    *,
    style: Style | str = Style.SHORT,
    merge_millis: bool = True,
) -> str:
    """Format a duration given in any unit as human-readable text.

    Args:
        value: Non-negative integer duration.
        unit: Unit of value, milliseconds by default.
        style: "short" ("1h 30m") or "long" ("1 hour 30 minutes").
        merge_millis: Merge seconds and milliseconds into one component.

    Returns:
        Rendered duration, "" for a zero duration.

    Raises:
        InvalidDurationError: If value is negative or not an integer.
        InvalidUnitError: If unit is not a known unit name.
        InvalidStyleError: If style is not a known style name.

    """
    return render(Millisecond.from_unit(value, unit), style, merge_millis)
