"""millisecond - split durations into calendar-like units and format them.

Converts 33023448000 milliseconds to "1y 17d 5h 10m 48s" or
"1 year 17 days 5 hours 10 minutes 48 seconds".
"""

from importlib.metadata import version

from millisecond.core.config import FormatConfig, load_config
from millisecond.core.exceptions import (
    ConfigError,
    InvalidDurationError,
    InvalidStyleError,
    InvalidUnitError,
    MillisecondError,
)
from millisecond.core.types import Style, TimeUnit, parse_time_unit
from millisecond.display import format_duration, render
from millisecond.formatter import (
    Component,
    Days,
    Hours,
    Micros,
    Millis,
    Minutes,
    Nanos,
    Seconds,
    SecsAndMillis,
    Years,
    components_of,
    long_string,
    long_text,
    short_string,
    short_text,
    with_pluralization,
)
from millisecond.splitter import Millisecond

try:
    __version__ = version("millisecond")
except Exception:
    __version__ = "0.0.0-dev"

__all__ = [
    # Decomposition
    "Millisecond",
    # Components
    "Component",
    "Years",
    "Days",
    "Hours",
    "Minutes",
    "Seconds",
    "SecsAndMillis",
    "Millis",
    "Micros",
    "Nanos",
    # Rendering
    "components_of",
    "short_text",
    "long_text",
    "short_string",
    "long_string",
    "with_pluralization",
    "render",
    "format_duration",
    # Types and config
    "Style",
    "TimeUnit",
    "parse_time_unit",
    "FormatConfig",
    "load_config",
    # Exceptions
    "MillisecondError",
    "InvalidDurationError",
    "InvalidStyleError",
    "InvalidUnitError",
    "ConfigError",
]
