"""Core module for millisecond types, configuration and errors.

This module provides:
- TimeUnit and Style enumerations with name parsing
- FormatConfig and YAML loading via load_config()
- Custom exception hierarchy with MillisecondError as base
"""

from millisecond.core.config import (
    CONFIG_FILENAME,
    MAX_CONFIG_SIZE,
    FormatConfig,
    load_config,
)
from millisecond.core.exceptions import (
    ConfigError,
    InvalidDurationError,
    InvalidStyleError,
    InvalidUnitError,
    MillisecondError,
)
from millisecond.core.types import (
    Style,
    TimeUnit,
    parse_style,
    parse_time_unit,
)

__all__ = [
    # Config
    "CONFIG_FILENAME",
    "MAX_CONFIG_SIZE",
    "FormatConfig",
    "load_config",
    # Exceptions
    "ConfigError",
    "InvalidDurationError",
    "InvalidStyleError",
    "InvalidUnitError",
    "MillisecondError",
    # Types
    "Style",
    "TimeUnit",
    "parse_style",
    "parse_time_unit",
]
