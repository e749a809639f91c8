"""Display configuration for millisecond.

This module provides the FormatConfig model controlling how durations are
read and rendered, and an optional YAML loader for it. There are no
environment variables and no persisted state: configuration is either
built in code or read from an explicit file.

Usage:
    from millisecond.core.config import FormatConfig, load_config

    config = load_config(Path("millisecond.yaml"))
    text = format_duration(33_023_448_000, config.unit, style=config.style)

File format:
    unit: ms            # any unit name or alias
    style: long         # short | long
    merge_millis: false
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from millisecond.core.exceptions import ConfigError, InvalidUnitError
from millisecond.core.types import Style, TimeUnit, parse_style, parse_time_unit

logger = logging.getLogger(__name__)

# Configuration files are tiny; anything larger is not a config file
MAX_CONFIG_SIZE = 64 * 1024

CONFIG_FILENAME = "millisecond.yaml"


class FormatConfig(BaseModel):
    """How durations are interpreted and rendered.

    Attributes:
        unit: Unit of raw input values.
        style: Short ("1y 17d") or long ("1 year 17 days") rendering.
        merge_millis: Render seconds and milliseconds as one "1.400s" part.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    unit: TimeUnit = Field(
        default=TimeUnit.MILLIS,
        description="Unit of raw input values",
    )
    style: Style = Field(
        default=Style.SHORT,
        description="Rendering style: short or long",
    )
    merge_millis: bool = Field(
        default=True,
        description="Merge seconds and milliseconds into one component",
    )

    @field_validator("unit", mode="before")
    @classmethod
    def _resolve_unit(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return parse_time_unit(value)
            except InvalidUnitError as e:
                raise ValueError(str(e)) from None
        return value

    @field_validator("style", mode="before")
    @classmethod
    def _resolve_style(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_style(value)
        return value


def load_config(path: Path) -> FormatConfig:
    """Load FormatConfig from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Validated configuration. An empty file yields the defaults.

    Raises:
        ConfigError: If the file is missing, too large, not valid YAML,
            not a mapping, or fails validation.

    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    size = path.stat().st_size
    if size > MAX_CONFIG_SIZE:
        raise ConfigError(f"Config file too large: {path} ({size} bytes, max {MAX_CONFIG_SIZE})")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        logger.debug("Config file %s is empty, using defaults", path)
        return FormatConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    try:
        config = FormatConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e

    logger.debug("Loaded config from %s: %s", path, config)
    return config
