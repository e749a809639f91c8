"""Command line front end for millisecond.

Renders a single duration given on the command line.

Examples:
    millisecond 33023448000                 # 1y 17d 5h 10m 48s
    millisecond 33023448000 --long          # 1 year 17 days 5 hours 10 minutes 48 seconds
    millisecond 10123 --no-merge            # 10s 123ms
    millisecond 1800 -u ns                  # 1µs 800ns
    millisecond 90061 -u s --table          # field breakdown as a table
"""

import logging
from pathlib import Path

import typer
from rich.table import Table

from millisecond.cli_utils import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    _error,
    _setup_logging,
    console,
)
from millisecond.core.config import CONFIG_FILENAME, FormatConfig, load_config
from millisecond.core.exceptions import ConfigError, InvalidDurationError, InvalidUnitError
from millisecond.core.types import Style, parse_time_unit
from millisecond.display import render
from millisecond.splitter import Millisecond

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="millisecond",
    help="Format a duration as human-readable text",
    add_completion=False,
)

_FIELDS = ("years", "days", "hours", "minutes", "seconds", "millis", "micros", "nanos")


def _breakdown_table(record: Millisecond) -> Table:
    table = Table(title="Duration breakdown")
    table.add_column("Unit")
    table.add_column("Value", justify="right")
    for name in _FIELDS:
        table.add_row(name, str(getattr(record, name)))
    return table


def _parse_value(text: str, unit: str) -> int:
    """Parse the VALUE argument as an integer."""
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidDurationError(
            f"Duration must be an integer, got {text!r}", value=text, unit=unit
        ) from None


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    value: str = typer.Argument(..., help="Non-negative integer duration value"),
    unit: str | None = typer.Option(
        None,
        "--unit",
        "-u",
        help="Unit of VALUE: ns, us, ms, s, m, h, d, y (default: ms)",
    ),
    long: bool | None = typer.Option(
        None,
        "--long/--short",
        help="Render unit words instead of suffixes",
    ),
    merge: bool | None = typer.Option(
        None,
        "--merge/--no-merge",
        help="Merge seconds and milliseconds into one value (default: merge)",
    ),
    table: bool = typer.Option(
        False,
        "--table",
        "-t",
        help="Also print every unit field as a table",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help=f"Path to a YAML display config (default: ./{CONFIG_FILENAME} if present)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
) -> None:
    """Split VALUE into years, days, hours, ... and print it.

    Command line options override the config file, which overrides the
    defaults (milliseconds, short style, merged seconds). Without --config,
    ./millisecond.yaml is used when it exists.
    """
    _setup_logging(verbose=verbose, quiet=quiet)

    if config is None and Path(CONFIG_FILENAME).is_file():
        config = Path(CONFIG_FILENAME)
        logger.debug("Using config file from working directory: %s", config)

    try:
        settings = load_config(config) if config is not None else FormatConfig()
    except ConfigError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None

    try:
        effective_unit = parse_time_unit(unit) if unit is not None else settings.unit
        record = Millisecond.from_unit(_parse_value(value, effective_unit), effective_unit)
    except (InvalidUnitError, InvalidDurationError) as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None

    if long is None:
        style = settings.style
    else:
        style = Style.LONG if long else Style.SHORT
    merge_millis = settings.merge_millis if merge is None else merge
    logger.debug(
        "Rendering %s %s (style=%s, merge_millis=%s)", value, effective_unit, style, merge_millis
    )

    typer.echo(render(record, style, merge_millis))
    if table:
        console.print(_breakdown_table(record))


if __name__ == "__main__":
    app()
