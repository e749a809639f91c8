"""Allow running the CLI as ``python -m millisecond``."""

from millisecond.cli import app

app(prog_name="millisecond")
