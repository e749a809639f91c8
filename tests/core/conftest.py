"""Pytest fixtures for millisecond.core tests.

Fixture Organization:
- write_config: Factory fixture to write config files to tmp_path
- sample_config: Config with every option set to a non-default value
"""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory writing YAML content to a config file in tmp_path."""

    def _write(content: str, name: str = "millisecond.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config() -> str:
    """Config with every option set to a non-default value."""
    return """\
unit: s
style: long
merge_millis: false
"""
