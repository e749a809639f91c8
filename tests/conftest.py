"""Pytest configuration and fixtures for millisecond tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Restore root logger level and handlers after each test.

    CLI tests call logging.basicConfig(force=True), which would otherwise
    leak handlers bound to CliRunner's captured streams into later tests.
    """
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
