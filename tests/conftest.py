"""Pytest configuration and shared fixtures for klaw-schema tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pytest
import structlog
from klaw_schema import add_log_hook, clear_log_hooks

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None]:
    """Undo configure_logging() and hooks registered by a test."""
    root = logging.getLogger()
    level = root.level
    clear_log_hooks()
    yield
    clear_log_hooks()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def log_events() -> list[dict[str, Any]]:
    """Collect every log entry emitted while the test runs."""
    received: list[dict[str, Any]] = []
    add_log_hook(received.append)
    return received
