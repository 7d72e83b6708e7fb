"""Unit tests for structured logging configuration."""

from __future__ import annotations

import io
import json
import logging
from typing import Iterator

import pytest

from core.logging_config import configure_cli_logging, get_logger


@pytest.fixture
def bare_root_logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[logging.Logger]:
    """Root logger without handlers, restored after the test."""
    root_logger = logging.getLogger()
    previous_level = root_logger.level
    monkeypatch.setattr(root_logger, "handlers", [])
    yield root_logger
    root_logger.setLevel(previous_level)


def test_configure_cli_logging_writes_info_events_as_json(
    bare_root_logger: logging.Logger,
) -> None:
    """Info events reach the stream as JSON lines."""
    stream = io.StringIO()

    configure_cli_logging("INFO", stream)
    get_logger("taskpulse.tests.logging").info("feed_fetched", size_chars=42)

    event = json.loads(stream.getvalue().splitlines()[-1])
    assert (event["event"], event["level"], event["size_chars"]) == ("feed_fetched", "info", 42)
    assert "timestamp" in event


def test_configure_cli_logging_respects_level(bare_root_logger: logging.Logger) -> None:
    """Events below the configured level are dropped."""
    stream = io.StringIO()

    configure_cli_logging("WARNING", stream)
    get_logger("taskpulse.tests.logging").info("rows_dropped", dropped_count=1)

    assert stream.getvalue() == ""


def test_configure_cli_logging_keeps_existing_handlers(bare_root_logger: logging.Logger) -> None:
    """Hosts that already configured logging keep their handlers."""
    existing_handler = logging.NullHandler()
    bare_root_logger.addHandler(existing_handler)

    configure_cli_logging("DEBUG", io.StringIO())

    assert bare_root_logger.handlers == [existing_handler]
    assert bare_root_logger.level == logging.DEBUG
