"""Pytest configuration for repository test runs."""

from __future__ import annotations

from datetime import datetime
import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def reference_now() -> datetime:
    """Fixed ingestion instant used by feed fixtures."""
    return datetime(2024, 1, 15, 12, 0)


@pytest.fixture(autouse=True)
def _clear_feed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host TASKPULSE_* variables out of config-dependent tests."""
    for env_name in (
        "TASKPULSE_FEED_URI",
        "TASKPULSE_SHEET_ID",
        "TASKPULSE_SHEET_NAME",
        "TASKPULSE_REFRESH_SECONDS",
        "TASKPULSE_FETCH_TIMEOUT",
        "TASKPULSE_PAGE_SIZE",
        "TASKPULSE_COLUMN_POSITIONS",
        "TASKPULSE_S3_REGION",
        "TASKPULSE_S3_PROFILE",
    ):
        monkeypatch.delenv(env_name, raising=False)
