"""Shared fixtures for query tests."""

from __future__ import annotations

from datetime import datetime

import pytest

from core.types import Task
from tests.task_factory import make_task


@pytest.fixture
def board_tasks() -> list[Task]:
    """Small mixed collection covering every filter clause."""
    return [
        make_task(
            "T-1",
            "Order entry setup",
            datetime(2024, 1, 10, 9),
            datetime(2024, 1, 12, 9),
            "ERP",
            "Alice",
            "Delayed",
            48.0,
        ),
        make_task(
            "T-2",
            "Go live, phase 2",
            datetime(2024, 1, 10),
            datetime(2024, 1, 9),
            "CRM",
            "Bob",
            "Completed",
        ),
        make_task(
            "T-3",
            "Vendor onboarding",
            datetime(2024, 1, 31, 23, 0),
            None,
            "ERP",
            "Alice",
            "Pending",
        ),
        make_task("T-4", "Archive cleanup", None, None, "CRM", "Carol", "Pending"),
    ]
