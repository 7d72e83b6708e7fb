"""Public SDK surface for TaskPulse.

This module provides a stable import path for library users.
It re-exports the primary client and typed models.
"""

from __future__ import annotations

from core.config import TaskPulseConfig, build_sheet_csv_url
from core.types import (
    BoardResult,
    FilterState,
    SortState,
    StructuredQuery,
    Task,
    TaskPage,
    TaskSnapshot,
    TaskStats,
)
from ingest.refresh_monitor import TaskFeedMonitor
from query.board_view import BoardView
from query.search_query import parse_search_query
from query.view_spec import load_view_spec
from store.task_sdk import TaskPulseClient

__all__ = [
    "BoardResult",
    "BoardView",
    "FilterState",
    "SortState",
    "StructuredQuery",
    "Task",
    "TaskFeedMonitor",
    "TaskPage",
    "TaskPulseClient",
    "TaskPulseConfig",
    "TaskSnapshot",
    "TaskStats",
    "build_sheet_csv_url",
    "load_view_spec",
    "parse_search_query",
]
