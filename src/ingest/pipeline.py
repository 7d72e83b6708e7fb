"""Ingest orchestration for task feeds.

This module coordinates feed fetching, table parsing, record mapping,
and task building into one snapshot per ingestion pass.
"""

from __future__ import annotations

from datetime import datetime

from core.config import TaskPulseConfig
from core.errors import TaskPulseConfigError
from core.logging_config import get_logger
from core.types import ColumnLayout, TaskSnapshot
from ingest.feed_reader import read_feed_text
from ingest.record_mapper import build_records
from ingest.table_parser import parse_table
from ingest.task_builder import build_tasks

_LOGGER = get_logger(__name__)


def ingest_tasks(config: TaskPulseConfig, now: datetime | None = None) -> TaskSnapshot:
    """Fetch the feed and build a fresh task snapshot.

    Args:
        config: Runtime configuration with the feed location.
        now: Optional reference instant; current local time if omitted.

    Returns:
        Snapshot of every task in the feed.

    Raises:
        TaskPulseConfigError: If no feed location is configured.
        FeedUnreachableError: If the feed cannot be fetched.
    """
    if not config.feed_uri:
        raise TaskPulseConfigError(
            "No task feed configured. Set TASKPULSE_FEED_URI, or "
            "TASKPULSE_SHEET_ID with TASKPULSE_SHEET_NAME, or pass --feed."
        )
    reference_time = now or datetime.now()
    text = read_feed_text(config.feed_uri, config)
    layout = ColumnLayout.from_positions(config.column_positions)
    return build_snapshot_from_text(text, config.feed_uri, reference_time, layout)


def build_snapshot_from_text(
    text: str,
    source_uri: str,
    now: datetime,
    layout: ColumnLayout | None = None,
) -> TaskSnapshot:
    """Build a snapshot from already-fetched feed text.

    Args:
        text: Complete feed document.
        source_uri: Feed location, recorded on the snapshot.
        now: Reference instant for status derivation.
        layout: Column resolution rules.

    Returns:
        Task snapshot.
    """
    rows = parse_table(text)
    records = build_records(rows)
    tasks = build_tasks(records, now, layout)
    _LOGGER.info(
        "ingest_completed",
        source_uri=source_uri,
        row_count=len(rows),
        record_count=len(records),
        task_count=len(tasks),
    )
    return TaskSnapshot(tasks=tuple(tasks), synced_at=now, source_uri=source_uri)
