"""Task construction and status/delay derivation.

This module converts mapped feed records into immutable Task values.
Status and delay are derived from planned/actual dates against a
single "now" captured once per ingestion pass.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Mapping, Sequence

from core.constants import (
    DEFAULT_DESCRIPTION,
    DEFAULT_OWNER,
    DEFAULT_SYSTEM_TYPE,
    STATUS_COMPLETED,
    STATUS_DELAYED,
    STATUS_PENDING,
    SYNTHETIC_ID_PREFIX,
)
from core.logging_config import get_logger
from core.types import ColumnLayout, Task, TaskStatus
from ingest.date_normalizer import parse_flexible_date
from ingest.record_mapper import has_identity, resolve_column

_LOGGER = get_logger(__name__)
_SECONDS_PER_HOUR = 3600.0


def derive_status(
    planned_at: datetime | None,
    actual_at: datetime | None,
    now: datetime,
) -> tuple[TaskStatus, float]:
    """Derive task status and delay hours.

    Status compares calendar days; delay compares full timestamps and
    is floored at zero.

    Args:
        planned_at: Planned completion instant.
        actual_at: Observed completion instant.
        now: Reference instant of the ingestion pass.

    Returns:
        Pair of status and delay in hours.
    """
    if planned_at is not None:
        planned_day = _calendar_day(planned_at)
        if actual_at is not None:
            status: TaskStatus = (
                STATUS_COMPLETED if _calendar_day(actual_at) <= planned_day else STATUS_DELAYED
            )
            delay_seconds = (actual_at - planned_at).total_seconds()
            return status, max(0.0, delay_seconds / _SECONDS_PER_HOUR)
        if planned_day < _calendar_day(now):
            return STATUS_DELAYED, 0.0
        return STATUS_PENDING, 0.0
    if actual_at is not None:
        return STATUS_COMPLETED, 0.0
    return STATUS_PENDING, 0.0


def build_task(record: Mapping[str, str], index: int, now: datetime, layout: ColumnLayout) -> Task:
    """Build one Task from a mapped record.

    Args:
        record: Mapped feed record.
        index: Position among kept records, used for synthetic ids.
        now: Reference instant of the ingestion pass.
        layout: Column resolution rules.

    Returns:
        Immutable task.
    """
    planned_at = parse_flexible_date(resolve_column(record, layout.planned))
    actual_at = parse_flexible_date(resolve_column(record, layout.actual))
    status, delay_hours = derive_status(planned_at, actual_at, now)
    return Task(
        id=resolve_column(record, layout.id) or f"{SYNTHETIC_ID_PREFIX}{index}",
        description=resolve_column(record, layout.description) or DEFAULT_DESCRIPTION,
        planned_at=planned_at,
        actual_at=actual_at,
        system_type=resolve_column(record, layout.system_type) or DEFAULT_SYSTEM_TYPE,
        owner=resolve_column(record, layout.owner) or DEFAULT_OWNER,
        status=status,
        delay_hours=delay_hours,
    )


def build_tasks(
    records: Sequence[Mapping[str, str]],
    now: datetime,
    layout: ColumnLayout | None = None,
) -> list[Task]:
    """Build tasks for every record that has an id and a description.

    Args:
        records: Mapped feed records in feed order.
        now: Reference instant of the ingestion pass.
        layout: Column resolution rules, standard layout when omitted.

    Returns:
        Tasks in feed order.
    """
    column_layout = layout or ColumnLayout.from_positions()
    kept_records = [record for record in records if has_identity(record, column_layout)]
    dropped_count = len(records) - len(kept_records)
    if dropped_count:
        _LOGGER.info("rows_dropped", dropped_count=dropped_count, reason="missing_id_or_task")
    return [
        build_task(record, index, now, column_layout)
        for index, record in enumerate(kept_records)
    ]


def _calendar_day(value: datetime) -> date:
    """Truncate a datetime to its calendar day."""
    return value.date()
