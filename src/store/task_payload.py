"""Shared JSON serialization for Task payloads.

This module centralizes Task JSON serialization logic.
It is reused by the CLI JSON output and the watch summaries.
"""

from __future__ import annotations

from datetime import datetime

from core.types import Task, TaskStats


def task_to_payload(task: Task) -> dict[str, object]:
    """Serialize a Task into a JSON-safe payload.

    Args:
        task: Task instance.

    Returns:
        Dictionary payload for JSON encoding.
    """
    return {
        "id": task.id,
        "description": task.description,
        "planned_at": _isoformat(task.planned_at),
        "actual_at": _isoformat(task.actual_at),
        "system_type": task.system_type,
        "owner": task.owner,
        "status": task.status,
        "delay_hours": round(task.delay_hours, 2),
    }


def stats_to_payload(stats: TaskStats) -> dict[str, object]:
    """Serialize aggregate counts into a JSON-safe payload."""
    return {
        "total": stats.total,
        "completed": stats.completed,
        "delayed": stats.delayed,
        "not_done": stats.not_done,
        "delayed_rate_percent": round(stats.delayed_rate_percent, 1),
    }


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
