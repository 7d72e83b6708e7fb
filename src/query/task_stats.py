"""Aggregate counts over a filtered task collection."""

from __future__ import annotations

from typing import Sequence

from core.constants import STATUS_DELAYED
from core.types import Task, TaskStats


def compute_stats(tasks: Sequence[Task]) -> TaskStats:
    """Count completed, delayed, and open tasks.

    ``completed`` counts tasks with an actual date regardless of status,
    so a late completion counts as both completed and delayed.
    """
    total = len(tasks)
    completed = sum(1 for task in tasks if task.actual_at is not None)
    delayed = sum(1 for task in tasks if task.status == STATUS_DELAYED)
    delayed_rate = (delayed / total) * 100 if total > 0 else 0.0
    return TaskStats(
        total=total,
        completed=completed,
        delayed=delayed,
        not_done=total - completed,
        delayed_rate_percent=delayed_rate,
    )
