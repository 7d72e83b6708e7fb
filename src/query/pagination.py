"""Page slicing for ordered task sequences."""

from __future__ import annotations

import math
from typing import Sequence

from core.errors import TaskPulseQueryError
from core.types import Task, TaskPage


def total_pages(total_count: int, page_size: int) -> int:
    """Return ``ceil(total_count / page_size)``, zero for no items."""
    return math.ceil(total_count / page_size) if total_count > 0 else 0


def paginate(tasks: Sequence[Task], page_size: int, page: int) -> TaskPage:
    """Slice one page out of an ordered sequence.

    Args:
        tasks: Sorted tasks.
        page_size: Maximum tasks per page.
        page: One-based page index; pages past the end are empty.

    Returns:
        Page slice with metadata.

    Raises:
        TaskPulseQueryError: If page size or page index is below 1.
    """
    if page_size < 1:
        raise TaskPulseQueryError(
            f"Invalid page size {page_size}: expected value >= 1. "
            "Use --page-size with a positive integer."
        )
    if page < 1:
        raise TaskPulseQueryError(
            f"Invalid page {page}: pages are numbered from 1."
        )
    offset = (page - 1) * page_size
    return TaskPage(
        items=tuple(tasks[offset : offset + page_size]),
        page=page,
        page_size=page_size,
        total_count=len(tasks),
        total_pages=total_pages(len(tasks), page_size),
    )
