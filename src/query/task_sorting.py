"""Stable, type-aware task sorting.

Instant columns keep absent values last in both directions, numeric
columns compare arithmetically, and text columns use a natural,
case-insensitive collation so "Task 2" sorts before "Task 10".
"""

from __future__ import annotations

from datetime import datetime
import re
from typing import Callable, Iterable
import unicodedata

from core.constants import SORT_ASCENDING, SORT_DESCENDING, SORT_DIRECTIONS
from core.errors import TaskPulseQueryError
from core.types import SortState, Task

_DIGIT_RUN = re.compile(r"(\d+)")

_INSTANT_COLUMNS: dict[str, Callable[[Task], datetime | None]] = {
    "planned_at": lambda task: task.planned_at,
    "actual_at": lambda task: task.actual_at,
}
_NUMERIC_COLUMNS: dict[str, Callable[[Task], float]] = {
    "delay_hours": lambda task: task.delay_hours,
}
_TEXT_COLUMNS: dict[str, Callable[[Task], str]] = {
    "id": lambda task: task.id,
    "description": lambda task: task.description,
    "system_type": lambda task: task.system_type,
    "owner": lambda task: task.owner,
    "status": lambda task: task.status,
}
SORT_COLUMNS = tuple(_TEXT_COLUMNS) + tuple(_INSTANT_COLUMNS) + tuple(_NUMERIC_COLUMNS)


def natural_sort_key(value: str) -> tuple[tuple[int, int, str], ...]:
    """Build a collation key that compares digit runs numerically.

    Letters compare without case or accents; digit runs sort before
    letters at the same position.

    Args:
        value: Text to collate.

    Returns:
        Tuple key usable with ``sorted``.
    """
    folded = _strip_accents(value).casefold()
    key: list[tuple[int, int, str]] = []
    for chunk in _DIGIT_RUN.split(folded):
        if not chunk:
            continue
        if chunk.isdigit():
            key.append((0, int(chunk), ""))
        else:
            key.append((1, 0, chunk))
    return tuple(key)


def toggle_sort(state: SortState, column: str) -> SortState:
    """Select a sort column, flipping direction when it is already selected.

    Raises:
        TaskPulseQueryError: If the column is unknown.
    """
    _validate_column(column)
    if state.column == column:
        direction = SORT_DESCENDING if state.direction == SORT_ASCENDING else SORT_ASCENDING
        return SortState(column=column, direction=direction)
    return SortState(column=column, direction=SORT_ASCENDING)


def sort_tasks(tasks: Iterable[Task], state: SortState) -> list[Task]:
    """Return tasks ordered by the selected column and direction.

    Args:
        tasks: Filtered tasks.
        state: Sort column and direction.

    Returns:
        New list; input order when no column is selected.

    Raises:
        TaskPulseQueryError: If column or direction is unknown.
    """
    task_list = list(tasks)
    if state.column is None:
        return task_list
    _validate_column(state.column)
    if state.direction not in SORT_DIRECTIONS:
        raise TaskPulseQueryError(
            f"Unsupported sort direction '{state.direction}'. "
            f"Use one of: {', '.join(SORT_DIRECTIONS)}."
        )
    descending = state.direction == SORT_DESCENDING
    if state.column in _INSTANT_COLUMNS:
        return _sort_nulls_last(task_list, _INSTANT_COLUMNS[state.column], descending)
    if state.column in _NUMERIC_COLUMNS:
        return sorted(task_list, key=_NUMERIC_COLUMNS[state.column], reverse=descending)
    text_value = _TEXT_COLUMNS[state.column]
    return sorted(
        task_list, key=lambda task: natural_sort_key(text_value(task)), reverse=descending
    )


def _sort_nulls_last(
    tasks: list[Task],
    value_of: Callable[[Task], datetime | None],
    descending: bool,
) -> list[Task]:
    """Sort present instants, then append absent ones in input order."""
    present = [task for task in tasks if value_of(task) is not None]
    absent = [task for task in tasks if value_of(task) is None]
    ordered = sorted(present, key=lambda task: value_of(task), reverse=descending)
    return ordered + absent


def _validate_column(column: str) -> None:
    if column not in SORT_COLUMNS:
        raise TaskPulseQueryError(
            f"Unsupported sort column '{column}'. Use one of: {', '.join(SORT_COLUMNS)}."
        )


def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(char for char in decomposed if not unicodedata.combining(char))
