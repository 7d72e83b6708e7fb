"""Task filtering helpers.

This module applies owner, system, date-range, status, and search
constraints. A task is kept only when every active clause holds.
"""

from __future__ import annotations

from dataclasses import fields
from datetime import datetime, time
from typing import Iterable

from core.constants import ALL_SELECTOR, STATUS_DELAYED
from core.types import FilterState, StructuredQuery, Task
from query.search_query import parse_search_query

_END_OF_DAY = time(23, 59, 59)


def matches_filters(task: Task, state: FilterState, query: StructuredQuery) -> bool:
    """Return whether a task satisfies every active filter clause.

    Args:
        task: Task to test.
        state: Active filter selections.
        query: Parsed search query for ``state.search_query``.

    Returns:
        True when the task passes all clauses.
    """
    if state.owner != ALL_SELECTOR and task.owner != state.owner:
        return False
    if state.system_type != ALL_SELECTOR and task.system_type != state.system_type:
        return False
    if not _matches_date_range(task, state):
        return False
    if state.delayed_only and task.status != STATUS_DELAYED:
        return False
    if state.not_done_only and task.actual_at is not None:
        return False
    return matches_search(task, query)


def matches_search(task: Task, query: StructuredQuery) -> bool:
    """Return whether description or id contains any phrase or keyword."""
    if query.is_empty:
        return True
    haystacks = (task.description.lower(), task.id.lower())
    terms = query.exact_phrases | query.keywords
    return any(term in haystack for term in terms for haystack in haystacks)


def filter_tasks(tasks: Iterable[Task], state: FilterState) -> list[Task]:
    """Filter tasks with one search-query parse per call.

    Args:
        tasks: Full task collection.
        state: Active filter selections.

    Returns:
        Matching tasks in input order.
    """
    query = parse_search_query(state.search_query)
    return [task for task in tasks if matches_filters(task, state, query)]


def filter_options(tasks: Iterable[Task]) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Return sorted distinct owners and system types for selectors."""
    owners: set[str] = set()
    system_types: set[str] = set()
    for task in tasks:
        if task.owner:
            owners.add(task.owner)
        if task.system_type:
            system_types.add(task.system_type)
    return tuple(sorted(owners)), tuple(sorted(system_types))


def active_filter_count(state: FilterState) -> int:
    """Count filter selections that differ from their defaults."""
    defaults = FilterState()
    return sum(
        1
        for state_field in fields(FilterState)
        if getattr(state, state_field.name) != getattr(defaults, state_field.name)
    )


def has_active_filters(state: FilterState) -> bool:
    """Return whether any filter selection differs from its default."""
    return active_filter_count(state) > 0


def reset_filters() -> FilterState:
    """Return the default filter selections."""
    return FilterState()


def _matches_date_range(task: Task, state: FilterState) -> bool:
    """Apply planned-date bounds; an absent planned date fails any bound."""
    if state.start is None and state.end is None:
        return True
    if task.planned_at is None:
        return False
    if state.start is not None and task.planned_at < datetime.combine(state.start, time.min):
        return False
    if state.end is not None and task.planned_at > datetime.combine(state.end, _END_OF_DAY):
        return False
    return True
