"""Shared typed models.

This module defines immutable data models used by ingest, query,
store, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal

from core.constants import (
    ALL_SELECTOR,
    DEFAULT_COLUMN_POSITIONS,
    SORT_ASCENDING,
)

TaskStatus = Literal["Completed", "Delayed", "Pending"]
SortDirection = Literal["asc", "desc"]


@dataclass(frozen=True)
class Task:
    """Normalized unit of work built from one feed row.

    Attributes:
        id: Source identifier, or a synthetic ``T-<n>`` id.
        description: Free-text task description.
        planned_at: Planned completion instant, if known.
        actual_at: Observed completion instant, if known.
        system_type: System category, ``General`` when absent.
        owner: Responsible person, ``Unassigned`` when absent.
        status: Derived lifecycle status.
        delay_hours: Derived non-negative delay in hours.
    """

    id: str
    description: str
    planned_at: datetime | None
    actual_at: datetime | None
    system_type: str
    owner: str
    status: TaskStatus
    delay_hours: float


@dataclass(frozen=True)
class TaskSnapshot:
    """Task collection produced by one ingestion pass.

    Attributes:
        tasks: Tasks in feed order.
        synced_at: Instant the pass started, used as "now" for derivation.
        source_uri: Feed location the pass read from.
    """

    tasks: tuple[Task, ...]
    synced_at: datetime
    source_uri: str


@dataclass(frozen=True)
class ColumnRule:
    """Heuristic resolution rule for one canonical field.

    Attributes:
        candidates: Header names to look for, case-insensitive.
        fallback_index: Positional column used when no header matches.
        exclude: Keywords that disqualify a partial header match.
    """

    candidates: tuple[str, ...]
    fallback_index: int
    exclude: tuple[str, ...] = ()


@dataclass(frozen=True)
class ColumnLayout:
    """Column resolution rules for every task field."""

    id: ColumnRule
    description: ColumnRule
    planned: ColumnRule
    actual: ColumnRule
    system_type: ColumnRule
    owner: ColumnRule

    @classmethod
    def from_positions(
        cls, positions: tuple[int, ...] = DEFAULT_COLUMN_POSITIONS
    ) -> "ColumnLayout":
        """Build the standard layout with custom fallback positions.

        Args:
            positions: Fallback indices for id, description, planned,
                actual, system type, and owner, in that order.

        Returns:
            Column layout.
        """
        id_index, task_index, planned_index, actual_index, system_index, owner_index = positions
        return cls(
            id=ColumnRule(("Unique Id", "Task ID"), id_index),
            description=ColumnRule(("Task",), task_index, exclude=("id", "unique")),
            planned=ColumnRule(("Planned",), planned_index),
            actual=ColumnRule(("Actual",), actual_index),
            system_type=ColumnRule(("System type", "System"), system_index),
            owner=ColumnRule(("Final Name", "Name"), owner_index),
        )


@dataclass(frozen=True)
class StructuredQuery:
    """Parsed free-text search query.

    Attributes:
        exact_phrases: Lowercase phrases taken from double quotes.
        keywords: Lowercase comma-separated terms outside quotes.
    """

    exact_phrases: frozenset[str] = frozenset()
    keywords: frozenset[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        """Return whether the query has no phrase and no keyword."""
        return not self.exact_phrases and not self.keywords


@dataclass(frozen=True)
class FilterState:
    """Active filter selections.

    Attributes:
        owner: ``All`` or an exact owner value.
        system_type: ``All`` or an exact system type value.
        start: Optional inclusive lower bound on planned date.
        end: Optional inclusive upper bound on planned date (whole day).
        delayed_only: Keep only delayed tasks.
        not_done_only: Keep only tasks without an actual date.
        search_query: Raw search text.
    """

    owner: str = ALL_SELECTOR
    system_type: str = ALL_SELECTOR
    start: date | None = None
    end: date | None = None
    delayed_only: bool = False
    not_done_only: bool = False
    search_query: str = ""


@dataclass(frozen=True)
class SortState:
    """Selected sort column and direction; no column keeps feed order."""

    column: str | None = None
    direction: SortDirection = SORT_ASCENDING


@dataclass(frozen=True)
class TaskPage:
    """One page of an ordered task sequence.

    Attributes:
        items: Tasks visible on this page.
        page: One-based page index.
        page_size: Maximum tasks per page.
        total_count: Size of the full ordered sequence.
        total_pages: Number of pages, zero for an empty sequence.
    """

    items: tuple[Task, ...]
    page: int
    page_size: int
    total_count: int
    total_pages: int


@dataclass(frozen=True)
class TaskStats:
    """Aggregate counts over the filtered (unpaginated) collection."""

    total: int
    completed: int
    delayed: int
    not_done: int
    delayed_rate_percent: float


@dataclass(frozen=True)
class BoardResult:
    """Everything a consumer needs to display one board view.

    Attributes:
        page: Visible slice with page metadata.
        stats: Aggregates over the filtered collection.
        filtered: Full filtered collection in sorted order, for export.
    """

    page: TaskPage
    stats: TaskStats
    filtered: tuple[Task, ...] = field(default_factory=tuple)
