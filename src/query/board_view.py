"""Board view state and the filter, sort, paginate flow.

BoardView is immutable; every change returns a new view with the page
reset rules applied, and ``render`` recomputes all derived collections.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from core.constants import DEFAULT_PAGE_SIZE
from core.errors import TaskPulseQueryError
from core.types import BoardResult, FilterState, SortState, Task
from query.pagination import paginate
from query.task_filtering import filter_tasks, reset_filters
from query.task_sorting import sort_tasks, toggle_sort
from query.task_stats import compute_stats


@dataclass(frozen=True)
class BoardView:
    """Filter, sort, and page selections for one board.

    Attributes:
        filters: Active filter selections.
        sort: Active sort column and direction.
        page_size: Tasks per page.
        page: One-based page index.
    """

    filters: FilterState = field(default_factory=FilterState)
    sort: SortState = field(default_factory=SortState)
    page_size: int = DEFAULT_PAGE_SIZE
    page: int = 1

    def with_filters(self, filters: FilterState) -> "BoardView":
        """Replace filter selections and return to the first page."""
        return replace(self, filters=filters, page=1)

    def with_search(self, search_query: str) -> "BoardView":
        """Replace the search text and return to the first page."""
        return self.with_filters(replace(self.filters, search_query=search_query))

    def with_reset_filters(self) -> "BoardView":
        """Clear every filter and return to the first page."""
        return self.with_filters(reset_filters())

    def with_sort_column(self, column: str) -> "BoardView":
        """Toggle the sort column and return to the first page."""
        return replace(self, sort=toggle_sort(self.sort, column), page=1)

    def with_sort(self, sort: SortState) -> "BoardView":
        """Set sort column and direction and return to the first page."""
        return replace(self, sort=sort, page=1)

    def with_page_size(self, page_size: int) -> "BoardView":
        """Change the page size and return to the first page.

        Raises:
            TaskPulseQueryError: If page size is below 1.
        """
        if page_size < 1:
            raise TaskPulseQueryError(
                f"Invalid page size {page_size}: expected value >= 1."
            )
        return replace(self, page_size=page_size, page=1)

    def with_page(self, page: int) -> "BoardView":
        """Move to another page, keeping every other selection."""
        return replace(self, page=page)

    def render(self, tasks: Iterable[Task]) -> BoardResult:
        """Run filter, sort, and paginate over the full collection.

        Args:
            tasks: Full task collection of the current snapshot.

        Returns:
            Visible page, aggregates, and the sorted filtered collection.
        """
        filtered = filter_tasks(tasks, self.filters)
        ordered = sort_tasks(filtered, self.sort)
        return BoardResult(
            page=paginate(ordered, self.page_size, self.page),
            stats=compute_stats(filtered),
            filtered=tuple(ordered),
        )
