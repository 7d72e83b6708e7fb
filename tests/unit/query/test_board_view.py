"""Unit tests for board view state transitions and rendering."""

from __future__ import annotations

import pytest

from core.errors import TaskPulseQueryError
from core.types import FilterState, SortState, Task
from query.board_view import BoardView


def test_selection_changes_return_to_first_page() -> None:
    """Filter, search, sort, and page size changes reset the page."""
    view = BoardView(page_size=1, page=3)

    assert view.with_filters(FilterState(owner="Alice")).page == 1
    assert view.with_search("setup").page == 1
    assert view.with_reset_filters().page == 1
    assert view.with_sort_column("owner").page == 1
    assert view.with_sort(SortState(column="id", direction="desc")).page == 1
    assert view.with_page_size(5).page == 1


def test_with_page_keeps_other_selections() -> None:
    """Moving between pages leaves filters and sort untouched."""
    view = BoardView(filters=FilterState(owner="Alice"), sort=SortState(column="id"))

    moved = view.with_page(2)

    assert moved.page == 2
    assert moved.filters == view.filters and moved.sort == view.sort


def test_with_search_keeps_other_filters() -> None:
    """Search text replaces only the search clause."""
    view = BoardView(filters=FilterState(owner="Alice", delayed_only=True))

    searched = view.with_search('"order entry"')

    assert searched.filters.owner == "Alice"
    assert searched.filters.delayed_only
    assert searched.filters.search_query == '"order entry"'


def test_with_reset_filters_keeps_sort() -> None:
    """Clearing filters does not clear the sort."""
    view = BoardView(
        filters=FilterState(owner="Alice", delayed_only=True),
        sort=SortState(column="owner", direction="desc"),
    )

    reset = view.with_reset_filters()

    assert reset.filters == FilterState()
    assert reset.sort == SortState(column="owner", direction="desc")


def test_with_sort_column_toggles_direction() -> None:
    """Selecting the active column flips its direction."""
    view = BoardView().with_sort_column("owner")

    assert view.sort == SortState(column="owner", direction="asc")
    assert view.with_sort_column("owner").sort.direction == "desc"


def test_with_page_size_rejects_non_positive() -> None:
    """Page size must stay at least one."""
    with pytest.raises(TaskPulseQueryError):
        BoardView().with_page_size(0)


def test_render_filters_sorts_and_paginates(board_tasks: list[Task]) -> None:
    """Render returns one page of the sorted filtered collection."""
    view = BoardView(
        filters=FilterState(system_type="ERP"),
        sort=SortState(column="planned_at", direction="desc"),
        page_size=1,
    )

    result = view.render(board_tasks)

    assert [task.id for task in result.filtered] == ["T-3", "T-1"]
    assert [task.id for task in result.page.items] == ["T-3"]
    assert result.page.total_count == 2
    assert result.page.total_pages == 2


def test_render_stats_cover_all_filtered_pages(board_tasks: list[Task]) -> None:
    """Aggregates are computed over the filtered set, not the page."""
    view = BoardView(filters=FilterState(owner="Alice"), page_size=1, page=2)

    result = view.render(board_tasks)

    assert [task.id for task in result.page.items] == ["T-3"]
    assert result.stats.total == 2
    assert result.stats.delayed == 1
    assert result.stats.completed == 1
    assert result.stats.delayed_rate_percent == pytest.approx(50.0)


def test_render_with_no_matches_is_empty(board_tasks: list[Task]) -> None:
    """An empty result has no pages and zeroed aggregates."""
    result = BoardView(filters=FilterState(owner="Nobody")).render(board_tasks)

    assert result.page.items == ()
    assert result.page.total_pages == 0
    assert result.stats.total == 0
    assert result.stats.delayed_rate_percent == 0.0
