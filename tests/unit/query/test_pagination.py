"""Unit tests for pagination."""

from __future__ import annotations

import pytest

from core.errors import TaskPulseQueryError
from query.pagination import paginate, total_pages
from tests.task_factory import make_task

TASKS = [make_task(f"T-{index}") for index in range(237)]


def test_paginate_counts_pages_with_ceiling() -> None:
    """237 tasks at 100 per page span 3 pages."""
    assert paginate(TASKS, 100, 1).total_pages == 3


def test_paginate_last_page_holds_remainder() -> None:
    """The final page holds the remaining 37 tasks."""
    page = paginate(TASKS, 100, 3)

    assert len(page.items) == 37 and page.items[0].id == "T-200"


def test_paginate_past_last_page_is_empty() -> None:
    """Pages past the end are empty but keep metadata."""
    page = paginate(TASKS, 100, 4)

    assert page.items == () and page.total_count == 237


def test_total_pages_is_zero_for_no_items() -> None:
    """An empty sequence has zero pages."""
    assert total_pages(0, 100) == 0 and paginate([], 100, 1).total_pages == 0


@pytest.mark.parametrize(("page_size", "page"), [(0, 1), (10, 0)])
def test_paginate_rejects_non_positive_inputs(page_size: int, page: int) -> None:
    """Page size and page index start at 1."""
    with pytest.raises(TaskPulseQueryError):
        paginate(TASKS, page_size, page)

    assert True
