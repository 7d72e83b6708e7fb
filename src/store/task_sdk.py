"""Python SDK for task feed operations.

This module exposes high-level APIs for loading the feed, rendering
board views, exporting reports, and running background refreshes.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from pathlib import Path

from core.config import TaskPulseConfig
from core.types import BoardResult, TaskSnapshot
from ingest.pipeline import ingest_tasks
from ingest.refresh_monitor import TaskFeedMonitor
from query.board_view import BoardView
from query.task_filtering import filter_options
from store.task_export import export_tasks_csv


class TaskPulseClient:
    """Primary SDK entry point for task feed workflows."""

    def __init__(self, config: TaskPulseConfig | None = None) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
        """
        self._config = config or TaskPulseConfig.from_env()

    @property
    def config(self) -> TaskPulseConfig:
        """Return the runtime configuration."""
        return self._config

    def load(self, now: datetime | None = None) -> TaskSnapshot:
        """Fetch the feed and build a fresh snapshot.

        Args:
            now: Optional reference instant for status derivation.

        Returns:
            Task snapshot.

        Raises:
            TaskPulseConfigError: If no feed is configured.
            FeedUnreachableError: If the feed cannot be fetched.
        """
        return ingest_tasks(self._config, now)

    def default_view(self) -> BoardView:
        """Return an unfiltered view with the configured page size."""
        return BoardView(page_size=self._config.page_size)

    def board(self, snapshot: TaskSnapshot, view: BoardView) -> BoardResult:
        """Render a board view over a snapshot.

        Args:
            snapshot: Task snapshot.
            view: Filter, sort, and page selections.

        Returns:
            Visible page and aggregates.
        """
        return view.render(snapshot.tasks)

    def options(self, snapshot: TaskSnapshot) -> tuple[tuple[str, ...], tuple[str, ...]]:
        """Return distinct owners and system types of a snapshot."""
        return filter_options(snapshot.tasks)

    def export(self, snapshot: TaskSnapshot, view: BoardView, output_path: str) -> Path | None:
        """Export the filtered, unpaginated tasks of a view to CSV.

        Args:
            snapshot: Task snapshot.
            view: Filter and sort selections; paging is ignored.
            output_path: Destination CSV path.

        Returns:
            Written report path, or None when no task matches.
        """
        result = view.render(snapshot.tasks)
        return export_tasks_csv(result.filtered, output_path)

    def monitor(self) -> TaskFeedMonitor:
        """Create a background refresh monitor bound to this client."""
        return TaskFeedMonitor(self.load)

    def with_feed(self, feed_uri: str) -> "TaskPulseClient":
        """Clone the client with a different feed location.

        Args:
            feed_uri: New feed path or URL.

        Returns:
            New SDK client instance.
        """
        return TaskPulseClient(replace(self._config, feed_uri=feed_uri))
