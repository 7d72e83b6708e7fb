"""Background refresh of the task snapshot.

This module keeps the last successfully ingested snapshot and replaces
it atomically on each successful refresh. Failed refreshes keep the
stale snapshot and record an error; overlapping refreshes are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import threading
import time
from typing import Callable

from core.constants import FETCH_ERROR_MESSAGE
from core.errors import TaskPulseError
from core.logging_config import get_logger
from core.types import TaskSnapshot

_LOGGER = get_logger(__name__)

SnapshotLoader = Callable[[], TaskSnapshot]


@dataclass(frozen=True)
class MonitorState:
    """Observable monitor state.

    Attributes:
        snapshot: Last successful snapshot, or None before the first success.
        error: User-facing error from the latest failed refresh.
        initial_load_done: Whether the first load attempt has finished.
        refresh_count: Number of successful refreshes.
    """

    snapshot: TaskSnapshot | None
    error: str | None
    initial_load_done: bool
    refresh_count: int

    @property
    def is_blocking_error(self) -> bool:
        """Return whether an error left nothing to display."""
        return self.error is not None and self.snapshot is None


class TaskFeedMonitor:
    """Timer-driven refresher with a single in-flight guard."""

    def __init__(self, loader: SnapshotLoader) -> None:
        self._loader = loader
        self._in_flight = threading.Lock()
        self._state = MonitorState(
            snapshot=None, error=None, initial_load_done=False, refresh_count=0
        )

    @property
    def state(self) -> MonitorState:
        """Return the current monitor state."""
        return self._state

    @property
    def snapshot(self) -> TaskSnapshot | None:
        """Return the last successful snapshot."""
        return self._state.snapshot

    def refresh(self) -> bool:
        """Run one ingestion pass unless another one is in flight.

        Returns:
            True when a new snapshot was installed.
        """
        if not self._in_flight.acquire(blocking=False):
            _LOGGER.info("refresh_skipped", reason="refresh_in_flight")
            return False
        try:
            return self._refresh_locked()
        finally:
            self._in_flight.release()

    def run(
        self,
        interval_seconds: float,
        max_cycles: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
        on_cycle: Callable[[MonitorState], None] | None = None,
    ) -> MonitorState:
        """Load once, then refresh every interval.

        Args:
            interval_seconds: Delay between refreshes.
            max_cycles: Total number of load attempts; unbounded when None.
            sleep: Sleep function, injectable for tests.
            on_cycle: Callback invoked with the state after each attempt.

        Returns:
            Final monitor state.
        """
        cycle = 0
        while max_cycles is None or cycle < max_cycles:
            if cycle > 0:
                sleep(interval_seconds)
            self.refresh()
            cycle += 1
            if on_cycle is not None:
                on_cycle(self._state)
        return self._state

    def _refresh_locked(self) -> bool:
        started_at = datetime.now()
        try:
            snapshot = self._loader()
        except TaskPulseError as error:
            self._state = MonitorState(
                snapshot=self._state.snapshot,
                error=FETCH_ERROR_MESSAGE,
                initial_load_done=True,
                refresh_count=self._state.refresh_count,
            )
            _LOGGER.error(
                "refresh_failed",
                error=str(error),
                error_type=type(error).__name__,
                kept_stale_snapshot=self._state.snapshot is not None,
            )
            return False
        self._state = MonitorState(
            snapshot=snapshot,
            error=None,
            initial_load_done=True,
            refresh_count=self._state.refresh_count + 1,
        )
        _LOGGER.info(
            "refresh_completed",
            task_count=len(snapshot.tasks),
            duration_seconds=(datetime.now() - started_at).total_seconds(),
        )
        return True
