"""CSV export of filtered task collections.

This module writes the filtered, unpaginated tasks in a fixed column
order for spreadsheet consumers. Quoting is left to the csv module.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Sequence

from core.constants import EXPORT_HEADERS
from core.errors import TaskPulseExportError
from core.logging_config import get_logger
from core.types import Task
from ingest.date_normalizer import format_display_date

_LOGGER = get_logger(__name__)


def export_tasks_csv(tasks: Sequence[Task], output_path: str) -> Path | None:
    """Write tasks to a CSV report.

    Args:
        tasks: Filtered tasks to export.
        output_path: Destination CSV file path.

    Returns:
        Path of the written report, or None when there is nothing to export.

    Raises:
        TaskPulseExportError: If the file cannot be written.
    """
    if not tasks:
        _LOGGER.info("tasks_export_skipped", reason="no_tasks")
        return None
    report_path = Path(output_path).expanduser().resolve()
    try:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        with report_path.open("w", encoding="utf-8", newline="") as report_file:
            writer = csv.writer(report_file)
            writer.writerow(EXPORT_HEADERS)
            writer.writerows(_export_row(task) for task in tasks)
    except OSError as error:
        raise TaskPulseExportError(
            f"Failed to write task report at {report_path}: {error}. "
            "Check the output directory and retry."
        ) from error
    _LOGGER.info("tasks_exported", output_path=str(report_path), task_count=len(tasks))
    return report_path


def _export_row(task: Task) -> list[str]:
    """Build one export row in header order."""
    return [
        task.id,
        task.description,
        task.owner,
        format_display_date(task.planned_at),
        format_display_date(task.actual_at),
        task.status,
        task.system_type,
    ]
