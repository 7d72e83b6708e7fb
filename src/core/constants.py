"""Core constants used across TaskPulse modules.

This module centralizes sentinels, defaults, and feed layout values.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

STATUS_COMPLETED = "Completed"
STATUS_DELAYED = "Delayed"
STATUS_PENDING = "Pending"

ALL_SELECTOR = "All"
DEFAULT_SYSTEM_TYPE = "General"
DEFAULT_OWNER = "Unassigned"
DEFAULT_DESCRIPTION = "No Task Description"
SYNTHETIC_ID_PREFIX = "T-"
POSITIONAL_KEY_PREFIX = "col_"
DATE_PLACEHOLDERS = ("—", "-")
DISPLAY_EMPTY_DATE = "—"

DEFAULT_REFRESH_SECONDS = 60
DEFAULT_FETCH_TIMEOUT_SECONDS = 30.0
DEFAULT_PAGE_SIZE = 100
DEFAULT_COLUMN_POSITIONS = (0, 1, 2, 3, 7, 9)
COLUMN_POSITION_FIELDS = ("id", "description", "planned", "actual", "system_type", "owner")

SHEET_CSV_URL_TEMPLATE = (
    "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv&sheet={sheet_name}"
)

SORT_ASCENDING = "asc"
SORT_DESCENDING = "desc"
SORT_DIRECTIONS = (SORT_ASCENDING, SORT_DESCENDING)

EXPORT_HEADERS = ("Unique Id", "Task", "Name", "Planned", "Actual", "Status", "System")
DEFAULT_EXPORT_FILE_NAME = "operational_report.csv"
FETCH_ERROR_MESSAGE = (
    "Failed to fetch dashboard data. Ensure the spreadsheet is shared correctly."
)
