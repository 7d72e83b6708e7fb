"""Runtime configuration model for TaskPulse.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from urllib.parse import quote

from core.constants import (
    COLUMN_POSITION_FIELDS,
    DEFAULT_COLUMN_POSITIONS,
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_REFRESH_SECONDS,
    SHEET_CSV_URL_TEMPLATE,
)
from core.errors import TaskPulseConfigError


@dataclass(frozen=True)
class TaskPulseConfig:
    """Validated runtime configuration.

    Attributes:
        feed_uri: Local path, HTTP(S) URL, or S3 URI of the task feed.
        refresh_interval_seconds: Delay between background refreshes.
        fetch_timeout_seconds: Network timeout for a single feed fetch.
        page_size: Default number of tasks per page.
        column_positions: Fallback column indices for id, description,
            planned, actual, system type, and owner.
        s3_region: Optional default AWS region for S3 feeds.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    feed_uri: str | None
    refresh_interval_seconds: int = DEFAULT_REFRESH_SECONDS
    fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS
    page_size: int = DEFAULT_PAGE_SIZE
    column_positions: tuple[int, ...] = DEFAULT_COLUMN_POSITIONS
    s3_region: str | None = None
    s3_profile: str | None = None

    @classmethod
    def from_env(cls) -> "TaskPulseConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            TaskPulseConfigError: If environment values are invalid.
        """
        return cls(
            feed_uri=_resolve_feed_uri(),
            refresh_interval_seconds=_parse_positive_int(
                "TASKPULSE_REFRESH_SECONDS", DEFAULT_REFRESH_SECONDS
            ),
            fetch_timeout_seconds=_parse_positive_float(
                "TASKPULSE_FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT_SECONDS
            ),
            page_size=_parse_positive_int("TASKPULSE_PAGE_SIZE", DEFAULT_PAGE_SIZE),
            column_positions=_parse_column_positions(os.getenv("TASKPULSE_COLUMN_POSITIONS")),
            s3_region=os.getenv("TASKPULSE_S3_REGION"),
            s3_profile=os.getenv("TASKPULSE_S3_PROFILE"),
        )


def build_sheet_csv_url(sheet_id: str, sheet_name: str) -> str:
    """Build the CSV export URL of a published spreadsheet tab.

    Args:
        sheet_id: Spreadsheet document id.
        sheet_name: Tab name inside the spreadsheet.

    Returns:
        CSV export URL.
    """
    return SHEET_CSV_URL_TEMPLATE.format(sheet_id=sheet_id, sheet_name=quote(sheet_name))


def _resolve_feed_uri() -> str | None:
    """Resolve the feed URI from explicit URI or spreadsheet settings."""
    feed_uri = os.getenv("TASKPULSE_FEED_URI")
    if feed_uri:
        return feed_uri
    sheet_id = os.getenv("TASKPULSE_SHEET_ID")
    if not sheet_id:
        return None
    sheet_name = os.getenv("TASKPULSE_SHEET_NAME")
    if not sheet_name:
        raise TaskPulseConfigError(
            "TASKPULSE_SHEET_ID is set but TASKPULSE_SHEET_NAME is missing. "
            "Set TASKPULSE_SHEET_NAME to the spreadsheet tab to read."
        )
    return build_sheet_csv_url(sheet_id, sheet_name)


def _parse_positive_int(env_name: str, default: int) -> int:
    """Parse a positive integer environment value.

    Args:
        env_name: Environment variable name.
        default: Value used when the variable is unset.

    Returns:
        Parsed integer.

    Raises:
        TaskPulseConfigError: If value is not a positive integer.
    """
    raw_value = os.getenv(env_name)
    if raw_value is None:
        return default
    try:
        value = int(raw_value)
    except ValueError as error:
        raise TaskPulseConfigError(
            f"Invalid {env_name} value: expected integer, got '{raw_value}'. "
            f"Set {env_name} to a positive whole number."
        ) from error
    if value < 1:
        raise TaskPulseConfigError(
            f"Invalid {env_name} value: expected value >= 1, got {value}."
        )
    return value


def _parse_positive_float(env_name: str, default: float) -> float:
    """Parse a positive float environment value.

    Raises:
        TaskPulseConfigError: If value is not a positive number.
    """
    raw_value = os.getenv(env_name)
    if raw_value is None:
        return default
    try:
        value = float(raw_value)
    except ValueError as error:
        raise TaskPulseConfigError(
            f"Invalid {env_name} value: expected number, got '{raw_value}'. "
            f"Set {env_name} to a positive number of seconds."
        ) from error
    if value <= 0:
        raise TaskPulseConfigError(
            f"Invalid {env_name} value: expected value > 0, got {value}."
        )
    return value


def _parse_column_positions(raw_value: str | None) -> tuple[int, ...]:
    """Parse fallback column positions.

    Args:
        raw_value: Comma-separated indices or None.

    Returns:
        Tuple of six non-negative indices.

    Raises:
        TaskPulseConfigError: If the list is malformed.
    """
    if raw_value is None or not raw_value.strip():
        return DEFAULT_COLUMN_POSITIONS
    parts = [part.strip() for part in raw_value.split(",")]
    if len(parts) != len(COLUMN_POSITION_FIELDS):
        raise TaskPulseConfigError(
            f"Invalid TASKPULSE_COLUMN_POSITIONS value '{raw_value}': expected "
            f"{len(COLUMN_POSITION_FIELDS)} indices for {', '.join(COLUMN_POSITION_FIELDS)}."
        )
    try:
        positions = tuple(int(part) for part in parts)
    except ValueError as error:
        raise TaskPulseConfigError(
            f"Invalid TASKPULSE_COLUMN_POSITIONS value '{raw_value}': "
            "indices must be integers."
        ) from error
    if any(position < 0 for position in positions):
        raise TaskPulseConfigError(
            f"Invalid TASKPULSE_COLUMN_POSITIONS value '{raw_value}': "
            "indices must be >= 0."
        )
    return positions
