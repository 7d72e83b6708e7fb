"""Flexible date parsing for spreadsheet-sourced values.

Day-month-year is tried first, then ISO-8601, then a short list of
textual layouts. Absence (None) is the only failure signal.
"""

from __future__ import annotations

from datetime import datetime, timedelta
import re

from core.constants import DATE_PLACEHOLDERS, DISPLAY_EMPTY_DATE

_DMY_PATTERN = re.compile(
    r"^(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{4})"
    r"(?:[\s,]+(\d{1,2}):(\d{1,2})(?::(\d{1,2}))?)?"
)

_FALLBACK_FORMATS = (
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d",
    "%d %b %Y, %H:%M",
    "%d %b %Y %H:%M",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y %H:%M",
    "%b %d, %Y",
    "%B %d, %Y",
    "%b %d %Y",
    "%B %d %Y",
)


def parse_flexible_date(raw_value: str | None) -> datetime | None:
    """Parse a raw cell into a naive local datetime.

    Args:
        raw_value: Raw cell text.

    Returns:
        Parsed datetime, or None when the value is blank, a placeholder,
        or not a recognizable date.
    """
    if raw_value is None:
        return None
    if not raw_value.strip() or raw_value in DATE_PLACEHOLDERS:
        return None
    clean_value = raw_value.replace('"', "").strip()
    if clean_value in DATE_PLACEHOLDERS:
        return None
    match = _DMY_PATTERN.match(clean_value)
    if match:
        parsed = _build_dmy_datetime(match)
        if parsed is not None:
            return parsed
    return _parse_fallback(clean_value)


def format_display_date(value: datetime | None) -> str:
    """Render a datetime as ``DD Mon YYYY, HH:MM`` or an em-dash."""
    if value is None:
        return DISPLAY_EMPTY_DATE
    return value.strftime("%d %b %Y, %H:%M")


def _build_dmy_datetime(match: re.Match[str]) -> datetime | None:
    """Build a datetime from a day-month-year match.

    Out-of-range parts roll over into the next unit, so ``31/02/2024``
    is 2 March 2024 and ``31/12/2024 24:00`` is 1 January 2025.
    """
    day, month, year, hour, minute, second = match.groups()
    year_offset, month_index = divmod(int(month) - 1, 12)
    try:
        month_start = datetime(int(year) + year_offset, month_index + 1, 1)
        return month_start + timedelta(
            days=int(day) - 1,
            hours=int(hour) if hour else 0,
            minutes=int(minute) if minute else 0,
            seconds=int(second) if second else 0,
        )
    except (ValueError, OverflowError):
        return None


def _parse_fallback(clean_value: str) -> datetime | None:
    """Try ISO-8601 and the textual layouts in order."""
    parsed = _parse_iso(clean_value)
    if parsed is not None:
        return parsed
    for date_format in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(clean_value, date_format)
        except ValueError:
            continue
    return None


def _parse_iso(clean_value: str) -> datetime | None:
    """Parse ISO-8601, converting aware values to naive local time."""
    try:
        parsed = datetime.fromisoformat(clean_value.replace("Z", "+00:00"))
        if parsed.tzinfo is not None:
            return parsed.astimezone().replace(tzinfo=None)
    except (ValueError, OverflowError):
        return None
    return parsed
