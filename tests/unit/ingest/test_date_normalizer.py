"""Unit tests for flexible date parsing."""

from __future__ import annotations

from datetime import datetime

import pytest

from ingest.date_normalizer import format_display_date, parse_flexible_date


def test_parse_flexible_date_reads_day_month_year_with_time() -> None:
    """Day comes before month in the primary pattern."""
    assert parse_flexible_date("31/12/2024 09:30") == datetime(2024, 12, 31, 9, 30)


@pytest.mark.parametrize(
    ("raw_value", "expected"),
    [
        ("05-02-2024", datetime(2024, 2, 5)),
        ("5.2.2024, 7:05:09", datetime(2024, 2, 5, 7, 5, 9)),
        ('"01/03/2024"', datetime(2024, 3, 1)),
        ("2024-01-05", datetime(2024, 1, 5)),
        ("2024-01-05T08:15:00", datetime(2024, 1, 5, 8, 15)),
        ("31 Dec 2024, 09:30", datetime(2024, 12, 31, 9, 30)),
        ("Dec 31, 2024", datetime(2024, 12, 31)),
    ],
)
def test_parse_flexible_date_accepts_supported_layouts(
    raw_value: str,
    expected: datetime,
) -> None:
    """Primary and fallback layouts should parse."""
    assert parse_flexible_date(raw_value) == expected


@pytest.mark.parametrize("raw_value", ["", "   ", "—", "-", None, "soon", "1/1/24"])
def test_parse_flexible_date_returns_none_for_absent_or_invalid(raw_value: str | None) -> None:
    """Blank values, placeholders, and unrecognized text are absent."""
    assert parse_flexible_date(raw_value) is None


def test_format_display_date_renders_day_month_year_time() -> None:
    """Display format matches the export layout."""
    assert format_display_date(datetime(2024, 1, 5, 7, 3)) == "05 Jan 2024, 07:03"


def test_format_display_date_renders_placeholder_for_absent() -> None:
    """Absent dates render as an em-dash."""
    assert format_display_date(None) == "—"


@pytest.mark.parametrize(
    ("raw_value", "expected"),
    [
        ("31/02/2024", datetime(2024, 3, 2)),
        ("31/12/2024 24:00", datetime(2025, 1, 1)),
        ("15/13/2024", datetime(2025, 1, 15)),
        ("00/03/2024", datetime(2024, 2, 29)),
        ("10/01/2024 09:75", datetime(2024, 1, 10, 10, 15)),
    ],
)
def test_parse_flexible_date_rolls_over_out_of_range_parts(
    raw_value: str,
    expected: datetime,
) -> None:
    """Day, month, and time overflow carry into the next unit."""
    assert parse_flexible_date(raw_value) == expected


@pytest.mark.parametrize(
    "raw_value",
    ["0001-01-01T00:00:00+05:00", "9999-12-31T23:59:59-05:00", "31/12/9999 24:00"],
)
def test_parse_flexible_date_returns_none_when_out_of_datetime_range(raw_value: str) -> None:
    """Values that overflow the datetime range are absent instead of raising."""
    assert parse_flexible_date(raw_value) is None
