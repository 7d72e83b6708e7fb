"""Header-aware record mapping and heuristic column resolution.

This module turns parsed rows into records keyed by header text and
by positional ``col_<index>`` aliases, and resolves canonical task
fields through an ordered list of matching strategies.
"""

from __future__ import annotations

from typing import Mapping, Protocol, Sequence

from core.constants import POSITIONAL_KEY_PREFIX
from core.types import ColumnLayout, ColumnRule

Record = dict[str, str]


def build_records(rows: Sequence[Sequence[str]]) -> list[Record]:
    """Map data rows onto the header row.

    Args:
        rows: Parsed rows; the first row is the header.

    Returns:
        One record per data row, in feed order.
    """
    if not rows:
        return []
    headers = rows[0]
    records: list[Record] = []
    for values in rows[1:]:
        record: Record = {}
        for index, header in enumerate(headers):
            value = values[index] if index < len(values) else ""
            record[header] = value
            record[positional_key(index)] = value
        records.append(record)
    return records


def positional_key(index: int) -> str:
    """Return the positional alias for a zero-based column index."""
    return f"{POSITIONAL_KEY_PREFIX}{index}"


class ColumnStrategy(Protocol):
    """One step of the column resolution chain."""

    def resolve(self, record: Mapping[str, str], rule: ColumnRule) -> str | None:
        """Return the key to read, or None when this strategy has no match."""


class ExactHeaderMatch:
    """Match a header equal to a candidate name, ignoring case."""

    def resolve(self, record: Mapping[str, str], rule: ColumnRule) -> str | None:
        candidates = {candidate.lower() for candidate in rule.candidates}
        for key in record:
            if key.lower() in candidates:
                return key
        return None


class PartialHeaderMatch:
    """Match a header containing a candidate name, minus excluded headers."""

    def resolve(self, record: Mapping[str, str], rule: ColumnRule) -> str | None:
        candidates = [candidate.lower() for candidate in rule.candidates]
        excluded = [keyword.lower() for keyword in rule.exclude]
        for key in record:
            lower_key = key.lower()
            if any(keyword in lower_key for keyword in excluded):
                continue
            if any(candidate in lower_key for candidate in candidates):
                return key
        return None


class PositionalFallback:
    """Fall back to the rule's positional alias."""

    def resolve(self, record: Mapping[str, str], rule: ColumnRule) -> str | None:
        return positional_key(rule.fallback_index)


DEFAULT_STRATEGIES: tuple[ColumnStrategy, ...] = (
    ExactHeaderMatch(),
    PartialHeaderMatch(),
    PositionalFallback(),
)


def resolve_column(
    record: Mapping[str, str],
    rule: ColumnRule,
    strategies: Sequence[ColumnStrategy] = DEFAULT_STRATEGIES,
) -> str:
    """Resolve a field value using the first strategy that matches.

    Args:
        record: Mapped feed record.
        rule: Candidates, fallback index, and exclusions for the field.
        strategies: Ordered resolution strategies.

    Returns:
        The resolved raw value, or an empty string when nothing matches.
    """
    for strategy in strategies:
        key = strategy.resolve(record, rule)
        if key is not None:
            return record.get(key, "")
    return ""


def find_column(
    record: Mapping[str, str],
    candidates: Sequence[str],
    fallback_index: int,
    exclude: Sequence[str] = (),
) -> str:
    """Resolve a field value from loose candidate names.

    Args:
        record: Mapped feed record.
        candidates: Header names to look for.
        fallback_index: Positional column used when no header matches.
        exclude: Keywords that disqualify partial header matches.

    Returns:
        The resolved raw value, or an empty string.
    """
    rule = ColumnRule(tuple(candidates), fallback_index, tuple(exclude))
    return resolve_column(record, rule)


def has_identity(record: Mapping[str, str], layout: ColumnLayout) -> bool:
    """Return whether a record carries both an id and a description."""
    task_id = resolve_column(record, layout.id).strip()
    description = resolve_column(record, layout.description).strip()
    return bool(task_id) and bool(description)
