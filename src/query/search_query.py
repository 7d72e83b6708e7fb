"""Search query grammar.

Double-quoted substrings are exact phrases; the remaining text is
split on commas into keywords. Both are matched case-insensitively.
"""

from __future__ import annotations

import re

from core.types import StructuredQuery

_QUOTED_PHRASE = re.compile(r'"([^"]*)"')


def parse_search_query(raw_query: str) -> StructuredQuery:
    """Parse raw search text into phrases and keywords.

    Args:
        raw_query: Text as typed by the user.

    Returns:
        Structured query; empty when the text holds no terms.
    """
    exact_phrases = {
        phrase.strip().lower()
        for phrase in _QUOTED_PHRASE.findall(raw_query)
        if phrase.strip()
    }
    remainder = _QUOTED_PHRASE.sub("", raw_query)
    keywords = {part.strip().lower() for part in remainder.split(",") if part.strip()}
    return StructuredQuery(exact_phrases=frozenset(exact_phrases), keywords=frozenset(keywords))
