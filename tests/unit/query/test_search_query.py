"""Unit tests for the search query grammar."""

from __future__ import annotations

from query.search_query import parse_search_query


def test_parse_search_query_splits_phrases_and_keywords() -> None:
    """Quoted text becomes phrases; comma-separated remainder becomes keywords."""
    query = parse_search_query('"order entry", setup, "go live"')

    assert (query.exact_phrases, query.keywords) == (
        frozenset({"order entry", "go live"}),
        frozenset({"setup"}),
    )


def test_parse_search_query_keeps_commas_inside_phrases() -> None:
    """A quoted phrase is consumed whole before the comma split."""
    query = parse_search_query('"go live, phase 2"')

    assert query.exact_phrases == frozenset({"go live, phase 2"}) and not query.keywords


def test_parse_search_query_lowercases_and_trims_terms() -> None:
    """Terms are normalized for case-insensitive matching."""
    query = parse_search_query('  Vendor ,  "  ERP Cutover "  ,,')

    assert (query.exact_phrases, query.keywords) == (
        frozenset({"erp cutover"}),
        frozenset({"vendor"}),
    )


def test_parse_search_query_drops_empty_phrases() -> None:
    """Empty quotes produce no phrase."""
    assert parse_search_query('"", "  "').is_empty


def test_parse_search_query_empty_input_is_empty() -> None:
    """No text means no search constraint."""
    assert parse_search_query("").is_empty
