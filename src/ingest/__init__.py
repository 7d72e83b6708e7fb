"""Task feed ingestion.

This module fetches the feed, parses delimited text, resolves columns,
and derives typed tasks with status and delay.
"""
