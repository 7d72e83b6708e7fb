"""Task output layer.

This module serializes derived tasks for JSON and CSV consumers.
It also exposes the SDK client that ties ingest and query together.
"""
