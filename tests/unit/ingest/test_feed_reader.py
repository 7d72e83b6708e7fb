"""Unit tests for feed readers."""

from __future__ import annotations

from pathlib import Path

import pytest
import requests

from core.config import TaskPulseConfig
from core.errors import FeedUnreachableError
from ingest import feed_reader
from ingest.feed_reader import read_feed_text
from tests.fixture_paths import feed_path


class _FakeResponse:
    def __init__(self, text: str, status_code: int) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_read_feed_text_reads_local_file() -> None:
    """Local paths should be read as UTF-8 text."""
    config = TaskPulseConfig(feed_uri=None)

    text = read_feed_text(str(feed_path("tasks.csv")), config)

    assert text.startswith("Unique Id,Task,")


def test_read_feed_text_raises_for_missing_file(tmp_path: Path) -> None:
    """A missing local feed is unreachable."""
    config = TaskPulseConfig(feed_uri=None)
    missing_path = tmp_path / "missing.csv"

    with pytest.raises(FeedUnreachableError):
        read_feed_text(str(missing_path), config)

    assert missing_path.exists() is False


def test_read_feed_text_fetches_http_with_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    """HTTP feeds use requests with the configured timeout."""
    calls: list[tuple[str, float]] = []

    def _fake_get(url: str, timeout: float) -> _FakeResponse:
        calls.append((url, timeout))
        return _FakeResponse("Unique Id,Task\nT-1,Ship\n", 200)

    monkeypatch.setattr(feed_reader.requests, "get", _fake_get)
    config = TaskPulseConfig(feed_uri=None, fetch_timeout_seconds=5.0)

    text = read_feed_text("https://example.com/feed.csv", config)

    assert text.endswith("T-1,Ship\n") and calls == [("https://example.com/feed.csv", 5.0)]


def test_read_feed_text_raises_for_http_error_status(monkeypatch: pytest.MonkeyPatch) -> None:
    """Non-success responses are unreachable feeds."""
    monkeypatch.setattr(
        feed_reader.requests,
        "get",
        lambda url, timeout: _FakeResponse("denied", 403),
    )

    with pytest.raises(FeedUnreachableError):
        read_feed_text("https://example.com/feed.csv", TaskPulseConfig(feed_uri=None))

    assert True


def test_read_feed_text_raises_for_transport_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Connection failures are unreachable feeds."""

    def _failing_get(url: str, timeout: float) -> _FakeResponse:
        raise requests.ConnectionError("no route to host")

    monkeypatch.setattr(feed_reader.requests, "get", _failing_get)

    with pytest.raises(FeedUnreachableError):
        read_feed_text("http://example.com/feed.csv", TaskPulseConfig(feed_uri=None))

    assert True


def test_read_feed_text_reads_s3_object(monkeypatch: pytest.MonkeyPatch) -> None:
    """S3 feeds download a single object through the boto3 client."""

    class _Body:
        def read(self) -> bytes:
            return "Unique Id,Task\nT-1,Ship\n".encode("utf-8")

    class _Client:
        def get_object(self, Bucket: str, Key: str) -> dict[str, object]:
            assert (Bucket, Key) == ("ops-bucket", "exports/tasks.csv")
            return {"Body": _Body()}

    monkeypatch.setattr(feed_reader, "_create_s3_client", lambda config: _Client())

    text = read_feed_text("s3://ops-bucket/exports/tasks.csv", TaskPulseConfig(feed_uri=None))

    assert text == "Unique Id,Task\nT-1,Ship\n"


def test_read_feed_text_rejects_s3_uri_without_key() -> None:
    """S3 feed URIs need both bucket and key."""
    with pytest.raises(FeedUnreachableError):
        read_feed_text("s3://ops-bucket", TaskPulseConfig(feed_uri=None))

    assert True
