"""Feed document readers for ingestion.

This module loads the complete task feed as text from a local path,
an HTTP(S) URL, or an S3 object. Every failure surfaces as a
FeedUnreachableError so callers handle a single error kind.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import requests

from core.config import TaskPulseConfig
from core.errors import FeedUnreachableError, TaskPulseDependencyError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def read_feed_text(feed_uri: str, config: TaskPulseConfig) -> str:
    """Fetch the current feed document.

    Args:
        feed_uri: Local path, ``http(s)://`` URL, or ``s3://bucket/key``.
        config: Runtime configuration for timeouts and S3 sessions.

    Returns:
        Full feed text.

    Raises:
        FeedUnreachableError: If the feed cannot be fetched.
        TaskPulseDependencyError: If an S3 feed is used without boto3.
    """
    if feed_uri.startswith(("http://", "https://")):
        text = _read_http_feed(feed_uri, config.fetch_timeout_seconds)
    elif feed_uri.startswith("s3://"):
        text = _read_s3_feed(feed_uri, config)
    else:
        text = _read_local_feed(Path(feed_uri).expanduser())
    _LOGGER.info("feed_fetched", feed_uri=feed_uri, size_chars=len(text))
    return text


def _read_local_feed(feed_path: Path) -> str:
    """Read a feed from the local file system.

    Raises:
        FeedUnreachableError: If path is missing or unreadable.
    """
    if not feed_path.is_file():
        raise FeedUnreachableError(
            f"Failed to read feed at {feed_path}: file does not exist. "
            "Provide an existing CSV file or set TASKPULSE_FEED_URI."
        )
    try:
        return feed_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as error:
        raise FeedUnreachableError(
            f"Failed to read feed at {feed_path}: {error}. "
            "Check file permissions and encoding (UTF-8 expected)."
        ) from error


def _read_http_feed(feed_uri: str, timeout_seconds: float) -> str:
    """Download a feed over HTTP(S).

    Raises:
        FeedUnreachableError: On transport errors or non-success status.
    """
    try:
        response = requests.get(feed_uri, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as error:
        raise FeedUnreachableError(
            f"Failed to fetch feed from {feed_uri}: {error}. "
            "Check the URL and that the spreadsheet is shared publicly."
        ) from error
    return response.text


def _read_s3_feed(feed_uri: str, config: TaskPulseConfig) -> str:
    """Download a feed object from S3.

    Raises:
        FeedUnreachableError: If the URI is invalid or the download fails.
    """
    bucket, key = _parse_s3_object_uri(feed_uri)
    s3_client = _create_s3_client(config)
    try:
        body = s3_client.get_object(Bucket=bucket, Key=key)["Body"].read()
        return body.decode("utf-8-sig")
    except Exception as error:
        raise FeedUnreachableError(
            f"Failed to fetch feed from {feed_uri}: {error}. "
            "Check the object key and AWS credentials."
        ) from error


def _parse_s3_object_uri(feed_uri: str) -> tuple[str, str]:
    """Split ``s3://bucket/key`` into bucket and key.

    Raises:
        FeedUnreachableError: If bucket or key is missing.
    """
    stripped_uri = feed_uri.removeprefix("s3://")
    bucket, _, key = stripped_uri.partition("/")
    if not bucket or not key:
        raise FeedUnreachableError(
            f"Invalid S3 feed URI '{feed_uri}': expected s3://bucket/key. "
            "Provide both bucket and object key."
        )
    return bucket, key


def _create_s3_client(config: TaskPulseConfig) -> Any:
    """Create a boto3 S3 client.

    Args:
        config: Runtime config containing optional profile/region.

    Returns:
        Boto3 S3 client.

    Raises:
        TaskPulseDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise TaskPulseDependencyError(
            "S3 feeds require boto3, but it is not installed. "
            "Install taskpulse[s3] to read s3:// feeds."
        ) from error
    session_kwargs: dict[str, str] = {}
    if config.s3_profile:
        session_kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        session_kwargs["region_name"] = config.s3_region
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")
