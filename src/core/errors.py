"""TaskPulse exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class TaskPulseError(Exception):
    """Base exception for all TaskPulse failures."""


class TaskPulseConfigError(TaskPulseError):
    """Raised for invalid runtime configuration."""


class FeedUnreachableError(TaskPulseError):
    """Raised when the task feed cannot be fetched."""


class TaskPulseQueryError(TaskPulseError):
    """Raised for invalid sort, filter, or pagination input."""


class TaskPulseViewSpecError(TaskPulseError):
    """Raised for invalid or unreadable YAML view files."""


class TaskPulseExportError(TaskPulseError):
    """Raised when exporting tasks to disk fails."""


class TaskPulseDependencyError(TaskPulseError):
    """Raised when an optional runtime dependency is missing."""
