"""Exceptions raised outside the pure scoring core."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class RickshawWatchError(Exception):
    """Base class for all Rickshaw Watch errors."""


@dataclass
class AllowListConfigError(RickshawWatchError):
    """Raised when an allow-list file cannot be read or parsed."""

    path: Path | str
    reason: str

    def __str__(self) -> str:  # pragma: no cover - human readable
        return f"Invalid allow-list file {self.path}: {self.reason}"


@dataclass
class ReportNotFound(RickshawWatchError):
    """Raised when a report id is unknown to the store."""

    report_id: str

    def __str__(self) -> str:  # pragma: no cover - human readable
        return f"Report not found: {self.report_id}"


@dataclass
class InvalidStatus(RickshawWatchError):
    """Raised when a status string is not one of the review workflow states."""

    status: str

    def __str__(self) -> str:  # pragma: no cover - human readable
        return f"Invalid report status: {self.status!r}"
