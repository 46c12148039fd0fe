"""Report storage interface and an in-memory implementation.

Durable storage is provided by the deployment; anything implementing
``ReportStore`` can back the review workflow. ``InMemoryReportStore`` is
the reference implementation used by the CLI and the tests.
"""
from __future__ import annotations

import threading
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable

import structlog

from ..exceptions import InvalidStatus, ReportNotFound
from ..models.report import Report, ReportStatus
from ..utils.plates import normalize_plate

logger = structlog.get_logger(__name__)


@runtime_checkable
class ReportStore(Protocol):
    """Protocol defining the storage operations the review workflow needs."""

    def save(self, report: Report) -> Report:
        """Persist a report, assigning an id when it has none.

        Returns:
            The stored report
        """
        ...

    def get(self, report_id: str) -> Report | None:
        """Return a report by id, or None if unknown."""
        ...

    def list(
        self,
        status: ReportStatus | str | None = None,
        location: str | None = None,
        vehicle_number: str | None = None,
    ) -> list[Report]:
        """Return reports matching all given filters, newest first."""
        ...

    def update_status(self, report_id: str, status: ReportStatus | str) -> Report:
        """Move a report to a new review state.

        Raises:
            ReportNotFound: If the id is unknown
            InvalidStatus: If ``status`` is not a review state
        """
        ...


def parse_status(status: ReportStatus | str) -> ReportStatus:
    try:
        return ReportStatus(status)
    except ValueError as e:
        raise InvalidStatus(str(status)) from e


class InMemoryReportStore:
    """Thread-safe dict-backed report store."""

    def __init__(self, reports: list[Report] | None = None):
        self._lock = threading.Lock()
        self._reports: dict[str, Report] = {}
        self._counter = 0
        for report in reports or []:
            self.save(report)

    def _next_id(self) -> str:
        self._counter += 1
        return f"R{self._counter:03d}"

    def save(self, report: Report) -> Report:
        with self._lock:
            if not report.id:
                report = report.model_copy(update={"id": self._next_id()})
            self._reports[report.id] = report
        logger.info(
            "report_saved",
            report_id=report.id,
            vehicle_number=report.vehicle_number,
            credibility_score=report.credibility_score,
            is_flagged=report.is_flagged,
        )
        return report

    def get(self, report_id: str) -> Report | None:
        with self._lock:
            return self._reports.get(report_id)

    def list(
        self,
        status: ReportStatus | str | None = None,
        location: str | None = None,
        vehicle_number: str | None = None,
    ) -> list[Report]:
        wanted_status = parse_status(status) if status else None
        wanted_location = location.lower() if location else None
        wanted_plate = normalize_plate(vehicle_number) if vehicle_number else None

        with self._lock:
            reports = list(self._reports.values())

        if wanted_status is not None:
            reports = [r for r in reports if r.status == wanted_status]
        if wanted_location:
            reports = [r for r in reports if wanted_location in r.location.lower()]
        if wanted_plate:
            reports = [r for r in reports if normalize_plate(r.vehicle_number) == wanted_plate]

        return sorted(reports, key=lambda r: (r.created_at, r.id), reverse=True)

    def update_status(self, report_id: str, status: ReportStatus | str) -> Report:
        new_status = parse_status(status)
        with self._lock:
            current = self._reports.get(report_id)
            if current is None:
                raise ReportNotFound(report_id)
            updated = current.with_status(new_status, at=datetime.now(UTC))
            self._reports[report_id] = updated

        logger.info(
            "report_status_updated",
            report_id=report_id,
            old_status=current.status.value,
            new_status=new_status.value,
        )
        return updated

    def __len__(self) -> int:
        with self._lock:
            return len(self._reports)
