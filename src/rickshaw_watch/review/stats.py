"""Aggregate statistics and per-vehicle summaries over stored reports."""
from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..models.report import Report, ReportStatus
from ..scoring.numeric import round_half_up
from ..utils.plates import normalize_plate, rto_jurisdiction

MAX_RECENT_ISSUES = 5


class ReportStatistics(BaseModel):
    """Dashboard totals across all reports."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    total_reports: int = 0
    verified_count: int = 0
    pending_count: int = 0
    rejected_count: int = 0
    flagged_count: int = 0
    average_confidence: int = 0
    unique_vehicles: int = 0


class VehicleSummary(BaseModel):
    """Public lookup view of one vehicle's report history."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    vehicle_number: str
    total_reports: int
    verified_reports: int
    last_reported: datetime
    rto_office: str
    recent_issues: tuple[str, ...]
    reports: tuple[Report, ...]


def compute_statistics(reports: Iterable[Report]) -> ReportStatistics:
    """Summarize a collection of reports.

    ``average_confidence`` is the mean credibility score, rounded half-up.
    """
    reports = list(reports)
    total = len(reports)
    if total == 0:
        return ReportStatistics()

    return ReportStatistics(
        total_reports=total,
        verified_count=sum(1 for r in reports if r.status == ReportStatus.RESOLVED),
        pending_count=sum(1 for r in reports if r.status == ReportStatus.PENDING),
        rejected_count=sum(1 for r in reports if r.status == ReportStatus.INVALID),
        flagged_count=sum(1 for r in reports if r.is_flagged),
        average_confidence=round_half_up(sum(r.credibility_score for r in reports) / total),
        unique_vehicles=len({normalize_plate(r.vehicle_number) for r in reports}),
    )


def summarize_vehicle(vehicle_number: str, reports: Iterable[Report]) -> VehicleSummary | None:
    """Build the public lookup summary for one vehicle.

    Args:
        vehicle_number: Plate to summarize, any spacing/case
        reports: Candidate reports; those for other vehicles are ignored

    Returns:
        VehicleSummary, or None if the vehicle has no reports
    """
    plate = normalize_plate(vehicle_number)
    matching = sorted(
        (r for r in reports if normalize_plate(r.vehicle_number) == plate),
        key=lambda r: r.created_at,
        reverse=True,
    )
    if not matching:
        return None

    recent_issues: list[str] = []
    for r in matching:
        if r.issue and r.issue not in recent_issues:
            recent_issues.append(r.issue)

    return VehicleSummary(
        vehicle_number=plate,
        total_reports=len(matching),
        verified_reports=sum(1 for r in matching if r.status == ReportStatus.RESOLVED),
        last_reported=matching[0].created_at,
        rto_office=rto_jurisdiction(plate),
        recent_issues=tuple(recent_issues[:MAX_RECENT_ISSUES]),
        reports=tuple(matching),
    )
