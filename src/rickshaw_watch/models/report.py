"""Stored report records and the review workflow states."""
from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .risk import RiskLevel


class ReportStatus(str, Enum):
    """State of a report in the admin review workflow."""

    PENDING = "pending"  # Awaiting review
    REVIEWING = "reviewing"  # Picked up by an admin
    RESOLVED = "resolved"  # Verified and acted upon
    INVALID = "invalid"  # Rejected as fake or unusable


class Report(BaseModel):
    """A submitted report together with the scores assigned at submission.

    Records are immutable; status changes produce a new instance.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default="", description="Assigned by the store on save")
    vehicle_number: str
    location: str = ""
    latitude: float | None = None
    longitude: float | None = None
    issue: str = ""
    description: str = ""
    is_anonymous: bool = True
    reporter_name: str | None = None
    reporter_contact: str | None = None
    rto_jurisdiction: str = "General RTO"

    credibility_score: int = Field(default=0, ge=0, le=100)
    confidence: int = Field(default=0, ge=0, le=100)
    risk_level: RiskLevel = RiskLevel.MEDIUM
    flags: tuple[str, ...] = ()
    is_flagged: bool = False

    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    def with_status(self, status: ReportStatus, at: datetime | None = None) -> Report:
        """Return a copy in ``status``."""
        return self.model_copy(
            update={"status": status, "updated_at": at or datetime.now(UTC)}
        )
