"""Value objects for report content analysis."""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .risk import RiskLevel


class ReportContent(BaseModel):
    """Free-text and categorical fields of a report."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    vehicle_number: str = ""
    location: str = ""
    issue: str = ""
    description: str = ""
    reporter_name: str | None = None
    submitted_at: datetime | None = None


class AnalysisDetails(BaseModel):
    """Per-dimension sub-scores. Nominally 0-100 but not floored."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    description_quality: int
    location_validity: int
    issue_relevance: int
    timing_pattern: int
    reporter_behavior: int


class AnalysisResult(BaseModel):
    """Weighted confidence, risk tier and flags for a report's content."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    confidence: int = Field(ge=0, le=100)
    flags: tuple[str, ...] = ()
    risk_level: RiskLevel
    details: AnalysisDetails
