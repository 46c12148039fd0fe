"""Value objects for submission-metadata credibility scoring."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .risk import RiskLevel

BASE_SCORE = 50


class ScoringInput(BaseModel):
    """Structured signals about a single report submission.

    Every field defaults to a falsy/zero value, which contributes no points.
    Values are deliberately unconstrained: callers own well-formedness.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    vehicle_number_provided: bool = False
    has_images: bool = False
    image_count: int = 0
    has_gps: bool = Field(default=False, alias="hasGPS")
    is_anonymous: bool = False
    description_length: int = 0
    is_duplicate_image: bool = False
    is_stock_image: bool = False
    same_source_reported_recently: bool = Field(
        default=False, description="Same device/IP reported within the recent window"
    )
    geolocation_anomaly: bool = False
    report_velocity: float = Field(
        default=0.0, description="Reports for this vehicle in the recent window"
    )
    submitted_hour: int = Field(default=0, description="Local hour of submission, 0-23")


class CredibilityResult(BaseModel):
    """Outcome of credibility scoring for one submission."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    base_score: int = BASE_SCORE
    added_points: int
    subtracted_points: int
    final_score: int = Field(ge=0, le=100)
    flags: tuple[str, ...] = ()
    risk_level: RiskLevel
    should_auto_verify: bool
    should_auto_hide: bool
