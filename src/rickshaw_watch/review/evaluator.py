"""Report submission evaluation.

Derives both scorer inputs from a single submission, runs the credibility
scorer and the content analyzer, and merges their results into one
evaluation the review workflow can act on.
"""
from __future__ import annotations

from datetime import UTC, datetime, tzinfo

import structlog
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..models.content import AnalysisResult, ReportContent
from ..models.credibility import CredibilityResult, ScoringInput
from ..models.report import Report, ReportStatus
from ..models.risk import RiskLevel, worst
from ..scoring.content import Clock, ContentAnalyzer
from ..scoring.credibility import score
from ..scoring.matchers import AllowLists
from ..scoring.summary import detection_summary
from ..utils.plates import rto_jurisdiction
from .store import ReportStore

logger = structlog.get_logger(__name__)


class ReportSubmission(BaseModel):
    """A citizen's report as received from the submission form.

    The detection signals (duplicate/stock image, same source, geolocation
    anomaly, velocity) are produced by external media and location services.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    vehicle_number: str = ""
    location: str = ""
    latitude: float | None = None
    longitude: float | None = None
    issue: str = ""
    description: str = ""
    image_count: int = 0
    is_anonymous: bool = True
    reporter_name: str | None = None
    reporter_contact: str | None = None
    submitted_at: datetime | None = None

    is_duplicate_image: bool = False
    is_stock_image: bool = False
    same_source_reported_recently: bool = False
    geolocation_anomaly: bool = False
    report_velocity: float = 0.0


class ReportEvaluation(BaseModel):
    """Merged outcome of both scorers for one submission."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    credibility: CredibilityResult
    analysis: AnalysisResult
    risk_level: RiskLevel
    summary: str
    rto_jurisdiction: str
    is_flagged: bool


def build_scoring_input(submission: ReportSubmission, submitted_at: datetime) -> ScoringInput:
    """Map a submission onto credibility scoring signals.

    ``submitted_at`` should already be in the reporter's local time; its hour
    drives the odd-hours check.
    """
    return ScoringInput(
        vehicle_number_provided=len(submission.vehicle_number) > 0,
        has_images=submission.image_count > 0,
        image_count=submission.image_count,
        # A zero latitude means the form never got a GPS fix
        has_gps=bool(submission.latitude),
        is_anonymous=submission.is_anonymous,
        description_length=len(submission.description),
        is_duplicate_image=submission.is_duplicate_image,
        is_stock_image=submission.is_stock_image,
        same_source_reported_recently=submission.same_source_reported_recently,
        geolocation_anomaly=submission.geolocation_anomaly,
        report_velocity=submission.report_velocity,
        submitted_hour=submitted_at.hour,
    )


def build_report_content(submission: ReportSubmission) -> ReportContent:
    """Map a submission onto content analysis fields."""
    return ReportContent(
        vehicle_number=submission.vehicle_number,
        location=submission.location,
        issue=submission.issue,
        description=submission.description,
        reporter_name=None if submission.is_anonymous else submission.reporter_name,
        submitted_at=submission.submitted_at,
    )


class ReportEvaluator:
    """Runs both scorers over a submission and optionally persists it."""

    def __init__(
        self,
        analyzer: ContentAnalyzer | None = None,
        clock: Clock | None = None,
        timezone: tzinfo | None = None,
    ):
        self.analyzer = analyzer or ContentAnalyzer()
        self.clock = clock or self.analyzer.clock
        self.timezone = timezone

    def _local(self, value: datetime) -> datetime:
        if self.timezone is None:
            return value
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(self.timezone)

    def evaluate(self, submission: ReportSubmission, now: datetime | None = None) -> ReportEvaluation:
        """Score a submission.

        Args:
            submission: The incoming report
            now: Reference time; defaults to the clock

        Returns:
            ReportEvaluation with both results, the combined risk tier and
            the reviewer summary
        """
        now = now or self.clock()
        submitted_at = submission.submitted_at or now

        credibility = score(build_scoring_input(submission, self._local(submitted_at)))
        analysis = self.analyzer.analyze(build_report_content(submission), now=now)

        risk_level = worst(credibility.risk_level, analysis.risk_level)
        evaluation = ReportEvaluation(
            credibility=credibility,
            analysis=analysis,
            risk_level=risk_level,
            summary=detection_summary(risk_level),
            rto_jurisdiction=rto_jurisdiction(submission.vehicle_number),
            is_flagged=credibility.should_auto_hide or analysis.risk_level is RiskLevel.HIGH,
        )

        logger.info(
            "report_evaluated",
            vehicle_number=submission.vehicle_number,
            credibility_score=credibility.final_score,
            confidence=analysis.confidence,
            risk_level=risk_level.value,
            flags=[*credibility.flags, *analysis.flags],
            is_flagged=evaluation.is_flagged,
        )
        return evaluation

    def submit(self, submission: ReportSubmission, store: ReportStore, now: datetime | None = None) -> Report:
        """Evaluate a submission and save it as a pending report."""
        now = now or self.clock()
        evaluation = self.evaluate(submission, now=now)
        report = Report(
            vehicle_number=submission.vehicle_number,
            location=submission.location,
            latitude=submission.latitude,
            longitude=submission.longitude,
            issue=submission.issue,
            description=submission.description,
            is_anonymous=submission.is_anonymous,
            reporter_name=None if submission.is_anonymous else submission.reporter_name,
            reporter_contact=None if submission.is_anonymous else submission.reporter_contact,
            rto_jurisdiction=evaluation.rto_jurisdiction,
            credibility_score=evaluation.credibility.final_score,
            confidence=evaluation.analysis.confidence,
            risk_level=evaluation.risk_level,
            flags=(*evaluation.credibility.flags, *evaluation.analysis.flags),
            is_flagged=evaluation.is_flagged,
            status=ReportStatus.PENDING,
            created_at=submission.submitted_at or now,
        )
        return store.save(report)


def default_evaluator(allow_lists: AllowLists | None = None) -> ReportEvaluator:
    """Evaluator configured from settings.

    Args:
        allow_lists: Overrides the configured allow-lists when given

    Returns:
        ReportEvaluator reading odd hours in ``RICKSHAW_TIMEZONE``
    """
    from zoneinfo import ZoneInfo

    from ..config import active_allow_lists, get_settings

    settings = get_settings()
    if allow_lists is None:
        allow_lists = active_allow_lists(settings)
    return ReportEvaluator(
        ContentAnalyzer.from_allow_lists(allow_lists),
        timezone=ZoneInfo(settings.timezone),
    )


__all__ = [
    "ReportSubmission",
    "ReportEvaluation",
    "ReportEvaluator",
    "build_scoring_input",
    "build_report_content",
    "default_evaluator",
]
