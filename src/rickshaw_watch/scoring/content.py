"""Heuristic content analysis for report plausibility.

Scores five independent dimensions of a report and combines them into a
weighted confidence score:

    description_quality   25%   length and concrete details (numbers, times)
    location_validity     20%   location mentions a known area
    issue_relevance       20%   recognized issue type and a well-formed plate
    timing_pattern        15%   how long after the incident it was filed
    reporter_behavior     20%   spam indicators (shouting, repeated characters)

Sub-scores are not floored; only the final confidence is clamped.
"""
from __future__ import annotations

import re
from collections.abc import Callable
from datetime import UTC, datetime

from ..models.content import AnalysisDetails, AnalysisResult, ReportContent
from ..models.risk import confidence_risk_level
from ..utils.plates import is_valid_plate
from .matchers import AllowLists, TermMatcher
from .numeric import round_half_up, to_score

Clock = Callable[[], datetime]

WEIGHTS = {
    "description_quality": 0.25,
    "location_validity": 0.20,
    "issue_relevance": 0.20,
    "timing_pattern": 0.15,
    "reporter_behavior": 0.20,
}

SHORT_DESCRIPTION_BELOW = 20
MINIMAL_DESCRIPTION_BELOW = 50
LONG_DESCRIPTION_ABOVE = 500
STALE_AFTER_DAYS = 30
FRESH_WITHIN_DAYS = 1
CAPS_RATIO_LIMIT = 0.3

_DIGIT = re.compile(r"[0-9]")
# Substring match, no word boundaries: "am"/"pm" also hit inside words
_TIME_REFERENCE = re.compile(
    r"[0-9]{1,2}:[0-9]{2}"
    r"|morning|afternoon|evening|night"
    r"|am|pm",
    re.IGNORECASE,
)
_UPPERCASE = re.compile(r"[A-Z]")
_REPEATED_CHAR = re.compile(r"(.)\1{4,}")

_SECONDS_PER_DAY = 60 * 60 * 24


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class ContentAnalyzer:
    """Scores the textual and contextual quality of a report.

    Holds only read-only configuration, so one instance can be shared
    across threads.
    """

    def __init__(
        self,
        location_matcher: TermMatcher | None = None,
        issue_matcher: TermMatcher | None = None,
        clock: Clock = _utc_now,
    ):
        defaults = AllowLists()
        self.location_matcher = location_matcher or defaults.location_matcher()
        self.issue_matcher = issue_matcher or defaults.issue_matcher()
        self.clock = clock

    @classmethod
    def from_allow_lists(cls, allow_lists: AllowLists, clock: Clock = _utc_now) -> ContentAnalyzer:
        return cls(allow_lists.location_matcher(), allow_lists.issue_matcher(), clock)

    def analyze(self, content: ReportContent, now: datetime | None = None) -> AnalysisResult:
        """Analyze a report's content.

        Args:
            content: Report fields to analyze
            now: Reference time for timing checks; defaults to the clock

        Returns:
            AnalysisResult with confidence, risk tier, flags and sub-scores
        """
        flags: list[str] = []

        description_quality = self._description_quality(content.description, flags)
        location_validity = self._location_validity(content.location, flags)
        issue_relevance = self._issue_relevance(content.issue, content.vehicle_number, flags)
        timing_pattern = self._timing_pattern(content.submitted_at, now or self.clock(), flags)
        reporter_behavior = self._reporter_behavior(content.reporter_name, content.description, flags)

        raw = (
            description_quality * WEIGHTS["description_quality"]
            + location_validity * WEIGHTS["location_validity"]
            + issue_relevance * WEIGHTS["issue_relevance"]
            + timing_pattern * WEIGHTS["timing_pattern"]
            + reporter_behavior * WEIGHTS["reporter_behavior"]
        )
        confidence = to_score(raw)

        return AnalysisResult(
            confidence=confidence,
            flags=tuple(flags),
            risk_level=confidence_risk_level(confidence),
            details=AnalysisDetails(
                description_quality=round_half_up(description_quality),
                location_validity=location_validity,
                issue_relevance=issue_relevance,
                timing_pattern=timing_pattern,
                reporter_behavior=reporter_behavior,
            ),
        )

    def _description_quality(self, description: str, flags: list[str]) -> float:
        length = len(description.strip())

        if length < SHORT_DESCRIPTION_BELOW:
            flags.append("Description too short")
            quality = 20.0
        elif length < MINIMAL_DESCRIPTION_BELOW:
            flags.append("Minimal description provided")
            quality = 50.0
        elif length > LONG_DESCRIPTION_ABOVE:
            quality = 85.0
        else:
            quality = min(100.0, 60 + (length / LONG_DESCRIPTION_ABOVE) * 40)

        # Concrete details: amounts, times of day
        if _DIGIT.search(description):
            quality += 10
        if _TIME_REFERENCE.search(description):
            quality += 10
        return min(100.0, quality)

    def _location_validity(self, location: str, flags: list[str]) -> int:
        if self.location_matcher.matches(location):
            return 90
        flags.append("Location not recognized as Mumbai area")
        return 30

    def _issue_relevance(self, issue: str, vehicle_number: str, flags: list[str]) -> int:
        if self.issue_matcher.matches(issue):
            relevance = 95
        else:
            flags.append("Issue type not standard")
            relevance = 40

        if not is_valid_plate(vehicle_number):
            flags.append("Invalid vehicle number format")
            relevance -= 15
        return relevance

    def _timing_pattern(self, submitted_at: datetime | None, now: datetime, flags: list[str]) -> int:
        if submitted_at is None:
            return 70

        days_since = (_as_utc(now) - _as_utc(submitted_at)).total_seconds() / _SECONDS_PER_DAY
        if days_since > STALE_AFTER_DAYS:
            flags.append("Report submitted more than 30 days ago")
            return 50
        if days_since < FRESH_WITHIN_DAYS:
            return 85
        return 70

    def _reporter_behavior(self, reporter_name: str | None, description: str, flags: list[str]) -> int:
        # Anonymous reporting is encouraged, not penalized
        behavior = 75 if reporter_name else 80

        if description:
            caps_ratio = len(_UPPERCASE.findall(description)) / len(description)
            if caps_ratio > CAPS_RATIO_LIMIT:
                flags.append("Excessive capitalization detected")
                behavior -= 20

        if _REPEATED_CHAR.search(description):
            flags.append("Repeated characters detected")
            behavior -= 25
        return behavior


def analyze(
    content: ReportContent,
    *,
    now: datetime | None = None,
    allow_lists: AllowLists | None = None,
) -> AnalysisResult:
    """Analyze ``content`` with the given (or default) allow-lists."""
    analyzer = ContentAnalyzer.from_allow_lists(allow_lists or AllowLists())
    return analyzer.analyze(content, now=now)
