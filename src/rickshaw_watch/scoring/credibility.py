"""Credibility scoring from submission metadata.

Starts at a fixed base score, adds points for corroborating signals
(photos, GPS, a named reporter, detail) and subtracts points for fraud
signals. Every penalty contributes an explanatory flag. Fully rule-based
and explainable; the same input always yields the same result.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..models.credibility import BASE_SCORE, CredibilityResult, ScoringInput
from ..models.risk import CREDIBILITY_HIGH_RISK_BELOW, credibility_risk_level
from .numeric import clamp

AUTO_VERIFY_ABOVE = 80
VELOCITY_SPIKE_ABOVE = 10
ODD_HOURS = range(2, 6)  # 02:00-05:59


@dataclass(frozen=True)
class Rule:
    """A single scoring rule: predicate, point value and optional flag."""

    name: str
    points: int
    applies: Callable[[ScoringInput], bool]
    flag: str | None = None


BONUS_RULES: tuple[Rule, ...] = (
    Rule("photo_with_plate", 30, lambda s: s.has_images and s.vehicle_number_provided),
    Rule("gps", 25, lambda s: s.has_gps),
    Rule("named_reporter", 20, lambda s: not s.is_anonymous),
    Rule("multiple_photos", 15, lambda s: s.image_count > 1),
    Rule("detailed_description", 10, lambda s: s.description_length > 50),
)

PENALTY_RULES: tuple[Rule, ...] = (
    Rule("duplicate_image", 20, lambda s: s.is_duplicate_image, "Duplicate image detected"),
    Rule("stock_image", 15, lambda s: s.is_stock_image, "Stock/internet image detected"),
    Rule(
        "same_source",
        15,
        lambda s: s.same_source_reported_recently,
        "Multiple reports from same device recently",
    ),
    Rule("geo_anomaly", 10, lambda s: s.geolocation_anomaly, "Geolocation anomaly detected"),
    Rule(
        "velocity_spike",
        20,
        lambda s: s.report_velocity > VELOCITY_SPIKE_ABOVE,
        "Unusual spike in reports for this vehicle",
    ),
    Rule("odd_hours", 5, lambda s: s.submitted_hour in ODD_HOURS, "Report submitted during odd hours"),
)


def score(scoring_input: ScoringInput) -> CredibilityResult:
    """Compute the credibility score for a submission.

    Args:
        scoring_input: Submission signals

    Returns:
        CredibilityResult with the clamped final score, risk tier, flags in
        rule order and the auto-verify/auto-hide recommendations
    """
    added = sum(rule.points for rule in BONUS_RULES if rule.applies(scoring_input))

    subtracted = 0
    flags: list[str] = []
    for rule in PENALTY_RULES:
        if rule.applies(scoring_input):
            subtracted += rule.points
            flags.append(rule.flag)

    final_score = int(clamp(BASE_SCORE + added - subtracted))

    return CredibilityResult(
        base_score=BASE_SCORE,
        added_points=added,
        subtracted_points=subtracted,
        final_score=final_score,
        flags=tuple(flags),
        risk_level=credibility_risk_level(final_score),
        should_auto_verify=final_score > AUTO_VERIFY_ABOVE and scoring_input.has_images,
        should_auto_hide=final_score < CREDIBILITY_HIGH_RISK_BELOW,
    )
