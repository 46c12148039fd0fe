"""Risk tiers and the score thresholds that select them."""
from __future__ import annotations

from enum import Enum

# Credibility: below 30 is high risk, below 70 medium
CREDIBILITY_HIGH_RISK_BELOW = 30
CREDIBILITY_MEDIUM_RISK_BELOW = 70

# Content confidence: below 50 is high risk, below 70 medium
CONFIDENCE_HIGH_RISK_BELOW = 50
CONFIDENCE_MEDIUM_RISK_BELOW = 70


class RiskLevel(str, Enum):
    """Risk tier assigned to a report."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return {"low": 0, "medium": 1, "high": 2}[self.value]


def tier_for(score: int, high_below: int, medium_below: int) -> RiskLevel:
    """Map a score onto a risk tier using exclusive upper thresholds."""
    if score < high_below:
        return RiskLevel.HIGH
    if score < medium_below:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def credibility_risk_level(final_score: int) -> RiskLevel:
    return tier_for(final_score, CREDIBILITY_HIGH_RISK_BELOW, CREDIBILITY_MEDIUM_RISK_BELOW)


def confidence_risk_level(confidence: int) -> RiskLevel:
    return tier_for(confidence, CONFIDENCE_HIGH_RISK_BELOW, CONFIDENCE_MEDIUM_RISK_BELOW)


def worst(*levels: RiskLevel) -> RiskLevel:
    """Return the highest-risk tier among ``levels``."""
    return max(levels, key=lambda level: level.rank)
