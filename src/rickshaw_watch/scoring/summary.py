"""Reviewer-facing summary text for a risk tier."""
from __future__ import annotations

from ..models.risk import RiskLevel

SUMMARIES = {
    RiskLevel.HIGH: "High risk: Multiple concerns detected. Requires careful review.",
    RiskLevel.MEDIUM: "Medium risk: Some concerns detected. Recommend additional verification.",
    RiskLevel.LOW: "Low risk: Report appears legitimate. Standard verification recommended.",
}


def detection_summary(risk_level: RiskLevel | str) -> str:
    return SUMMARIES[RiskLevel(risk_level)]
