"""Pydantic data models."""

from .content import AnalysisDetails, AnalysisResult, ReportContent
from .credibility import BASE_SCORE, CredibilityResult, ScoringInput
from .report import Report, ReportStatus
from .risk import RiskLevel, confidence_risk_level, credibility_risk_level

__all__ = [
    "AnalysisDetails",
    "AnalysisResult",
    "ReportContent",
    "BASE_SCORE",
    "CredibilityResult",
    "ScoringInput",
    "Report",
    "ReportStatus",
    "RiskLevel",
    "confidence_risk_level",
    "credibility_risk_level",
]
