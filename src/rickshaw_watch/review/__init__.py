"""Review workflow: submission evaluation, storage and statistics."""

from .evaluator import (
    ReportEvaluation,
    ReportEvaluator,
    ReportSubmission,
    build_report_content,
    build_scoring_input,
    default_evaluator,
)
from .stats import ReportStatistics, VehicleSummary, compute_statistics, summarize_vehicle
from .store import InMemoryReportStore, ReportStore

__all__ = [
    "ReportEvaluation",
    "ReportEvaluator",
    "ReportSubmission",
    "build_report_content",
    "build_scoring_input",
    "default_evaluator",
    "ReportStatistics",
    "VehicleSummary",
    "compute_statistics",
    "summarize_vehicle",
    "InMemoryReportStore",
    "ReportStore",
]
