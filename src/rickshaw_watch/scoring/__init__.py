"""Credibility scoring and content analysis."""

from .content import ContentAnalyzer, analyze
from .credibility import score
from .matchers import (
    DEFAULT_ISSUES,
    DEFAULT_LOCATIONS,
    AllowListMatcher,
    AllowLists,
    TermMatcher,
    load_allow_lists,
)
from .summary import detection_summary

__all__ = [
    "ContentAnalyzer",
    "analyze",
    "score",
    "DEFAULT_ISSUES",
    "DEFAULT_LOCATIONS",
    "AllowListMatcher",
    "AllowLists",
    "TermMatcher",
    "load_allow_lists",
    "detection_summary",
]
