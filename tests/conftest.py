"""Shared fixtures for Rickshaw Watch tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from rickshaw_watch.scoring.content import ContentAnalyzer

NOW = datetime(2025, 3, 14, 12, 0, tzinfo=UTC)


@pytest.fixture
def analyzer() -> ContentAnalyzer:
    """Analyzer with the default Mumbai allow-lists and a frozen clock."""
    return ContentAnalyzer(clock=lambda: NOW)
