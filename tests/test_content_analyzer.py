"""Tests for report content analysis."""

from datetime import UTC, datetime, timedelta

import pytest

from rickshaw_watch.models.content import ReportContent
from rickshaw_watch.models.risk import RiskLevel
from rickshaw_watch.scoring.content import ContentAnalyzer, analyze
from rickshaw_watch.scoring.matchers import AllowListMatcher, AllowLists

NOW = datetime(2025, 3, 14, 12, 0, tzinfo=UTC)

GOOD_DESCRIPTION = "Driver refused the meter " * 4  # 100 chars, 99 once trimmed


def content(**overrides) -> ReportContent:
    fields = dict(
        vehicle_number="MH 02 AB 1234",
        location="Near Bandra station",
        issue="Overcharging",
        description=GOOD_DESCRIPTION,
        reporter_name="Asha",
        submitted_at=NOW - timedelta(days=5),
    )
    fields.update(overrides)
    return ReportContent(**fields)


class TestOverall:
    """End-to-end confidence and flags."""

    def test_every_penalty_path(self, analyzer):
        result = analyzer.analyze(
            ReportContent(
                vehicle_number="BAD123",
                location="Unknown Place",
                issue="Random",
                description="Bad driver",
                submitted_at=NOW,
            )
        )
        assert result.flags == (
            "Description too short",
            "Location not recognized as Mumbai area",
            "Issue type not standard",
            "Invalid vehicle number format",
        )
        assert result.details.description_quality == 20
        assert result.details.location_validity == 30
        assert result.details.issue_relevance == 25
        assert result.details.timing_pattern == 85
        assert result.details.reporter_behavior == 80
        # 5 + 6 + 5 + 12.75 + 16 = 44.75
        assert result.confidence == 45
        assert result.risk_level == RiskLevel.HIGH

    def test_well_formed_report(self, analyzer):
        result = analyzer.analyze(content())
        assert result.flags == ()
        assert result.details.description_quality == 68  # 67.92
        assert result.details.location_validity == 90
        assert result.details.issue_relevance == 95
        assert result.details.timing_pattern == 70
        assert result.details.reporter_behavior == 75
        # 16.98 + 18 + 19 + 10.5 + 15 = 79.48
        assert result.confidence == 79
        assert result.risk_level == RiskLevel.LOW

    def test_confidence_rounds_half_up(self, analyzer):
        result = analyzer.analyze(
            content(description="Bad driver", location="Unknown Place", vehicle_number="MH02AB1234", reporter_name=None)
        )
        # 5 + 6 + 19 + 10.5 + 16 = 56.5
        assert result.confidence == 57
        assert result.risk_level == RiskLevel.MEDIUM
        assert result.flags == ("Description too short", "Location not recognized as Mumbai area")

    def test_analyze_is_deterministic(self, analyzer):
        report = content(description="NOOOOOOO", location="Mars")
        assert analyzer.analyze(report) == analyzer.analyze(report)

    def test_module_level_analyze_uses_explicit_now(self):
        report = content(submitted_at=NOW - timedelta(hours=2))
        assert analyze(report, now=NOW).details.timing_pattern == 85
        assert analyze(report, now=NOW + timedelta(days=40)).details.timing_pattern == 50

    @pytest.mark.parametrize(
        "description",
        ["", " ", "A", "SHOUTING ALL THE WAY!!!!!", "x" * 2000, "Paid 500 at 9:15 pm " * 40],
    )
    def test_confidence_stays_in_range(self, analyzer, description):
        for vehicle in ("", "MH02AB1234"):
            result = analyzer.analyze(content(description=description, vehicle_number=vehicle, location=""))
            assert 0 <= result.confidence <= 100
            expected = (
                RiskLevel.HIGH if result.confidence < 50
                else RiskLevel.MEDIUM if result.confidence < 70
                else RiskLevel.LOW
            )
            assert result.risk_level == expected


class TestDescriptionQuality:
    """Length bands and detail bonuses."""

    def test_minimal_description(self, analyzer):
        result = analyzer.analyze(content(description="Driver refused to go by meter"))
        assert result.details.description_quality == 50
        assert result.flags == ("Minimal description provided",)

    @pytest.mark.parametrize(
        "description,expected",
        [
            ("Fare 200", 30),  # digit
            ("Rude in the evening", 30),  # time word
            ("Paid 500 at 9:15", 40),  # digit and HH:MM
            ("A camel", 30),  # "am" matches inside words
        ],
    )
    def test_detail_bonuses(self, analyzer, description, expected):
        assert analyzer.analyze(content(description=description)).details.description_quality == expected

    def test_length_band_edges(self, analyzer):
        assert analyzer.analyze(content(description="abcd" * 125)).details.description_quality == 100
        assert analyzer.analyze(content(description="abcd" * 125 + "e")).details.description_quality == 85

    def test_capped_at_100(self, analyzer):
        description = "Driver took a long route at 9:45 pm. " * 15
        assert analyzer.analyze(content(description=description)).details.description_quality == 100

    def test_length_uses_trimmed_text(self, analyzer):
        result = analyzer.analyze(content(description="   Bad driver          "))
        assert "Description too short" in result.flags


class TestLocationAndIssue:
    """Allow-list matching and plate validation."""

    def test_location_is_case_insensitive_substring(self, analyzer):
        assert analyzer.analyze(content(location="outside ANDHERI east")).details.location_validity == 90

    def test_unknown_issue(self, analyzer):
        result = analyzer.analyze(content(issue="Loud music"))
        assert result.details.issue_relevance == 40
        assert result.flags == ("Issue type not standard",)

    def test_invalid_plate_stacks_with_unknown_issue(self, analyzer):
        result = analyzer.analyze(content(issue="Loud music", vehicle_number="MH-02-AB-1234"))
        assert result.details.issue_relevance == 25
        assert result.flags == ("Issue type not standard", "Invalid vehicle number format")

    @pytest.mark.parametrize("plate", ["MH02AB1234", "mh 02 ab 1234", "KA 01AB 0001"])
    def test_valid_plates(self, analyzer, plate):
        assert analyzer.analyze(content(vehicle_number=plate)).details.issue_relevance == 95

    def test_custom_allow_lists(self):
        lists = AllowLists(locations=("Koramangala",), issues=("Route refusal",))
        analyzer = ContentAnalyzer.from_allow_lists(lists, clock=lambda: NOW)

        result = analyzer.analyze(content(location="Koramangala 5th block", issue="Route refusal"))
        assert result.details.location_validity == 90
        assert result.details.issue_relevance == 95

        result = analyzer.analyze(content())
        assert result.details.location_validity == 30
        assert result.details.issue_relevance == 40

    def test_any_term_matcher_can_be_injected(self):
        class EverywhereMatcher:
            def matches(self, text: str) -> bool:
                return True

        analyzer = ContentAnalyzer(
            location_matcher=EverywhereMatcher(),
            issue_matcher=AllowListMatcher(["overcharging"]),
            clock=lambda: NOW,
        )
        assert analyzer.analyze(content(location="Anywhere")).details.location_validity == 90


class TestTimingPattern:
    """Time between incident and report."""

    @pytest.mark.parametrize(
        "age,expected",
        [
            (timedelta(hours=23), 85),
            (timedelta(days=1), 70),
            (timedelta(days=30), 70),
            (timedelta(days=30, seconds=1), 50),
        ],
    )
    def test_age_bands(self, analyzer, age, expected):
        assert analyzer.analyze(content(submitted_at=NOW - age)).details.timing_pattern == expected

    def test_stale_report_flag(self, analyzer):
        result = analyzer.analyze(content(submitted_at=NOW - timedelta(days=45)))
        assert result.flags == ("Report submitted more than 30 days ago",)

    def test_missing_timestamp_uses_default(self, analyzer):
        assert analyzer.analyze(content(submitted_at=None)).details.timing_pattern == 70

    def test_naive_timestamp_is_treated_as_utc(self, analyzer):
        naive = datetime(2025, 3, 14, 0, 0)
        assert analyzer.analyze(content(submitted_at=naive)).details.timing_pattern == 85

    def test_iso_string_timestamp(self, analyzer):
        report = ReportContent.model_validate(
            {
                "vehicleNumber": "MH02AB1234",
                "location": "Juhu",
                "issue": "Harassment",
                "description": GOOD_DESCRIPTION,
                "submittedAt": "2025-01-01T10:00:00Z",
            }
        )
        assert analyzer.analyze(report).details.timing_pattern == 50


class TestReporterBehavior:
    """Spam indicators in the description."""

    def test_anonymous_gets_mild_bonus(self, analyzer):
        assert analyzer.analyze(content(reporter_name=None)).details.reporter_behavior == 80
        assert analyzer.analyze(content(reporter_name="")).details.reporter_behavior == 80

    def test_excessive_capitalization(self, analyzer):
        result = analyzer.analyze(content(description="DRIVER WAS VERY RUDE TO ME", reporter_name=None))
        assert result.details.reporter_behavior == 60
        assert result.flags == ("Minimal description provided", "Excessive capitalization detected")

    def test_repeated_characters(self, analyzer):
        result = analyzer.analyze(content(description=GOOD_DESCRIPTION + "!!!!!"))
        assert result.details.reporter_behavior == 50
        assert result.flags == ("Repeated characters detected",)

    def test_four_repeats_are_fine(self, analyzer):
        result = analyzer.analyze(content(description=GOOD_DESCRIPTION + "!!!!"))
        assert result.details.reporter_behavior == 75

    def test_penalties_are_not_floored(self, analyzer):
        result = analyzer.analyze(content(description="NOOOOOOO", reporter_name="Ravi"))
        assert result.details.reporter_behavior == 30
        assert result.flags == (
            "Description too short",
            "Excessive capitalization detected",
            "Repeated characters detected",
        )

    def test_empty_description_does_not_raise(self, analyzer):
        result = analyzer.analyze(content(description=""))
        assert result.details.reporter_behavior == 75
        assert result.details.description_quality == 20
