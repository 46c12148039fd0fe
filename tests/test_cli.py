"""Tests for the command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from rickshaw_watch.cli import app

runner = CliRunner()


def write_json(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data))
    return path


@pytest.fixture(autouse=True)
def no_allow_list_env(monkeypatch):
    monkeypatch.delenv("RICKSHAW_ALLOW_LISTS", raising=False)
    monkeypatch.delenv("RICKSHAW_TIMEZONE", raising=False)


def test_score_json(tmp_path: Path) -> None:
    path = write_json(
        tmp_path / "signals.json",
        {"isAnonymous": True, "isDuplicateImage": True, "isStockImage": True, "submittedHour": 3},
    )
    result = runner.invoke(app, ["score", str(path), "--json"], catch_exceptions=False)
    assert result.exit_code == 0

    data = json.loads(result.stdout)
    assert data["finalScore"] == 10
    assert data["riskLevel"] == "high"
    assert data["flags"] == [
        "Duplicate image detected",
        "Stock/internet image detected",
        "Report submitted during odd hours",
    ]
    assert data["shouldAutoHide"] is True


def test_score_table(tmp_path: Path) -> None:
    path = write_json(tmp_path / "signals.json", {"hasGPS": True})
    result = runner.invoke(app, ["score", str(path)])
    assert result.exit_code == 0
    assert "Credibility" in result.stdout
    assert "LOW" in result.stdout


def test_analyze_with_fixed_now(tmp_path: Path) -> None:
    path = write_json(
        tmp_path / "content.json",
        {
            "vehicleNumber": "BAD123",
            "location": "Unknown Place",
            "issue": "Random",
            "description": "Bad driver",
            "submittedAt": "2025-03-14T12:00:00+00:00",
        },
    )
    result = runner.invoke(app, ["analyze", str(path), "--now", "2025-03-14T12:00:00+00:00", "--json"])
    assert result.exit_code == 0

    data = json.loads(result.stdout)
    assert data["confidence"] == 45
    assert data["riskLevel"] == "high"
    assert data["details"]["issueRelevance"] == 25
    assert len(data["flags"]) == 4


def test_analyze_with_custom_allow_lists(tmp_path: Path) -> None:
    lists = tmp_path / "lists.yaml"
    lists.write_text("locations: [Koramangala]\nissues: [Overcharging]\n")
    path = write_json(
        tmp_path / "content.json",
        {"vehicleNumber": "KA01AB1234", "location": "Koramangala", "issue": "Overcharging", "description": "x"},
    )
    result = runner.invoke(app, ["analyze", str(path), "--allow-lists", str(lists), "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["details"]["locationValidity"] == 90


def test_evaluate(tmp_path: Path) -> None:
    path = write_json(
        tmp_path / "submission.json",
        {
            "vehicleNumber": "MH 02 AB 1234",
            "location": "Andheri East",
            "latitude": 19.11,
            "longitude": 72.87,
            "issue": "Rash Driving",
            "description": "Driver refused the meter " * 4,
            "imageCount": 2,
            "isAnonymous": True,
            "submittedAt": "2025-03-14T06:30:00+00:00",
        },
    )
    result = runner.invoke(app, ["evaluate", str(path), "--now", "2025-03-14T12:00:00+00:00", "--json"])
    assert result.exit_code == 0

    data = json.loads(result.stdout)
    assert data["credibility"]["finalScore"] == 100
    assert data["analysis"]["details"]["timingPattern"] == 85
    assert data["riskLevel"] == "low"
    assert data["rtoJurisdiction"] == "Andheri RTO"
    assert data["isFlagged"] is False


def test_allow_lists_command() -> None:
    result = runner.invoke(app, ["allow-lists"])
    assert result.exit_code == 0
    assert "Bandra" in result.stdout
    assert "Overcharging" in result.stdout


def test_invalid_json_exits_1(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    result = runner.invoke(app, ["score", str(path)])
    assert result.exit_code == 1
    assert "not valid JSON" in result.stdout


def test_schema_mismatch_exits_1(tmp_path: Path) -> None:
    path = write_json(tmp_path / "bad.json", {"imageCount": "many"})
    result = runner.invoke(app, ["score", str(path)])
    assert result.exit_code == 1
    assert "ScoringInput" in result.stdout


def test_missing_allow_list_file_exits_1(tmp_path: Path) -> None:
    path = write_json(tmp_path / "content.json", {"description": "x"})
    result = runner.invoke(app, ["analyze", str(path), "--allow-lists", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
    assert "Invalid allow-list file" in result.stdout


def test_bad_now_exits_1(tmp_path: Path) -> None:
    path = write_json(tmp_path / "content.json", {"description": "x"})
    result = runner.invoke(app, ["analyze", str(path), "--now", "yesterday"])
    assert result.exit_code == 1
