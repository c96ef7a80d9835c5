"""Tests for JSON report formatter."""

from __future__ import annotations

import json

from license_check import __version__
from license_check.models.coordinate import PackageCoordinate
from license_check.models.outcome import (
    DependencyOutcome,
    EvaluationReport,
    OutcomeStatus,
)
from license_check.output.report_json import ReportJsonFormatter


def _report() -> EvaluationReport:
    return EvaluationReport.from_outcomes(
        [
            DependencyOutcome(
                coordinate=PackageCoordinate.parse("junit:junit:4.13.2"),
                status=OutcomeStatus.RESOLVED,
                code="epl-1.0",
                license_name="Eclipse Public License 1.0",
            ),
            DependencyOutcome(
                coordinate=PackageCoordinate.parse("g:missing:1"),
                status=OutcomeStatus.UNRESOLVED,
            ),
        ]
    )


class TestReportJsonFormatter:
    """Tests for ReportJsonFormatter."""

    def test_structure(self) -> None:
        """Test the top-level structure and metadata."""
        data = json.loads(ReportJsonFormatter().format_report(_report()))
        assert set(data) == {"metadata", "summary", "dependencies"}
        assert data["metadata"]["tool_version"] == __version__
        assert data["metadata"]["generated_at"].endswith("Z")

    def test_summary(self) -> None:
        """Test the summary counts and verdict."""
        summary = json.loads(ReportJsonFormatter().format_report(_report()))["summary"]
        assert summary == {
            "total": 2,
            "resolved": 1,
            "unresolved": 1,
            "denied": 0,
            "skipped": 0,
            "failed": True,
            "overall_status": "FAIL",
        }

    def test_dependencies(self) -> None:
        """Test per-dependency entries in evaluation order."""
        dependencies = json.loads(ReportJsonFormatter().format_report(_report()))["dependencies"]
        assert [d["coordinate"] for d in dependencies] == ["junit:junit:4.13.2", "g:missing:1"]
        assert dependencies[0] == {
            "coordinate": "junit:junit:4.13.2",
            "group_id": "junit",
            "artifact_id": "junit",
            "version": "4.13.2",
            "status": "resolved",
            "code": "epl-1.0",
            "license_name": "Eclipse Public License 1.0",
            "outcome": "resolved: epl-1.0",
        }
        assert dependencies[1]["code"] is None
        assert dependencies[1]["outcome"] == "unresolved"

    def test_empty_report(self) -> None:
        """Test an empty report."""
        data = json.loads(ReportJsonFormatter().format_report(EvaluationReport.from_outcomes([])))
        assert data["dependencies"] == []
        assert data["summary"]["overall_status"] == "PASS"
