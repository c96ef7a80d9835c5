"""JSON output formatter for license check reports."""
import json
from datetime import datetime, timezone
from typing import Any

from license_check import __version__
from license_check.constants import ABOUT_TEXT
from license_check.models.outcome import EvaluationReport


class ReportJsonFormatter:
    """Format evaluation reports as JSON output.

    Provides a structured representation of the report for programmatic
    processing and CI/CD integration. Dependencies keep evaluation order.
    """

    def format_report(self, report: EvaluationReport) -> str:
        """Format an evaluation report as a JSON string.

        Args:
            report: The report to format.

        Returns:
            JSON string representation of the report.
        """
        output = {
            "metadata": self._build_metadata(),
            "summary": self._build_summary(report),
            "dependencies": self._build_dependencies(report),
        }
        return json.dumps(output, indent=2)

    def _build_metadata(self) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
            "about": ABOUT_TEXT,
        }

    def _build_summary(self, report: EvaluationReport) -> dict[str, Any]:
        return {
            "total": report.total_count,
            "resolved": report.resolved_count,
            "unresolved": report.unresolved_count,
            "denied": report.denied_count,
            "skipped": report.skipped_count,
            "failed": report.failed,
            "overall_status": "FAIL" if report.failed else "PASS",
        }

    def _build_dependencies(self, report: EvaluationReport) -> list[dict[str, Any]]:
        return [
            {
                "coordinate": str(outcome.coordinate),
                "group_id": outcome.coordinate.group_id,
                "artifact_id": outcome.coordinate.artifact_id,
                "version": outcome.coordinate.version,
                "status": outcome.status.value,
                "code": outcome.code,
                "license_name": outcome.license_name,
                "outcome": outcome.describe(),
            }
            for outcome in report.outcomes
        ]
