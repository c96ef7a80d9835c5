"""Markdown output formatter for license check reports."""
from datetime import datetime, timezone

from license_check import __version__
from license_check.constants import (
    ABOUT_TEXT,
    RESULT_FAIL_MESSAGE,
    RESULT_PASS_MESSAGE,
)
from license_check.models.outcome import EvaluationReport


class ReportMarkdownFormatter:
    """Format evaluation reports as Markdown, e.g. for CI job summaries."""

    def format_report(self, report: EvaluationReport) -> str:
        """Format an evaluation report as a Markdown document.

        Args:
            report: The report to format.

        Returns:
            Markdown string representation of the report.
        """
        sections = [
            self._format_header(),
            self._format_summary(report),
            self._format_dependencies(report),
            self._format_result(report),
        ]
        return "\n\n".join(section for section in sections if section) + "\n"

    def _format_header(self) -> str:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
        return (
            "# License Check Report\n\n"
            f"Generated: {timestamp} by license-check {__version__}\n\n"
            f"> {ABOUT_TEXT}"
        )

    def _format_summary(self, report: EvaluationReport) -> str:
        status = "FAIL" if report.failed else "PASS"
        lines = [
            "## Summary",
            "",
            "| Metric | Count |",
            "|--------|-------|",
            f"| Dependencies | {report.total_count} |",
            f"| Resolved | {report.resolved_count} |",
            f"| Unresolved | {report.unresolved_count} |",
            f"| Denied | {report.denied_count} |",
            f"| Skipped | {report.skipped_count} |",
            "",
            f"**Status:** {status}",
        ]
        return "\n".join(lines)

    def _format_dependencies(self, report: EvaluationReport) -> str:
        if not report.outcomes:
            return "## Dependencies\n\nNo dependencies found."

        lines = [
            "## Dependencies",
            "",
            "| Dependency | Declared License | Outcome |",
            "|------------|------------------|---------|",
        ]
        for outcome in report.outcomes:
            name = self._escape(outcome.license_name) if outcome.license_name else "-"
            lines.append(f"| {outcome.coordinate} | {name} | {outcome.describe()} |")
        return "\n".join(lines)

    def _format_result(self, report: EvaluationReport) -> str:
        return RESULT_FAIL_MESSAGE if report.failed else RESULT_PASS_MESSAGE

    @staticmethod
    def _escape(text: str) -> str:
        return text.replace("|", "\\|")
