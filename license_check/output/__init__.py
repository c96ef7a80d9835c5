"""Output formatters for license-check."""

from license_check.output.report_json import ReportJsonFormatter
from license_check.output.report_markdown import ReportMarkdownFormatter
from license_check.output.terminal import TerminalFormatter

__all__ = [
    "ReportJsonFormatter",
    "ReportMarkdownFormatter",
    "TerminalFormatter",
]
