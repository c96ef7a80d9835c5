"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from license_check.constants import RESULT_FAIL_MESSAGE, RESULT_PASS_MESSAGE
from license_check.models.options import Verbosity
from license_check.models.outcome import (
    DependencyOutcome,
    EvaluationReport,
    OutcomeStatus,
)

_STATUS_STYLES = {
    OutcomeStatus.RESOLVED: "green",
    OutcomeStatus.UNRESOLVED: "yellow",
    OutcomeStatus.DENIED: "red",
    OutcomeStatus.SKIPPED: "blue",
}


class TerminalFormatter:
    """Format evaluation reports for terminal display using Rich.

    Shows a summary panel, an itemized table of dependency outcomes,
    and the final RESULT line.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        verbosity: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
            verbosity: Output verbosity level.
        """
        self._console = console if console is not None else Console()
        self._verbosity = verbosity

    def format_report(self, report: EvaluationReport) -> None:
        """Format and display an evaluation report.

        Args:
            report: The report to display.
        """
        if self._verbosity == Verbosity.QUIET:
            self._print_quiet_output(report)
            return

        if report.total_count == 0:
            self._console.print("[yellow]No dependencies found[/yellow]")
            self._print_result(report)
            return

        self._print_summary(report)

        table = Table(title="Licenses Found")
        table.add_column("Dependency", style="cyan", no_wrap=True)
        if self._verbosity == Verbosity.VERBOSE:
            table.add_column("Declared License")
        table.add_column("Outcome")

        for outcome in report.outcomes:
            row = [str(outcome.coordinate)]
            if self._verbosity == Verbosity.VERBOSE:
                row.append(outcome.license_name or "[dim]none found[/dim]")
            row.append(self._styled_outcome(outcome))
            table.add_row(*row)

        self._console.print(table)
        self._print_result(report)

    @staticmethod
    def _styled_outcome(outcome: DependencyOutcome) -> str:
        style = _STATUS_STYLES[outcome.status]
        return f"[{style}]{outcome.describe()}[/{style}]"

    def _print_quiet_output(self, report: EvaluationReport) -> None:
        """Print the verdict and the failing dependencies only.

        Args:
            report: The report to display.
        """
        if report.failed:
            self._console.print(
                f"[red]FAIL[/red] - {len(report.failures())} dependency(ies) "
                "unresolved or denied"
            )
            for outcome in report.failures():
                self._console.print(
                    f"  - {outcome.coordinate}: {self._styled_outcome(outcome)}"
                )
        else:
            self._console.print(
                f"[green]PASS[/green] - All {report.total_count} dependencies checked"
            )

    def _print_summary(self, report: EvaluationReport) -> None:
        """Print summary panel.

        Args:
            report: The report to summarize.
        """
        status_color = "red" if report.failed else "green"
        status = "FAIL" if report.failed else "PASS"

        summary_lines = [
            f"Dependencies: {report.total_count}",
            f"Resolved: {report.resolved_count}",
            f"Unresolved: {report.unresolved_count}",
            f"Denied: {report.denied_count}",
        ]
        if report.skipped_count > 0:
            summary_lines.append(f"Skipped: {report.skipped_count}")
        summary_lines.extend(["", f"Status: [{status_color}]{status}[/{status_color}]"])

        panel = Panel(
            "\n".join(summary_lines),
            title="[bold]VALIDATING OPEN SOURCE LICENSES[/bold]",
            border_style=status_color,
        )
        self._console.print(panel)
        self._console.print("")

    def _print_result(self, report: EvaluationReport) -> None:
        self._console.print("")
        if report.failed:
            self._console.print(f"[bold red]{RESULT_FAIL_MESSAGE}[/bold red]")
        else:
            self._console.print(f"[bold green]{RESULT_PASS_MESSAGE}[/bold green]")
