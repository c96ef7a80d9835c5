"""CLI entry point for license-check."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Literal, cast

import click
from rich.console import Console
from rich.table import Table

from license_check import __version__
from license_check.analysis.classifier import LicenseClassifier
from license_check.analysis.evaluation import evaluate
from license_check.config import CheckConfig, apply_overrides, load_config
from license_check.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from license_check.exceptions import (
    ConfigurationError,
    LicenseCheckError,
    LicenseCheckFailure,
)
from license_check.logging import configure_logging
from license_check.models.coordinate import PackageCoordinate
from license_check.models.options import CheckOptions, Verbosity
from license_check.models.outcome import EvaluationReport
from license_check.output.report_json import ReportJsonFormatter
from license_check.output.report_markdown import ReportMarkdownFormatter
from license_check.output.terminal import TerminalFormatter
from license_check.resolvers.base import ChainedFetcher, MetadataFetcher
from license_check.resolvers.dependency import (
    parse_coordinates,
    read_coordinates_file,
    read_project_dependencies,
)
from license_check.resolvers.license import LicenseResolver
from license_check.resolvers.local import (
    DEFAULT_LOCAL_REPOSITORY,
    LocalRepositoryFetcher,
)
from license_check.resolvers.remote import RemoteRepositoryFetcher

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Maven License Check - Verify the licenses of your dependencies.

    Finds the license each dependency declares in its POM (following
    parent POMs when needed), classifies it into a license code, and
    fails when a license cannot be verified or is on your deny list.

    \b
    Examples:
        license-check check
        license-check check --pom path/to/pom.xml --deny gpl-3.0
        license-check check junit:junit:4.13.2
        license-check rules
        license-check classify "Apache License, Version 2.0"
    """
    pass


@main.command()
@click.argument("coordinates", nargs=-1)
@click.option(
    "--pom",
    "pom_path",
    type=click.Path(dir_okay=False),
    default="pom.xml",
    show_default=True,
    help="Project POM whose dependencies are checked.",
)
@click.option(
    "--coordinates-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="File listing coordinates to check, one per line.",
)
@click.option(
    "--exclude",
    "excludes",
    multiple=True,
    help="Coordinate (group:artifact:version) to skip. Repeatable.",
)
@click.option(
    "--deny",
    "deny_list",
    multiple=True,
    help="License code that fails the check, e.g. gpl-3.0. Repeatable.",
)
@click.option(
    "--max-depth",
    "max_search_depth",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of parent POMs to search (default: 12).",
)
@click.option(
    "--repository",
    "repositories",
    multiple=True,
    help="Remote repository base URL. Repeatable; replaces configured ones.",
)
@click.option(
    "--local-repository",
    type=click.Path(file_okay=False),
    default=None,
    help="Local repository directory (default: ~/.m2/repository).",
)
@click.option(
    "--offline",
    is_flag=True,
    default=False,
    help="Only read POMs from the local repository.",
)
@click.option(
    "--rules-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Extra license rule table, checked before the bundled rules.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "markdown", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for the report (default: terminal).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write report to file instead of stdout.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show declared license names and debug logging.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Show only the verdict and failing dependencies.",
)
@click.option(
    "--json-log",
    is_flag=True,
    default=False,
    help="Write log messages to stderr as JSON.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
def check(
    coordinates: tuple[str, ...],
    pom_path: str,
    coordinates_file: str | None,
    excludes: tuple[str, ...],
    deny_list: tuple[str, ...],
    max_search_depth: int | None,
    repositories: tuple[str, ...],
    local_repository: str | None,
    offline: bool,
    rules_file: str | None,
    output_format: str,
    output_path: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
    json_log: bool,
    config_path: str | None,
) -> None:
    """Check the licenses of a project's dependencies.

    Dependencies are taken from COORDINATES if given, otherwise from
    --coordinates-file, otherwise from the <dependencies> of --pom.

    \b
    Examples:
        license-check check
        license-check check --deny gpl-3.0 --deny agpl-3.0
        license-check check --exclude com.example:internal:1.0
        license-check check org.slf4j:slf4j-api:2.0.9 --format json
        license-check check --offline --local-repository ~/.m2/repository
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    if quiet_flag:
        verbosity = Verbosity.QUIET
    elif verbose_flag:
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Verbosity.NORMAL

    format_value = cast(Literal["terminal", "markdown", "json"], output_format.lower())
    options = CheckOptions(format=format_value, verbosity=verbosity)

    # Warnings and errors only, unless asked for more
    configure_logging(verbose=verbose_flag, quiet=not verbose_flag, json_log=json_log)

    try:
        config = apply_overrides(
            load_config(config_path),
            excludes=excludes,
            deny_list=deny_list,
            max_search_depth=max_search_depth,
            repositories=repositories,
            local_repository=local_repository,
            offline=True if offline else None,
            rules_file=rules_file,
        )
        dependencies = _collect_dependencies(
            coordinates, coordinates_file, pom_path, config
        )
        report = _run_check(dependencies, options, config)
        _display_report(report, options, output_path)
        report.raise_for_failure()
        sys.exit(EXIT_SUCCESS)

    except LicenseCheckFailure as e:
        _display_error(e, options.format)
        sys.exit(EXIT_ISSUES)

    except LicenseCheckError as e:
        _display_error(e, options.format)
        sys.exit(EXIT_ERROR)


@main.command()
@click.option(
    "--rules-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Extra license rule table, listed before the bundled rules.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
def rules(rules_file: str | None, config_path: str | None) -> None:
    """List the license rules in evaluation order.

    The first rule whose pattern matches a license name decides its code.
    """
    try:
        config = apply_overrides(load_config(config_path), rules_file=rules_file)
        classifier = LicenseClassifier.default(config.rules_file)
    except LicenseCheckError as e:
        _display_error(e, "terminal")
        sys.exit(EXIT_ERROR)

    table = Table(title="License Rules")
    table.add_column("#", justify="right")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("License")
    table.add_column("Pattern", style="magenta")
    for index, rule in enumerate(classifier.rules, start=1):
        table.add_row(str(index), rule.code, rule.display_name, rule.pattern)
    _console.print(table)


@main.command()
@click.argument("names", nargs=-1, required=True)
@click.option(
    "--rules-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Extra license rule table, checked before the bundled rules.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
def classify(
    names: tuple[str, ...], rules_file: str | None, config_path: str | None
) -> None:
    """Classify license names into license codes.

    \b
    Examples:
        license-check classify "Apache License, Version 2.0"
        license-check classify "The MIT License" "GPLv3"
    """
    try:
        config = apply_overrides(load_config(config_path), rules_file=rules_file)
        classifier = LicenseClassifier.default(config.rules_file)
    except LicenseCheckError as e:
        _display_error(e, "terminal")
        sys.exit(EXIT_ERROR)

    unresolved = 0
    for name in names:
        code = classifier.classify(name)
        if code is None:
            unresolved += 1
            click.echo(f"{name}: unresolved")
        else:
            click.echo(f"{name}: {code}")

    sys.exit(EXIT_ISSUES if unresolved else EXIT_SUCCESS)


def _collect_dependencies(
    coordinates: tuple[str, ...],
    coordinates_file: str | None,
    pom_path: str,
    config: CheckConfig,
) -> list[PackageCoordinate]:
    """Determine which dependencies to check.

    Args:
        coordinates: Coordinates given on the command line.
        coordinates_file: Optional file listing coordinates.
        pom_path: Project POM to read when no coordinates are given.
        config: Effective configuration (for scope filtering).

    Returns:
        Dependencies in the order they should be evaluated.

    Raises:
        ConfigurationError: If a coordinate or the project POM is invalid.
    """
    if coordinates:
        return parse_coordinates(coordinates)
    if coordinates_file is not None:
        return read_coordinates_file(Path(coordinates_file))
    return read_project_dependencies(Path(pom_path), config.scopes)


@contextmanager
def _open_fetcher(config: CheckConfig) -> Iterator[MetadataFetcher]:
    """Build the metadata fetcher described by the configuration.

    The local repository is searched first, then each remote repository
    unless running offline.

    Args:
        config: Effective configuration.

    Yields:
        The fetcher; its HTTP client is closed on exit.
    """
    local_root = (
        Path(config.local_repository).expanduser()
        if config.local_repository is not None
        else DEFAULT_LOCAL_REPOSITORY
    )
    local = LocalRepositoryFetcher(local_root)

    if config.offline:
        yield local
        return

    with RemoteRepositoryFetcher(config.repositories, timeout=config.timeout) as remote:
        if local_root.is_dir():
            yield ChainedFetcher(local, remote)
        else:
            yield remote


def _run_check(
    dependencies: list[PackageCoordinate],
    options: CheckOptions,
    config: CheckConfig,
) -> EvaluationReport:
    """Execute the license check.

    Args:
        dependencies: Dependencies to evaluate.
        options: Output options (progress is shown for terminal output).
        config: Effective configuration.

    Returns:
        EvaluationReport with every dependency's outcome.

    Raises:
        RuleTableError: If a rule table is malformed.
    """
    classifier = LicenseClassifier.default(config.rules_file)

    show_progress = (
        options.format == "terminal" and options.verbosity != Verbosity.QUIET
    )

    with _open_fetcher(config) as fetcher:
        resolver = LicenseResolver(fetcher, config.max_search_depth)
        return evaluate(
            dependencies,
            resolver,
            classifier,
            excludes=config.excludes,
            deny_list=config.deny_list,
            console=_console if show_progress else None,
            show_progress=show_progress,
        )


def _write_output_to_file(content: str, path: str) -> None:
    """Write report content to file.

    Args:
        content: The report content to write.
        path: The file path to write to.

    Raises:
        ConfigurationError: If file cannot be written.
    """
    file_path = Path(path)

    try:
        if file_path.exists():
            _console.print(
                f"[yellow]Warning: Overwriting existing file: {path}[/yellow]"
            )

        file_path.write_text(content, encoding="utf-8")
        file_path.chmod(0o644)
    except (OSError, PermissionError) as e:
        raise ConfigurationError(f"Cannot write to file '{path}': {e}") from e

    _console.print(f"[green]Report written to {path}[/green]")


def _display_report(
    report: EvaluationReport, options: CheckOptions, output_path: str | None = None
) -> None:
    """Display the report in the specified format.

    Args:
        report: The report to display.
        options: Check options including format.
        output_path: Optional file path to write output to.
    """
    if options.format == "json":
        content = ReportJsonFormatter().format_report(report)
    elif options.format == "markdown":
        content = ReportMarkdownFormatter().format_report(report)
    else:  # terminal
        if output_path:
            # Terminal format to file uses markdown instead
            content = ReportMarkdownFormatter().format_report(report)
        else:
            TerminalFormatter(
                console=_console, verbosity=options.verbosity
            ).format_report(report)
            return

    if output_path:
        _write_output_to_file(content, output_path)
    else:
        click.echo(content)


def _display_error(error: LicenseCheckError, format_type: str) -> None:
    """Display error message to user.

    All errors are written to stderr for consistent CI/CD behavior.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    error_type = type(error).__name__
    message = f"Error: {error_type}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{message}[/red bold]")
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
