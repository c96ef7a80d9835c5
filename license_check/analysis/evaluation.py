"""Evaluation of a dependency set against the license policy."""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from license_check.analysis.classifier import LicenseClassifier
from license_check.analysis.policy import is_denied, is_excluded
from license_check.exceptions import LicenseCheckError
from license_check.logging import get_logger
from license_check.models.coordinate import PackageCoordinate
from license_check.models.outcome import (
    DependencyOutcome,
    EvaluationReport,
    OutcomeStatus,
)
from license_check.resolvers.license import LicenseResolver

log = get_logger(__name__)


def evaluate_dependency(
    coordinate: PackageCoordinate,
    resolver: LicenseResolver,
    classifier: LicenseClassifier,
    excludes: Iterable[str] = (),
    deny_list: Iterable[str] = (),
) -> DependencyOutcome:
    """Evaluate a single top-level dependency.

    Args:
        coordinate: The dependency to evaluate.
        resolver: Resolver used to find the license name.
        classifier: Classifier used to map the name to a code.
        excludes: Coordinates to skip (case-insensitive).
        deny_list: License codes to reject (case-insensitive).

    Returns:
        The dependency's outcome.
    """
    if is_excluded(coordinate, excludes):
        return DependencyOutcome(coordinate=coordinate, status=OutcomeStatus.SKIPPED)

    if not coordinate.has_version:
        log.warning("dependency has no known version", coordinate=str(coordinate))
        return DependencyOutcome(coordinate=coordinate, status=OutcomeStatus.UNRESOLVED)

    # The dependency's own POM must be available; only ancestors may be missing
    document = resolver.fetch(coordinate)
    if document is None:
        return DependencyOutcome(coordinate=coordinate, status=OutcomeStatus.UNRESOLVED)

    license_name = resolver.resolve_from_document(document, 0, coordinate)
    code = classifier.classify(license_name)

    if code is None:
        if license_name is not None:
            log.info(
                "license not recognized",
                coordinate=str(coordinate),
                license_name=license_name,
            )
        return DependencyOutcome(
            coordinate=coordinate,
            status=OutcomeStatus.UNRESOLVED,
            license_name=license_name,
        )

    status = OutcomeStatus.DENIED if is_denied(code, deny_list) else OutcomeStatus.RESOLVED
    return DependencyOutcome(
        coordinate=coordinate,
        status=status,
        code=code,
        license_name=license_name,
    )


def evaluate(
    dependencies: Sequence[PackageCoordinate],
    resolver: LicenseResolver,
    classifier: LicenseClassifier,
    excludes: Iterable[str] = (),
    deny_list: Iterable[str] = (),
    console: Optional[Console] = None,
    show_progress: bool = False,
) -> EvaluationReport:
    """Evaluate every dependency and aggregate the outcomes.

    Dependencies are evaluated sequentially in the given order. A failure
    never stops the run early: every dependency appears in the report.

    Args:
        dependencies: Top-level dependencies to evaluate.
        resolver: Resolver used to find license names.
        classifier: Classifier used to map names to codes.
        excludes: Coordinates to skip (case-insensitive).
        deny_list: License codes to reject (case-insensitive).
        console: Optional Rich Console for progress display.
        show_progress: Whether to show a progress indicator.

    Returns:
        EvaluationReport with one outcome per dependency and the verdict.
    """
    excludes = list(excludes)
    deny_list = list(deny_list)

    def evaluate_one(coordinate: PackageCoordinate) -> DependencyOutcome:
        try:
            outcome = evaluate_dependency(
                coordinate, resolver, classifier, excludes, deny_list
            )
        except LicenseCheckError as e:
            log.error("evaluation failed", coordinate=str(coordinate), error=str(e))
            outcome = DependencyOutcome(
                coordinate=coordinate, status=OutcomeStatus.UNRESOLVED
            )
        log.debug("evaluated dependency", coordinate=str(coordinate), outcome=outcome.describe())
        return outcome

    outcomes: list[DependencyOutcome] = []

    if console is not None and show_progress and len(dependencies) > 0:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            task_id = progress.add_task(
                f"Validating licenses for {len(dependencies)} artifact(s)...",
                total=len(dependencies),
            )
            for coordinate in dependencies:
                outcomes.append(evaluate_one(coordinate))
                progress.advance(task_id)
    else:
        outcomes = [evaluate_one(coordinate) for coordinate in dependencies]

    report = EvaluationReport.from_outcomes(outcomes)
    log.info(
        "license check finished",
        total=report.total_count,
        resolved=report.resolved_count,
        unresolved=report.unresolved_count,
        denied=report.denied_count,
        skipped=report.skipped_count,
    )
    return report
