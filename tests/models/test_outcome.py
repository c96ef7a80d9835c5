"""Tests for evaluation outcome models."""

from __future__ import annotations

import pytest

from license_check.exceptions import LicenseCheckFailure
from license_check.models.coordinate import PackageCoordinate
from license_check.models.outcome import (
    DependencyOutcome,
    EvaluationReport,
    OutcomeStatus,
)


def _outcome(coordinate: str, status: OutcomeStatus, code: str | None = None) -> DependencyOutcome:
    return DependencyOutcome(
        coordinate=PackageCoordinate.parse(coordinate), status=status, code=code
    )


class TestDependencyOutcome:
    """Tests for DependencyOutcome."""

    def test_describe_resolved(self) -> None:
        """Test the resolved report string."""
        outcome = _outcome("junit:junit:4.13.2", OutcomeStatus.RESOLVED, "epl-1.0")
        assert outcome.describe() == "resolved: epl-1.0"

    def test_describe_denied(self) -> None:
        """Test the denied report string."""
        outcome = _outcome("org.example:gpl-lib:1.0", OutcomeStatus.DENIED, "gpl-3.0")
        assert outcome.describe() == "denied: gpl-3.0"

    def test_describe_unresolved_and_skipped(self) -> None:
        """Test the report strings without a code."""
        assert _outcome("a:b:1", OutcomeStatus.UNRESOLVED).describe() == "unresolved"
        assert _outcome("a:b:1", OutcomeStatus.SKIPPED).describe() == "skipped"

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            (OutcomeStatus.RESOLVED, False),
            (OutcomeStatus.SKIPPED, False),
            (OutcomeStatus.UNRESOLVED, True),
            (OutcomeStatus.DENIED, True),
        ],
    )
    def test_is_failure(self, status: OutcomeStatus, expected: bool) -> None:
        """Test which outcomes fail the build."""
        assert _outcome("a:b:1", status, "mit").is_failure is expected


class TestEvaluationReport:
    """Tests for EvaluationReport."""

    def test_from_outcomes_passes_without_failures(self) -> None:
        """Test that resolved and skipped outcomes pass."""
        report = EvaluationReport.from_outcomes(
            [
                _outcome("a:b:1", OutcomeStatus.RESOLVED, "mit"),
                _outcome("c:d:1", OutcomeStatus.SKIPPED),
            ]
        )
        assert report.failed is False
        report.raise_for_failure()

    def test_from_outcomes_fails_on_unresolved(self) -> None:
        """Test that any failing outcome fails the report."""
        report = EvaluationReport.from_outcomes(
            [
                _outcome("a:b:1", OutcomeStatus.RESOLVED, "mit"),
                _outcome("c:d:1", OutcomeStatus.UNRESOLVED),
            ]
        )
        assert report.failed is True

    def test_as_mapping_keeps_order(self) -> None:
        """Test the coordinate to outcome string mapping."""
        report = EvaluationReport.from_outcomes(
            [
                _outcome("z:last:1", OutcomeStatus.UNRESOLVED),
                _outcome("a:first:1", OutcomeStatus.RESOLVED, "mit"),
            ]
        )
        mapping = report.as_mapping()
        assert list(mapping) == ["z:last:1", "a:first:1"]
        assert mapping["a:first:1"] == "resolved: mit"

    def test_counts(self) -> None:
        """Test per-status counts."""
        report = EvaluationReport.from_outcomes(
            [
                _outcome("a:a:1", OutcomeStatus.RESOLVED, "mit"),
                _outcome("b:b:1", OutcomeStatus.RESOLVED, "isc"),
                _outcome("c:c:1", OutcomeStatus.UNRESOLVED),
                _outcome("d:d:1", OutcomeStatus.DENIED, "gpl-3.0"),
                _outcome("e:e:1", OutcomeStatus.SKIPPED),
            ]
        )
        assert report.total_count == 5
        assert report.resolved_count == 2
        assert report.unresolved_count == 1
        assert report.denied_count == 1
        assert report.skipped_count == 1
        assert [str(o.coordinate) for o in report.failures()] == ["c:c:1", "d:d:1"]

    def test_raise_for_failure(self) -> None:
        """Test that a failed report raises the terminal failure signal."""
        report = EvaluationReport.from_outcomes(
            [_outcome("d:d:1", OutcomeStatus.DENIED, "gpl-3.0")]
        )
        with pytest.raises(LicenseCheckFailure) as exc_info:
            report.raise_for_failure()
        assert "1 denied" in str(exc_info.value)

    def test_empty_report_passes(self) -> None:
        """Test that an empty report does not fail."""
        report = EvaluationReport.from_outcomes([])
        assert report.failed is False
        assert report.as_mapping() == {}
