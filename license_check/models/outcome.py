"""Evaluation outcome models for license-check."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from license_check.exceptions import LicenseCheckFailure
from license_check.models.coordinate import PackageCoordinate


class OutcomeStatus(Enum):
    """Result of evaluating one top-level dependency."""

    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"
    DENIED = "denied"
    SKIPPED = "skipped"


class DependencyOutcome(BaseModel):
    """Evaluation outcome for a single dependency.

    ``code`` is set for RESOLVED and DENIED outcomes only.
    ``license_name`` is the free-text name found in the POM chain, if any,
    and may be set even when classification failed.
    """

    model_config = {"extra": "forbid"}

    coordinate: PackageCoordinate = Field(description="Evaluated dependency")
    status: OutcomeStatus = Field(description="Outcome of the evaluation")
    code: Optional[str] = Field(default=None, description="Canonical license code")
    license_name: Optional[str] = Field(
        default=None, description="License name declared in the POM chain"
    )

    @property
    def is_failure(self) -> bool:
        """True if this outcome should fail the build."""
        return self.status in (OutcomeStatus.UNRESOLVED, OutcomeStatus.DENIED)

    def describe(self) -> str:
        """Render the outcome as a report string.

        Returns:
            One of ``"resolved: <code>"``, ``"denied: <code>"``,
            ``"unresolved"`` or ``"skipped"``.
        """
        if self.status in (OutcomeStatus.RESOLVED, OutcomeStatus.DENIED):
            return f"{self.status.value}: {self.code}"
        return self.status.value


class EvaluationReport(BaseModel):
    """Itemized result of one evaluation run."""

    model_config = {"extra": "forbid"}

    outcomes: list[DependencyOutcome] = Field(
        default_factory=list,
        description="Per-dependency outcomes, in evaluation order",
    )
    failed: bool = Field(
        default=False,
        description="True if at least one dependency was unresolved or denied",
    )

    @classmethod
    def from_outcomes(cls, outcomes: list[DependencyOutcome]) -> EvaluationReport:
        """Create a report, deriving the verdict from the outcomes.

        Args:
            outcomes: Per-dependency outcomes in evaluation order.

        Returns:
            EvaluationReport with ``failed`` calculated.
        """
        return cls(
            outcomes=outcomes,
            failed=any(outcome.is_failure for outcome in outcomes),
        )

    def as_mapping(self) -> dict[str, str]:
        """Map each dependency's coordinate string to its outcome string.

        Returns:
            Ordered dict like ``{"junit:junit:4.13.2": "resolved: epl-1.0"}``.
        """
        return {str(outcome.coordinate): outcome.describe() for outcome in self.outcomes}

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    @property
    def total_count(self) -> int:
        """Number of dependencies in the report."""
        return len(self.outcomes)

    @property
    def resolved_count(self) -> int:
        return self._count(OutcomeStatus.RESOLVED)

    @property
    def unresolved_count(self) -> int:
        return self._count(OutcomeStatus.UNRESOLVED)

    @property
    def denied_count(self) -> int:
        return self._count(OutcomeStatus.DENIED)

    @property
    def skipped_count(self) -> int:
        return self._count(OutcomeStatus.SKIPPED)

    def failures(self) -> list[DependencyOutcome]:
        """Get outcomes that fail the build.

        Returns:
            Unresolved and denied outcomes, in evaluation order.
        """
        return [outcome for outcome in self.outcomes if outcome.is_failure]

    def raise_for_failure(self) -> None:
        """Raise the terminal failure signal if the verdict is fail.

        Raises:
            LicenseCheckFailure: If any dependency was unresolved or denied.
        """
        if self.failed:
            raise LicenseCheckFailure(
                f"{self.unresolved_count} unresolved and {self.denied_count} "
                "denied license(s): at least one license could not be verified "
                "or appears on your deny list"
            )
