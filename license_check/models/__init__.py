"""Pydantic data models for license-check."""

from license_check.models.config import CheckConfig
from license_check.models.coordinate import PackageCoordinate
from license_check.models.options import CheckOptions, Verbosity
from license_check.models.outcome import (
    DependencyOutcome,
    EvaluationReport,
    OutcomeStatus,
)
from license_check.models.rules import LicenseRule

__all__ = [
    "CheckConfig",
    "CheckOptions",
    "DependencyOutcome",
    "EvaluationReport",
    "LicenseRule",
    "OutcomeStatus",
    "PackageCoordinate",
    "Verbosity",
]
