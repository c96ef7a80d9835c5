"""License classification and policy evaluation for license-check."""
from license_check.analysis.classifier import LicenseClassifier
from license_check.analysis.evaluation import evaluate, evaluate_dependency
from license_check.analysis.policy import is_denied, is_excluded

__all__ = [
    "LicenseClassifier",
    "evaluate",
    "evaluate_dependency",
    "is_denied",
    "is_excluded",
]
