"""Custom exceptions for license-check."""


class LicenseCheckError(Exception):
    """Base exception for all license-check errors."""

    pass


class FetchError(LicenseCheckError):
    """Exception raised when package metadata cannot be retrieved."""

    pass


class ConfigurationError(LicenseCheckError):
    """Exception raised when configuration is invalid."""

    pass


class RuleTableError(LicenseCheckError):
    """Exception raised when the license rule table is malformed."""

    pass


class LicenseCheckFailure(LicenseCheckError):
    """Raised once, after a full evaluation, when the build should fail.

    Signals that at least one dependency was unresolved or denied.
    """

    pass
