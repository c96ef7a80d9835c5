"""Exclude-list and deny-list checks."""
from __future__ import annotations

from typing import Iterable

from license_check.models.coordinate import PackageCoordinate


def _normalize(values: Iterable[str]) -> set[str]:
    return {value.strip().lower() for value in values}


def is_excluded(coordinate: PackageCoordinate, excludes: Iterable[str]) -> bool:
    """Check whether a dependency is on the exclude list.

    Matching is case-insensitive and against the full
    ``group:artifact:version`` string.

    Args:
        coordinate: The dependency to check.
        excludes: Excluded coordinate strings.

    Returns:
        True if the coordinate is excluded.
    """
    return str(coordinate).lower() in _normalize(excludes)


def is_denied(code: str, deny_list: Iterable[str]) -> bool:
    """Check whether a license code is on the deny list.

    Args:
        code: Canonical license code.
        deny_list: Denied license codes (case-insensitive).

    Returns:
        True if the code is denied.
    """
    return code.lower() in _normalize(deny_list)
