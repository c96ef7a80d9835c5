"""Shared fixtures for license-check tests."""

from __future__ import annotations

from typing import Callable, Optional, Union

import pytest
from click.testing import CliRunner

from license_check.exceptions import FetchError
from license_check.models.coordinate import PackageCoordinate
from license_check.resolvers.base import MetadataFetcher


class FakeFetcher(MetadataFetcher):
    """In-memory fetcher that records every coordinate it is asked for."""

    def __init__(self) -> None:
        self.documents: dict[str, Union[str, Exception]] = {}
        self.calls: list[str] = []

    def add(self, coordinate: str, document: Union[str, Exception]) -> None:
        self.documents[coordinate] = document

    def fetch(self, coordinate: PackageCoordinate) -> Optional[str]:
        key = str(coordinate)
        self.calls.append(key)
        document = self.documents.get(key)
        if isinstance(document, Exception):
            raise document
        return document


def build_pom(
    coordinate: str,
    license_name: Optional[str] = None,
    parent: Optional[str] = None,
    namespace: bool = True,
) -> str:
    """Build a minimal POM document."""
    group_id, artifact_id, version = coordinate.split(":")
    parts = []
    if parent is not None:
        p_group, p_artifact, p_version = parent.split(":")
        parts.append(
            "<parent>"
            f"<groupId>{p_group}</groupId>"
            f"<artifactId>{p_artifact}</artifactId>"
            f"<version>{p_version}</version>"
            "</parent>"
        )
    parts.append(
        f"<groupId>{group_id}</groupId>"
        f"<artifactId>{artifact_id}</artifactId>"
        f"<version>{version}</version>"
    )
    if license_name is not None:
        parts.append(
            "<licenses><license>"
            f"<name>{license_name}</name>"
            "<url>https://example.com/license</url>"
            "</license></licenses>"
        )
    xmlns = ' xmlns="http://maven.apache.org/POM/4.0.0"' if namespace else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f"<project{xmlns}><modelVersion>4.0.0</modelVersion>"
        + "".join(parts)
        + "</project>"
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fetcher() -> FakeFetcher:
    """Provide an empty in-memory metadata fetcher."""
    return FakeFetcher()


@pytest.fixture
def make_pom() -> Callable[..., str]:
    """Provide the POM document builder."""
    return build_pom


@pytest.fixture
def fetch_error() -> FetchError:
    """Provide a fetch failure to register with the fake fetcher."""
    return FetchError("connection refused")
