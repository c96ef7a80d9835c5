"""Dependency enumeration for license checks.

Collects the top-level package coordinates to evaluate, either from a
project ``pom.xml``, from a coordinates file, or from explicit strings.
Transitive closure is not computed: only the listed dependencies are
evaluated.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Optional
from xml.etree import ElementTree

from license_check.exceptions import ConfigurationError
from license_check.logging import get_logger
from license_check.models.coordinate import PackageCoordinate
from license_check.resolvers.pom import parse_document

log = get_logger(__name__)

DEFAULT_SCOPE = "compile"

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")

# Nested placeholders are expanded at most this many times
_MAX_INTERPOLATION_PASSES = 10


def parse_coordinates(values: Iterable[str]) -> list[PackageCoordinate]:
    """Parse coordinate strings.

    Args:
        values: Strings like ``org.slf4j:slf4j-api:2.0.9``.

    Returns:
        Coordinates in the order given.

    Raises:
        ConfigurationError: If any string is not a valid coordinate.
    """
    coordinates: list[PackageCoordinate] = []
    for value in values:
        try:
            coordinates.append(PackageCoordinate.parse(value))
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
    return coordinates


def read_coordinates_file(path: Path) -> list[PackageCoordinate]:
    """Read coordinates from a text file, one per line.

    Blank lines and lines starting with ``#`` are ignored.

    Args:
        path: Path to the coordinates file.

    Returns:
        Coordinates in file order.

    Raises:
        ConfigurationError: If the file cannot be read or a line is not
            a valid coordinate.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read coordinates file '{path}': {e}") from e

    lines = [line.strip() for line in content.splitlines()]
    return parse_coordinates(line for line in lines if line and not line.startswith("#"))


def _text(element: Optional[ElementTree.Element], tag: str) -> Optional[str]:
    if element is None:
        return None
    value = element.findtext(tag)
    if value is None or not value.strip():
        return None
    return value.strip()


def _collect_properties(root: ElementTree.Element) -> dict[str, str]:
    """Build the placeholder table for a project POM."""
    properties: dict[str, str] = {}

    properties_element = root.find("properties")
    if properties_element is not None:
        for child in properties_element:
            if isinstance(child.tag, str) and child.text is not None:
                properties[child.tag] = child.text.strip()

    parent = root.find("parent")
    parent_group = _text(parent, "groupId")
    parent_version = _text(parent, "version")
    group_id = _text(root, "groupId") or parent_group
    version = _text(root, "version") or parent_version
    artifact_id = _text(root, "artifactId")

    builtins = {
        "project.groupId": group_id,
        "project.artifactId": artifact_id,
        "project.version": version,
        "pom.groupId": group_id,
        "pom.version": version,
        "version": version,
        "project.parent.groupId": parent_group,
        "project.parent.version": parent_version,
    }
    for key, value in builtins.items():
        if value is not None:
            properties.setdefault(key, value)
    return properties


def _interpolate(value: Optional[str], properties: dict[str, str]) -> Optional[str]:
    if value is None:
        return None
    for _ in range(_MAX_INTERPOLATION_PASSES):
        expanded = _PLACEHOLDER_RE.sub(
            lambda m: properties.get(m.group(1), m.group(0)), value
        )
        if expanded == value:
            break
        value = expanded
    return value


def _managed_versions(
    root: ElementTree.Element, properties: dict[str, str]
) -> dict[tuple[str, str], str]:
    managed: dict[tuple[str, str], str] = {}
    container = root.find("dependencyManagement/dependencies")
    if container is None:
        return managed
    for dependency in container.findall("dependency"):
        group_id = _interpolate(_text(dependency, "groupId"), properties)
        artifact_id = _interpolate(_text(dependency, "artifactId"), properties)
        version = _interpolate(_text(dependency, "version"), properties)
        if group_id and artifact_id and version:
            managed.setdefault((group_id, artifact_id), version)
    return managed


def read_project_dependencies(
    pom_path: Path,
    include_scopes: Optional[Iterable[str]] = None,
) -> list[PackageCoordinate]:
    """Read the declared dependencies of a project POM.

    Only the project's own ``<dependencies>`` are returned, not those in
    ``<dependencyManagement>``. ``${...}`` placeholders are expanded from
    ``<properties>`` and the project's coordinates. A dependency without
    a version takes it from ``<dependencyManagement>``. A dependency whose
    version still cannot be determined (inherited from a parent POM or an
    imported BOM, or an undefined property) is returned with ``version``
    set to None, so it is reported as unresolved rather than dropped.

    Args:
        pom_path: Path to the project ``pom.xml``.
        include_scopes: Scopes to keep (a dependency without a scope is
            ``compile``). None keeps every scope.

    Returns:
        Dependency coordinates in declaration order.

    Raises:
        ConfigurationError: If the file cannot be read, is not a
            well-formed POM, or declares a dependency without a groupId
            or artifactId.
    """
    try:
        content = pom_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read project POM '{pom_path}': {e}") from e

    root = parse_document(content)
    if root is None:
        raise ConfigurationError(f"Invalid project POM '{pom_path}': not well-formed XML")

    scopes = {scope.lower() for scope in include_scopes} if include_scopes else None
    properties = _collect_properties(root)
    managed = _managed_versions(root, properties)

    coordinates: list[PackageCoordinate] = []
    container = root.find("dependencies")
    if container is None:
        return coordinates

    for index, dependency in enumerate(container.findall("dependency"), start=1):
        group_id = _interpolate(_text(dependency, "groupId"), properties)
        artifact_id = _interpolate(_text(dependency, "artifactId"), properties)
        if not group_id or not artifact_id:
            raise ConfigurationError(
                f"Invalid project POM '{pom_path}': dependency #{index} "
                "has no groupId or artifactId"
            )

        scope = (_text(dependency, "scope") or DEFAULT_SCOPE).lower()
        if scopes is not None and scope not in scopes:
            log.debug("skipping dependency by scope", artifact=artifact_id, scope=scope)
            continue

        version = _interpolate(_text(dependency, "version"), properties)
        if version is None:
            version = managed.get((group_id, artifact_id))
        if version is None or _PLACEHOLDER_RE.search(version):
            # Kept without a version so the check reports it as unresolved
            log.warning(
                "dependency version cannot be determined",
                dependency=f"{group_id}:{artifact_id}",
                version=version,
            )
            version = None

        coordinates.append(
            PackageCoordinate(group_id=group_id, artifact_id=artifact_id, version=version)
        )

    return coordinates
