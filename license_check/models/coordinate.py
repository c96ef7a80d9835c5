"""Package coordinate model for license-check."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class PackageCoordinate(BaseModel):
    """A (groupId, artifactId, version) triple identifying a package.

    Coordinates are immutable and hashable, so they can be used as
    dictionary keys and set members. ``version`` is None for a project
    dependency whose version could not be determined; such a coordinate
    renders as ``group:artifact`` and has no repository path.
    """

    model_config = {"extra": "forbid", "frozen": True}

    group_id: str = Field(min_length=1, description="Namespace (Maven groupId)")
    artifact_id: str = Field(min_length=1, description="Name (Maven artifactId)")
    version: Optional[str] = Field(
        default=None, min_length=1, description="Package version, if known"
    )

    def __str__(self) -> str:
        if self.version is None:
            return f"{self.group_id}:{self.artifact_id}"
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    @property
    def has_version(self) -> bool:
        return self.version is not None

    @classmethod
    def parse(cls, text: str) -> PackageCoordinate:
        """Build a coordinate from a ``group:artifact:version`` string.

        The longer Maven forms ``group:artifact:packaging:version`` and
        ``group:artifact:packaging:classifier:version`` are accepted too;
        the last segment is always taken as the version.

        Args:
            text: Coordinate string.

        Returns:
            The parsed PackageCoordinate.

        Raises:
            ValueError: If the string does not have 3 to 5 non-empty
                colon-separated segments.
        """
        parts = [part.strip() for part in text.strip().split(":")]
        if len(parts) < 3 or len(parts) > 5 or not all(parts):
            raise ValueError(
                f"Invalid coordinate '{text}': expected groupId:artifactId:version"
            )
        return cls(group_id=parts[0], artifact_id=parts[1], version=parts[-1])

    @property
    def repository_path(self) -> str:
        """Relative path of this package's POM in a Maven repository layout.

        Returns:
            Path like ``org/slf4j/slf4j-api/2.0.9/slf4j-api-2.0.9.pom``.

        Raises:
            ValueError: If the version is unknown.
        """
        if self.version is None:
            raise ValueError(f"No version for {self}: cannot locate its POM")
        group_path = self.group_id.replace(".", "/")
        return (
            f"{group_path}/{self.artifact_id}/{self.version}/"
            f"{self.artifact_id}-{self.version}.pom"
        )
