"""Local Maven repository fetcher."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from license_check.exceptions import FetchError
from license_check.logging import get_logger
from license_check.models.coordinate import PackageCoordinate
from license_check.resolvers.base import MetadataFetcher

log = get_logger(__name__)

DEFAULT_LOCAL_REPOSITORY = Path.home() / ".m2" / "repository"


class LocalRepositoryFetcher(MetadataFetcher):
    """Fetcher that reads POMs from a local Maven repository directory."""

    def __init__(self, root: Path | str = DEFAULT_LOCAL_REPOSITORY) -> None:
        """Initialize the fetcher.

        Args:
            root: Repository root, laid out like ``~/.m2/repository``.
        """
        self._root = Path(root).expanduser()

    @property
    def root(self) -> Path:
        return self._root

    def fetch(self, coordinate: PackageCoordinate) -> Optional[str]:
        """Read the POM for a package from the local repository.

        Args:
            coordinate: The package to fetch metadata for.

        Returns:
            Raw POM text, or None if the POM is not in the repository.

        Raises:
            FetchError: If the POM exists but cannot be read.
        """
        pom_path = self._root / coordinate.repository_path
        if not pom_path.is_file():
            log.debug("pom not in local repository", path=str(pom_path))
            return None
        try:
            return pom_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise FetchError(f"Failed to read {pom_path}: {e}") from e
