"""License resolution by walking the POM parent chain."""

from typing import Optional

from license_check.constants import DEFAULT_MAX_SEARCH_DEPTH
from license_check.exceptions import FetchError
from license_check.logging import get_logger
from license_check.models.coordinate import PackageCoordinate
from license_check.resolvers.base import MetadataFetcher
from license_check.resolvers.pom import parse_license_name, parse_parent_coordinate

log = get_logger(__name__)


class LicenseResolver:
    """Finds the license name a package declares or inherits.

    A POM without a license of its own inherits one from its parent POM.
    The walk is bounded by ``max_search_depth``, which also guards against
    parent cycles in malformed metadata; there is no visited set, so a
    cycle costs at most ``max_search_depth`` extra fetches.
    """

    def __init__(
        self,
        fetcher: MetadataFetcher,
        max_search_depth: int = DEFAULT_MAX_SEARCH_DEPTH,
    ) -> None:
        """Initialize the resolver.

        Args:
            fetcher: Source of raw POM documents.
            max_search_depth: Maximum number of parent POMs to follow.
        """
        if max_search_depth < 1:
            raise ValueError("max_search_depth must be a positive integer")
        self._fetcher = fetcher
        self._max_search_depth = max_search_depth

    @property
    def max_search_depth(self) -> int:
        return self._max_search_depth

    def fetch(self, coordinate: PackageCoordinate) -> Optional[str]:
        """Fetch a POM, treating every kind of failure as absence.

        Args:
            coordinate: The package to fetch.

        Returns:
            Raw POM text, or None if it could not be fetched.
        """
        try:
            document = self._fetcher.fetch(coordinate)
        except FetchError as e:
            log.warning("could not fetch pom", coordinate=str(coordinate), error=str(e))
            return None
        if document is None:
            log.debug("pom not found", coordinate=str(coordinate))
        return document

    def resolve_license(
        self, coordinate: PackageCoordinate, depth: int = 0
    ) -> Optional[str]:
        """Resolve the license name for a package.

        Args:
            coordinate: The package to resolve.
            depth: Number of parent POMs already followed.

        Returns:
            The declared or inherited license name, or None if the POM
            cannot be fetched, no license is found, or the search depth
            is exhausted.
        """
        document = self.fetch(coordinate)
        if document is None:
            return None
        return self.resolve_from_document(document, depth, coordinate)

    def resolve_from_document(
        self,
        document: str,
        depth: int = 0,
        coordinate: Optional[PackageCoordinate] = None,
    ) -> Optional[str]:
        """Resolve the license name starting from an already fetched POM.

        Args:
            document: Raw POM text of the package.
            depth: Number of parent POMs already followed.
            coordinate: The package the document belongs to, for logging.

        Returns:
            The declared or inherited license name, or None.
        """
        current: Optional[str] = document
        while current is not None:
            license_name = parse_license_name(current)
            if license_name is not None:
                return license_name

            parent = parse_parent_coordinate(current)
            if parent is None:
                return None

            if depth >= self._max_search_depth:
                log.warning(
                    "parent search depth exhausted",
                    coordinate=str(coordinate) if coordinate else None,
                    parent=str(parent),
                    max_search_depth=self._max_search_depth,
                )
                return None

            depth += 1
            log.debug("following parent pom", parent=str(parent), depth=depth)
            current = self.fetch(parent)
            coordinate = parent

        return None
