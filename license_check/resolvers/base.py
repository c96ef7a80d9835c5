"""Metadata fetcher interface."""

from abc import ABC, abstractmethod
from typing import Optional

from license_check.exceptions import FetchError
from license_check.logging import get_logger
from license_check.models.coordinate import PackageCoordinate

log = get_logger(__name__)


class MetadataFetcher(ABC):
    """Abstract base class for package metadata fetchers.

    All fetchers must inherit from this class and implement fetch().
    """

    @abstractmethod
    def fetch(self, coordinate: PackageCoordinate) -> Optional[str]:
        """Fetch the raw POM document for a package.

        Args:
            coordinate: The package to fetch metadata for.

        Returns:
            Raw POM text, or None if the package is not available.

        Raises:
            FetchError: If the metadata could not be retrieved.
        """


class ChainedFetcher(MetadataFetcher):
    """Fetcher that tries several fetchers in order.

    The first document found wins. A FetchError from one fetcher is
    logged and the next fetcher is tried; if no fetcher finds the
    document and at least one of them failed, the last error is raised.
    """

    def __init__(self, *fetchers: MetadataFetcher) -> None:
        self._fetchers = fetchers

    def fetch(self, coordinate: PackageCoordinate) -> Optional[str]:
        last_error: Optional[FetchError] = None
        for fetcher in self._fetchers:
            try:
                document = fetcher.fetch(coordinate)
            except FetchError as e:
                log.warning(
                    "fetcher failed",
                    fetcher=type(fetcher).__name__,
                    coordinate=str(coordinate),
                    error=str(e),
                )
                last_error = e
                continue
            if document is not None:
                return document
        if last_error is not None:
            raise last_error
        return None
