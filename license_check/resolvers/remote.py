"""Remote Maven repository fetcher."""

from types import TracebackType
from typing import Optional, Sequence

import httpx

from license_check.constants import DEFAULT_REPOSITORY_URL, DEFAULT_TIMEOUT_SECONDS
from license_check.exceptions import FetchError
from license_check.logging import get_logger
from license_check.models.coordinate import PackageCoordinate
from license_check.resolvers.base import MetadataFetcher

log = get_logger(__name__)


class RemoteRepositoryFetcher(MetadataFetcher):
    """Fetcher that downloads POMs from remote Maven repositories over HTTP.

    Repositories are tried in order; the first one that serves the POM
    wins. The fetcher owns its HTTP client unless one is supplied, and
    can be used as a context manager to close it.
    """

    def __init__(
        self,
        repositories: Sequence[str] = (DEFAULT_REPOSITORY_URL,),
        client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the fetcher.

        Args:
            repositories: Repository base URLs, tried in order.
            client: Optional httpx.Client to use. If not provided,
                a new client will be created.
            timeout: Request timeout in seconds.
        """
        self._repositories = [url.rstrip("/") for url in repositories]
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(
            follow_redirects=True
        )
        self._timeout = httpx.Timeout(timeout)

    def __enter__(self) -> "RemoteRepositoryFetcher":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client:
            self._client.close()

    def fetch(self, coordinate: PackageCoordinate) -> Optional[str]:
        """Download the POM for a package.

        Args:
            coordinate: The package to fetch metadata for.

        Returns:
            Raw POM text, or None if no repository has the POM.

        Raises:
            FetchError: If a network request fails.
        """
        for base_url in self._repositories:
            url = f"{base_url}/{coordinate.repository_path}"
            try:
                response = self._client.get(url, timeout=self._timeout)
                if response.status_code == 404:
                    log.debug("pom not found", url=url)
                    continue
                response.raise_for_status()
                return response.text
            except httpx.HTTPStatusError as e:
                log.debug("pom request failed", url=url, status=e.response.status_code)
                continue
            except httpx.RequestError as e:
                raise FetchError(f"Failed to fetch {coordinate}: {e}") from e
        return None
