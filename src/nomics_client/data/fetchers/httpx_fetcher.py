"""httpx-based fetcher implementation."""

import logging
from collections.abc import Mapping
from typing import Optional

import httpx

from nomics_client.data.fetchers.base import BaseFetcher
from nomics_client.exceptions import TransportError

logger = logging.getLogger(__name__)

REDACTED = "REDACTED"


def redact_url(url: httpx.URL | str) -> str:
    """Return the URL with the `key` query parameter masked."""
    url = httpx.URL(url)
    if "key" not in url.params:
        return str(url)
    return str(url.copy_set_param("key", REDACTED))


class HttpxFetcher(BaseFetcher):
    """Synchronous httpx implementation of the fetcher."""

    def __init__(
        self,
        user_agent: str = "Mozilla/5.0",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the httpx fetcher.

        Args:
            user_agent: Value sent in the User-Agent header.
            timeout: Request timeout in seconds.
            transport: Optional transport override (e.g., httpx.MockTransport).
        """
        super().__init__(user_agent)
        self.timeout = timeout
        self.client = httpx.Client(
            headers={"User-Agent": user_agent},
            timeout=timeout,
            transport=transport,
        )

    def get(self, url: str, params: Optional[Mapping[str, str]] = None) -> str:
        """Issue a GET request and return the response body.

        Args:
            url: Fully-qualified endpoint URL.
            params: Query parameters appended to the URL.

        Returns:
            The raw response text.

        Raises:
            TransportError: If the request fails or the status is not 2xx.
        """
        request = self.client.build_request("GET", url, params=params)
        safe_url = redact_url(request.url)
        logger.debug(f"Sending GET request to {safe_url}")

        try:
            response = self.client.send(request)
        except httpx.HTTPError as e:
            logger.error(f"GET {safe_url} failed: {e}")
            raise TransportError(f"Request to {safe_url} failed: {e}", safe_url) from e

        logger.debug(f"Response code for {safe_url}: {response.status_code}")
        if not response.is_success:
            logger.error(f"GET {safe_url} returned HTTP {response.status_code}")
            raise TransportError(
                f"Request to {safe_url} returned HTTP {response.status_code}",
                safe_url,
                status_code=response.status_code,
            )

        return response.text

    def close(self) -> None:
        """Close the underlying HTTP client and its connection pool."""
        self.client.close()
