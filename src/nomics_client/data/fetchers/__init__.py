"""HTTP fetchers for nomics-client."""

from nomics_client.data.fetchers.base import BaseFetcher
from nomics_client.data.fetchers.httpx_fetcher import HttpxFetcher, redact_url

__all__ = [
    "BaseFetcher",
    "HttpxFetcher",
    "redact_url",
]
