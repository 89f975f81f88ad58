from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Optional


class BaseFetcher(ABC):
    """Abstract base class for HTTP GET fetchers.

    Attributes:
        user_agent (str): Value sent in the User-Agent header.
    """

    def __init__(self, user_agent: str = "Mozilla/5.0"):
        """Initialize the fetcher.

        Args:
            user_agent: Value sent in the User-Agent header of every request.
        """
        self.user_agent = user_agent

    @abstractmethod
    def get(self, url: str, params: Optional[Mapping[str, str]] = None) -> str:
        """Issue a GET request and return the response body.

        Args:
            url: Fully-qualified endpoint URL.
            params: Query parameters appended to the URL.

        Returns:
            str: The raw textual response body.

        Raises:
            TransportError: On connection failure, timeout or non-2xx status.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release any resources held by the fetcher (e.g., HTTP sessions)."""
        pass

    def __enter__(self) -> "BaseFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
