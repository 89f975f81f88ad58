from abc import ABC
from typing import TypeVar

from nomics_client.config import DEFAULT_BASE_URL
from nomics_client.data.fetchers import BaseFetcher
from nomics_client.models import NomicsRecord, decode_records

RecordT = TypeVar("RecordT", bound=NomicsRecord)


class BaseClient(ABC):
    """Base class for Nomics endpoint clients.

    Subclasses set `ENDPOINT` to the path below the API root and build their
    queries with `_get`, which adds the API key to every request.

    Attributes:
        fetcher: Fetcher used for every GET.
        api_key: Private Nomics API key.
        base_url: API root, without trailing slash.
    """

    ENDPOINT: str = ""

    def __init__(
        self, fetcher: BaseFetcher, api_key: str, base_url: str = DEFAULT_BASE_URL
    ) -> None:
        self.fetcher = fetcher
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.ENDPOINT}"

    def _get(self, **params: str) -> str:
        """GET the endpoint with the API key and `params`; return the body."""
        return self.fetcher.get(self.url, params={"key": self.api_key, **params})

    def _get_records(self, model: type[RecordT], **params: str) -> list[RecordT]:
        return decode_records(self._get(**params), model)
