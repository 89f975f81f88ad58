"""Central entry point holding the API key and a shared fetcher."""

import logging
from dataclasses import replace
from typing import Optional

from nomics_client.clients.aggregated_candles import NomicsAggregatedCandles
from nomics_client.clients.exchange_candles import NomicsExchangeCandles
from nomics_client.clients.markets import NomicsMarkets
from nomics_client.clients.prices import NomicsPrices
from nomics_client.config import NomicsConfig
from nomics_client.data.fetchers import BaseFetcher, HttpxFetcher
from nomics_client.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def _require_key(api_key: str) -> None:
    if not api_key:
        raise InvalidArgumentError("A Nomics API key is required (set NOMICS_API_KEY)")


class NomicsAPIHandler:
    """Delegator for all Nomics API calls.

    Builds every endpoint client on one fetcher and one API key, so a single
    connection pool serves all of them. Use as a context manager to close
    the pool on exit.

    Example:
        with NomicsAPIHandler(NomicsConfig.from_env()) as api:
            candle = api.exchange_candles.get_most_recent_candle("6h", "gdax", "BTC-USD")
    """

    def __init__(self, config: NomicsConfig, fetcher: Optional[BaseFetcher] = None) -> None:
        """Initialize the handler.

        Args:
            config: Settings; `config.api_key` must be set. The handler keeps
                its own copy, so later changes to `config` do not reach it.
            fetcher: Fetcher override. Defaults to an HttpxFetcher built from config.

        Raises:
            InvalidArgumentError: If no API key is configured.
        """
        _require_key(config.api_key)
        self.config = replace(config)
        if fetcher is None:
            fetcher = HttpxFetcher(user_agent=config.user_agent, timeout=config.timeout)
        self.fetcher = fetcher
        self.exchange_candles: NomicsExchangeCandles
        self.aggregated_candles: NomicsAggregatedCandles
        self.markets: NomicsMarkets
        self.prices: NomicsPrices
        self.authenticate(config.api_key)

    def authenticate(self, api_key: str) -> None:
        """Set the key used by every endpoint client from now on."""
        _require_key(api_key)
        self.api_key = api_key

        base_url = self.config.base_url
        self.exchange_candles = NomicsExchangeCandles(self.fetcher, api_key, base_url)
        self.aggregated_candles = NomicsAggregatedCandles(self.fetcher, api_key, base_url)
        self.markets = NomicsMarkets(self.fetcher, api_key, base_url)
        self.prices = NomicsPrices(self.fetcher, api_key, base_url)
        logger.debug(f"Endpoint clients ready for {base_url}")

    def close(self) -> None:
        """Close the shared fetcher."""
        self.fetcher.close()

    def __enter__(self) -> "NomicsAPIHandler":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
