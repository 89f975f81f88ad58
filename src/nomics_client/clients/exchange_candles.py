"""Client for the Nomics exchange_candles endpoint."""

import logging
from decimal import Decimal
from typing import Optional

from nomics_client.clients.base import BaseClient
from nomics_client.data import candles as transforms
from nomics_client.models import Candle

logger = logging.getLogger(__name__)


class NomicsExchangeCandles(BaseClient):
    """Candles for one market on one exchange.

    Wraps `GET /exchange_candles?key=...&interval=1h&exchange=gdax&market=BTC-USD`.
    On top of the native intervals (1m, 5m, 30m, 1h, 1d) it serves 2h, 6h and
    12h candles built from 1h candles.
    """

    ENDPOINT = "exchange_candles"

    def get_raw_candles(self, interval: str, exchange: str, market: str) -> str:
        """Fetch candles at a native interval and return the response body untouched."""
        return self._get(interval=interval, exchange=exchange, market=market)

    def fetch_candles(self, interval: str, exchange: str, market: str) -> list[Candle]:
        """Fetch and decode candles at a native interval, without repair."""
        return self._get_records(Candle, interval=interval, exchange=exchange, market=market)

    def get_exchange_candles(self, interval: str, exchange: str, market: str) -> list[Candle]:
        """Get zero-repaired candles, aggregating 1h candles for 2h/6h/12h.

        Args:
            interval: Native interval (1m, 5m, 30m, 1h, 1d) or 2h, 6h, 12h.
            exchange: Exchange id (e.g., 'binance', 'gdax').
            market: Exchange-local market symbol (e.g., 'BTC-USD').

        Returns:
            Candles oldest first. An incomplete trailing group is left out
            of aggregated intervals.

        Raises:
            InvalidArgumentError: If the interval is not supported.
        """
        group_hours = transforms.parse_aggregated_interval(interval)
        if group_hours is None:
            return transforms.repair_zero_candles(self.fetch_candles(interval, exchange, market))

        base = self.fetch_candles(transforms.BASE_INTERVAL, exchange, market)
        aggregated = transforms.aggregate(transforms.repair_zero_candles(base), group_hours)
        logger.debug(
            f"Built {len(aggregated)} {interval} candles from {len(base)} 1h candles "
            f"for {exchange}:{market}"
        )
        return aggregated

    def _load(self, interval: str, exchange: str, market: str) -> list[Candle]:
        # Native intervals keep zero candles visible; aggregated ones need the pipeline.
        if transforms.parse_aggregated_interval(interval) is None:
            return self.fetch_candles(interval, exchange, market)
        return self.get_exchange_candles(interval, exchange, market)

    def get_most_recent_candle(self, interval: str, exchange: str, market: str) -> Optional[Candle]:
        """Return the latest candle, or None if the exchange returned none."""
        return transforms.most_recent_candle(self._load(interval, exchange, market))

    def get_most_recent_non_zero_candle(
        self, interval: str, exchange: str, market: str
    ) -> Optional[Candle]:
        """Return the latest candle with trades (close != 0), or None."""
        return transforms.most_recent_non_zero_candle(self._load(interval, exchange, market))

    def get_last_n_candles(self, n: int, interval: str, exchange: str, market: str) -> list[Candle]:
        """Return the last `n` candles, oldest first."""
        return transforms.last_n_candles(self._load(interval, exchange, market), n)

    def get_all_time_high(self, interval: str, exchange: str, market: str) -> Optional[Decimal]:
        """Return the highest high over every fetched candle, or None."""
        return transforms.all_time_high(self._load(interval, exchange, market))

    def get_candles_from_timestamp(
        self, timestamp: str, interval: str, exchange: str, market: str
    ) -> list[Candle]:
        """Return candles starting at `timestamp` (e.g. '2018-03-19T10:00:00Z')."""
        return transforms.candles_from_timestamp(self._load(interval, exchange, market), timestamp)
