"""Client for the Nomics aggregated candles endpoint."""

from nomics_client.clients.base import BaseClient
from nomics_client.data.candles import candles_from_timestamp
from nomics_client.models import Candle


class NomicsAggregatedCandles(BaseClient):
    """Candles for a currency aggregated across all exchanges.

    Wraps `GET /candles?key=...&interval=1d&currency=BTC`.
    """

    ENDPOINT = "candles"

    def get_raw_candles(self, interval: str, currency: str) -> str:
        return self._get(interval=interval, currency=currency)

    def get_candles(self, interval: str, currency: str) -> list[Candle]:
        """Fetch and decode candles for `currency` (e.g. 'BTC', 'ETH')."""
        return self._get_records(Candle, interval=interval, currency=currency)

    def get_candles_from_timestamp(
        self, timestamp: str, interval: str, currency: str
    ) -> list[Candle]:
        """Return candles from the one stamped `timestamp` onward.

        Args:
            timestamp: Candle timestamp, e.g. '2017-07-14T00:00:00Z'.
            interval: Candle interval (e.g. '1d').
            currency: Currency symbol.

        Returns:
            Matching suffix of the candle list, empty if no candle matches.
        """
        return candles_from_timestamp(self.get_candles(interval, currency), timestamp)
