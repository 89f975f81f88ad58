"""Client for the Nomics markets endpoint."""

from collections.abc import Sequence

from nomics_client.clients.base import BaseClient
from nomics_client.data import markets as filters
from nomics_client.models import Market


class NomicsMarkets(BaseClient):
    """All currency pairs (markets) listed across the supported exchanges.

    Wraps `GET /markets?key=...`. Every call fetches the full list; the
    exchange-level filters run locally.
    """

    ENDPOINT = "markets"

    def get_raw_markets(self) -> str:
        return self._get()

    def get_all_markets(self) -> list[Market]:
        return self._get_records(Market)

    def get_markets_by_exchange(self, exchange: str) -> list[Market]:
        """Return the markets listed on `exchange`."""
        return filters.filter_by_exchange(self.get_all_markets(), exchange)

    def get_market_from_pair(self, exchange: str, base: str, quote: str) -> str:
        """Return the market symbol for base/quote on `exchange`, or ''."""
        return filters.market_from_pair(self.get_all_markets(), exchange, base, quote)

    def get_supported_exchanges(self) -> list[str]:
        return filters.supported_exchanges(self.get_all_markets())

    def get_market_intersections(self, exchanges: Sequence[str]) -> dict[str, list[Market]]:
        """Return, per exchange, the markets whose pair every exchange lists.

        Args:
            exchanges: Exchange ids (e.g., ['binance', 'gdax']).

        Returns:
            Mapping of exchange id to its shared markets, original order kept.
        """
        return filters.market_intersections(self.get_all_markets(), exchanges)
