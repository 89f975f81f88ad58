"""Market model for exchange-level trading pairs."""

from pydantic import Field

from nomics_client.models.base import NomicsRecord


class Market(NomicsRecord):
    """A tradable pair on a specific exchange.

    Example payload:
        {"exchange": "bitfinex", "market": "avtbtc", "base": "AVT", "quote": "BTC"}
    """

    exchange: str = Field(..., description="Exchange id (e.g., 'binance', 'gdax')")
    market: str = Field(..., description="Exchange-local pair symbol (e.g., 'avtbtc')")
    base: str = Field(..., description="Base asset symbol")
    quote: str = Field(..., description="Quote asset symbol")

    @property
    def pair(self) -> tuple[str, str]:
        return (self.base, self.quote)
