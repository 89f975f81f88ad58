"""Client for the Nomics prices endpoint."""

from typing import Optional

from nomics_client.clients.base import BaseClient
from nomics_client.data.prices import convert_base
from nomics_client.models import PricePair


class NomicsPrices(BaseClient):
    """Current prices of all currencies, quoted in USD by the API."""

    ENDPOINT = "prices"

    def get_raw_prices(self) -> str:
        return self._get()

    def get_all_prices(self, quote_currency: Optional[str] = None) -> list[PricePair]:
        """Fetch all prices, optionally re-quoted against another currency.

        Args:
            quote_currency: When given (e.g. 'ETH'), every price is divided
                by this currency's USD price.

        Raises:
            CurrencyNotFoundError: If `quote_currency` is not in the price list.
        """
        prices = self._get_records(PricePair)
        if quote_currency is None:
            return prices
        return convert_base(prices, quote_currency)
