"""Price re-basing from USD into another quote currency."""

from collections.abc import Sequence

from nomics_client.exceptions import CurrencyNotFoundError, InvalidArgumentError
from nomics_client.models import PricePair, decimal_context, truncate


def convert_base(prices: Sequence[PricePair], quote_currency: str) -> list[PricePair]:
    """Re-quote USD prices against `quote_currency`.

    Args:
        prices: Prices quoted in USD.
        quote_currency: Symbol to quote against (e.g. 'ETH'), matched exactly.

    Returns:
        One pair per input pair, price divided by the quote currency's USD
        price and truncated to 8 decimals.

    Raises:
        CurrencyNotFoundError: If `quote_currency` is not in `prices`.
        InvalidArgumentError: If the quote currency is priced at zero.
    """
    quote = next((p for p in prices if p.currency == quote_currency), None)
    if quote is None:
        raise CurrencyNotFoundError(quote_currency)
    if quote.price == 0:
        raise InvalidArgumentError(f"Cannot re-base against {quote_currency}: price is zero")

    with decimal_context():
        quotients = [(p.currency, p.price / quote.price) for p in prices]
    return [PricePair(currency=currency, price=truncate(price)) for currency, price in quotients]
