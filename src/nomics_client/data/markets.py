"""Market filters over the Nomics market list."""

from collections import Counter
from collections.abc import Sequence

from nomics_client.models import Market


def filter_by_exchange(markets: Sequence[Market], exchange_id: str) -> list[Market]:
    """Keep the markets listed on `exchange_id`, in their original order."""
    return [m for m in markets if m.exchange == exchange_id]


def market_from_pair(markets: Sequence[Market], exchange: str, base: str, quote: str) -> str:
    """Look up the exchange-local market symbol for a base/quote pair.

    Base and quote are matched case-insensitively.

    Returns:
        The first matching market symbol, or an empty string if none matches.
    """
    base, quote = base.casefold(), quote.casefold()
    for market in filter_by_exchange(markets, exchange):
        if market.base.casefold() == base and market.quote.casefold() == quote:
            return market.market
    return ""


def supported_exchanges(markets: Sequence[Market]) -> list[str]:
    """Return the distinct exchange ids in first-seen order."""
    return list(dict.fromkeys(m.exchange for m in markets))


def market_intersections(
    markets: Sequence[Market], exchanges: Sequence[str]
) -> dict[str, list[Market]]:
    """Find the base/quote pairs listed on every one of `exchanges`.

    Args:
        markets: Full market list.
        exchanges: Exchange ids to intersect.

    Returns:
        For each exchange, its markets whose (base, quote) pair is listed on
        all the given exchanges, in original order.
    """
    exchanges = list(dict.fromkeys(exchanges))
    by_exchange = {exchange: filter_by_exchange(markets, exchange) for exchange in exchanges}

    counts: Counter[tuple[str, str]] = Counter()
    for exchange_markets in by_exchange.values():
        counts.update({m.pair for m in exchange_markets})

    shared = {pair for pair, count in counts.items() if count == len(exchanges)}
    return {
        exchange: [m for m in exchange_markets if m.pair in shared]
        for exchange, exchange_markets in by_exchange.items()
    }
