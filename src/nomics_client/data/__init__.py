"""Data fetching and transform modules for nomics-client."""

from nomics_client.data.candles import (
    aggregate,
    all_time_high,
    candles_from_timestamp,
    candles_to_dataframe,
    last_n_candles,
    most_recent_candle,
    most_recent_non_zero_candle,
    repair_zero_candles,
)
from nomics_client.data.fetchers import BaseFetcher, HttpxFetcher
from nomics_client.data.markets import (
    filter_by_exchange,
    market_from_pair,
    market_intersections,
    supported_exchanges,
)
from nomics_client.data.prices import convert_base

__all__ = [
    # Fetchers
    "BaseFetcher",
    "HttpxFetcher",
    # Candles
    "aggregate",
    "all_time_high",
    "candles_from_timestamp",
    "candles_to_dataframe",
    "last_n_candles",
    "most_recent_candle",
    "most_recent_non_zero_candle",
    "repair_zero_candles",
    # Markets
    "filter_by_exchange",
    "market_from_pair",
    "market_intersections",
    "supported_exchanges",
    # Prices
    "convert_base",
]
