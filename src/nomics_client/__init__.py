"""Client wrappers and candle transforms for the Nomics market-data API."""

from nomics_client.clients import (
    NomicsAggregatedCandles,
    NomicsAPIHandler,
    NomicsExchangeCandles,
    NomicsMarkets,
    NomicsPrices,
)
from nomics_client.config import NomicsConfig
from nomics_client.exceptions import (
    CurrencyNotFoundError,
    InvalidArgumentError,
    MalformedResponseError,
    NomicsError,
    TransportError,
)
from nomics_client.models import Candle, Market, PricePair

__version__ = "0.1.0"

__all__ = [
    "NomicsAPIHandler",
    "NomicsAggregatedCandles",
    "NomicsConfig",
    "NomicsExchangeCandles",
    "NomicsMarkets",
    "NomicsPrices",
    "Candle",
    "Market",
    "PricePair",
    "CurrencyNotFoundError",
    "InvalidArgumentError",
    "MalformedResponseError",
    "NomicsError",
    "TransportError",
]
