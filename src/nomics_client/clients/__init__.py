"""Nomics endpoint clients."""

from nomics_client.clients.aggregated_candles import NomicsAggregatedCandles
from nomics_client.clients.base import BaseClient
from nomics_client.clients.exchange_candles import NomicsExchangeCandles
from nomics_client.clients.handler import NomicsAPIHandler
from nomics_client.clients.markets import NomicsMarkets
from nomics_client.clients.prices import NomicsPrices

__all__ = [
    "BaseClient",
    "NomicsAPIHandler",
    "NomicsAggregatedCandles",
    "NomicsExchangeCandles",
    "NomicsMarkets",
    "NomicsPrices",
]
