"""Candle model for Nomics OHLCV kline data."""

from pydantic import Field

from nomics_client.models.base import NomicsRecord, Scale8Decimal


class Candle(NomicsRecord):
    """OHLCV candle as returned by the candles and exchange_candles endpoints.

    Example payload:
        {"timestamp": "2018-03-19T10:00:00Z", "low": "7024.32225",
         "open": "8276.19407", "close": "8281.17307", "high": "8566.43000",
         "volume": "59624801"}

    A close of exactly zero marks an interval without trades.
    """

    timestamp: str = Field(
        ..., description="Interval start (ISO-8601 UTC, e.g. '2018-03-19T10:00:00Z')"
    )

    # OHLCV data
    open: Scale8Decimal = Field(..., description="Opening price")
    high: Scale8Decimal = Field(..., description="Highest price during the period")
    low: Scale8Decimal = Field(..., description="Lowest price during the period")
    close: Scale8Decimal = Field(..., description="Closing price")
    volume: Scale8Decimal = Field(..., description="Trading volume")
