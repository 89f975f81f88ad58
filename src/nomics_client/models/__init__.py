"""Models for nomics-client."""

from nomics_client.models.base import (
    NomicsRecord,
    Scale8Decimal,
    decimal_context,
    decode_records,
    dump_json,
    truncate,
)
from nomics_client.models.candle import Candle
from nomics_client.models.market import Market
from nomics_client.models.price import PricePair

__all__ = [
    # Base
    "NomicsRecord",
    "Scale8Decimal",
    "decimal_context",
    "decode_records",
    "dump_json",
    "truncate",
    # Records
    "Candle",
    "Market",
    "PricePair",
]
