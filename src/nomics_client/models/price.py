"""Price model for the prices endpoint."""

from pydantic import Field

from nomics_client.models.base import NomicsRecord, Scale8Decimal


class PricePair(NomicsRecord):
    """Price of a currency, quoted in USD unless re-based."""

    currency: str = Field(..., description="Currency symbol (e.g., 'BTC')")
    price: Scale8Decimal = Field(..., description="Price in the quote currency")
