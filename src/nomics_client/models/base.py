"""Shared pieces for Nomics record models: fixed-scale decimals and decoding."""

from collections.abc import Sequence
from decimal import ROUND_DOWN, Context, Decimal, InvalidOperation, localcontext
from functools import lru_cache
from typing import Annotated, Any, TypeVar

from pydantic import AfterValidator, BaseModel, SerializeAsAny, TypeAdapter, ValidationError

from nomics_client.exceptions import MalformedResponseError

SCALE = Decimal("0.00000001")

# Wide enough for 8 fractional digits on top of any realistic price or volume
DECIMAL_CONTEXT = Context(prec=60, rounding=ROUND_DOWN)


def decimal_context():
    """Context manager for price arithmetic (sums, quotients) at full precision."""
    return localcontext(DECIMAL_CONTEXT)


def truncate(value: Decimal) -> Decimal:
    """Quantize to 8 fractional digits, rounding toward zero.

    Raises:
        ValueError: If the value has too many digits to be held at scale 8.
    """
    with decimal_context():
        try:
            return value.quantize(SCALE, rounding=ROUND_DOWN)
        except InvalidOperation as e:
            raise ValueError(f"Decimal {value} cannot be held at 8 fractional digits") from e


# Prices and volumes arrive as JSON strings; keep them exact at scale 8.
Scale8Decimal = Annotated[Decimal, AfterValidator(truncate)]


class NomicsRecord(BaseModel):
    """Base class for immutable records decoded from the Nomics API."""

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


RecordT = TypeVar("RecordT", bound=NomicsRecord)

_dump_adapter: TypeAdapter[list[Any]] = TypeAdapter(list[SerializeAsAny[NomicsRecord]])


@lru_cache(maxsize=None)
def _list_adapter(model: type[NomicsRecord]) -> TypeAdapter:
    return TypeAdapter(list[model])


def decode_records(text: str, model: type[RecordT]) -> list[RecordT]:
    """Decode a JSON array response body into a list of records.

    Args:
        text: Raw response body.
        model: Record class every array element must validate against.

    Returns:
        Decoded records in response order.

    Raises:
        MalformedResponseError: If the body is not a JSON array of valid records.
    """
    try:
        return _list_adapter(model).validate_json(text)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Invalid {model.__name__} payload: {e.error_count()} error(s), "
            f"first: {e.errors()[0]['msg']}"
        ) from e


def dump_json(records: Sequence[NomicsRecord]) -> str:
    """Serialize records back into a JSON array string."""
    return _dump_adapter.dump_json(list(records)).decode()
