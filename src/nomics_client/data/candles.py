"""Candle transforms: zero-fill repair, interval re-aggregation and lookups.

All functions take and return plain candle lists ordered by ascending
timestamp and never mutate their input.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal
from typing import Optional

import pandas as pd

from nomics_client.exceptions import InvalidArgumentError
from nomics_client.models import Candle, decimal_context, truncate

logger = logging.getLogger(__name__)

# Intervals served natively by the Nomics candle endpoints
NATIVE_INTERVALS = ("1m", "5m", "30m", "1h", "1d")

# Coarser intervals built from 1h candles, mapped to their group size
AGGREGATED_INTERVALS = {"2h": 2, "6h": 6, "12h": 12}

BASE_INTERVAL = "1h"


def parse_aggregated_interval(interval: str) -> Optional[int]:
    """Resolve an interval string into an aggregation group size.

    Args:
        interval: Interval requested by the caller (e.g. '1h', '6h').

    Returns:
        The number of 1h candles per group for '2h', '6h' and '12h',
        or None for intervals the API serves natively.

    Raises:
        InvalidArgumentError: If the interval is neither native nor aggregated.
    """
    if interval in AGGREGATED_INTERVALS:
        return AGGREGATED_INTERVALS[interval]
    if interval in NATIVE_INTERVALS:
        return None
    supported = ", ".join([*NATIVE_INTERVALS, *AGGREGATED_INTERVALS])
    raise InvalidArgumentError(f"Unsupported interval: {interval}. Must be one of {supported}")


def repair_zero_candles(candles: Sequence[Candle]) -> list[Candle]:
    """Replace zero-close candles with the last known non-zero candle.

    A carried-forward candle keeps every price and volume field of the last
    good candle and only takes the timestamp of the candle it replaces.
    Zero candles seen before any good candle are dropped.
    """
    repaired: list[Candle] = []
    last_good: Optional[Candle] = None
    dropped = 0

    for candle in candles:
        if candle.close != 0:
            last_good = candle
            repaired.append(candle)
        elif last_good is None:
            dropped += 1
        else:
            repaired.append(last_good.model_copy(update={"timestamp": candle.timestamp}))

    if dropped:
        logger.debug(f"Dropped {dropped} leading zero candle(s)")
    return repaired


def aggregate(candles: Sequence[Candle], group_hours: int) -> list[Candle]:
    """Merge consecutive 1h candles into coarser candles.

    Each group of `group_hours` candles becomes one candle carrying the
    first timestamp and open, the last close, the highest high, the lowest
    low and the summed volume. A trailing group with fewer than
    `group_hours` candles is not emitted.

    Args:
        candles: Zero-repaired, gap-free 1h candles.
        group_hours: Group size, one of 2, 6 or 12.

    Returns:
        Aggregated candles, oldest first.

    Raises:
        InvalidArgumentError: If group_hours is not 2, 6 or 12.
    """
    if group_hours not in AGGREGATED_INTERVALS.values():
        raise InvalidArgumentError(
            f"Unsupported group size: {group_hours}. Must be one of 2, 6, 12"
        )

    full_groups = len(candles) // group_hours
    remainder = len(candles) % group_hours
    if remainder:
        logger.debug(
            f"Dropping {remainder} trailing candle(s) of an incomplete {group_hours}h group"
        )

    aggregated: list[Candle] = []
    for start in range(0, full_groups * group_hours, group_hours):
        group = candles[start : start + group_hours]
        with decimal_context():
            volume = sum((c.volume for c in group), Decimal(0))
        aggregated.append(
            Candle(
                timestamp=group[0].timestamp,
                open=truncate(group[0].open),
                high=truncate(max(c.high for c in group)),
                low=truncate(min(c.low for c in group)),
                close=truncate(group[-1].close),
                volume=truncate(volume),
            )
        )
    return aggregated


def most_recent_candle(candles: Sequence[Candle]) -> Optional[Candle]:
    """Return the last candle, or None for an empty sequence."""
    return candles[-1] if candles else None


def most_recent_non_zero_candle(candles: Sequence[Candle]) -> Optional[Candle]:
    """Return the latest candle whose close is not zero, or None."""
    for candle in reversed(candles):
        if candle.close != 0:
            return candle
    return None


def last_n_candles(candles: Sequence[Candle], n: int) -> list[Candle]:
    """Return the final `n` candles, still oldest first."""
    if n < 0:
        raise InvalidArgumentError(f"n must be >= 0, got {n}")
    if n == 0:
        return []
    return list(candles[-n:])


def all_time_high(candles: Sequence[Candle]) -> Optional[Decimal]:
    """Return the highest `high` across the sequence, or None if it is empty."""
    if not candles:
        return None
    return truncate(max(c.high for c in candles))


def candles_from_timestamp(candles: Sequence[Candle], timestamp: str) -> list[Candle]:
    """Return the candles from the first one stamped `timestamp` to the end.

    Timestamps are compared as strings, ignoring case. Returns an empty list
    when no candle carries the timestamp.
    """
    wanted = timestamp.casefold()
    for index, candle in enumerate(candles):
        if candle.timestamp.casefold() == wanted:
            return list(candles[index:])
    return []


def candles_to_dataframe(candles: Sequence[Candle]) -> pd.DataFrame:
    """Convert candles to a DataFrame.

    Returns:
        DataFrame with columns: timestamp, open, high, low, close, volume.
        Timestamps are UTC datetimes; prices stay Decimal objects.
    """
    df = pd.DataFrame(
        [c.model_dump() for c in candles],
        columns=["timestamp", "open", "high", "low", "close", "volume"],
    )
    df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
    return df
