"""Tests for NomicsExchangeCandles with a mocked fetcher."""

import json
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from nomics_client.clients.exchange_candles import NomicsExchangeCandles
from nomics_client.data.fetchers import BaseFetcher
from nomics_client.exceptions import InvalidArgumentError, MalformedResponseError, TransportError

URL = "https://api.nomics.com/v1/exchange_candles"


@pytest.fixture
def mock_fetcher():
    """Create a mock fetcher returning an empty candle list."""
    fetcher = MagicMock(spec=BaseFetcher)
    fetcher.get.return_value = "[]"
    return fetcher


@pytest.fixture
def client(mock_fetcher):
    return NomicsExchangeCandles(mock_fetcher, api_key="test-key")


def generate_candles_json(closes: list[str], start_hour: int = 0) -> str:
    """Generate an exchange_candles response body.

    Args:
        closes: Close price of each 1h candle; "0" marks an empty interval.
        start_hour: Hour of the first candle on 2018-03-19.

    Returns:
        JSON array text as the API returns it.
    """
    candles = []
    for i, close in enumerate(closes):
        hour = start_hour + i
        candles.append(
            {
                "timestamp": f"2018-03-{19 + hour // 24:02d}T{hour % 24:02d}:00:00Z",
                "open": close,
                "high": str(Decimal(close) + 1) if close != "0" else "0",
                "low": close,
                "close": close,
                "volume": "2" if close != "0" else "0",
            }
        )
    return json.dumps(candles)


class TestRequests:
    """Tests for the URL and query parameters sent."""

    def test_raw_candles_passes_through(self, client, mock_fetcher):
        """Test that get_raw_candles returns the body unchanged."""
        mock_fetcher.get.return_value = '[{"raw": true}]'

        result = client.get_raw_candles("1h", "gdax", "BTC-USD")

        assert result == '[{"raw": true}]'
        mock_fetcher.get.assert_called_once_with(
            URL,
            params={"key": "test-key", "interval": "1h", "exchange": "gdax", "market": "BTC-USD"},
        )

    def test_custom_base_url(self, mock_fetcher):
        """Test that the endpoint is appended to a custom base URL."""
        client = NomicsExchangeCandles(mock_fetcher, "k", base_url="https://example.test/v1/")

        client.fetch_candles("1d", "binance", "ETHBTC")

        assert mock_fetcher.get.call_args.args[0] == "https://example.test/v1/exchange_candles"


class TestGetExchangeCandles:
    """Tests for get_exchange_candles."""

    def test_native_interval_repairs_only(self, client, mock_fetcher):
        """Test that native intervals are fetched directly and zero-repaired."""
        mock_fetcher.get.return_value = generate_candles_json(["0", "5", "0", "7"])

        result = client.get_exchange_candles("30m", "gdax", "BTC-USD")

        assert mock_fetcher.get.call_args.kwargs["params"]["interval"] == "30m"
        assert [c.close for c in result] == [Decimal("5"), Decimal("5"), Decimal("7")]
        assert result[1].timestamp == "2018-03-19T02:00:00Z"

    def test_aggregated_interval_fetches_1h(self, client, mock_fetcher):
        """Test that 6h candles are built from 1h candles."""
        mock_fetcher.get.return_value = generate_candles_json([str(10 + i) for i in range(13)])

        result = client.get_exchange_candles("6h", "gdax", "BTC-USD")

        assert mock_fetcher.get.call_args.kwargs["params"]["interval"] == "1h"
        assert len(result) == 2
        first = result[0]
        assert first.timestamp == "2018-03-19T00:00:00Z"
        assert first.open == Decimal("10")
        assert first.close == Decimal("15")
        assert first.high == Decimal("16")
        assert first.low == Decimal("10")
        assert first.volume == Decimal("12")
        assert result[1].timestamp == "2018-03-19T06:00:00Z"

    def test_aggregation_runs_after_repair(self, client, mock_fetcher):
        """Test that zero candles are repaired before grouping."""
        mock_fetcher.get.return_value = generate_candles_json(["0", "4", "0", "6", "0"])

        result = client.get_exchange_candles("2h", "gdax", "BTC-USD")

        # Leading zero dropped, then (4, 4-carried) and (6, 6-carried)
        assert len(result) == 2
        assert result[0].timestamp == "2018-03-19T01:00:00Z"
        assert result[0].close == Decimal("4")
        assert result[0].volume == Decimal("4")
        assert result[1].close == Decimal("6")

    def test_unsupported_interval_does_not_fetch(self, client, mock_fetcher):
        """Test that an unknown interval fails before any request is made."""
        with pytest.raises(InvalidArgumentError, match="Unsupported interval"):
            client.get_exchange_candles("4h", "gdax", "BTC-USD")

        mock_fetcher.get.assert_not_called()

    def test_malformed_response(self, client, mock_fetcher):
        """Test that a body missing fields raises MalformedResponseError."""
        mock_fetcher.get.return_value = '[{"timestamp": "2018-03-19T10:00:00Z"}]'

        with pytest.raises(MalformedResponseError):
            client.get_exchange_candles("1h", "gdax", "BTC-USD")

    def test_transport_error_propagates(self, client, mock_fetcher):
        """Test that fetcher failures reach the caller unchanged."""
        mock_fetcher.get.side_effect = TransportError("HTTP 503", URL, status_code=503)

        with pytest.raises(TransportError):
            client.get_exchange_candles("1h", "gdax", "BTC-USD")


class TestDerivedQueries:
    """Tests for the most-recent, last-N, all-time-high and timestamp queries."""

    def test_most_recent_candle(self, client, mock_fetcher):
        """Test that the last raw candle is returned, zero or not."""
        mock_fetcher.get.return_value = generate_candles_json(["5", "6", "0"])

        result = client.get_most_recent_candle("1h", "gdax", "BTC-USD")

        assert result.timestamp == "2018-03-19T02:00:00Z"
        assert result.close == Decimal("0")

    def test_most_recent_candle_empty(self, client, mock_fetcher):
        """Test that an empty response gives None."""
        assert client.get_most_recent_candle("1h", "gdax", "BTC-USD") is None

    def test_most_recent_non_zero_candle(self, client, mock_fetcher):
        """Test that trailing zero candles are skipped."""
        mock_fetcher.get.return_value = generate_candles_json(["5", "6", "0", "0"])

        result = client.get_most_recent_non_zero_candle("1h", "gdax", "BTC-USD")

        assert result.close == Decimal("6")
        assert result.timestamp == "2018-03-19T01:00:00Z"

    def test_most_recent_non_zero_candle_first_element(self, client, mock_fetcher):
        """Test that the very first candle is considered."""
        mock_fetcher.get.return_value = generate_candles_json(["5", "0"])

        result = client.get_most_recent_non_zero_candle("1h", "gdax", "BTC-USD")

        assert result.close == Decimal("5")

    def test_most_recent_on_aggregated_interval(self, client, mock_fetcher):
        """Test that aggregated intervals answer from aggregated candles."""
        mock_fetcher.get.return_value = generate_candles_json([str(10 + i) for i in range(14)])

        result = client.get_most_recent_candle("12h", "gdax", "BTC-USD")

        assert result.timestamp == "2018-03-19T00:00:00Z"
        assert result.close == Decimal("21")

    def test_last_n_candles(self, client, mock_fetcher):
        """Test that the last n candles come back in ascending order."""
        mock_fetcher.get.return_value = generate_candles_json(["1", "2", "3", "4"])

        result = client.get_last_n_candles(2, "1h", "gdax", "BTC-USD")

        assert [c.close for c in result] == [Decimal("3"), Decimal("4")]

    def test_all_time_high(self, client, mock_fetcher):
        """Test that the highest high is returned."""
        mock_fetcher.get.return_value = generate_candles_json(["10", "30.5", "20"])

        assert client.get_all_time_high("1d", "gdax", "BTC-USD") == Decimal("31.5")

    def test_all_time_high_empty(self, client, mock_fetcher):
        """Test that no candles give no all-time high."""
        assert client.get_all_time_high("1d", "gdax", "BTC-USD") is None

    def test_candles_from_timestamp(self, client, mock_fetcher):
        """Test that candles from the matching timestamp onward are returned."""
        mock_fetcher.get.return_value = generate_candles_json(["1", "2", "3", "4"])

        result = client.get_candles_from_timestamp("2018-03-19T02:00:00Z", "1h", "gdax", "BTC-USD")

        assert [c.close for c in result] == [Decimal("3"), Decimal("4")]

    def test_candles_from_unknown_timestamp(self, client, mock_fetcher):
        """Test that an unmatched timestamp returns an empty list."""
        mock_fetcher.get.return_value = generate_candles_json(["1", "2"])

        assert client.get_candles_from_timestamp("2019-01-01T00:00:00Z", "1h", "gdax", "BTC-USD") == []
