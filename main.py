"""Main script for querying the Nomics API from the command line."""

import logging

from nomics_client import NomicsAPIHandler, NomicsConfig, NomicsError
from nomics_client.data import candles_to_dataframe
from nomics_client.models import dump_json

# Configuration
EXCHANGE = "gdax"
MARKET = "BTC-USD"
INTERVAL = "6h"
LAST_N = 8

INTERSECT_EXCHANGES = ["binance", "gdax", "bitfinex"]
QUOTE_CURRENCY = "ETH"

# MODE: 'candles' or 'markets' or 'prices'
MODE = "candles"

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the application."""
    config = NomicsConfig.from_env()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        with NomicsAPIHandler(config) as api:
            if MODE == "candles":
                print(f"🕯️  MODE: CANDLES ({EXCHANGE} {MARKET} {INTERVAL})\n")
                candles = api.exchange_candles.get_exchange_candles(INTERVAL, EXCHANGE, MARKET)
                df = candles_to_dataframe(candles[-LAST_N:])
                print(df)

                latest = api.exchange_candles.get_most_recent_candle(INTERVAL, EXCHANGE, MARKET)
                print(f"\nMost recent: {latest.model_dump_json() if latest else 'no candles'}")
                ath = api.exchange_candles.get_all_time_high("1d", EXCHANGE, MARKET)
                print(f"All-time high (1d): {ath}")

            elif MODE == "markets":
                print(f"🏦 MODE: MARKETS ({', '.join(INTERSECT_EXCHANGES)})\n")
                intersections = api.markets.get_market_intersections(INTERSECT_EXCHANGES)
                for exchange, markets in intersections.items():
                    print(f"{exchange}: {len(markets)} shared markets")
                    print(f"   {[m.market for m in markets]}")

            elif MODE == "prices":
                print(f"💱 MODE: PRICES (quoted in {QUOTE_CURRENCY})\n")
                prices = api.prices.get_all_prices(QUOTE_CURRENCY)
                print(dump_json(prices))

            else:
                raise ValueError(f"Invalid MODE: {MODE}. Must be 'candles', 'markets' or 'prices'")

    except NomicsError as e:
        logger.error(f"❌ Nomics request failed: {e}")
        raise


if __name__ == "__main__":
    main()
