"""
examples/quickstart.py – End-to-end demo of the Binance SDK.

Walks through:
  1. Public connectivity and server time
  2. Exchange info lookup for one symbol
  3. Market data (book ticker, premium index)
  4. Signed account queries (only when keys are set)
  5. Listen-key lifecycle for the user data stream

HOW TO RUN
----------
    export BINANCE_API_KEY="your_api_key"        # optional
    export BINANCE_SECRET_KEY="your_secret_key"  # optional
    python examples/quickstart.py

    Everything targets TESTNET by default.  Set BINANCE_ENV=mainnet to go live.
"""

from __future__ import annotations

import asyncio
import logging
import os

from binance_sdk import BinanceError, BinanceFutures, ExchangeError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s – %(message)s",
)
logger = logging.getLogger("quickstart")

# ---------------------------------------------------------------------------
# Config – read from environment variables
# ---------------------------------------------------------------------------

API_KEY    = os.environ.get("BINANCE_API_KEY",    "")
SECRET_KEY = os.environ.get("BINANCE_SECRET_KEY", "")
ENV        = os.environ.get("BINANCE_ENV",        "testnet")   # or "mainnet"
PROXY      = os.environ.get("BINANCE_PROXY") or None
SYMBOL     = os.environ.get("BINANCE_SYMBOL",     "BTCUSDT")


async def main() -> None:
    async with BinanceFutures(API_KEY, SECRET_KEY, env=ENV, proxy=PROXY) as bf:
        rtt = await bf.general.ping()
        logger.info("Ping: %.1f ms", rtt * 1000)

        server_time = await bf.general.get_server_time()
        logger.info("Server time: %d", server_time.server_time)

        symbol = await bf.general.get_symbol_info(SYMBOL)
        logger.info(
            "%s: status=%s price_precision=%d quantity_precision=%d",
            symbol.symbol, symbol.status, symbol.price_precision, symbol.quantity_precision,
        )

        ticker = await bf.market.get_book_ticker(SYMBOL)
        logger.info("Best bid %s / ask %s", ticker.bid_price, ticker.ask_price)

        premium = await bf.market.get_premium_index(SYMBOL)
        logger.info("Mark %s, funding rate %s", premium.mark_price, premium.last_funding_rate)

        if not (API_KEY and SECRET_KEY):
            logger.info("No API keys set – skipping signed endpoints")
            return

        try:
            for balance in await bf.account.account_balance():
                if balance.balance not in ("0", "0.00000000"):
                    logger.info("Balance %s: %s", balance.asset, balance.balance)
        except ExchangeError as exc:
            logger.error("Exchange rejected the signed request: [%d] %s", exc.code, exc.message)
            return

        listen_key = await bf.user_stream.start()
        await bf.user_stream.keep_alive(listen_key)
        await bf.user_stream.close(listen_key)
        logger.info("Listen key round trip OK")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except BinanceError as exc:
        logger.error("Failed: %s", exc)
        raise SystemExit(1)
