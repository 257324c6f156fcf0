"""
market.py – Public market data for USD-M futures.

All calls are unsigned GETs; parameters are encoded with
``util.build_request`` and appended verbatim to the URL.
"""

from __future__ import annotations

from typing import Optional

from ..api import Futures
from ..rest import AsyncClient
from ..types import BookTicker, OpenInterest, OrderBook, PremiumIndex, SymbolPrice, Trade
from ..util import build_request

# Depth limits accepted by /fapi/v1/depth
_DEPTH_LIMITS = (5, 10, 20, 50, 100, 500, 1000)


class FuturesMarket:
    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    async def get_depth(self, symbol: str, limit: Optional[int] = None) -> OrderBook:
        """Order book snapshot.  ``limit`` must be one of 5/10/20/50/100/500/1000."""
        if limit is not None and limit not in _DEPTH_LIMITS:
            raise ValueError(f"limit must be one of {_DEPTH_LIMITS}, got {limit}")
        request = build_request({"symbol": symbol.upper(), "limit": limit})
        return await self.client.get(Futures.DEPTH, request, response_type=OrderBook)

    async def get_trades(self, symbol: str, limit: Optional[int] = None) -> list[Trade]:
        """Most recent public trades (up to 1000)."""
        if limit is not None and not (1 <= limit <= 1000):
            raise ValueError(f"limit must be in [1, 1000], got {limit}")
        request = build_request({"symbol": symbol.upper(), "limit": limit})
        return await self.client.get(Futures.TRADES, request, response_type=list[Trade])

    async def get_price(self, symbol: str) -> SymbolPrice:
        request = build_request({"symbol": symbol.upper()})
        return await self.client.get(Futures.TICKER_PRICE, request, response_type=SymbolPrice)

    async def get_all_prices(self) -> list[SymbolPrice]:
        return await self.client.get(Futures.TICKER_PRICE, response_type=list[SymbolPrice])

    async def get_book_ticker(self, symbol: str) -> BookTicker:
        """Best bid / ask for a symbol."""
        request = build_request({"symbol": symbol.upper()})
        return await self.client.get(Futures.BOOK_TICKER, request, response_type=BookTicker)

    async def get_premium_index(self, symbol: str) -> PremiumIndex:
        """Mark price, index price and funding rate."""
        request = build_request({"symbol": symbol.upper()})
        return await self.client.get(Futures.PREMIUM_INDEX, request, response_type=PremiumIndex)

    async def get_open_interest(self, symbol: str) -> OpenInterest:
        request = build_request({"symbol": symbol.upper()})
        return await self.client.get(Futures.OPEN_INTEREST, request, response_type=OpenInterest)
