"""
general.py – Connectivity and exchange metadata for USD-M futures.
"""

from __future__ import annotations

import time

from ..api import Futures
from ..errors import SymbolNotFoundError
from ..rest import AsyncClient
from ..types import Empty, ExchangeInformation, ServerTime, Symbol


class FuturesGeneral:
    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    async def ping(self) -> float:
        """Test connectivity; return the round-trip time in seconds."""
        t0 = time.perf_counter()
        await self.client.get(Futures.PING, response_type=Empty)
        return time.perf_counter() - t0

    async def get_server_time(self) -> ServerTime:
        return await self.client.get(Futures.TIME, response_type=ServerTime)

    async def exchange_info(self) -> ExchangeInformation:
        """Current exchange trading rules and symbol information."""
        return await self.client.get(Futures.EXCHANGE_INFO, response_type=ExchangeInformation)

    async def get_symbol_info(self, symbol: str) -> Symbol:
        """
        Return the trading rules for ``symbol`` (case-insensitive).

        Raises SymbolNotFoundError if the exchange does not list it.
        """
        upper_symbol = symbol.upper()
        info = await self.exchange_info()
        for item in info.symbols:
            if item.symbol == upper_symbol:
                return item
        raise SymbolNotFoundError(upper_symbol)
