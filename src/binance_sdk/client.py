"""
client.py – Unified BinanceFutures façade.

Single entry point that owns one AsyncClient and wires every USD-M
futures wrapper to it, so credentials and the connection pool are
managed once.

Usage
-----
    import asyncio
    from binance_sdk import BinanceFutures, BinanceEnv

    async def main() -> None:
        async with BinanceFutures(api_key="...", secret_key="...", env=BinanceEnv.TESTNET) as bf:
            print(await bf.general.get_server_time())
            print(await bf.market.get_book_ticker("BTCUSDT"))
            for bal in await bf.account.account_balance():
                print(bal.asset, bal.balance)

    asyncio.run(main())
"""

from __future__ import annotations

from typing import Optional, Union

from .config import DEFAULT_TIMEOUT_S, BinanceEnv, futures_host
from .futures import FuturesAccount, FuturesGeneral, FuturesMarket, FuturesUserStream
from .rest import AsyncClient

DEFAULT_RECV_WINDOW_MS = 5000


class BinanceFutures:
    """
    Façade over the USD-M futures API.

    Parameters
    ----------
    api_key     : API key (optional for public endpoints)
    secret_key  : Secret key for signed endpoints (optional)
    env         : BinanceEnv.MAINNET / BinanceEnv.TESTNET, or "mainnet" / "testnet"
    host        : Explicit base URL; overrides ``env``
    proxy       : Optional http(s) proxy URL
    recv_window : recvWindow in ms for signed account queries
    timeout     : HTTP timeout in seconds
    """

    def __init__(
        self,
        api_key:    Optional[str] = None,
        secret_key: Optional[str] = None,
        env: Union[BinanceEnv, str] = BinanceEnv.MAINNET,
        *,
        host:        Optional[str] = None,
        proxy:       Optional[str] = None,
        recv_window: int   = DEFAULT_RECV_WINDOW_MS,
        timeout:     float = DEFAULT_TIMEOUT_S,
    ) -> None:
        self._client = AsyncClient(
            api_key,
            secret_key,
            host=host or futures_host(env),
            proxy=proxy,
            timeout=timeout,
        )
        self.general     = FuturesGeneral(self._client)
        self.market      = FuturesMarket(self._client)
        self.account     = FuturesAccount(self._client, recv_window=recv_window)
        self.user_stream = FuturesUserStream(self._client)

    # ------------------------------------------------------------------
    # Async context manager
    # ------------------------------------------------------------------

    async def __aenter__(self) -> "BinanceFutures":
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the shared HTTP session."""
        await self._client.close()

    @property
    def client(self) -> AsyncClient:
        """The shared AsyncClient (for endpoints without a wrapper)."""
        return self._client
