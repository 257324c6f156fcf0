"""
Binance SDK – typed Python client for the Binance REST API.

Provides:
  - Unified futures façade             (client.py   → BinanceFutures)
  - HMAC-SHA256 query signing          (signing.py  → sign, signed_query)
  - Endpoint resolver                  (api.py      → Spot, Futures, resolve)
  - Credentials and headers            (auth.py     → Credentials, build_headers)
  - Configuration and hosts            (config.py   → ClientConfig, BinanceEnv)
  - Typed Pydantic v2 models           (types.py)
  - Async REST client                  (rest.py     → AsyncClient)
  - Synchronous REST client            (rest.py     → Client)
  - Error taxonomy                     (errors.py)

Quickstart
----------
    import asyncio
    from binance_sdk import AsyncClient, Futures, ServerTime

    async def main() -> None:
        async with AsyncClient(host="https://fapi.binance.com") as client:
            t = await client.get(Futures.TIME, response_type=ServerTime)
            print(t.server_time)

    asyncio.run(main())
"""

from ._version import __version__
from .api import API, Futures, Spot, resolve
from .auth import Credentials, build_headers
from .config import BinanceEnv, ClientConfig, futures_host, spot_host
from .errors import (
    BinanceError,
    ConfigurationError,
    DecodeError,
    ExchangeError,
    ServerError,
    ServiceUnavailableError,
    SymbolNotFoundError,
    TransportError,
    UnauthorizedError,
    UnexpectedStatusError,
)
from .signing import sign, signed_query
from .types import (
    # Envelopes
    Empty,
    ExchangeErrorBody,
    ServerTime,
    ListenKey,
    # Exchange information
    RateLimit,
    Asset,
    Symbol,
    ExchangeInformation,
    # Market data
    PriceLevel,
    OrderBook,
    Trade,
    SymbolPrice,
    BookTicker,
    PremiumIndex,
    OpenInterest,
    # Account
    AccountBalance,
    AccountAsset,
    AccountPosition,
    AccountInformation,
    PositionRisk,
)
from .util import build_request, build_signed_request
from .rest import AsyncClient, Client, handle_response
from .futures import FuturesAccount, FuturesGeneral, FuturesMarket, FuturesUserStream
from .client import BinanceFutures

__all__ = [
    # Endpoints
    "API",
    "Futures",
    "Spot",
    "resolve",
    # Auth / config
    "Credentials",
    "build_headers",
    "BinanceEnv",
    "ClientConfig",
    "futures_host",
    "spot_host",
    # Errors
    "BinanceError",
    "ConfigurationError",
    "DecodeError",
    "ExchangeError",
    "ServerError",
    "ServiceUnavailableError",
    "SymbolNotFoundError",
    "TransportError",
    "UnauthorizedError",
    "UnexpectedStatusError",
    # Signing
    "sign",
    "signed_query",
    # Models
    "Empty",
    "ExchangeErrorBody",
    "ServerTime",
    "ListenKey",
    "RateLimit",
    "Asset",
    "Symbol",
    "ExchangeInformation",
    "PriceLevel",
    "OrderBook",
    "Trade",
    "SymbolPrice",
    "BookTicker",
    "PremiumIndex",
    "OpenInterest",
    "AccountBalance",
    "AccountAsset",
    "AccountPosition",
    "AccountInformation",
    "PositionRisk",
    # Payload builders
    "build_request",
    "build_signed_request",
    # REST
    "AsyncClient",
    "Client",
    "handle_response",
    # Futures wrappers
    "FuturesAccount",
    "FuturesGeneral",
    "FuturesMarket",
    "FuturesUserStream",
    # Unified façade
    "BinanceFutures",
]

