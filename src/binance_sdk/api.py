"""
api.py – Endpoint resolver for the Binance REST API.

Every logical operation belongs to an API family (spot, USD-M futures) and
resolves to exactly one fixed URL path.  The member value *is* the path,
so resolution is a lookup with no failure mode for valid members.

Families are decorated with ``@unique``: two operations in the same family
that accidentally share a path fail at import time instead of silently
becoming aliases of each other.

Usage
-----
    from binance_sdk.api import Futures, resolve

    resolve(Futures.PING)          # "/fapi/v1/ping"
    resolve(Futures.EXCHANGE_INFO) # "/fapi/v1/exchangeInfo"
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Union


# ---------------------------------------------------------------------------
# Spot  (/api/v3)
# ---------------------------------------------------------------------------

@unique
class Spot(str, Enum):
    PING              = "/api/v3/ping"
    TIME              = "/api/v3/time"
    EXCHANGE_INFO     = "/api/v3/exchangeInfo"
    DEPTH             = "/api/v3/depth"
    TRADES            = "/api/v3/trades"
    KLINES            = "/api/v3/klines"
    TICKER_24HR       = "/api/v3/ticker/24hr"
    PRICE             = "/api/v3/ticker/price"
    BOOK_TICKER       = "/api/v3/ticker/bookTicker"
    ACCOUNT           = "/api/v3/account"
    ORDER             = "/api/v3/order"
    OPEN_ORDERS       = "/api/v3/openOrders"
    ALL_ORDERS        = "/api/v3/allOrders"
    MY_TRADES         = "/api/v3/myTrades"
    USER_DATA_STREAM  = "/api/v3/userDataStream"


# ---------------------------------------------------------------------------
# USD-M futures  (/fapi)
# ---------------------------------------------------------------------------

@unique
class Futures(str, Enum):
    # Market data (public)
    PING              = "/fapi/v1/ping"
    TIME              = "/fapi/v1/time"
    EXCHANGE_INFO     = "/fapi/v1/exchangeInfo"
    DEPTH             = "/fapi/v1/depth"
    TRADES            = "/fapi/v1/trades"
    HISTORICAL_TRADES = "/fapi/v1/historicalTrades"
    AGG_TRADES        = "/fapi/v1/aggTrades"
    KLINES            = "/fapi/v1/klines"
    PREMIUM_INDEX     = "/fapi/v1/premiumIndex"
    FUNDING_RATE      = "/fapi/v1/fundingRate"
    TICKER_24HR       = "/fapi/v1/ticker/24hr"
    TICKER_PRICE      = "/fapi/v1/ticker/price"
    BOOK_TICKER       = "/fapi/v1/ticker/bookTicker"
    OPEN_INTEREST     = "/fapi/v1/openInterest"

    # Trade / account (signed)
    ORDER             = "/fapi/v1/order"
    OPEN_ORDERS       = "/fapi/v1/openOrders"
    ALL_ORDERS        = "/fapi/v1/allOrders"
    USER_TRADES       = "/fapi/v1/userTrades"
    INCOME            = "/fapi/v1/income"
    BALANCE           = "/fapi/v2/balance"
    ACCOUNT           = "/fapi/v2/account"
    POSITION_RISK     = "/fapi/v2/positionRisk"
    CHANGE_LEVERAGE   = "/fapi/v1/leverage"
    MARGIN_TYPE       = "/fapi/v1/marginType"

    # User data stream (API-key only)
    USER_DATA_STREAM  = "/fapi/v1/listenKey"


# Any endpoint the client can dispatch to
API = Union[Spot, Futures]

_FAMILIES: tuple[type[Enum], ...] = (Spot, Futures)


def resolve(endpoint: API) -> str:
    """Return the URL path for an endpoint."""
    if not isinstance(endpoint, _FAMILIES):
        raise TypeError(f"{endpoint!r} is not a known API endpoint")
    return endpoint.value
