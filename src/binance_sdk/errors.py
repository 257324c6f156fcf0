"""
errors.py – Exception taxonomy for the Binance client.

Every failure a call can produce maps to exactly one class below.  The
client never retries and never swallows: callers either get the typed
value or one of these.

    BinanceError
    ├── ConfigurationError       bad proxy URL, API key not usable as a header
    ├── TransportError           connection / DNS / TLS / timeout
    ├── UnauthorizedError        HTTP 401
    ├── ServerError              HTTP 500
    ├── ServiceUnavailableError  HTTP 503
    ├── ExchangeError            HTTP 400 with {"code": ..., "msg": ...}
    ├── UnexpectedStatusError    any other non-200 status
    ├── DecodeError              body did not match the expected shape
    └── SymbolNotFoundError      symbol absent from exchange info
"""

from __future__ import annotations


class BinanceError(Exception):
    """Base class for every error raised by binance_sdk."""


class ConfigurationError(BinanceError):
    """Client configuration is unusable (raised at construction or header build)."""


class TransportError(BinanceError):
    """The request never produced an HTTP response."""

    def __init__(self, method: str, path: str, reason: str) -> None:
        self.method = method.upper()
        self.path   = path
        self.reason = reason
        super().__init__(f"{self.method} {path} failed: {reason}")


class UnauthorizedError(BinanceError):
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Unauthorized")


class ServerError(BinanceError):
    status_code = 500

    def __init__(self) -> None:
        super().__init__("Internal Server Error")


class ServiceUnavailableError(BinanceError):
    status_code = 503

    def __init__(self) -> None:
        super().__init__("Service Unavailable")


class ExchangeError(BinanceError):
    """Structured rejection returned by the exchange with HTTP 400."""

    status_code = 400

    def __init__(self, code: int, message: str) -> None:
        self.code    = code
        self.message = message
        super().__init__(f"Binance error {code}: {message}")


class UnexpectedStatusError(BinanceError):
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Received response: {status_code}")


class DecodeError(BinanceError):
    """Response body could not be deserialised into the requested type."""

    def __init__(self, body: str, type_name: str, reason: str = "") -> None:
        self.body      = body
        self.type_name = type_name
        self.reason    = reason
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Cannot decode response as {type_name}{detail}: {body}")


class SymbolNotFoundError(BinanceError):
    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Symbol not found: {symbol}")
