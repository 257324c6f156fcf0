"""
config.py – Client configuration and environment hosts.

All configuration is supplied at construction time; the library reads no
environment variables or files.  ``ClientConfig`` is frozen so a single
client instance can be shared across concurrent tasks without locking.

Usage
-----
    from binance_sdk.config import BinanceEnv, ClientConfig, futures_host

    config = ClientConfig(
        host=futures_host(BinanceEnv.TESTNET),
        api_key="...",
        secret_key="...",
        proxy="http://127.0.0.1:8888",
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, unique
from typing import Optional, Union

from yarl import URL

from .auth import Credentials
from .errors import ConfigurationError


# ---------------------------------------------------------------------------
# Environments
# ---------------------------------------------------------------------------

@unique
class BinanceEnv(str, Enum):
    """Binance deployment environment."""
    MAINNET = "mainnet"
    TESTNET = "testnet"

    @property
    def label(self) -> str:
        return self.value


_HOSTS: dict[str, dict[str, str]] = {
    "mainnet": {
        "spot":    "https://api.binance.com",
        "futures": "https://fapi.binance.com",
    },
    "testnet": {
        "spot":    "https://testnet.binance.vision",
        "futures": "https://testnet.binancefuture.com",
    },
}

_PROXY_SCHEMES = {"http", "https"}

DEFAULT_TIMEOUT_S = 10.0


def _env_label(env: Union[BinanceEnv, str]) -> str:
    """Normalise a BinanceEnv enum or string to a lowercase label key."""
    if isinstance(env, BinanceEnv):
        return env.label
    label = env.lower()
    if label not in _HOSTS:
        raise ConfigurationError(f"Unknown environment {env!r}; expected one of {sorted(_HOSTS)}")
    return label


def spot_host(env: Union[BinanceEnv, str] = BinanceEnv.MAINNET) -> str:
    return _HOSTS[_env_label(env)]["spot"]


def futures_host(env: Union[BinanceEnv, str] = BinanceEnv.MAINNET) -> str:
    return _HOSTS[_env_label(env)]["futures"]


def validate_proxy(proxy: str) -> str:
    """Return ``proxy`` unchanged if it is an absolute http(s) URL, else raise ConfigurationError."""
    try:
        url = URL(proxy)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Malformed proxy URL: {exc}") from exc

    # Never echo the URL itself: it may embed proxy credentials
    if url.scheme not in _PROXY_SCHEMES:
        raise ConfigurationError(f"Malformed proxy URL: unsupported scheme {url.scheme!r}")
    if not url.host:
        raise ConfigurationError("Malformed proxy URL: missing host")
    return proxy


# ---------------------------------------------------------------------------
# Client configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ClientConfig:
    """
    Everything a client needs, fixed for its lifetime.

    Parameters
    ----------
    host        : Base URL, e.g. "https://fapi.binance.com" (no trailing slash)
    api_key     : Optional API key; empty string when absent
    secret_key  : Optional secret key; empty string when absent
    proxy       : Optional outbound http(s) proxy URL
    timeout     : Total per-request timeout in seconds
    """

    host:        str
    api_key:     str             = ""
    secret_key:  str             = field(default="", repr=False)
    proxy:       Optional[str]   = None
    timeout:     float           = DEFAULT_TIMEOUT_S

    def __post_init__(self) -> None:
        if not self.host:
            raise ConfigurationError("host must be a non-empty base URL")
        # Paths are appended verbatim, so strip a trailing slash once here
        object.__setattr__(self, "host", self.host.rstrip("/"))
        object.__setattr__(self, "api_key", self.api_key or "")
        object.__setattr__(self, "secret_key", self.secret_key or "")
        if self.proxy is not None:
            validate_proxy(self.proxy)

    @property
    def credentials(self) -> Credentials:
        return Credentials(api_key=self.api_key, secret_key=self.secret_key)
