"""
auth.py – API credentials and request header construction.

Binance authenticates in two layers:

1. ``X-MBX-APIKEY`` header carrying the API key.  Sent on every signed
   call and on the API-key-only user-data-stream calls.
2. A ``signature`` query parameter (see signing.py) for SIGNED endpoints,
   computed with the secret key.  The secret itself never leaves the
   process.

Both keys are optional so public market-data endpoints stay usable
without an account.

Usage
-----
    from binance_sdk.auth import Credentials, build_headers

    creds   = Credentials(api_key="...", secret_key="...")
    headers = build_headers(creds.api_key, content_type=True)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ._version import __version__
from .errors import ConfigurationError

USER_AGENT        = f"binance-sdk-python/{__version__}"
API_KEY_HEADER    = "X-MBX-APIKEY"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class Credentials:
    """
    Immutable API key pair.

    ``secret_key`` is excluded from ``repr`` so credentials can appear in
    logs and tracebacks without leaking the signing key.
    """

    api_key:    str = ""
    secret_key: str = field(default="", repr=False)

    @classmethod
    def of(cls, api_key: Optional[str] = None, secret_key: Optional[str] = None) -> "Credentials":
        """Build credentials, defaulting absent keys to empty strings."""
        return cls(api_key=api_key or "", secret_key=secret_key or "")

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def _is_valid_header_value(value: str) -> bool:
    # Visible ASCII plus horizontal tab
    return all(ch == "\t" or " " <= ch <= "~" for ch in value)


def build_headers(api_key: str, content_type: bool) -> dict[str, str]:
    """
    Return the header set for an authenticated request.

    The API-key header is always present, even when the key is empty.
    ``content_type`` adds the form Content-Type used by signed verbs.

    Raises ConfigurationError if the API key cannot be sent as a header
    value (control characters or non-ASCII).
    """
    if not _is_valid_header_value(api_key):
        raise ConfigurationError("API key contains characters not allowed in an HTTP header")

    headers = {"User-Agent": USER_AGENT}
    if content_type:
        headers["Content-Type"] = FORM_CONTENT_TYPE
    headers[API_KEY_HEADER] = api_key
    return headers
