"""
signing.py – HMAC-SHA256 query-string signing for Binance.

How it works
------------
1. The caller supplies an already-encoded payload
   (``symbol=BTCUSDT&timestamp=1700000000000``).
2. HMAC-SHA256 is computed over exactly those bytes with the account
   secret key as the MAC key.
3. The lowercase hex digest is appended as the *last* query parameter:
   ``<payload>&signature=<hex>``.

The payload is never re-ordered or re-encoded: the exchange verifies the
signature against the bytes it receives, so any transformation after
signing breaks authentication.

A missing payload is signed as the empty byte string and yields
``&signature=<hex>``; zero-parameter signed endpoints depend on this.
An empty secret key is not rejected either.

References
----------
- https://binance-docs.github.io/apidocs/futures/en/#signed-trade-and-user_data-endpoint-security
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Optional


def sign(payload: Optional[str], secret_key: str) -> str:
    """
    Return the lowercase hex HMAC-SHA256 of ``payload`` keyed by ``secret_key``.

    ``None`` is treated as the empty payload.
    """
    message = (payload or "").encode("utf-8")
    return hmac.new(secret_key.encode("utf-8"), message, hashlib.sha256).hexdigest()


def signed_query(payload: Optional[str], secret_key: str) -> str:
    """
    Build the final query string for a signed request.

    Returns ``<payload>&signature=<hex>`` or, with no payload,
    ``&signature=<hex>``.
    """
    signature = sign(payload, secret_key)
    if payload is None:
        return f"&signature={signature}"
    return f"{payload}&signature={signature}"
