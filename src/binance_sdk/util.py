"""
util.py – Payload builders for endpoint wrappers.

The client signs payloads as opaque strings; these helpers produce them.
Parameters keep their insertion order and are percent-encoded once here,
so what gets signed is exactly what gets sent.
"""

from __future__ import annotations

import time
from typing import Any, Mapping, Optional
from urllib.parse import urlencode


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_request(params: Mapping[str, Any]) -> str:
    """
    Encode ``params`` as ``key=value&key2=value2``.

    ``None`` values are dropped; booleans become ``true`` / ``false``.
    """
    return urlencode([(k, _format_value(v)) for k, v in params.items() if v is not None])


def build_signed_request(
    params: Mapping[str, Any],
    recv_window: int = 0,
    timestamp: Optional[int] = None,
) -> str:
    """
    Encode ``params`` for a SIGNED endpoint.

    Appends ``recvWindow`` (only when positive) and ``timestamp`` in
    milliseconds, defaulting to the current time.
    """
    signed: dict[str, Any] = dict(params)
    if recv_window > 0:
        signed["recvWindow"] = recv_window
    signed["timestamp"] = timestamp if timestamp is not None else int(time.time() * 1000)
    return build_request(signed)
