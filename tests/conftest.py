"""
tests/conftest.py – Shared fixtures and the --integration switch.

``exchange`` serves an in-process aiohttp application that records every
request it receives and answers with canned (status, body) pairs, so the
real AsyncClient transport is exercised without touching the network.
It also accepts absolute-form request lines, so it can stand in for an
HTTP proxy in front of an unreachable host.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer
from multidict import CIMultiDict


# ---------------------------------------------------------------------------
# pytest plugin: --integration flag + skip logic
# ---------------------------------------------------------------------------

def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="Run integration tests against Binance futures testnet",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    if config.getoption("--integration"):
        return
    skip_integration = pytest.mark.skip(reason="pass --integration to run against testnet")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


# ---------------------------------------------------------------------------
# Fake exchange
# ---------------------------------------------------------------------------

@dataclass
class RecordedRequest:
    method:  str
    host:    str                 # Host header; the upstream authority when proxied
    path:    str
    query:   str                 # raw query string, exactly as received
    headers: CIMultiDict[str]
    body:    str


class FakeExchange:
    """Canned-response HTTP server standing in for the Binance API."""

    def __init__(self) -> None:
        self.host = ""
        self.requests: list[RecordedRequest] = []
        self._routes: dict[tuple[str, str], tuple[int, Any]] = {}

    def respond(self, method: str, path: str, status: int = 200, body: Any = None) -> None:
        """Register the reply for ``method path``; ``body`` is JSON-encoded unless it is a str."""
        self._routes[(method.upper(), path)] = (status, {} if body is None else body)

    @property
    def last(self) -> RecordedRequest:
        assert self.requests, "no request reached the fake exchange"
        return self.requests[-1]

    async def _handle(self, request: web.Request) -> web.Response:
        self.requests.append(RecordedRequest(
            method=request.method,
            host=request.host,
            path=request.path,
            query=request.rel_url.raw_query_string,
            headers=CIMultiDict(request.headers),
            body=await request.text(),
        ))
        status, payload = self._routes.get(
            (request.method, request.path),
            (404, {"code": -1, "msg": "route not registered"}),
        )
        text = payload if isinstance(payload, str) else json.dumps(payload)
        return web.Response(status=status, text=text, content_type="application/json")

    def app(self) -> web.Application:
        application = web.Application()
        application.router.add_route("*", "/{tail:.*}", self._handle)
        return application


@pytest_asyncio.fixture
async def exchange() -> AsyncIterator[FakeExchange]:
    fake   = FakeExchange()
    server = TestServer(fake.app())
    await server.start_server()
    fake.host = f"http://{server.host}:{server.port}"
    try:
        yield fake
    finally:
        await server.close()
