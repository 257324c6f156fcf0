"""
rest.py – Signed REST clients (async and sync) for Binance.

Both clients turn "endpoint + payload" into an authenticated request,
send it, and pass the status and body through one classifier,
``handle_response``, which either returns the typed value or raises one
of the errors in errors.py.  Nothing is retried.

Verbs
-----
    get_signed / post_signed / delete_signed
        payload + HMAC signature in the query string, API-key and form
        Content-Type headers
    get
        public, optional raw query string, no auth headers
    post
        API-key header only (listen-key creation)
    put / delete
        API-key header, form body ``listenKey=<value>``

Usage – async
-------------
    from binance_sdk import AsyncClient, Futures, ServerTime

    async with AsyncClient(host="https://fapi.binance.com") as client:
        t = await client.get(Futures.TIME, response_type=ServerTime)

Usage – sync
------------
    with Client(api_key="...", secret_key="...", host="https://fapi.binance.com") as client:
        balances = client.get_signed(Futures.BALANCE, "timestamp=1700000000000")
"""

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from typing import Any, Optional, get_origin

import aiohttp
import requests
from pydantic import TypeAdapter, ValidationError
from yarl import URL

from .api import API, resolve
from .auth import build_headers
from .config import DEFAULT_TIMEOUT_S, ClientConfig
from .errors import (
    DecodeError,
    ExchangeError,
    ServerError,
    ServiceUnavailableError,
    TransportError,
    UnauthorizedError,
    UnexpectedStatusError,
)
from .signing import signed_query
from .types import ExchangeErrorBody

logger = logging.getLogger(__name__)

# Longest body excerpt carried by DecodeError
_BODY_EXCERPT = 200


# ---------------------------------------------------------------------------
# Response classifier (shared by sync and async clients)
# ---------------------------------------------------------------------------

@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _type_name(response_type: Any) -> str:
    if get_origin(response_type) is None and hasattr(response_type, "__name__"):
        return response_type.__name__
    return repr(response_type)


def _decode(body: bytes, response_type: Any) -> Any:
    try:
        return _adapter(response_type).validate_json(body)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        reason = errors[0]["msg"] if errors else ""
        excerpt = body[:_BODY_EXCERPT].decode("utf-8", errors="replace")
        raise DecodeError(excerpt, _type_name(response_type), reason) from exc


def handle_response(status: int, body: bytes, response_type: Any = Any) -> Any:
    """
    Map an HTTP status and raw body to a typed value or a classified error.

    Parameters
    ----------
    status        : HTTP status code
    body          : Raw response body
    response_type : Anything pydantic can validate (model, list[model],
                    dict, Any); the 200 body is parsed into it

    Raises
    ------
    ServerError             : 500
    ServiceUnavailableError : 503
    UnauthorizedError       : 401
    ExchangeError           : 400 with a {"code", "msg"} body
    UnexpectedStatusError   : any other non-200 status
    DecodeError             : 200 or 400 body that does not match its shape
    """
    if status == 200:
        return _decode(body, response_type)
    if status == 500:
        raise ServerError()
    if status == 503:
        raise ServiceUnavailableError()
    if status == 401:
        raise UnauthorizedError()
    if status == 400:
        error: ExchangeErrorBody = _decode(body, ExchangeErrorBody)
        raise ExchangeError(error.code, error.msg)
    raise UnexpectedStatusError(status)


# ---------------------------------------------------------------------------
# Shared request construction
# ---------------------------------------------------------------------------

class _BaseClient:
    """URL, signature and header construction common to both clients."""

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def host(self) -> str:
        return self._config.host

    def _url(self, endpoint: API) -> str:
        return f"{self._config.host}{resolve(endpoint)}"

    def _public_url(self, endpoint: API, request: Optional[str]) -> str:
        url = self._url(endpoint)
        if request:
            url = f"{url}?{request}"
        return url

    def sign_request(self, endpoint: API, request: Optional[str] = None) -> str:
        """Return ``<host><path>?<payload>&signature=<hex>``."""
        return f"{self._url(endpoint)}?{signed_query(request, self._config.secret_key)}"

    def build_headers(self, content_type: bool) -> dict[str, str]:
        return build_headers(self._config.api_key, content_type)

    @staticmethod
    def _listen_key_form(listen_key: str) -> dict[str, str]:
        return {"listenKey": listen_key}


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------

class AsyncClient(_BaseClient):
    """
    Async Binance REST client (aiohttp-based).

    A single instance is safe to share between concurrent tasks on one
    event loop: configuration is frozen and the only shared state is the
    aiohttp session's connection pool.

    Parameters
    ----------
    api_key     : API key, or None for public-only use
    secret_key  : Secret key used for HMAC signing, or None
    host        : Base URL, e.g. "https://fapi.binance.com"
    proxy       : Optional http(s) proxy URL every request is routed through
    timeout     : Total per-request timeout in seconds
    session     : Optional externally-owned aiohttp.ClientSession

    Raises ConfigurationError on a malformed proxy URL.
    """

    def __init__(
        self,
        api_key:    Optional[str] = None,
        secret_key: Optional[str] = None,
        *,
        host:    str,
        proxy:   Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_S,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        super().__init__(ClientConfig(
            host=host,
            api_key=api_key or "",
            secret_key=secret_key or "",
            proxy=proxy,
            timeout=timeout,
        ))
        self._timeout       = aiohttp.ClientTimeout(total=timeout)
        self._session       = session
        self._owns_session  = session is None

    @classmethod
    def from_config(
        cls, config: ClientConfig, session: Optional[aiohttp.ClientSession] = None,
    ) -> "AsyncClient":
        return cls(
            config.api_key,
            config.secret_key,
            host=config.host,
            proxy=config.proxy,
            timeout=config.timeout,
            session=session,
        )

    async def __aenter__(self) -> "AsyncClient":
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            if not self._owns_session:
                raise RuntimeError("externally supplied aiohttp session is closed")
            self._session = aiohttp.ClientSession()
        return self._session

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        endpoint: API,
        url: str,
        *,
        headers: Optional[dict[str, str]] = None,
        data: Optional[dict[str, str]] = None,
        response_type: Any = Any,
    ) -> Any:
        session = self._ensure_session()
        path    = resolve(endpoint)
        logger.debug("%s %s", method, path)

        try:
            # encoded=True: the signed query must reach the wire unmodified
            async with session.request(
                method,
                URL(url, encoded=True),
                headers=headers,
                data=data,
                proxy=self._config.proxy,
                timeout=self._timeout,
            ) as resp:
                status = resp.status
                body   = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(method, path, str(exc) or type(exc).__name__) from exc

        logger.debug("%s %s -> %d", method, path, status)
        return handle_response(status, body, response_type)

    # ------------------------------------------------------------------
    # Signed verbs
    # ------------------------------------------------------------------

    async def get_signed(
        self, endpoint: API, request: Optional[str] = None, response_type: Any = Any,
    ) -> Any:
        url = self.sign_request(endpoint, request)
        return await self._request(
            "GET", endpoint, url, headers=self.build_headers(True), response_type=response_type,
        )

    async def post_signed(self, endpoint: API, request: str, response_type: Any = Any) -> Any:
        url = self.sign_request(endpoint, request)
        return await self._request(
            "POST", endpoint, url, headers=self.build_headers(True), response_type=response_type,
        )

    async def delete_signed(
        self, endpoint: API, request: Optional[str] = None, response_type: Any = Any,
    ) -> Any:
        url = self.sign_request(endpoint, request)
        return await self._request(
            "DELETE", endpoint, url, headers=self.build_headers(True), response_type=response_type,
        )

    # ------------------------------------------------------------------
    # Unsigned verbs
    # ------------------------------------------------------------------

    async def get(
        self, endpoint: API, request: Optional[str] = None, response_type: Any = Any,
    ) -> Any:
        url = self._public_url(endpoint, request)
        return await self._request("GET", endpoint, url, response_type=response_type)

    async def post(self, endpoint: API, response_type: Any = Any) -> Any:
        return await self._request(
            "POST", endpoint, self._url(endpoint),
            headers=self.build_headers(False), response_type=response_type,
        )

    async def put(self, endpoint: API, listen_key: str, response_type: Any = Any) -> Any:
        return await self._request(
            "PUT", endpoint, self._url(endpoint),
            headers=self.build_headers(False),
            data=self._listen_key_form(listen_key),
            response_type=response_type,
        )

    async def delete(self, endpoint: API, listen_key: str, response_type: Any = Any) -> Any:
        return await self._request(
            "DELETE", endpoint, self._url(endpoint),
            headers=self.build_headers(False),
            data=self._listen_key_form(listen_key),
            response_type=response_type,
        )


# ---------------------------------------------------------------------------
# Synchronous client
# ---------------------------------------------------------------------------

class Client(_BaseClient):
    """
    Synchronous Binance REST client (requests-based).

    Same verbs, signing and error classification as AsyncClient, for
    scripts and notebooks that do not run an event loop.
    """

    def __init__(
        self,
        api_key:    Optional[str] = None,
        secret_key: Optional[str] = None,
        *,
        host:    str,
        proxy:   Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(ClientConfig(
            host=host,
            api_key=api_key or "",
            secret_key=secret_key or "",
            proxy=proxy,
            timeout=timeout,
        ))
        self._owns_session = session is None
        self._session      = session if session is not None else requests.Session()

    @classmethod
    def from_config(
        cls, config: ClientConfig, session: Optional[requests.Session] = None,
    ) -> "Client":
        return cls(
            config.api_key,
            config.secret_key,
            host=config.host,
            proxy=config.proxy,
            timeout=config.timeout,
            session=session,
        )

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def _proxies(self) -> dict[str, str]:
        # Per request, so HTTP(S)_PROXY from the environment cannot override it
        proxy = self._config.proxy
        return {"http": proxy, "https": proxy} if proxy is not None else {}

    def _request(
        self,
        method: str,
        endpoint: API,
        url: str,
        *,
        headers: Optional[dict[str, str]] = None,
        data: Optional[dict[str, str]] = None,
        response_type: Any = Any,
    ) -> Any:
        path = resolve(endpoint)
        logger.debug("%s %s", method, path)

        try:
            prepared = self._session.prepare_request(
                requests.Request(method, url, headers=headers, data=data)
            )
            # requests re-quotes the URL while preparing; send the signed bytes as built
            prepared.url = url
            settings = self._session.merge_environment_settings(
                prepared.url, self._proxies(), None, None, None,
            )
            resp = self._session.send(prepared, timeout=self._config.timeout, **settings)
        except requests.RequestException as exc:
            raise TransportError(method, path, str(exc) or type(exc).__name__) from exc

        logger.debug("%s %s -> %d", method, path, resp.status_code)
        return handle_response(resp.status_code, resp.content, response_type)

    def get_signed(
        self, endpoint: API, request: Optional[str] = None, response_type: Any = Any,
    ) -> Any:
        url = self.sign_request(endpoint, request)
        return self._request(
            "GET", endpoint, url, headers=self.build_headers(True), response_type=response_type,
        )

    def post_signed(self, endpoint: API, request: str, response_type: Any = Any) -> Any:
        url = self.sign_request(endpoint, request)
        return self._request(
            "POST", endpoint, url, headers=self.build_headers(True), response_type=response_type,
        )

    def delete_signed(
        self, endpoint: API, request: Optional[str] = None, response_type: Any = Any,
    ) -> Any:
        url = self.sign_request(endpoint, request)
        return self._request(
            "DELETE", endpoint, url, headers=self.build_headers(True), response_type=response_type,
        )

    def get(self, endpoint: API, request: Optional[str] = None, response_type: Any = Any) -> Any:
        url = self._public_url(endpoint, request)
        return self._request("GET", endpoint, url, response_type=response_type)

    def post(self, endpoint: API, response_type: Any = Any) -> Any:
        return self._request(
            "POST", endpoint, self._url(endpoint),
            headers=self.build_headers(False), response_type=response_type,
        )

    def put(self, endpoint: API, listen_key: str, response_type: Any = Any) -> Any:
        return self._request(
            "PUT", endpoint, self._url(endpoint),
            headers=self.build_headers(False),
            data=self._listen_key_form(listen_key),
            response_type=response_type,
        )

    def delete(self, endpoint: API, listen_key: str, response_type: Any = Any) -> Any:
        return self._request(
            "DELETE", endpoint, self._url(endpoint),
            headers=self.build_headers(False),
            data=self._listen_key_form(listen_key),
            response_type=response_type,
        )
