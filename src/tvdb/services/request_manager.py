"""Async HTTP dispatcher for the TVDB v4 API.

This module provides the single request primitive every API call goes
through. It assembles query parameters, attaches the bearer token, buffers
the whole response body, and classifies the outcome by status code:

* 200            -> the envelope's ``data`` member is returned
* any other code -> :class:`StatusError`
* connection failure -> :class:`TransportError`
* timeout        -> :class:`RequestTimeoutError`
* non-JSON 200   -> :class:`DecodeError`

There are no retries; every failure reaches the caller.
"""

from __future__ import annotations

import asyncio
import json
import logging
import ssl
import time
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import aiohttp

from tvdb.shared.constants import (
    ContentTypes,
    HTTPHeaders,
    HTTPStatusCodes,
    TVDBConfig,
)
from tvdb.shared.errors import (
    DecodeError,
    ErrorContext,
    RequestTimeoutError,
    StatusError,
    TransportError,
)
from tvdb.shared.logging import log_api_call, log_operation_error

logger = logging.getLogger(__name__)


def build_query(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Turn a parameter mapping into query-string pairs.

    Keys bound to None are omitted entirely; every other value is
    stringified, with booleans written as ``true``/``false``.
    """
    if not params:
        return {}
    query: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        else:
            query[key] = str(value)
    return query


class RequestManager:
    """Dispatches requests against the TVDB API with persistent options.

    The options given here (base URL, timeout, TLS context, headers) are
    fixed at construction and reused for every call. The underlying
    ``aiohttp.ClientSession`` is created lazily inside the running event
    loop and released by :meth:`close`.

    Args:
        base_url: API root every path is appended to
        timeout: Total per-request timeout in seconds, or None for no limit
        ssl_context: TLS options; ``False`` disables certificate checks
        headers: Extra headers sent with every request
        session: An existing session to use instead of creating one; it is
            not closed by :meth:`close`
    """

    def __init__(
        self,
        base_url: str = TVDBConfig.BASE_URL,
        timeout: float | None = TVDBConfig.REQUEST_TIMEOUT,
        ssl_context: ssl.SSLContext | bool | None = None,
        headers: Mapping[str, str] | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.ssl_context = ssl_context
        self.headers: dict[str, str] = {
            **TVDBConfig.HEADERS,
            HTTPHeaders.USER_AGENT: TVDBConfig.USER_AGENT,
            **(headers or {}),
        }
        self._session = session
        self._owns_session = session is None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self) -> RequestManager:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        async with self._session_lock:
            if self._session is None or self._session.closed:
                self._session = aiohttp.ClientSession(
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                    headers=self.headers,
                )
                self._owns_session = True
                logger.debug("aiohttp.ClientSession created for %s", self.base_url)
            return self._session

    async def close(self) -> None:
        """Close the HTTP session if this manager created it.

        An injected session is left open and stays in use.
        """
        if self._session is None or not self._owns_session:
            return
        if not self._session.closed:
            await self._session.close()
            logger.debug("aiohttp.ClientSession closed")
        self._session = None

    def url_for(self, path: str) -> str:
        """Resolve an API path against the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        url: str,
        token: str | None = None,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """Perform a single request and return the envelope's ``data``.

        Args:
            method: HTTP method
            url: API path, relative to the base URL
            token: Optional bearer token
            params: Optional query parameters; None values are dropped
            body: Optional JSON-serializable request body

        Returns:
            The ``data`` member of the response envelope

        Raises:
            StatusError: If the status code is not 200
            TransportError: If the connection fails
            RequestTimeoutError: If the configured timeout elapses
            DecodeError: If a 200 response is not valid JSON
        """
        context = ErrorContext(
            operation="api_request",
            additional_data={"method": method, "path": url},
        )

        # Applied per request so an injected session gets them too
        headers: dict[str, str] = dict(self.headers)
        if token:
            headers[HTTPHeaders.AUTHORIZATION] = f"Bearer {token}"

        payload: bytes | None = None
        if body is not None:
            payload = json.dumps(body).encode("utf-8")
            headers[HTTPHeaders.CONTENT_TYPE] = ContentTypes.JSON
            headers[HTTPHeaders.CONTENT_LENGTH] = str(len(payload))

        request_kwargs: dict[str, Any] = {
            "params": build_query(params),
            "headers": headers,
            "data": payload,
            "timeout": aiohttp.ClientTimeout(total=self.timeout),
        }
        if self.ssl_context is not None:
            request_kwargs["ssl"] = self.ssl_context

        session = await self._get_session()
        start_time = time.perf_counter()

        try:
            async with session.request(method, self.url_for(url), **request_kwargs) as response:
                status = response.status
                raw_body = (await response.read()).decode("utf-8", errors="replace")
        # aiohttp timeout errors are also ClientErrors, so this must come first
        except asyncio.TimeoutError as e:
            error: Exception = RequestTimeoutError(self.timeout, context, e)
            log_operation_error(logger, error)
            raise error from e
        except (aiohttp.ClientError, OSError) as e:
            error = TransportError(e, context)
            log_operation_error(logger, error)
            raise error from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        log_api_call(logger, url, method, status, round(duration_ms, 2))

        try:
            envelope = json.loads(raw_body)
        except ValueError as e:
            if status != HTTPStatusCodes.OK:
                raise StatusError(raw_body, status, context=context) from e
            raise DecodeError(raw_body, context, e) from e

        if status != HTTPStatusCodes.OK:
            raise StatusError(envelope, status, context=context)

        if not isinstance(envelope, dict) or "data" not in envelope:
            raise DecodeError(raw_body, context)

        return envelope["data"]

    async def get(
        self,
        path: str,
        token: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Perform a GET request."""
        return await self.request("GET", path, token, params)

    async def post(
        self,
        path: str,
        token: str | None = None,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """Perform a POST request with an optional JSON body."""
        return await self.request("POST", path, token, params, body)


__all__ = ["RequestManager", "build_query"]
