"""
Async HTTP Transport for the Docker Hub SDK.

Same login-then-request sequence as HTTPTransport, using the httpx async
client. Besides CallContext, native asyncio task cancellation is honored:
cancelling the awaiting task aborts the in-flight request.
"""

import time
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from dockerhub.context import CallContext
from dockerhub.exceptions import TransportError, error_for_status
from dockerhub.logging import get_logger, log_http_request, log_http_response
from dockerhub.transport import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    LOGIN_PATH,
    Credentials,
    build_headers,
    decode_json,
    extract_token,
    parse_body,
)

T = TypeVar("T")

logger = get_logger("transport")


class AsyncHTTPTransport:
    """
    Async HTTP transport that authenticates every call.

    Handles:
    - Login exchange before each request (no token reuse)
    - Cancellation and deadline checks from the caller's CallContext
    - Error response mapping into typed exceptions
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            credentials: Username and password used for every login
            base_url: Base URL for API requests
            timeout: Timeout in seconds applied to every outbound request
            http_client: Caller-owned httpx.AsyncClient, never closed by the
                transport. When omitted the transport creates and owns one.
        """
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def close(self) -> None:
        """Close the HTTP client if the transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        parse: Callable[[Any], T],
        body: dict[str, Any] | None = None,
        ctx: CallContext | None = None,
    ) -> T:
        """
        Make an authenticated request and decode its response.

        Args:
            method: HTTP method
            path: API path relative to the base URL
            parse: Converts the decoded JSON body into the result type
            body: JSON request body (None for reads)
            ctx: Cancellable call context

        Returns:
            The parsed response
        """
        response = await self._execute(method, path, body, ctx)
        if not response.content:
            raise TransportError(f"Empty response body from {method} {path}")
        return parse_body(parse, decode_json(response), method, path)

    async def send(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        ctx: CallContext | None = None,
    ) -> None:
        """Make an authenticated request whose response body is ignored."""
        await self._execute(method, path, body, ctx)

    async def login(self, ctx: CallContext | None = None) -> str:
        """Exchange the credentials for a short-lived JWT."""
        ctx = ctx or CallContext.background()
        response = await self._send_once("POST", LOGIN_PATH, self.credentials.to_dict(), None, ctx)
        return extract_token(decode_json(response))

    async def _execute(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None,
        ctx: CallContext | None,
    ) -> httpx.Response:
        ctx = ctx or CallContext.background()
        token = await self.login(ctx)
        return await self._send_once(method, path, body, token, ctx)

    async def _send_once(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None,
        token: str | None,
        ctx: CallContext,
    ) -> httpx.Response:
        ctx.check()

        url = f"{self.base_url}{path}"
        headers = build_headers(token)
        log_http_request(method, url, headers, body)

        start = time.perf_counter()
        try:
            response = await self._client.request(
                method,
                url,
                json=body,
                headers=headers,
                timeout=ctx.timeout_for(self.timeout),
                follow_redirects=True,
            )
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise TransportError(str(e)) from e

        log_http_response(
            response.status_code,
            url,
            response.text,
            (time.perf_counter() - start) * 1000,
        )

        if not response.is_success:
            raise error_for_status(
                response.status_code,
                response.text,
                response.headers.get("Retry-After"),
            )
        return response
