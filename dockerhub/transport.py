"""
HTTP Transport for the Docker Hub SDK.

Every call logs in with the client's credentials to obtain a fresh JWT,
then sends the target request with that token. Tokens are never cached.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

import httpx

from dockerhub.context import CallContext
from dockerhub.exceptions import TransportError, error_for_status
from dockerhub.logging import get_logger, log_http_request, log_http_response

DEFAULT_BASE_URL = "https://hub.docker.com/v2"
DEFAULT_TIMEOUT = 60.0
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
LOGIN_PATH = "/users/login/"

T = TypeVar("T")

logger = get_logger("transport")


@dataclass(frozen=True)
class Credentials:
    """Docker Hub username and password."""

    username: str
    password: str = field(repr=False)

    def to_dict(self) -> dict[str, str]:
        return {"username": self.username, "password": self.password}


def build_headers(token: str | None = None) -> dict[str, str]:
    """Headers sent with every request; `token` adds the JWT Authorization header."""
    headers = {
        "Content-Type": JSON_CONTENT_TYPE,
        "Accept": JSON_CONTENT_TYPE,
    }
    if token is not None:
        headers["Authorization"] = f"JWT {token}"
    return headers


def decode_json(response: httpx.Response) -> Any:
    """
    Decode a JSON response body.

    Raises:
        TransportError: If the body is not valid JSON
    """
    try:
        return response.json()
    except ValueError as e:
        raise TransportError(f"Invalid JSON in response from {response.request.url}: {e}") from e


def parse_body(parse: Callable[[Any], T], data: Any, method: str, path: str) -> T:
    """
    Run a parser over a decoded body.

    Raises:
        TransportError: If the body does not have the shape the parser expects
    """
    try:
        return parse(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise TransportError(f"Unexpected response body from {method} {path}: {e!r}") from e


def extract_token(data: Any) -> str:
    """
    Pull the bearer token out of a login response.

    Raises:
        TransportError: If the response carries no token
    """
    token = data.get("token") if isinstance(data, dict) else None
    if not token:
        raise TransportError("Login response did not include a token")
    return token


class HTTPTransport:
    """
    HTTP transport that authenticates every call.

    Handles:
    - Login exchange before each request (no token reuse)
    - Cancellation and deadline checks from the caller's CallContext
    - Error response mapping into typed exceptions
    - Generic decoding of response bodies via a parser callable
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            credentials: Username and password used for every login
            base_url: Base URL for API requests (e.g., "https://hub.docker.com/v2")
            timeout: Timeout in seconds applied to every outbound request
            http_client: Caller-owned httpx.Client. It is never closed by the
                transport. When omitted the transport creates and owns one.
        """
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client(timeout=timeout, follow_redirects=True)

    def close(self) -> None:
        """Close the HTTP client if the transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
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
            method: HTTP method (GET, POST, PATCH, etc.)
            path: API path relative to the base URL (e.g., "/repositories/")
            parse: Converts the decoded JSON body into the result type
            body: JSON request body (None for reads)
            ctx: Cancellable call context

        Returns:
            The parsed response

        Raises:
            ApiError: On non-2xx responses
            TransportError: On network failures, invalid, empty or malformed bodies
            CancelledError: If the context is cancelled before a request is sent
        """
        response = self._execute(method, path, body, ctx)
        if not response.content:
            raise TransportError(f"Empty response body from {method} {path}")
        return parse_body(parse, decode_json(response), method, path)

    def send(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        ctx: CallContext | None = None,
    ) -> None:
        """
        Make an authenticated request whose response body is ignored.

        Used for deletes and other no-content operations.
        """
        self._execute(method, path, body, ctx)

    def login(self, ctx: CallContext | None = None) -> str:
        """
        Exchange the credentials for a short-lived JWT.

        Returns:
            The bearer token
        """
        ctx = ctx or CallContext.background()
        response = self._send_once("POST", LOGIN_PATH, self.credentials.to_dict(), None, ctx)
        return extract_token(decode_json(response))

    def _execute(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None,
        ctx: CallContext | None,
    ) -> httpx.Response:
        ctx = ctx or CallContext.background()
        token = self.login(ctx)
        return self._send_once(method, path, body, token, ctx)

    def _send_once(
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
            response = self._client.request(
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
