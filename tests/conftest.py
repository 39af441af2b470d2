"""
Shared fixtures: a fake Docker Hub served through httpx.MockTransport.
"""

import json
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest
import pytest_asyncio

from dockerhub.async_client import AsyncDockerHubClient
from dockerhub.client import DockerHubClient

BASE_URL = "https://hub.docker.com/v2"
USERNAME = "alice"
PASSWORD = "s3cret-password"
JWT = "eyJhbGciOiJIUzI1NiJ9.test.signature"
NOT_FOUND = '{"detail": "Not found"}'

Route = Callable[[httpx.Request], httpx.Response]


class FakeDockerHub:
    """
    Minimal Docker Hub: answers logins and whatever routes a test registers.

    Unregistered paths answer 404 with Docker Hub's not-found body.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Route] = {}
        self.login_response: httpx.Response | None = None
        self.on_login: Callable[[], None] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/v2")

        if request.method == "POST" and path == "/users/login/":
            if self.on_login is not None:
                self.on_login()
            if self.login_response is not None:
                return self.login_response
            credentials = json.loads(request.content)
            if credentials != {"username": USERNAME, "password": PASSWORD}:
                return httpx.Response(401, text='{"detail": "Incorrect authentication credentials"}')
            return httpx.Response(200, json={"token": JWT})

        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, text=NOT_FOUND)
        return route(request)

    def add(self, method: str, path: str, status: int = 200, body: Any = None, text: str | None = None) -> None:
        """Register a canned response."""

        def respond(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status, text=text)
            if body is None:
                return httpx.Response(status)
            return httpx.Response(status, json=body)

        self.routes[(method, path)] = respond

    def add_handler(self, method: str, path: str, route: Route) -> None:
        self.routes[(method, path)] = route

    @property
    def logins(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/v2/users/login/"]

    @property
    def api_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path != "/v2/users/login/"]

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def hub() -> FakeDockerHub:
    return FakeDockerHub()


@pytest.fixture
def http_client(hub: FakeDockerHub) -> Generator[httpx.Client, None, None]:
    with httpx.Client(transport=httpx.MockTransport(hub.handler)) as client:
        yield client


@pytest.fixture
def client(http_client: httpx.Client) -> DockerHubClient:
    return DockerHubClient(username=USERNAME, password=PASSWORD, http_client=http_client)


@pytest_asyncio.fixture
async def async_client(hub: FakeDockerHub):
    async with httpx.AsyncClient(transport=httpx.MockTransport(hub.handler)) as http:
        yield AsyncDockerHubClient(username=USERNAME, password=PASSWORD, http_client=http)
