"""
Docker Hub SDK async client.

Provides an async interface for interacting with the Docker Hub v2 API.
"""

from typing import Any

import httpx

from dockerhub.async_clients import (
    AsyncAccessTokensClient,
    AsyncGroupsClient,
    AsyncRepositoriesClient,
    AsyncRepositoryGroupsClient,
)
from dockerhub.async_transport import AsyncHTTPTransport
from dockerhub.client import credentials_from_env
from dockerhub.transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Credentials


class AsyncDockerHubClient:
    """
    Async client for interacting with the Docker Hub API.

    Example:
        ```python
        from dockerhub import AsyncDockerHubClient

        async with AsyncDockerHubClient.from_env() as client:
            repo = await client.repositories.get("library/ubuntu")
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        username: str,
        password: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the async Docker Hub client.

        Args:
            username: Docker Hub username
            password: Docker Hub password or personal access token
            base_url: Base URL for API requests
            timeout: Timeout in seconds for every outbound request
            http_client: Caller-owned httpx.AsyncClient; the SDK never closes it
        """
        self.username = username
        self.base_url = base_url
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            credentials=Credentials(username=username, password=password),
            base_url=base_url,
            timeout=timeout,
            http_client=http_client,
        )

        self.repositories = AsyncRepositoriesClient(self._transport)
        self.groups = AsyncGroupsClient(self._transport)
        self.repository_groups = AsyncRepositoryGroupsClient(self._transport)
        self.access_tokens = AsyncAccessTokensClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> "AsyncDockerHubClient":
        """
        Create an async client from DOCKER_USERNAME, DOCKER_PASSWORD and
        DOCKER_HUB_BASE_URL.

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        credentials, base_url = credentials_from_env()
        return cls(
            username=credentials.username,
            password=credentials.password,
            base_url=base_url,
            timeout=timeout,
            http_client=http_client,
        )

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources it owns."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncDockerHubClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
