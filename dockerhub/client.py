"""
Docker Hub SDK main client.

Provides the primary interface for interacting with the Docker Hub v2 API.
"""

import os
from typing import Any

import httpx

from dockerhub.clients import (
    AccessTokensClient,
    GroupsClient,
    RepositoriesClient,
    RepositoryGroupsClient,
)
from dockerhub.exceptions import ConfigurationError
from dockerhub.transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Credentials, HTTPTransport


def credentials_from_env() -> tuple[Credentials, str]:
    """
    Read credentials and base URL from the environment.

    Raises:
        ConfigurationError: If DOCKER_USERNAME or DOCKER_PASSWORD is missing
    """
    username = os.environ.get("DOCKER_USERNAME")
    password = os.environ.get("DOCKER_PASSWORD")
    base_url = os.environ.get("DOCKER_HUB_BASE_URL", DEFAULT_BASE_URL)

    if not username:
        raise ConfigurationError("DOCKER_USERNAME environment variable not set")

    if not password:
        raise ConfigurationError("DOCKER_PASSWORD environment variable not set")

    return Credentials(username=username, password=password), base_url


class DockerHubClient:
    """
    Main client for interacting with the Docker Hub API.

    Aggregates all resource clients. Every operation logs in afresh, so the
    client keeps no session state and can be shared between threads.

    Example:
        ```python
        from dockerhub import DockerHubClient

        client = DockerHubClient(username="me", password="secret")

        # Or create from environment variables
        client = DockerHubClient.from_env()

        repo = client.repositories.create("myorg", "app", private=True)
        client.repositories.update("myorg/app", private=False)
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
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the Docker Hub client.

        Args:
            username: Docker Hub username
            password: Docker Hub password or personal access token
            base_url: Base URL for API requests (default: https://hub.docker.com/v2)
            timeout: Timeout in seconds for every outbound request (default: 60.0)
            http_client: Caller-owned httpx.Client; the SDK never closes it
        """
        self.username = username
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            credentials=Credentials(username=username, password=password),
            base_url=base_url,
            timeout=timeout,
            http_client=http_client,
        )

        # Initialize resource clients
        self.repositories = RepositoriesClient(self._transport)
        self.groups = GroupsClient(self._transport)
        self.repository_groups = RepositoryGroupsClient(self._transport)
        self.access_tokens = AccessTokensClient(self._transport)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> "DockerHubClient":
        """
        Create a client from environment variables.

        Environment variables:
            DOCKER_USERNAME: Docker Hub username (required)
            DOCKER_PASSWORD: Docker Hub password or access token (required)
            DOCKER_HUB_BASE_URL: Base URL for API (optional, default: https://hub.docker.com/v2)

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
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources it owns."""
        self._transport.close()

    def __enter__(self) -> "DockerHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
