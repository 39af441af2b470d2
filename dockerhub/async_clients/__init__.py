"""Docker Hub SDK async resource clients."""

from dockerhub.async_clients.access_tokens import AsyncAccessTokensClient
from dockerhub.async_clients.groups import AsyncGroupsClient
from dockerhub.async_clients.repositories import AsyncRepositoriesClient
from dockerhub.async_clients.repository_groups import AsyncRepositoryGroupsClient

__all__ = [
    "AsyncRepositoriesClient",
    "AsyncGroupsClient",
    "AsyncRepositoryGroupsClient",
    "AsyncAccessTokensClient",
]
