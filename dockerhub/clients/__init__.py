"""Docker Hub SDK resource clients."""

from dockerhub.clients.access_tokens import AccessTokensClient
from dockerhub.clients.groups import GroupsClient
from dockerhub.clients.repositories import RepositoriesClient
from dockerhub.clients.repository_groups import RepositoryGroupsClient

__all__ = [
    "RepositoriesClient",
    "GroupsClient",
    "RepositoryGroupsClient",
    "AccessTokensClient",
]
