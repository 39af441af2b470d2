"""Repository/group permission resource client."""

from typing import TYPE_CHECKING, Any

from dockerhub.clients.repositories import repository_path
from dockerhub.types.repositories import RepositoryGroup

if TYPE_CHECKING:
    from dockerhub.context import CallContext
    from dockerhub.transport import HTTPTransport

PERMISSIONS = ("read", "write", "admin")


def association_body(group_id: int, group_name: str, permission: str) -> dict[str, Any]:
    """
    Payload for creating or updating an association.

    Both spellings of the group fields are sent, as Docker Hub's endpoint accepts them.
    """
    if permission not in PERMISSIONS:
        raise ValueError(f"Invalid permission: {permission}. Must be one of {', '.join(PERMISSIONS)}")
    return {
        "group_id": group_id,
        "groupid": group_id,
        "group_name": group_name,
        "groupname": group_name,
        "permission": permission,
    }


def parse_repository_group(data: dict[str, Any]) -> RepositoryGroup:
    group_id = data.get("group_id", data.get("groupid"))
    return RepositoryGroup(
        group_id=int(group_id),
        group_name=data.get("group_name") or data.get("groupname") or "",
        permission=data["permission"],
    )


class RepositoryGroupsClient:
    """Client for granting organization groups access to repositories."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repository groups client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def create(
        self,
        repository: str,
        group_id: int,
        group_name: str,
        permission: str,
        ctx: "CallContext | None" = None,
    ) -> RepositoryGroup:
        """
        Grant a group access to a repository.

        Args:
            repository: "namespace/name"
            group_id: Numeric group id
            group_name: Group name
            permission: "read", "write", or "admin"
            ctx: Cancellable call context

        Raises:
            ValueError: If permission is not a known level
        """
        return self.transport.request(
            "POST",
            f"{repository_path(repository)}groups/",
            parse_repository_group,
            body=association_body(group_id, group_name, permission),
            ctx=ctx,
        )

    def update(
        self,
        repository: str,
        group_id: int,
        group_name: str,
        permission: str,
        ctx: "CallContext | None" = None,
    ) -> RepositoryGroup:
        """Change the permission a group holds on a repository."""
        return self.transport.request(
            "PATCH",
            f"{repository_path(repository)}groups/{group_id}/",
            parse_repository_group,
            body=association_body(group_id, group_name, permission),
            ctx=ctx,
        )

    def get(
        self, repository: str, group_id: int, ctx: "CallContext | None" = None
    ) -> RepositoryGroup:
        """Get the association between a repository and a group."""
        return self.transport.request(
            "GET", f"{repository_path(repository)}groups/{group_id}/", parse_repository_group, ctx=ctx
        )

    def delete(self, repository: str, group_id: int, ctx: "CallContext | None" = None) -> None:
        """Revoke a group's access to a repository."""
        self.transport.send("DELETE", f"{repository_path(repository)}groups/{group_id}/", ctx=ctx)
