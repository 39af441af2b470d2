"""Async repository/group permission resource client."""

from typing import TYPE_CHECKING

from dockerhub.clients.repositories import repository_path
from dockerhub.clients.repository_groups import association_body, parse_repository_group
from dockerhub.types.repositories import RepositoryGroup

if TYPE_CHECKING:
    from dockerhub.async_transport import AsyncHTTPTransport
    from dockerhub.context import CallContext


class AsyncRepositoryGroupsClient:
    """Async client for granting organization groups access to repositories."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def create(
        self,
        repository: str,
        group_id: int,
        group_name: str,
        permission: str,
        ctx: "CallContext | None" = None,
    ) -> RepositoryGroup:
        """Grant a group access to a repository."""
        return await self.transport.request(
            "POST",
            f"{repository_path(repository)}groups/",
            parse_repository_group,
            body=association_body(group_id, group_name, permission),
            ctx=ctx,
        )

    async def update(
        self,
        repository: str,
        group_id: int,
        group_name: str,
        permission: str,
        ctx: "CallContext | None" = None,
    ) -> RepositoryGroup:
        """Change the permission a group holds on a repository."""
        return await self.transport.request(
            "PATCH",
            f"{repository_path(repository)}groups/{group_id}/",
            parse_repository_group,
            body=association_body(group_id, group_name, permission),
            ctx=ctx,
        )

    async def get(
        self, repository: str, group_id: int, ctx: "CallContext | None" = None
    ) -> RepositoryGroup:
        """Get the association between a repository and a group."""
        return await self.transport.request(
            "GET", f"{repository_path(repository)}groups/{group_id}/", parse_repository_group, ctx=ctx
        )

    async def delete(self, repository: str, group_id: int, ctx: "CallContext | None" = None) -> None:
        """Revoke a group's access to a repository."""
        await self.transport.send("DELETE", f"{repository_path(repository)}groups/{group_id}/", ctx=ctx)
