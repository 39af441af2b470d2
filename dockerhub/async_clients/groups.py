"""Async organization groups resource client."""

from typing import TYPE_CHECKING, Any

from dockerhub.clients.groups import group_path, parse_group, parse_members
from dockerhub.types.groups import Group, GroupMember

if TYPE_CHECKING:
    from dockerhub.async_transport import AsyncHTTPTransport
    from dockerhub.context import CallContext


class AsyncGroupsClient:
    """Async client for organization group operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def create(
        self,
        org: str,
        name: str,
        description: str = "",
        ctx: "CallContext | None" = None,
    ) -> Group:
        """Create a group in an organization."""
        return await self.transport.request(
            "POST",
            f"/orgs/{org}/groups",
            parse_group,
            body={"name": name, "description": description},
            ctx=ctx,
        )

    async def update(
        self,
        org: str,
        group: str | int,
        *,
        name: str | None = None,
        description: str | None = None,
        ctx: "CallContext | None" = None,
    ) -> Group:
        """Update a group's name or description."""
        body: dict[str, Any] = {}
        if name is not None:
            body["name"] = name
        if description is not None:
            body["description"] = description
        return await self.transport.request("PATCH", group_path(org, group), parse_group, body=body, ctx=ctx)

    async def get(self, org: str, group: str | int, ctx: "CallContext | None" = None) -> Group:
        """Get a group by name or id."""
        return await self.transport.request("GET", group_path(org, group), parse_group, ctx=ctx)

    async def delete(self, org: str, group: str | int, ctx: "CallContext | None" = None) -> None:
        """Delete a group."""
        await self.transport.send("DELETE", group_path(org, group), ctx=ctx)

    async def list_members(
        self, org: str, group: str | int, ctx: "CallContext | None" = None
    ) -> list[GroupMember]:
        """List the members of a group (first page only)."""
        return await self.transport.request(
            "GET", f"{group_path(org, group)}members/", parse_members, ctx=ctx
        )

    async def add_member(
        self, org: str, group: str | int, username: str, ctx: "CallContext | None" = None
    ) -> None:
        """Add an organization member to a group."""
        await self.transport.send(
            "POST", f"{group_path(org, group)}members/", body={"member": username}, ctx=ctx
        )

    async def remove_member(
        self, org: str, group: str | int, username: str, ctx: "CallContext | None" = None
    ) -> None:
        """Remove a member from a group."""
        await self.transport.send("DELETE", f"{group_path(org, group)}members/{username}/", ctx=ctx)
