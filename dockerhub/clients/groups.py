"""Organization groups resource client."""

from typing import TYPE_CHECKING, Any

from dockerhub.types.groups import Group, GroupMember

if TYPE_CHECKING:
    from dockerhub.context import CallContext
    from dockerhub.transport import HTTPTransport


def group_path(org: str, group: str | int) -> str:
    """API path of a group, addressed by name or numeric id."""
    return f"/orgs/{org}/groups/{group}/"


def parse_group(data: dict[str, Any]) -> Group:
    return Group(
        id=int(data["id"]),
        name=data["name"],
        description=data.get("description") or "",
    )


def parse_member(data: dict[str, Any]) -> GroupMember:
    return GroupMember(
        username=data["username"],
        full_name=data.get("full_name") or "",
    )


def parse_members(data: Any) -> list[GroupMember]:
    """Parse a member listing; only the first page is returned."""
    results = data.get("results", []) if isinstance(data, dict) else data
    return [parse_member(member) for member in results]


class GroupsClient:
    """Client for organization group operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the groups client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def create(
        self,
        org: str,
        name: str,
        description: str = "",
        ctx: "CallContext | None" = None,
    ) -> Group:
        """
        Create a group in an organization.

        Args:
            org: Organization namespace
            name: Group name
            description: Group description
            ctx: Cancellable call context

        Returns:
            The created Group, including its numeric id
        """
        return self.transport.request(
            "POST",
            f"/orgs/{org}/groups",
            parse_group,
            body={"name": name, "description": description},
            ctx=ctx,
        )

    def update(
        self,
        org: str,
        group: str | int,
        *,
        name: str | None = None,
        description: str | None = None,
        ctx: "CallContext | None" = None,
    ) -> Group:
        """
        Update a group's name or description.

        Args:
            org: Organization namespace
            group: Group name or id
            name: New name
            description: New description
            ctx: Cancellable call context
        """
        body: dict[str, Any] = {}
        if name is not None:
            body["name"] = name
        if description is not None:
            body["description"] = description
        return self.transport.request("PATCH", group_path(org, group), parse_group, body=body, ctx=ctx)

    def get(self, org: str, group: str | int, ctx: "CallContext | None" = None) -> Group:
        """
        Get a group.

        Raises:
            NotFoundError: If the group does not exist. The message is the
                raw body, `{"detail": "Not found"}`.
        """
        return self.transport.request("GET", group_path(org, group), parse_group, ctx=ctx)

    def delete(self, org: str, group: str | int, ctx: "CallContext | None" = None) -> None:
        """Delete a group."""
        self.transport.send("DELETE", group_path(org, group), ctx=ctx)

    def list_members(
        self, org: str, group: str | int, ctx: "CallContext | None" = None
    ) -> list[GroupMember]:
        """List the members of a group (first page only)."""
        return self.transport.request(
            "GET", f"{group_path(org, group)}members/", parse_members, ctx=ctx
        )

    def add_member(
        self, org: str, group: str | int, username: str, ctx: "CallContext | None" = None
    ) -> None:
        """Add an organization member to a group."""
        self.transport.send(
            "POST", f"{group_path(org, group)}members/", body={"member": username}, ctx=ctx
        )

    def remove_member(
        self, org: str, group: str | int, username: str, ctx: "CallContext | None" = None
    ) -> None:
        """Remove a member from a group."""
        self.transport.send("DELETE", f"{group_path(org, group)}members/{username}/", ctx=ctx)
