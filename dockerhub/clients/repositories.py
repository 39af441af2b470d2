"""Repositories resource client."""

from typing import TYPE_CHECKING, Any

from dockerhub.types.repositories import Repository

if TYPE_CHECKING:
    from dockerhub.context import CallContext
    from dockerhub.transport import HTTPTransport


def repository_path(repository: str) -> str:
    """API path of a repository given as "namespace/name"."""
    return f"/repositories/{repository.strip('/')}/"


def parse_repository(data: dict[str, Any]) -> Repository:
    """Parse a repository response. Null text fields become empty strings."""
    return Repository(
        namespace=data.get("namespace") or "",
        name=data["name"],
        description=data.get("description") or "",
        full_description=data.get("full_description") or "",
        private=bool(data.get("is_private", False)),
        user=data.get("user"),
    )


def build_update_body(
    description: str | None,
    full_description: str | None,
    private: bool | None,
) -> dict[str, Any]:
    """Partial update payload: only the fields that were supplied."""
    body: dict[str, Any] = {}
    if description is not None:
        body["description"] = description
    if full_description is not None:
        body["full_description"] = full_description
    if private is not None:
        body["is_private"] = private
    return body


class RepositoriesClient:
    """Client for repository operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repositories client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def create(
        self,
        namespace: str,
        name: str,
        description: str = "",
        full_description: str = "",
        private: bool = False,
        ctx: "CallContext | None" = None,
    ) -> Repository:
        """
        Create a new repository.

        Args:
            namespace: User or organization owning the repository
            name: Repository name
            description: Short description
            full_description: Long description (markdown)
            private: Whether the repository is private
            ctx: Cancellable call context

        Returns:
            The created Repository

        Raises:
            ConflictError: If the repository already exists
        """
        body: dict[str, Any] = {
            "namespace": namespace,
            "name": name,
            "description": description,
            "full_description": full_description,
            "is_private": private,
        }
        return self.transport.request("POST", "/repositories/", parse_repository, body=body, ctx=ctx)

    def update(
        self,
        repository: str,
        *,
        description: str | None = None,
        full_description: str | None = None,
        private: bool | None = None,
        ctx: "CallContext | None" = None,
    ) -> Repository:
        """
        Update a repository. Only the supplied fields are changed.

        Args:
            repository: "namespace/name"
            description: New short description
            full_description: New long description
            private: New visibility
            ctx: Cancellable call context

        Returns:
            The updated Repository
        """
        body = build_update_body(description, full_description, private)
        return self.transport.request(
            "PATCH", repository_path(repository), parse_repository, body=body, ctx=ctx
        )

    def get(self, repository: str, ctx: "CallContext | None" = None) -> Repository:
        """
        Get a repository.

        Args:
            repository: "namespace/name"
            ctx: Cancellable call context

        Raises:
            NotFoundError: If the repository does not exist
        """
        return self.transport.request("GET", repository_path(repository), parse_repository, ctx=ctx)

    def delete(self, repository: str, ctx: "CallContext | None" = None) -> None:
        """Delete a repository."""
        self.transport.send("DELETE", repository_path(repository), ctx=ctx)
