"""Async repositories resource client."""

from typing import TYPE_CHECKING, Any

from dockerhub.clients.repositories import build_update_body, parse_repository, repository_path
from dockerhub.types.repositories import Repository

if TYPE_CHECKING:
    from dockerhub.async_transport import AsyncHTTPTransport
    from dockerhub.context import CallContext


class AsyncRepositoriesClient:
    """Async client for repository operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async repositories client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def create(
        self,
        namespace: str,
        name: str,
        description: str = "",
        full_description: str = "",
        private: bool = False,
        ctx: "CallContext | None" = None,
    ) -> Repository:
        """Create a new repository."""
        body: dict[str, Any] = {
            "namespace": namespace,
            "name": name,
            "description": description,
            "full_description": full_description,
            "is_private": private,
        }
        return await self.transport.request("POST", "/repositories/", parse_repository, body=body, ctx=ctx)

    async def update(
        self,
        repository: str,
        *,
        description: str | None = None,
        full_description: str | None = None,
        private: bool | None = None,
        ctx: "CallContext | None" = None,
    ) -> Repository:
        """Update a repository. Only the supplied fields are changed."""
        body = build_update_body(description, full_description, private)
        return await self.transport.request(
            "PATCH", repository_path(repository), parse_repository, body=body, ctx=ctx
        )

    async def get(self, repository: str, ctx: "CallContext | None" = None) -> Repository:
        """Get a repository by "namespace/name"."""
        return await self.transport.request("GET", repository_path(repository), parse_repository, ctx=ctx)

    async def delete(self, repository: str, ctx: "CallContext | None" = None) -> None:
        """Delete a repository."""
        await self.transport.send("DELETE", repository_path(repository), ctx=ctx)
