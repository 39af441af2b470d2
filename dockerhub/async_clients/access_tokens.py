"""Async personal access tokens resource client."""

from typing import TYPE_CHECKING

from dockerhub.clients.access_tokens import parse_access_token
from dockerhub.types.access_tokens import PersonalAccessToken

if TYPE_CHECKING:
    from dockerhub.async_transport import AsyncHTTPTransport
    from dockerhub.context import CallContext


class AsyncAccessTokensClient:
    """Async client for personal access token operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def create(
        self,
        token_label: str,
        scopes: list[str],
        ctx: "CallContext | None" = None,
    ) -> PersonalAccessToken:
        """Create a personal access token. Only this response carries the secret."""
        return await self.transport.request(
            "POST",
            "/access-tokens",
            parse_access_token,
            body={"token_label": token_label, "scopes": scopes},
            ctx=ctx,
        )

    async def get(self, uuid: str, ctx: "CallContext | None" = None) -> PersonalAccessToken:
        """Get a personal access token. The returned `token` is always blank."""
        return await self.transport.request("GET", f"/access-tokens/{uuid}", parse_access_token, ctx=ctx)

    async def delete(self, uuid: str, ctx: "CallContext | None" = None) -> None:
        """Delete a personal access token."""
        await self.transport.send("DELETE", f"/access-tokens/{uuid}", ctx=ctx)
