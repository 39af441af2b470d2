"""Personal access tokens resource client."""

from typing import TYPE_CHECKING, Any

from dockerhub.types.access_tokens import PersonalAccessToken

if TYPE_CHECKING:
    from dockerhub.context import CallContext
    from dockerhub.transport import HTTPTransport


def parse_access_token(data: dict[str, Any]) -> PersonalAccessToken:
    return PersonalAccessToken(
        uuid=data["uuid"],
        token_label=data.get("token_label") or "",
        scopes=list(data.get("scopes") or []),
        token=data.get("token") or "",
        is_active=bool(data.get("is_active", True)),
    )


class AccessTokensClient:
    """Client for personal access token operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the access tokens client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def create(
        self,
        token_label: str,
        scopes: list[str],
        ctx: "CallContext | None" = None,
    ) -> PersonalAccessToken:
        """
        Create a personal access token.

        Args:
            token_label: Human readable label
            scopes: Scopes such as "repo:read" or "repo:admin"
            ctx: Cancellable call context

        Returns:
            PersonalAccessToken with the secret in `token`. This is the only
            time the secret is returned.
        """
        return self.transport.request(
            "POST",
            "/access-tokens",
            parse_access_token,
            body={"token_label": token_label, "scopes": scopes},
            ctx=ctx,
        )

    def get(self, uuid: str, ctx: "CallContext | None" = None) -> PersonalAccessToken:
        """
        Get a personal access token.

        The returned `token` is always blank.
        """
        return self.transport.request("GET", f"/access-tokens/{uuid}", parse_access_token, ctx=ctx)

    def delete(self, uuid: str, ctx: "CallContext | None" = None) -> None:
        """Delete a personal access token."""
        self.transport.send("DELETE", f"/access-tokens/{uuid}", ctx=ctx)
