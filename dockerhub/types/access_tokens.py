"""Personal access token data models."""

from dataclasses import dataclass, field


@dataclass
class PersonalAccessToken:
    """
    Personal access token.

    `token` holds the secret. Docker Hub returns it only when the token is
    created; every later read returns it blank.
    """

    uuid: str
    token_label: str
    scopes: list[str] = field(default_factory=list)
    token: str = field(default="", repr=False)
    is_active: bool = True
