"""Repository-related data models."""

from dataclasses import dataclass


@dataclass
class Repository:
    """Repository information, identified by `namespace/name`."""

    namespace: str
    name: str
    description: str
    full_description: str
    private: bool
    user: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass
class RepositoryGroup:
    """Permission association between a repository and an organization group."""

    group_id: int
    group_name: str
    permission: str  # "read", "write", "admin"
