"""Organization group data models."""

from dataclasses import dataclass


@dataclass
class Group:
    """Group within an organization namespace."""

    id: int
    name: str
    description: str


@dataclass
class GroupMember:
    """Member of an organization group."""

    username: str
    full_name: str
