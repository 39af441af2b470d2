"""Docker Hub SDK type definitions.

This module exports all data model types used by the SDK.
"""

from dockerhub.types.access_tokens import PersonalAccessToken
from dockerhub.types.groups import Group, GroupMember
from dockerhub.types.repositories import Repository, RepositoryGroup

__all__ = [
    # Repository types
    "Repository",
    "RepositoryGroup",
    # Group types
    "Group",
    "GroupMember",
    # Access token types
    "PersonalAccessToken",
]
