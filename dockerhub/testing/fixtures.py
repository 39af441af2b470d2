"""
Pytest fixtures for Docker Hub SDK testing.

Provides common fixtures for testing applications that use the Docker Hub SDK.
"""

from collections.abc import Generator

import pytest

from dockerhub.testing.mock import MockDockerHubClient
from dockerhub.types.access_tokens import PersonalAccessToken
from dockerhub.types.groups import Group, GroupMember
from dockerhub.types.repositories import Repository, RepositoryGroup


def create_mock_repository(
    namespace: str = "test-org",
    name: str = "test-repo",
    private: bool = False,
    description: str = "Test repository",
) -> Repository:
    """Build a Repository with sensible defaults."""
    return Repository(
        namespace=namespace,
        name=name,
        description=description,
        full_description="",
        private=private,
        user="test-user",
    )


def create_mock_group(id: int = 51673, name: str = "owners", description: str = "") -> Group:
    """Build a Group with sensible defaults."""
    return Group(id=id, name=name, description=description)


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockDockerHubClient, None, None]:
    """
    Provide a MockDockerHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.repositories.configure("get", response=my_repo)
            result = my_function(mock_client)
            assert mock_client.was_called("repositories.get")
        ```
    """
    client = MockDockerHubClient(username="test-user")
    yield client
    client.reset()


@pytest.fixture
def mock_namespace() -> str:
    """Provide a test organization namespace."""
    return "test-org"


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_repository() -> Repository:
    return create_mock_repository()


@pytest.fixture
def sample_group() -> Group:
    return create_mock_group()


@pytest.fixture
def sample_group_member() -> GroupMember:
    return GroupMember(username="test-user", full_name="Test User")


@pytest.fixture
def sample_repository_group() -> RepositoryGroup:
    return RepositoryGroup(group_id=51673, group_name="owners", permission="write")


@pytest.fixture
def sample_access_token() -> PersonalAccessToken:
    """A freshly created token; the secret is populated."""
    return PersonalAccessToken(
        uuid="b30bbf97-506c-4ecd-aabc-842f3cb484fb",
        token_label="ci",
        scopes=["repo:read"],
        token="dckr_pat_test",
    )


@pytest.fixture
def mock_client_with_repository(
    mock_client: MockDockerHubClient, sample_repository: Repository
) -> MockDockerHubClient:
    """Mock client whose repositories.get returns sample_repository."""
    mock_client.repositories.configure("get", response=sample_repository)
    return mock_client
