"""
Pytest plugin for Docker Hub SDK testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["dockerhub.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from dockerhub.testing.fixtures import (
    mock_client,
    mock_client_with_repository,
    mock_namespace,
    sample_access_token,
    sample_group,
    sample_group_member,
    sample_repository,
    sample_repository_group,
)

__all__ = [
    "mock_client",
    "mock_namespace",
    "mock_client_with_repository",
    "sample_repository",
    "sample_group",
    "sample_group_member",
    "sample_repository_group",
    "sample_access_token",
]
