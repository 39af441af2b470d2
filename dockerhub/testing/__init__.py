"""Docker Hub SDK testing utilities.

Provides a mock client and fixtures for testing applications that use the
Docker Hub SDK.
"""

from dockerhub.testing.fixtures import create_mock_group, create_mock_repository
from dockerhub.testing.mock import MockCall, MockDockerHubClient, MockResponse

__all__ = [
    "MockDockerHubClient",
    "MockCall",
    "MockResponse",
    "create_mock_repository",
    "create_mock_group",
]
