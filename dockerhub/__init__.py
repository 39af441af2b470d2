"""Docker Hub SDK - Python client for the Docker Hub v2 API."""

from dockerhub.async_client import AsyncDockerHubClient
from dockerhub.client import DockerHubClient
from dockerhub.context import CallContext
from dockerhub.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    CancelledError,
    ConfigurationError,
    ConflictError,
    DeadlineExceededError,
    DockerHubError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    TransportError,
    ValidationError,
)
from dockerhub.logging import configure_logging, get_logger
from dockerhub.transport import Credentials, HTTPTransport
from dockerhub.types import (
    Group,
    GroupMember,
    PersonalAccessToken,
    Repository,
    RepositoryGroup,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "DockerHubClient",
    "AsyncDockerHubClient",
    # Call context
    "CallContext",
    # Types
    "Repository",
    "RepositoryGroup",
    "Group",
    "GroupMember",
    "PersonalAccessToken",
    # Exceptions
    "DockerHubError",
    "ConfigurationError",
    "TransportError",
    "CancelledError",
    "DeadlineExceededError",
    "ApiError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    # Transport
    "HTTPTransport",
    "Credentials",
    # Logging
    "configure_logging",
    "get_logger",
]
