"""Docker Hub SDK exception classes."""


class DockerHubError(Exception):
    """Base exception for all Docker Hub SDK errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(DockerHubError):
    """Raised when SDK configuration is invalid or missing."""

    pass


class TransportError(DockerHubError):
    """Raised on network failures or undecodable response bodies."""

    pass


class CancelledError(DockerHubError):
    """Raised when a call is made with a cancelled context."""

    pass


class DeadlineExceededError(CancelledError):
    """Raised when a call context's deadline has passed."""

    pass


class ApiError(DockerHubError):
    """
    Raised when Docker Hub answers with a non-2xx status.

    The message is the verbatim response body, for example
    ``{"detail": "Not found"}``.
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(body)
        self.status_code = status_code
        self.body = body


class AuthenticationError(ApiError):
    """Raised when the credentials or bearer token are rejected."""

    pass


class AuthorizationError(ApiError):
    """Raised when access is denied."""

    pass


class NotFoundError(ApiError):
    """Raised when a resource is not found."""

    pass


class ConflictError(ApiError):
    """Raised on conflicts (repository or group already exists, etc.)."""

    pass


class RateLimitedError(ApiError):
    """Raised when rate limited."""

    def __init__(self, status_code: int, body: str, retry_after: int | None = None) -> None:
        super().__init__(status_code, body)
        self.retry_after = retry_after


class ValidationError(ApiError):
    """Raised on other client errors (400, 422, ...)."""

    pass


class ServerError(ApiError):
    """Raised on server errors (5xx)."""

    pass


def error_for_status(status_code: int, body: str, retry_after: str | None = None) -> ApiError:
    """
    Build the typed ApiError for a non-2xx response.

    Args:
        status_code: HTTP status code
        body: Raw response body
        retry_after: Value of the Retry-After header, if any

    Returns:
        Appropriate ApiError subclass
    """
    if status_code == 401:
        return AuthenticationError(status_code, body)
    elif status_code == 403:
        return AuthorizationError(status_code, body)
    elif status_code == 404:
        return NotFoundError(status_code, body)
    elif status_code == 409:
        return ConflictError(status_code, body)
    elif status_code == 429:
        try:
            seconds = int(retry_after) if retry_after is not None else None
        except ValueError:
            seconds = None
        return RateLimitedError(status_code, body, seconds)
    elif status_code >= 500:
        return ServerError(status_code, body)
    elif status_code >= 400:
        return ValidationError(status_code, body)
    return ApiError(status_code, body)
