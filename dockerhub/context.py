"""
Cancellable call context.

Every API operation takes an optional CallContext. The transport checks it
before the login request and again before the target request, so a call
cancelled between the two never sends the second request. A deadline also
caps the timeout of each outbound request.
"""

import threading
import time

from dockerhub.exceptions import CancelledError, DeadlineExceededError


class CallContext:
    """
    Cancellation and deadline signal shared between a caller and a call.

    Example:
        ```python
        from dockerhub import CallContext, DockerHubClient

        ctx = CallContext.with_timeout(10)
        repo = client.repositories.get("library/ubuntu", ctx=ctx)

        # From another thread
        ctx.cancel()
        ```
    """

    def __init__(self, deadline: float | None = None) -> None:
        """
        Initialize a context.

        Args:
            deadline: Absolute deadline on the time.monotonic() clock, or None
        """
        self._deadline = deadline
        self._cancelled = threading.Event()

    @classmethod
    def background(cls) -> "CallContext":
        """Return a context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> "CallContext":
        """Return a context whose deadline is `seconds` from now."""
        return cls(deadline=time.monotonic() + seconds)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        """True once cancel() was called or the deadline has passed."""
        return self._cancelled.is_set() or self._expired()

    def cancel(self) -> None:
        """Cancel the context. Safe to call from any thread, more than once."""
        self._cancelled.set()

    def remaining(self) -> float | None:
        """Seconds left until the deadline, or None without a deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def check(self) -> None:
        """
        Raise if the context can no longer be used to send a request.

        Raises:
            CancelledError: If cancel() was called
            DeadlineExceededError: If the deadline has passed
        """
        if self._cancelled.is_set():
            raise CancelledError("context cancelled")
        if self._expired():
            raise DeadlineExceededError("context deadline exceeded")

    def timeout_for(self, default: float) -> float:
        """Per-request timeout: the default capped by the time remaining."""
        remaining = self.remaining()
        if remaining is None:
            return default
        return min(default, remaining)

    def _expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline
