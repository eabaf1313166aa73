"""
Stash error hierarchy.

All failures raised by stash backends derive from StashError, so callers
can catch one type regardless of which backend is configured.
"""

from __future__ import annotations


class StashError(Exception):
    """Base class for errors raised while interacting with a stash."""
    pass


class InvalidKeyError(StashError):
    """Raised when a key does not follow the stash naming convention."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid key: {reason}")


class BackendError(StashError):
    """Raised when the underlying storage fails."""

    def __init__(self, cause: BaseException | str):
        self.cause = cause
        super().__init__(f"Backend error: {cause}")

    @classmethod
    def from_exception(cls, error: BaseException) -> "BackendError":
        """Wrap a backend-specific exception."""
        return cls(error)
