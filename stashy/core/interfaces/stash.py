"""
Stash backend contract.
Implementations: LocalStash, RedisStash
"""
from __future__ import annotations

import string
from abc import ABC, abstractmethod

from stashy.core.errors import InvalidKeyError


KEY_DELIMITER = ":"
KEY_ALPHABET = frozenset(string.ascii_letters + string.digits + "_" + KEY_DELIMITER)


def validate_key(key: str) -> None:
    """
    Validate a stash key.

    Keys may only use ASCII alphanumerics and underscores, with colons as
    segment delimiters. For example: `user:123:name`, `session:f05a29`.

    Raises:
        InvalidKeyError: describing the first rule the key breaks
    """
    if not key:
        raise InvalidKeyError("Key must not be empty")
    if key.startswith(KEY_DELIMITER) or key.endswith(KEY_DELIMITER):
        raise InvalidKeyError("Key must not start or end with ':'")
    if any(not segment for segment in key.split(KEY_DELIMITER)):
        raise InvalidKeyError("Key must not contain empty segments")
    if not all(char in KEY_ALPHABET for char in key):
        raise InvalidKeyError("Key contains invalid characters")


class Stash(ABC):
    """
    Base class for stash backends.

    Every operation returns the value previously held under the key, or
    None when there was none. Only writes validate the key.

    Example implementations:
    - LocalStash: process-local dict, for development and tests
    - RedisStash: shared Redis instance
    """

    validate_key = staticmethod(validate_key)

    @abstractmethod
    async def fetch(self, key: str) -> str | None:
        """Get value by key. Returns None if not found."""
        ...

    @abstractmethod
    async def stash(self, key: str, value: str) -> str | None:
        """Set value for key. Returns the previous value, if any."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> str | None:
        """Delete key. Returns the removed value, if any."""
        ...

    async def connect(self) -> None:
        """Open backend resources. No-op by default."""
        pass

    async def disconnect(self) -> None:
        """Release backend resources. No-op by default."""
        pass
