"""
In-memory stash backend for development and testing.
"""

from __future__ import annotations

import asyncio

from stashy.core.interfaces.stash import Stash


class LocalStash(Stash):
    """
    Local in-memory stash.

    A dict guarded by an asyncio lock, so one instance can be shared
    between tasks running on the same event loop.

    Note: Not suitable for multi-process deployments.
    Data is not persisted and not shared between processes.

    Usage:
        stash = LocalStash()
        await stash.stash("user:1:name", "Alice")
        name = await stash.fetch("user:1:name")
    """

    def __init__(self):
        self._store: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def fetch(self, key: str) -> str | None:
        async with self._lock:
            return self._store.get(key)

    async def stash(self, key: str, value: str) -> str | None:
        self.validate_key(key)
        async with self._lock:
            previous = self._store.get(key)
            self._store[key] = value
            return previous

    async def delete(self, key: str) -> str | None:
        async with self._lock:
            return self._store.pop(key, None)

    async def count(self) -> int:
        """Number of stashed keys."""
        async with self._lock:
            return len(self._store)

    async def is_empty(self) -> bool:
        async with self._lock:
            return not self._store

    async def clear(self) -> None:
        """Remove all entries."""
        async with self._lock:
            self._store.clear()
