"""
Redis stash backend implementation.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from urllib.parse import quote

import redis.asyncio as redis
import structlog
from redis.exceptions import RedisError

from stashy.core.errors import BackendError
from stashy.core.interfaces.stash import Stash

logger = structlog.get_logger(__name__)


@dataclass
class RedisCredentials:
    """
    Redis ACL user credentials.

    Typically passed to RedisStash.open().
    """
    username: str
    password: str


def build_redis_url(
    host: str,
    port: int = 6379,
    credentials: RedisCredentials | None = None,
    database_index: int | None = None,
) -> str:
    """Build a redis:// connection URL from its parts."""
    auth = ""
    if credentials is not None:
        auth = f"{quote(credentials.username, safe='')}:{quote(credentials.password, safe='')}@"

    url = f"redis://{auth}{host}:{port}"
    if database_index is not None:
        return f"{url}/{database_index}"
    if credentials is None:
        return f"{url}/0"
    return url


class RedisStash(Stash):
    """
    Stash backed by a Redis server.

    Writes and deletes use atomic commands (SET ... GET, GETDEL) so the
    returned previous value is consistent under concurrent writers.
    Requires Redis 6.2 or newer.

    Usage:
        stash = RedisStash(redis_url="redis://localhost:6379/0", prefix="app:")
        await stash.connect()

        await stash.stash("session:f05a29", "user:123")
        owner = await stash.fetch("session:f05a29")

        # Or connect in one step
        stash = await RedisStash.open("localhost", 6379, database_index=2)
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        prefix: str = "",
        max_connections: int | None = None,
        client: redis.Redis | None = None,
    ):
        self.redis_url = redis_url
        self.prefix = prefix
        self.max_connections = max_connections
        self._client = client
        self._connect_lock = asyncio.Lock()

    @classmethod
    async def open(
        cls,
        host: str,
        port: int = 6379,
        credentials: RedisCredentials | None = None,
        database_index: int | None = None,
        prefix: str = "",
    ) -> "RedisStash":
        """Connect to a Redis server and return a ready stash."""
        url = build_redis_url(host, port, credentials, database_index)
        return await cls.connect_with_string(url, prefix=prefix)

    @classmethod
    async def connect_with_string(
        cls,
        connection_string: str,
        prefix: str = "",
    ) -> "RedisStash":
        """Connect using a redis:// URL and return a ready stash."""
        stash = cls(redis_url=connection_string, prefix=prefix)
        await stash.connect()
        return stash

    async def connect(self) -> None:
        """Connect to Redis and verify the server answers."""
        async with self._connect_lock:
            if self._client is not None:
                return

            options = {}
            if self.max_connections is not None:
                options["max_connections"] = self.max_connections

            try:
                client = redis.from_url(
                    self.redis_url,
                    encoding="utf-8",
                    decode_responses=True,
                    **options,
                )
            except ValueError as e:
                logger.error("Invalid Redis URL", error=str(e))
                raise BackendError.from_exception(e) from e

            try:
                await client.ping()
            except RedisError as e:
                await client.aclose()
                logger.error("Redis connection failed", error=str(e))
                raise BackendError.from_exception(e) from e

            self._client = client
            logger.info("Redis stash connected", prefix=self.prefix)

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("Redis stash disconnected")

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            raise RuntimeError("Stash not connected. Call connect() first.")
        return self._client

    def _key(self, key: str) -> str:
        """Prepend prefix to key."""
        return f"{self.prefix}{key}" if self.prefix else key

    async def fetch(self, key: str) -> str | None:
        """Get value by key."""
        try:
            return await self.client.get(self._key(key))
        except RedisError as e:
            logger.error("Redis fetch failed", key=key, error=str(e))
            raise BackendError.from_exception(e) from e

    async def stash(self, key: str, value: str) -> str | None:
        """Set value and return the one it replaced."""
        self.validate_key(key)
        try:
            return await self.client.set(self._key(key), value, get=True)
        except RedisError as e:
            logger.error("Redis stash failed", key=key, error=str(e))
            raise BackendError.from_exception(e) from e

    async def delete(self, key: str) -> str | None:
        """Delete key and return its value."""
        try:
            return await self.client.getdel(self._key(key))
        except RedisError as e:
            logger.error("Redis delete failed", key=key, error=str(e))
            raise BackendError.from_exception(e) from e

    async def ping(self) -> bool:
        """Check the server is reachable."""
        try:
            return bool(await self.client.ping())
        except RedisError as e:
            raise BackendError.from_exception(e) from e
