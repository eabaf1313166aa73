"""
Register all backend implementations with their registries.

Call register_backends() at startup, before configuring the container.
"""

from stashy.core.plugins.registry import stash_backends
from stashy.core.config import get_settings


def register_backends() -> None:
    """Register all backend implementations."""

    def create_local_stash(**config):
        from stashy.implementations.local import LocalStash
        return LocalStash()

    def create_redis_stash(**config):
        from stashy.implementations.redis import RedisStash
        redis_settings = get_settings().redis
        return RedisStash(
            redis_url=config.get("url", str(redis_settings.url)),
            prefix=config.get("prefix", redis_settings.prefix),
            max_connections=config.get("max_connections", redis_settings.max_connections),
        )

    stash_backends.register("local", create_local_stash, default=True)
    stash_backends.register("redis", create_redis_stash)

    # Filesystem, DynamoDB and RocksDB backends would register here.
