"""
Stash backend implementations.
"""

from stashy.implementations.local import LocalStash
from stashy.implementations.redis import RedisCredentials, RedisStash, build_redis_url

__all__ = [
    "LocalStash",
    "RedisStash",
    "RedisCredentials",
    "build_redis_url",
]
