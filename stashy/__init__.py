"""
Stashy: stashing made simple.

One async key-value contract with interchangeable backends.
"""

from stashy.core.errors import BackendError, InvalidKeyError, StashError
from stashy.core.interfaces.stash import Stash, validate_key
from stashy.implementations.local import LocalStash
from stashy.implementations.redis import RedisCredentials, RedisStash

__version__ = "0.1.0"

__all__ = [
    "Stash",
    "validate_key",
    "LocalStash",
    "RedisStash",
    "RedisCredentials",
    "StashError",
    "InvalidKeyError",
    "BackendError",
]
