"""
Pytest fixtures for testing.

Provides:
- A fresh LocalStash per test
- A RedisStash wired to an AsyncMock client (no live server needed)
- A clean stash registry and container
- The global registry populated with the built-in backends
"""

from typing import Generator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from stashy.core.container import Container
from stashy.core.plugins.registry import PluginRegistry, stash_backends
from stashy.implementations.local import LocalStash
from stashy.implementations.redis import RedisStash
from stashy.implementations.register import register_backends


@pytest.fixture
def local_stash() -> LocalStash:
    return LocalStash()


@pytest.fixture
def redis_client() -> AsyncMock:
    """Mock redis.asyncio client with empty-server defaults."""
    client = AsyncMock()
    client.get = AsyncMock(return_value=None)
    client.set = AsyncMock(return_value=None)
    client.getdel = AsyncMock(return_value=None)
    client.ping = AsyncMock(return_value=True)
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def redis_stash(redis_client: AsyncMock) -> RedisStash:
    return RedisStash(prefix="test:", client=redis_client)


@pytest.fixture
def registry() -> PluginRegistry:
    return PluginRegistry("stash")


@pytest_asyncio.fixture
async def container():
    """Container that is shut down after the test."""
    c = Container()
    yield c
    await c.shutdown()


@pytest.fixture
def registered_backends() -> Generator[PluginRegistry, None, None]:
    """Global stash registry with the built-in backends, emptied afterwards."""
    register_backends()
    yield stash_backends
    stash_backends.reset()
