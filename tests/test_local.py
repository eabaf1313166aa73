"""
Tests for the in-memory stash.
"""

import asyncio

import pytest

from stashy import InvalidKeyError, LocalStash


@pytest.mark.asyncio
async def test_create_local_stash(local_stash: LocalStash):
    assert await local_stash.is_empty()
    assert await local_stash.count() == 0


@pytest.mark.asyncio
async def test_stash_locally(local_stash: LocalStash):
    assert await local_stash.stash("test", "value123") is None
    assert await local_stash.stash("user:1:name", "Alice") is None
    assert await local_stash.stash("user:2:name", "Bob") is None
    assert await local_stash.stash("user:3:name", "Charlie") is None

    assert await local_stash.count() == 4
    assert await local_stash.fetch("user:1:name") == "Alice"
    assert await local_stash.fetch("user:2:name") == "Bob"
    assert await local_stash.fetch("user:3:name") == "Charlie"


@pytest.mark.asyncio
async def test_fetch_missing_key(local_stash: LocalStash):
    assert await local_stash.fetch("nothing:here") is None


@pytest.mark.asyncio
async def test_invalid_stash_key(local_stash: LocalStash):
    with pytest.raises(InvalidKeyError):
        await local_stash.stash("invalid key", "value")

    assert await local_stash.is_empty()


@pytest.mark.asyncio
async def test_override_key(local_stash: LocalStash):
    assert await local_stash.stash("test", "value123") is None
    assert await local_stash.stash("test", "value1234") == "value123"
    assert await local_stash.fetch("test") == "value1234"
    assert await local_stash.count() == 1


@pytest.mark.asyncio
async def test_delete_key(local_stash: LocalStash):
    assert await local_stash.stash("key1", "1") is None
    assert await local_stash.stash("key2", "2") is None
    assert await local_stash.stash("key3", "3") is None
    assert await local_stash.count() == 3

    assert await local_stash.delete("key3") == "3"
    assert await local_stash.delete("key1") == "1"
    assert await local_stash.delete("key2") == "2"
    assert await local_stash.is_empty()


@pytest.mark.asyncio
async def test_delete_missing_key(local_stash: LocalStash):
    assert await local_stash.delete("ghost") is None


@pytest.mark.asyncio
async def test_clear(local_stash: LocalStash):
    await local_stash.stash("a", "1")
    await local_stash.stash("b", "2")

    await local_stash.clear()

    assert await local_stash.is_empty()
    assert await local_stash.fetch("a") is None


@pytest.mark.asyncio
async def test_concurrent_writers_see_every_previous_value(local_stash: LocalStash):
    """Each overwrite observes exactly one predecessor."""
    await local_stash.stash("counter", "start")

    results = await asyncio.gather(
        *[local_stash.stash("counter", str(i)) for i in range(50)]
    )

    previous = set(results)
    written = {str(i) for i in range(50)}
    final = await local_stash.fetch("counter")

    assert "start" in previous
    assert previous | {final} == written | {"start"}
    assert len(previous) == 50
