"""
Tests for stash health checks.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from stashy import BackendError, LocalStash
from stashy.utils.health import (
    ComponentHealth,
    HealthChecker,
    HealthStatus,
    check_stash,
)


@pytest.mark.asyncio
async def test_local_stash_is_healthy(local_stash: LocalStash):
    health = await check_stash(local_stash)

    assert health.status == HealthStatus.HEALTHY
    assert health.details == {"backend": "LocalStash"}
    assert health.latency_ms is not None


@pytest.mark.asyncio
async def test_failing_stash_is_unhealthy():
    stash = AsyncMock()
    stash.fetch.side_effect = BackendError("connection refused")

    health = await check_stash(stash, name="sessions")

    assert health.name == "sessions"
    assert health.status == HealthStatus.UNHEALTHY
    assert "connection refused" in health.message


@pytest.mark.asyncio
async def test_checker_aggregates_worst_status(local_stash: LocalStash):
    async def slow():
        return ComponentHealth(name="slow", status=HealthStatus.DEGRADED)

    async def broken():
        raise RuntimeError("boom")

    checker = HealthChecker()
    checker.add_check("local", lambda: check_stash(local_stash, "local"))
    checker.add_check("slow", slow)

    assert (await checker.run()).status == HealthStatus.DEGRADED

    checker.add_check("broken", broken)
    health = await checker.run()

    assert health.status == HealthStatus.UNHEALTHY
    body = health.to_dict()
    assert body["status"] == "unhealthy"
    assert body["components"]["broken"]["message"] == "boom"
    assert body["components"]["local"]["backend"] == "LocalStash"


@pytest.mark.asyncio
async def test_slow_check_times_out():
    async def hangs():
        await asyncio.sleep(1)

    checker = HealthChecker(timeout=0.01)
    checker.add_check("hung", hangs)

    health = await checker.run()

    assert health.status == HealthStatus.UNHEALTHY
    assert health.components[0].message == "Timed out after 0.01s"


@pytest.mark.asyncio
async def test_no_checks_is_healthy():
    assert (await HealthChecker().run()).status == HealthStatus.HEALTHY
