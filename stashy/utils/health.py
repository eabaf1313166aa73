"""Stash health check utilities."""

import asyncio
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, Callable, Optional

import structlog

from stashy.core.interfaces.stash import Stash

logger = structlog.get_logger(__name__)

PROBE_KEY = "stashy:health:probe"


class HealthStatus(str, Enum):
    """Health status values."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


_SEVERITY = [HealthStatus.HEALTHY, HealthStatus.DEGRADED, HealthStatus.UNHEALTHY]


@dataclass
class ComponentHealth:
    """Health status of a single stash."""

    name: str
    status: HealthStatus
    latency_ms: Optional[float] = None
    message: Optional[str] = None
    details: dict = field(default_factory=dict)


@dataclass
class SystemHealth:
    """Overall health status."""

    status: HealthStatus
    components: list[ComponentHealth] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "components": {
                c.name: {
                    "status": c.status.value,
                    "latency_ms": c.latency_ms,
                    "message": c.message,
                    **c.details,
                }
                for c in self.components
            },
        }


async def check_stash(
    stash: Stash,
    name: str = "stash",
    degraded_after_ms: float = 50,
) -> ComponentHealth:
    """Check a stash answers a read and measure latency."""
    try:
        start = time.perf_counter()
        await stash.fetch(PROBE_KEY)
        latency = (time.perf_counter() - start) * 1000

        return ComponentHealth(
            name=name,
            status=HealthStatus.HEALTHY if latency < degraded_after_ms else HealthStatus.DEGRADED,
            latency_ms=round(latency, 2),
            message="Connected" if latency < degraded_after_ms else "Slow response",
            details={"backend": type(stash).__name__},
        )
    except Exception as e:
        logger.error("Stash health check failed", stash=name, error=str(e))
        return ComponentHealth(
            name=name,
            status=HealthStatus.UNHEALTHY,
            message=str(e)[:100],
            details={"backend": type(stash).__name__},
        )


class HealthChecker:
    """
    Aggregate health checker.

    Checks run concurrently; one that raises or exceeds `timeout` seconds
    is reported unhealthy. The overall status is the worst component status.

    Usage:
        checker = HealthChecker(timeout=2.0)
        checker.add_check("sessions", lambda: check_stash(sessions, "sessions"))

        health = await checker.run()
    """

    def __init__(self, timeout: float = 5.0):
        self.timeout = timeout
        self.checks: dict[str, Callable[[], Awaitable[ComponentHealth]]] = {}

    def add_check(self, name: str, check_fn: Callable[[], Awaitable[ComponentHealth]]) -> None:
        """Add a health check function."""
        self.checks[name] = check_fn

    async def _run_one(self, name: str, check_fn: Callable[[], Awaitable[ComponentHealth]]) -> ComponentHealth:
        try:
            return await asyncio.wait_for(check_fn(), timeout=self.timeout)
        except asyncio.TimeoutError:
            message = f"Timed out after {self.timeout}s"
        except Exception as e:
            message = str(e)[:100]
        logger.error("Health check failed", check=name, error=message)
        return ComponentHealth(name=name, status=HealthStatus.UNHEALTHY, message=message)

    async def run(self) -> SystemHealth:
        """Run all health checks concurrently."""
        components = list(await asyncio.gather(
            *[self._run_one(name, check) for name, check in self.checks.items()]
        ))

        overall = max(
            (c.status for c in components),
            key=_SEVERITY.index,
            default=HealthStatus.HEALTHY,
        )
        return SystemHealth(status=overall, components=components)
