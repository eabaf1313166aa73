"""
Utility modules.
"""

from .health import HealthChecker, HealthStatus, check_stash
from .logging import configure_logging

__all__ = [
    "HealthChecker",
    "HealthStatus",
    "check_stash",
    "configure_logging",
]
