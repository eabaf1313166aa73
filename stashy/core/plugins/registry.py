"""
Registry for managing interchangeable backend implementations.
"""
from __future__ import annotations

from typing import TypeVar, Generic, Callable, Any
import logging

from stashy.core.interfaces.stash import Stash

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PluginRegistry(Generic[T]):
    """
    Generic registry for backend implementations.

    Example usage:
    ```python
    stash_registry = PluginRegistry[Stash]("stash")

    # Register implementations
    stash_registry.register("local", LocalStash, default=True)
    stash_registry.register("redis", RedisStash)

    # Get implementation
    stash = stash_registry.get("redis", config={"redis_url": "redis://cache:6379/0"})
    ```
    """

    def __init__(self, name: str):
        self.name = name
        self._factories: dict[str, Callable[..., T]] = {}
        self._instances: dict[str, T] = {}
        self._default: str | None = None

    def register(
        self,
        name: str,
        factory: Callable[..., T],
        *,
        default: bool = False,
    ) -> None:
        """
        Register a backend implementation.

        Args:
            name: Unique identifier for this implementation
            factory: Callable that creates the implementation
            default: Set as default implementation
        """
        if name in self._factories:
            logger.warning(f"Overwriting existing {self.name} backend: {name}")

        self._factories[name] = factory

        if default or self._default is None:
            self._default = name

        logger.info(f"Registered {self.name} backend: {name}")

    def unregister(self, name: str) -> bool:
        """Unregister a backend."""
        if name in self._factories:
            del self._factories[name]
            stale = [k for k in self._instances if k == name or k.startswith(f"{name}:")]
            for key in stale:
                del self._instances[key]
            if name == self._default:
                self._default = next(iter(self._factories), None)
            return True
        return False

    def get(
        self,
        name: str | None = None,
        *,
        config: dict[str, Any] | None = None,
        cached: bool = True,
    ) -> T:
        """
        Get a backend implementation.

        Args:
            name: Backend name (uses default if not specified)
            config: Configuration to pass to factory
            cached: Return cached instance if available
        """
        name = name or self._default

        if name is None:
            raise ValueError(f"No {self.name} backend registered")

        if name not in self._factories:
            available = ", ".join(self._factories.keys())
            raise ValueError(
                f"Unknown {self.name} backend: {name}. "
                f"Available: {available}"
            )

        cache_key = f"{name}:{sorted(config.items())}" if config else name
        if cached and cache_key in self._instances:
            return self._instances[cache_key]

        factory = self._factories[name]
        instance = factory(**(config or {}))

        if cached:
            self._instances[cache_key] = instance

        return instance

    def list(self) -> list[str]:
        """List all registered backend names."""
        return list(self._factories.keys())

    def has(self, name: str) -> bool:
        """Check if backend is registered."""
        return name in self._factories

    def reset(self) -> None:
        """Drop every registration and cached instance (for testing)."""
        self._factories.clear()
        self._instances.clear()
        self._default = None

    @property
    def default(self) -> str | None:
        """Get default backend name."""
        return self._default

    @default.setter
    def default(self, name: str) -> None:
        """Set default backend."""
        if name not in self._factories:
            raise ValueError(f"Unknown {self.name} backend: {name}")
        self._default = name


# Global registry for stash backends
stash_backends = PluginRegistry[Stash]("stash")
