"""
Dependency injection container.
Centralizes stash instantiation and lifecycle.
"""

from typing import Any
from dataclasses import dataclass, field

import structlog

from .interfaces import Stash
from .plugins.registry import stash_backends

logger = structlog.get_logger(__name__)


@dataclass
class Container:
    """
    Dependency injection container.

    Holds the configured stash and provides easy access.
    Configure the backend via settings, get the instance here.

    Example:
    ```python
    from stashy.core.container import container

    container.configure(get_settings().get_backends_config())
    await container.initialize()

    await container.stash.stash("user:1:name", "Alice")
    ```
    """

    _config: dict[str, Any] = field(default_factory=dict)
    _instances: dict[str, Any] = field(default_factory=dict)

    # Backend type selection (from config)
    stash_type: str = "local"

    def configure(self, config: dict[str, Any]) -> None:
        """Configure the container from settings."""
        self._config = config

        backends = config.get("backends", {})
        self.stash_type = backends.get("stash", "local")

    @property
    def stash(self) -> Stash:
        """Get configured stash backend."""
        if "stash" not in self._instances:
            config = self._config.get("stash", {})
            self._instances["stash"] = stash_backends.get(
                self.stash_type,
                config=config,
                cached=False,
            )
        return self._instances["stash"]

    def get(self, name: str) -> Any:
        """Get any registered instance by name."""
        return self._instances.get(name)

    def set(self, name: str, instance: Any) -> None:
        """Set a custom instance."""
        self._instances[name] = instance

    def clear(self) -> None:
        """Clear all instances (for testing)."""
        self._instances.clear()

    async def initialize(self) -> None:
        """Connect the stash backend."""
        await self.stash.connect()
        logger.info("Stash initialized", backend=self.stash_type)

    async def shutdown(self) -> None:
        """Disconnect the stash backend gracefully."""
        stash = self._instances.pop("stash", None)
        if stash is not None:
            await stash.disconnect()
            logger.info("Stash shut down", backend=self.stash_type)


# Global container instance
container = Container()


async def get_stash() -> Stash:
    """Dependency helper returning the configured stash."""
    return container.stash
