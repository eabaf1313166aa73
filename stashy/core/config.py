"""
Stash configuration using Pydantic Settings.
"""

from typing import Any
from functools import lru_cache
from pydantic import Field, field_validator, RedisDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class RedisSettings(BaseSettings):
    """Redis configuration."""

    model_config = SettingsConfigDict(env_prefix="REDIS_")

    url: RedisDsn = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL",
    )
    prefix: str = Field(default="", description="Namespace prepended to every key")
    max_connections: int = Field(default=10, ge=1)


class Settings(BaseSettings):
    """Main stash settings."""

    model_config = SettingsConfigDict(
        env_prefix="STASHY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = Field(default="development")

    # Backend selection
    backend: str = Field(default="local", description="local or redis")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", description="json or text")

    # Nested settings
    redis: RedisSettings = Field(default_factory=RedisSettings)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        allowed = {"development", "staging", "production", "testing"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in {"json", "text"}:
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    def get_backends_config(self) -> dict[str, Any]:
        """Get configuration for DI container."""
        stash_config: dict[str, Any] = {}
        if self.backend == "redis":
            stash_config = {
                "url": str(self.redis.url),
                "prefix": self.redis.prefix,
                "max_connections": self.redis.max_connections,
            }
        return {
            "backends": {
                "stash": self.backend,
            },
            "stash": stash_config,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
