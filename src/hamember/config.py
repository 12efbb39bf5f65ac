"""Centralized configuration using Pydantic Settings with .env support.

Usage:
    from hamember.config import get_settings
    settings = get_settings()
    print(settings.resolver.key_prefix)

Environment variables are loaded from:
1. .env file in the project root
2. System environment variables (override .env)
3. CLI arguments (override env vars when passed to CLIs)
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="HAMEMBER_")

    log: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )


class StorageSettings(BaseSettings):
    """Storage paths configuration."""

    model_config = SettingsConfigDict(env_prefix="HAMEMBER_")

    log_dir: str = Field(
        default="~/.hamember/logs",
        description="Log files directory",
    )


class ResolverSettings(BaseSettings):
    """Member id resolution settings."""

    model_config = SettingsConfigDict(env_prefix="HAMEMBER_RESOLVER_")

    key_prefix: str = Field(
        default="ha",
        description="Prefix of the redundant group configuration keys",
    )
    config_file: Optional[str] = Field(
        default=None,
        description="Path to the group configuration file (properties, JSON or XML)",
    )
    bind_address: Optional[str] = Field(
        default=None,
        description="Local bind address as host:port (unset=any address of this host)",
    )
    extra_key_families: List[str] = Field(
        default_factory=list,
        description="Additional address key families searched after rpc-address",
    )

    @field_validator("key_prefix")
    @classmethod
    def _strip_prefix(cls, v: str) -> str:
        v = v.strip().strip(".")
        if not v:
            raise ValueError("key_prefix must not be empty")
        return v


class HAMemberSettings(BaseSettings):
    """Main hamember settings, loads from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Nested settings (each reads its own env vars)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)


@lru_cache
def get_settings() -> HAMemberSettings:
    """Get cached settings instance."""
    return HAMemberSettings()


# Export all settings classes for introspection (used by generate_env_example.py)
__all__ = [
    "HAMemberSettings",
    "get_settings",
    "LoggingSettings",
    "StorageSettings",
    "ResolverSettings",
]
