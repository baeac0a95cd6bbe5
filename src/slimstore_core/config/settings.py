"""Application settings using pydantic-settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from slimstore_core.constants import DEFAULT_SECRET


class Settings(BaseSettings):
    """Central configuration for slimstore."""

    model_config = SettingsConfigDict(env_prefix="SLIM_", env_file=".env")

    # --- Storage backend ---
    storage_backend: Literal["memory", "disk", "redis", "db"] = Field(
        default="disk",
        description="Underlying key-value storage: 'disk' (diskcache), 'redis', 'db' or 'memory'",
    )
    storage_dir: Path = Field(
        default=Path("./.cache/slimstore"),
        description="Directory for the diskcache-backed storage",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (used when storage_backend=redis)",
    )
    database_url: str = Field(
        default="sqlite:///./slimstore.db",
        description="SQLAlchemy database URL (used when storage_backend=db)",
    )

    # --- Entry defaults ---
    default_ttl: float | None = Field(
        default=None,
        description="Default entry TTL in seconds; unset means entries never expire",
    )
    default_encrypt: bool = Field(
        default=False,
        description="Obfuscate values by default",
    )
    default_secret: int = Field(
        default=DEFAULT_SECRET,
        description="Shift key handed to the default obfuscator",
    )
    default_prefix: str | None = Field(
        default=None,
        description="Namespace prepended to every key by default",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: human-readable console or JSON lines",
    )

    @model_validator(mode="after")
    def validate_default_ttl(self) -> Settings:
        """Reject non-positive default TTLs."""
        if self.default_ttl is not None and self.default_ttl <= 0:
            msg = "default_ttl must be positive when set"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def normalize_default_prefix(self) -> Settings:
        """Treat an empty prefix as no prefix."""
        if self.default_prefix == "":
            self.default_prefix = None
        return self
