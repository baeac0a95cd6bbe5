"""Public model re-exports for slimstore_core."""

from slimstore_core.models.config import ConfigOverride, StoreConfig, resolve_config

__all__ = [
    "ConfigOverride",
    "StoreConfig",
    "resolve_config",
]
