"""slimstore: TTL expiry, value obfuscation and key prefixes over a string key-value store."""

from slimstore.api import clear, config, flush, get, is_available, remove, set
from slimstore.observability.logging import configure_logging
from slimstore.store import SlimStore
from slimstore_core.models.config import ConfigOverride, StoreConfig

__all__ = [
    "ConfigOverride",
    "SlimStore",
    "StoreConfig",
    "clear",
    "config",
    "configure_logging",
    "flush",
    "get",
    "is_available",
    "remove",
    "set",
]
