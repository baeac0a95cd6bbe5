"""Module-level default store.

``config`` is the process-wide default configuration, created at import
time from ``Settings()`` (``SLIM_DEFAULT_*`` environment variables) and never
torn down. Assign its fields to change the defaults for every later call
that does not override them::

    slimstore.config.ttl = 60
    slimstore.config.prefix = "myapp:"

The backend is built from the same settings on the first operation, and its
availability is decided once per process. Invalid settings leave the
defaults unconfigured and the store unavailable; importing never raises.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from slimstore.store import SlimStore
from slimstore_core.config.settings import Settings
from slimstore_core.exceptions import StorageUnavailableError
from slimstore_core.interfaces.storage import KeyValueStorage
from slimstore_core.models.config import OverrideLike, StoreConfig

logger = structlog.get_logger()


def _load_settings() -> Settings | None:
    try:
        return Settings()
    except ValidationError as e:
        logger.warning("settings_invalid", error=str(e))
        return None


_settings = _load_settings()


def _default_storage() -> KeyValueStorage:
    from slimstore_infra.storage.factory import create_storage

    if _settings is None:
        msg = "SLIM_* settings are invalid"
        raise StorageUnavailableError(msg)
    return create_storage(_settings)


config = StoreConfig.from_settings(_settings) if _settings is not None else StoreConfig()

_store = SlimStore(_default_storage, config)


def is_available() -> bool:
    """Whether the default storage is usable."""
    return _store.is_available()


def set(key: str, value: Any, override: OverrideLike = None) -> bool:  # noqa: A001
    """Store a value in the default store."""
    return _store.set(key, value, override)


def get(key: str, override: OverrideLike = None) -> Any:
    """Read a value from the default store."""
    return _store.get(key, override)


def remove(key: str, override: OverrideLike = None) -> bool:
    """Delete a key from the default store."""
    return _store.remove(key, override)


def clear(override: OverrideLike = None) -> bool:
    """Clear the default store (only the prefix when one is configured)."""
    return _store.clear(override)


def flush(force: bool = False, override: OverrideLike = None) -> bool:
    """Sweep expired entries from the default store."""
    return _store.flush(force, override)
