"""SlimStore: TTL, obfuscation and key prefixes over a plain string key-value storage."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from slimstore.guard import AvailabilityGuard, StorageSource
from slimstore.observability.logging import bind_store_context
from slimstore.sweep import sweep_expired
from slimstore_core.codec import decode_entry, encode_entry
from slimstore_core.exceptions import EntryDecodeError, EntryEncodeError
from slimstore_core.models.config import OverrideLike, StoreConfig, resolve_config

if TYPE_CHECKING:
    from slimstore_core.config.settings import Settings

logger = structlog.get_logger()


def _now_ms() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


class SlimStore:
    """Decorator over a KeyValueStorage.

    Every operation resolves the effective configuration from the default
    ``config`` and an optional per-call override, then goes through the
    availability guard. Failures never raise: mutations return ``False``
    and reads return ``None``.
    """

    def __init__(
        self,
        storage: StorageSource,
        config: StoreConfig | None = None,
        *,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """Initialize with a storage (or a factory for one) and default config.

        ``clock`` returns the current time in milliseconds since the epoch.
        """
        self.config = config if config is not None else StoreConfig()
        self._clock = clock or _now_ms
        self._guard = AvailabilityGuard(storage, on_first_available=self._initial_flush)

    @classmethod
    def from_settings(cls, settings: Settings) -> SlimStore:
        """Build a store whose backend and defaults come from settings."""
        from slimstore_infra.storage.factory import create_storage

        bind_store_context(settings)
        return cls(lambda: create_storage(settings), StoreConfig.from_settings(settings))

    def is_available(self) -> bool:
        """Whether the underlying storage is usable (checked once)."""
        return self._guard.check()

    def set(self, key: str, value: Any, override: OverrideLike = None) -> bool:
        """Encode and store a value. Returns False on any failure."""
        if not self.is_available():
            return False

        conf = resolve_config(self.config, override)
        try:
            raw = encode_entry(value, conf, self._clock())
        except EntryEncodeError as e:
            logger.warning("entry_encode_failed", key=key, error=str(e))
            return False

        try:
            self._guard.storage.set(conf.scoped_key(key), raw)
        except Exception as e:
            logger.warning("storage_write_failed", key=key, error=str(e))
            return False
        return True

    def get(self, key: str, override: OverrideLike = None) -> Any:
        """Read and decode a value.

        Returns None when the key is absent, expired, unreadable or the
        storage is unavailable. An expired entry is removed as a side effect.
        """
        if not self.is_available():
            return None

        conf = resolve_config(self.config, override)
        storage = self._guard.storage
        scoped = conf.scoped_key(key)

        try:
            raw = storage.get(scoped)
        except Exception as e:
            logger.warning("storage_read_failed", key=key, error=str(e))
            return None
        if not raw:
            return None

        try:
            entry = decode_entry(raw, conf)
        except EntryDecodeError as e:
            logger.warning("entry_decode_failed", key=key, error=str(e))
            return None

        if entry.is_expired(self._clock()):
            logger.debug("entry_expired", key=key)
            try:
                storage.remove(scoped)
            except Exception as e:
                logger.warning("storage_remove_failed", key=key, error=str(e))
            return None
        return entry.value

    def remove(self, key: str, override: OverrideLike = None) -> bool:
        """Delete a key. Missing keys are a no-op."""
        if not self.is_available():
            return False

        conf = resolve_config(self.config, override)
        try:
            self._guard.storage.remove(conf.scoped_key(key))
        except Exception as e:
            logger.warning("storage_remove_failed", key=key, error=str(e))
            return False
        return True

    def clear(self, override: OverrideLike = None) -> bool:
        """Delete every key under the effective prefix.

        Without a prefix the whole underlying storage is cleared.
        """
        if not self.is_available():
            return False

        conf = resolve_config(self.config, override)
        storage = self._guard.storage
        prefix = conf.key_prefix
        try:
            if prefix:
                for key in list(storage.keys()):
                    if key.startswith(prefix):
                        storage.remove(key)
            else:
                storage.clear()
        except Exception as e:
            logger.warning("storage_clear_failed", prefix=prefix, error=str(e))
            return False
        return True

    def flush(self, force: bool = False, override: OverrideLike = None) -> bool:
        """Remove expired TTL entries, or every TTL entry when force is set."""
        if not self.is_available():
            return False

        conf = resolve_config(self.config, override)
        prefix = conf.key_prefix
        try:
            removed = sweep_expired(self._guard.storage, self._clock(), force=force, prefix=prefix)
        except Exception as e:
            logger.warning("flush_failed", prefix=prefix, error=str(e))
            return False

        logger.info("flush_complete", removed=removed, force=force, prefix=prefix)
        return True

    def _initial_flush(self) -> None:
        """Sweep stale entries left over from earlier sessions."""
        self.flush()
