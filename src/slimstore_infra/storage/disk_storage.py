"""diskcache-backed implementation of KeyValueStorage."""

from __future__ import annotations

from pathlib import Path

import diskcache


class DiskStorage:
    """Persistent storage backed by diskcache (SQLite under the hood)."""

    def __init__(self, storage_dir: Path) -> None:
        """Initialize with a storage directory, creating it if needed."""
        storage_dir.mkdir(parents=True, exist_ok=True)
        self._cache = diskcache.Cache(str(storage_dir))

    def get(self, key: str) -> str | None:
        """Retrieve a raw value by key."""
        result = self._cache.get(key)
        # Values written by other diskcache users are not ours to decode
        if not isinstance(result, str):
            return None
        return result

    def set(self, key: str, value: str) -> None:
        """Store a raw value without expiry; TTLs live inside the entry."""
        self._cache.set(key, value)

    def remove(self, key: str) -> None:
        """Delete a key from the cache."""
        self._cache.delete(key)

    def clear(self) -> None:
        """Delete every key in the cache directory."""
        self._cache.clear()

    def keys(self) -> list[str]:
        """Return all string keys currently in the cache."""
        return [key for key in self._cache.iterkeys() if isinstance(key, str)]

    def close(self) -> None:
        """Close the cache."""
        self._cache.close()
