"""In-process dict implementation of KeyValueStorage."""

from __future__ import annotations


class MemoryStorage:
    """Non-persistent storage kept in a dict. Useful for tests and scratch use."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Initialize, optionally seeded with raw entries."""
        self._data: dict[str, str] = dict(initial) if initial else {}

    def get(self, key: str) -> str | None:
        """Retrieve a raw value by key."""
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a raw value."""
        self._data[key] = value

    def remove(self, key: str) -> None:
        """Delete a key if present."""
        self._data.pop(key, None)

    def clear(self) -> None:
        """Delete every key."""
        self._data.clear()

    def keys(self) -> list[str]:
        """Return all keys."""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)
