"""Abstract interface for the underlying string key-value storage."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStorage(Protocol):
    """Host-provided storage primitive. Implementations can be swapped.

    Every method may raise; callers convert failures into their own
    failure values.
    """

    def get(self, key: str) -> str | None:
        """Retrieve the raw string stored under key, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a raw string under key, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Delete key. Missing keys are a no-op."""
        ...

    def clear(self) -> None:
        """Delete every key in the storage."""
        ...

    def keys(self) -> list[str]:
        """Return all keys currently present."""
        ...
