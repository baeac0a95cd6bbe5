"""Redis-backed implementation of KeyValueStorage."""

from __future__ import annotations

from redis import Redis


def _decode(value: bytes | str) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


class RedisStorage:
    """Persistent storage backed by a synchronous Redis client."""

    def __init__(self, redis: Redis) -> None:  # type: ignore[type-arg]
        """Initialize with a redis-py client."""
        self._redis = redis

    def get(self, key: str) -> str | None:
        """Retrieve a raw value by key."""
        value = self._redis.get(key)
        if value is None:
            return None
        return _decode(value)

    def set(self, key: str, value: str) -> None:
        """Store a raw value without a Redis-side expiry."""
        self._redis.set(name=key, value=value)

    def remove(self, key: str) -> None:
        """Delete a key."""
        self._redis.delete(key)

    def clear(self) -> None:
        """Flush the selected Redis database."""
        self._redis.flushdb()

    def keys(self) -> list[str]:
        """Return all keys in the selected database (SCAN, not KEYS)."""
        return [_decode(key) for key in self._redis.scan_iter()]
