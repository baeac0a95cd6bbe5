"""Integration test fixtures: real backing services."""

from __future__ import annotations

import socket
import time
from collections.abc import Generator

import pytest
from redis import Redis


def _tcp_reachable(
    host: str,
    port: int,
    timeout: float = 1.0,
    retries: int = 3,
    delay: float = 1.0,
) -> bool:
    """Check if a TCP service is reachable, retrying on failure."""
    for attempt in range(retries):
        try:
            with socket.create_connection((host, port), timeout=timeout):
                return True
        except OSError:
            if attempt < retries - 1:
                time.sleep(delay)
    return False


_redis_up = _tcp_reachable("localhost", 6379)

require_redis = pytest.mark.skipif(
    not _redis_up,
    reason="Redis not reachable on localhost:6379",
)


@pytest.fixture
def redis_client() -> Generator[Redis, None, None]:  # type: ignore[type-arg]
    """Redis client on database 1, flushed before and after each test."""
    client: Redis = Redis.from_url("redis://localhost:6379/1")  # type: ignore[type-arg]
    client.flushdb()
    yield client
    client.flushdb()
    client.close()
