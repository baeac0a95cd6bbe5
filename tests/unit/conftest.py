"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import pytest

from slimstore.store import SlimStore
from slimstore_core.models.config import StoreConfig
from slimstore_infra.storage.memory_storage import MemoryStorage
from tests.mocks.mock_storage import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    """Return a clock frozen at a fixed instant."""
    return FakeClock()


@pytest.fixture
def storage() -> MemoryStorage:
    """Return an empty in-memory storage."""
    return MemoryStorage()


@pytest.fixture
def store_config() -> StoreConfig:
    """Return a fresh default configuration."""
    return StoreConfig()


@pytest.fixture
def store(storage: MemoryStorage, store_config: StoreConfig, clock: FakeClock) -> SlimStore:
    """Return a SlimStore over the in-memory storage with a fake clock."""
    return SlimStore(storage, store_config, clock=clock)
