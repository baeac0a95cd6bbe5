"""Factory for building the underlying storage from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from slimstore_core.interfaces.storage import KeyValueStorage

if TYPE_CHECKING:
    from slimstore_core.config.settings import Settings


def create_storage(settings: Settings) -> KeyValueStorage:
    """Create a storage backend based on settings.

    Backend libraries are imported lazily so only the selected one needs
    to be importable.
    """
    if settings.storage_backend == "memory":
        from slimstore_infra.storage.memory_storage import MemoryStorage

        return MemoryStorage()

    if settings.storage_backend == "redis":
        from redis import Redis

        from slimstore_infra.storage.redis_storage import RedisStorage

        return RedisStorage(Redis.from_url(settings.redis_url))

    if settings.storage_backend == "db":
        from slimstore_infra.db.engine import create_db_engine
        from slimstore_infra.db.session import create_session_factory, init_db
        from slimstore_infra.storage.db_storage import DBStorage

        engine = create_db_engine(settings)
        init_db(engine)
        return DBStorage(create_session_factory(engine))

    from slimstore_infra.storage.disk_storage import DiskStorage

    return DiskStorage(settings.storage_dir)
