"""Database-backed implementation of KeyValueStorage using a key/value table."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, sessionmaker

from slimstore_infra.db.models import MAX_KEY_LENGTH, StorageEntry


class DBStorage:
    """Persistent storage backed by the storage_entries table.

    Keys are limited to ``MAX_KEY_LENGTH`` characters (prefix included).
    Longer keys are rejected on write instead of being truncated or refused
    differently by each database.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        """Initialize with a SQLAlchemy session factory."""
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        """Retrieve a raw value by key."""
        if len(key) > MAX_KEY_LENGTH:
            return None
        with self._session_factory() as session:
            entry = session.get(StorageEntry, key)
            if entry is None:
                return None
            return entry.value

    def set(self, key: str, value: str) -> None:
        """Insert or replace a raw value.

        Raises:
            ValueError: If the key is longer than MAX_KEY_LENGTH.
        """
        if len(key) > MAX_KEY_LENGTH:
            msg = f"Key length {len(key)} exceeds {MAX_KEY_LENGTH}"
            raise ValueError(msg)
        with self._session_factory() as session, session.begin():
            entry = session.get(StorageEntry, key)
            if entry is None:
                session.add(StorageEntry(key=key, value=value))
            else:
                entry.value = value

    def remove(self, key: str) -> None:
        """Delete a key. Missing keys are a no-op."""
        if len(key) > MAX_KEY_LENGTH:
            return
        with self._session_factory() as session, session.begin():
            session.execute(delete(StorageEntry).where(StorageEntry.key == key))

    def clear(self) -> None:
        """Delete every row."""
        with self._session_factory() as session, session.begin():
            session.execute(delete(StorageEntry))

    def keys(self) -> list[str]:
        """Return all stored keys."""
        with self._session_factory() as session:
            return list(session.scalars(select(StorageEntry.key)))
