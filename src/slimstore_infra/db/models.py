"""SQLAlchemy ORM table models."""

from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Longest key the storage_entries primary key column holds
MAX_KEY_LENGTH = 512


class Base(DeclarativeBase):
    """Base class for all ORM models."""


class StorageEntry(Base):
    """Raw key/value slot. Expiry lives inside the stored JSON, not in a column."""

    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(String(MAX_KEY_LENGTH), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
