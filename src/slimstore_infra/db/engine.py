"""Database engine factory."""

from __future__ import annotations

from sqlalchemy import Engine, create_engine

from slimstore_core.config.settings import Settings


def create_db_engine(settings: Settings) -> Engine:
    """Create a SQLAlchemy engine based on settings."""
    if settings.database_url.startswith("sqlite"):
        return create_engine(
            settings.database_url,
            echo=False,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        settings.database_url,
        echo=False,
        pool_size=5,
        max_overflow=10,
    )
