"""Observability: structured logging."""

from slimstore.observability.logging import (
    bind_store_context,
    clear_store_context,
    configure_logging,
)

__all__ = [
    "bind_store_context",
    "clear_store_context",
    "configure_logging",
]
