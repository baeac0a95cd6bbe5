"""Output for slimstore's structlog events.

The library only emits events. ``configure_logging`` is an opt-in for hosts
without their own logging setup: it attaches one handler to the slimstore
loggers and leaves the root logger and every other logger untouched.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

if TYPE_CHECKING:
    from slimstore_core.config.settings import Settings

LIBRARY_LOGGERS = ("slimstore", "slimstore_core", "slimstore_infra")


class _StoreLogHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Handler owned by configure_logging, replaced when it runs again."""


def configure_logging(settings: Settings, stream: IO[str] | None = None) -> None:
    """Render slimstore events as console text or JSON lines.

    ``stream`` defaults to stderr. Calling again swaps the handler instead of
    stacking a second one.
    """
    shared_processors: list[structlog.types.Processor] = [
        merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    level = logging.getLevelNamesMapping().get(settings.log_level.upper(), logging.INFO)

    # Module loggers are lazy proxies, so leave caching off to let a later
    # call reconfigure them.
    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    handler = _StoreLogHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=shared_processors,
        )
    )

    for name in LIBRARY_LOGGERS:
        lib_logger = logging.getLogger(name)
        for old in [h for h in lib_logger.handlers if isinstance(h, _StoreLogHandler)]:
            lib_logger.removeHandler(old)
        lib_logger.addHandler(handler)
        lib_logger.setLevel(level)
        lib_logger.propagate = False


def bind_store_context(settings: Settings) -> None:
    """Tag subsequent log entries with the backend and default prefix."""
    bind_contextvars(backend=settings.storage_backend, prefix=settings.default_prefix)


def clear_store_context() -> None:
    """Clear all bound context variables."""
    clear_contextvars()
