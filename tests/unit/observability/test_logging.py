"""Tests for observability/logging.py."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Generator
from pathlib import Path
from types import SimpleNamespace

import pytest
import structlog

from slimstore.observability.logging import (
    LIBRARY_LOGGERS,
    bind_store_context,
    clear_store_context,
    configure_logging,
)
from slimstore.store import SlimStore
from tests.mocks.mock_settings import make_real_settings


def _make_settings(**overrides: object) -> object:
    """Create a minimal settings object."""
    defaults: dict[str, object] = {"log_format": "console", "log_level": "INFO"}
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


def _json_lines(stream: io.StringIO) -> list[dict[str, object]]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Undo library logging configuration after each test."""
    yield
    structlog.reset_defaults()
    clear_store_context()
    for name in LIBRARY_LOGGERS:
        lib_logger = logging.getLogger(name)
        lib_logger.handlers.clear()
        lib_logger.setLevel(logging.NOTSET)
        lib_logger.propagate = True


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_mode(self) -> None:
        """JSON mode renders one object per event with level and logger name."""
        stream = io.StringIO()
        configure_logging(_make_settings(log_format="json"), stream)  # type: ignore[arg-type]

        structlog.get_logger("slimstore.store").info("flush_complete", removed=2)

        [line] = _json_lines(stream)
        assert line["event"] == "flush_complete"
        assert line["removed"] == 2
        assert line["level"] == "info"
        assert line["logger"] == "slimstore.store"

    def test_console_mode(self) -> None:
        """Console mode writes readable text."""
        stream = io.StringIO()
        configure_logging(_make_settings(), stream)  # type: ignore[arg-type]

        structlog.get_logger("slimstore.guard").warning("storage_unavailable", error="denied")

        output = stream.getvalue()
        assert "storage_unavailable" in output
        assert "error=denied" in output

    def test_leaves_root_logger_alone(self) -> None:
        """Only the library loggers get a handler; they stop propagating."""
        root = logging.getLogger()
        handlers_before = list(root.handlers)
        level_before = root.level

        configure_logging(_make_settings(), io.StringIO())  # type: ignore[arg-type]

        assert root.handlers == handlers_before
        assert root.level == level_before
        for name in LIBRARY_LOGGERS:
            assert len(logging.getLogger(name).handlers) == 1
            assert logging.getLogger(name).propagate is False

    def test_reconfigure_replaces_handler(self) -> None:
        """A second call swaps the stream instead of adding a handler."""
        first = io.StringIO()
        second = io.StringIO()
        configure_logging(_make_settings(log_format="json"), first)  # type: ignore[arg-type]
        configure_logging(_make_settings(log_format="json"), second)  # type: ignore[arg-type]

        structlog.get_logger("slimstore.store").info("flush_complete", removed=0)

        assert len(logging.getLogger("slimstore").handlers) == 1
        assert first.getvalue() == ""
        assert len(_json_lines(second)) == 1

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("unknown", logging.INFO),
        ],
    )
    def test_level(self, name: str, expected: int) -> None:
        """Level names are case-insensitive; unknown names fall back to INFO."""
        configure_logging(_make_settings(log_level=name), io.StringIO())  # type: ignore[arg-type]
        assert logging.getLogger("slimstore").level == expected

    def test_events_below_level_dropped(self) -> None:
        """Events under the configured level are not written."""
        stream = io.StringIO()
        configure_logging(
            _make_settings(log_format="json", log_level="WARNING"),  # type: ignore[arg-type]
            stream,
        )

        structlog.get_logger("slimstore.store").info("flush_complete", removed=1)
        structlog.get_logger("slimstore.store").warning("flush_failed", error="boom")

        assert [line["event"] for line in _json_lines(stream)] == ["flush_failed"]


@pytest.mark.unit
class TestStoreContext:
    """Tests for the backend/prefix context bound by SlimStore.from_settings."""

    def test_bind_store_context(self, tmp_path: Path) -> None:
        """Bound values appear on later events."""
        stream = io.StringIO()
        configure_logging(_make_settings(log_format="json"), stream)  # type: ignore[arg-type]

        bind_store_context(make_real_settings(tmp_path, default_prefix="app:"))
        structlog.get_logger("slimstore.sweep").info("flush_complete", removed=0)

        [line] = _json_lines(stream)
        assert line["backend"] == "memory"
        assert line["prefix"] == "app:"

    def test_from_settings_tags_store_events(self, tmp_path: Path) -> None:
        """Events from a settings-built store carry its backend and prefix."""
        stream = io.StringIO()
        configure_logging(_make_settings(log_format="json"), stream)  # type: ignore[arg-type]

        store = SlimStore.from_settings(make_real_settings(tmp_path, default_prefix="app:"))
        assert store.flush() is True

        lines = [line for line in _json_lines(stream) if line["event"] == "flush_complete"]
        assert lines
        for line in lines:
            assert line["logger"] == "slimstore.store"
            assert line["backend"] == "memory"
            assert line["prefix"] == "app:"

    def test_clear_store_context(self, tmp_path: Path) -> None:
        """Cleared context no longer shows up."""
        stream = io.StringIO()
        configure_logging(_make_settings(log_format="json"), stream)  # type: ignore[arg-type]

        bind_store_context(make_real_settings(tmp_path))
        clear_store_context()
        structlog.get_logger("slimstore.store").info("flush_complete", removed=0)

        [line] = _json_lines(stream)
        assert "backend" not in line
