"""Tests for structured logging configuration."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from gamemstr.core.logging import (
    add_app_context,
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
    reset_logging,
)


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Restore structlog defaults and close any log file after each test."""
    yield
    clear_context()
    reset_logging()


class TestAddAppContext:
    """Tests for the app-context processor."""

    def test_adds_app_name(self) -> None:
        """Test the processor tags events with the library name."""
        event = add_app_context(None, "info", {"event": "hello"})
        assert event["app"] == "gamemstr"
        assert event["event"] == "hello"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_logging(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test console output includes the event and its fields."""
        configure_logging(level="DEBUG")
        get_logger("test").info("Entity constructed", entity_type="World")

        captured = capsys.readouterr()
        assert "Entity constructed" in captured.out
        assert "World" in captured.out

    def test_json_logging(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test JSON output is emitted when requested."""
        configure_logging(level="INFO", json_format=True)
        get_logger("test").info("Record decoded", model="Spell")

        captured = capsys.readouterr()
        assert '"event": "Record decoded"' in captured.out
        assert '"app": "gamemstr"' in captured.out

    def test_level_filters_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test events below the configured level are dropped."""
        configure_logging(level="WARNING", json_format=True)
        logger = get_logger("test")
        logger.info("Entity constructed")
        logger.warning("Record decode failed")

        out = capsys.readouterr().out
        assert "Record decode failed" in out
        assert "Entity constructed" not in out

    def test_log_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test events are written to the log file instead of stdout."""
        log_file = tmp_path / "gamemstr.log"
        configure_logging(level="INFO", log_file=log_file)
        get_logger("test").info("Record decoded", model="Spell")
        reset_logging()

        content = log_file.read_text(encoding="utf-8")
        assert "Record decoded" in content
        assert "Spell" in content
        assert "\x1b[" not in content
        assert capsys.readouterr().out == ""

    def test_reconfigure_appends(self, tmp_path: Path) -> None:
        """Test reconfiguring with the same file appends to it."""
        log_file = tmp_path / "gamemstr.log"
        configure_logging(level="INFO", json_format=True, log_file=log_file)
        get_logger("test").info("first")
        configure_logging(level="INFO", json_format=True, log_file=log_file)
        get_logger("test").info("second")
        reset_logging()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert '"event": "first"' in lines[0]
        assert '"event": "second"' in lines[1]

    def test_configure_from_settings(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test level and format are taken from library settings."""
        monkeypatch.setenv("GAMEMSTR_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("GAMEMSTR_JSON_LOGS", "true")
        configure_from_settings()
        logger = get_logger("test")
        logger.info("Entity constructed")
        logger.warning("Record decode failed")

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1
        assert '"event": "Record decode failed"' in lines[0]
        assert '"level": "warning"' in lines[0]


class TestContext:
    """Tests for context binding helpers."""

    def test_bind_and_clear(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test bound context appears on subsequent events until cleared."""
        configure_logging(level="INFO", json_format=True)
        bind_context(session_id="s-1")
        get_logger("test").info("bound")
        clear_context()
        get_logger("test").info("cleared")

        lines = capsys.readouterr().out.strip().splitlines()
        assert '"session_id": "s-1"' in lines[0]
        assert "session_id" not in lines[1]
