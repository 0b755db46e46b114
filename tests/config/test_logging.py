"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Generator

import pytest
import structlog

from notelinks.config.logging import configure_logging, resolve_level


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    nl = logging.getLogger("notelinks")
    nl_level = nl.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    nl.setLevel(nl_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("notelinks").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("notelinks").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("notelinks.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "notelinks.test"
        assert "timestamp" in parsed

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("notelinks.test").debug("hidden")
        assert capfd.readouterr().err == ""

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("notelinks.services").debug("plain stdlib record")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "plain stdlib record"
        assert parsed["level"] == "debug"

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_quiet_raises_to_error(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(quiet=True, log_json=True)
        assert logging.getLogger("notelinks").level == logging.ERROR
        log = structlog.get_logger("notelinks.test")
        log.warning("dropped")
        log.error("kept")
        lines = capfd.readouterr().err.strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["kept"]

    def test_logs_never_reach_stdout(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        structlog.get_logger("notelinks.test").info("to stderr")
        captured = capfd.readouterr()
        assert captured.out == ""
        assert "to stderr" in captured.err

    def test_console_mode_has_no_timestamp(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        structlog.get_logger("notelinks.test").warning("plain")
        err = capfd.readouterr().err
        assert "plain" in err
        assert re.search(r"\d{4}-\d{2}-\d{2}", err) is None


class TestResolveLevel:
    def test_default(self) -> None:
        assert resolve_level() == logging.WARNING

    def test_verbose_wins_over_quiet(self) -> None:
        assert resolve_level(verbose=True, quiet=True) == logging.DEBUG

    def test_quiet(self) -> None:
        assert resolve_level(quiet=True) == logging.ERROR
