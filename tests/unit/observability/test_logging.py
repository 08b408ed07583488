"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from tableview.config.settings import ViewSettings
from tableview.observability.logging import JsonLoggerFactory, get_logger


@pytest.fixture
def _restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_emits_events(self) -> None:
        with capture_logs() as logs:
            get_logger("tests").info("view.computed", total_count=3)
        assert logs == [{"event": "view.computed", "total_count": 3, "log_level": "info"}]

    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("tests", view="orders").debug("view.page_reset")
        assert logs[0]["view"] == "orders"


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


@pytest.mark.usefixtures("_restore_logging")
class TestJsonLoggerFactory:
    def test_sets_root_level_from_name(self) -> None:
        JsonLoggerFactory.configure("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_name_falls_back_to_info(self) -> None:
        JsonLoggerFactory.configure("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_configure_from_settings_uses_log_level(self) -> None:
        JsonLoggerFactory.configure_from_settings(ViewSettings(log_level="WARNING"))
        assert logging.getLogger().level == logging.WARNING

    def test_installs_single_handler(self) -> None:
        JsonLoggerFactory.configure(logging.WARNING)
        JsonLoggerFactory.configure(logging.WARNING)
        assert len(logging.getLogger().handlers) == 1

    def test_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        structlog.get_logger("tableview.tests").info("view.exported", row_count=2)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "view.exported"
        assert payload["row_count"] == 2
        assert payload["level"] == "info"
        assert payload["logger"] == "tableview.tests"
        assert "timestamp" in payload
