"""Tests for the rotating TUI event log."""

import json
import logging

import pytest

from trassen_explorer.tui import logging as tui_logging


@pytest.fixture
def fresh_package_logger():
    logger = logging.getLogger(tui_logging._LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    logger.handlers = []
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers, level, logger.propagate = saved
    logger.setLevel(level)


def test_configure_attaches_single_file_handler(fresh_package_logger, tmp_path):
    path = tmp_path / "nested" / "events.log"

    tui_logging.configure_event_logging(level="DEBUG", file_path=str(path))
    tui_logging.configure_event_logging(level="INFO", file_path=str(path))

    assert len(fresh_package_logger.handlers) == 1
    assert fresh_package_logger.propagate is False
    assert fresh_package_logger.level == logging.INFO
    assert path.parent.is_dir()


def test_events_are_written_as_json(fresh_package_logger, tmp_path):
    path = tmp_path / "events.log"
    tui_logging.configure_event_logging(level="DEBUG", file_path=str(path))

    tui_logging.log_tui_event("view_changed", view="MapState")
    for handler in fresh_package_logger.handlers:
        handler.flush()

    record = json.loads(path.read_text(encoding="utf-8").strip().splitlines()[-1])
    assert record["event"] == "view_changed"
    assert record["view"] == "MapState"
    assert record["level"] == "info"


def test_default_path_falls_back_to_cwd(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(tui_logging.settings.logging, "file_path", None)

    assert tui_logging._resolve_log_path() == tmp_path / tui_logging.DEFAULT_LOG_FILE


def test_configured_path_comes_from_settings(tmp_path):
    assert tui_logging._resolve_log_path() == tmp_path / "events.log"
