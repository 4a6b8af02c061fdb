"""Structured TUI event logging."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

import structlog

from ..config.settings import settings

DEFAULT_LOG_FILE = "logs/tui-events.log"
MAX_LOG_BYTES = 5 * 1024 * 1024
BACKUP_LOG_FILES = 5
_LOGGER_NAME = "trassen_explorer"

structlog.configure(
    processors=[
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)
_logger = structlog.get_logger(f"{_LOGGER_NAME}.tui.events")


def _resolve_log_path(file_path: Optional[str] = None) -> Path:
    configured_path = file_path or settings.logging.file_path
    if configured_path:
        return Path(configured_path).expanduser()
    return Path.cwd() / DEFAULT_LOG_FILE


def configure_event_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
) -> logging.Logger:
    """
    Attach the rotating file handler to the package logger.

    Safe to call more than once; the handler is only added the first time.
    The package logger does not propagate, so nothing reaches the terminal
    the TUI is drawing on.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(getattr(logging, (level or settings.logging.level).upper(), logging.INFO))
    if logger.handlers:
        return logger

    log_path = _resolve_log_path(file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path,
        maxBytes=MAX_LOG_BYTES,
        backupCount=BACKUP_LOG_FILES,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def log_tui_event(event: str, **payload: Any) -> None:
    """Emit a structured TUI event."""
    _logger.info(event, **payload)
