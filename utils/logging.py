# utils/logging.py

"""Logging helpers for Lesson Forge."""

from __future__ import annotations

import logging
import logging.handlers
import os

import structlog
from config import settings
from rich.logging import RichHandler

logger = structlog.get_logger(__name__)

# Third-party loggers that log every request at INFO.
QUIET_LOGGERS = ("httpx", "httpcore")

__all__ = ["resolve_log_file", "setup_logging"]


def resolve_log_file() -> str | None:
    """Return the log file path, placing relative names under ``LOG_DIR``."""
    if not settings.LOG_FILE:
        return None
    if os.path.isabs(settings.LOG_FILE):
        return settings.LOG_FILE
    return os.path.join(settings.LOG_DIR, settings.LOG_FILE)


def _plain_formatter() -> logging.Formatter:
    return logging.Formatter(settings.LOG_FORMAT, datefmt=settings.LOG_DATE_FORMAT)


def _file_handler(path: str) -> logging.Handler | None:
    try:
        log_dir = os.path.dirname(path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
    except Exception as e:  # pragma: no cover - path issues
        logger.error("Error setting up file logger: %s", e)
        return None
    handler.setFormatter(_plain_formatter())
    return handler


def _console_handler() -> logging.Handler:
    if not settings.ENABLE_RICH_OUTPUT:
        handler = logging.StreamHandler()
        handler.setFormatter(_plain_formatter())
        return handler
    return RichHandler(
        level=settings.LOG_LEVEL_STR,
        rich_tracebacks=True,
        show_path=False,
        markup=False,
    )


def setup_logging() -> None:
    """Route structlog through stdlib logging and install the CLI handlers.

    Replaces any handlers already on the root logger, so calling it twice
    does not duplicate output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.render_to_log_kwargs,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(settings.LOG_LEVEL_STR)

    log_path = resolve_log_file()
    if log_path:
        file_handler = _file_handler(log_path)
        if file_handler is not None:
            root_logger.addHandler(file_handler)
    root_logger.addHandler(_console_handler())

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug(
        "Lesson Forge logging configured.",
        log_level=settings.LOG_LEVEL_STR,
        log_file=log_path,
    )
