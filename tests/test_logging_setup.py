# tests/test_logging_setup.py
import importlib
import logging
import logging as std_logging

from config import settings
from rich.logging import RichHandler

import utils.logging as logging_utils


def test_setup_logging_file_error(monkeypatch, caplog, tmp_path):
    caplog.set_level(logging.ERROR)
    root_logger = std_logging.getLogger()

    class Handlers(list):
        def clear(self):
            pass

    monkeypatch.setattr(root_logger, "handlers", Handlers([caplog.handler]))

    logging_utils.structlog.configure(
        logger_factory=logging_utils.structlog.stdlib.LoggerFactory()
    )
    importlib.reload(logging_utils)

    def raise_handler(*_a, **_k):
        raise OSError("fail")

    monkeypatch.setattr(std_logging.handlers, "RotatingFileHandler", raise_handler)
    monkeypatch.setattr(settings, "LOG_FILE", "temp.log")
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path))

    logging_utils.setup_logging()

    assert any(
        "Error setting up file logger" in record.message for record in caplog.records
    )


def test_setup_logging_console_handler(monkeypatch):
    root_logger = std_logging.getLogger()
    monkeypatch.setattr(root_logger, "handlers", [])
    monkeypatch.setattr(settings, "LOG_FILE", None)

    monkeypatch.setattr(settings, "ENABLE_RICH_OUTPUT", True)
    logging_utils.setup_logging()
    assert any(isinstance(h, RichHandler) for h in root_logger.handlers)
    assert std_logging.getLogger("httpx").level == logging.WARNING

    monkeypatch.setattr(settings, "ENABLE_RICH_OUTPUT", False)
    logging_utils.setup_logging()
    assert len(root_logger.handlers) == 1
    assert not isinstance(root_logger.handlers[0], RichHandler)


def test_setup_logging_writes_file(monkeypatch, tmp_path):
    root_logger = std_logging.getLogger()
    monkeypatch.setattr(root_logger, "handlers", [])
    log_path = tmp_path / "logs" / "lesson.log"
    monkeypatch.setattr(settings, "LOG_FILE", str(log_path))
    monkeypatch.setattr(settings, "ENABLE_RICH_OUTPUT", False)

    logging_utils.setup_logging()
    std_logging.getLogger("lesson.test").warning("written to file")
    for handler in root_logger.handlers:
        handler.flush()

    assert "written to file" in log_path.read_text(encoding="utf-8")
    for handler in list(root_logger.handlers):
        handler.close()


def test_relative_log_file_goes_under_log_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "LOG_FILE", "lesson.log")
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "run"))
    assert logging_utils.resolve_log_file() == str(tmp_path / "run" / "lesson.log")

    absolute = str(tmp_path / "abs.log")
    monkeypatch.setattr(settings, "LOG_FILE", absolute)
    assert logging_utils.resolve_log_file() == absolute

    monkeypatch.setattr(settings, "LOG_FILE", None)
    assert logging_utils.resolve_log_file() is None
