"""
Tests for log formatting and handler setup.
"""

import logging
from logging.handlers import RotatingFileHandler

from services.logging import FORMAT, ContextFormatter, setup_logging


def _record(msg, **extra):
    logger = logging.getLogger("services.webhook")
    return logger.makeRecord(logger.name, logging.ERROR, __file__, 1, msg, (), None, extra=extra)


def test_extra_context_appended():
    line = ContextFormatter(fmt=FORMAT).format(_record("webhook_error", status=500, body="server error"))
    assert line.endswith("| webhook_error | body='server error' status=500")


def test_plain_message_unchanged():
    line = ContextFormatter(fmt=FORMAT).format(_record("health_check"))
    assert line.endswith("| services.webhook | health_check")


def test_setup_logging_is_idempotent(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    root = logging.getLogger()
    saved = root.handlers[:]
    root.handlers = []
    try:
        setup_logging()
        setup_logging()
        file_handlers = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
        console = [h for h in root.handlers if type(h) is logging.StreamHandler]
        assert len(file_handlers) == 1
        assert len(console) == 1
        assert (tmp_path / "app.log").exists()
    finally:
        for h in root.handlers:
            h.close()
        root.handlers = saved
