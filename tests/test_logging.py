"""Tests for the logging setup."""

import logging
from contextlib import contextmanager
from logging.handlers import TimedRotatingFileHandler

from city_info_api.app.core.logging_config import setup_logging


@contextmanager
def bare_root_logger():
    """Detach the root handlers so ``setup_logging`` configures from scratch."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


class TestSetupLogging:

    def test_log_file_gets_daily_rotating_handler(self, tmp_path):
        logfile = tmp_path / "logs" / "cityinfo.txt"

        with bare_root_logger() as root:
            setup_logging("debug", str(logfile), backup_count=3)
            file_handlers = [h for h in root.handlers if isinstance(h, TimedRotatingFileHandler)]
            level = root.level
            logging.getLogger("city_info_api.test").info("written to file")
            file_handlers[0].flush()

        assert len(file_handlers) == 1
        assert file_handlers[0].when == "MIDNIGHT"
        assert file_handlers[0].backupCount == 3
        assert level == logging.DEBUG
        assert "[INFO] city_info_api.test: written to file" in logfile.read_text(encoding="utf-8")

    def test_console_only_without_log_file(self):
        with bare_root_logger() as root:
            setup_logging("warning")
            handlers = root.handlers[:]
            level = root.level

        assert len(handlers) == 1
        assert not isinstance(handlers[0], TimedRotatingFileHandler)
        assert level == logging.WARNING

    def test_configures_only_once(self, tmp_path):
        with bare_root_logger() as root:
            setup_logging("info")
            setup_logging("info", str(tmp_path / "second.txt"))
            handler_count = len(root.handlers)

        assert handler_count == 1
        assert not (tmp_path / "second.txt").exists()
