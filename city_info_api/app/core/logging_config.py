"""
Logging configuration for the City Info API.

Everything is logged through the root logger: always to the console,
and to a file rotated at midnight when ``LOG_FILE`` is configured.
Rotated files keep a date suffix, e.g. ``cityinfo.txt.2024-05-01``.
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _rotating_file_handler(logfile: str, backup_count: int) -> TimedRotatingFileHandler:
    log_path = Path(logfile).resolve()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return TimedRotatingFileHandler(
        log_path,
        when="midnight",
        backupCount=backup_count,
        encoding="utf-8",
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, backup_count: int = 7) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        File for the daily rotating handler.  Parent directories are
        created.  ``None`` keeps logging on the console only.
    backup_count : int
        Number of rotated files to keep; ``0`` keeps all of them.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by a previous create_app() or by the
        # server process.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(_rotating_file_handler(logfile, backup_count))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
