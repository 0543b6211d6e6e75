"""Logging setup."""

import logging
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(name)s:%(lineno)d %(message)s"


def log_filename(now: datetime) -> str:
    """Name of the log file for a session started at now."""
    return f"termwatch_log_{now:%Y%m%d_%H%M%S}.log"


def setup_logging(log_dir: Path | None) -> Path | None:
    """Route the package logger to a timestamped file, or silence it.

    The terminal belongs to the UI, so nothing is ever logged to stderr.
    """
    logger = logging.getLogger("termwatch")
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_dir is None:
        logger.addHandler(logging.NullHandler())
        return None

    log_dir.mkdir(parents=True, exist_ok=True)
    path = log_dir / log_filename(datetime.now())
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return path
