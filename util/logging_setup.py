"""Logging for the terminal UI.

The renderer owns stdout and the line reader owns stdin, so logs go to a file
only. Call ``setup_logging`` once, before the session starts.
"""

import logging
from pathlib import Path
from typing import Optional

from config import get_log_file, get_log_level

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_file: Optional[Path] = None, level: Optional[int] = None) -> logging.Handler:
    """Attach a file handler to the ``taskman`` logger and return it.

    Falls back to a NullHandler when the log file cannot be opened.
    """
    log_file = Path(log_file) if log_file is not None else get_log_file()
    level = level if level is not None else get_log_level()

    logger = logging.getLogger("taskman")
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler: logging.Handler
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_file), encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(level)
    logger.addHandler(handler)
    logging.captureWarnings(True)
    return handler


__all__ = ["setup_logging", "LOG_FORMAT", "DATE_FORMAT"]
