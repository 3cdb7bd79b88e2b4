"""
Logging Configuration
Console logging for the service and CLI, plus a rotating file log when
JSONFORGE_LOG_DIR is set.
"""

import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import LOG_DIR, LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5


def setup_logging(level: Optional[str] = None, log_dir: Optional[str] = LOG_DIR) -> logging.Logger:
    """
    Configure the `jsonforge` logger.

    Args:
        level: Level name; defaults to LOG_LEVEL
        log_dir: Directory for jsonforge.log; no file log when empty

    Returns:
        The configured package logger
    """
    numeric = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    logger = logging.getLogger("jsonforge")
    logger.setLevel(numeric)
    # Avoid duplicate handlers if setup_logging is called multiple times
    logger.handlers = []

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path / "jsonforge.log",
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(numeric)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.debug("File logging enabled in %s", path)

    return logger
