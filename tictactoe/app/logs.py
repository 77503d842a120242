from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from tictactoe.app.config import LOG_BACKUP_COUNT, LOG_MAX_BYTES

LOGGER_NAME = "tictactoe"


def init_logger(log_file: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger.

    Without a log file only a NullHandler is attached so the terminal UI
    stays clean.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))
    # Fresh handlers on every call; stale file handlers can block writes.
    shutdown_logger(logger)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
            delay=True,
        )
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    logger.propagate = False
    return logger


def shutdown_logger(logger: logging.Logger) -> None:
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.flush()
        h.close()
