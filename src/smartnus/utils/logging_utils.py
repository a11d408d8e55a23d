"""
Logging utilities: console/file set-up and a queue handler that lets a
UI console display log lines.
"""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

PACKAGE_LOGGER = "smartnus"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


class QueueLogHandler(logging.Handler):
    """
    A logging handler that sends log records to a queue.

    Used to capture logs from the model and commands and display them in
    the UI console.
    """

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            level = record.levelname
            # Map DEBUG to INFO for UI display
            if level == "DEBUG":
                level = "INFO"
            self.log_queue.put((message, level))
        except Exception:
            self.handleError(record)


def attach_queue_handler(log_queue: Queue, logger_name: Optional[str] = PACKAGE_LOGGER) -> QueueLogHandler:
    """
    Attach a QueueLogHandler to the specified logger (or root logger if None).

    Args:
        log_queue: Queue to send log messages to.
        logger_name: Name of logger to attach to. None = root logger.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue)
    logger.addHandler(handler)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = PACKAGE_LOGGER) -> None:
    """
    Remove a QueueLogHandler from the specified logger.

    Args:
        handler: The handler to remove.
        logger_name: Name of logger to detach from. None = root logger.
    """
    logger = logging.getLogger(logger_name)
    logger.removeHandler(handler)


def configure_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure the package logger with a console handler and an optional
    rotating file handler.

    Safe to call more than once; handlers installed by a previous call are
    replaced. The package logger stops propagating to the root logger.

    Args:
        level: Minimum level for the package logger.
        log_file: If given, also write logs here (rotated at MAX_LOG_BYTES).

    Returns:
        The configured package logger.

    Example:
        >>> configure_logging(logging.DEBUG, get_log_dir() / "smartnus.log")
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_smartnus_managed", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    console._smartnus_managed = True  # type: ignore[attr-defined]
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        file_handler._smartnus_managed = True  # type: ignore[attr-defined]
        logger.addHandler(file_handler)

    logger.setLevel(level)
    # A root handler set up by the host would print every line a second time
    logger.propagate = False
    return logger
