"""
Tests for logging set-up and the UI queue handler.
"""

import logging
from logging.handlers import RotatingFileHandler
from queue import Queue

import pytest

from smartnus.utils.logging_utils import (
    PACKAGE_LOGGER,
    QueueLogHandler,
    attach_queue_handler,
    configure_logging,
    detach_queue_handler,
)


def _managed_handlers(logger):
    return [h for h in logger.handlers if getattr(h, "_smartnus_managed", False)]


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    previous_level = logger.level
    previous_propagate = logger.propagate
    yield logger
    for handler in _managed_handlers(logger):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(previous_level)
    logger.propagate = previous_propagate


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_configure_when_no_file_then_console_only(self, package_logger):
        logger = configure_logging(logging.DEBUG)

        assert logger is package_logger
        assert logger.level == logging.DEBUG
        handlers = _managed_handlers(logger)
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_configure_when_root_has_handler_then_lines_not_repeated(self, package_logger):
        log_queue = Queue()
        root_handler = QueueLogHandler(log_queue)
        logging.getLogger().addHandler(root_handler)
        try:
            configure_logging()
            logging.getLogger("smartnus.session").info("starting")
        finally:
            logging.getLogger().removeHandler(root_handler)

        assert package_logger.propagate is False
        assert log_queue.empty()

    def test_configure_when_called_twice_then_handlers_replaced(self, package_logger):
        configure_logging()
        configure_logging(logging.WARNING)

        assert len(_managed_handlers(package_logger)) == 1
        assert package_logger.level == logging.WARNING

    def test_configure_when_log_file_then_writes_file(self, package_logger, tmp_path):
        log_file = tmp_path / "logs" / "smartnus.log"
        configure_logging(logging.INFO, log_file)

        logging.getLogger("smartnus.model.model").info("hello from the model")
        for handler in _managed_handlers(package_logger):
            handler.flush()

        assert any(isinstance(h, RotatingFileHandler) for h in package_logger.handlers)
        assert "hello from the model" in log_file.read_text(encoding="utf-8")


class TestQueueLogHandler:
    """Tests for the queue handler used by the UI console."""

    def test_emit_when_debug_record_then_mapped_to_info(self):
        log_queue = Queue()
        handler = QueueLogHandler(log_queue, level=logging.DEBUG)
        record = logging.LogRecord("smartnus", logging.DEBUG, __file__, 1, "details", None, None)

        handler.emit(record)

        assert log_queue.get_nowait() == ("details", "INFO")

    def test_attach_when_package_logs_then_queued(self, package_logger):
        package_logger.setLevel(logging.INFO)
        log_queue = Queue()
        handler = attach_queue_handler(log_queue)
        try:
            logging.getLogger("smartnus.logic.controller").warning("save failed")
        finally:
            detach_queue_handler(handler)

        assert log_queue.get_nowait() == ("save failed", "WARNING")
        assert handler not in package_logger.handlers
