"""Tests for the standard logging bridge"""

import gc
import itertools
import logging
import sys

import pytest

from logfacade import (
    CategoryLogConfiguration,
    LogCategory,
    LogConfiguration,
    LogEntry,
    Logger,
    LogLevel,
)
from logfacade.handlers import BaseHandler, StdlibBridgeHandler, install_bridge

_names = itertools.count()


class MockHandler(BaseHandler):
    """Handler recording every entry it receives."""

    def __init__(self, log_everything=False):
        super().__init__(log_everything=log_everything)
        self.entries = []

    def append(self, entry: LogEntry) -> None:
        self.entries.append(entry)


@pytest.fixture
def stdlib_logger():
    """An isolated stdlib logger that does not propagate to root."""
    std = logging.getLogger(f"logfacade-test-{next(_names)}")
    std.propagate = False
    yield std
    for handler in list(std.handlers):
        std.removeHandler(handler)


class TestLevelMapping:
    """Test stdlib level mapping."""

    @pytest.mark.parametrize("levelno, expected", [
        (logging.CRITICAL, LogLevel.CRITICAL),
        (logging.ERROR, LogLevel.ERROR),
        (logging.WARNING, LogLevel.WARN),
        (25, LogLevel.NOTICE),
        (logging.INFO, LogLevel.INFO),
        (logging.DEBUG, LogLevel.DEBUG),
        (5, LogLevel.TRACE),
    ])
    def test_from_stdlib(self, levelno, expected):
        assert LogLevel.from_stdlib(levelno) == expected


class TestStdlibBridgeHandler:
    """Test forwarding stdlib records."""

    def test_forwards_record(self, stdlib_logger):
        logger = Logger(LogConfiguration(level=LogLevel.TRACE))
        handler = MockHandler()
        logger.append(handler)
        stdlib_logger.setLevel(logging.DEBUG)
        stdlib_logger.addHandler(StdlibBridgeHandler(logger))

        line = sys._getframe().f_lineno + 1
        stdlib_logger.warning("disk %s", "low", extra={"category": "io"})

        entry = handler.entries[0]
        assert entry.message == "disk low"
        assert entry.level == LogLevel.WARN
        assert entry.category == LogCategory("io")
        assert entry.function_name == "test_forwards_record"
        assert entry.line_number == line
        assert entry.file_name == __file__
        assert entry.extra["logger_name"] == stdlib_logger.name

    def test_default_category(self, stdlib_logger):
        logger = Logger(LogConfiguration(level=LogLevel.TRACE))
        handler = MockHandler()
        logger.append(handler)
        stdlib_logger.setLevel(logging.DEBUG)
        stdlib_logger.addHandler(StdlibBridgeHandler(logger))

        stdlib_logger.info("hello")

        assert handler.entries[0].category == LogCategory.GENERAL

    def test_configuration_still_filters(self, stdlib_logger):
        logger = Logger(LogConfiguration(level=LogLevel.WARN))
        handler = MockHandler()
        logger.append(handler)
        stdlib_logger.setLevel(logging.DEBUG)
        stdlib_logger.addHandler(StdlibBridgeHandler(logger))

        stdlib_logger.debug("hidden")
        stdlib_logger.error("shown")

        assert [e.message for e in handler.entries] == ["shown"]

    def test_collected_logger_is_ignored(self, stdlib_logger):
        logger = Logger(LogConfiguration(level=LogLevel.TRACE))
        bridge = StdlibBridgeHandler(logger)
        stdlib_logger.addHandler(bridge)
        logger.shutdown()
        del logger
        gc.collect()

        stdlib_logger.error("nobody listens")

        assert bridge.logger is None


class TestInstallBridge:
    """Test the bridge factory."""

    def test_install_sets_level(self, stdlib_logger):
        logger = Logger(LogConfiguration(level=LogLevel.INFO))
        bridge = install_bridge(logger, stdlib_logger.name)

        assert bridge in stdlib_logger.handlers
        assert stdlib_logger.level == logging.INFO

    def test_install_uses_most_verbose_category(self, stdlib_logger):
        config = CategoryLogConfiguration(level=LogLevel.WARN, category_levels={"db": LogLevel.DEBUG})
        install_bridge(Logger(config), stdlib_logger.name)
        assert stdlib_logger.level == logging.DEBUG

    def test_install_with_log_everything(self, stdlib_logger):
        logger = Logger(LogConfiguration(level=LogLevel.ERROR))
        handler = MockHandler(log_everything=True)
        logger.append(handler)

        install_bridge(logger, stdlib_logger.name)
        stdlib_logger.debug("everything")

        assert [e.message for e in handler.entries] == ["everything"]

    def test_install_without_sync(self, stdlib_logger):
        stdlib_logger.setLevel(logging.CRITICAL)
        install_bridge(Logger(), stdlib_logger.name, sync_level=False)
        assert stdlib_logger.level == logging.CRITICAL
