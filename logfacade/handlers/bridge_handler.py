"""
Bridge from the standard ``logging`` package

Lets this package act as the backend of ``logging``: records emitted on a
``logging.Logger`` are converted to LogEntry objects and dispatched.
"""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Optional

from logfacade.core.log_category import LogCategory
from logfacade.core.log_entry import LogEntry
from logfacade.core.log_level import LogLevel

if TYPE_CHECKING:
    from logfacade.core.logger import Logger

CATEGORY_KEY = "category"


class StdlibBridgeHandler(logging.Handler):
    """
    ``logging.Handler`` that forwards records to a Logger.

    The category is read from the record attribute ``category``, which
    callers set with ``extra={"category": "network"}``; records without
    one use the general category.

    Example:
        bridge = StdlibBridgeHandler(logger)
        logging.getLogger("app").addHandler(bridge)
        logging.getLogger("app").warning("disk low", extra={"category": "io"})
    """

    def __init__(self, logger: "Logger", level: int = logging.NOTSET):
        super().__init__(level)
        self._logger_ref = weakref.ref(logger)

    @property
    def logger(self) -> Optional["Logger"]:
        """The target Logger, or None once it has been garbage collected."""
        return self._logger_ref()

    def to_entry(self, record: logging.LogRecord) -> LogEntry:
        """Convert a stdlib record to a LogEntry."""
        category = getattr(record, CATEGORY_KEY, None) or LogCategory.GENERAL
        if not isinstance(category, LogCategory):
            category = LogCategory(str(category))
        return LogEntry(
            message=record.getMessage(),
            level=LogLevel.from_stdlib(record.levelno),
            category=category,
            function_name=record.funcName,
            file_name=record.pathname,
            line_number=record.lineno,
            thread_name=record.threadName or "",
            extra={"logger_name": record.name},
        )

    def emit(self, record: logging.LogRecord) -> None:
        target = self.logger
        if target is None:
            return
        try:
            target.log(self.to_entry(record))
        except Exception:
            self.handleError(record)


def install_bridge(
    logger: "Logger",
    name: Optional[str] = None,
    sync_level: bool = True,
) -> StdlibBridgeHandler:
    """
    Attach a bridge handler to ``logging.getLogger(name)``.

    Args:
        logger: Logger that receives the records
        name: stdlib logger name (default: the root logger)
        sync_level: Set the stdlib logger's level from the configuration
                    threshold so disabled records are dropped early

    Returns:
        The installed bridge handler
    """
    bridge = StdlibBridgeHandler(logger)
    stdlib_logger = logging.getLogger(name)
    stdlib_logger.addHandler(bridge)
    if sync_level:
        if logger.log_everything:
            threshold = LogLevel.TRACE
        else:
            # most verbose of the global and per-category thresholds
            thresholds = [logger.config.level]
            thresholds.extend(getattr(logger.config, "category_levels", {}).values())
            threshold = max(thresholds)
        stdlib_logger.setLevel(threshold.stdlib_level)
    return bridge
