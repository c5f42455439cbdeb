"""
Logger - dispatches log entries to handlers
"""

from __future__ import annotations

import atexit
import sys
import threading
import warnings
from typing import TYPE_CHECKING, List, Optional, Tuple

from logfacade.core.log_category import LogCategory
from logfacade.core.log_config import LogConfiguration
from logfacade.core.log_entry import LogEntry
from logfacade.core.log_level import LogLevel

if TYPE_CHECKING:
    from logfacade.handlers.base_handler import BaseHandler


class Logger:
    """
    Owns the configuration and the handlers, filters entries once and
    forwards them to every handler in registration order.

    Thread Safety:
        ``append``, ``remove`` and ``log`` share one lock for the handler
        list only. Delivery runs on a snapshot outside the lock, so a slow
        handler never blocks registration or other logging threads.

    Example:
        logger = Logger(LogConfiguration(level=LogLevel.INFO))
        logger.append(StdErrHandler(logger.config))
        logger.log_application_start()
        logger.log(LogEntry("ready", LogLevel.INFO))
    """

    def __init__(self, config: Optional[LogConfiguration] = None):
        self._config = config or LogConfiguration.default()
        self._handlers: List["BaseHandler"] = []
        self._lock = threading.RLock()
        self._started = False
        self._shut_down = False

        atexit.register(self.shutdown)

    @property
    def config(self) -> LogConfiguration:
        return self._config

    @property
    def started(self) -> bool:
        return self._started

    @property
    def handlers(self) -> Tuple["BaseHandler", ...]:
        """Snapshot of the registered handlers in delivery order."""
        with self._lock:
            return tuple(self._handlers)

    @property
    def log_everything(self) -> bool:
        """True if any registered handler wants unfiltered delivery."""
        with self._lock:
            return any(handler.log_everything for handler in self._handlers)

    def append(self, handler: "BaseHandler") -> None:
        """
        Register a handler.

        If the application start was already logged, the handler receives
        its start marker right away.
        """
        with self._lock:
            self._handlers.append(handler)
            started = self._started
        if started:
            self._deliver(handler, LogEntry.start_marker())

    def remove(self, handler: "BaseHandler", close: bool = False) -> bool:
        """
        Deregister a handler.

        Args:
            handler: Handler to deregister
            close: Also close the handler, flushing anything it still holds

        Returns:
            True if the handler was registered, False otherwise
        """
        removed = None
        with self._lock:
            for i, registered in enumerate(self._handlers):
                if registered.equals(handler):
                    removed = self._handlers.pop(i)
                    break
        if removed is None:
            return False
        if close:
            try:
                removed.close()
            except Exception as e:
                print(f"Handler close error: {e}", file=sys.stderr)
        return True

    def log_application_start(self) -> None:
        """
        Send one start marker to every registered handler.

        May be called once; later calls only emit a RuntimeWarning.
        """
        with self._lock:
            if self._started:
                warnings.warn(
                    "log_application_start() was already called",
                    RuntimeWarning,
                    stacklevel=2,
                )
                return
            self._started = True
            handlers = list(self._handlers)
        for handler in handlers:
            self._deliver(handler, LogEntry.start_marker())

    def is_logging(self, level: LogLevel, category: LogCategory = LogCategory.GENERAL) -> bool:
        """True if an entry at ``level`` in ``category`` would reach any handler."""
        if self._config.logging_enabled(level, category):
            return True
        return self.log_everything

    def log(self, entry: LogEntry) -> None:
        """
        Dispatch an entry.

        The configuration is consulted once; the entry goes to every handler
        when that check passes, and otherwise only to handlers that set
        ``log_everything``.
        """
        enabled = self._config.logging_enabled(entry.level, entry.category)
        with self._lock:
            handlers = list(self._handlers)
        for handler in handlers:
            if enabled or handler.log_everything:
                self._deliver(handler, entry)

    def _deliver(self, handler: "BaseHandler", entry: LogEntry) -> None:
        try:
            handler.append(entry)
        except Exception as e:
            print(f"Handler error: {e}", file=sys.stderr)

    def flush(self) -> None:
        """Flush all handlers."""
        for handler in self.handlers:
            try:
                handler.flush()
            except Exception as e:
                print(f"Handler flush error: {e}", file=sys.stderr)

    def shutdown(self) -> None:
        """Close every handler. Queued entries are written first."""
        with self._lock:
            if self._shut_down:
                return
            self._shut_down = True
            handlers = list(self._handlers)

        for handler in handlers:
            try:
                handler.close()
            except Exception as e:
                print(f"Handler close error: {e}", file=sys.stderr)

        atexit.unregister(self.shutdown)
