"""
Static logging entry point

``Log`` holds the process-wide Logger. It is set once at application
start with ``Log.enable_logging``; library code should receive a Logger
explicitly instead of reaching for this accessor.

Example:
    Log.enable_logging(logger)
    Log.warn("disk low")
    Log.debug("cache miss", LogCategory("cache"))
"""

from __future__ import annotations

import sys
import threading
import warnings
from typing import Optional, Tuple

from logfacade.core.log_category import LogCategory
from logfacade.core.log_entry import LogEntry
from logfacade.core.log_level import LogLevel
from logfacade.core.logger import Logger


def _call_site(depth: int) -> Tuple[Optional[str], Optional[int], Optional[str]]:
    """Function name, line and file of the frame ``depth`` levels up."""
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return None, None, None
    code = frame.f_code
    return code.co_name, frame.f_lineno, code.co_filename


class Log:
    """Process-wide logging facade with one function per level."""

    _logger: Optional[Logger] = None
    _logger_set: bool = False
    _lock = threading.Lock()

    @classmethod
    def enable_logging(cls, logger: Optional[Logger]) -> None:
        """
        Set the Logger used by the level functions.

        Only the first call has an effect; later calls emit a
        RuntimeWarning and are ignored.
        """
        with cls._lock:
            if cls._logger_set:
                warnings.warn(
                    "Log.enable_logging() was already called; ignoring",
                    RuntimeWarning,
                    stacklevel=2,
                )
                return
            cls._logger_set = True
            cls._logger = logger

    @classmethod
    def logger(cls) -> Optional[Logger]:
        return cls._logger

    @classmethod
    def reset(cls) -> None:
        """
        Forget the current Logger. For testing only.
        """
        with cls._lock:
            cls._logger = None
            cls._logger_set = False

    @classmethod
    def is_logging(cls, level: LogLevel, category: LogCategory = LogCategory.GENERAL) -> bool:
        """True if an entry at ``level`` would reach any handler."""
        logger = cls._logger
        return logger is not None and logger.is_logging(level, category)

    @classmethod
    def log(
        cls,
        level: LogLevel,
        message: str,
        category: LogCategory = LogCategory.GENERAL,
        function: Optional[str] = None,
        line: Optional[int] = None,
        file: Optional[str] = None,
        _depth: int = 1,
    ) -> None:
        """
        Log ``message`` at ``level``.

        Call-site fields left as None are taken from the caller's frame.
        Never raises because of formatting or writing.
        """
        logger = cls._logger
        if logger is None:
            return
        if isinstance(category, str):
            category = LogCategory(category)
        if not logger.is_logging(level, category):
            return
        if function is None and line is None and file is None:
            function, line, file = _call_site(_depth)
        logger.log(LogEntry(
            message=message,
            level=level,
            category=category,
            function_name=function,
            file_name=file,
            line_number=line,
        ))

    @classmethod
    def critical(cls, message: str, category: LogCategory = LogCategory.GENERAL,
                 function: Optional[str] = None, line: Optional[int] = None,
                 file: Optional[str] = None) -> None:
        """Log critical message."""
        cls.log(LogLevel.CRITICAL, message, category, function, line, file, _depth=2)

    @classmethod
    def error(cls, message: str, category: LogCategory = LogCategory.GENERAL,
              function: Optional[str] = None, line: Optional[int] = None,
              file: Optional[str] = None) -> None:
        """Log error message."""
        cls.log(LogLevel.ERROR, message, category, function, line, file, _depth=2)

    @classmethod
    def warn(cls, message: str, category: LogCategory = LogCategory.GENERAL,
             function: Optional[str] = None, line: Optional[int] = None,
             file: Optional[str] = None) -> None:
        """Log warning message."""
        cls.log(LogLevel.WARN, message, category, function, line, file, _depth=2)

    @classmethod
    def notice(cls, message: str, category: LogCategory = LogCategory.GENERAL,
               function: Optional[str] = None, line: Optional[int] = None,
               file: Optional[str] = None) -> None:
        """Log notice message."""
        cls.log(LogLevel.NOTICE, message, category, function, line, file, _depth=2)

    @classmethod
    def info(cls, message: str, category: LogCategory = LogCategory.GENERAL,
             function: Optional[str] = None, line: Optional[int] = None,
             file: Optional[str] = None) -> None:
        """Log info message."""
        cls.log(LogLevel.INFO, message, category, function, line, file, _depth=2)

    @classmethod
    def debug(cls, message: str, category: LogCategory = LogCategory.GENERAL,
              function: Optional[str] = None, line: Optional[int] = None,
              file: Optional[str] = None) -> None:
        """Log debug message."""
        cls.log(LogLevel.DEBUG, message, category, function, line, file, _depth=2)

    @classmethod
    def trace(cls, message: str, category: LogCategory = LogCategory.GENERAL,
              function: Optional[str] = None, line: Optional[int] = None,
              file: Optional[str] = None) -> None:
        """Log trace message."""
        cls.log(LogLevel.TRACE, message, category, function, line, file, _depth=2)
