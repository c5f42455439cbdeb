"""
Log level enumeration

Levels are ordered by decreasing severity: a lower value is more severe.
"""

import logging
from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    An entry is enabled when its level is less than or equal to the
    configured threshold.
    """

    CRITICAL = 1    # Unrecoverable failures
    ERROR = 2       # Serious errors
    WARN = 3        # Possible incorrect behavior
    NOTICE = 4      # Normal but significant events
    INFO = 5        # Informational messages
    DEBUG = 6       # Only relevant while debugging
    TRACE = 7       # Most verbose, detailed tracing

    def __str__(self) -> str:
        """String representation of log level."""
        return self.label

    @property
    def label(self) -> str:
        """Fixed display label for this level."""
        return LEVEL_NAMES[self]

    @property
    def stdlib_level(self) -> int:
        """Equivalent numeric level of the standard ``logging`` package."""
        return _TO_STDLIB[self]

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.upper()
        if level_str == "WARNING":
            level_str = "WARN"
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid log level: {level_str}")

    @classmethod
    def from_stdlib(cls, levelno: int) -> "LogLevel":
        """
        Map a standard ``logging`` numeric level onto LogLevel.

        Levels strictly between INFO and WARNING (custom levels such as 25)
        become NOTICE; anything below DEBUG becomes TRACE.
        """
        if levelno >= logging.CRITICAL:
            return cls.CRITICAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno > logging.INFO:
            return cls.NOTICE
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE


# Mapping from log level to display labels
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.CRITICAL: "CRITICAL",
    LogLevel.ERROR: "ERROR",
    LogLevel.WARN: "WARN",
    LogLevel.NOTICE: "NOTICE",
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.TRACE: "TRACE",
}

# Decorated labels, usable as custom level descriptions
LEVEL_EMOJI_LABELS: Dict[LogLevel, str] = {
    LogLevel.CRITICAL: "‼️ CRITICAL",
    LogLevel.ERROR: "🛑 ERROR",
    LogLevel.WARN: "⚠️ WARN",
    LogLevel.NOTICE: "📝 NOTICE",
    LogLevel.INFO: "ℹ️ INFO",
    LogLevel.DEBUG: "🐞 DEBUG",
    LogLevel.TRACE: "🧵 TRACE",
}

_TO_STDLIB: Dict[LogLevel, int] = {
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.NOTICE: logging.INFO + 5,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: 5,
}
