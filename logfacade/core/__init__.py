"""
Core module for the logging facade

This module contains the fundamental classes:
- Logger: Dispatcher owning the configuration and the handlers
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LogCategory: Category tag
- LogConfiguration: Level/category policy and level display strings
"""

from logfacade.core.format_token import DEFAULT_LOG_FORMAT, FormatToken
from logfacade.core.log_category import LogCategory
from logfacade.core.log_config import CategoryLogConfiguration, LogConfiguration
from logfacade.core.log_entry import EntryType, LogEntry
from logfacade.core.log_level import LogLevel
from logfacade.core.logger import Logger
from logfacade.core.logger_builder import LoggerBuilder
from logfacade.core.styled_text import StyledText

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "EntryType",
    "LogLevel",
    "LogCategory",
    "LogConfiguration",
    "CategoryLogConfiguration",
    "FormatToken",
    "DEFAULT_LOG_FORMAT",
    "StyledText",
]
