"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Log Facade - leveled, categorized logging with token formats and
asynchronous handlers
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from logfacade.core.logger import Logger
from logfacade.core.logger_builder import LoggerBuilder
from logfacade.core.log_category import LogCategory
from logfacade.core.log_config import CategoryLogConfiguration, LogConfiguration
from logfacade.core.log_entry import EntryType, LogEntry
from logfacade.core.log_level import LogLevel
from logfacade.core.styled_text import StyledText
from logfacade.log import Log

# Import submodules (not all classes by default)
from logfacade import formatters
from logfacade import handlers

__all__ = [
    "Log",
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "EntryType",
    "LogLevel",
    "LogCategory",
    "LogConfiguration",
    "CategoryLogConfiguration",
    "StyledText",
    "formatters",
    "handlers",
]
