"""Logger builder pattern"""

from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Tuple, Union

from logfacade.core.format_token import FormatToken
from logfacade.core.log_category import LogCategory
from logfacade.core.log_config import CategoryLogConfiguration, LevelDescription, LogConfiguration
from logfacade.core.log_level import LEVEL_EMOJI_LABELS, LogLevel
from logfacade.core.logger import Logger
from logfacade.formatters.json_formatter import JSONFormatter
from logfacade.handlers.base_handler import BaseHandler
from logfacade.handlers.file_handle_handler import FileHandler, StdErrHandler
from logfacade.handlers.text_stream_handler import TextStreamHandler


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    Example:
        logger = (LoggerBuilder()
            .with_level(LogLevel.INFO)
            .with_format("[(%level)] (%message)")
            .with_stderr()
            .with_file("logs/app.log")
            .with_application_start()
            .build())
    """

    def __init__(self):
        self._level = LogLevel.WARN
        self._level_descriptions: Dict[LogLevel, LevelDescription] = {}
        self._token_styles: Dict[FormatToken, Dict[str, Any]] = {}
        self._format_string: Optional[str] = None
        self._category_levels: Dict[LogCategory, LogLevel] = {}
        self._streams: List[Tuple[TextIO, bool]] = []
        self._stderr: Optional[bool] = None
        self._files: List[Tuple[Path, bool, bool]] = []
        self._custom_handlers: List[BaseHandler] = []
        self._start = False

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set the global threshold."""
        self._level = level
        return self

    def with_level_descriptions(self, descriptions: Dict[LogLevel, LevelDescription]) -> "LoggerBuilder":
        """Register custom display strings for levels."""
        self._level_descriptions.update(descriptions)
        return self

    def with_emoji_levels(self) -> "LoggerBuilder":
        """Use the decorated labels such as '🛑 ERROR' for every level."""
        return self.with_level_descriptions(LEVEL_EMOJI_LABELS)

    def with_format(self, format_string: str) -> "LoggerBuilder":
        """Set the format string used by handlers created here."""
        self._format_string = format_string
        return self

    def with_token_style(self, token: FormatToken, **style: Any) -> "LoggerBuilder":
        """Attach style attributes to a token for styled output."""
        self._token_styles.setdefault(token, {}).update(style)
        return self

    def with_category_level(self, category: Union[LogCategory, str], level: LogLevel) -> "LoggerBuilder":
        """
        Give a category its own threshold.

        Switches the built configuration to CategoryLogConfiguration.
        """
        if isinstance(category, str):
            category = LogCategory(category)
        self._category_levels[category] = level
        return self

    def with_stream(self, stream: TextIO, log_everything: bool = False) -> "LoggerBuilder":
        """Add a synchronous handler writing to ``stream``."""
        self._streams.append((stream, log_everything))
        return self

    def with_stderr(self, log_everything: bool = False) -> "LoggerBuilder":
        """Add an asynchronous standard error handler."""
        self._stderr = log_everything
        return self

    def with_file(self, filepath: Union[str, Path], json: bool = False, log_everything: bool = False) -> "LoggerBuilder":
        """Add an asynchronous file handler, optionally writing JSON lines."""
        self._files.append((Path(filepath), json, log_everything))
        return self

    def add_handler(self, handler: BaseHandler) -> "LoggerBuilder":
        """
        Add a custom handler.

        Args:
            handler: Handler instance

        Returns:
            Self for method chaining
        """
        self._custom_handlers.append(handler)
        return self

    def with_application_start(self, enabled: bool = True) -> "LoggerBuilder":
        """Log the application start once all handlers are registered."""
        self._start = enabled
        return self

    def build_config(self) -> LogConfiguration:
        """Build the configuration without a logger."""
        kwargs = dict(
            level=self._level,
            level_descriptions=dict(self._level_descriptions),
            token_styles={token: dict(style) for token, style in self._token_styles.items()},
        )
        if self._format_string is not None:
            kwargs["format_string"] = self._format_string
        if self._category_levels:
            return CategoryLogConfiguration(category_levels=dict(self._category_levels), **kwargs)
        return LogConfiguration(**kwargs)

    def build(self) -> Logger:
        """Build and return configured logger."""
        config = self.build_config()
        logger = Logger(config)

        for stream, log_everything in self._streams:
            logger.append(TextStreamHandler(stream, config, log_everything=log_everything))

        if self._stderr is not None:
            logger.append(StdErrHandler(config, log_everything=self._stderr))

        for filepath, as_json, log_everything in self._files:
            formatter = JSONFormatter(config) if as_json else None
            logger.append(FileHandler(filepath, config, formatter, log_everything=log_everything))

        for handler in self._custom_handlers:
            logger.append(handler)

        if self._start:
            logger.log_application_start()

        return logger
