"""
Logging configuration

Answers "is this (level, category) enabled" and supplies level display
strings. Read by every log call, possibly from many threads at once, so
all reads and mutations go through an internal lock.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Union
import threading

from logfacade.core.format_token import DEFAULT_LOG_FORMAT, FormatToken
from logfacade.core.log_category import LogCategory
from logfacade.core.log_level import LogLevel
from logfacade.core.styled_text import StyledText

LevelDescription = Union[str, StyledText]


@dataclass
class LogConfiguration:
    """
    Logging configuration with a single global severity threshold.

    Category is accepted by ``logging_enabled`` but ignored; see
    ``CategoryLogConfiguration`` for per-category thresholds.
    """

    # Filtering
    level: LogLevel = LogLevel.WARN

    # Rendering
    level_descriptions: Dict[LogLevel, LevelDescription] = field(default_factory=dict)
    token_styles: Dict[FormatToken, Dict[str, Any]] = field(default_factory=dict)
    format_string: str = DEFAULT_LOG_FORMAT

    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.level, str):
            self.level = LogLevel.from_string(self.level)
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        for key, value in self.level_descriptions.items():
            if not isinstance(key, LogLevel):
                raise TypeError("level_descriptions keys must be LogLevel")
            if not isinstance(value, (str, StyledText)):
                raise TypeError("level descriptions must be str or StyledText")
        for key in self.token_styles:
            if not isinstance(key, FormatToken):
                raise TypeError("token_styles keys must be FormatToken")
        if not isinstance(self.format_string, str):
            raise TypeError("format_string must be a string")

    def logging_enabled(self, level: LogLevel, category: LogCategory = LogCategory.GENERAL) -> bool:
        """
        Check whether an entry at ``level`` in ``category`` should be logged.

        Args:
            level: Level of the entry
            category: Category of the entry (ignored by this policy)

        Returns:
            True if the level is at least as severe as the threshold
        """
        with self._lock:
            return level <= self.level

    def set_level(self, level: LogLevel) -> None:
        """Change the global threshold. Safe to call while other threads log."""
        if not isinstance(level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        with self._lock:
            self.level = level

    def set_level_description(self, level: LogLevel, description: LevelDescription) -> None:
        """Register a custom display string for ``level``."""
        with self._lock:
            self.level_descriptions[level] = description

    def display_string(self, level: LogLevel) -> str:
        """Custom description of ``level``, or its label if none is registered."""
        return self.styled_display_string(level).plain

    def styled_display_string(self, level: LogLevel) -> StyledText:
        """Styled variant of ``display_string``."""
        with self._lock:
            description = self.level_descriptions.get(level)
        if description is None:
            return StyledText(level.label)
        if isinstance(description, StyledText):
            return description.copy()
        return StyledText(description)

    def token_style(self, token: FormatToken) -> Mapping[str, Any]:
        """Style attributes attached to ``token`` in styled output."""
        with self._lock:
            return dict(self.token_styles.get(token, {}))

    @classmethod
    def default(cls) -> "LogConfiguration":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LogConfiguration":
        """Create configuration for debugging."""
        return cls(level=LogLevel.DEBUG)

    @classmethod
    def production_config(cls) -> "LogConfiguration":
        """Create configuration for production."""
        return cls(
            level=LogLevel.NOTICE,
            format_string="(%date) (%level) (%category) (%message)",
        )


@dataclass
class CategoryLogConfiguration(LogConfiguration):
    """
    Configuration with optional per-category thresholds.

    Categories without their own threshold fall back to the global level.

    Example:
        config = CategoryLogConfiguration(level=LogLevel.WARN)
        config.set_category_level(LogCategory("network"), LogLevel.DEBUG)
    """

    category_levels: Dict[LogCategory, LogLevel] = field(default_factory=dict)

    def __post_init__(self):
        super().__post_init__()
        normalized = {}
        for category, level in self.category_levels.items():
            if isinstance(category, str):
                category = LogCategory(category)
            if not isinstance(level, LogLevel):
                raise TypeError("category_levels values must be LogLevel")
            normalized[category] = level
        self.category_levels = normalized

    def logging_enabled(self, level: LogLevel, category: LogCategory = LogCategory.GENERAL) -> bool:
        with self._lock:
            threshold = self.category_levels.get(category, self.level)
        return level <= threshold

    def set_category_level(self, category: Union[LogCategory, str], level: LogLevel) -> None:
        """Set the threshold used for ``category``."""
        if isinstance(category, str):
            category = LogCategory(category)
        if not isinstance(level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        with self._lock:
            self.category_levels[category] = level

    def clear_category_level(self, category: Union[LogCategory, str]) -> None:
        """Make ``category`` follow the global threshold again."""
        if isinstance(category, str):
            category = LogCategory(category)
        with self._lock:
            self.category_levels.pop(category, None)
