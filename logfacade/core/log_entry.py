"""
Log entry data structure
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any, Union
import threading

from logfacade.core.log_category import LogCategory
from logfacade.core.log_level import LogLevel


class EntryType(Enum):
    """Kind of entry: a normal log call or the synthetic start marker."""

    ENTRY = "entry"
    START = "start"


START_MESSAGE = "application start"


def normalize_message(message: str) -> str:
    """Replace every line break in ``message`` with a single space."""
    return message.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")


@dataclass(frozen=True)
class LogEntry:
    """
    Immutable record of a single logging event.

    The level may be adjusted once through ``adjust_level`` before the entry
    is dispatched; every other field is fixed at construction.
    """

    message: str
    level: LogLevel
    category: Union[LogCategory, str] = LogCategory.GENERAL
    entry_type: EntryType = EntryType.ENTRY
    function_name: Optional[str] = None
    file_name: Optional[str] = None
    line_number: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)
    extra: Dict[str, Any] = field(default_factory=dict, hash=False)
    _level_adjusted: bool = field(default=False, init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate and normalize the entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.entry_type, EntryType):
            raise TypeError("entry_type must be EntryType enum")
        message = self.message if isinstance(self.message, str) else str(self.message)
        object.__setattr__(self, "message", normalize_message(message))
        if isinstance(self.category, str):
            object.__setattr__(self, "category", LogCategory(self.category))
        elif not isinstance(self.category, LogCategory):
            raise TypeError("category must be LogCategory or str")

    @classmethod
    def start_marker(cls) -> "LogEntry":
        """Create the synthetic entry announcing the application start."""
        return cls(
            message=START_MESSAGE,
            level=LogLevel.INFO,
            entry_type=EntryType.START,
        )

    @property
    def is_start_marker(self) -> bool:
        return self.entry_type is EntryType.START

    def adjust_level(self, level: LogLevel) -> None:
        """
        Change the level of this entry. Allowed exactly once.

        Raises:
            TypeError: If level is not a LogLevel
            RuntimeError: If the level was already adjusted
        """
        if not isinstance(level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if self._level_adjusted:
            raise RuntimeError("log entry level can only be adjusted once")
        object.__setattr__(self, "level", level)
        object.__setattr__(self, "_level_adjusted", True)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "type": self.entry_type.value,
            "level": self.level.name,
            "category": self.category.value,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "thread_name": self.thread_name,
            "file_name": self.file_name,
            "line_number": self.line_number,
            "function_name": self.function_name,
            "extra": self.extra,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        """
        Create log entry from dictionary.

        Args:
            data: Dictionary with log entry data

        Returns:
            New LogEntry instance
        """
        return cls(
            message=data["message"],
            level=LogLevel[data["level"]],
            category=data.get("category", LogCategory.GENERAL.value),
            entry_type=EntryType(data.get("type", EntryType.ENTRY.value)),
            function_name=data.get("function_name"),
            file_name=data.get("file_name"),
            line_number=data.get("line_number"),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            thread_name=data.get("thread_name", ""),
            extra=data.get("extra", {}),
        )

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{self.level.label:8}] "
            f"[{self.category.value}] "
            f"{self.message}"
        )
