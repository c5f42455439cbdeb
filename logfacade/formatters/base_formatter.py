"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import Optional

from logfacade.core.log_config import LogConfiguration
from logfacade.core.log_entry import LogEntry
from logfacade.core.styled_text import StyledText


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into formatted strings.
    """

    def __init__(self, config: Optional[LogConfiguration] = None):
        self.config = config or LogConfiguration.default()

    @abstractmethod
    def format(self, entry: LogEntry) -> Optional[str]:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format

        Returns:
            Formatted string, or None if the entry produces no output
        """
        pass

    def format_with_attributes(self, entry: LogEntry) -> Optional[StyledText]:
        """
        Format a log entry as styled text.

        The default wraps the plain rendering without any styling.
        """
        text = self.format(entry)
        if text is None:
            return None
        return StyledText(text)

    def __call__(self, entry: LogEntry) -> Optional[str]:
        """Allow formatters to be callable."""
        return self.format(entry)
