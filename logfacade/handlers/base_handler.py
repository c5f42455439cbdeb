"""
Base handler interface

A handler is a destination for log entries. It owns a formatter and
decides how formatted output is written.
"""

from abc import ABC, abstractmethod
import itertools
from typing import Optional

from logfacade.core.log_config import LogConfiguration
from logfacade.core.log_entry import LogEntry
from logfacade.formatters.base_formatter import BaseFormatter
from logfacade.formatters.token_formatter import TokenizedFormatter

_handler_ids = itertools.count(1)


class BaseHandler(ABC):
    """
    Abstract base class for log handlers.

    Every handler gets a unique ``handler_id`` when it is created; the
    logger uses it to find the handler again on removal.
    """

    def __init__(
        self,
        config: Optional[LogConfiguration] = None,
        formatter: Optional[BaseFormatter] = None,
        log_everything: bool = False,
    ):
        """
        Initialize handler.

        Args:
            config: Configuration used to build the default formatter
            formatter: Log formatter (default: TokenizedFormatter over config)
            log_everything: Receive every entry regardless of the
                            configuration's level policy
        """
        self.config = config or (formatter.config if formatter else LogConfiguration.default())
        self.formatter = formatter or TokenizedFormatter(self.config)
        self.log_everything = log_everything
        self.handler_id = next(_handler_ids)

    @abstractmethod
    def append(self, entry: LogEntry) -> None:
        """
        Deliver a log entry to this handler's destination.

        Args:
            entry: The log entry to write
        """
        pass

    def equals(self, other: "BaseHandler") -> bool:
        """True if ``other`` is this very handler."""
        return isinstance(other, BaseHandler) and other.handler_id == self.handler_id

    def flush(self) -> None:
        """Flush pending output."""

    def close(self) -> None:
        """Release the destination."""

    def __enter__(self) -> "BaseHandler":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.handler_id}, log_everything={self.log_everything})"
