"""Text stream handler"""

import threading
from typing import Optional, TextIO

from logfacade.core.log_config import LogConfiguration
from logfacade.core.log_entry import LogEntry
from logfacade.formatters.base_formatter import BaseFormatter
from logfacade.handlers.base_handler import BaseHandler


class TextStreamHandler(BaseHandler):
    """Write formatted entries synchronously to any text stream."""

    def __init__(
        self,
        stream: TextIO,
        config: Optional[LogConfiguration] = None,
        formatter: Optional[BaseFormatter] = None,
        log_everything: bool = False,
    ):
        """
        Initialize text stream handler.

        Args:
            stream: Object with a write(str) method, e.g. sys.stdout or StringIO
            config: Configuration used to build the default formatter
            formatter: Log formatter
            log_everything: Receive every entry regardless of level policy
        """
        super().__init__(config, formatter, log_everything)
        self.stream = stream
        self._lock = threading.Lock()

    def append(self, entry: LogEntry) -> None:
        """Write log entry to the stream. Empty output writes nothing."""
        text = self.formatter.format(entry)
        if not text:
            return
        with self._lock:
            self.stream.write(text + "\n")
            if hasattr(self.stream, "flush"):
                self.stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        if hasattr(self.stream, "flush"):
            with self._lock:
                self.stream.flush()
