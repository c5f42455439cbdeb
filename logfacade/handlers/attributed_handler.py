"""Styled text buffer handler"""

import threading
from typing import Optional

from logfacade.core.log_config import LogConfiguration
from logfacade.core.log_entry import LogEntry
from logfacade.core.styled_text import StyledText
from logfacade.formatters.base_formatter import BaseFormatter
from logfacade.handlers.base_handler import BaseHandler


class AttributedStringHandler(BaseHandler):
    """
    Append styled renderings to an in-memory StyledText buffer.

    Meant for in-process consumers such as a log view in a UI.
    """

    def __init__(
        self,
        output: Optional[StyledText] = None,
        config: Optional[LogConfiguration] = None,
        formatter: Optional[BaseFormatter] = None,
        log_everything: bool = False,
    ):
        super().__init__(config, formatter, log_everything)
        self.output = output if output is not None else StyledText()
        self._lock = threading.Lock()

    def append(self, entry: LogEntry) -> None:
        """Append the styled entry plus a newline; skip empty renderings."""
        styled = self.formatter.format_with_attributes(entry)
        if styled is None or len(styled) == 0:
            return
        with self._lock:
            self.output.append(styled)
            self.output.append("\n")
