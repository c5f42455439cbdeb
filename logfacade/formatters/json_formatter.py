"""
JSON formatter for structured logging

Formats log entries as single JSON objects
"""

import json
import sys
from typing import Optional, TextIO

from logfacade.core.log_config import LogConfiguration
from logfacade.core.log_entry import LogEntry
from logfacade.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Serialization failures never reach the caller: they are reported to
    ``error_stream`` and the entry produces no output.
    """

    def __init__(
        self,
        config: Optional[LogConfiguration] = None,
        include_extra: bool = True,
        include_thread_info: bool = True,
        include_source_info: bool = True,
        indent: Optional[int] = None,
        ensure_ascii: bool = False,
        error_stream: Optional[TextIO] = None,
    ):
        """
        Initialize JSON formatter.

        Args:
            config: Configuration supplying level descriptions
            include_extra: Include extra fields in output
            include_thread_info: Include thread_name
            include_source_info: Include file, line and function
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters
            error_stream: Where serialization errors are reported
                          (default: sys.stderr)

        Example:
            # Compact JSON (one line per entry)
            formatter = JSONFormatter()

            # Minimal JSON
            formatter = JSONFormatter(
                include_extra=False,
                include_thread_info=False
            )
        """
        super().__init__(config)
        self.include_extra = include_extra
        self.include_thread_info = include_thread_info
        self.include_source_info = include_source_info
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.error_stream = error_stream

    def format(self, entry: LogEntry) -> Optional[str]:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            JSON string, or None if the entry could not be serialized
        """
        log_dict = {
            "type": entry.entry_type.value,
            "timestamp": entry.timestamp.isoformat(),
            "level": entry.level.name,
            "level_description": self.config.display_string(entry.level),
            "category": entry.category.value,
            "message": entry.message,
        }

        if self.include_thread_info:
            log_dict["thread_name"] = entry.thread_name

        if self.include_source_info:
            source_info = {}
            if entry.file_name:
                source_info["file"] = entry.file_name
            if entry.line_number is not None:
                source_info["line"] = entry.line_number
            if entry.function_name:
                source_info["function"] = entry.function_name
            if source_info:
                log_dict["source"] = source_info

        if self.include_extra and entry.extra:
            log_dict["extra"] = entry.extra

        try:
            text = json.dumps(
                log_dict,
                indent=self.indent,
                ensure_ascii=self.ensure_ascii
            )
        except (TypeError, ValueError) as e:
            print(
                f"JSON formatter error: {e}",
                file=self.error_stream or sys.stderr,
            )
            return None

        return text

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
