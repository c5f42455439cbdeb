"""
Formatter driven by a tokenized format string

The format string is parsed once at construction; every call to
``format`` walks the same compiled node tuple.
"""

import re
from pathlib import PurePath
from typing import Any, Dict, Mapping, Optional, Union

from logfacade.core.format_token import FormatToken
from logfacade.core.log_config import LogConfiguration
from logfacade.core.log_entry import LogEntry
from logfacade.core.styled_text import StyledText
from logfacade.formatters.base_formatter import BaseFormatter
from logfacade.formatters.date_formatters import DateFormatter, iso8601_date_formatter
from logfacade.formatters.token_parser import (
    DEFAULT_TOKEN_PATTERN,
    CompiledFormat,
    TextNode,
    parse_format,
)


class TokenizedFormatter(BaseFormatter):
    """
    Format log entries using a string of literal text and tokens.

    Available tokens (default delimiter):
        (%date) (%level) (%category) (%message) (%file)
        (%filename) (%line) (%function) (%type)

    Unknown names such as ``(%thread)`` are copied to the output verbatim.

    Example:
        formatter = TokenizedFormatter(config, "[(%level)] (%message)")
        formatter.format(entry)  # "[ERROR] boom"
    """

    def __init__(
        self,
        config: Optional[LogConfiguration] = None,
        format_string: Union[str, StyledText, None] = None,
        date_formatter: Optional[DateFormatter] = None,
        token_pattern: Union[str, re.Pattern] = DEFAULT_TOKEN_PATTERN,
        token_styles: Optional[Mapping[FormatToken, Mapping[str, Any]]] = None,
    ):
        """
        Initialize tokenized formatter.

        Args:
            config: Configuration supplying level descriptions and token styles
            format_string: Format string (default: the configuration's format)
            date_formatter: Callable rendering the entry timestamp
            token_pattern: Delimiter pattern; group 1 is the token name
            token_styles: Token styles layered over the configuration's

        Raises:
            FormatterError: If the token pattern cannot be used
        """
        super().__init__(config)
        if format_string is None:
            format_string = self.config.format_string
        self.format_string = format_string
        self.date_formatter = date_formatter or iso8601_date_formatter
        self.token_styles: Dict[FormatToken, Dict[str, Any]] = {
            token: dict(style) for token, style in (token_styles or {}).items()
        }
        self.nodes: CompiledFormat = parse_format(format_string, token_pattern)

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry using the compiled format.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string (empty for an empty format string)
        """
        parts = []
        for node in self.nodes:
            if isinstance(node, TextNode):
                parts.append(node.text.plain)
                continue
            value = self.value_for(node.token, entry)
            if value is not None:
                parts.append(value)
        return "".join(parts)

    def format_with_attributes(self, entry: LogEntry) -> Optional[StyledText]:
        """
        Format log entry as styled text.

        A token value takes the style of the literal text right before it,
        then its own style, then the token's configured style. Styling only
        ever applies to the segment being inserted.

        Returns:
            Styled text, or None if the output is empty
        """
        output = StyledText()
        inherited: Dict[str, Any] = {}
        for node in self.nodes:
            if isinstance(node, TextNode):
                output.append(node.text)
                inherited = output.last_style
                continue
            value = self.styled_value_for(node.token, entry)
            if value is None or len(value) == 0:
                continue
            token_style = self._style_for(node.token)
            for segment in value.segments:
                style = dict(inherited)
                style.update(segment.style)
                style.update(token_style)
                output.append(segment.text, style)
        return output if len(output) > 0 else None

    def value_for(self, token: FormatToken, entry: LogEntry) -> Optional[str]:
        """Plain value of ``token`` for ``entry``; None when the field is absent."""
        if token is FormatToken.DATE:
            return self.date_formatter(entry.timestamp)
        if token is FormatToken.LEVEL:
            return self.config.display_string(entry.level)
        if token is FormatToken.CATEGORY:
            return entry.category.value
        if token is FormatToken.MESSAGE:
            return entry.message
        if token is FormatToken.FILE:
            return entry.file_name or None
        if token is FormatToken.FILENAME:
            if not entry.file_name:
                return None
            return PurePath(entry.file_name).name or entry.file_name
        if token is FormatToken.LINE:
            return None if entry.line_number is None else str(entry.line_number)
        if token is FormatToken.FUNCTION:
            return entry.function_name or None
        if token is FormatToken.TYPE:
            return entry.entry_type.value
        raise ValueError(f"unhandled format token: {token}")

    def styled_value_for(self, token: FormatToken, entry: LogEntry) -> Optional[StyledText]:
        if token is FormatToken.LEVEL:
            return self.config.styled_display_string(entry.level)
        value = self.value_for(token, entry)
        return None if value is None else StyledText(value)

    def _style_for(self, token: FormatToken) -> Dict[str, Any]:
        style = dict(self.config.token_style(token))
        style.update(self.token_styles.get(token, {}))
        return style

    def __repr__(self) -> str:
        """String representation."""
        return f"TokenizedFormatter(format_string='{self.format_string}')"
