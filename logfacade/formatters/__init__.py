"""
Log formatters module

Provides the formatters that turn log entries into text.
"""

from logfacade.core.styled_text import StyledText
from logfacade.formatters.base_formatter import BaseFormatter
from logfacade.formatters.date_formatters import StrftimeDateFormatter, iso8601_date_formatter
from logfacade.formatters.json_formatter import JSONFormatter
from logfacade.formatters.token_formatter import TokenizedFormatter
from logfacade.formatters.token_parser import (
    DEFAULT_TOKEN_PATTERN,
    FormatterError,
    TextNode,
    TokenNode,
    parse_format,
)

__all__ = [
    "BaseFormatter",
    "TokenizedFormatter",
    "JSONFormatter",
    "StrftimeDateFormatter",
    "iso8601_date_formatter",
    "StyledText",
    "FormatterError",
    "TextNode",
    "TokenNode",
    "parse_format",
    "DEFAULT_TOKEN_PATTERN",
]
