"""
Format string parser

Compiles a format string into an ordered tuple of literal-text and token
nodes. The parse happens once, when a formatter is constructed.
"""

import re
from dataclasses import dataclass
from typing import Tuple, Union

from logfacade.core.format_token import FormatToken
from logfacade.core.styled_text import StyledText

# "(%name)"; the first group captures the token name
DEFAULT_TOKEN_PATTERN = r"\(%(\w+)\)"

_TOKENS_BY_NAME = {token.value: token for token in FormatToken}


class FormatterError(ValueError):
    """Raised when a formatter cannot be built from its format definition."""


@dataclass(frozen=True)
class TextNode:
    """Literal text copied verbatim into the output."""

    text: StyledText


@dataclass(frozen=True)
class TokenNode:
    """Placeholder replaced with a value taken from the entry."""

    token: FormatToken


FormatNode = Union[TextNode, TokenNode]
CompiledFormat = Tuple[FormatNode, ...]


def compile_token_pattern(pattern: Union[str, re.Pattern]) -> re.Pattern:
    """
    Compile and validate a token delimiter pattern.

    Raises:
        FormatterError: If the pattern is invalid or has no capturing group
    """
    try:
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    except re.error as e:
        raise FormatterError(f"invalid token pattern {pattern!r}: {e}") from e
    if compiled.groups < 1:
        raise FormatterError(
            f"token pattern {compiled.pattern!r} must capture the token name in a group"
        )
    return compiled


def parse_format(
    format_string: Union[str, StyledText],
    pattern: Union[str, re.Pattern] = DEFAULT_TOKEN_PATTERN,
) -> CompiledFormat:
    """
    Parse a format string into nodes.

    Matches are found leftmost-first and never overlap. A match whose name
    is not a known token is kept as literal text.

    Args:
        format_string: Plain or styled format string
        pattern: Delimiter pattern whose first group is the token name

    Returns:
        Tuple of TextNode and TokenNode in string order

    Raises:
        FormatterError: If the pattern cannot be used
    """
    regex = compile_token_pattern(pattern)
    styled = format_string if isinstance(format_string, StyledText) else StyledText(format_string)
    text = styled.plain

    nodes = []
    position = 0
    for match in regex.finditer(text):
        start, end = match.span()
        if start == end:
            # an empty match carries no token
            continue
        if position < start:
            nodes.append(TextNode(styled.slice(position, start)))
        token = _TOKENS_BY_NAME.get(match.group(1))
        if token is None:
            nodes.append(TextNode(StyledText(match.group(0))))
        else:
            nodes.append(TokenNode(token))
        position = end

    if position < len(text):
        nodes.append(TextNode(styled.slice(position, len(text))))

    return tuple(nodes)
