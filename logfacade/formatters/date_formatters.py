"""Date formatting strategies used for the ``date`` token"""

from datetime import datetime
from typing import Callable

DateFormatter = Callable[[datetime], str]


def iso8601_date_formatter(timestamp: datetime) -> str:
    """Render ``timestamp`` as ISO-8601 with second precision."""
    return timestamp.isoformat(timespec="seconds")


class StrftimeDateFormatter:
    """
    Date formatter driven by a ``strftime`` pattern.

    A pattern ending in ``%f`` is trimmed to milliseconds.

    Example:
        formatter = TokenizedFormatter(
            config, date_formatter=StrftimeDateFormatter("%H:%M:%S")
        )
    """

    DEFAULT_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

    def __init__(self, fmt: str = DEFAULT_FORMAT):
        self.fmt = fmt

    def __call__(self, timestamp: datetime) -> str:
        text = timestamp.strftime(self.fmt)
        if self.fmt.endswith("%f"):
            text = text[:-3]
        return text

    def __repr__(self) -> str:
        return f"StrftimeDateFormatter({self.fmt!r})"
