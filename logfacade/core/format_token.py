"""Placeholder kinds recognized inside a format string"""

from enum import Enum


class FormatToken(Enum):
    """
    Tokens that can appear in a format string.

    With the default delimiter each token is written as ``(%name)``:

    - ``(%date)``: creation time of the entry
    - ``(%level)``: display string of the entry's level
    - ``(%category)``: the category string
    - ``(%message)``: the message
    - ``(%file)``: full path of the source file
    - ``(%filename)``: last path component of the source file
    - ``(%line)``: line number of the log call
    - ``(%function)``: name of the calling function
    - ``(%type)``: ``entry`` or ``start``
    """

    DATE = "date"
    LEVEL = "level"
    CATEGORY = "category"
    MESSAGE = "message"
    FILE = "file"
    FILENAME = "filename"
    LINE = "line"
    FUNCTION = "function"
    TYPE = "type"


DEFAULT_LOG_FORMAT = "(%date) (%level) (%category), (%function)[(%file):(%line)] (%message)"
