"""Log category value type"""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class LogCategory:
    """
    Opaque tag used to partition log entries for filtering.

    Two categories are equal when their strings are equal. There is no
    registry; construct new categories freely, e.g. ``LogCategory("network")``.
    """

    GENERAL: ClassVar["LogCategory"]

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError("category value must be a string")

    def __str__(self) -> str:
        return self.value


LogCategory.GENERAL = LogCategory("general")
