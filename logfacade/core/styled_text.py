"""
Styled (attributed) text

A string made of segments, each carrying a dictionary of style attributes
such as ``{"color": "red", "bold": True}``. Attribute names are not
interpreted here; consumers decide what they mean.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class StyledSegment:
    """A run of text sharing one set of style attributes."""

    text: str
    style: Mapping[str, Any] = field(default_factory=dict)


class StyledText:
    """
    Mutable attributed string.

    Adjacent segments with equal styles are merged, so two StyledText
    objects with the same visible text and styling compare equal no matter
    how they were built.
    """

    def __init__(self, text: str = "", style: Optional[Mapping[str, Any]] = None):
        self._segments: List[StyledSegment] = []
        if text:
            self.append(text, style)

    def append(
        self,
        text: Union[str, "StyledText"],
        style: Optional[Mapping[str, Any]] = None,
    ) -> "StyledText":
        """
        Append plain text with ``style``, or the segments of another StyledText.

        When appending a StyledText, ``style`` is layered over the style of
        each appended segment.
        """
        if isinstance(text, StyledText):
            for segment in text.segments:
                merged = dict(segment.style)
                if style:
                    merged.update(style)
                self._append_segment(segment.text, merged)
        else:
            self._append_segment(text, dict(style or {}))
        return self

    def _append_segment(self, text: str, style: Dict[str, Any]) -> None:
        if not text:
            return
        if self._segments and dict(self._segments[-1].style) == style:
            last = self._segments.pop()
            text = last.text + text
        self._segments.append(StyledSegment(text, style))

    @property
    def segments(self) -> Tuple[StyledSegment, ...]:
        return tuple(self._segments)

    @property
    def plain(self) -> str:
        """The text without any styling."""
        return "".join(segment.text for segment in self._segments)

    @property
    def last_style(self) -> Dict[str, Any]:
        """Style of the last character, or an empty dict when empty."""
        if not self._segments:
            return {}
        return dict(self._segments[-1].style)

    def style_at(self, index: int) -> Dict[str, Any]:
        """
        Style of the character at ``index``.

        Raises:
            IndexError: If index is out of range
        """
        if index < 0:
            index += len(self)
        position = 0
        for segment in self._segments:
            if position <= index < position + len(segment.text):
                return dict(segment.style)
            position += len(segment.text)
        raise IndexError("styled text index out of range")

    def slice(self, start: int, end: int) -> "StyledText":
        """Return the characters ``[start, end)`` with their styles."""
        result = StyledText()
        position = 0
        for segment in self._segments:
            seg_start = position
            seg_end = position + len(segment.text)
            position = seg_end
            if seg_end <= start or seg_start >= end:
                continue
            lo = max(start, seg_start) - seg_start
            hi = min(end, seg_end) - seg_start
            result._append_segment(segment.text[lo:hi], dict(segment.style))
        return result

    def copy(self) -> "StyledText":
        return StyledText().append(self)

    def __len__(self) -> int:
        return sum(len(segment.text) for segment in self._segments)

    def __str__(self) -> str:
        return self.plain

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyledText):
            return NotImplemented
        return [(s.text, dict(s.style)) for s in self._segments] == [
            (s.text, dict(s.style)) for s in other._segments
        ]

    def __repr__(self) -> str:
        return f"StyledText({[(s.text, dict(s.style)) for s in self._segments]!r})"
