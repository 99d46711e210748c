"""Line roles and classified lines produced by the line classifier.

The classifier tags each source line with a structural role; the block
parser consumes the resulting ClassifiedLine stream.

Thread Safety:
ClassifiedLine is frozen (immutable) and safe to share across threads.
LineRole is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class LineRole(Enum):
    """Structural role of a single source line."""

    THEMATIC_BREAK = auto()  # ---, ***, ___
    HEADING = auto()  # # Heading
    CODE_FENCE_OPEN = auto()  # ``` or ~~~ (with optional info string)
    CODE_FENCE_CLOSE = auto()  # matching ``` or ~~~
    CODE_CONTENT = auto()  # literal line inside an open fence
    BLOCKQUOTE_MARKER = auto()  # >
    LIST_ITEM_MARKER = auto()  # -, *, +, 1., 1)
    BLANK = auto()  # empty or whitespace-only
    PARAGRAPH_TEXT = auto()  # anything else


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """A source line tagged with its structural role.

    Attributes:
        role: The line's role
        line: The raw line text (without the newline)
        lineno: Line number (1-indexed)
        indent: Leading indentation in columns (tabs expand to tab stops)
        content: Role payload: heading text, fence info string, code line,
            text after ">" or after a list marker, or the stripped paragraph text
        level: Heading level, or length of a fence marker
        marker: List marker ("-", "3.", "1)") or fence character
        content_indent: Column at which list item content starts
        ordered: Whether a list marker is ordered
        start: Number of an ordered list marker
        inner: Classification of the text following a ">" marker

    """

    role: LineRole
    line: str
    lineno: int
    indent: int = 0
    content: str = ""
    level: int = 0
    marker: str = ""
    content_indent: int = 0
    ordered: bool = False
    start: int = 1
    inner: ClassifiedLine | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.line
        if len(val) > 20:
            val = val[:17] + "..."
        return f"ClassifiedLine({self.role.name}, {val!r}, line {self.lineno})"

    @property
    def language(self) -> str | None:
        """First word of a fence info string, if any."""
        if self.role is not LineRole.CODE_FENCE_OPEN or not self.content:
            return None
        return self.content.split()[0]

    @property
    def delimiter(self) -> str:
        """List marker character used for sibling compatibility ("-", ".", ")")."""
        return self.marker[-1] if self.marker else ""
