"""Fenced code block classifier mixin."""

from md2html.lexer.modes import LexerMode
from md2html.parsing.charsets import FENCE_CHARS
from md2html.tokens import ClassifiedLine, LineRole

MIN_FENCE_LENGTH = 3


def is_closing_fence(line: str, fence_char: str, fence_length: int) -> bool:
    """Check whether line closes a fence opened with fence_char * fence_length.

    Closing fences may be indented 0-3 spaces, must use the same character,
    be at least as long as the opening fence and carry nothing but whitespace
    after the marker.
    """
    if not fence_char:
        return False

    indent = 0
    while indent < len(line) and line[indent] == " ":
        indent += 1
    if indent >= 4:
        return False

    content = line[indent:]
    count = 0
    while count < len(content) and content[count] == fence_char:
        count += 1

    if count < max(fence_length, MIN_FENCE_LENGTH):
        return False
    return content[count:].strip() == ""


class FenceClassifierMixin:
    """Mixin providing fenced code block classification."""

    # These will be set by the LineClassifier class
    _fence_char: str
    _fence_length: int
    _fence_indent: int
    _mode: LexerMode

    def _try_classify_fence_start(
        self,
        content: str,
        line: str,
        lineno: int,
        indent: int = 0,
        *,
        change_mode: bool = True,
    ) -> ClassifiedLine | None:
        """Try to classify content as a fenced code start.

        Fences are 3+ backticks or tildes. Backtick fences cannot have
        backticks in the info string.

        Args:
            content: Line content with leading whitespace stripped
            line: The full line
            lineno: Line number
            indent: Leading indentation, stripped from every content line
            change_mode: If True, switch to CODE_FENCE mode. False when
                classifying a single line outside the document stream.

        Returns:
            ClassifiedLine if valid fence, None otherwise.
        """
        if not content:
            return None

        fence_char = content[0]
        if fence_char not in FENCE_CHARS:
            return None

        count = 0
        while count < len(content) and content[count] == fence_char:
            count += 1

        if count < MIN_FENCE_LENGTH:
            return None

        info = content[count:].strip()
        if fence_char == "`" and "`" in info:
            return None

        if change_mode:
            self._fence_char = fence_char
            self._fence_length = count
            self._fence_indent = indent
            self._mode = LexerMode.CODE_FENCE

        return ClassifiedLine(
            role=LineRole.CODE_FENCE_OPEN,
            line=line,
            lineno=lineno,
            indent=indent,
            content=info,
            level=count,
            marker=fence_char,
        )

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line closes the currently open fence."""
        return is_closing_fence(line, self._fence_char, self._fence_length)
