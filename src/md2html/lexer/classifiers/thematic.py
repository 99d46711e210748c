"""Thematic break classifier mixin."""

from __future__ import annotations

from md2html.parsing.charsets import THEMATIC_BREAK_CHARS
from md2html.tokens import ClassifiedLine, LineRole


class ThematicClassifierMixin:
    """Mixin providing thematic break classification."""

    def _try_classify_thematic_break(
        self, content: str, line: str, lineno: int, indent: int = 0
    ) -> ClassifiedLine | None:
        """Try to classify content as a thematic break.

        Thematic breaks are 3+ of the same character (-, *, _) with
        optional spaces/tabs between them.

        Args:
            content: Line content with leading whitespace stripped
            line: The full line
            lineno: Line number
            indent: Leading indentation in columns

        Returns:
            ClassifiedLine if valid break, None otherwise.
        """
        if not content:
            return None

        char = content[0]
        if char not in THEMATIC_BREAK_CHARS:
            return None

        count = 0
        for c in content:
            if c == char:
                count += 1
            elif c not in " \t":
                return None

        if count < 3:
            return None

        return ClassifiedLine(
            role=LineRole.THEMATIC_BREAK,
            line=line,
            lineno=lineno,
            indent=indent,
            content=content.rstrip(),
            marker=char,
        )
