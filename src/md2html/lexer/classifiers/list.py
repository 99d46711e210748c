"""List marker classifier mixin."""

from __future__ import annotations

from md2html.lexer.indent import calc_indent, strip_columns
from md2html.parsing.charsets import (
    ASCII_DIGITS,
    ORDERED_LIST_DELIMITERS,
    UNORDERED_LIST_MARKERS,
)
from md2html.tokens import ClassifiedLine, LineRole

# Ordered markers allow at most 9 digits
MAX_ORDERED_DIGITS = 9

# More than this many spaces after a marker counts as a single space
MAX_MARKER_PADDING = 4


class ListClassifierMixin:
    """Mixin providing list marker classification."""

    _tab_width: int

    def _try_classify_list_marker(
        self, content: str, line: str, lineno: int, indent: int = 0
    ) -> ClassifiedLine | None:
        """Try to classify content as a list item marker.

        Unordered markers are -, * and +; ordered markers are 1-9 digits
        followed by . or ). The marker must be followed by a space, a tab or
        the end of the line.

        Args:
            content: Line content with leading whitespace stripped
            line: The full line
            lineno: Line number
            indent: Indentation of the marker

        Returns:
            ClassifiedLine if content starts with a marker, None otherwise.
        """
        if not content:
            return None

        ordered = False
        start = 1
        if content[0] in UNORDERED_LIST_MARKERS:
            marker = content[0]
        elif content[0] in ASCII_DIGITS:
            pos = 0
            while pos < len(content) and content[pos] in ASCII_DIGITS:
                pos += 1
            if (
                pos > MAX_ORDERED_DIGITS
                or pos >= len(content)
                or content[pos] not in ORDERED_LIST_DELIMITERS
            ):
                return None
            marker = content[: pos + 1]
            ordered = True
            start = int(content[:pos])
        else:
            return None

        rest = content[len(marker) :]
        if rest and rest[0] not in " \t":
            return None

        # A marker alone on its line opens an empty item
        padding, _ = calc_indent(rest, self._tab_width)
        if not rest.strip() or padding > MAX_MARKER_PADDING:
            padding = 1
        item_content = strip_columns(rest, padding, self._tab_width)

        return ClassifiedLine(
            role=LineRole.LIST_ITEM_MARKER,
            line=line,
            lineno=lineno,
            indent=indent,
            content=item_content if item_content.strip() else "",
            marker=marker,
            content_indent=indent + len(marker) + padding,
            ordered=ordered,
            start=start,
        )
