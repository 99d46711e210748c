"""Block quote classifier mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from md2html.lexer.indent import DEFAULT_TAB_WIDTH, MAX_MARKER_INDENT, calc_indent, strip_columns
from md2html.tokens import ClassifiedLine, LineRole


def strip_quote_marker(content: str, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """Remove a leading > and the one space (or tab column) that belongs to it."""
    rest = content[1:]
    if rest[:1] == " ":
        return rest[1:]
    if rest[:1] == "\t":
        return strip_columns(rest, 1, tab_width)
    return rest


def split_quote_marker(
    text: str, tab_width: int = DEFAULT_TAB_WIDTH
) -> tuple[int, str] | None:
    """Split a line that opens with a quote marker.

    Returns:
        (indent of the marker, text after it), or None when the line does
        not start with > after at most three columns of indentation
    """
    indent, start = calc_indent(text, tab_width)
    if indent > MAX_MARKER_INDENT or not text.startswith(">", start):
        return None
    return indent, strip_quote_marker(text[start:], tab_width)


class QuoteClassifierMixin:
    """Mixin providing block quote classification."""

    _tab_width: int

    if TYPE_CHECKING:

        def _scan_block(
            self, line: str, lineno: int, *, change_mode: bool = True
        ) -> ClassifiedLine:
            """Classify a line in block mode. Implemented by BlockScannerMixin."""
            raise NotImplementedError

    def _classify_block_quote(
        self, content: str, line: str, lineno: int, indent: int = 0
    ) -> ClassifiedLine:
        """Classify a line starting with a > marker.

        The text after the marker is attached as the inner classification,
        so "> # Title" is a quote holding a heading and "> > x" a quote
        holding a quote. Nested markers are peeled in a loop and only the
        innermost text goes through the block scanner, so the number of >
        on a line is not limited by the interpreter's recursion limit.

        Args:
            content: Content starting with >
            line: The full line
            lineno: Line number
            indent: Leading indentation of the > marker
        """
        rest = strip_quote_marker(content, self._tab_width)
        layers = [(line, indent, rest)]
        while (nested := split_quote_marker(rest, self._tab_width)) is not None:
            nested_indent, nested_rest = nested
            layers.append((rest, nested_indent, nested_rest))
            rest = nested_rest

        classified = self._scan_block(rest, lineno, change_mode=False)
        for layer_line, layer_indent, layer_rest in reversed(layers):
            classified = ClassifiedLine(
                role=LineRole.BLOCKQUOTE_MARKER,
                line=layer_line,
                lineno=lineno,
                indent=layer_indent,
                content=layer_rest,
                marker=">",
                inner=classified,
            )
        return classified
