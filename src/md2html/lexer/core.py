"""Line classifier: tags every source line with its structural role.

Single pass, one ClassifiedLine per input line, yielded lazily. Running the
classifier again over the same source yields identical results.

No regex in the hot path.

Thread Safety:
LineClassifier instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from md2html.lexer.classifiers import (
    FenceClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
)
from md2html.lexer.indent import DEFAULT_TAB_WIDTH
from md2html.lexer.modes import LexerMode
from md2html.lexer.scanners import BlockScannerMixin, FenceScannerMixin
from md2html.tokens import ClassifiedLine


def split_lines(source: str) -> list[str]:
    """Split source on newlines; a final newline does not start another line.

    Examples:
        >>> split_lines("a\\nb\\n")
        ['a', 'b']
        >>> split_lines("")
        []
    """
    if not source:
        return []
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class LineClassifier(
    # Classifiers (pure logic)
    HeadingClassifierMixin,
    FenceClassifierMixin,
    ThematicClassifierMixin,
    QuoteClassifierMixin,
    ListClassifierMixin,
    # Scanners (mode-specific dispatch)
    BlockScannerMixin,
    FenceScannerMixin,
):
    """Classify Markdown source lines.

    Usage:
        >>> for line in LineClassifier("# Hello\\n\\nWorld").classify():
        ...     print(line)
        ClassifiedLine(HEADING, '# Hello', line 1)
        ClassifiedLine(BLANK, '', line 2)
        ClassifiedLine(PARAGRAPH_TEXT, 'World', line 3)

    Thread Safety:
        LineClassifier instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_tab_width",
        "_mode",
        "_fence_char",
        "_fence_length",
        "_fence_indent",
    )

    def __init__(self, source: str, *, tab_width: int = DEFAULT_TAB_WIDTH) -> None:
        """Initialize classifier with source text.

        Args:
            source: Markdown source text ("\\n" line endings)
            tab_width: Tab stop used when measuring indentation
        """
        self._source = source
        self._tab_width = tab_width
        self._mode = LexerMode.BLOCK

        # Fenced code state
        self._fence_char: str = ""
        self._fence_length: int = 0
        self._fence_indent: int = 0

    def classify(self) -> Iterator[ClassifiedLine]:
        """Classify source into a stream of ClassifiedLine objects.

        Yields:
            One ClassifiedLine per source line, in order

        Complexity: O(n) where n = len(source)
        """
        self._mode = LexerMode.BLOCK
        self._fence_char = ""
        self._fence_length = 0
        self._fence_indent = 0

        for lineno, line in enumerate(split_lines(self._source), start=1):
            if self._mode == LexerMode.CODE_FENCE:
                yield self._scan_code_fence_content(line, lineno)
            else:
                yield self._scan_block(line, lineno)

    def classify_line(self, line: str, lineno: int = 1) -> ClassifiedLine:
        """Classify a single line in block mode without touching fence state."""
        return self._scan_block(line, lineno, change_mode=False)


def classify_line(
    line: str, lineno: int = 1, *, tab_width: int = DEFAULT_TAB_WIDTH
) -> ClassifiedLine:
    """Classify one line as if it started a fresh block.

    Used for text left over after container prefixes ("> ", list item
    indentation) have been removed.

    Example:
        >>> classify_line("## Title").level
        2
    """
    return LineClassifier(line, tab_width=tab_width).classify_line(line, lineno)
