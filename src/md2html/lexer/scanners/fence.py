"""Fenced code mode scanner mixin."""

from md2html.lexer.indent import strip_columns
from md2html.lexer.modes import LexerMode
from md2html.tokens import ClassifiedLine, LineRole


class FenceScannerMixin:
    """Mixin providing fenced code mode scanning.

    Inside a fence only the matching closing fence is recognized; every
    other line is literal code.

    """

    # These will be set by the LineClassifier class
    _mode: LexerMode
    _fence_char: str
    _fence_length: int
    _fence_indent: int
    _tab_width: int

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line is a closing fence. Implemented by FenceClassifierMixin."""
        raise NotImplementedError

    def _scan_code_fence_content(self, line: str, lineno: int) -> ClassifiedLine:
        """Classify a line inside an open fence.

        Returns:
            CODE_FENCE_CLOSE for the closing fence (and leaves fence mode),
            CODE_CONTENT otherwise, with up to the fence's own indentation
            removed from the line.
        """
        if self._is_closing_fence(line):
            fence_char = self._fence_char
            fence_length = self._fence_length
            self._mode = LexerMode.BLOCK
            self._fence_char = ""
            self._fence_length = 0
            self._fence_indent = 0
            return ClassifiedLine(
                role=LineRole.CODE_FENCE_CLOSE,
                line=line,
                lineno=lineno,
                level=fence_length,
                marker=fence_char,
            )

        return ClassifiedLine(
            role=LineRole.CODE_CONTENT,
            line=line,
            lineno=lineno,
            content=strip_columns(line, self._fence_indent, self._tab_width),
        )
