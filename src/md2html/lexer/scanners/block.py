"""Block mode scanner mixin."""

from __future__ import annotations

from md2html.lexer.indent import MAX_MARKER_INDENT, calc_indent
from md2html.parsing.charsets import FENCE_CHARS, THEMATIC_BREAK_CHARS
from md2html.tokens import ClassifiedLine, LineRole


class BlockScannerMixin:
    """Mixin providing block mode classification.

    Applies the classification rules in priority order; the first rule
    that matches decides the line's role.

    """

    _tab_width: int

    # Classifier methods (provided by classifier mixins)
    def _try_classify_thematic_break(
        self, content: str, line: str, lineno: int, indent: int = 0
    ) -> ClassifiedLine | None:
        raise NotImplementedError

    def _try_classify_atx_heading(
        self, content: str, line: str, lineno: int, indent: int = 0
    ) -> ClassifiedLine | None:
        raise NotImplementedError

    def _try_classify_fence_start(
        self,
        content: str,
        line: str,
        lineno: int,
        indent: int = 0,
        *,
        change_mode: bool = True,
    ) -> ClassifiedLine | None:
        raise NotImplementedError

    def _classify_block_quote(
        self, content: str, line: str, lineno: int, indent: int = 0
    ) -> ClassifiedLine:
        raise NotImplementedError

    def _try_classify_list_marker(
        self, content: str, line: str, lineno: int, indent: int = 0
    ) -> ClassifiedLine | None:
        raise NotImplementedError

    def _scan_block(
        self, line: str, lineno: int, *, change_mode: bool = True
    ) -> ClassifiedLine:
        """Classify one line outside a fenced code block.

        Args:
            line: Line text without the newline
            lineno: Line number
            change_mode: Whether an opening fence switches to CODE_FENCE mode
        """
        indent, content_start = calc_indent(line, self._tab_width)
        content = line[content_start:].rstrip("\r")

        if not content.strip():
            return ClassifiedLine(role=LineRole.BLANK, line=line, lineno=lineno)

        if indent <= MAX_MARKER_INDENT:
            if content[0] in THEMATIC_BREAK_CHARS:
                classified = self._try_classify_thematic_break(content, line, lineno, indent)
                if classified:
                    return classified

            if content[0] == "#":
                classified = self._try_classify_atx_heading(content, line, lineno, indent)
                if classified:
                    return classified

            if content[0] in FENCE_CHARS:
                classified = self._try_classify_fence_start(
                    content, line, lineno, indent, change_mode=change_mode
                )
                if classified:
                    return classified

            if content[0] == ">":
                return self._classify_block_quote(content, line, lineno, indent)

            classified = self._try_classify_list_marker(content, line, lineno, indent)
            if classified:
                return classified

        return ClassifiedLine(
            role=LineRole.PARAGRAPH_TEXT,
            line=line,
            lineno=lineno,
            indent=indent,
            content=content,
        )
