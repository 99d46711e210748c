"""Block parser: classified lines to a document tree.

Builds the block structure of a document from the ClassifiedLine stream.
Paragraphs and headings keep their inline source in ``raw``; their
children are filled in later by the inline stage.

Per line:
1. Walk the open containers outermost-first and strip each one's prefix
   (">" for block quotes, content indentation for list items).
2. An open fenced code block takes the line verbatim, or closes.
3. Classify what is left over.
4. Lazy continuation: paragraph text keeps extending an open paragraph even
   when some containers did not continue.
5. Close the containers that did not continue, then open new ones and add
   the leaf block.

Malformed input never raises: anything left open at the end of input is
closed implicitly.

Thread Safety:
BlockParser instances hold per-parse state. Create one per parse, or reuse
one sequentially from a single thread.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from md2html.lexer import classify_line
from md2html.lexer.classifiers.fence import is_closing_fence
from md2html.lexer.classifiers.quote import split_quote_marker
from md2html.lexer.indent import DEFAULT_TAB_WIDTH, calc_indent, strip_columns
from md2html.location import SourceLocation
from md2html.nodes import CodeBlock, Document, Heading, Paragraph, ThematicBreak
from md2html.parsing.blocks.containers import ContainerFrame, ContainerStack, ContainerType
from md2html.parsing.blocks.lists import ListParsingMixin
from md2html.tokens import ClassifiedLine, LineRole

# Roles the top-level classifier only produces while it believes a fence is open
_FENCE_MODE_ROLES = frozenset({LineRole.CODE_CONTENT, LineRole.CODE_FENCE_CLOSE})


@dataclass(slots=True)
class ParagraphLeaf:
    """Lines of a paragraph still accepting continuation lines."""

    location: SourceLocation
    lines: list[str] = field(default_factory=list)


@dataclass(slots=True)
class FenceLeaf:
    """An open fenced code block."""

    location: SourceLocation
    fence_char: str
    fence_length: int
    fence_indent: int
    language: str | None = None
    lines: list[str] = field(default_factory=list)


class BlockParser(ListParsingMixin):
    """Build a Document from classified lines.

    Usage:
        >>> from md2html.lexer import LineClassifier
        >>> doc = BlockParser().parse(LineClassifier("# Hi\\n\\ntext").classify())
        >>> [type(block).__name__ for block in doc.children]
        ['Heading', 'Paragraph']

    """

    def __init__(
        self,
        *,
        source_file: str | None = None,
        tab_width: int = DEFAULT_TAB_WIDTH,
    ) -> None:
        """Initialize block parser.

        Args:
            source_file: Optional source file path for node locations
            tab_width: Tab stop used when measuring indentation
        """
        self._source_file = source_file
        self._tab_width = tab_width
        self._containers = ContainerStack()
        self._leaf: ParagraphLeaf | FenceLeaf | None = None
        self._last_lineno = 0

    def parse(self, lines: Iterable[ClassifiedLine]) -> Document:
        """Parse classified lines into a Document.

        Args:
            lines: Output of LineClassifier.classify()

        Returns:
            Document whose paragraphs and headings carry raw inline text
        """
        self._containers = ContainerStack()
        self._leaf = None
        self._last_lineno = 0

        for classified in lines:
            self._last_lineno = classified.lineno
            self._process_line(classified)

        self._close_leaf()
        self._containers.pop_until(0)

        return Document(
            location=SourceLocation(
                lineno=1,
                col_offset=1,
                end_lineno=max(self._last_lineno, 1),
                source_file=self._source_file,
            ),
            children=tuple(self._containers.root.children),
        )

    # =========================================================================
    # Line processing
    # =========================================================================

    def _process_line(self, line: ClassifiedLine) -> None:
        stack = self._containers
        remainder = line.line
        column = 0
        matched = 1

        # 1. Continuation
        for i in range(1, len(stack)):
            frame = stack[i]
            if frame.container_type == ContainerType.BLOCK_QUOTE:
                quoted = split_quote_marker(remainder, self._tab_width)
                if quoted is None:
                    break
                _, rest = quoted
                column += len(remainder) - len(rest)
                remainder = rest
            elif frame.container_type == ContainerType.LIST_ITEM:
                if remainder.strip():
                    indent, _ = calc_indent(remainder, self._tab_width)
                    if indent < frame.content_indent:
                        break
                stripped = strip_columns(remainder, frame.content_indent, self._tab_width)
                column += len(remainder) - len(stripped)
                remainder = stripped
            matched = i + 1

        all_matched = matched == len(stack)

        # 2. Open fence
        if isinstance(self._leaf, FenceLeaf):
            if all_matched:
                fence = self._leaf
                if is_closing_fence(remainder, fence.fence_char, fence.fence_length):
                    self._close_leaf()
                else:
                    fence.lines.append(
                        strip_columns(remainder, fence.fence_indent, self._tab_width)
                    )
                return
            self._close_leaf()

        # 3. Classify the remainder
        if len(stack) == 1 and line.role not in _FENCE_MODE_ROLES:
            classified = line
        else:
            classified = classify_line(remainder, line.lineno, tab_width=self._tab_width)

        if not all_matched:
            # 4. Lazy continuation
            if isinstance(self._leaf, ParagraphLeaf) and classified.role is LineRole.PARAGRAPH_TEXT:
                self._leaf.lines.append(classified.content)
                return

            # 5. Close what did not continue; a list survives a new sibling item
            list_frame = stack[matched - 1]
            if list_frame.container_type == ContainerType.LIST and not self._keeps_list_open(
                list_frame, classified
            ):
                matched -= 1
            self._close_leaf()
            stack.pop_until(matched - 1)

        if classified.role is LineRole.BLANK:
            self._close_leaf()
            self._note_blank_line(len(stack))
            return

        self._note_content_line(len(stack))

        # 6. Open new containers
        while True:
            if classified.role is LineRole.BLOCKQUOTE_MARKER and classified.inner is not None:
                self._close_leaf()
                self._containers.push(
                    ContainerFrame(
                        container_type=ContainerType.BLOCK_QUOTE,
                        location=SourceLocation(
                            lineno=line.lineno,
                            col_offset=column + classified.indent + 1,
                            source_file=self._source_file,
                        ),
                    )
                )
                column += len(remainder) - len(classified.content)
                remainder = classified.content
                classified = classified.inner
            elif classified.role is LineRole.LIST_ITEM_MARKER:
                self._close_leaf()
                self._open_list_item(classified, column)
                column += classified.content_indent
                remainder = classified.content
                classified = classify_line(remainder, line.lineno, tab_width=self._tab_width)
            else:
                break

        self._add_leaf(classified, column)

    def _add_leaf(self, classified: ClassifiedLine, column: int) -> None:
        """Apply a leaf role to the innermost container."""
        location = SourceLocation(
            lineno=classified.lineno,
            col_offset=column + classified.indent + 1,
            source_file=self._source_file,
        )

        match classified.role:
            case LineRole.BLANK:
                self._close_leaf()
            case LineRole.HEADING:
                self._close_leaf()
                self._containers.add_block(
                    Heading(location=location, level=classified.level, raw=classified.content.strip())
                )
            case LineRole.THEMATIC_BREAK:
                self._close_leaf()
                self._containers.add_block(ThematicBreak(location=location))
            case LineRole.CODE_FENCE_OPEN:
                self._close_leaf()
                self._leaf = FenceLeaf(
                    location=location,
                    fence_char=classified.marker,
                    fence_length=classified.level,
                    fence_indent=classified.indent,
                    language=classified.language,
                )
            case _:
                if isinstance(self._leaf, ParagraphLeaf):
                    self._leaf.lines.append(classified.content)
                else:
                    self._close_leaf()
                    self._leaf = ParagraphLeaf(location=location, lines=[classified.content])

    def _close_leaf(self) -> None:
        """Turn the open paragraph or code block into a node."""
        leaf = self._leaf
        if leaf is None:
            return
        self._leaf = None

        if isinstance(leaf, ParagraphLeaf):
            end = leaf.location.lineno + len(leaf.lines) - 1
            self._containers.add_block(
                Paragraph(
                    location=SourceLocation(
                        lineno=leaf.location.lineno,
                        col_offset=leaf.location.col_offset,
                        end_lineno=end,
                        source_file=leaf.location.source_file,
                    ),
                    raw="\n".join(leaf.lines).rstrip(),
                )
            )
        else:
            self._containers.add_block(
                CodeBlock(
                    location=leaf.location,
                    code="".join(f"{code_line}\n" for code_line in leaf.lines),
                    language=leaf.language,
                )
            )
