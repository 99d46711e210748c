"""Markdown parser driving the conversion pipeline.

Source text flows through three stages:
1. `LineClassifier`: one ClassifiedLine per source line
2. `BlockParser`: block tree with raw inline text in paragraphs and headings
3. Inline stage: every paragraph and heading is rebuilt with parsed inline
   children, producing the final immutable Document

Thread Safety:
- Parser produces an immutable document (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share the resulting Document across threads

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace

from md2html.config import get_parse_config
from md2html.lexer import LineClassifier
from md2html.nodes import (
    Block,
    BlockQuote,
    Document,
    Heading,
    Inline,
    List,
    ListItem,
    Paragraph,
)
from md2html.parsing.blocks import BlockParser
from md2html.parsing.inline import InlineParser
from md2html.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Parse Markdown source into a Document.

    Usage:
        >>> doc = Parser("# Hello\\n\\nWorld").parse()
        >>> [type(block).__name__ for block in doc.children]
        ['Heading', 'Paragraph']

    Thread Safety:
        Parser instances are single-use. Create one per parse operation.
        Configuration is read from ContextVar (thread-local).

    """

    __slots__ = ("_source", "_source_file", "_inline")

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Markdown source text ("\\n" line endings)
            source_file: Optional source file path for node locations
        """
        self._source = source
        self._source_file = source_file
        self._inline = InlineParser()

    def parse(self) -> Document:
        """Parse the source into a Document.

        Never raises for malformed Markdown.
        """
        config = get_parse_config()

        lines = LineClassifier(self._source, tab_width=config.tab_width).classify()
        block_parser = BlockParser(source_file=self._source_file, tab_width=config.tab_width)
        doc = self._resolve_inlines(block_parser.parse(lines))

        logger.debug(
            "parsed %s: %d top-level blocks",
            self._source_file or "<string>",
            len(doc.children),
        )
        return doc

    def _resolve_inlines(self, doc: Document) -> Document:
        """Return doc with the raw text of every paragraph and heading parsed.

        Containers are rebuilt bottom-up from an explicit stack of
        (container, children left to visit, rebuilt children) entries, so
        nesting depth is not bounded by the recursion limit.
        """
        stack: list[tuple[Block, Iterator[Block], list[Block]]] = [
            (doc, iter(doc.children), [])
        ]
        while True:
            container, pending, rebuilt = stack[-1]
            child = next(pending, None)

            if child is None:
                stack.pop()
                finished = _with_children(container, rebuilt)
                if not stack:
                    assert isinstance(finished, Document)
                    return finished
                stack[-1][2].append(finished)
                continue

            match child:
                case Paragraph(raw=raw) | Heading(raw=raw):
                    rebuilt.append(replace(child, children=self._parse_inline(raw, child)))
                case List(items=items):
                    stack.append((child, iter(items), []))
                case BlockQuote(children=children) | ListItem(children=children):
                    stack.append((child, iter(children), []))
                case _:
                    rebuilt.append(child)

    def _parse_inline(self, raw: str, block: Paragraph | Heading) -> tuple[Inline, ...]:
        transformer = get_parse_config().text_transformer
        if transformer is not None:
            raw = transformer(raw)
        return self._inline.parse(raw, block.location)


def _with_children(container: Block, children: list[Block]) -> Block:
    """Copy of a container holding the rebuilt children."""
    if isinstance(container, List):
        items = tuple(child for child in children if isinstance(child, ListItem))
        return replace(container, items=items)
    return replace(container, children=tuple(children))
