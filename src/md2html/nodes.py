"""Typed document model for md2html.

All nodes are frozen dataclasses with slots: immutable once built, cheap to
share between threads, and matched structurally by the renderer.

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── List
│   ├── ListItem
│   ├── BlockQuote
│   ├── CodeBlock
│   └── ThematicBreak
└── Inline (inline elements)
    ├── Text
    ├── Emphasis
    ├── Strong
    ├── CodeSpan
    ├── Link
    ├── Image
    └── LineBreak

The block parser emits Heading and Paragraph nodes holding only their raw
inline text; the inline stage replaces them with copies whose children are
filled in. Nothing is mutated after that.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

from md2html.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all document nodes.

    Inline nodes carry the location of the block they belong to.

    """

    location: SourceLocation


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text, stored unescaped."""

    content: str


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Emphasized text.

    Markdown: *text* or _text_
    HTML: <em>text</em>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong text.

    Markdown: **text** or __text__
    HTML: <strong>text</strong>

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code. Never parsed further.

    Markdown: `code`
    HTML: <code>code</code>

    """

    code: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](url "title")
    HTML: <a href="url" title="title">text</a>

    """

    url: str
    title: str | None
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image.

    Markdown: ![alt](url "title")
    HTML: <img src="url" alt="alt" title="title" />

    """

    url: str
    alt: str
    title: str | None = None


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Line break inside a paragraph.

    Hard breaks come from two trailing spaces or a trailing backslash and
    render as <br />. Soft breaks are plain newlines.

    """

    hard: bool = True


# Type alias for inline elements
Inline: TypeAlias = Text | Emphasis | Strong | CodeSpan | Link | Image | LineBreak


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading.

    Markdown: ## Heading
    HTML: <h2>Heading</h2>

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...] = ()
    raw: str = ""


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    Markdown: Text separated by blank lines
    HTML: <p>text</p>

    """

    children: tuple[Inline, ...] = ()
    raw: str = ""


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block. The code is literal and never inline-parsed.

    Markdown: ```python ... ```
    HTML: <pre><code class="language-python">...</code></pre>

    """

    code: str
    language: str | None = None


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote.

    Markdown: > quoted text
    HTML: <blockquote>text</blockquote>

    """

    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    Markdown: - item or 1. item
    HTML: <li>item</li>

    """

    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    Markdown: - item or 1. item
    HTML: <ul>/<ol> with <li> children

    """

    items: tuple[ListItem, ...]
    ordered: bool = False
    start: int = 1  # Starting number for ordered lists
    tight: bool = True  # Tight lists render item paragraphs without <p>


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Thematic break (horizontal rule).

    Markdown: --- or *** or ___
    HTML: <hr />

    """


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node.

    Contains all top-level blocks in the document.

    """

    children: tuple[Block, ...]


# Type alias for block elements
Block: TypeAlias = (
    Document
    | Heading
    | Paragraph
    | CodeBlock
    | BlockQuote
    | List
    | ListItem
    | ThematicBreak
)
