"""HTML renderer using StringBuilder pattern.

Serializes a Document to HTML. Every block is written followed by a
newline; the trailing newline of the last block is dropped, so blocks are
separated by exactly one newline and the body does not end with one.

Output is deterministic: the same document always renders to the same
string.

Thread Safety:
All per-render state is encapsulated in RenderContext, created fresh for each
render() call. Multiple threads can safely share a single HtmlRenderer instance
and call render() concurrently without synchronization.

"""

from __future__ import annotations

import html
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import NamedTuple, TypeAlias
from urllib.parse import quote as url_quote

from md2html.nodes import (
    Block,
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    Heading,
    Image,
    Inline,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)
from md2html.stringbuilder import StringBuilder
from md2html.text import extract_text
from md2html.utils.logger import get_logger
from md2html.utils.text import slugify as default_slugify
from md2html.utils.text import unique_slug

logger = get_logger(__name__)

# Placeholder a page template marks the body position with
BODY_PLACEHOLDER = "{{ body }}"

# URL characters left as-is when encoding href/src values
_URL_SAFE = "/:?#[]@!$&'()*+,;=-_.~%"


def escape_text(s: str) -> str:
    """Escape text content: &, <, > and double quotes."""
    return html.escape(s, quote=False).replace('"', "&quot;")


def escape_attr(s: str) -> str:
    """Escape an attribute value.

    Single quotes are left alone; attributes are always double-quoted.
    """
    return escape_text(s)


def escape_url(url: str) -> str:
    """Encode a link destination for an href or src attribute.

    Whitespace, control and non-ASCII characters are percent-encoded, URL
    delimiters and existing %XX sequences are kept, and the result is
    escaped for use inside a double-quoted attribute.

    Example:
        >>> escape_url("a b.html?x=1&y=2")
        'a%20b.html?x=1&amp;y=2'
    """
    return escape_attr(url_quote(url, safe=_URL_SAFE))


@dataclass(frozen=True, slots=True)
class HeadingInfo:
    """Heading metadata collected during rendering.

    Used to build a table of contents without scanning the output.
    """

    level: int
    text: str
    slug: str


@dataclass(slots=True)
class RenderContext:
    """Per-render mutable state.

    Thread Safety:
        Each render() call creates its own RenderContext instance.
        No shared mutable state between concurrent renders.
    """

    headings: list[HeadingInfo] = field(default_factory=list)
    seen_slugs: set[str] = field(default_factory=set)


class _ListItemEntry(NamedTuple):
    """A list item waiting to be rendered, with the tightness of its list."""

    item: ListItem
    tight: bool


# Pending render work: a node, a list item entry, or literal closing markup
_Work: TypeAlias = Block | Inline | _ListItemEntry | str


class HtmlRenderer:
    """Render a Document to HTML.

    Usage:
        >>> from md2html import parse
        >>> HtmlRenderer().render(parse("# Hello **World**"))
        '<h1>Hello <strong>World</strong></h1>'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
        Each render() call creates an independent RenderContext.
    """

    __slots__ = ("_heading_ids", "_slugify", "_last_context")

    def __init__(
        self,
        *,
        heading_ids: bool = False,
        slugify: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize renderer.

        Args:
            heading_ids: Emit an id attribute (slug of the heading text) on
                every heading
            slugify: Optional custom slugify function for heading IDs
        """
        self._heading_ids = heading_ids
        self._slugify = slugify or default_slugify
        self._last_context: RenderContext | None = None

    def render(self, node: Document, template: str | None = None) -> str:
        """Render a document to HTML.

        Args:
            node: Document root
            template: Optional page template; the body replaces its
                ``{{ body }}`` placeholder

        Returns:
            HTML body, or the filled template
        """
        ctx = RenderContext()

        sb = StringBuilder()
        self._render_nodes(node.children, sb, ctx)

        self._last_context = ctx
        body = sb.build().removesuffix("\n")

        logger.debug("rendered %d blocks, %d headings", len(node.children), len(ctx.headings))

        if template is None:
            return body
        return template.replace(BODY_PLACEHOLDER, body, 1)

    def get_headings(self) -> list[HeadingInfo]:
        """Get heading info collected during last render.

        Returns:
            List of HeadingInfo from the last render() call.
            Empty if render() hasn't been called.

        Note:
            In multi-threaded scenarios, call this right after render() in
            the same thread.
        """
        if self._last_context is None:
            return []
        return self._last_context.headings.copy()

    # =========================================================================
    # Tree walk
    # =========================================================================

    def _render_nodes(
        self, nodes: Sequence[Block | Inline], sb: StringBuilder, ctx: RenderContext
    ) -> None:
        """Render nodes in document order.

        Work waiting to be done lives on an explicit stack: nodes not yet
        rendered and the closing markup of elements already opened. Entries
        are pushed in reverse so they pop in document order. Nesting depth
        is therefore not bounded by the recursion limit.

        Blocks end with a newline; inline nodes never add one of their own.
        """
        work: list[_Work] = list(reversed(nodes))
        push = work.append
        extend = work.extend

        while work:
            item = work.pop()
            match item:
                case str():
                    sb.append(item)

                # Blocks
                case Document():
                    extend(reversed(item.children))
                case Heading():
                    sb.append(self._heading_open(item, ctx))
                    push(f"</h{item.level}>\n")
                    extend(reversed(item.children))
                case Paragraph():
                    sb.append("<p>")
                    push("</p>\n")
                    extend(reversed(item.children))
                case CodeBlock():
                    self._render_code_block(item, sb)
                case BlockQuote():
                    sb.append_line("<blockquote>")
                    push("</blockquote>\n")
                    extend(reversed(item.children))
                case List():
                    if item.ordered:
                        start_attr = f' start="{item.start}"' if item.start != 1 else ""
                        sb.append_line(f"<ol{start_attr}>")
                        push("</ol>\n")
                    else:
                        sb.append_line("<ul>")
                        push("</ul>\n")
                    extend(_ListItemEntry(li, item.tight) for li in reversed(item.items))
                case ListItem():
                    push(_ListItemEntry(item, True))
                case _ListItemEntry(item=list_item, tight=tight):
                    sb.append("<li>")
                    push("</li>\n")
                    extend(reversed(self._list_item_work(list_item, tight)))
                case ThematicBreak():
                    sb.append_line("<hr />")

                # Inlines
                case Text():
                    sb.append(escape_text(item.content))
                case Emphasis():
                    sb.append("<em>")
                    push("</em>")
                    extend(reversed(item.children))
                case Strong():
                    sb.append("<strong>")
                    push("</strong>")
                    extend(reversed(item.children))
                case CodeSpan():
                    sb.append("<code>")
                    sb.append(escape_text(item.code))
                    sb.append("</code>")
                case Link():
                    title = f' title="{escape_attr(item.title)}"' if item.title is not None else ""
                    sb.append(f'<a href="{escape_url(item.url)}"{title}>')
                    push("</a>")
                    extend(reversed(item.children))
                case Image():
                    title = f' title="{escape_attr(item.title)}"' if item.title is not None else ""
                    sb.append(
                        f'<img src="{escape_url(item.url)}" alt="{escape_attr(item.alt)}"{title} />'
                    )
                case LineBreak(hard=True):
                    sb.append("<br />\n")
                case LineBreak():
                    sb.append("\n")

    def _heading_open(self, heading: Heading, ctx: RenderContext) -> str:
        """Record the heading and return its opening tag, with an id when enabled."""
        text = extract_text(heading)
        slug = unique_slug(self._slugify(text), ctx.seen_slugs)
        ctx.headings.append(HeadingInfo(level=heading.level, text=text, slug=slug))

        if self._heading_ids:
            return f'<h{heading.level} id="{escape_attr(slug)}">'
        return f"<h{heading.level}>"

    def _render_code_block(self, code: CodeBlock, sb: StringBuilder) -> None:
        """Render fenced code; the language becomes a language-* class."""
        lang_class = f' class="language-{escape_attr(code.language)}"' if code.language else ""
        sb.append(f"<pre><code{lang_class}>")
        sb.append(escape_text(code.code))
        sb.append_line("</code></pre>")

    def _list_item_work(self, item: ListItem, tight: bool) -> list[_Work]:
        """Content of a list item, in order.

        - Tight list: paragraphs directly inside the item render without <p>
        - Loose list: every block renders normally, starting on a new line
        """
        if not item.children:
            return []
        if not tight:
            return ["\n", *item.children]

        work: list[_Work] = []
        if not isinstance(item.children[0], Paragraph):
            work.append("\n")
        last = len(item.children) - 1
        for i, child in enumerate(item.children):
            if isinstance(child, Paragraph):
                work.extend(child.children)
                if i < last:
                    work.append("\n")
            else:
                work.append(child)
        return work
