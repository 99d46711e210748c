"""
md2html: Markdown to HTML converter

Converts a practical subset of Markdown (ATX headings, paragraphs, emphasis,
code spans, fenced code, links, images, block quotes, nested lists and
thematic breaks) into HTML, optionally wrapped in a page theme.

Conversion never fails on malformed Markdown: anything that does not form a
valid construct is rendered as the literal text it was written with.

Quick Start:
    >>> from md2html import parse, render
    >>> doc = parse("# Hello, World!")
    >>> render(doc)
    '<h1>Hello, World!</h1>'

    >>> # Or convert in one call
    >>> from md2html import convert
    >>> convert("- a\\n- b\\n")
    '<ul>\\n<li>a</li>\\n<li>b</li>\\n</ul>'

    >>> # Reusable processor with its own configuration
    >>> from md2html import Markdown, ParseConfig
    >>> md = Markdown(heading_ids=True, config=ParseConfig(tab_width=2))
    >>> md("# Intro")
    '<h1 id="intro">Intro</h1>'

Command line:
    md2html README.md -o README.html --theme default
"""

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from md2html.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from md2html.errors import (
    InvalidArgument,
    InvalidTheme,
    IoError,
    Md2HtmlError,
    ThemeError,
    ThemeNotFound,
)
from md2html.lexer import LineClassifier, classify_line
from md2html.location import SourceLocation
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
    Node,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)
from md2html.parser import Parser
from md2html.renderers.html import HeadingInfo, HtmlRenderer
from md2html.text import extract_text
from md2html.themes import ThemeResolver, resolve_theme
from md2html.tokens import ClassifiedLine, LineRole

__version__ = "0.1.0"


def parse(source: str, *, source_file: str | None = None) -> Document:
    """Parse Markdown source into a Document.

    Uses the parse configuration active in the current context.

    Args:
        source: Markdown source text ("\\n" line endings)
        source_file: Optional source file path recorded in node locations

    Returns:
        Document root node

    Example:
        >>> doc = parse("# Hello")
        >>> doc.children[0].level
        1
    """
    return Parser(source, source_file=source_file).parse()


def render(doc: Document, *, template: str | None = None, heading_ids: bool = False) -> str:
    """Render a Document to HTML.

    Args:
        doc: Document to render
        template: Optional page template with a ``{{ body }}`` placeholder
        heading_ids: Emit slug id attributes on headings

    Returns:
        HTML body, or the filled template
    """
    return HtmlRenderer(heading_ids=heading_ids).render(doc, template)


def convert(
    source: str,
    *,
    template: str | None = None,
    heading_ids: bool = False,
    source_file: str | None = None,
) -> str:
    """Parse and render Markdown in one call.

    Example:
        >>> convert("# Title\\n\\nHello *world*.")
        '<h1>Title</h1>\\n<p>Hello <em>world</em>.</p>'
    """
    doc = parse(source, source_file=source_file)
    return render(doc, template=template, heading_ids=heading_ids)


class Markdown:
    """Reusable Markdown processor combining parser and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("Hello **World**")
        '<p>Hello <strong>World</strong></p>'

        >>> # Access the document tree
        >>> doc = md.parse("# Heading")
        >>> doc.children[0].level
        1

        >>> # Many documents at once
        >>> md.convert_many(["# A", "# B"])
        ['<h1>A</h1>', '<h1>B</h1>']

    Thread Safety:
        Holds only immutable settings. Each call sets its ParseConfig through
        a ContextVar (thread-local), so one instance can be used from many
        threads at once.
    """

    __slots__ = ("_config", "_heading_ids", "_template")

    def __init__(
        self,
        *,
        heading_ids: bool = False,
        config: ParseConfig | None = None,
        template: str | None = None,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            heading_ids: Emit slug id attributes on headings
            config: Parse configuration (defaults to ParseConfig())
            template: Optional page template applied by __call__ and
                convert_many
        """
        self._heading_ids = heading_ids
        self._config = config if config is not None else ParseConfig()
        self._template = template

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render Markdown in one call."""
        return self.render(self.parse(source), template=self._template)

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse Markdown source with this processor's configuration.

        Thread Safety:
            Sets config via ContextVar (thread-local) and restores the
            previous value afterwards. Safe for concurrent use.
        """
        with parse_config_context(self._config):
            return Parser(source, source_file=source_file).parse()

    def render(self, doc: Document, *, template: str | None = None) -> str:
        """Render a Document to HTML."""
        return HtmlRenderer(heading_ids=self._heading_ids).render(doc, template)

    def convert_many(
        self,
        sources: Iterable[str],
        *,
        max_workers: int | None = None,
    ) -> list[str]:
        """Convert several Markdown sources in a thread pool.

        Conversions are independent; results keep the order of sources.

        Args:
            sources: Markdown source strings
            max_workers: Pool size (ThreadPoolExecutor default if None)

        Returns:
            Rendered HTML, one string per source
        """
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(self, sources))


__all__ = [
    # Pipeline
    "Markdown",
    "convert",
    "parse",
    "render",
    # Stages
    "ClassifiedLine",
    "HeadingInfo",
    "HtmlRenderer",
    "LineClassifier",
    "LineRole",
    "Parser",
    "classify_line",
    "extract_text",
    # Themes
    "ThemeResolver",
    "resolve_theme",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    # Errors
    "InvalidArgument",
    "InvalidTheme",
    "IoError",
    "Md2HtmlError",
    "ThemeError",
    "ThemeNotFound",
    # Nodes
    "Block",
    "BlockQuote",
    "CodeBlock",
    "CodeSpan",
    "Document",
    "Emphasis",
    "Heading",
    "Image",
    "Inline",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "SourceLocation",
    "Strong",
    "Text",
    "ThematicBreak",
    "__version__",
]
