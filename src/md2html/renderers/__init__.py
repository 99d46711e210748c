"""md2html renderers.

Renderers convert the document model into an output format.

Available Renderers:
- HtmlRenderer: Renders a Document to HTML using StringBuilder pattern

Thread Safety:
All renderers use StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from md2html.renderers.html import (
    BODY_PLACEHOLDER,
    HeadingInfo,
    HtmlRenderer,
    escape_attr,
    escape_text,
    escape_url,
)

__all__ = [
    "BODY_PLACEHOLDER",
    "HeadingInfo",
    "HtmlRenderer",
    "escape_attr",
    "escape_text",
    "escape_url",
]
