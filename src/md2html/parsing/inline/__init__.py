"""Inline parsing subsystem for md2html.

Architecture:
- core: InlineParser, tokenizer and entry point
- tokens: Typed NamedTuple tokens
- emphasis: Flanking rules and delimiter pairing
- links: Links and images

"""

from md2html.parsing.inline.core import InlineParser
from md2html.parsing.inline.emphasis import EmphasisMixin
from md2html.parsing.inline.links import LinkParsingMixin

__all__ = ["EmphasisMixin", "InlineParser", "LinkParsingMixin"]
