"""Typed inline tokens for the inline parser.

The tokenizer turns inline source into a flat list of NamedTuples; the
emphasis pass then pairs delimiter runs and builds the inline nodes.

Thread Safety:
All tokens are immutable and safe to share across threads.

Usage:
    from md2html.parsing.inline.tokens import DelimiterToken, TextToken

    token = DelimiterToken(char="*", run_length=2, can_open=True, can_close=False)
    match token:
        case DelimiterToken(char="*", run_length=count):
            print(f"Asterisk run of {count}")

"""

from __future__ import annotations

from typing import Literal, NamedTuple, TypeAlias

from md2html.nodes import Inline

# Type alias for delimiter characters
DelimiterChar: TypeAlias = Literal["*", "_"]


class DelimiterToken(NamedTuple):
    """A run of emphasis delimiter characters.

    Attributes:
        char: The delimiter character ("*" or "_").
        run_length: Number of consecutive delimiter characters.
        can_open: Whether this run can open emphasis.
        can_close: Whether this run can close emphasis.

    """

    char: DelimiterChar
    run_length: int
    can_open: bool
    can_close: bool


class TextToken(NamedTuple):
    """Literal text."""

    content: str


class CodeSpanToken(NamedTuple):
    """Inline code span, already normalized."""

    code: str


class NodeToken(NamedTuple):
    """A fully parsed inline node (link or image)."""

    node: Inline


class HardBreakToken(NamedTuple):
    """Hard line break (backslash + newline or two trailing spaces)."""


class SoftBreakToken(NamedTuple):
    """Soft line break (plain newline inside a paragraph)."""


# Type alias for all inline tokens
InlineToken: TypeAlias = (
    DelimiterToken | TextToken | CodeSpanToken | NodeToken | HardBreakToken | SoftBreakToken
)


__all__ = [
    "CodeSpanToken",
    "DelimiterChar",
    "DelimiterToken",
    "HardBreakToken",
    "InlineToken",
    "NodeToken",
    "SoftBreakToken",
    "TextToken",
]
