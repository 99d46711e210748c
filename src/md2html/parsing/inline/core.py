"""Inline parser: raw paragraph or heading text to inline nodes.

Two phases:
1. Tokenize into typed NamedTuples. Code spans, escapes, links, images and
   line breaks are resolved here; emphasis delimiters become DelimiterTokens.
2. Pair delimiter runs and build the nodes (EmphasisMixin).

Malformed spans never raise: anything that does not form a valid construct
is emitted as the literal characters it was written with.

Thread Safety:
InlineParser holds only configuration. parse() keeps all working state in
locals, so one instance can serve many threads.

"""

from __future__ import annotations

from md2html.config import get_parse_config
from md2html.location import SourceLocation
from md2html.nodes import Inline
from md2html.parsing.charsets import ASCII_PUNCTUATION, EMPHASIS_DELIMITERS, INLINE_SPECIAL
from md2html.parsing.inline.emphasis import EmphasisMixin
from md2html.parsing.inline.links import LinkParsingMixin, bracket_pairs, find_backtick_close
from md2html.parsing.inline.tokens import (
    CodeSpanToken,
    DelimiterToken,
    HardBreakToken,
    InlineToken,
    NodeToken,
    SoftBreakToken,
    TextToken,
)


class InlineParser(EmphasisMixin, LinkParsingMixin):
    """Parse inline Markdown.

    Usage:
        >>> from md2html.location import SourceLocation
        >>> nodes = InlineParser().parse("Hello *world*", SourceLocation(1, 1))
        >>> [type(node).__name__ for node in nodes]
        ['Text', 'Emphasis']

    """

    def __init__(self, *, max_link_depth: int | None = None) -> None:
        """Initialize inline parser.

        Args:
            max_link_depth: Recursion bound for link text; defaults to the
                active ParseConfig
        """
        if max_link_depth is None:
            max_link_depth = get_parse_config().max_link_depth
        self._max_link_depth = max_link_depth

    def parse(self, text: str, location: SourceLocation) -> tuple[Inline, ...]:
        """Parse inline text.

        Args:
            text: Raw inline source of one paragraph or heading
            location: Location of the enclosing block

        Returns:
            Inline nodes; adjacent text is merged into single Text nodes
        """
        return self._parse_inline(text, location)

    def _parse_inline(
        self,
        text: str,
        location: SourceLocation,
        *,
        inside_link: bool = False,
        depth: int = 0,
    ) -> tuple[Inline, ...]:
        if not text:
            return ()

        # Phase 1: Tokenize into typed token objects
        tokens = self._tokenize_inline(text, location, inside_link=inside_link, depth=depth)

        # Phase 2: Pair delimiters and build nodes
        return self._process_emphasis(tokens, location)

    def _tokenize_inline(
        self,
        text: str,
        location: SourceLocation,
        *,
        inside_link: bool = False,
        depth: int = 0,
    ) -> list[InlineToken]:
        """Tokenize inline content into typed token objects."""
        tokens: list[InlineToken] = []
        pos = 0
        text_len = len(text)
        tokens_append = tokens.append
        brackets = bracket_pairs(text) if "[" in text else {}

        while pos < text_len:
            char = text[pos]

            # Code span: `code` - handle first to avoid delimiter confusion
            if char == "`":
                count = 0
                while pos < text_len and text[pos] == "`":
                    count += 1
                    pos += 1

                close_pos = find_backtick_close(text, pos, count)
                if close_pos != -1:
                    code = text[pos:close_pos].replace("\n", " ")
                    # Strip one space from each end if both present, unless all spaces
                    if len(code) >= 2 and code[0] == " " and code[-1] == " " and code.strip():
                        code = code[1:-1]
                    tokens_append(CodeSpanToken(code=code))
                    pos = close_pos + count
                else:
                    tokens_append(TextToken(content="`" * count))
                continue

            # Emphasis delimiters: * or _
            if char in EMPHASIS_DELIMITERS:
                delim_start = pos
                while pos < text_len and text[pos] == char:
                    pos += 1

                before = text[delim_start - 1] if delim_start > 0 else ""
                after = text[pos] if pos < text_len else ""
                can_open, can_close = self._flanking(before, after, char)

                tokens_append(
                    DelimiterToken(
                        char=char,  # type: ignore[arg-type]
                        run_length=pos - delim_start,
                        can_open=can_open,
                        can_close=can_close,
                    )
                )
                continue

            # Link: [text](url)
            if char == "[":
                if not inside_link:
                    link_result = self._try_parse_link(text, pos, brackets, location, depth)
                    if link_result:
                        node, pos = link_result
                        tokens_append(NodeToken(node=node))
                        continue
                tokens_append(TextToken(content="["))
                pos += 1
                continue

            # Image: ![alt](url)
            if char == "!":
                img_result = self._try_parse_image(text, pos, brackets, location)
                if img_result:
                    node, pos = img_result
                    tokens_append(NodeToken(node=node))
                    continue
                tokens_append(TextToken(content="!"))
                pos += 1
                continue

            if char == "\\":
                # Hard break: \ at end of line
                if pos + 1 < text_len and text[pos + 1] == "\n":
                    tokens_append(HardBreakToken())
                    pos = self._skip_spaces(text, pos + 2)
                    continue
                if pos + 1 < text_len and text[pos + 1] in ASCII_PUNCTUATION:
                    tokens_append(TextToken(content=text[pos + 1]))
                    pos += 2
                    continue
                tokens_append(TextToken(content="\\"))
                pos += 1
                continue

            # Soft break, or hard break after two+ trailing spaces
            if char == "\n":
                space_count = 0
                check_pos = pos - 1
                while check_pos >= 0 and text[check_pos] == " ":
                    space_count += 1
                    check_pos -= 1

                if space_count and tokens and isinstance(tokens[-1], TextToken):
                    content = tokens[-1].content.rstrip(" ")
                    if content:
                        tokens[-1] = TextToken(content=content)
                    else:
                        tokens.pop()

                tokens_append(HardBreakToken() if space_count >= 2 else SoftBreakToken())
                pos = self._skip_spaces(text, pos + 1)
                continue

            # Regular text - accumulate until the next special character
            text_start = pos
            while pos < text_len and text[pos] not in INLINE_SPECIAL:
                pos += 1
            tokens_append(TextToken(content=text[text_start:pos]))

        return tokens

    @staticmethod
    def _skip_spaces(text: str, pos: int) -> int:
        """Skip leading spaces of a continuation line."""
        text_len = len(text)
        while pos < text_len and text[pos] in " \t":
            pos += 1
        return pos
