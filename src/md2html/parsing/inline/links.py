"""Link and image parsing for the inline parser.

Recognizes ``[label](destination "title")`` and ``![alt](src 'title')``.

The part after the closing bracket (the "tail") is scanned by small
position-based helpers that return None as soon as the text stops looking
like a link; the caller then emits the bracket as literal text.

Destinations come in two forms: ``<...>`` (spaces allowed, no line breaks)
or a raw run with no whitespace and balanced parentheses. Titles are quoted
with ``"``, ``'`` or wrapped in ``(...)``. Backslash escapes are resolved in
both.

"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, NamedTuple

from md2html.nodes import Image, Inline, Link
from md2html.parsing.charsets import ASCII_PUNCTUATION

if TYPE_CHECKING:
    from md2html.location import SourceLocation

_BACKSLASH_ESCAPE = re.compile(
    "\\\\([" + re.escape("".join(sorted(ASCII_PUNCTUATION))) + "])"
)

_TITLE_CLOSERS = {'"': '"', "'": "'", "(": ")"}


class LinkTail(NamedTuple):
    """Destination and title following a label, and where they end."""

    url: str
    title: str | None
    end: int


def unescape(text: str) -> str:
    """Resolve backslash escapes of ASCII punctuation."""
    return _BACKSLASH_ESCAPE.sub(r"\1", text)


def find_backtick_close(text: str, start: int, run_length: int) -> int:
    """Index of the next backtick run of exactly run_length, or -1."""
    text_len = len(text)
    pos = start
    while (idx := text.find("`", pos)) != -1:
        end = idx
        while end < text_len and text[end] == "`":
            end += 1
        if end - idx == run_length:
            return idx
        pos = end
    return -1


def bracket_pairs(text: str) -> dict[int, int]:
    """Map the index of each [ to the index of the ] that closes it.

    One left-to-right pass with a stack of open brackets. Nested brackets
    must balance; a ] with nothing open is plain text. Code spans bind
    tighter than brackets, so brackets inside a code span are skipped, and
    escaped brackets never pair.
    """
    pairs: dict[int, int] = {}
    open_brackets: list[int] = []
    text_len = len(text)
    pos = 0
    while pos < text_len:
        char = text[pos]
        if char == "\\":
            pos += 2
            continue
        if char == "`":
            run_start = pos
            while pos < text_len and text[pos] == "`":
                pos += 1
            close = find_backtick_close(text, pos, pos - run_start)
            if close != -1:
                pos = close + (pos - run_start)
            continue
        if char == "[":
            open_brackets.append(pos)
        elif char == "]" and open_brackets:
            pairs[open_brackets.pop()] = pos
        pos += 1
    return pairs


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in " \t\n":
        pos += 1
    return pos


def _scan_destination(text: str, pos: int) -> tuple[str, int] | None:
    """Scan a destination at pos; returns (url, end) or None."""
    text_len = len(text)

    if text[pos] == "<":
        end = pos + 1
        while end < text_len:
            char = text[end]
            if char == ">":
                return unescape(text[pos + 1 : end]), end + 1
            if char in "<\n":
                return None
            end += 2 if char == "\\" else 1
        return None

    end = pos
    open_parens = 0
    while end < text_len:
        char = text[end]
        if char.isspace() or ord(char) < 0x20:
            break
        if char == "\\" and end + 1 < text_len and text[end + 1] in ASCII_PUNCTUATION:
            end += 2
            continue
        if char == "(":
            open_parens += 1
        elif char == ")":
            if not open_parens:
                break
            open_parens -= 1
        end += 1

    if open_parens:
        return None
    return unescape(text[pos:end]), end


def _scan_title(text: str, pos: int) -> tuple[str, int] | None:
    """Scan a quoted or parenthesized title at pos; returns (title, end) or None."""
    closer = _TITLE_CLOSERS.get(text[pos])
    if closer is None:
        return None

    end = pos + 1
    while end < len(text):
        char = text[end]
        if char == closer:
            return unescape(text[pos + 1 : end]), end + 1
        end += 2 if char == "\\" else 1
    return None


def scan_link_tail(text: str, pos: int) -> LinkTail | None:
    """Scan ``(destination "title")`` starting at pos.

    Returns:
        LinkTail, or None when the text at pos is not a valid tail
    """
    if pos >= len(text) or text[pos] != "(":
        return None

    pos = _skip_whitespace(text, pos + 1)
    if pos >= len(text):
        return None
    if text[pos] == ")":
        return LinkTail("", None, pos + 1)

    destination = _scan_destination(text, pos)
    if destination is None:
        return None
    url, pos = destination

    pos = _skip_whitespace(text, pos)
    if pos >= len(text):
        return None
    if text[pos] == ")":
        return LinkTail(url, None, pos + 1)

    scanned_title = _scan_title(text, pos)
    if scanned_title is None:
        return None
    title, pos = scanned_title

    pos = _skip_whitespace(text, pos)
    if pos >= len(text) or text[pos] != ")":
        return None
    return LinkTail(url, title, pos + 1)


class LinkParsingMixin:
    """Mixin for link and image parsing.

    Required Host Attributes:
        - _max_link_depth: int

    Required Host Methods:
        - _parse_inline(text, location, *, inside_link, depth) -> tuple[Inline, ...]

    """

    _max_link_depth: int

    def _parse_inline(
        self,
        text: str,
        location: SourceLocation,
        *,
        inside_link: bool = False,
        depth: int = 0,
    ) -> tuple[Inline, ...]:
        """Parse inline content. Implemented by InlineParser."""
        raise NotImplementedError

    def _try_parse_link(
        self,
        text: str,
        pos: int,
        brackets: dict[int, int],
        location: SourceLocation,
        depth: int = 0,
    ) -> tuple[Link, int] | None:
        """Try to parse a link whose label opens at pos.

        The label is parsed recursively with links disabled inside it. Past
        the configured depth the brackets stay literal.

        Args:
            text: Inline text being tokenized
            pos: Index of the [
            brackets: bracket_pairs(text)
            location: Location given to the created nodes
            depth: Nesting depth of the current label
        """
        if depth >= self._max_link_depth:
            return None

        label_end = brackets.get(pos)
        if label_end is None:
            return None
        tail = scan_link_tail(text, label_end + 1)
        if tail is None:
            return None

        children = self._parse_inline(
            text[pos + 1 : label_end], location, inside_link=True, depth=depth + 1
        )
        return Link(location=location, url=tail.url, title=tail.title, children=children), tail.end

    def _try_parse_image(
        self, text: str, pos: int, brackets: dict[int, int], location: SourceLocation
    ) -> tuple[Image, int] | None:
        """Try to parse an image at pos (the ``!``); the alt text is kept verbatim."""
        if not text.startswith("![", pos):
            return None

        label_end = brackets.get(pos + 1)
        if label_end is None:
            return None
        tail = scan_link_tail(text, label_end + 1)
        if tail is None:
            return None

        alt = text[pos + 2 : label_end]
        return Image(location=location, url=tail.url, alt=alt, title=tail.title), tail.end
