"""Emphasis parsing for the inline parser.

Pairs delimiter runs of ``*`` and ``_`` into Emphasis and Strong nodes.

Flanking:
- A run can open when it is not followed by whitespace or the end of text.
- A run can close when it is not preceded by whitespace or the start of text.
- ``_`` cannot open right after a letter or digit, nor close right before
  one, so snake_case_words stay literal.

Matching:
Closers are processed left to right. Each closer pairs with the nearest
preceding run of the same character that can open. Two characters are
consumed from both runs when both have at least two (Strong), otherwise one
(Emphasis). Leftover characters stay in play, so ``***x***`` becomes Strong
nested in Emphasis. Runs that never pair become literal text.

Thread Safety:
All methods are stateless; working state lives in local variables.

"""

from __future__ import annotations

from dataclasses import dataclass

from md2html.location import SourceLocation
from md2html.nodes import CodeSpan, Emphasis, Inline, LineBreak, Strong, Text
from md2html.parsing.charsets import is_whitespace
from md2html.parsing.inline.tokens import (
    CodeSpanToken,
    DelimiterToken,
    HardBreakToken,
    InlineToken,
    NodeToken,
    SoftBreakToken,
    TextToken,
)


@dataclass(slots=True)
class DelimiterRun:
    """Mutable view of a DelimiterToken while pairing runs."""

    char: str
    count: int
    can_open: bool
    can_close: bool


class EmphasisMixin:
    """Mixin for emphasis delimiter processing.

    Required Host Attributes: None

    Required Host Methods: None

    """

    def _flanking(self, before: str, after: str, delim: str) -> tuple[bool, bool]:
        """Return (can_open, can_close) for a delimiter run.

        Args:
            before: Character before the run ("" at start of text)
            after: Character after the run ("" at end of text)
            delim: The delimiter character
        """
        can_open = not is_whitespace(after)
        can_close = not is_whitespace(before)
        if delim == "_":
            if before.isalnum():
                can_open = False
            if after.isalnum():
                can_close = False
        return can_open, can_close

    def _process_emphasis(
        self, tokens: list[InlineToken], location: SourceLocation
    ) -> tuple[Inline, ...]:
        """Pair delimiter runs and build the inline nodes.

        Args:
            tokens: Output of the tokenizer
            location: Location given to every created node

        Returns:
            Inline nodes with adjacent text merged
        """
        items: list[Inline | DelimiterRun] = []
        for token in tokens:
            match token:
                case DelimiterToken(char=char, run_length=count, can_open=opens, can_close=closes):
                    items.append(DelimiterRun(char, count, opens, closes))
                case TextToken(content=content):
                    items.append(Text(location=location, content=content))
                case CodeSpanToken(code=code):
                    items.append(CodeSpan(location=location, code=code))
                case NodeToken(node=node):
                    items.append(node)
                case HardBreakToken():
                    items.append(LineBreak(location=location, hard=True))
                case SoftBreakToken():
                    items.append(LineBreak(location=location, hard=False))

        # Per character, the lowest index that can still hold an opener
        bottom = {"*": 0, "_": 0}
        closer_idx = 0
        while closer_idx < len(items):
            closer = items[closer_idx]
            if not isinstance(closer, DelimiterRun) or not closer.can_close or closer.count == 0:
                closer_idx += 1
                continue

            opener_idx = self._find_opener(items, closer_idx, closer.char, bottom[closer.char])
            if opener_idx == -1:
                bottom[closer.char] = closer_idx
                closer_idx += 1
                continue

            opener = items[opener_idx]
            assert isinstance(opener, DelimiterRun)
            use_count = 2 if opener.count >= 2 and closer.count >= 2 else 1
            opener.count -= use_count
            closer.count -= use_count

            children = self._finish(items[opener_idx + 1 : closer_idx], location)
            node: Inline
            if use_count == 2:
                node = Strong(location=location, children=children)
            else:
                node = Emphasis(location=location, children=children)

            items[opener_idx + 1 : closer_idx] = [node]
            for char in bottom:
                bottom[char] = min(bottom[char], opener_idx + 1)
            # Same closer again: it may have characters left
            closer_idx = opener_idx + 2

        return self._finish(items, location)

    def _find_opener(
        self,
        items: list[Inline | DelimiterRun],
        closer_idx: int,
        char: str,
        bottom: int = 0,
    ) -> int:
        """Index of the nearest preceding run that can open, or -1.

        Only indices from bottom up are searched. A failed search leaves
        nothing that can open below the closer, so callers raise bottom to
        it and unmatched runs cost linear time overall.
        """
        for idx in range(closer_idx - 1, bottom - 1, -1):
            item = items[idx]
            if (
                isinstance(item, DelimiterRun)
                and item.char == char
                and item.can_open
                and item.count > 0
            ):
                return idx
        return -1

    def _finish(
        self, items: list[Inline | DelimiterRun], location: SourceLocation
    ) -> tuple[Inline, ...]:
        """Turn leftover runs into text and merge adjacent Text nodes."""
        result: list[Inline] = []
        for item in items:
            if isinstance(item, DelimiterRun):
                if item.count == 0:
                    continue
                item = Text(location=location, content=item.char * item.count)
            if isinstance(item, Text) and result and isinstance(result[-1], Text):
                result[-1] = Text(location=location, content=result[-1].content + item.content)
            else:
                result.append(item)
        return tuple(result)
