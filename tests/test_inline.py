"""Tests for the inline parser: text, code spans, escapes and line breaks."""

from __future__ import annotations

import pytest

from md2html.config import ParseConfig, parse_config_context
from md2html.location import SourceLocation
from md2html.nodes import CodeSpan, Emphasis, Image, LineBreak, Link, Text
from md2html.parsing.inline import InlineParser

LOC = SourceLocation(lineno=1, col_offset=1)


def inline(text: str) -> tuple:
    return InlineParser().parse(text, LOC)


def text(content: str) -> Text:
    return Text(location=LOC, content=content)


class TestPlainText:
    def test_empty(self) -> None:
        assert inline("") == ()

    def test_plain(self) -> None:
        assert inline("hello world") == (text("hello world"),)

    def test_adjacent_text_is_merged(self) -> None:
        assert inline("Hi! [not a link] ]") == (text("Hi! [not a link] ]"),)

    def test_nodes_carry_block_location(self) -> None:
        loc = SourceLocation(lineno=7, col_offset=3, source_file="x.md")
        (node,) = InlineParser().parse("word", loc)
        assert node.location == loc


class TestCodeSpans:
    def test_basic(self) -> None:
        assert inline("`code`") == (CodeSpan(location=LOC, code="code"),)

    def test_content_is_literal(self) -> None:
        assert inline("`*a* [b](c)`") == (CodeSpan(location=LOC, code="*a* [b](c)"),)

    def test_double_backticks_contain_single(self) -> None:
        assert inline("`` a`b ``") == (CodeSpan(location=LOC, code="a`b"),)

    def test_one_space_stripped_from_each_side(self) -> None:
        assert inline("`  x  `") == (CodeSpan(location=LOC, code=" x "),)

    def test_only_spaces_kept(self) -> None:
        assert inline("`  `") == (CodeSpan(location=LOC, code="  "),)

    def test_newline_becomes_space(self) -> None:
        assert inline("`a\nb`") == (CodeSpan(location=LOC, code="a b"),)

    def test_unmatched_backtick_is_literal(self) -> None:
        assert inline("`a") == (text("`a"),)

    def test_run_length_must_match(self) -> None:
        assert inline("``a`") == (text("``a`"),)

    def test_code_span_beats_emphasis(self) -> None:
        (em,) = inline("*a `*` b*")
        assert isinstance(em, Emphasis)
        assert em.children == (text("a "), CodeSpan(location=LOC, code="*"), text(" b"))


class TestEscapes:
    def test_escaped_punctuation_is_literal(self) -> None:
        assert inline(r"\*not emphasis\*") == (text("*not emphasis*"),)

    def test_escaped_brackets(self) -> None:
        assert inline(r"\[a\](b)") == (text("[a](b)"),)

    def test_escaped_backslash(self) -> None:
        assert inline("\\\\") == (text("\\"),)

    def test_backslash_before_letter_is_kept(self) -> None:
        assert inline(r"\a") == (text("\\a"),)

    def test_trailing_backslash(self) -> None:
        assert inline("end\\") == (text("end\\"),)

    def test_escaped_backtick(self) -> None:
        assert inline(r"\`x`") == (text("`x`"),)


class TestLineBreaks:
    def test_soft_break(self) -> None:
        assert inline("a\nb") == (text("a"), LineBreak(location=LOC, hard=False), text("b"))

    def test_hard_break_from_trailing_spaces(self) -> None:
        assert inline("a  \nb") == (text("a"), LineBreak(location=LOC, hard=True), text("b"))

    def test_single_trailing_space_is_soft(self) -> None:
        assert inline("a \nb") == (text("a"), LineBreak(location=LOC, hard=False), text("b"))

    def test_hard_break_from_backslash(self) -> None:
        assert inline("a\\\nb") == (text("a"), LineBreak(location=LOC, hard=True), text("b"))

    def test_leading_spaces_of_next_line_dropped(self) -> None:
        assert inline("a\n   b")[-1] == text("b")


class TestDegradation:
    """Constructs without a valid closer stay literal."""

    @pytest.mark.parametrize(
        "source",
        ["*a", "a*", "**a", "_a", "`a", "[a", "[a]", "[a](", "![a", "![a](", "[a](b", "a_b_c"],
    )
    def test_literal(self, source: str) -> None:
        assert inline(source) == (text(source),)


class TestConfiguration:
    def test_max_link_depth_zero_disables_links(self) -> None:
        parser = InlineParser(max_link_depth=0)
        assert parser.parse("[a](b)", LOC) == (text("[a](b)"),)

    def test_max_link_depth_from_config(self) -> None:
        with parse_config_context(ParseConfig(max_link_depth=0)):
            parser = InlineParser()
        assert parser.parse("[a](b)", LOC) == (text("[a](b)"),)

    def test_default_allows_links(self) -> None:
        (link,) = inline("[a](b)")
        assert isinstance(link, Link)

    def test_images_ignore_link_depth(self) -> None:
        (image,) = InlineParser(max_link_depth=0).parse("![a](b)", LOC)
        assert isinstance(image, Image)
