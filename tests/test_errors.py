"""Tests for the md2html exception hierarchy."""

import pytest

from md2html import Markdown, convert, parse
from md2html.errors import (
    InvalidArgument,
    InvalidTheme,
    IoError,
    Md2HtmlError,
    ThemeError,
    ThemeNotFound,
)
from md2html.lexer import classify_line
from md2html.text import extract_text
from md2html.tokens import LineRole


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            ThemeNotFound("x"),
            InvalidTheme("x", "reason"),
            IoError("a.md", "no such file"),
            InvalidArgument("bad usage"),
        ],
    )
    def test_all_derive_from_base(self, error: Exception) -> None:
        assert isinstance(error, Md2HtmlError)

    def test_theme_errors(self) -> None:
        assert issubclass(ThemeNotFound, ThemeError)
        assert issubclass(InvalidTheme, ThemeError)
        assert not issubclass(IoError, ThemeError)


class TestMessages:
    def test_theme_not_found_lists_available(self) -> None:
        err = ThemeNotFound("neon", ["minimal", "dark"])
        assert str(err) == "theme 'neon' not found (available: dark, minimal)"
        assert err.available == ("dark", "minimal")

    def test_theme_not_found_without_alternatives(self) -> None:
        assert str(ThemeNotFound("neon")) == "theme 'neon' not found"

    def test_invalid_theme(self) -> None:
        err = InvalidTheme("t", "no placeholder")
        assert str(err) == "theme 't' is invalid: no placeholder"
        assert err.reason == "no placeholder"

    def test_io_error(self) -> None:
        err = IoError("in.md", "permission denied")
        assert str(err) == "in.md: permission denied"
        assert err.path == "in.md"
        assert err.message == "permission denied"


class TestEngineNeverRaises:
    """Malformed Markdown degrades instead of raising."""

    @pytest.mark.parametrize(
        "source",
        [
            "```",
            "> ```",
            "- ```\n",
            "[[[[[[[[[[",
            "]]]]]]",
            "*" * 100,
            "`" * 50,
            "> " * 50 + "deep",
            "".join(f"{'  ' * i}- level {i}\n" for i in range(50)),
            "![](",
            "\\",
            "\t\t\t",
            "#######",
            "1.",
            "\r\n\r\n",
        ],
    )
    def test_no_exception(self, source: str) -> None:
        assert isinstance(convert(source), str)


class TestDeepNesting:
    """Nesting depth is limited by memory, not by the recursion limit."""

    DEPTH = 2000

    def test_classifier_peels_every_quote_marker(self) -> None:
        line = classify_line(">" * self.DEPTH + " a")
        markers = 0
        while line.role is LineRole.BLOCKQUOTE_MARKER:
            markers += 1
            assert line.inner is not None
            line = line.inner
        assert markers == self.DEPTH
        assert line.role is LineRole.PARAGRAPH_TEXT
        assert line.content == "a"

    def test_deep_block_quote(self) -> None:
        html = convert(">" * self.DEPTH + " a")
        opening = "<blockquote>\n" * self.DEPTH
        closing = "</blockquote>\n" * self.DEPTH
        assert html == opening + "<p>a</p>\n" + closing.rstrip("\n")

    def test_deep_block_quote_continues(self) -> None:
        source = ">" * self.DEPTH + " a\n" + ">" * self.DEPTH + " b"
        assert "<p>a\nb</p>" in convert(source)

    def test_deep_block_quote_text(self) -> None:
        doc = parse(">" * self.DEPTH + " a")
        assert extract_text(doc) == "a"

    def test_deep_list(self) -> None:
        source = "".join(f"{'  ' * i}- x\n" for i in range(500))
        html = convert(source)
        assert html.count("<ul>") == 500
        assert html.count("<li>x") == 500
        assert html.endswith("</li>\n</ul>")

    def test_deep_strong(self) -> None:
        half = self.DEPTH // 2
        html = convert("*" * self.DEPTH + "a" + "*" * self.DEPTH)
        assert html == "<p>" + "<strong>" * half + "a" + "</strong>" * half + "</p>"

    def test_deep_strong_heading_id(self) -> None:
        md = Markdown(heading_ids=True)
        html = md("# " + "*" * self.DEPTH + "a" + "*" * self.DEPTH)
        assert html.startswith('<h1 id="a">')
