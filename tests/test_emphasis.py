"""Edge case tests for emphasis parsing.

These tests exercise delimiter run pairing: flanking, nesting, leftover
characters and the intraword rule for underscores.
"""

import pytest

from md2html import Markdown
from md2html.nodes import CodeSpan, Emphasis, Link, Paragraph, Strong, Text


class TestEmphasisBasics:
    """Single and double delimiter runs."""

    @pytest.fixture
    def md(self) -> Markdown:
        return Markdown()

    @pytest.mark.parametrize("source", ["*a*", "_a_"])
    def test_emphasis(self, md: Markdown, source: str) -> None:
        assert md(source) == "<p><em>a</em></p>"

    @pytest.mark.parametrize("source", ["**a**", "__a__"])
    def test_strong(self, md: Markdown, source: str) -> None:
        assert md(source) == "<p><strong>a</strong></p>"

    def test_strong_inside_emphasis(self, md: Markdown) -> None:
        assert md("***a***") == "<p><em><strong>a</strong></em></p>"

    def test_emphasis_inside_strong(self, md: Markdown) -> None:
        assert md("**a *b* c**") == "<p><strong>a <em>b</em> c</strong></p>"

    def test_mixed_characters_do_not_pair(self, md: Markdown) -> None:
        assert md("*a_") == "<p>*a_</p>"

    def test_leftover_opener_character(self, md: Markdown) -> None:
        assert md("**a*") == "<p>*<em>a</em></p>"

    def test_leftover_closer_character(self, md: Markdown) -> None:
        assert md("*a**") == "<p><em>a</em>*</p>"

    def test_two_emphasized_words(self, md: Markdown) -> None:
        assert md("*a* and *b*") == "<p><em>a</em> and <em>b</em></p>"


class TestFlanking:
    """Whitespace adjacency decides whether runs open or close."""

    @pytest.fixture
    def md(self) -> Markdown:
        return Markdown()

    def test_spaced_asterisks_are_literal(self, md: Markdown) -> None:
        assert md("2 * 3 * 4") == "<p>2 * 3 * 4</p>"

    def test_opener_followed_by_space(self, md: Markdown) -> None:
        assert md("* a*") == "<ul>\n<li>a*</li>\n</ul>"

    def test_closer_preceded_by_space(self, md: Markdown) -> None:
        assert md("x *a *") == "<p>x *a *</p>"

    def test_intraword_asterisk(self, md: Markdown) -> None:
        assert md("un*frigging*believable") == "<p>un<em>frigging</em>believable</p>"

    def test_intraword_underscore_is_literal(self, md: Markdown) -> None:
        assert md("snake_case_name") == "<p>snake_case_name</p>"

    def test_underscore_around_punctuation(self, md: Markdown) -> None:
        assert md("(_a_)") == "<p>(<em>a</em>)</p>"


class TestEmphasisWithMixedContent:
    """Emphasis around other inline elements."""

    @pytest.fixture
    def md(self) -> Markdown:
        return Markdown()

    def test_emphasis_around_code(self, md: Markdown) -> None:
        doc = md.parse("*before `code` after*")
        para = doc.children[0]
        assert isinstance(para, Paragraph)
        (em,) = para.children
        assert isinstance(em, Emphasis)
        assert any(isinstance(c, CodeSpan) for c in em.children)

    def test_emphasis_around_link(self, md: Markdown) -> None:
        doc = md.parse("*click [here](url) now*")
        (em,) = doc.children[0].children
        assert isinstance(em, Emphasis)
        assert any(isinstance(c, Link) for c in em.children)

    def test_emphasis_inside_link_text(self, md: Markdown) -> None:
        doc = md.parse("[**bold**](url)")
        (link,) = doc.children[0].children
        assert isinstance(link, Link)
        assert isinstance(link.children[0], Strong)

    def test_delimiters_do_not_cross_link_boundary(self, md: Markdown) -> None:
        doc = md.parse("*[a*](b)")
        para = doc.children[0]
        assert isinstance(para.children[0], Text)
        assert para.children[0].content == "*"
        (link,) = [c for c in para.children if isinstance(c, Link)]
        assert link.children == (Text(location=link.location, content="a*"),)

    def test_unclosed_emphasis_in_heading(self, md: Markdown) -> None:
        assert md("# *open") == "<h1>*open</h1>"


class TestUnmatchedDelimiters:
    """Runs that find no opener stay literal and do not block later pairs."""

    @pytest.fixture
    def md(self) -> Markdown:
        return Markdown()

    def test_closer_between_pairs(self, md: Markdown) -> None:
        assert md("*a* b* *c*") == "<p><em>a</em> b* <em>c</em></p>"

    def test_failed_closer_can_open_later(self, md: Markdown) -> None:
        assert md("a*b*") == "<p>a<em>b</em></p>"

    def test_other_character_unaffected(self, md: Markdown) -> None:
        assert md("_a b* _c_") == "<p>_a b* <em>c</em></p>"

    def test_many_closers(self, md: Markdown) -> None:
        source = " ".join(["a*"] * 2000)
        assert md(source) == f"<p>{source}</p>"

    def test_many_openers(self, md: Markdown) -> None:
        source = " ".join(["*a"] * 2000)
        assert md(source) == f"<p>{source}</p>"
