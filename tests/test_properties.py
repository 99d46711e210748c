"""Property-based tests for conversion invariants using Hypothesis.

These tests verify that certain properties always hold regardless of the
input, helping catch edge cases that example-based tests miss.
"""

import xml.etree.ElementTree as ET

from hypothesis import given, settings
from hypothesis import strategies as st

from md2html import Markdown, convert, parse
from md2html.lexer import LineClassifier

# Characters that are valid in XML text, plus every Markdown special
MARKDOWN_ALPHABET = st.sampled_from(
    list("abcXYZ019 \t\n*_`[]()!<>&\"'#->\\~.:/+=é漢")
)
markdown_text = st.text(alphabet=MARKDOWN_ALPHABET, max_size=400)

BLOCK_LINES = st.sampled_from(
    [
        "# Heading *em*",
        "## Heading with `code`",
        "plain text & more",
        "",
        "- item **strong**",
        "  - nested [link](http://x.com \"t\")",
        "1. first",
        "2) second",
        "> quoted <b>",
        "> > deeper",
        "```python",
        "```",
        "~~~",
        "---",
        "![img](a b.png)",
        "    indented",
        "text with trailing spaces  ",
    ]
)
markdown_documents = st.lists(BLOCK_LINES, max_size=30).map("\n".join)


def assert_well_formed(body: str) -> ET.Element:
    """Parse body wrapped in a root element; raises ParseError if unbalanced."""
    return ET.fromstring(f"<div>{body}</div>")


class TestWellFormedOutput:
    """Rendered HTML always has balanced tags."""

    @given(markdown_text)
    @settings(max_examples=300)
    def test_random_characters(self, source: str) -> None:
        assert_well_formed(convert(source))

    @given(markdown_documents)
    @settings(max_examples=300)
    def test_random_block_structure(self, source: str) -> None:
        assert_well_formed(convert(source))

    @given(markdown_documents)
    @settings(max_examples=50)
    def test_with_heading_ids(self, source: str) -> None:
        assert_well_formed(convert(source, heading_ids=True))


class TestEscaping:
    """Special characters in text never reach the output raw."""

    @given(st.text(alphabet="abc <>&\"", max_size=100))
    @settings(max_examples=200)
    def test_text_content_round_trips(self, content: str) -> None:
        """The text of the parsed output equals the source text."""
        source = "x" + content
        root = assert_well_formed(convert(source))
        assert "".join(root.itertext()) == source.rstrip()

    @given(st.text(alphabet="abc<>&\"", max_size=50))
    @settings(max_examples=100)
    def test_no_raw_specials_in_paragraph(self, content: str) -> None:
        html = convert("x" + content)
        assert html.startswith("<p>")
        assert html.endswith("</p>")
        inner = html.removeprefix("<p>").removesuffix("</p>")
        assert "<" not in inner
        assert ">" not in inner
        assert '"' not in inner


class TestNeverRaises:
    """The engine degrades malformed input instead of raising."""

    @given(st.text(max_size=200))
    @settings(max_examples=300)
    def test_any_text(self, source: str) -> None:
        assert isinstance(convert(source), str)

    @given(st.text(alphabet="*_`[]()!\\\n ", max_size=200))
    @settings(max_examples=300)
    def test_inline_specials(self, source: str) -> None:
        assert isinstance(convert(source), str)

    @given(st.text(alphabet=">-*+1. \n`", max_size=200))
    @settings(max_examples=300)
    def test_block_markers(self, source: str) -> None:
        assert isinstance(convert(source), str)


class TestDeterminism:
    @given(markdown_documents)
    @settings(max_examples=100)
    def test_same_input_same_output(self, source: str) -> None:
        assert convert(source) == convert(source)

    @given(markdown_documents)
    @settings(max_examples=100)
    def test_classification_is_repeatable(self, source: str) -> None:
        first = [line.role for line in LineClassifier(source).classify()]
        second = [line.role for line in LineClassifier(source).classify()]
        assert first == second

    @given(st.lists(markdown_documents, max_size=8))
    @settings(max_examples=25)
    def test_parallel_matches_sequential(self, sources: list[str]) -> None:
        md = Markdown()
        assert md.convert_many(sources, max_workers=4) == [md(s) for s in sources]

    @given(markdown_documents)
    @settings(max_examples=50)
    def test_heading_levels_valid(self, source: str) -> None:
        def walk(blocks):
            for block in blocks:
                yield block
                for attr in ("children", "items"):
                    inner = getattr(block, attr, ())
                    if inner and not isinstance(inner, str):
                        yield from walk(inner)

        for node in walk(parse(source).children):
            if type(node).__name__ == "Heading":
                assert 1 <= node.level <= 6
