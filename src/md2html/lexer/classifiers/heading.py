"""ATX heading classifier mixin."""

from md2html.tokens import ClassifiedLine, LineRole

MAX_HEADING_LEVEL = 6


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

    def _try_classify_atx_heading(
        self, content: str, line: str, lineno: int, indent: int = 0
    ) -> ClassifiedLine | None:
        """Try to classify content as an ATX heading.

        ATX headings start with 1-6 # characters followed by space/tab/end.
        A run of seven or more # is not a heading. A closing # sequence is
        removed when preceded by a space.

        Args:
            content: Line content with leading whitespace stripped
            line: The full line
            lineno: Line number
            indent: Leading indentation in columns

        Returns:
            ClassifiedLine if valid heading, None otherwise.
        """
        level = 0
        content_len = len(content)
        while level < content_len and content[level] == "#":
            level += 1

        if level == 0 or level > MAX_HEADING_LEVEL:
            return None

        pos = level
        if pos < content_len and content[pos] not in " \t":
            return None

        text = content[pos:].strip()

        # Closing sequence: "# Title ##" -> "Title"
        if text.endswith("#"):
            trailing_start = len(text)
            while trailing_start > 0 and text[trailing_start - 1] == "#":
                trailing_start -= 1
            if trailing_start == 0:
                text = ""
            elif text[trailing_start - 1] in " \t":
                text = text[:trailing_start].rstrip()

        return ClassifiedLine(
            role=LineRole.HEADING,
            line=line,
            lineno=lineno,
            indent=indent,
            content=text,
            level=level,
        )
