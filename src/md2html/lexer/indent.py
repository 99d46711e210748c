"""Indentation measurement shared by the classifier and the block parser.

Spaces count as one column; tabs advance to the next tab stop.
"""

from __future__ import annotations

DEFAULT_TAB_WIDTH = 4

# Four or more columns of indentation disqualify every block marker
MAX_MARKER_INDENT = 3


def calc_indent(line: str, tab_width: int = DEFAULT_TAB_WIDTH) -> tuple[int, int]:
    """Calculate indent level and content start position.

    Args:
        line: Line content
        tab_width: Tab stop width

    Returns:
        (indent_columns, content_start_index)
    """
    indent = 0
    pos = 0
    line_len = len(line)
    while pos < line_len:
        char = line[pos]
        if char == " ":
            indent += 1
        elif char == "\t":
            indent += tab_width - (indent % tab_width)
        else:
            break
        pos += 1
    return indent, pos


def strip_columns(line: str, columns: int, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """Remove up to columns of leading whitespace from line.

    A tab that is only partly consumed leaves its remaining columns behind
    as spaces, so text after it keeps its visual position.

    Examples:
        >>> strip_columns("    code", 2)
        '  code'
        >>> strip_columns("\\tcode", 2)
        '  code'
        >>> strip_columns(" x", 4)
        'x'
    """
    col = 0
    pos = 0
    line_len = len(line)
    while pos < line_len and col < columns:
        char = line[pos]
        if char == " ":
            col += 1
        elif char == "\t":
            width = tab_width - (col % tab_width)
            if col + width > columns:
                return " " * (col + width - columns) + line[pos + 1 :]
            col += width
        else:
            break
        pos += 1
    return line[pos:]
