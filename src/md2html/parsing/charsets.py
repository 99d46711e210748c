"""Character sets for O(1) classification.

All sets are frozensets: constant-time membership, immutable, built once
at import.

Usage:
    from md2html.parsing.charsets import ASCII_PUNCTUATION

    if char in ASCII_PUNCTUATION:
        ...
"""

# Characters a backslash can escape
ASCII_PUNCTUATION: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

# ASCII whitespace used by the flanking rules
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Inline special characters that stop a plain text run
INLINE_SPECIAL: frozenset[str] = frozenset("*_`[!\\\n")

# Emphasis delimiter characters
EMPHASIS_DELIMITERS: frozenset[str] = frozenset("*_")

# Valid fence characters
FENCE_CHARS: frozenset[str] = frozenset("`~")

# Digits of an ordered list marker
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

# List marker characters
UNORDERED_LIST_MARKERS: frozenset[str] = frozenset("-*+")

# Ordered list delimiters following the digits
ORDERED_LIST_DELIMITERS: frozenset[str] = frozenset(".)")

# Thematic break characters
THEMATIC_BREAK_CHARS: frozenset[str] = frozenset("-*_")


def is_whitespace(char: str) -> bool:
    """Check if character is whitespace; empty string (text boundary) counts."""
    return not char or char in WHITESPACE or char.isspace()
