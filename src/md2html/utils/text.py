"""Text utilities.

Example:
    >>> from md2html.utils.text import slugify
    >>> slugify("Hello World!")
    'hello-world'
"""

from __future__ import annotations

import re

_NON_WORD = re.compile(r"[^\w\s-]")
_SEPARATORS = re.compile(r"[-\s]+")


def slugify(text: str, separator: str = "-") -> str:
    """Convert heading text to an anchor slug.

    Unicode word characters are kept, so non-Latin headings still produce
    readable anchors.

    Examples:
        >>> slugify("Getting Started")
        'getting-started'
        >>> slugify("Café & Co.")
        'café-co'
        >>> slugify("!!!")
        ''
    """
    if not text:
        return ""

    text = text.lower().strip()
    text = _NON_WORD.sub("", text)
    text = _SEPARATORS.sub(separator, text)
    return text.strip(separator)


def unique_slug(slug: str, seen: set[str]) -> str:
    """Return slug, suffixed with -1, -2, ... until it is not in seen.

    The returned value is added to seen.
    """
    candidate = slug or "section"
    base = candidate
    counter = 1
    while candidate in seen:
        candidate = f"{base}-{counter}"
        counter += 1
    seen.add(candidate)
    return candidate
