"""Line classifier for the md2html parser.

Tags each source line with a structural role before block parsing.

Architecture:
lexer/
├── __init__.py          # Re-exports LineClassifier, classify_line, LexerMode
├── core.py              # LineClassifier (mixin composition)
├── indent.py            # Column-based indentation helpers
├── modes.py             # LexerMode enum
├── classifiers/         # One mixin per block construct
│   ├── thematic.py      # Thematic break
│   ├── heading.py       # ATX heading
│   ├── fence.py         # Fenced code
│   ├── quote.py         # Block quote
│   └── list.py          # List markers
└── scanners/            # Mode-specific dispatch
    ├── block.py         # Block mode (rule priority)
    └── fence.py         # Code fence mode

Usage:
    >>> from md2html.lexer import LineClassifier
    >>> [c.role.name for c in LineClassifier("# Hi\\n\\n- item").classify()]
    ['HEADING', 'BLANK', 'LIST_ITEM_MARKER']

"""

from md2html.lexer.core import LineClassifier, classify_line, split_lines
from md2html.lexer.modes import LexerMode

__all__ = ["LexerMode", "LineClassifier", "classify_line", "split_lines"]
