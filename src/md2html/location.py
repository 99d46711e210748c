"""Source location tracking for AST nodes and diagnostics.

Every node in the document model carries a SourceLocation pointing at the
line (and column) of the block it was built from.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a node in the Markdown source.

    All positions are 1-indexed.

    Attributes:
        lineno: Starting line number
        col_offset: Starting column
        end_lineno: Last line covered by the node (optional)
        source_file: Source file path (optional)

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=1, source_file="README.md")
        >>> str(loc)
        'README.md:3:1'

    """

    lineno: int
    col_offset: int
    end_lineno: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format as "file:line:col" or "line:col"."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"
