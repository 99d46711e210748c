"""List handling for the block parser.

Lists are opened, continued and closed through the container stack; this
mixin holds the list-specific decisions: which markers continue a list,
how list items are opened, and how blank lines decide tightness.

Tightness:
A blank line is remembered on the innermost list item it falls in. If the
next non-blank line continues that same item, the list is loose. If instead
the item ends (a sibling item starts, or the list ends), the blank line was
between items and the list stays tight.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from md2html.location import SourceLocation
from md2html.parsing.blocks.containers import ContainerFrame, ContainerType
from md2html.tokens import LineRole

if TYPE_CHECKING:
    from md2html.parsing.blocks.containers import ContainerStack
    from md2html.tokens import ClassifiedLine


def is_same_list_type(frame: ContainerFrame, marker: ClassifiedLine) -> bool:
    """Check if a list marker belongs to the list held by frame.

    Unordered lists continue only with the same bullet character; ordered
    lists only with the same delimiter ("." or ")").

    """
    if frame.container_type != ContainerType.LIST:
        return False
    return marker.ordered == frame.ordered and marker.delimiter == frame.delimiter


class ListParsingMixin:
    """Mixin for list parsing.

    Required Host Attributes:
        - _containers: ContainerStack
        - _source_file: str | None

    """

    _containers: ContainerStack
    _source_file: str | None

    def _open_list_item(self, marker: ClassifiedLine, column: int) -> None:
        """Open a list item, and a list around it unless one is already open.

        Args:
            marker: The LIST_ITEM_MARKER classification
            column: Columns already consumed by enclosing container prefixes
        """
        location = SourceLocation(
            lineno=marker.lineno,
            col_offset=column + marker.indent + 1,
            source_file=self._source_file,
        )
        current = self._containers.current()
        if is_same_list_type(current, marker):
            # Sibling item; a blank line before it was between items
            current.pending_blank = False
        else:
            self._containers.push(
                ContainerFrame(
                    container_type=ContainerType.LIST,
                    location=location,
                    ordered=marker.ordered,
                    delimiter=marker.delimiter,
                    start_number=marker.start,
                )
            )

        self._containers.push(
            ContainerFrame(
                container_type=ContainerType.LIST_ITEM,
                location=location,
                content_indent=marker.content_indent,
            )
        )

    def _keeps_list_open(self, frame: ContainerFrame, remainder: ClassifiedLine) -> bool:
        """Whether a list whose current item ended stays open for this line."""
        return remainder.role is LineRole.LIST_ITEM_MARKER and is_same_list_type(frame, remainder)

    def _note_blank_line(self, matched: int) -> None:
        """Remember a blank line on the innermost item that continued through it."""
        item = self._containers.deepest_item(matched)
        if item is not None:
            item.pending_blank = True

    def _note_content_line(self, matched: int) -> None:
        """Content followed a blank line inside the same item: the list is loose."""
        stack = self._containers
        for i in range(1, min(matched, len(stack))):
            frame = stack[i]
            if frame.pending_blank and frame.container_type == ContainerType.LIST_ITEM:
                stack[i - 1].is_loose = True
                frame.pending_blank = False
