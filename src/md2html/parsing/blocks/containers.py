"""Container stack for block parsing.

Open containers (document root, block quotes, lists, list items) live on an
explicit stack; nothing holds a pointer to its parent. Closing a frame turns
it into its node and appends that node to the frame below.

Usage:
    stack = ContainerStack()  # Initializes with DOCUMENT frame

    stack.push(ContainerFrame(ContainerType.BLOCK_QUOTE, location=loc))
    stack.add_block(paragraph)  # Goes to the block quote
    stack.pop()                 # BlockQuote node appended to the document

Invariant: stack[0] is always DOCUMENT, stack[-1] is the innermost container.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from md2html.location import SourceLocation
from md2html.nodes import Block, BlockQuote, List, ListItem


class ContainerType(Enum):
    """Types of block-level containers."""

    DOCUMENT = auto()  # Root container
    BLOCK_QUOTE = auto()  # Block quote (> prefix)
    LIST = auto()  # List (ordered or unordered); transparent for continuation
    LIST_ITEM = auto()  # Individual list item


@dataclass(slots=True)
class ContainerFrame:
    """A frame on the container stack.

    Attributes:
        container_type: The type of container
        location: Where the container started
        content_indent: Columns a line must be indented by to continue a
            list item
        children: Blocks (or, for lists, ListItem nodes) closed so far
        ordered: For lists, whether the list is ordered
        delimiter: For lists, the bullet character or ordered delimiter
        start_number: For ordered lists, the starting number
        is_loose: For lists, whether a blank line separated content of an item
        pending_blank: A blank line was seen and nothing has followed it yet

    """

    container_type: ContainerType
    location: SourceLocation
    content_indent: int = 0
    children: list[Block] = field(default_factory=list)

    # For lists
    ordered: bool = False
    delimiter: str = ""
    start_number: int = 1

    # Tightness tracking
    is_loose: bool = False
    pending_blank: bool = False

    def close(self) -> Block:
        """Build the immutable node for this container."""
        match self.container_type:
            case ContainerType.BLOCK_QUOTE:
                return BlockQuote(location=self.location, children=tuple(self.children))
            case ContainerType.LIST_ITEM:
                return ListItem(location=self.location, children=tuple(self.children))
            case ContainerType.LIST:
                items = tuple(child for child in self.children if isinstance(child, ListItem))
                return List(
                    location=self.location,
                    items=items,
                    ordered=self.ordered,
                    start=self.start_number,
                    tight=not self.is_loose,
                )
            case _:
                raise ValueError("Cannot close document frame")


@dataclass
class ContainerStack:
    """Manages the stack of open containers during block parsing.

    Usage:
        stack = ContainerStack()  # Initializes with DOCUMENT frame
        stack.push(frame)         # Open a container
        stack.pop()               # Close it into its parent
        stack.pop_until(index)    # Close everything above index

    """

    _stack: list[ContainerFrame] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Initialize with DOCUMENT frame."""
        self._stack = [
            ContainerFrame(
                container_type=ContainerType.DOCUMENT,
                location=SourceLocation(lineno=1, col_offset=1),
            )
        ]

    def __len__(self) -> int:
        return len(self._stack)

    def __getitem__(self, index: int) -> ContainerFrame:
        return self._stack[index]

    @property
    def root(self) -> ContainerFrame:
        """The DOCUMENT frame."""
        return self._stack[0]

    def current(self) -> ContainerFrame:
        """Get the innermost container."""
        return self._stack[-1]

    def push(self, frame: ContainerFrame) -> None:
        """Push a new container onto the stack."""
        self._stack.append(frame)

    def add_block(self, block: Block) -> None:
        """Append a finished block to the innermost container."""
        self._stack[-1].children.append(block)

    def pop(self) -> ContainerFrame:
        """Close the innermost container into its parent.

        A list item that ended on a blank line hands the blank to its list;
        a list that ended on a blank line hands it to the item containing
        the list. Blank lines that end up followed by a sibling item are
        discarded when that item opens.

        Raises:
            ValueError: If attempting to pop the document frame
        """
        if len(self._stack) <= 1:
            raise ValueError("Cannot pop document frame")

        frame = self._stack.pop()
        parent = self._stack[-1]
        parent.children.append(frame.close())

        if frame.pending_blank and frame.container_type in (
            ContainerType.LIST_ITEM,
            ContainerType.LIST,
        ):
            if parent.container_type in (ContainerType.LIST, ContainerType.LIST_ITEM):
                parent.pending_blank = True

        return frame

    def pop_until(self, target_index: int) -> list[ContainerFrame]:
        """Pop containers until stack has target_index + 1 elements.

        Returns:
            List of popped frames (innermost first)
        """
        popped = []
        while len(self._stack) > target_index + 1:
            popped.append(self.pop())
        return popped

    def deepest_item(self, limit: int) -> ContainerFrame | None:
        """Innermost LIST_ITEM among the first limit frames."""
        for i in range(min(limit, len(self._stack)) - 1, 0, -1):
            if self._stack[i].container_type == ContainerType.LIST_ITEM:
                return self._stack[i]
        return None
