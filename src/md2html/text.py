"""Extract plain text from document nodes.

Used for heading slugs and heading listings.

Example:
    >>> from md2html import parse, extract_text
    >>> doc = parse("# Hello **World**")
    >>> extract_text(doc.children[0])
    'Hello World'
"""

from collections.abc import Iterator

from md2html.nodes import (
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strong,
    Text,
)


def extract_text(node: Node) -> str:
    """Extract plain text from any node.

    Inline content is concatenated; block children are joined with a
    space. Line breaks contribute a space; images contribute their alt text.

    The tree is walked with an explicit stack of (children left to visit,
    collected parts, separator) entries, so deeply nested documents do not
    hit the recursion limit.

    Args:
        node: Any node (block or inline).

    Returns:
        Concatenated plain text from the node and its descendants.

    """
    root_parts: list[str] = []
    stack: list[tuple[Iterator[Node], list[str], str]] = [(iter((node,)), root_parts, "")]

    while stack:
        pending, parts, separator = stack[-1]
        child = next(pending, None)
        if child is None:
            stack.pop()
            if stack:
                stack[-1][1].append(separator.join(parts))
            continue

        match child:
            case Text():
                parts.append(child.content)
            case CodeSpan() | CodeBlock():
                parts.append(child.code)
            case Image():
                parts.append(child.alt)
            case LineBreak():
                parts.append(" ")
            case Emphasis() | Strong() | Link() | Paragraph() | Heading():
                stack.append((iter(child.children), [], ""))
            case List():
                stack.append((iter(child.items), [], " "))
            case BlockQuote() | ListItem() | Document():
                stack.append((iter(child.children), [], " "))
            case _:
                parts.append("")

    return "".join(root_parts)
