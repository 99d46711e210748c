"""Block parsing subsystem for md2html.

Architecture:
Block parsing is split into logical modules:
- core: BlockParser, the per-line driver and leaf blocks
- containers: Container stack (document, block quotes, lists, list items)
- lists: List continuation and tight/loose detection

"""

from md2html.parsing.blocks.containers import ContainerFrame, ContainerStack, ContainerType
from md2html.parsing.blocks.core import BlockParser

__all__ = ["BlockParser", "ContainerFrame", "ContainerStack", "ContainerType"]
