"""Line classifier operating modes."""

from __future__ import annotations

from enum import Enum, auto


class LexerMode(Enum):
    """Classifier operating modes.

    - BLOCK: Between blocks, every rule applies
    - CODE_FENCE: Inside a fenced code block, only the matching close is recognized

    """

    BLOCK = auto()
    CODE_FENCE = auto()
