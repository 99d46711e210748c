"""Utility modules for md2html.

Provides:
- text: slugify, unique_slug for heading anchors
- logger: get_logger, configure_logging
"""

from md2html.utils.logger import configure_logging, get_logger
from md2html.utils.text import slugify, unique_slug

__all__ = [
    "configure_logging",
    "get_logger",
    "slugify",
    "unique_slug",
]
