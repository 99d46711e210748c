"""Logging helpers for md2html.

Example:
    >>> from md2html.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsed %d blocks", 3)
"""

from __future__ import annotations

import logging

_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the "md2html." namespace.

    Example:
        >>> get_logger("mymodule").name
        'md2html.mymodule'
    """
    if not (name == "md2html" or name.startswith("md2html.")):
        name = f"md2html.{name}"
    return logging.getLogger(name)


def configure_logging(*, verbose: bool = False) -> None:
    """Send md2html log records to stderr.

    Used by the command line; library users configure logging themselves.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_FORMAT,
    )
