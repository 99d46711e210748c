"""Reading Markdown sources and writing rendered HTML.

The conversion engine never touches the filesystem; these helpers are the
only place md2html performs I/O, and the only place IoError is raised.
"""

from __future__ import annotations

import sys
from pathlib import Path

from md2html.errors import IoError
from md2html.utils.logger import get_logger

logger = get_logger(__name__)

STDOUT_NAME = "<stdout>"


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def read_source(path: str | Path) -> str:
    """Read a Markdown file as UTF-8 text with normalized line endings.

    Raises:
        IoError: If the file is missing, unreadable or not valid UTF-8
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise IoError(str(path), "no such file") from e
    except UnicodeDecodeError as e:
        raise IoError(str(path), f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise IoError(str(path), e.strerror or str(e)) from e

    logger.debug("read %s: %d chars", path, len(text))
    return normalize_newlines(text)


def write_output(html: str, path: str | Path | None = None) -> None:
    """Write rendered HTML to path, or to standard output.

    A trailing newline is added when html does not end with one. The
    parent directory of path must already exist.

    Raises:
        IoError: If the destination cannot be written
    """
    if not html.endswith("\n"):
        html += "\n"

    if path is None:
        try:
            sys.stdout.write(html)
            sys.stdout.flush()
        except OSError as e:
            raise IoError(STDOUT_NAME, e.strerror or str(e)) from e
        return

    try:
        Path(path).write_text(html, encoding="utf-8")
    except OSError as e:
        raise IoError(str(path), e.strerror or str(e)) from e

    logger.debug("wrote %s: %d chars", path, len(html))


__all__ = ["STDOUT_NAME", "normalize_newlines", "read_source", "write_output"]
