"""Command-line interface: ``md2html <input> [-o FILE] [-t THEME]``.

Exit status is 0 on success, 1 when conversion fails (missing input,
unknown or invalid theme, write failure) and 2 on usage errors.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import NoReturn

from md2html import __version__, convert
from md2html.errors import InvalidArgument, Md2HtmlError
from md2html.files import read_source, write_output
from md2html.themes import ThemeResolver
from md2html.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors as InvalidArgument."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgument(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="md2html",
        description="Convert a Markdown file to HTML.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("input", type=str, help="Path to Markdown file")
    parser.add_argument(
        "-o", "--output", type=str, default=None, help="Output HTML path (default: stdout)"
    )
    parser.add_argument(
        "-t",
        "--theme",
        type=str,
        default=None,
        help="Wrap the body in a theme template (bundled: default, dark, minimal)",
    )
    parser.add_argument(
        "--theme-dir",
        action="append",
        default=[],
        metavar="DIR",
        help="Directory searched for <theme>.html before the bundled themes (repeatable)",
    )
    parser.add_argument(
        "--heading-ids", action="store_true", help="Add slug id attributes to headings"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace) -> None:
    """Convert one file as described by parsed arguments.

    Raises:
        Md2HtmlError: On any I/O or theme failure; nothing is written then
    """
    source = read_source(args.input)
    template = ThemeResolver(args.theme_dir).resolve(args.theme)

    html = convert(
        source,
        template=template,
        heading_ids=args.heading_ids,
        source_file=args.input,
    )
    write_output(html, args.output)
    logger.info("converted %s -> %s", args.input, args.output or "<stdout>")


def main(argv: Sequence[str] | None = None) -> int:
    try:
        args = build_parser().parse_args(argv)
    except InvalidArgument as e:
        print(f"md2html: error: {e}", file=sys.stderr)
        return EXIT_USAGE
    configure_logging(verbose=args.verbose)

    try:
        run(args)
    except Md2HtmlError as e:
        print(f"md2html: error: {e}", file=sys.stderr)
        return EXIT_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
