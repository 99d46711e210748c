"""Exception classes for md2html.

The conversion engine itself never raises for malformed Markdown; these
errors belong to the collaborators around it (theme lookup, file I/O and
the command line).
"""

from __future__ import annotations

from collections.abc import Iterable


class Md2HtmlError(Exception):
    """Base exception for all md2html errors.

    The CLI catches this class, prints a single line and exits non-zero.
    """

    pass


class ThemeError(Md2HtmlError):
    """Base class for theme resolution failures."""

    pass


class ThemeNotFound(ThemeError):
    """Raised when a theme name does not match any known template."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        """Initialize with the requested name and the names that do exist.

        Args:
            name: Requested theme name
            available: Names of themes that could have been used
        """
        self.name = name
        self.available = tuple(sorted(available))

        message = f"theme '{name}' not found"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class InvalidTheme(ThemeError):
    """Raised when a theme template cannot host the rendered body."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"theme '{name}' is invalid: {reason}")


class IoError(Md2HtmlError):
    """Error reading the input document or writing the output.

    Wraps the underlying OSError (available as __cause__).
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize I/O error.

        Args:
            path: File path involved ("<stdout>" for standard output)
            message: Description of the failure
        """
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class InvalidArgument(Md2HtmlError):
    """Command-line usage error."""

    pass
