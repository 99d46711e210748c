"""Theme lookup for md2html.

A theme is an HTML page template containing exactly one ``{{ body }}``
placeholder, which the renderer replaces with the converted document.

Themes are found by name: first as ``<name>.html`` in each user search
directory, in order, then among the templates bundled with this package
(default, dark, minimal).

Usage:
    from md2html.themes import ThemeResolver

    resolver = ThemeResolver(search_paths=["~/.md2html/themes"])
    template = resolver.resolve("dark")

Thread Safety:
    ThemeResolver holds only its search paths. resolve() reads files and
    keeps no state, so one resolver can be shared between threads.
"""

from __future__ import annotations

from collections.abc import Iterable
from importlib import resources
from pathlib import Path

from md2html.errors import InvalidTheme, ThemeNotFound
from md2html.renderers.html import BODY_PLACEHOLDER
from md2html.utils.logger import get_logger

logger = get_logger(__name__)

THEME_SUFFIX = ".html"


def bundled_themes() -> list[str]:
    """Names of the templates shipped with md2html."""
    return sorted(
        entry.name.removesuffix(THEME_SUFFIX)
        for entry in resources.files(__name__).iterdir()
        if entry.name.endswith(THEME_SUFFIX)
    )


def validate_template(name: str, template: str) -> str:
    """Check that template has exactly one body placeholder.

    Raises:
        InvalidTheme: If the placeholder is missing or repeated
    """
    count = template.count(BODY_PLACEHOLDER)
    if count != 1:
        raise InvalidTheme(
            name, f"expected exactly one {BODY_PLACEHOLDER} placeholder, found {count}"
        )
    return template


class ThemeResolver:
    """Resolve theme names to page templates.

    Usage:
        >>> ThemeResolver().resolve(None) is None
        True
        >>> "{{ body }}" in ThemeResolver().resolve("default")
        True

    """

    __slots__ = ("_search_paths",)

    def __init__(self, search_paths: Iterable[str | Path] = ()) -> None:
        """Initialize resolver.

        Args:
            search_paths: Directories searched for ``<name>.html`` before
                the bundled themes
        """
        self._search_paths = tuple(Path(p).expanduser() for p in search_paths)

    @property
    def search_paths(self) -> tuple[Path, ...]:
        return self._search_paths

    def available(self) -> list[str]:
        """Names of every theme this resolver can find."""
        names = set(bundled_themes())
        for directory in self._search_paths:
            if directory.is_dir():
                names.update(p.stem for p in directory.glob(f"*{THEME_SUFFIX}") if p.is_file())
        return sorted(names)

    def resolve(self, name: str | None) -> str | None:
        """Look up a theme template by name.

        Args:
            name: Theme name; None or "" means no theme

        Returns:
            The template text, or None when no theme was requested

        Raises:
            ThemeNotFound: If no search path or bundled theme has that name
            InvalidTheme: If the template cannot be read or lacks a single
                body placeholder
        """
        if not name:
            return None

        if "/" in name or "\\" in name:
            raise ThemeNotFound(name, self.available())

        for directory in self._search_paths:
            candidate = directory / f"{name}{THEME_SUFFIX}"
            if candidate.is_file():
                logger.debug("theme %r resolved to %s", name, candidate)
                try:
                    template = candidate.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as e:
                    raise InvalidTheme(name, str(e)) from e
                return validate_template(name, template)

        if name in bundled_themes():
            logger.debug("theme %r resolved to bundled template", name)
            template = resources.files(__name__).joinpath(f"{name}{THEME_SUFFIX}").read_text(
                encoding="utf-8"
            )
            return validate_template(name, template)

        raise ThemeNotFound(name, self.available())


def resolve_theme(name: str | None, search_paths: Iterable[str | Path] = ()) -> str | None:
    """Resolve a theme name with a one-off ThemeResolver."""
    return ThemeResolver(search_paths).resolve(name)


__all__ = [
    "THEME_SUFFIX",
    "ThemeResolver",
    "bundled_themes",
    "resolve_theme",
    "validate_template",
]
