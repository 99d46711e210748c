"""ContextVar-based parse configuration for md2html.

Configuration is set once per conversion and read by every stage of the
parser running in the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so parallel conversions never observe each other's configuration.

Usage:
    from md2html.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(tab_width=2)):
        doc = Parser(source).parse()

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Attributes:
        text_transformer: Optional callback applied to the raw inline text of
            every paragraph and heading before inline parsing
        tab_width: Tab stop used when measuring indentation
        max_link_depth: Recursion bound for parsing link labels

    """

    text_transformer: Callable[[str], str] | None = None
    tab_width: int = 4
    max_link_depth: int = 8

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from a dictionary.

        Unknown keys are ignored so that settings loaded from a larger
        configuration file can be passed through unfiltered.

        Example:
            >>> ParseConfig.from_dict({"tab_width": 2, "unknown": 1}).tab_width
            2

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "md2html_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get the parse configuration active in this context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set the parse configuration for the current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Use config for the duration of a with-block.

    The previous configuration is restored even if an exception is raised.
    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
