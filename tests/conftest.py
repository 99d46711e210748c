"""Shared fixtures for the md2html test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from md2html import Markdown
from md2html.config import reset_parse_config
from md2html.location import SourceLocation


@pytest.fixture(autouse=True)
def _default_parse_config() -> Iterator[None]:
    """Every test starts and ends with the default ParseConfig."""
    reset_parse_config()
    yield
    reset_parse_config()


@pytest.fixture
def md() -> Markdown:
    return Markdown()


@pytest.fixture
def loc() -> SourceLocation:
    return SourceLocation(lineno=1, col_offset=1)
