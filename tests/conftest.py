"""Pytest configuration and shared fixtures for the md2adoc test suite.

This module provides shared fixtures and test configuration used across the
unit and integration tests.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from md2adoc.ast import Document
from md2adoc.options.asciidoc import AsciiDocRendererOptions
from md2adoc.parsers.markdown import MarkdownParser
from md2adoc.renderers.asciidoc import AsciiDocRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def render():
    """Render a Document with a fresh AsciiDocRenderer.

    Returns
    -------
    callable
        ``render(doc, attributes=None, **options) -> str``

    """

    def _render(doc: Document, attributes=None, **options) -> str:
        renderer = AsciiDocRenderer(AsciiDocRendererOptions(**options) if options else None)
        return renderer.render_to_string(doc, attributes)

    return _render


@pytest.fixture
def parse():
    """Parse Markdown text with default (GFM) parser options."""

    def _parse(text: str) -> Document:
        return MarkdownParser().parse(text)

    return _parse


@pytest.fixture
def markdown_file(tmp_path: Path):
    """Create a Markdown file in a temporary directory.

    Returns
    -------
    callable
        ``markdown_file(content, name="doc.md", encoding="utf-8") -> Path``

    """

    def _create(content: str, name: str = "doc.md", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return path

    return _create
