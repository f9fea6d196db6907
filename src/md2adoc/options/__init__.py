#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2adoc parsing and rendering.

Each stage of the pipeline has its own frozen Options dataclass. Use
``create_updated`` to derive a modified copy.
"""

from __future__ import annotations

from md2adoc.options.asciidoc import AsciiDocRendererOptions
from md2adoc.options.base import UNSET, BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2adoc.options.markdown import DEFAULT_PARSER_OPTIONS, MarkdownParserOptions

__all__ = [
    "UNSET",
    "AsciiDocRendererOptions",
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "DEFAULT_PARSER_OPTIONS",
    "MarkdownParserOptions",
]
