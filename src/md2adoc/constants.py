#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/constants.py
"""Constants and default values for md2adoc.

This module centralizes hardcoded values and default configuration constants
used across the library. Constants are organized by category:

1. Type Definitions - Literal types and type aliases
2. Markdown Parsing - Defaults for the mistune adapter
3. AsciiDoc Rendering - Defaults for the renderer
4. Extensions - Front matter and TOC directives
5. Output - File extensions and encodings
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

WrapMode = Literal["preserve", "none", "ventilate"]
HtmlPassthroughMode = Literal["pass-through", "drop"]
SourceStyle = Literal["bare", "source"]
MarkdownInput = Literal["GFM", "markdown"]

WRAP_MODES: tuple[str, ...] = ("preserve", "none", "ventilate")
HTML_PASSTHROUGH_MODES: tuple[str, ...] = ("pass-through", "drop")
SOURCE_STYLES: tuple[str, ...] = ("bare", "source")
MARKDOWN_INPUTS: tuple[str, ...] = ("GFM", "markdown")

# =============================================================================
# Markdown Parsing
# =============================================================================

DEFAULT_MARKDOWN_INPUT: MarkdownInput = "GFM"
DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_TASK_LISTS = True
DEFAULT_PARSE_FOOTNOTES = True
DEFAULT_PARSE_DEFINITION_LISTS = False
DEFAULT_HARD_WRAP = False

# =============================================================================
# AsciiDoc Rendering
# =============================================================================

DEFAULT_WRAP_MODE: WrapMode = "preserve"
DEFAULT_HEADING_OFFSET = 0
DEFAULT_AUTO_IDS = False
DEFAULT_AUTO_ID_PREFIX = "_"
DEFAULT_AUTO_ID_SEPARATOR = "_"
DEFAULT_LAZY_IDS = False
DEFAULT_SOURCE_STYLE: SourceStyle = "bare"
DEFAULT_HTML_PASSTHROUGH_MODE: HtmlPassthroughMode = "pass-through"
DEFAULT_ESCAPE_ATTRIBUTE_REFERENCES = True

ASCIIDOC_MAX_SECTION_MARKERS = 6

# Labels recognized at the start of a paragraph or quote as admonitions
ADMONITION_LABELS: dict[str, str] = {
    "note": "NOTE",
    "tip": "TIP",
    "important": "IMPORTANT",
    "caution": "CAUTION",
    "warning": "WARNING",
}

# Separator used by the bold "menu path" idiom, e.g. **File > Save**
MENU_SEPARATOR = " > "

# Attribute registered when UI macros (menu, kbd) are emitted
EXPERIMENTAL_ATTRIBUTE = "experimental"

# Attributes that are consumed by the header rather than emitted as lines
HEADER_ONLY_ATTRIBUTES: frozenset[str] = frozenset({"doctitle", "doctype"})

# Front matter keys with no AsciiDoc counterpart
IGNORED_FRONT_MATTER_KEYS: frozenset[str] = frozenset({"layout"})

# =============================================================================
# Extensions
# =============================================================================

YAML_FRONT_MATTER_DELIMITER = "---"
TOML_FRONT_MATTER_DELIMITER = "+++"

TOC_DIRECTIVE_PATTERN = re.compile(r"^<!-- TOC .*?<!-- /TOC -->", re.MULTILINE | re.DOTALL)
TOC_MACRO = "toc::[]"

# =============================================================================
# Output
# =============================================================================

ASCIIDOC_EXTENSION = ".adoc"
OUTPUT_ENCODING = "utf-8"

# Encodings tried, in order, after strict UTF-8 and chardet detection
FALLBACK_ENCODINGS: tuple[str, ...] = ("cp1252", "latin-1")

# Minimum chardet confidence to trust a detected encoding
ENCODING_DETECTION_CONFIDENCE = 0.7
