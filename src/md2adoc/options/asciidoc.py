#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/options/asciidoc.py
"""Configuration options for AsciiDoc rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from md2adoc.constants import (
    DEFAULT_AUTO_ID_PREFIX,
    DEFAULT_AUTO_ID_SEPARATOR,
    DEFAULT_AUTO_IDS,
    DEFAULT_ESCAPE_ATTRIBUTE_REFERENCES,
    DEFAULT_HEADING_OFFSET,
    DEFAULT_HTML_PASSTHROUGH_MODE,
    DEFAULT_LAZY_IDS,
    DEFAULT_SOURCE_STYLE,
    DEFAULT_WRAP_MODE,
    HTML_PASSTHROUGH_MODES,
    SOURCE_STYLES,
    WRAP_MODES,
    HtmlPassthroughMode,
    SourceStyle,
    WrapMode,
)
from md2adoc.exceptions import InvalidOptionsError
from md2adoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class AsciiDocRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-AsciiDoc rendering.

    Parameters
    ----------
    wrap : {"preserve", "none", "ventilate"}, default "preserve"
        How soft line breaks inside paragraphs are rendered:
        - "preserve": keep the source line breaks
        - "none": join the lines of a paragraph with spaces
        - "ventilate": one sentence per line
    heading_offset : int, default 0
        Number of levels added to every section heading. The document
        title is never shifted.
    auto_ids : bool, default False
        Emit an explicit ``[#id]`` anchor above each section heading.
    auto_id_prefix : str, default "_"
        Prefix for generated section ids.
    auto_id_separator : str, default "_"
        Word separator for generated section ids.
    lazy_ids : bool, default False
        With ``auto_ids``, skip anchors that match the id AsciiDoc would
        generate on its own.
    imagesdir : str or None, default None
        When set, image targets under this directory are written relative
        to it and an ``:imagesdir:`` attribute is registered.
    source_style : {"bare", "source"}, default "bare"
        Block attribute style for fenced code: ``[,ruby]`` or ``[source,ruby]``.
    html_passthrough_mode : {"pass-through", "drop"}, default "pass-through"
        How raw HTML is handled: wrapped in passthrough blocks or dropped.
    escape_attribute_references : bool, default True
        Escape ``{name}`` in text so it is not read as an attribute reference.

    """

    wrap: WrapMode = field(
        default=DEFAULT_WRAP_MODE,
        metadata={"help": "Soft line break handling", "choices": list(WRAP_MODES), "importance": "core"},
    )
    heading_offset: int = field(
        default=DEFAULT_HEADING_OFFSET,
        metadata={"help": "Levels added to every section heading", "type": int, "importance": "core"},
    )
    auto_ids: bool = field(
        default=DEFAULT_AUTO_IDS,
        metadata={"help": "Emit explicit ids above section headings", "importance": "advanced"},
    )
    auto_id_prefix: str = field(
        default=DEFAULT_AUTO_ID_PREFIX,
        metadata={"help": "Prefix for generated section ids", "importance": "advanced"},
    )
    auto_id_separator: str = field(
        default=DEFAULT_AUTO_ID_SEPARATOR,
        metadata={"help": "Word separator for generated section ids", "importance": "advanced"},
    )
    lazy_ids: bool = field(
        default=DEFAULT_LAZY_IDS,
        metadata={"help": "Omit generated ids that match AsciiDoc's own", "importance": "advanced"},
    )
    imagesdir: Optional[str] = field(
        default=None,
        metadata={"help": "Image directory to strip from image targets", "importance": "core"},
    )
    source_style: SourceStyle = field(
        default=DEFAULT_SOURCE_STYLE,
        metadata={"help": "Block style for code blocks", "choices": list(SOURCE_STYLES), "importance": "advanced"},
    )
    html_passthrough_mode: HtmlPassthroughMode = field(
        default=DEFAULT_HTML_PASSTHROUGH_MODE,
        metadata={
            "help": "How to handle raw HTML content",
            "choices": list(HTML_PASSTHROUGH_MODES),
            "importance": "advanced",
        },
    )
    escape_attribute_references: bool = field(
        default=DEFAULT_ESCAPE_ATTRIBUTE_REFERENCES,
        metadata={"help": "Escape {name} attribute references in text", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        InvalidOptionsError
            If an enumerated option is out of range or the offset is negative.

        """
        self._require_choice("wrap", self.wrap, WRAP_MODES)
        self._require_choice("source_style", self.source_style, SOURCE_STYLES)
        self._require_choice("html_passthrough_mode", self.html_passthrough_mode, HTML_PASSTHROUGH_MODES)
        if not isinstance(self.heading_offset, int) or self.heading_offset < 0:
            raise InvalidOptionsError(
                f"heading_offset must be a non-negative integer, got {self.heading_offset!r}",
                parameter_name="heading_offset",
                parameter_value=self.heading_offset,
            )
        if self.imagesdir is not None and not self.imagesdir.strip("/"):
            raise InvalidOptionsError(
                "imagesdir must name a directory",
                parameter_name="imagesdir",
                parameter_value=self.imagesdir,
            )
