#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/options/markdown.py
"""Configuration options for Markdown parsing.

The options record is attached to every parsed Document so that extensions
(postprocessors in particular) can see how the tree was built.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2adoc.constants import (
    DEFAULT_HARD_WRAP,
    DEFAULT_MARKDOWN_INPUT,
    DEFAULT_PARSE_DEFINITION_LISTS,
    DEFAULT_PARSE_FOOTNOTES,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
    DEFAULT_PARSE_TASK_LISTS,
    MARKDOWN_INPUTS,
    MarkdownInput,
)
from md2adoc.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    input : {"GFM", "markdown"}, default "GFM"
        Markdown flavor of the source. ``"markdown"`` disables the GitHub
        extensions (tables, strikethrough, task lists) regardless of the
        individual flags below.
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    parse_definition_lists : bool, default False
        Whether to parse definition lists (term followed by ``: definition``).
    hard_wrap : bool, default False
        Treat every newline inside a paragraph as a hard line break.

    """

    input: MarkdownInput = field(
        default=DEFAULT_MARKDOWN_INPUT,
        metadata={"help": "Markdown flavor of the source", "choices": list(MARKDOWN_INPUTS), "importance": "core"},
    )
    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=DEFAULT_PARSE_TASK_LISTS,
        metadata={"help": "Parse task list checkboxes (- [ ] and - [x])", "importance": "core"},
    )
    parse_footnotes: bool = field(
        default=DEFAULT_PARSE_FOOTNOTES,
        metadata={"help": "Parse footnote references and definitions", "importance": "core"},
    )
    parse_definition_lists: bool = field(
        default=DEFAULT_PARSE_DEFINITION_LISTS,
        metadata={"help": "Parse definition lists (term / : definition)", "importance": "advanced"},
    )
    hard_wrap: bool = field(
        default=DEFAULT_HARD_WRAP,
        metadata={"help": "Treat newlines inside paragraphs as hard line breaks", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the declared flavor.

        Raises
        ------
        InvalidOptionsError
            If ``input`` is not a supported flavor.

        """
        self._require_choice("input", self.input, MARKDOWN_INPUTS)

    @property
    def is_gfm(self) -> bool:
        """Whether GitHub extensions are enabled for this flavor."""
        return self.input == "GFM"


# Shared immutable default, safe to reuse across calls
DEFAULT_PARSER_OPTIONS = MarkdownParserOptions()
