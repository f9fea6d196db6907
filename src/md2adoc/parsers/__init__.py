#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/parsers/__init__.py
"""Parsers that build the md2adoc document tree.

Only Markdown input is supported; parsing is delegated to mistune.
"""

from md2adoc.parsers.markdown import MarkdownParser, markdown_to_ast

__all__ = ["MarkdownParser", "markdown_to_ast"]
