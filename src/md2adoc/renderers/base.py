#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from and
the inline-capture mixin used by text renderers.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2adoc.ast.nodes import Document, Node, TableRow
from md2adoc.exceptions import InvalidOptionsError
from md2adoc.options.base import BaseRendererOptions
from md2adoc.utils.io_utils import ensure_trailing_newline, write_content


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered text

        """

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to a file path or stream.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _compute_table_columns(rows: list[TableRow]) -> int:
        """Compute the maximum number of columns needed for a table.

        Parameters
        ----------
        rows : list[TableRow]
            All table rows (including header)

        Returns
        -------
        int
            Maximum column count accounting for colspan

        """
        return max((sum(cell.colspan for cell in row.cells) for row in rows), default=0)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write rendered text to a file path or stream.

        The text is normalized to end with exactly one newline (or to stay
        empty) and encoded as UTF-8 for paths and binary streams.

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("= Hello", buffer)
            >>> buffer.getvalue()
            '= Hello\\n'

        """
        write_content(ensure_trailing_newline(text), output)


class InlineContentMixin:
    """Mixin providing inline content rendering for text-based renderers.

    The implementing class must have a ``_output`` attribute (list[str]) that
    its visitor methods append to.

    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of inline nodes to text.

        Temporarily swaps the output buffer, renders the nodes, and returns
        what they produced.

        Parameters
        ----------
        content : list of Node
            Inline nodes to render

        Returns
        -------
        str
            Rendered inline content as a string

        """
        saved_output = self._output
        self._output = []
        try:
            for node in content:
                self._accept(node)
            return "".join(self._output)
        finally:
            self._output = saved_output

    def _accept(self, node: Node) -> None:
        node.accept(self)
