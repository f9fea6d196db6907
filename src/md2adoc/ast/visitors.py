#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

Visitors separate algorithms (rendering, structure analysis) from the node
classes themselves. Every concrete visitor must handle every node kind
listed here; a node kind that reaches a visitor without a matching
``visit_*`` method is routed to :meth:`NodeVisitor.generic_visit`, so new
node kinds surface as "unhandled" instead of being silently skipped.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from md2adoc.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Comment,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    get_node_children,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a ``visit_*`` method for each node type. Nodes call
    back into the visitor through ``accept``.

    Examples
    --------
    Collect the text of every heading:

        >>> class HeadingCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.titles = []
        ...     def visit_heading(self, node):
        ...         self.titles.append(node)
        ...     # ... remaining visit_* methods ...

    """

    def __getattr__(self, name: str) -> Callable[[Node], Any]:
        # Only reached for visit_* names no subclass defines (foreign node kinds)
        if name.startswith("visit_"):
            return self.generic_visit
        raise AttributeError(f"{type(self).__name__!s} object has no attribute {name!r}")

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak) -> Any:
        """Visit a ThematicBreak node."""

    @abstractmethod
    def visit_html_block(self, node: HTMLBlock) -> Any:
        """Visit an HTMLBlock node."""

    @abstractmethod
    def visit_comment(self, node: Comment) -> Any:
        """Visit a Comment node."""

    @abstractmethod
    def visit_footnote_definition(self, node: FootnoteDefinition) -> Any:
        """Visit a FootnoteDefinition node."""

    @abstractmethod
    def visit_definition_list(self, node: DefinitionList) -> Any:
        """Visit a DefinitionList node."""

    @abstractmethod
    def visit_definition_term(self, node: DefinitionTerm) -> Any:
        """Visit a DefinitionTerm node."""

    @abstractmethod
    def visit_definition_description(self, node: DefinitionDescription) -> Any:
        """Visit a DefinitionDescription node."""

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""

    @abstractmethod
    def visit_code(self, node: Code) -> Any:
        """Visit a Code node."""

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""

    @abstractmethod
    def visit_html_inline(self, node: HTMLInline) -> Any:
        """Visit an HTMLInline node."""

    @abstractmethod
    def visit_footnote_reference(self, node: FootnoteReference) -> Any:
        """Visit a FootnoteReference node."""

    def generic_visit(self, node: Node) -> Any:
        """Fallback for node types without a ``visit_*`` method.

        The default implementation visits the node's children so that
        analysis visitors can ignore node kinds they do not care about.
        Renderers override this to reject unknown node kinds.

        Parameters
        ----------
        node : Node
            The node to visit

        """
        for child in get_node_children(node):
            child.accept(self)
        return None
