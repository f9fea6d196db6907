#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The Markdown parser adapter produces these nodes; the AsciiDoc renderer
walks them with the visitor pattern.

- nodes: AST node classes representing document structure
- visitors: Visitor base class for AST traversal

Examples
--------
    >>> from md2adoc.ast import Document, Heading, Paragraph, Text
    >>> from md2adoc.renderers.asciidoc import AsciiDocRenderer
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Body.")]),
    ... ])
    >>> print(AsciiDocRenderer().render_to_string(doc))
    = Title
    <BLANKLINE>
    Body.

"""

from md2adoc.ast.nodes import (
    Alignment,
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
    SourceLocation,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    get_node_children,
)
from md2adoc.ast.visitors import NodeVisitor

__all__ = [
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Comment",
    "DefinitionDescription",
    "DefinitionList",
    "DefinitionTerm",
    "Document",
    "Emphasis",
    "FootnoteDefinition",
    "FootnoteReference",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "SourceLocation",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "get_node_children",
]
