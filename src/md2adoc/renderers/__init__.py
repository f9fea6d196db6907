#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2adoc/renderers/__init__.py
"""AST renderers for converting documents to AsciiDoc.

Examples
--------
Render a tree built by hand:

    >>> from md2adoc.ast import Document, Heading, Text
    >>> from md2adoc.renderers import AsciiDocRenderer
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")])
    ... ])
    >>> AsciiDocRenderer().render_to_string(doc)
    '= Title\\n'

"""

from md2adoc.renderers.asciidoc import AsciiDocRenderer, RenderContext
from md2adoc.renderers.base import BaseRenderer, InlineContentMixin
from md2adoc.renderers.structure import DocumentStructure, promote_structure

__all__ = [
    "AsciiDocRenderer",
    "BaseRenderer",
    "DocumentStructure",
    "InlineContentMixin",
    "RenderContext",
    "promote_structure",
]
