#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/renderers/structure.py
"""Document structure decisions made before rendering.

The renderer needs to know two things about a document before it emits a
single heading: which block (if any) is the document title, and whether the
document has several top-level parts and should therefore be declared a
book. Both are answered by a read-only scan of the top-level blocks.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from md2adoc.ast.nodes import Comment, Document, Heading, Node

logger = logging.getLogger(__name__)

BOOK_DOCTYPE = "book"


@dataclass(frozen=True)
class DocumentStructure:
    """Result of the structure scan.

    Parameters
    ----------
    prologue : tuple of Node
        Leading comment blocks that precede the document header
    title : Heading or None
        Leading level-1 heading promoted to the document title
    body : tuple of Node
        Remaining top-level blocks, in order
    part_count : int
        Number of level-1 parts, counting a title supplied by metadata
    doctype : str or None
        ``"book"`` when the document has more than one part

    """

    prologue: tuple[Node, ...]
    title: Optional[Heading]
    body: tuple[Node, ...]
    part_count: int
    doctype: Optional[str]

    @property
    def is_book(self) -> bool:
        return self.doctype == BOOK_DOCTYPE


def promote_structure(document: Document, has_title_attribute: bool = False) -> DocumentStructure:
    """Decide title and doctype for ``document`` without modifying it.

    Parameters
    ----------
    document : Document
        Parsed document; only its top-level children are inspected
    has_title_attribute : bool, default False
        Whether a title was supplied out of band (front matter). It counts
        as a part only when the body does not open with its own title.

    Returns
    -------
    DocumentStructure
        The structure decision for this document

    Examples
    --------
        >>> from md2adoc.ast import Document, Heading, Text
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text("Title")]),
        ...     Heading(level=1, content=[Text("Part 1")]),
        ... ])
        >>> promote_structure(doc).doctype
        'book'

    """
    children = tuple(document.children)

    index = 0
    while index < len(children) and isinstance(children[index], Comment):
        index += 1
    prologue, rest = children[:index], children[index:]

    title: Optional[Heading] = None
    if rest and isinstance(rest[0], Heading) and rest[0].level == 1:
        title = rest[0]
        body = rest[1:]
    else:
        body = rest

    headings = [node for node in children if isinstance(node, Heading)]
    part_count = sum(1 for heading in headings if heading.level == 1)
    if title is None and has_title_attribute:
        part_count += 1

    doctype = BOOK_DOCTYPE if part_count > 1 else None
    logger.debug("Structure: parts=%d doctype=%s", part_count, doctype or "article")

    return DocumentStructure(
        prologue=prologue,
        title=title,
        body=body,
        part_count=part_count,
        doctype=doctype,
    )
