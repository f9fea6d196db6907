#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/renderers/asciidoc.py
"""AsciiDoc rendering from AST.

This module provides the AsciiDocRenderer class which converts AST nodes
to AsciiDoc text. Besides the node-by-node mapping, the renderer owns the
document header: it promotes a leading level-1 heading (or a title supplied
by front matter) to the document title, declares multi-part documents as
books, and emits the attribute entries that the rendered body depends on.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Optional

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
from md2adoc.ast.visitors import NodeVisitor
from md2adoc.constants import (
    ADMONITION_LABELS,
    ASCIIDOC_MAX_SECTION_MARKERS,
    EXPERIMENTAL_ATTRIBUTE,
    HEADER_ONLY_ATTRIBUTES,
    MENU_SEPARATOR,
)
from md2adoc.exceptions import UnsupportedNodeError
from md2adoc.options.asciidoc import AsciiDocRendererOptions
from md2adoc.renderers.base import BaseRenderer, InlineContentMixin
from md2adoc.renderers.structure import BOOK_DOCTYPE, DocumentStructure, promote_structure
from md2adoc.utils.escape import (
    code_needs_passthrough,
    escape_attribute_references,
    escape_attribute_value,
    escape_formatting_marks,
    escape_macro_text,
)
from md2adoc.utils.io_utils import ensure_trailing_newline

logger = logging.getLogger(__name__)

_URL_SCHEME = re.compile(r"^(?:https?|ftp|irc|mailto):", re.IGNORECASE)
_MARKDOWN_TARGET = re.compile(r"^(?![a-z][a-z0-9+.-]*:)(?P<path>[^#?]+)\.md(?P<fragment>#.*)?$", re.IGNORECASE)
_SENTENCE_BREAK = re.compile(r"(?<=[.!?])[ \t]+(?=[A-Z\"'(\[_*`])")
_WORD_CHAR = re.compile(r"\w")
_BR_TAG = re.compile(r"^<br\s*/?>$", re.IGNORECASE)
_ALIGNMENT_SPECS = {"left": "<", "center": "^", "right": ">"}


@dataclass
class RenderContext:
    """Transient state threaded through one render pass.

    Parameters
    ----------
    attributes : dict
        Working attribute mapping; document-derived entries are added here
    level_shift : int, default 0
        Levels added to every section heading marker
    structure : DocumentStructure or None
        Title and doctype decision, made once before any heading is rendered
    list_stack : list of str
        Marker characters of the enclosing lists, outermost first
    section_level : int, default 1
        Level of the most recent non-discrete section heading
    table_columns : int, default 0
        Column count of the table being rendered
    footnotes : dict
        Footnote definitions by identifier
    footnotes_emitted : set of str
        Footnotes whose text has already been emitted

    """

    attributes: dict[str, Any]
    level_shift: int = 0
    structure: Optional[DocumentStructure] = None
    list_stack: list[str] = field(default_factory=list)
    section_level: int = 1
    table_columns: int = 0
    footnotes: dict[str, list[Node]] = field(default_factory=dict)
    footnotes_emitted: set[str] = field(default_factory=set)

    def register_attribute(self, name: str, value: Any = "") -> bool:
        """Add an attribute unless it is already present; return True if added."""
        if name in self.attributes:
            return False
        self.attributes[name] = value
        return True


class AsciiDocRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to AsciiDoc text.

    This class implements the visitor pattern to traverse an AST and
    generate AsciiDoc output.

    Parameters
    ----------
    options : AsciiDocRendererOptions or None, default = None
        AsciiDoc rendering options

    Examples
    --------
    Basic usage:

        >>> from md2adoc.ast import Document, Heading, Paragraph, Strong, Text
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")]),
        ...     Paragraph(content=[Strong(content=[Text(content="File > Save")])]),
        ... ])
        >>> attributes = {}
        >>> print(AsciiDocRenderer().render_to_string(doc, attributes), end="")
        = Title
        :experimental:
        <BLANKLINE>
        menu:File[Save]
        >>> attributes
        {'experimental': ''}

    """

    def __init__(self, options: AsciiDocRendererOptions | None = None):
        """Initialize the AsciiDoc renderer with options."""
        BaseRenderer._validate_options_type(options, AsciiDocRendererOptions, "asciidoc")
        options = options or AsciiDocRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: AsciiDocRendererOptions = options
        self._output: list[str] = []
        self._context = RenderContext(attributes={})

    def render_to_string(self, document: Document, attributes: Optional[dict[str, Any]] = None) -> str:
        """Render a document AST to an AsciiDoc string.

        Parameters
        ----------
        document : Document
            The document node to render
        attributes : dict or None, default None
            Attribute mapping seeded by the caller and by preprocessors. The
            mapping is updated in place with document-derived attributes
            (``doctype``, ``experimental``, ...). A fresh mapping is used
            when None.

        Returns
        -------
        str
            AsciiDoc text ending with a single newline, or ``""`` when the
            document renders to nothing

        Raises
        ------
        UnsupportedNodeError
            If the tree contains a node kind with no AsciiDoc mapping

        """
        self._output = []
        self._context = RenderContext(
            attributes=attributes if attributes is not None else {},
            level_shift=self.options.heading_offset,
        )

        document.accept(self)

        return ensure_trailing_newline("".join(self._output))

    # ------------------------------------------------------------------
    # Dispatch helpers
    # ------------------------------------------------------------------

    def _accept(self, node: Node) -> None:
        if not isinstance(node, Node):
            raise UnsupportedNodeError(type(node).__name__)
        node.accept(self)

    def generic_visit(self, node: Node) -> None:
        """Reject node kinds with no AsciiDoc mapping.

        Raises
        ------
        UnsupportedNodeError
            Always; names the node type and its source location if known

        """
        location = node.source_location.describe() if getattr(node, "source_location", None) else None
        raise UnsupportedNodeError(type(node).__name__, location)

    def _render_block(self, node: Node) -> str:
        """Render a single block node to a string without touching the current output."""
        return super()._render_inline_content([node])

    def _render_blocks(self, nodes: list[Node] | tuple[Node, ...]) -> list[str]:
        """Render block nodes, dropping those that produce no output."""
        rendered = (self._render_block(node) for node in nodes)
        return [block for block in rendered if block]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render inline nodes, applying rules that depend on neighboring nodes.

        Adjacent Text nodes are joined first so that literal formatting marks
        split across them are escaped as one run.
        ``<kbd>`` tag runs collapse into a single ``kbd:[]`` macro, and
        emphasis/strong spans touching a word character use the unconstrained
        (doubled) marker form.
        """
        content = _merge_adjacent_text(content)
        pieces: list[tuple[Optional[Node], str]] = []
        index = 0
        while index < len(content):
            node = content[index]
            if _is_html_tag(node, "kbd"):
                keys, next_index = _consume_kbd_run(content, index)
                if keys:
                    self._context.register_attribute(EXPERIMENTAL_ATTRIBUTE)
                    pieces.append((None, f"kbd:[{escape_macro_text('+'.join(keys))}]"))
                    index = next_index
                    continue
            pieces.append((node, super()._render_inline_content([node])))
            index += 1

        for position, (node, text) in enumerate(pieces):
            marker = "_" if isinstance(node, Emphasis) else "*" if isinstance(node, Strong) else None
            if marker is None or not (text.startswith(marker) and text.endswith(marker)):
                continue
            before = pieces[position - 1][1][-1:] if position > 0 else ""
            after = pieces[position + 1][1][:1] if position + 1 < len(pieces) else ""
            if _WORD_CHAR.match(before) or _WORD_CHAR.match(after):
                pieces[position] = (node, f"{marker}{text}{marker}")

        return "".join(text for _node, text in pieces)

    # ------------------------------------------------------------------
    # Document and header
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node, including its header.

        The structure decision (title and doctype) is made once, before any
        heading is rendered. The header is assembled after the body because
        rendering the body can register attributes.

        Parameters
        ----------
        node : Document
            Document to render

        """
        ctx = self._context
        self._collect_footnote_definitions(node)

        structure = promote_structure(node, has_title_attribute=bool(ctx.attributes.get("doctitle")))
        ctx.structure = structure
        if structure.is_book:
            ctx.register_attribute("doctype", BOOK_DOCTYPE)

        title = None
        if structure.title is not None:
            title = self._render_inline_content(structure.title.content)
        elif ctx.attributes.get("doctitle"):
            title = str(ctx.attributes["doctitle"])

        prologue = self._render_blocks(structure.prologue)
        body = self._render_blocks(structure.body)
        header = self._render_header(title)

        blocks: list[str] = []
        if header:
            lead = "\n\n".join(prologue)
            blocks.append(f"{lead}\n{header}" if lead else header)
        else:
            blocks.extend(prologue)
        blocks.extend(body)

        self._output.append("\n\n".join(blocks))

    def _render_header(self, title: Optional[str]) -> str:
        attributes = self._context.attributes
        lines = [f"= {title}"] if title else []
        if "doctype" in attributes:
            lines.append(_attribute_entry("doctype", attributes["doctype"]))
        lines.extend(
            _attribute_entry(name, value) for name, value in attributes.items() if name not in HEADER_ONLY_ATTRIBUTES
        )
        return "\n".join(lines)

    def _collect_footnote_definitions(self, node: Node) -> None:
        """Recursively collect all footnote definitions from the document.

        Parameters
        ----------
        node : Node
            Node to search for footnote definitions

        """
        if isinstance(node, FootnoteDefinition):
            self._context.footnotes.setdefault(node.identifier, node.content)
        for child in get_node_children(node):
            self._collect_footnote_definitions(child)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node.

        The marker count equals the Markdown level plus the configured
        offset; in a book, single-marker headings are parts. A heading that
        skips a level is marked ``[discrete]`` so it does not break the
        section hierarchy.

        Parameters
        ----------
        node : Heading
            Heading to render

        """
        ctx = self._context
        content = self._render_inline_content(node.content)
        markers = node.level + ctx.level_shift
        if markers > ASCIIDOC_MAX_SECTION_MARKERS:
            logger.warning("Heading level %d exceeds AsciiDoc's deepest section; clamping", markers)
            markers = ASCIIDOC_MAX_SECTION_MARKERS

        lines = []
        discrete = node.level > ctx.section_level + 1
        if discrete:
            lines.append("[discrete]")
        else:
            ctx.section_level = node.level

        if self.options.auto_ids:
            section_id = self._section_id(node)
            if section_id and not (self.options.lazy_ids and section_id == _asciidoctor_default_id(node)):
                lines.append(f"[#{section_id}]")

        lines.append(f"{'=' * markers} {content}")
        self._output.append("\n".join(lines))

    def _section_id(self, node: Heading) -> str:
        words = re.findall(r"\w+", _plain_text(node.content).lower())
        if not words:
            return ""
        return self.options.auto_id_prefix + self.options.auto_id_separator.join(words)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node.

        A paragraph holding only an image becomes a block image, and a
        paragraph opening with an admonition label (``**Note:**``) becomes
        an admonition paragraph.

        Parameters
        ----------
        node : Paragraph
            Paragraph to render

        """
        if len(node.content) == 1 and isinstance(node.content[0], (Image, Link)):
            block_image = self._render_block_image(node.content[0])
            if block_image is not None:
                self._output.append(block_image)
                return

        admonition = _split_admonition(node.content)
        if admonition is not None:
            label, remainder = admonition
            self._output.append(f"{label}: {self._render_paragraph_text(remainder)}")
            return

        self._output.append(self._render_paragraph_text(node.content))

    def _render_paragraph_text(self, content: list[Node]) -> str:
        text = self._render_inline_content(content)
        if self.options.wrap == "ventilate":
            text = _SENTENCE_BREAK.sub("\n", text)
        return text

    def _render_block_image(self, node: Node) -> Optional[str]:
        if isinstance(node, Image):
            image, link = node, None
        elif isinstance(node, Link) and len(node.content) == 1 and isinstance(node.content[0], Image):
            image, link = node.content[0], node.url
        else:
            return None

        attrs = escape_macro_text(image.alt_text)
        if link:
            attrs += f",link={link}"
        macro = f"image::{self._image_target(image.url)}[{attrs}]"
        return f".{image.title}\n{macro}" if image.title else macro

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as a listing block.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        content = node.content.rstrip("\n")
        delimiter = "----"
        while delimiter in content.split("\n"):
            delimiter += "-"

        lines = []
        if node.language:
            style = "source" if self.options.source_style == "source" else ""
            lines.append(f"[{style},{node.language}]")
        lines.append(delimiter)
        if content:
            lines.append(content)
        lines.append(delimiter)
        self._output.append("\n".join(lines))

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node.

        A quote whose first paragraph opens with an admonition label renders
        as an admonition block instead of a quote block.

        Parameters
        ----------
        node : BlockQuote
            Block quote to render

        """
        children = list(node.children)
        label = None
        if children and isinstance(children[0], Paragraph):
            admonition = _split_admonition(children[0].content)
            if admonition is not None:
                label, remainder = admonition
                children[0] = Paragraph(content=remainder)

        inner = "\n\n".join(self._render_blocks(children))
        if label:
            self._output.append(f"[{label}]\n====\n{inner}\n====")
        else:
            self._output.append(f"____\n{inner}\n____")

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Markers repeat to show depth (``*``, ``**``; ``.``, ``..``), counted
        per marker kind among the enclosing lists.

        Parameters
        ----------
        node : List
            List to render

        """
        ctx = self._context
        marker_char = "." if node.ordered else "*"
        depth = ctx.list_stack.count(marker_char) + 1
        ctx.list_stack.append(marker_char)
        try:
            items = [self._render_list_item(item, marker_char * depth) for item in node.items]
        finally:
            ctx.list_stack.pop()

        prefix = f"[start={node.start}]\n" if node.ordered and node.start != 1 else ""
        self._output.append(prefix + "\n".join(items))

    def _render_list_item(self, node: ListItem, marker: str) -> str:
        if node.task_status:
            marker = f"{marker} [x]" if node.task_status == "checked" else f"{marker} [ ]"

        children = list(node.children)
        if children and isinstance(children[0], Paragraph):
            first = self._render_paragraph_text(children[0].content)
            children = children[1:]
        else:
            first = "{blank}"

        parts = [f"{marker} {first}"]
        nested_depth = 0
        for child in children:
            rendered = self._render_block(child)
            if not rendered:
                continue
            # Nested lists attach directly; other blocks need a continuation
            if isinstance(child, List):
                parts.append(rendered)
                nested_depth = _trailing_list_depth(child)
                continue
            # One blank line per nested level climbs back up to this item
            parts.append("\n" * nested_depth + f"+\n{rendered}")
            nested_depth = 0
        return "\n".join(parts)

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem outside of a list as a single unordered item."""
        self._output.append(self._render_list_item(node, "*"))

    def visit_table(self, node: Table) -> None:
        """Render a Table node.

        Rows shorter than the widest row are padded with empty cells. A header
        row is separated from the body by a blank line, which is how AsciiDoc
        recognizes an implicit header. A table with nothing but a header row
        declares it with ``options="header"`` instead.

        Parameters
        ----------
        node : Table
            Table to render

        """
        ctx = self._context
        rows = ([node.header] if node.header else []) + list(node.rows)
        ctx.table_columns = self._compute_table_columns(rows)

        lines = []
        if node.caption:
            lines.append(f".{node.caption}")
        block_attributes = []
        if any(node.alignments):
            specs = [
                _ALIGNMENT_SPECS.get(node.alignments[i] or "", "") + "1"
                if i < len(node.alignments)
                else "1"
                for i in range(ctx.table_columns)
            ]
            block_attributes.append(f'cols="{",".join(specs)}"')
        if node.header and not node.rows:
            # No blank line follows a lone header row, so mark it explicitly
            block_attributes.append('options="header"')
        if block_attributes:
            lines.append(f"[{','.join(block_attributes)}]")
        lines.append("|===")
        if node.header:
            lines.append(self._render_block(node.header))
            if node.rows:
                lines.append("")
        lines.extend(self._render_block(row) for row in node.rows)
        lines.append("|===")
        self._output.append("\n".join(lines))

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node on a single line, padded to the table width.

        Parameters
        ----------
        node : TableRow
            Table row to render

        """
        cells = [self._render_block(cell) for cell in node.cells]
        missing = self._context.table_columns - sum(cell.colspan for cell in node.cells)
        cells.extend(["|"] * max(missing, 0))
        self._output.append(" ".join(cells).rstrip())

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node, including its column span prefix."""
        content = self._render_inline_content(node.content).replace("|", r"\|")
        span = f"{node.colspan}+" if node.colspan > 1 else ""
        self._output.append(f"{span}| {content}".rstrip())

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append("'''")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render an HTMLBlock node as a passthrough block, or drop it.

        Parameters
        ----------
        node : HTMLBlock
            HTML block to render

        """
        if self.options.html_passthrough_mode == "drop":
            logger.info("Dropping HTML block (%d characters)", len(node.content))
            return
        content = node.content.strip("\n")
        self._output.append(f"++++\n{content}\n++++")

    def visit_comment(self, node: Comment) -> None:
        """Render a Comment node (block-level).

        A one-line comment becomes a ``//`` line comment; anything longer
        becomes a ``////`` comment block. Leading indentation is removed
        from every line.

        Parameters
        ----------
        node : Comment
            Comment block to render

        """
        lines = [line.lstrip() for line in node.content.split("\n")]
        while lines and not lines[0]:
            lines.pop(0)
        while lines and not lines[-1]:
            lines.pop()

        if len(lines) <= 1:
            text = lines[0] if lines else ""
            self._output.append(f"// {text}" if text else "//")
            return
        self._output.append("////\n" + "\n".join(lines) + "\n////")

    def visit_definition_list(self, node: DefinitionList) -> None:
        """Render a DefinitionList node.

        Parameters
        ----------
        node : DefinitionList
            Definition list to render

        """
        entries = []
        for term, descriptions in node.items:
            lines = [self._render_block(term)]
            for description in descriptions:
                rendered = self._render_block(description)
                if rendered:
                    lines.append(rendered)
            entries.append("\n".join(lines))
        self._output.append("\n".join(entries))

    def visit_definition_term(self, node: DefinitionTerm) -> None:
        """Render a DefinitionTerm node."""
        self._output.append(f"{self._render_inline_content(node.content)}::")

    def visit_definition_description(self, node: DefinitionDescription) -> None:
        """Render a DefinitionDescription node; blocks after the first attach with ``+``."""
        blocks = self._render_blocks(node.content)
        self._output.append("\n+\n".join(blocks))

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        """Render a FootnoteDefinition node.

        Definitions are emitted inline at their first reference, so nothing
        is written here.
        """

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        text = escape_formatting_marks(node.content)
        if self.options.escape_attribute_references:
            text = escape_attribute_references(text)
        self._output.append(text)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node as ``_text_``."""
        self._output.append(f"_{self._render_inline_content(node.content)}_")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node as ``*text*``, or as a menu macro.

        Bold text of the form ``A > B`` is the menu path idiom; it renders
        as ``menu:A[B]`` and registers the ``experimental`` attribute that
        enables UI macros.

        Parameters
        ----------
        node : Strong
            Strong to render

        """
        if node.content and all(isinstance(child, Text) for child in node.content):
            text = "".join(child.content for child in node.content)
            parts = [part.strip() for part in text.split(MENU_SEPARATOR.strip())] if MENU_SEPARATOR in text else []
            if len(parts) > 1 and all(parts):
                self._context.register_attribute(EXPERIMENTAL_ATTRIBUTE)
                items = escape_macro_text(MENU_SEPARATOR.join(parts[1:]))
                self._output.append(f"menu:{parts[0]}[{items}]")
                return

        self._output.append(f"*{self._render_inline_content(node.content)}*")

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node with the ``line-through`` role."""
        self._output.append(f"[.line-through]#{self._render_inline_content(node.content)}#")

    def visit_code(self, node: Code) -> None:
        """Render a Code node.

        Code containing characters AsciiDoc would format is wrapped in an
        inline passthrough so it stays literal.

        Parameters
        ----------
        node : Code
            Code to render

        """
        if code_needs_passthrough(node.content):
            self._output.append(f"`+{node.content}+`")
        else:
            self._output.append(f"`{node.content}`")

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        - bare URLs (autolinks) are written as-is
        - ``#fragment`` targets become cross references
        - links to ``.md`` files become ``xref:`` links to ``.adoc`` files
        - URLs AsciiDoc recognizes use the ``url[text]`` form
        - anything else uses the ``link:`` macro

        Parameters
        ----------
        node : Link
            Link to render

        """
        url = node.url
        text = self._render_inline_content(node.content)
        plain = _plain_text(node.content)

        if not node.title and (plain == url or (url.lower().startswith("mailto:") and plain == url[7:])):
            self._output.append(plain)
            return

        macro_text = escape_macro_text(text)
        if node.title:
            macro_text = f'"{escape_attribute_value(text)}",title="{escape_attribute_value(node.title)}"'

        if url.startswith("#") and not node.title:
            self._output.append(f"<<{url[1:]},{text}>>" if text else f"<<{url[1:]}>>")
            return

        markdown_target = _MARKDOWN_TARGET.match(url)
        if markdown_target:
            fragment = markdown_target.group("fragment") or ""
            self._output.append(f"xref:{markdown_target.group('path')}.adoc{fragment}[{macro_text}]")
            return

        if " " in url:
            url = f"++{url}++"
            self._output.append(f"link:{url}[{macro_text}]")
        elif _URL_SCHEME.match(url):
            self._output.append(f"{url}[{macro_text}]")
        else:
            self._output.append(f"link:{url}[{macro_text}]")

    def visit_image(self, node: Image) -> None:
        """Render an inline Image node as ``image:target[alt]``."""
        attrs = escape_macro_text(node.alt_text)
        if node.title:
            attrs += f',title="{escape_attribute_value(node.title)}"'
        self._output.append(f"image:{self._image_target(node.url)}[{attrs}]")

    def _image_target(self, url: str) -> str:
        imagesdir = self.options.imagesdir
        if not imagesdir:
            return url
        prefix = imagesdir.rstrip("/") + "/"
        if url.startswith(prefix):
            self._context.register_attribute("imagesdir", imagesdir.rstrip("/"))
            return url[len(prefix) :]
        return url

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node.

        Hard breaks use the `` +`` line suffix. Soft breaks follow the
        ``wrap`` option: kept as newlines (``preserve``) or joined with a
        space (``none`` and ``ventilate``).

        Parameters
        ----------
        node : LineBreak
            Line break to render

        """
        if not node.soft:
            self._output.append(" +\n")
        elif self.options.wrap == "preserve":
            self._output.append("\n")
        else:
            self._output.append(" ")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Render an HTMLInline node.

        ``<br>`` becomes a hard line break, inline comments are dropped, and
        other tags are passed through unless passthrough is disabled.

        Parameters
        ----------
        node : HTMLInline
            Inline HTML to render

        """
        raw = node.content.strip()
        if _BR_TAG.match(raw):
            self._output.append(" +\n")
        elif raw.startswith("<!--"):
            logger.debug("Dropping inline HTML comment")
        elif self.options.html_passthrough_mode == "drop":
            logger.debug("Dropping inline HTML: %s", raw)
        else:
            self._output.append(f"+++{node.content}+++")

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        """Render a FootnoteReference node.

        The first reference to a footnote carries its text,
        ``footnote:id[text]``; later references reuse it with ``footnote:id[]``.
        AsciiDoc footnotes are inline, so block content is flattened.

        Parameters
        ----------
        node : FootnoteReference
            Footnote reference to render

        """
        ctx = self._context
        identifier = node.identifier
        if identifier in ctx.footnotes_emitted:
            self._output.append(f"footnote:{identifier}[]")
            return

        definition = ctx.footnotes.get(identifier)
        if definition is None:
            logger.warning("Footnote reference '%s' has no definition", identifier)
            self._output.append(f"footnote:{identifier}[]")
            return

        text = " ".join(block.replace("\n", " ") for block in self._render_blocks(definition))
        ctx.footnotes_emitted.add(identifier)
        self._output.append(f"footnote:{identifier}[{escape_macro_text(text)}]")


def _attribute_entry(name: str, value: Any) -> str:
    if value is None or value is False:
        return f":{name}!:"
    if value is True or value == "":
        return f":{name}:"
    return f":{name}: {value}"


def _plain_text(content: list[Node]) -> str:
    parts = []
    for node in content:
        if isinstance(node, (Text, Code)):
            parts.append(node.content)
        elif isinstance(node, Image):
            parts.append(node.alt_text)
        elif isinstance(node, LineBreak):
            parts.append(" ")
        else:
            parts.append(_plain_text(get_node_children(node)))
    return "".join(parts)


def _asciidoctor_default_id(node: Heading) -> str:
    """Return the id AsciiDoc generates for a section title by default."""
    words = re.findall(r"\w+", _plain_text(node.content).lower())
    return "_" + "_".join(words)


def _split_admonition(content: list[Node]) -> Optional[tuple[str, list[Node]]]:
    """Detect a leading ``**Note:**`` style label.

    Returns
    -------
    tuple or None
        The AsciiDoc admonition label and the remaining inline content, or
        None when the content does not open with a label

    """
    if len(content) < 2 or not isinstance(content[0], Strong):
        return None
    label_text = _plain_text(content[0].content).strip()
    following = content[1]
    has_colon = label_text.endswith(":")
    if not has_colon and isinstance(following, Text) and following.content.startswith(":"):
        has_colon = True
    label = ADMONITION_LABELS.get(label_text.rstrip(":").strip().lower())
    if label is None or not has_colon:
        return None

    remainder = list(content[1:])
    if isinstance(following, Text):
        stripped = following.content.lstrip(":").lstrip()
        remainder = ([Text(content=stripped)] if stripped else []) + remainder[1:]
    return label, remainder


def _trailing_list_depth(node: List) -> int:
    """How many list levels below its parent item a nested list ends."""
    last = node.items[-1] if node.items else None
    if last is not None and last.children and isinstance(last.children[-1], List):
        return 1 + _trailing_list_depth(last.children[-1])
    return 1


def _merge_adjacent_text(content: list[Node]) -> list[Node]:
    """Join adjacent Text nodes, dropping inline HTML comments between them.

    Whitespace on both sides of a dropped comment collapses to the left side's.
    """
    merged: list[Node] = []
    after_comment = False
    for node in content:
        if isinstance(node, HTMLInline) and node.content.strip().startswith("<!--"):
            logger.debug("Dropping inline HTML comment")
            after_comment = True
            continue
        if isinstance(node, Text) and merged and isinstance(merged[-1], Text):
            text = node.content
            if after_comment and merged[-1].content[-1:] in (" ", "\t"):
                text = text.lstrip(" \t")
            merged[-1] = Text(content=merged[-1].content + text)
        else:
            merged.append(node)
        after_comment = False
    return merged


def _is_html_tag(node: Node, name: str) -> bool:
    return isinstance(node, HTMLInline) and node.content.strip().lower() == f"<{name}>"


def _consume_kbd_run(content: list[Node], start: int) -> tuple[list[str], int]:
    """Collect the keys of ``<kbd>A</kbd>+<kbd>B</kbd>`` starting at ``start``.

    Returns
    -------
    tuple
        The key labels and the index just past the run; no keys when the
        opening tag is never closed

    """
    keys: list[str] = []
    index = start
    while index < len(content) and _is_html_tag(content[index], "kbd"):
        end = next(
            (k for k in range(index + 1, len(content)) if _is_html_tag(content[k], "/kbd")),
            None,
        )
        if end is None:
            break
        keys.append(_plain_text(content[index + 1 : end]).strip())
        index = end + 1
        joiner = content[index] if index < len(content) else None
        if (
            isinstance(joiner, Text)
            and joiner.content.strip() == "+"
            and index + 1 < len(content)
            and _is_html_tag(content[index + 1], "kbd")
        ):
            index += 1
            continue
        break
    return keys, index
