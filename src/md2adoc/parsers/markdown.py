#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/parsers/markdown.py
"""Markdown to AST converter.

This module adapts the token stream of the mistune parser (used in AST mode)
to the md2adoc node tree. Markdown grammar is mistune's concern, apart from
the pipe table rule, which is relaxed so that short rows do not demote a
table to a paragraph.

"""

from __future__ import annotations

import logging
import re
from typing import Any, Literal

import mistune

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
)
from md2adoc.exceptions import InvalidOptionsError, ParsingError
from md2adoc.options.markdown import DEFAULT_PARSER_OPTIONS, MarkdownParserOptions

logger = logging.getLogger(__name__)

# Block tokens that carry no content of their own
_IGNORED_BLOCK_TOKENS = frozenset({"blank_line"})


class MarkdownParser:
    r"""Convert Markdown text to an AST Document.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Hello\n\nThis is **bold**.")
        >>> doc.options.input
        'GFM'

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError(
                component_name="markdown parser",
                expected_type=MarkdownParserOptions,
                received_type=type(options),
            )
        self.options: MarkdownParserOptions = options or DEFAULT_PARSER_OPTIONS
        self._footnote_definitions: dict[str, list[Node]] = {}

    def _plugins(self) -> list[Any]:
        plugins = []
        if self.options.is_gfm:
            if self.options.parse_strikethrough:
                plugins.append("strikethrough")
            if self.options.parse_tables:
                plugins.extend(["table", lenient_table])
            if self.options.parse_task_lists:
                plugins.append("task_lists")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        if self.options.parse_definition_lists:
            plugins.append("def_list")
        return plugins

    def parse(self, text: str) -> Document:
        """Parse normalized Markdown text into an AST Document.

        Parameters
        ----------
        text : str
            Markdown source, already decoded and with ``\n`` line endings

        Returns
        -------
        Document
            Root node; ``document.options`` is the options record used here

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        # Reset parser state to prevent leakage across parse calls
        self._footnote_definitions = {}

        markdown = mistune.create_markdown(
            plugins=self._plugins(),
            renderer=None,
            hard_wrap=self.options.hard_wrap,
        )
        try:
            tokens, _state = markdown.parse(text)
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise ParsingError(f"Markdown parsing failed: {exc}", parsing_stage="tokenize", original_error=exc) from exc

        children = self._process_tokens(tokens if isinstance(tokens, list) else [])

        for identifier, content in self._footnote_definitions.items():
            children.append(FootnoteDefinition(identifier=identifier, content=content))

        logger.debug("Parsed %d top-level blocks (%s input)", len(children), self.options.input)
        return Document(children=children, options=self.options)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is None:
                continue
            if isinstance(node, list):
                nodes.extend(node)
            else:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single mistune block token into AST node(s).

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node, list of Node, or None
            Resulting AST node(s); None for tokens with no content

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return self._process_html_block(token)
        elif token_type == "footnotes":
            self._collect_footnotes(token)
            return None
        elif token_type == "def_list":
            return self._process_definition_list(token)
        elif token_type in _IGNORED_BLOCK_TOKENS:
            return None

        logger.debug("Ignoring unsupported mistune block token: %s", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs") or {}
        level = attrs.get("level", 1)
        if not isinstance(level, int) or not 1 <= level <= 6:
            level = 1
        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process a fenced or indented code block.

        The first word of the fence info string is the language; the rest is
        kept in ``metadata["info_attrs"]``.
        """
        content = token.get("raw", "")
        info = ((token.get("attrs") or {}).get("info") or "").strip()
        metadata: dict[str, Any] = {}
        language = None
        if info:
            parts = info.split(maxsplit=1)
            language = parts[0]
            if len(parts) > 1:
                metadata["info_attrs"] = parts[1]
        return CodeBlock(content=content, language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs") or {}
        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        tight = token.get("tight", attrs.get("tight", True))
        items = [self._process_list_item(child) for child in token.get("children", []) if isinstance(child, dict)]
        return List(ordered=ordered, items=items, start=start if isinstance(start, int) else 1, tight=bool(tight))

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        """Process list item token (``list_item`` or ``task_list_item``).

        Parameters
        ----------
        token : dict
            List item token with 'children'

        Returns
        -------
        ListItem
            List item AST node

        """
        content = self._process_tokens(token.get("children", []))

        task_status: Literal["checked", "unchecked"] | None = None
        attrs = token.get("attrs") or {}
        if "checked" in attrs:
            task_status = "checked" if attrs["checked"] else "unchecked"

        return ListItem(children=content, task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> Table:
        header = None
        rows: list[TableRow] = []
        alignments: list[Any] = []

        for part in token.get("children", []):
            part_type = part.get("type", "")
            if part_type == "table_head":
                # Header cells are direct children of table_head (no table_row)
                cells = self._process_table_cells(part.get("children", []))
                header = TableRow(cells=cells)
                alignments = [cell.alignment for cell in cells]
            elif part_type == "table_body":
                for row_token in part.get("children", []):
                    rows.append(TableRow(cells=self._process_table_cells(row_token.get("children", []))))

        return Table(header=header, rows=rows, alignments=alignments)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        cells = []
        for cell_token in cell_tokens:
            if cell_token.get("type") != "table_cell":
                continue
            alignment = (cell_token.get("attrs") or {}).get("align")
            cells.append(
                TableCell(content=self._process_inline_tokens(cell_token.get("children", [])), alignment=alignment)
            )
        return cells

    def _process_html_block(self, token: dict[str, Any]) -> HTMLBlock | Comment:
        content = token.get("raw", "")
        if _is_html_comment(content):
            return Comment(content=_extract_comment_text(content))
        return HTMLBlock(content=content.rstrip("\n"))

    def _collect_footnotes(self, token: dict[str, Any]) -> None:
        """Store footnote definitions from the trailing ``footnotes`` token.

        mistune appends a single container token holding one
        ``footnote_item`` per referenced note, in reference order.
        """
        for item in token.get("children", []):
            attrs = item.get("attrs") or {}
            identifier = attrs.get("key") or attrs.get("label") or ""
            self._footnote_definitions[identifier] = self._process_tokens(item.get("children", []))

    def _process_definition_list(self, token: dict[str, Any]) -> DefinitionList:
        items: list[tuple[DefinitionTerm, list[DefinitionDescription]]] = []
        current_term: DefinitionTerm | None = None
        current_descriptions: list[DefinitionDescription] = []

        for child in token.get("children", []):
            child_type = child.get("type", "")
            if child_type == "def_list_head":
                if current_term is not None:
                    items.append((current_term, current_descriptions))
                current_term = DefinitionTerm(content=self._process_inline_tokens(child.get("children", [])))
                current_descriptions = []
            elif child_type in ("def_list_item", "def_list_content"):
                children = child.get("children", [])
                if children and all(_is_inline_token(c) for c in children):
                    description = [Paragraph(content=self._process_inline_tokens(children))]
                else:
                    description = self._process_tokens(children)
                current_descriptions.append(DefinitionDescription(content=description))

        if current_term is not None:
            items.append((current_term, current_descriptions))

        return DefinitionList(items=items)

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
            "footnote_ref": self._handle_footnote_ref_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug("Ignoring unsupported mistune inline token: %s", token_type)
        return None

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(content=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs") or {}
        return Link(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title"),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token; alt text lives in the children, not attrs."""
        attrs = token.get("attrs") or {}
        alt_text = "".join(_plain_text(child) for child in token.get("children", []))
        return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=True)

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _handle_footnote_ref_token(self, token: dict[str, Any]) -> FootnoteReference:
        attrs = token.get("attrs") or {}
        return FootnoteReference(identifier=token.get("raw") or attrs.get("label", ""))


def _is_html_comment(content: str) -> bool:
    stripped = content.strip()
    return stripped.startswith("<!--") and stripped.endswith("-->")


def _extract_comment_text(content: str) -> str:
    """Extract the text of an HTML comment, keeping its inner line structure.

    Parameters
    ----------
    content : str
        HTML comment content (including <!-- and -->)

    Returns
    -------
    str
        Comment text without the markers and without surrounding blank lines

    """
    inner = content.strip()[4:-3]
    return inner.strip("\n").rstrip()


# Pipe table whose body rows may have fewer (or more) cells than the header
_LENIENT_TABLE_PATTERN = (
    r"^ {0,3}(?P<lenient_table_head>\|?[^\n]*\|[^\n]*)\n"
    r" {0,3}(?P<lenient_table_align>\|? *:?-+:? *(?:\| *:?-+:? *)*\|?)[ \t]*(?:\n|$)"
    r"(?P<lenient_table_body>(?: {0,3}[^\n]*\|[^\n]*(?:\n|$))*)"
)
_CELL_SEPARATOR = re.compile(r"(?<!\\)\|")


def _split_table_row(line: str) -> list[str]:
    text = line.strip()
    if text.startswith("|"):
        text = text[1:]
    if text.endswith("|") and not text.endswith("\\|"):
        text = text[:-1]
    return [cell.strip() for cell in _CELL_SEPARATOR.split(text)]


def _cell_alignment(delimiter: str) -> str | None:
    if delimiter.startswith(":") and delimiter.endswith(":"):
        return "center"
    if delimiter.endswith(":"):
        return "right"
    if delimiter.startswith(":"):
        return "left"
    return None


def _parse_lenient_table(block: Any, m: re.Match[str], state: Any) -> int | None:
    """Tokenize a pipe table, keeping body rows whose cell count differs from the header."""
    aligns = [_cell_alignment(cell) for cell in _split_table_row(m.group("lenient_table_align"))]
    header = _split_table_row(m.group("lenient_table_head"))
    if len(header) != len(aligns):
        return None

    def _cells(texts: list[str], head: bool) -> list[dict[str, Any]]:
        return [
            {"type": "table_cell", "text": text, "attrs": {"align": aligns[i], "head": head}}
            for i, text in enumerate(texts[: len(aligns)])
        ]

    rows = [
        {"type": "table_row", "children": _cells(_split_table_row(line), head=False)}
        for line in m.group("lenient_table_body").splitlines()
    ]
    state.append_token(
        {
            "type": "table",
            "children": [
                {"type": "table_head", "children": _cells(header, head=True)},
                {"type": "table_body", "children": rows},
            ],
        }
    )
    return m.end()


def lenient_table(md: mistune.Markdown) -> None:
    """Replace the rule of mistune's ``table`` plugin with :func:`_parse_lenient_table`.

    GFM rejects a table as soon as one body row is short; AsciiDoc pads short
    rows, so such tables are kept. Must be loaded after ``table``.
    """
    md.block.register("table", _LENIENT_TABLE_PATTERN, _parse_lenient_table, before="paragraph")


def _is_inline_token(token: dict[str, Any]) -> bool:
    return token.get("type") in {
        "text",
        "strong",
        "emphasis",
        "codespan",
        "link",
        "image",
        "linebreak",
        "softbreak",
        "strikethrough",
        "inline_html",
        "footnote_ref",
    }


def _plain_text(token: dict[str, Any]) -> str:
    if "raw" in token and token.get("type") in ("text", "codespan"):
        return token["raw"]
    return "".join(_plain_text(child) for child in token.get("children", []))


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    """Parse Markdown text into a Document (convenience wrapper).

    Parameters
    ----------
    markdown_content : str
        Markdown source text
    options : MarkdownParserOptions or None, default None
        Parser options

    Returns
    -------
    Document
        AST document node

    """
    return MarkdownParser(options).parse(markdown_content)
