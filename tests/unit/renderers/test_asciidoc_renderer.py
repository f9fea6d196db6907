#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_asciidoc_renderer.py
"""Unit tests for AsciiDocRenderer.

Tests cover:
- Document header assembly (title, doctype, attribute entries, prologue)
- Heading markers, discrete headings and generated ids
- Inline formatting, including the menu and kbd idioms
- Lists, tables, quotes, admonitions, code and comments
- Footnotes and unsupported node handling
"""

import io
from dataclasses import dataclass, field
from typing import Any, Optional

import pytest

from md2adoc.ast import (
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
)
from md2adoc.exceptions import InvalidOptionsError, UnsupportedNodeError
from md2adoc.options.asciidoc import AsciiDocRendererOptions
from md2adoc.renderers.asciidoc import AsciiDocRenderer


def _para(*content: Node) -> Paragraph:
    return Paragraph(content=list(content))


def _item(text: str, *blocks: Node, task_status=None) -> ListItem:
    return ListItem(children=[_para(Text(content=text)), *blocks], task_status=task_status)


def _row(*texts: str) -> TableRow:
    return TableRow(cells=[TableCell(content=[Text(content=t)]) for t in texts])


@dataclass
class Callout(Node):
    """A node kind the renderer knows nothing about."""

    label: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_callout(self)


@pytest.mark.unit
class TestDocumentHeader:
    """Tests for title promotion, doctype and attribute entries."""

    def test_empty_document_renders_empty_string(self, render):
        assert render(Document()) == ""

    def test_leading_level_one_heading_is_document_title(self, render):
        doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        assert render(doc) == "= Title\n"

    def test_title_section_and_body(self, render):
        doc = Document(
            children=[
                Heading(level=1, content=[Text(content="Title")]),
                Heading(level=2, content=[Text(content="Section")]),
                _para(Text(content="Body.")),
            ]
        )
        assert render(doc) == "= Title\n\n== Section\n\nBody.\n"

    def test_multiple_parts_declare_book(self, render):
        doc = Document(
            children=[
                Heading(level=1, content=[Text(content="Document Title")]),
                Heading(level=1, content=[Text(content="Part 1")]),
                Heading(level=2, content=[Text(content="Chapter A")]),
                _para(Text(content="so it begins")),
            ]
        )
        attributes = {}
        result = render(doc, attributes)
        assert result == "= Document Title\n:doctype: book\n\n= Part 1\n\n== Chapter A\n\nso it begins\n"
        assert result.count(":doctype: book") == 1
        assert attributes == {"doctype": "book"}

    def test_caller_doctype_wins(self, render):
        doc = Document(
            children=[
                Heading(level=1, content=[Text(content="Title")]),
                Heading(level=1, content=[Text(content="Part")]),
            ]
        )
        result = render(doc, {"doctype": "article"})
        assert ":doctype: article" in result
        assert "book" not in result

    def test_doctitle_attribute_seeds_title(self, render):
        doc = Document(children=[_para(Text(content="Body content."))])
        assert render(doc, {"doctitle": "Document Title"}) == "= Document Title\n\nBody content.\n"

    def test_attribute_entries(self, render):
        doc = Document(children=[Heading(level=1, content=[Text(content="T")])])
        result = render(doc, {"toc": "macro", "sectnums": "", "hide": None})
        assert result == "= T\n:toc: macro\n:sectnums:\n:hide!:\n"

    def test_attributes_without_title(self, render):
        doc = Document(children=[_para(Text(content="Body"))])
        assert render(doc, {"icons": "font"}) == ":icons: font\n\nBody\n"

    def test_prologue_comment_joins_header(self, render):
        doc = Document(
            children=[
                Comment(content="A legal statement\n\n...of some sort"),
                Heading(level=1, content=[Text(content="Document Title")]),
            ]
        )
        assert render(doc) == "////\nA legal statement\n\n...of some sort\n////\n= Document Title\n"

    def test_renderer_can_be_reused(self):
        renderer = AsciiDocRenderer()
        menu_doc = Document(children=[_para(Strong(content=[Text(content="File > Save")]))])
        plain_doc = Document(children=[_para(Text(content="plain"))])

        assert renderer.render_to_string(menu_doc).startswith(":experimental:")
        assert renderer.render_to_string(plain_doc) == "plain\n"


@pytest.mark.unit
class TestHeadingRendering:
    """Tests for section headings."""

    def _doc(self, *headings: Heading) -> Document:
        return Document(children=[Heading(level=1, content=[Text(content="Title")]), *headings])

    def test_heading_markers_follow_level(self, render):
        result = render(self._doc(Heading(level=2, content=[Text(content="Sub")])))
        assert "\n== Sub" in result

    def test_heading_offset(self, render):
        result = render(self._doc(Heading(level=2, content=[Text(content="Sub")])), heading_offset=1)
        assert result.startswith("= Title\n")
        assert "\n=== Sub" in result

    def test_skipped_level_is_discrete(self, render):
        result = render(self._doc(Heading(level=3, content=[Text(content="Deep")])))
        assert "[discrete]\n=== Deep" in result

    def test_sequential_levels_are_not_discrete(self, render):
        result = render(
            self._doc(
                Heading(level=2, content=[Text(content="A")]),
                Heading(level=3, content=[Text(content="B")]),
            )
        )
        assert "[discrete]" not in result

    def test_auto_ids(self, render):
        result = render(self._doc(Heading(level=2, content=[Text(content="Getting Started")])), auto_ids=True)
        assert "[#_getting_started]\n== Getting Started" in result

    def test_auto_ids_custom_prefix_and_separator(self, render):
        doc = self._doc(Heading(level=2, content=[Text(content="Getting Started")]))
        result = render(doc, auto_ids=True, auto_id_prefix="sec-", auto_id_separator="-")
        assert "[#sec-getting-started]" in result

    def test_lazy_ids_skip_default_ids(self, render):
        doc = self._doc(Heading(level=2, content=[Text(content="Getting Started")]))
        result = render(doc, auto_ids=True, lazy_ids=True)
        assert "[#" not in result


@pytest.mark.unit
class TestInlineFormatting:
    """Tests for inline markup."""

    def test_emphasis_and_strong(self, render):
        doc = Document(
            children=[
                _para(
                    Text(content="Markdown was "),
                    Emphasis(content=[Text(content="here")]),
                    Text(content=", but it has become "),
                    Strong(content=[Text(content="AsciiDoc")]),
                    Text(content="!"),
                )
            ]
        )
        assert render(doc) == "Markdown was _here_, but it has become *AsciiDoc*!\n"

    def test_unconstrained_markers_inside_words(self, render):
        doc = Document(
            children=[_para(Text(content="un"), Strong(content=[Text(content="bold")]), Text(content="ed"))]
        )
        assert render(doc) == "un**bold**ed\n"

    def test_strikethrough(self, render):
        doc = Document(children=[_para(Strikethrough(content=[Text(content="gone")]))])
        assert render(doc) == "[.line-through]#gone#\n"

    def test_code_span(self, render):
        doc = Document(children=[_para(Code(content="x = 1"))])
        assert render(doc) == "`x = 1`\n"

    def test_code_span_with_markup_uses_passthrough(self, render):
        doc = Document(children=[_para(Code(content="a*b*c"))])
        assert render(doc) == "`+a*b*c+`\n"

    def test_literal_formatting_marks_are_escaped(self, render):
        doc = Document(children=[_para(Text(content="*not bold* and _not italic_"))])
        assert render(doc) == "\\*not bold* and \\_not italic_\n"

    def test_marks_split_across_text_nodes_are_escaped(self, render):
        doc = Document(children=[_para(Text(content="*"), Text(content="not bold"), Text(content="*"))])
        assert render(doc) == "\\*not bold*\n"

    def test_unconstrained_pair_uses_double_backslash(self, render):
        doc = Document(children=[_para(Text(content="a**b**c"))])
        assert render(doc) == "a\\\\**b**c\n"

    def test_unpaired_marks_are_left_alone(self, render):
        doc = Document(children=[_para(Text(content="2 * 3 * 4 in snake_case_name, C# and C+"))])
        assert render(doc) == "2 * 3 * 4 in snake_case_name, C# and C+\n"

    def test_attribute_references_are_escaped(self, render):
        doc = Document(children=[_para(Text(content="Use {version} here"))])
        assert render(doc) == "Use \\{version} here\n"

    def test_attribute_reference_escaping_can_be_disabled(self, render):
        doc = Document(children=[_para(Text(content="Use {version} here"))])
        assert render(doc, escape_attribute_references=False) == "Use {version} here\n"


@pytest.mark.unit
class TestUiMacros:
    """Tests for the menu and kbd idioms."""

    def test_menu_idiom(self, render):
        attributes = {}
        doc = Document(children=[_para(Strong(content=[Text(content="File > Save")]))])
        assert render(doc, attributes) == ":experimental:\n\nmenu:File[Save]\n"
        assert attributes == {"experimental": ""}

    def test_menu_with_submenus(self, render):
        doc = Document(children=[_para(Strong(content=[Text(content="View > Zoom > Reset")]))])
        assert "menu:View[Zoom > Reset]" in render(doc)

    def test_experimental_registered_once(self, render):
        doc = Document(
            children=[
                _para(Strong(content=[Text(content="File > Save")])),
                _para(Strong(content=[Text(content="Edit > Copy")])),
            ]
        )
        assert render(doc).count(":experimental:") == 1

    def test_bold_without_separator_is_strong(self, render):
        doc = Document(children=[_para(Strong(content=[Text(content="a>b")]))])
        assert render(doc) == "*a>b*\n"

    def test_kbd_combination(self, render):
        doc = Document(
            children=[
                _para(
                    Text(content="Press "),
                    HTMLInline(content="<kbd>"),
                    Text(content="Ctrl"),
                    HTMLInline(content="</kbd>"),
                    Text(content="+"),
                    HTMLInline(content="<kbd>"),
                    Text(content="T"),
                    HTMLInline(content="</kbd>"),
                )
            ]
        )
        assert render(doc) == ":experimental:\n\nPress kbd:[Ctrl+T]\n"


@pytest.mark.unit
class TestLinksAndImages:
    """Tests for link and image macros."""

    @pytest.mark.parametrize(
        "url,text,expected",
        [
            ("https://example.com", "https://example.com", "https://example.com"),
            ("https://example.org", "Example", "https://example.org[Example]"),
            ("#install", "Install", "<<install,Install>>"),
            ("guide.md", "Guide", "xref:guide.adoc[Guide]"),
            ("guide.md#setup", "Guide", "xref:guide.adoc#setup[Guide]"),
            ("docs/file.pdf", "File", "link:docs/file.pdf[File]"),
        ],
    )
    def test_link_forms(self, render, url, text, expected):
        doc = Document(children=[_para(Link(url=url, content=[Text(content=text)]))])
        assert render(doc) == expected + "\n"

    def test_link_title(self, render):
        doc = Document(children=[_para(Link(url="https://x.org", content=[Text(content="X")], title="Tip"))])
        assert render(doc) == 'https://x.org["X",title="Tip"]\n'

    def test_link_text_brackets_escaped(self, render):
        doc = Document(children=[_para(Link(url="https://x.org", content=[Text(content="[x]")]))])
        assert render(doc) == "https://x.org[[x\\]]\n"

    def test_image_alone_is_block_image(self, render):
        doc = Document(children=[_para(Image(url="diagram.png", alt_text="Diagram"))])
        assert render(doc) == "image::diagram.png[Diagram]\n"

    def test_inline_image_with_imagesdir(self, render):
        attributes = {}
        doc = Document(children=[_para(Text(content="See "), Image(url="images/a.png", alt_text="A"))])
        assert render(doc, attributes, imagesdir="images") == ":imagesdir: images\n\nSee image:a.png[A]\n"
        assert attributes["imagesdir"] == "images"

    def test_imagesdir_ignored_for_other_paths(self, render):
        attributes = {}
        doc = Document(children=[_para(Text(content="See "), Image(url="other/a.png", alt_text="A"))])
        assert render(doc, attributes, imagesdir="images") == "See image:other/a.png[A]\n"
        assert "imagesdir" not in attributes


@pytest.mark.unit
class TestLineBreaks:
    """Tests for hard and soft breaks and wrap modes."""

    def _doc(self, soft: bool) -> Document:
        return Document(children=[_para(Text(content="a"), LineBreak(soft=soft), Text(content="b"))])

    def test_hard_break(self, render):
        assert render(self._doc(soft=False)) == "a +\nb\n"

    def test_soft_break_preserved(self, render):
        assert render(self._doc(soft=True)) == "a\nb\n"

    def test_soft_break_joined_with_wrap_none(self, render):
        assert render(self._doc(soft=True), wrap="none") == "a b\n"

    def test_ventilate_puts_sentences_on_lines(self, render):
        doc = Document(children=[_para(Text(content="One. Two!"), LineBreak(soft=True), Text(content="Three"))])
        assert render(doc, wrap="ventilate") == "One.\nTwo!\nThree\n"

    def test_br_tag_is_hard_break(self, render):
        doc = Document(children=[_para(Text(content="a"), HTMLInline(content="<br>"), Text(content="b"))])
        assert render(doc) == "a +\nb\n"


@pytest.mark.unit
class TestHtmlAndComments:
    """Tests for HTML passthrough and comments."""

    def test_single_line_comment(self, render):
        assert render(Document(children=[Comment(content="one line")])) == "// one line\n"

    def test_multi_line_comment_lines_are_left_stripped(self, render):
        doc = Document(children=[_para(Text(content="x")), Comment(content="first\n   second")])
        assert render(doc) == "x\n\n////\nfirst\nsecond\n////\n"

    def test_html_block_passthrough(self, render):
        assert render(Document(children=[HTMLBlock(content="<div>hi</div>")])) == "++++\n<div>hi</div>\n++++\n"

    def test_html_block_dropped(self, render):
        doc = Document(children=[HTMLBlock(content="<div>hi</div>"), _para(Text(content="kept"))])
        assert render(doc, html_passthrough_mode="drop") == "kept\n"

    def test_inline_comment_dropped(self, render):
        doc = Document(children=[_para(Text(content="x"), HTMLInline(content="<!-- c -->"), Text(content="y"))])
        assert render(doc) == "xy\n"

    def test_inline_comment_between_spaces_leaves_one_space(self, render):
        doc = Document(
            children=[_para(Text(content="text "), HTMLInline(content="<!-- c -->"), Text(content=" more"))]
        )
        assert render(doc) == "text more\n"

    def test_inline_html_passthrough(self, render):
        doc = Document(children=[_para(HTMLInline(content="<span>"), Text(content="x"))])
        assert render(doc) == "+++<span>+++x\n"


@pytest.mark.unit
class TestListRendering:
    """Tests for list markers, nesting and continuation."""

    def test_unordered_list(self, render):
        doc = Document(children=[List(ordered=False, items=[_item("a"), _item("b")])])
        assert render(doc) == "* a\n* b\n"

    def test_nested_list_attaches_directly(self, render):
        nested = List(ordered=False, items=[_item("b")])
        doc = Document(children=[List(ordered=False, items=[_item("a", nested)])])
        assert render(doc) == "* a\n** b\n"

    def test_ordered_list_with_start(self, render):
        doc = Document(children=[List(ordered=True, start=3, items=[_item("a"), _item("b")])])
        assert render(doc) == "[start=3]\n. a\n. b\n"

    def test_task_items(self, render):
        doc = Document(
            children=[
                List(
                    ordered=False,
                    items=[_item("done", task_status="checked"), _item("todo", task_status="unchecked")],
                )
            ]
        )
        assert render(doc) == "* [x] done\n* [ ] todo\n"

    def test_block_content_uses_continuation(self, render):
        item = _item("Item with code", CodeBlock(content="print('hello')", language="python"))
        doc = Document(children=[List(ordered=False, items=[item])])
        assert render(doc) == "* Item with code\n+\n[,python]\n----\nprint('hello')\n----\n"

    def test_block_after_nested_list_attaches_to_parent(self, render):
        nested = List(ordered=False, items=[_item("b")])
        item = _item("a", nested, Paragraph(content=[Text(content="para for a")]))
        doc = Document(children=[List(ordered=False, items=[item])])
        assert render(doc) == "* a\n** b\n\n+\npara for a\n"

    def test_block_after_doubly_nested_list_climbs_two_levels(self, render):
        innermost = List(ordered=False, items=[_item("c")])
        nested = List(ordered=False, items=[_item("b", innermost)])
        item = _item("a", nested, Paragraph(content=[Text(content="para for a")]))
        doc = Document(children=[List(ordered=False, items=[item])])
        assert render(doc) == "* a\n** b\n*** c\n\n\n+\npara for a\n"


@pytest.mark.unit
class TestTableRendering:
    """Tests for table rendering."""

    def test_header_and_padded_rows(self, render):
        doc = Document(children=[Table(header=_row("A", "B"), rows=[_row("1", "2"), _row("3")])])
        assert render(doc) == "|===\n| A | B\n\n| 1 | 2\n| 3 |\n|===\n"

    def test_alignment_columns(self, render):
        doc = Document(children=[Table(header=_row("A", "B"), rows=[_row("1", "2")], alignments=[None, "right"])])
        assert render(doc).startswith('[cols="1,>1"]\n|===\n')

    def test_pipe_in_cell_is_escaped(self, render):
        doc = Document(children=[Table(rows=[_row("a|b")])])
        assert render(doc) == "|===\n| a\\|b\n|===\n"

    def test_header_only_table_declares_header(self, render):
        doc = Document(children=[Table(header=_row("A", "B"))])
        assert render(doc) == '[options="header"]\n|===\n| A | B\n|===\n'

    def test_header_only_table_with_alignment(self, render):
        doc = Document(children=[Table(header=_row("A", "B"), alignments=["center", None])])
        assert render(doc).startswith('[cols="^1,1",options="header"]\n|===\n')


@pytest.mark.unit
class TestBlockRendering:
    """Tests for quotes, admonitions, code blocks and other blocks."""

    def test_block_quote(self, render):
        doc = Document(children=[BlockQuote(children=[_para(Text(content="quoted"))])])
        assert render(doc) == "____\nquoted\n____\n"

    def test_admonition_quote(self, render):
        quote = BlockQuote(children=[_para(Strong(content=[Text(content="Note:")]), Text(content=" Be careful."))])
        assert render(Document(children=[quote])) == "[NOTE]\n====\nBe careful.\n====\n"

    def test_admonition_paragraph(self, render):
        doc = Document(children=[_para(Strong(content=[Text(content="Warning")]), Text(content=": Hot."))])
        assert render(doc) == "WARNING: Hot.\n"

    def test_code_block_with_language(self, render):
        doc = Document(children=[CodeBlock(content="x = 1\n", language="python")])
        assert render(doc) == "[,python]\n----\nx = 1\n----\n"

    def test_code_block_source_style(self, render):
        doc = Document(children=[CodeBlock(content="x = 1\n", language="python")])
        assert render(doc, source_style="source") == "[source,python]\n----\nx = 1\n----\n"

    def test_code_block_containing_delimiter(self, render):
        doc = Document(children=[CodeBlock(content="a\n----\nb")])
        assert render(doc) == "-----\na\n----\nb\n-----\n"

    def test_thematic_break(self, render):
        assert render(Document(children=[ThematicBreak()])) == "'''\n"

    def test_definition_list(self, render):
        doc = Document(
            children=[
                DefinitionList(
                    items=[
                        (
                            DefinitionTerm(content=[Text(content="CPU")]),
                            [DefinitionDescription(content=[_para(Text(content="Processor"))])],
                        )
                    ]
                )
            ]
        )
        assert render(doc) == "CPU::\nProcessor\n"


@pytest.mark.unit
class TestFootnotes:
    """Tests for footnote rendering."""

    def test_first_reference_carries_text(self, render):
        doc = Document(
            children=[
                _para(
                    Text(content="A"),
                    FootnoteReference(identifier="1"),
                    Text(content=" B"),
                    FootnoteReference(identifier="1"),
                ),
                FootnoteDefinition(identifier="1", content=[_para(Text(content="Note text"))]),
            ]
        )
        assert render(doc) == "Afootnote:1[Note text] Bfootnote:1[]\n"

    def test_missing_definition(self, render):
        doc = Document(children=[_para(Text(content="A"), FootnoteReference(identifier="x"))])
        assert render(doc) == "Afootnote:x[]\n"


@pytest.mark.unit
class TestUnsupportedNodes:
    """Tests for node kinds with no AsciiDoc mapping."""

    def test_unknown_node_kind_raises(self, render):
        location = SourceLocation(format="markdown", line=3)
        doc = Document(children=[Callout(label="x", source_location=location)])
        with pytest.raises(UnsupportedNodeError) as exc_info:
            render(doc)
        assert exc_info.value.node_type == "Callout"
        assert "line 3" in str(exc_info.value)

    def test_non_node_child_raises(self, render):
        doc = Document(children=[Paragraph(content=["raw string"])])
        with pytest.raises(UnsupportedNodeError) as exc_info:
            render(doc)
        assert exc_info.value.node_type == "str"

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            AsciiDocRenderer(options="not options")

    def test_options_are_used(self):
        renderer = AsciiDocRenderer(AsciiDocRendererOptions(wrap="none"))
        assert renderer.options.wrap == "none"


@pytest.mark.unit
class TestRenderToDestination:
    """Tests for BaseRenderer.render."""

    def test_render_to_stream(self):
        buffer = io.StringIO()
        AsciiDocRenderer().render(Document(children=[_para(Text(content="x"))]), buffer)
        assert buffer.getvalue() == "x\n"

    def test_render_to_path(self, tmp_path):
        target = tmp_path / "nested" / "out.adoc"
        AsciiDocRenderer().render(Document(children=[Heading(level=1, content=[Text(content="T")])]), target)
        assert target.read_text(encoding="utf-8") == "= T\n"
