#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_api.py
"""Integration tests for convert and convert_file.

These tests run the full pipeline: normalization, preprocessors, parsing,
rendering, postprocessors and output delivery.
"""

import io
import sys

import pytest

from md2adoc import convert, convert_file
from md2adoc.exceptions import (
    EncodingError,
    FileNotFoundError,
    InvalidOptionsError,
    ValidationError,
)
from md2adoc.options import AsciiDocRendererOptions, MarkdownParserOptions

SAMPLE = "Markdown was *here*, but it has become **AsciiDoc**!"
SAMPLE_ADOC = "Markdown was _here_, but it has become *AsciiDoc*!\n"


@pytest.mark.integration
class TestConvert:
    """Tests for convert with default settings."""

    def test_inline_formatting(self):
        assert convert(SAMPLE) == SAMPLE_ADOC

    def test_empty_input(self):
        assert convert("") == ""

    def test_menu_idiom_registers_experimental(self):
        attributes = {}
        assert convert("**File > Save**", attributes=attributes) == ":experimental:\n\nmenu:File[Save]\n"
        assert attributes == {"experimental": ""}

    def test_leading_comment_block(self):
        source = " <!--\nA legal statement\n\n...of some sort\n-->\n# Document Title\n"
        assert convert(source) == "////\nA legal statement\n\n...of some sort\n////\n= Document Title\n"

    def test_book(self):
        source = "# Document Title\n\n# Part 1\n\n## Chapter A\n\nso it begins\n"
        expected = "= Document Title\n:doctype: book\n\n= Part 1\n\n== Chapter A\n\nso it begins\n"
        assert convert(source) == expected

    @pytest.mark.parametrize("newline", ["\r\n", "\r"])
    def test_line_endings_are_normalized(self, newline):
        source = newline.join(["", "", "one", "two", "three", ""])
        assert convert(source) == "one\ntwo\nthree\n"

    def test_bytes_with_declared_encoding(self):
        assert convert("café *ok*\n".encode("latin-1"), encoding="latin-1") == "café _ok_\n"

    def test_undecodable_bytes_with_declared_encoding(self):
        with pytest.raises(EncodingError):
            convert(b"\xff\xfe\xfa", encoding="utf-8")

    def test_binary_stream_source(self):
        assert convert(io.BytesIO(SAMPLE.encode("utf-8"))) == SAMPLE_ADOC

    def test_escaped_markdown_marks_stay_literal(self):
        assert convert(r"\*not bold\* and \_not italic\_") == "\\*not bold* and \\_not italic_\n"

    def test_paragraph_after_nested_list_belongs_to_parent(self):
        assert convert("* a\n  * b\n\n  para for a\n") == "* a\n** b\n\n+\npara for a\n"

    def test_table_with_short_row_is_padded(self):
        source = "| A | B | C |\n|---|---|---|\n| 1 |\n"
        assert convert(source) == "|===\n| A | B | C\n\n| 1 | |\n|===\n"

    def test_latin1_bytes_are_detected(self):
        assert convert("bien sûr !".encode("iso-8859-1")) == "bien sûr !\n"

    def test_kwargs_override_renderer_options(self):
        assert convert("a\nb\n", wrap="none") == "a b\n"

    def test_kwargs_override_parser_options(self):
        assert convert("~~x~~", input="markdown") == "~~x~~\n"

    def test_explicit_options(self):
        result = convert(
            "## Section\n",
            parser_options=MarkdownParserOptions(),
            renderer_options=AsciiDocRendererOptions(heading_offset=1),
        )
        assert result == "=== Section\n"

    def test_unknown_kwarg(self):
        with pytest.raises(InvalidOptionsError):
            convert("x", colour="blue")


@pytest.mark.integration
class TestFrontMatter:
    """Tests for front matter handling through convert."""

    def test_title_from_front_matter(self):
        source = "---\ntitle: Document Title\n---\nBody content.\n"
        assert convert(source) == "= Document Title\n\nBody content.\n"

    def test_front_matter_attributes_reach_caller(self):
        attributes = {}
        convert("---\nauthor: Jane\nlayout: post\n---\nBody\n", attributes=attributes)
        assert attributes == {"author": "Jane"}

    def test_preprocessors_none_keeps_front_matter(self):
        result = convert("---\nfront: matter\n---\n", preprocessors=None)
        assert result.startswith("'''")

    @pytest.mark.parametrize("disabled", [False, []])
    def test_other_ways_to_disable_preprocessing(self, disabled):
        assert convert("---\nfront: matter\n---\n", preprocessors=disabled).startswith("'''")

    def test_toc_block_becomes_macro(self):
        source = "# T\n\n<!-- TOC -->\n- [A](#a)\n<!-- /TOC -->\n\n## A\n"
        assert convert(source) == "= T\n:toc: macro\n\ntoc::[]\n\n== A\n"


@pytest.mark.integration
class TestExtensions:
    """Tests for preprocessors and postprocessors."""

    def test_two_argument_preprocessor(self):
        def replace(text, attributes):
            return "# You Have Been Replaced!"

        assert convert("# Original", preprocessors=[replace]) == "= You Have Been Replaced!\n"

    def test_one_argument_preprocessor(self):
        assert convert("hello", preprocessors=[str.upper]) == "HELLO\n"

    def test_preprocessor_sees_attributes(self):
        seen = {}

        def capture(text, attributes):
            seen.update(attributes)
            return text

        convert("x", attributes={"foo": "bar"}, preprocessors=[capture])
        assert seen == {"foo": "bar"}

    def test_postprocess_single_callable(self):
        result = convert(SAMPLE, postprocess=lambda text: text.replace("become", "become glorious"))
        assert result == "Markdown was _here_, but it has become glorious *AsciiDoc*!\n"

    def test_postprocess_receives_document(self):
        result = convert(SAMPLE, postprocess=lambda text, doc: text.replace("Markdown", doc.options.input))
        assert result == "GFM was _here_, but it has become *AsciiDoc*!\n"

    def test_postprocess_returning_none_keeps_text(self):
        assert convert(SAMPLE, postprocess=lambda text: None) == SAMPLE_ADOC

    def test_postprocessors_run_in_order(self):
        result = convert(
            SAMPLE,
            postprocessors=[
                lambda text: text.replace("become", "become glorious"),
                lambda text: text.replace("glorious", "marvelous"),
            ],
        )
        assert "become marvelous" in result

    def test_postprocessor_sees_text_without_trailing_newline(self):
        seen = []
        convert(SAMPLE, postprocess=lambda text: seen.append(text))
        assert seen == [SAMPLE_ADOC.rstrip("\n")]

    def test_extension_errors_propagate(self):
        def broken(text):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            convert("x", postprocess=broken)

    def test_non_callable_extension(self):
        with pytest.raises(ValidationError):
            convert("x", postprocessors=["not callable"])


@pytest.mark.integration
class TestAttributes:
    """Tests for the attributes mapping."""

    def test_caller_attributes_are_emitted(self):
        assert convert("Body", attributes={"toc": "left"}) == ":toc: left\n\nBody\n"

    def test_attributes_not_updated_on_failure(self):
        attributes = {}
        with pytest.raises(RuntimeError):
            convert("**File > Save**", attributes=attributes, postprocess=_raise)
        assert attributes == {}

    def test_book_doctype_recorded(self):
        attributes = {}
        convert("# A\n\n# B\n", attributes=attributes)
        assert attributes == {"doctype": "book"}


def _raise(text):
    raise RuntimeError("postprocessor failed")


@pytest.mark.integration
class TestOutputDestinations:
    """Tests for writing converted output."""

    def test_write_to_stdout(self, capsys):
        assert convert(SAMPLE, to=sys.stdout) is None
        assert capsys.readouterr().out == SAMPLE_ADOC

    def test_write_to_string_io(self):
        buffer = io.StringIO()
        assert convert(SAMPLE, to=buffer) is None
        assert buffer.getvalue() == SAMPLE_ADOC

    def test_write_to_path_creates_directories(self, tmp_path):
        target = tmp_path / "build" / "docs" / "out.adoc"
        assert convert(SAMPLE, to=str(target)) is None
        assert target.read_text(encoding="utf-8") == SAMPLE_ADOC

    def test_empty_output_file(self, tmp_path):
        target = tmp_path / "empty.adoc"
        convert("", to=target)
        assert target.read_bytes() == b""


@pytest.mark.integration
class TestConvertFile:
    """Tests for convert_file."""

    def test_default_output_is_adoc_sibling(self, markdown_file):
        source = markdown_file(SAMPLE, name="sample.md")
        assert convert_file(source) is None
        assert source.with_suffix(".adoc").read_text(encoding="utf-8") == SAMPLE_ADOC

    def test_to_none_returns_text(self, markdown_file):
        source = markdown_file(SAMPLE)
        assert convert_file(source, to=None) == SAMPLE_ADOC
        assert not source.with_suffix(".adoc").exists()

    def test_explicit_target(self, markdown_file, tmp_path):
        source = markdown_file(SAMPLE)
        target = tmp_path / "out" / "result.adoc"
        convert_file(str(source), to=target)
        assert target.read_text(encoding="utf-8") == SAMPLE_ADOC

    def test_open_file_source(self, markdown_file):
        source = markdown_file(SAMPLE, name="opened.md")
        with open(source, "rb") as handle:
            convert_file(handle)
        assert source.with_suffix(".adoc").read_text(encoding="utf-8") == SAMPLE_ADOC

    def test_latin1_file(self, markdown_file):
        source = markdown_file("# Café\n", encoding="latin-1")
        assert convert_file(source, to=None, encoding="latin-1") == "= Café\n"

    def test_stream_without_name_needs_target(self):
        with pytest.raises(ValidationError):
            convert_file(io.BytesIO(b"x"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            convert_file(tmp_path / "missing.md")

    def test_adoc_source_is_not_overwritten(self, markdown_file):
        source = markdown_file("x", name="already.adoc")
        with pytest.raises(ValidationError):
            convert_file(source)
