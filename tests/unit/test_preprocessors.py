#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_preprocessors.py
"""Unit tests for front matter extraction and TOC replacement."""

import pytest

from md2adoc.preprocessors import DEFAULT_PREPROCESSORS, extract_front_matter, parse_front_matter, replace_toc


@pytest.mark.unit
class TestParseFrontMatter:
    """Tests for parse_front_matter."""

    def test_yaml_front_matter(self):
        metadata, body = parse_front_matter("---\ntitle: Intro\ntags: [a, b]\n---\n\nBody\n")
        assert metadata == {"title": "Intro", "tags": ["a", "b"]}
        assert body == "Body\n"

    def test_toml_front_matter(self):
        metadata, body = parse_front_matter('+++\ntitle = "Intro"\n+++\nBody\n')
        assert metadata == {"title": "Intro"}
        assert body == "Body\n"

    def test_no_front_matter(self):
        text = "# Title\n\n---\nfoo: bar\n---\n"
        assert parse_front_matter(text) == ({}, text)

    def test_unclosed_block_is_not_front_matter(self):
        text = "---\nfoo: bar\n"
        assert parse_front_matter(text) == ({}, text)

    def test_block_with_blank_line_is_not_front_matter(self):
        text = "---\n\nSome text\n---\n"
        assert parse_front_matter(text) == ({}, text)

    def test_invalid_yaml_is_dropped_with_warning(self, caplog):
        metadata, body = parse_front_matter("---\nfoo: [unclosed\n---\nBody\n")
        assert metadata == {}
        assert body == "Body\n"
        assert "invalid front matter" in caplog.text

    def test_non_mapping_yields_empty_metadata(self):
        metadata, body = parse_front_matter("---\n- a\n- b\n---\nBody\n")
        assert metadata == {}
        assert body == "Body\n"


@pytest.mark.unit
class TestExtractFrontMatter:
    """Tests for the front matter preprocessor."""

    def test_seeds_attributes(self):
        attributes = {}
        body = extract_front_matter(
            "---\ntitle: Document Title\nlayout: post\nauthor: Jane\ntags: [x, y]\ndraft:\n---\nBody\n",
            attributes,
        )
        assert body == "Body\n"
        assert attributes == {"doctitle": "Document Title", "author": "Jane", "tags": "x, y", "draft": ""}

    def test_existing_attributes_win(self):
        attributes = {"author": "Caller"}
        extract_front_matter("---\nauthor: Doc\n---\nBody\n", attributes)
        assert attributes == {"author": "Caller"}

    def test_without_attributes_mapping(self):
        assert extract_front_matter("---\na: 1\n---\nBody\n") == "Body\n"


@pytest.mark.unit
class TestReplaceToc:
    """Tests for the TOC preprocessor."""

    def test_replaces_generated_toc(self):
        attributes = {}
        text = "# T\n\n<!-- TOC depthFrom:1 -->\n- [A](#a)\n<!-- /TOC -->\n\n## A\n"
        assert replace_toc(text, attributes) == "# T\n\ntoc::[]\n\n## A\n"
        assert attributes == {"toc": "macro"}

    def test_text_without_toc_is_unchanged(self):
        attributes = {}
        assert replace_toc("plain\n", attributes) == "plain\n"
        assert attributes == {}

    def test_default_order(self):
        assert DEFAULT_PREPROCESSORS == (extract_front_matter, replace_toc)
