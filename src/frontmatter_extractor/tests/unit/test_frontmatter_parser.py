"""Tests for frontmatter block location and YAML decoding."""

import pytest

from frontmatter_extractor.core.frontmatter import FrontmatterParser, coerce_key, to_json_value
from frontmatter_extractor.core.types import Record
from frontmatter_extractor.exceptions import (
    DocumentReadError,
    FrontmatterNotFoundError,
    FrontmatterParseError,
)


class TestExtractBlock:
    """Tests for locating the delimited block."""

    def setup_method(self):
        self.parser = FrontmatterParser()

    def test_block_between_delimiters(self):
        """Lines strictly between the delimiters form the block."""
        text = "---\ntitle: Hello\nauthor: Jane\n---\nBody\n"
        assert self.parser.extract_block(text) == "title: Hello\nauthor: Jane\n"

    def test_first_delimiter_need_not_be_first_line(self):
        """The opening delimiter is the first line that is exactly ---."""
        text = "Intro line\n\n---\nkey: value\n---\n"
        assert self.parser.extract_block(text) == "key: value\n"

    def test_unterminated_block_runs_to_end(self):
        """Without a closing delimiter, all remaining lines are the block."""
        text = "---\ntitle: Open\ntags: [x]"
        assert self.parser.extract_block(text) == "title: Open\ntags: [x]\n"

    def test_missing_delimiter_raises(self):
        """Documents without a delimiter line have no frontmatter."""
        with pytest.raises(FrontmatterNotFoundError):
            self.parser.extract_block("# Title\n\nJust text\n")

    def test_delimiter_must_match_exactly(self):
        """Lines with extra characters are not delimiters."""
        with pytest.raises(FrontmatterNotFoundError):
            self.parser.extract_block("--- \n----\n -- -\n")

    def test_crlf_line_endings(self):
        """A trailing carriage return does not prevent delimiter matching."""
        text = "---\r\ntitle: Hi\r\n---\r\nBody\r\n"
        assert self.parser.extract_block(text) == "title: Hi\n"

    def test_empty_block(self):
        """Adjacent delimiters give an empty block."""
        assert self.parser.extract_block("---\n---\n") == ""

    def test_later_delimiters_belong_to_body(self):
        """Only the first two delimiter lines bound the block."""
        text = "---\na: 1\n---\nbody\n---\nb: 2\n---\n"
        assert self.parser.extract_block(text) == "a: 1\n"


class TestParse:
    """Tests for decoding a document into a mapping."""

    def setup_method(self):
        self.parser = FrontmatterParser()

    def test_simple_key_value(self):
        """A key: value block yields that key and value."""
        assert self.parser.parse(b"---\nkey: value\n---\n") == {"key": "value"}

    def test_nested_structures(self):
        """Nested sequences and mappings keep their structure."""
        content = b"""---
title: "Complex Document"
metadata:
  version: 1.2
  review:
    required: true
    reviewers: ["alice", "bob"]
categories:
  - technical
  - documentation
---
"""
        result = self.parser.parse(content)
        assert result["title"] == "Complex Document"
        assert result["metadata"]["version"] == 1.2
        assert result["metadata"]["review"] == {"required": True, "reviewers": ["alice", "bob"]}
        assert result["categories"] == ["technical", "documentation"]

    def test_key_order_preserved(self):
        """Top-level keys keep their source order."""
        result = self.parser.parse("---\nzeta: 1\nalpha: 2\nmid: 3\n---\n")
        assert list(result) == ["zeta", "alpha", "mid"]

    def test_empty_block_yields_empty_mapping(self):
        """An empty block parses to an empty mapping."""
        assert self.parser.parse(b"---\n---\nBody\n") == {}

    def test_comment_only_block_yields_empty_mapping(self):
        assert self.parser.parse(b"---\n# nothing here\n---\n") == {}

    def test_top_level_sequence_yields_empty_mapping(self):
        """A block that is not a mapping still succeeds, with no keys."""
        assert self.parser.parse(b"---\n- a\n- b\n---\n") == {}

    def test_top_level_scalar_yields_empty_mapping(self):
        assert self.parser.parse(b"---\njust some text\n---\n") == {}

    def test_unterminated_block_is_parsed(self):
        """Best-effort parse of a block with no closing delimiter."""
        result = self.parser.parse(b"---\ntitle: Open\ntags:\n  - x\n")
        assert result == {"title": "Open", "tags": ["x"]}

    def test_invalid_yaml_raises(self):
        """Malformed YAML fails extraction."""
        content = """---
title: "Invalid YAML
author: missing quote
- invalid list item
---

Content."""
        with pytest.raises(FrontmatterParseError):
            self.parser.parse(content)

    def test_duplicate_keys_raise(self):
        """Keys must be unique within a mapping."""
        with pytest.raises(FrontmatterParseError) as excinfo:
            self.parser.parse("---\na: 1\na: 2\n---\n")
        assert excinfo.value.line_number == 2
        assert "duplicate key" in str(excinfo.value)

    def test_nested_duplicate_keys_raise(self):
        with pytest.raises(FrontmatterParseError):
            self.parser.parse("---\nouter:\n  b: 1\n  b: 2\n---\n")

    def test_impossible_date_raises(self):
        """A timestamp-shaped scalar that is not a real date fails extraction."""
        with pytest.raises(FrontmatterParseError) as excinfo:
            self.parser.parse("---\ntitle: T\ndate: 2024-13-45\n---\n")
        assert isinstance(excinfo.value.__cause__, ValueError)

    @pytest.mark.parametrize("block", ["x: !!float abc\n", "n: !!int abc\n"])
    def test_unconvertible_tagged_scalar_raises(self, block):
        with pytest.raises(FrontmatterParseError):
            self.parser.parse("---\n" + block + "---\n")

    def test_recursive_alias_raises(self):
        """A sequence that contains itself has no JSON form."""
        with pytest.raises(FrontmatterParseError):
            self.parser.parse("---\na: &x [*x]\n---\n")

    @pytest.mark.parametrize("block", ['1: a\n"1": b\n', 'true: a\n"true": b\n'])
    def test_keys_colliding_after_coercion_raise(self, block):
        """Distinct keys with the same text form count as duplicates."""
        with pytest.raises(FrontmatterParseError) as excinfo:
            self.parser.parse("---\n" + block + "---\n")
        assert "duplicate key" in str(excinfo.value)

    def test_merge_keys_are_not_duplicates(self):
        """YAML merge keys combine mappings without tripping the duplicate check."""
        content = "---\nbase: &b\n  x: 1\nderived:\n  <<: *b\n  y: 2\n---\n"
        result = self.parser.parse(content)
        assert result["derived"] == {"x": 1, "y": 2}

    def test_invalid_utf8_is_replaced(self):
        """Invalid byte sequences are substituted instead of failing."""
        result = self.parser.parse(b"---\ntitle: caf\xe9\n---\n")
        assert result == {"title": "caf\ufffd"}

    def test_missing_delimiter_raises(self):
        with pytest.raises(FrontmatterNotFoundError):
            self.parser.parse(b"No frontmatter here\n")

    def test_dates_become_iso_strings(self):
        """YAML timestamps are rendered as ISO-8601 text."""
        result = self.parser.parse("---\ndate: 2024-01-15\nat: 2024-01-15 10:30:00\n---\n")
        assert result == {"date": "2024-01-15", "at": "2024-01-15T10:30:00"}

    def test_non_string_keys_are_coerced(self):
        """Scalar keys are stringified; null keys are dropped."""
        result = self.parser.parse("---\n2: two\ntrue: t\n~: gone\nname: n\n---\n")
        assert result == {"2": "two", "true": "t", "name": "n"}

    def test_special_values(self):
        result = self.parser.parse("---\nratio: .nan\nblob: !!binary aGVsbG8=\nempty: null\n---\n")
        assert result == {"ratio": None, "blob": "aGVsbG8=", "empty": None}


class TestValueNormalization:
    """Tests for the JSON normalization helpers."""

    def test_coerce_key(self):
        assert coerce_key("a") == "a"
        assert coerce_key(False) == "false"
        assert coerce_key(2.5) == "2.5"
        assert coerce_key(None) is None

    def test_to_json_value_converts_sets_and_nested_keys(self):
        value = {"tags": {"b", "a"}, "inner": {1: float("inf")}}
        assert to_json_value(value) == {"tags": ["a", "b"], "inner": {"1": None}}


class TestParseFile:
    """Tests for reading documents from disk."""

    def test_parse_file_builds_record(self, note_file):
        """The record carries the metadata and the path as given."""
        record = FrontmatterParser().parse_file(str(note_file))
        assert isinstance(record, Record)
        assert record.file == str(note_file)
        assert record.to_dict() == {"title": "Hello", "tags": ["a", "b"], "file": str(note_file)}

    def test_parse_file_missing(self, temp_directory):
        """Unreadable documents raise DocumentReadError."""
        with pytest.raises(DocumentReadError):
            FrontmatterParser().parse_file(temp_directory / "missing.md")

    def test_document_file_key_is_shadowed(self, temp_directory):
        """The synthetic file key replaces one defined by the document."""
        path = temp_directory / "own.md"
        path.write_text("---\nfile: elsewhere.md\ntitle: T\n---\n", encoding="utf-8")

        record = FrontmatterParser().parse_file(str(path))
        assert record.shadowed_keys == ["file"]
        assert record.to_dict() == {"title": "T", "file": str(path)}
        assert list(record.to_dict()) == ["title", "file"]
