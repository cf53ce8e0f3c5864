"""Shared test fixtures for frontmatter extractor tests."""

import json
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List

import pytest


NOTE_DOCUMENT = """---
title: Hello
tags:
  - a
  - b
---
Body text
"""

NESTED_DOCUMENT = """---
title: "Complex Document"
metadata:
  version: 1.2
  status: draft
  review:
    required: true
    reviewers: ["alice", "bob"]
categories:
  - technical
  - documentation
---

Content goes here.
"""

PLAIN_DOCUMENT = """# Regular Document

This document has no frontmatter.
Just regular markdown content.
"""


@pytest.fixture
def temp_directory():
    """Provide a temporary directory for testing."""
    temp_dir = tempfile.mkdtemp()
    temp_path = Path(temp_dir)
    
    yield temp_path
    
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def note_file(temp_directory):
    """A single markdown file with simple frontmatter."""
    path = temp_directory / "note.md"
    path.write_text(NOTE_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def document_tree(temp_directory):
    """
    Directory with three markdown files (one without frontmatter),
    a nested subdirectory and a non-markdown file.
    """
    (temp_directory / "a.md").write_text(NOTE_DOCUMENT, encoding="utf-8")
    (temp_directory / "readme.txt").write_text(NOTE_DOCUMENT, encoding="utf-8")
    
    subdir = temp_directory / "sub" / "deeper"
    subdir.mkdir(parents=True)
    (subdir / "b.md").write_text(NESTED_DOCUMENT, encoding="utf-8")
    (temp_directory / "sub" / "c.md").write_text(PLAIN_DOCUMENT, encoding="utf-8")
    
    return temp_directory


def load_records(text: str) -> List[Dict[str, Any]]:
    """Parse a sequence of concatenated pretty-printed JSON objects."""
    decoder = json.JSONDecoder()
    records = []
    index = 0
    text = text.strip()
    while index < len(text):
        obj, end = decoder.raw_decode(text, index)
        records.append(obj)
        index = end
        while index < len(text) and text[index].isspace():
            index += 1
    return records


@pytest.fixture
def parse_records():
    """Provide the concatenated-JSON parser to tests."""
    return load_records
