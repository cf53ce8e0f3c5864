"""
Frontmatter Parsing Module

Locates the ``---`` delimited YAML block in a document and decodes it into an
ordered mapping of top-level keys. Values are normalized so every record can
be serialized as JSON.
"""

import base64
import datetime
import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..exceptions import (
    DocumentReadError,
    FrontmatterNotFoundError,
    FrontmatterParseError,
)
from .types import Record

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "---"
MERGE_TAG = "tag:yaml.org,2002:merge"


class UniqueKeyLoader(yaml.SafeLoader):
    """Safe YAML loader that rejects duplicate keys inside a mapping."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            seen = set()
            for key_node, _ in node.value:
                if key_node.tag == MERGE_TAG:
                    continue
                key = self.construct_object(key_node, deep=deep)
                try:
                    duplicate = key in seen
                    seen.add(key)
                except TypeError:
                    # unhashable keys are reported by the base constructor
                    continue
                if duplicate:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
        return super().construct_mapping(node, deep=deep)


def coerce_key(key: Any) -> Optional[str]:
    """Return the string form of a mapping key, or None if it has none."""
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, (int, float)):
        return str(key)
    if isinstance(key, (datetime.date, datetime.datetime)):
        return key.isoformat()
    if isinstance(key, bytes):
        return base64.b64encode(key).decode("ascii")
    return None


def to_json_value(value: Any) -> Any:
    """
    Convert a value produced by the YAML loader into plain JSON data.

    Dates become ISO-8601 strings, binary data becomes base64 text, sets become
    sorted lists and non-finite floats become None. Mapping keys are coerced
    with ``coerce_key``; keys with no string form are dropped.

    Raises:
        ValueError: If two distinct keys coerce to the same string
            (``1`` and ``"1"``, ``true`` and ``"true"``)
    """
    if isinstance(value, dict):
        result = {}
        for key, item in value.items():
            str_key = coerce_key(key)
            if str_key is None:
                logger.debug(f"Dropping mapping key without string form: {key!r}")
                continue
            if str_key in result:
                raise ValueError(f"found duplicate key {str_key!r} after conversion to text")
            result[str_key] = to_json_value(item)
        return result
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return [to_json_value(item) for item in sorted(value, key=str)]
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


class FrontmatterParser:
    """Parser for ``---`` delimited YAML frontmatter.

    The opening delimiter is the first line that is exactly ``---``; the block
    ends at the next such line or, if there is none, at the end of the
    document. Parsing is a pure function of the document content.

    Example:
        >>> parser = FrontmatterParser()
        >>> parser.parse(b"---\\ntitle: Hello\\n---\\nBody\\n")
        {'title': 'Hello'}
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER):
        self.delimiter = delimiter

    @staticmethod
    def decode(raw: bytes) -> str:
        """Decode bytes as UTF-8, replacing invalid sequences."""
        return raw.decode("utf-8", errors="replace")

    def split_lines(self, text: str) -> List[str]:
        """Split on newlines, dropping a trailing carriage return from each line."""
        lines = text.split("\n")
        return [line[:-1] if line.endswith("\r") else line for line in lines]

    def extract_block(self, text: str) -> str:
        """Return the raw text between the opening and closing delimiters.

        Raises:
            FrontmatterNotFoundError: If no line is exactly the delimiter
        """
        lines = self.split_lines(text)
        try:
            start = lines.index(self.delimiter)
        except ValueError:
            raise FrontmatterNotFoundError("No frontmatter delimiter found") from None

        try:
            end = lines.index(self.delimiter, start + 1)
        except ValueError:
            # unterminated block runs to the end of the document
            end = len(lines)

        return "".join(line + "\n" for line in lines[start + 1:end])

    def parse_block(self, block: str) -> Dict[str, Any]:
        """Parse a frontmatter block into an ordered mapping.

        A block whose top-level value is not a mapping (empty, scalar or
        sequence) yields an empty mapping.

        Raises:
            FrontmatterParseError: If the block is not valid YAML or its
                values cannot be converted to JSON data
        """
        try:
            data = yaml.load(block, Loader=UniqueKeyLoader)
            if not isinstance(data, dict):
                return {}
            return to_json_value(data)
        except (yaml.YAMLError, ValueError, TypeError, RecursionError) as e:
            # SafeLoader raises plain ValueError for tagged scalars that do not
            # convert (2024-13-45, !!float abc); self-referencing aliases
            # recurse without bound in to_json_value
            line_number = None
            mark = getattr(e, "problem_mark", None)
            if mark is not None:
                line_number = mark.line + 1
            raise FrontmatterParseError(
                f"Invalid YAML frontmatter: {e}",
                line_number=line_number,
                content_preview=block[:200],
            ) from e

    def parse(self, content: Union[bytes, str]) -> Dict[str, Any]:
        """Extract and parse the frontmatter of a whole document.

        Args:
            content: Raw document bytes (decoded lossily) or text

        Returns:
            Ordered mapping of top-level frontmatter keys

        Raises:
            FrontmatterNotFoundError: If the document has no opening delimiter
            FrontmatterParseError: If the block is malformed
        """
        text = self.decode(content) if isinstance(content, bytes) else content
        return self.parse_block(self.extract_block(text))

    def parse_file(self, path: Union[str, Path]) -> Record:
        """Read a document and build its record.

        The record's ``file`` field is the path exactly as passed in.

        Raises:
            DocumentReadError: If the file cannot be opened or read
            FrontmatterNotFoundError: If the document has no opening delimiter
            FrontmatterParseError: If the block is malformed
        """
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as e:
            raise DocumentReadError(f"Error reading file {path}: {e}", str(path)) from e

        metadata = self.parse(raw)
        return Record(file=str(path), metadata=metadata)
