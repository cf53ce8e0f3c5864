"""
Result Emitter Module

Serializes records as pretty-printed JSON objects, one per line-terminated
block, to standard output or to a file.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

from ..exceptions import OutputWriteError
from .types import Record

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 2


class ResultEmitter:
    """
    Write records as JSON.

    Args:
        indent: Indentation of the pretty-printed objects
    """

    def __init__(self, indent: int = DEFAULT_INDENT):
        self.indent = indent

    def serialize(self, record: Record) -> str:
        """Render one record as a pretty-printed JSON object."""
        return json.dumps(record.to_dict(), indent=self.indent, ensure_ascii=False)

    def write_stream(self, records: Iterable[Record], stream: Optional[TextIO] = None) -> int:
        """Write each record followed by a newline to a stream (default: stdout)."""
        if stream is None:
            stream = sys.stdout
        count = 0
        for record in records:
            stream.write(self.serialize(record) + "\n")
            count += 1
        stream.flush()
        return count

    def write_file(self, records: Iterable[Record], output_path: Union[str, Path]) -> int:
        """
        Write all records to a file, truncating any existing content.

        Raises:
            OutputWriteError: If the file cannot be created or written
        """
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                count = self.write_stream(records, f)
        except OSError as e:
            raise OutputWriteError(f"Cannot write output file {output_path}: {e}", str(output_path)) from e
        logger.info(f"Wrote {count} records to {output_path}")
        return count

    def emit(
        self,
        records: Iterable[Record],
        output_path: Optional[Union[str, Path]] = None,
        stream: Optional[TextIO] = None,
    ) -> int:
        """Write records to ``output_path`` if given, otherwise to the stream."""
        if output_path is not None:
            return self.write_file(records, output_path)
        return self.write_stream(records, stream)
