"""
Core extraction components.

- FrontmatterParser: locate and decode the YAML block of one document
- DocumentLocator: enumerate documents from a file or directory tree
- ExtractionPipeline: run the parser across documents on a worker pool
- ResultEmitter: serialize records as JSON
"""

from .types import (
    FILE_KEY,
    Record,
    FailureReason,
    ExtractionOutcome,
    PipelineResult,
)
from .frontmatter import FrontmatterParser, UniqueKeyLoader, coerce_key, to_json_value
from .locator import DocumentLocator, DEFAULT_EXTENSIONS
from .pipeline import ExtractionPipeline, default_worker_count
from .emitter import ResultEmitter

__all__ = [
    "FILE_KEY",
    "Record",
    "FailureReason",
    "ExtractionOutcome",
    "PipelineResult",
    "FrontmatterParser",
    "UniqueKeyLoader",
    "coerce_key",
    "to_json_value",
    "DocumentLocator",
    "DEFAULT_EXTENSIONS",
    "ExtractionPipeline",
    "default_worker_count",
    "ResultEmitter",
]
