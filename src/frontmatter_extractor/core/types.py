"""
Extraction Types Module

Data containers shared by the parser, pipeline and emitter.

Components:
- Record: Extracted metadata block plus its source path
- FailureReason: Why a document produced no record
- ExtractionOutcome: Per-document success or failure
- PipelineResult: All outcomes of one run
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

FILE_KEY = "file"


@dataclass
class Record:
    """
    Output unit combining a document's metadata with its source path.

    The metadata keeps the top-level key order of the source block. The
    synthetic ``file`` key is appended last when the record is serialized;
    any ``file`` key from the document itself has already been removed and
    listed in ``shadowed_keys``.

    Attributes:
        file: Document path as given on input (not canonicalized)
        metadata: Ordered mapping of top-level frontmatter keys
        shadowed_keys: Document keys that were replaced by synthetic fields

    Example:
        >>> record = Record(file="note.md", metadata={"title": "Hello"})
        >>> record.to_dict()
        {'title': 'Hello', 'file': 'note.md'}
    """
    file: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    shadowed_keys: List[str] = field(default_factory=list)

    def __post_init__(self):
        if FILE_KEY in self.metadata:
            self.metadata = {k: v for k, v in self.metadata.items() if k != FILE_KEY}
            if FILE_KEY not in self.shadowed_keys:
                self.shadowed_keys.append(FILE_KEY)

    def to_dict(self) -> Dict[str, Any]:
        """Return the metadata followed by the ``file`` key."""
        data = dict(self.metadata)
        data[FILE_KEY] = self.file
        return data


class FailureReason(Enum):
    """Reasons a document yields no record."""
    READ_ERROR = "read_error"
    NO_FRONTMATTER = "no_frontmatter"
    INVALID_YAML = "invalid_yaml"


@dataclass
class ExtractionOutcome:
    """Result of running the parser over one document."""
    path: str
    record: Optional[Record] = None
    reason: Optional[FailureReason] = None
    message: str = ""

    @property
    def success(self) -> bool:
        return self.record is not None


@dataclass
class PipelineResult:
    """
    All per-document outcomes of one extraction run.

    Attributes:
        outcomes: One outcome per located document, in input order
        processing_time_seconds: Wall-clock duration of the run
    """
    outcomes: List[ExtractionOutcome] = field(default_factory=list)
    processing_time_seconds: float = 0.0

    @property
    def records(self) -> List[Record]:
        return [o.record for o in self.outcomes if o.record is not None]

    @property
    def failures(self) -> List[ExtractionOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def total_documents(self) -> int:
        return len(self.outcomes)

    @property
    def successful_extractions(self) -> int:
        return len(self.records)

    @property
    def failed_extractions(self) -> int:
        return len(self.failures)

    def failure_counts(self) -> Dict[FailureReason, int]:
        """Count failed documents per reason."""
        counts: Dict[FailureReason, int] = {}
        for outcome in self.failures:
            counts[outcome.reason] = counts.get(outcome.reason, 0) + 1
        return counts
