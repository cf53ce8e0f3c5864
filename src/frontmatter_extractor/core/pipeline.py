"""
Extraction Pipeline Module

Runs the frontmatter parser over every located document on a bounded worker
pool and gathers one outcome per document. A failing document never aborts
the run.
"""

import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional

from ..exceptions import (
    DocumentReadError,
    FrontmatterNotFoundError,
    FrontmatterParseError,
)
from .frontmatter import FrontmatterParser
from .types import ExtractionOutcome, FailureReason, PipelineResult

logger = logging.getLogger(__name__)


def default_worker_count() -> int:
    """Worker pool size drawn from the available CPUs."""
    return os.cpu_count() or 1


class ExtractionPipeline:
    """
    Apply the parser to documents concurrently.

    Documents share no state; each worker reads and parses one file and
    returns its outcome. Outcomes come back in input order.

    Args:
        parser: Parser used for every document
        max_workers: Worker pool size (default: number of CPUs)
    """

    def __init__(
        self,
        parser: Optional[FrontmatterParser] = None,
        max_workers: Optional[int] = None,
    ):
        self.parser = parser or FrontmatterParser()
        self.max_workers = max_workers or default_worker_count()

    def extract_one(self, path: str) -> ExtractionOutcome:
        """Extract a single document, converting its errors into a failed outcome."""
        try:
            record = self.parser.parse_file(path)
        except DocumentReadError as e:
            return self._failure(path, FailureReason.READ_ERROR, e)
        except FrontmatterNotFoundError as e:
            return self._failure(path, FailureReason.NO_FRONTMATTER, e)
        except FrontmatterParseError as e:
            return self._failure(path, FailureReason.INVALID_YAML, e)

        if record.shadowed_keys:
            logger.debug(f"{path}: synthetic keys shadow document keys {record.shadowed_keys}")
        return ExtractionOutcome(path=path, record=record)

    def run(self, paths: Iterable[str]) -> PipelineResult:
        """
        Extract every document and collect the outcomes.

        Args:
            paths: Document paths from the locator

        Returns:
            PipelineResult holding one outcome per path
        """
        paths = list(paths)
        start_time = time.time()

        if not paths:
            return PipelineResult()

        workers = min(self.max_workers, len(paths))
        logger.info(f"Extracting frontmatter from {len(paths)} documents with {workers} workers")

        with ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(self.extract_one, paths))

        result = PipelineResult(
            outcomes=outcomes,
            processing_time_seconds=time.time() - start_time,
        )
        logger.info(
            f"Extracted {result.successful_extractions}/{result.total_documents} documents "
            f"in {result.processing_time_seconds:.2f}s"
        )
        return result

    @staticmethod
    def _failure(path: str, reason: FailureReason, error: Exception) -> ExtractionOutcome:
        logger.debug(f"Skipping {path} ({reason.value}): {error}")
        return ExtractionOutcome(path=path, reason=reason, message=str(error))
