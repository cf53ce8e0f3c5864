"""Extract YAML frontmatter from markdown documents as JSON records."""

__version__ = "0.1.0"

from .core import (
    DocumentLocator,
    ExtractionPipeline,
    FrontmatterParser,
    Record,
    ResultEmitter,
)

__all__ = [
    "__version__",
    "DocumentLocator",
    "ExtractionPipeline",
    "FrontmatterParser",
    "Record",
    "ResultEmitter",
]
