"""
Exceptions package for the frontmatter extractor.

This package contains custom exception classes for document extraction,
input/output handling and configuration loading.
"""

from .extraction_exceptions import (
    FrontmatterExtractorError,
    FrontmatterParseError,
    FrontmatterNotFoundError,
    DocumentReadError,
    InputPathError,
    OutputWriteError,
)

from .config_exceptions import (
    ConfigurationError,
    ConfigurationFileNotFoundError,
    ConfigurationValidationError,
)

__all__ = [
    # Extraction exceptions
    "FrontmatterExtractorError",
    "FrontmatterParseError",
    "FrontmatterNotFoundError",
    "DocumentReadError",
    "InputPathError",
    "OutputWriteError",
    # Configuration exceptions
    "ConfigurationError",
    "ConfigurationFileNotFoundError",
    "ConfigurationValidationError",
]
