"""
Extraction-related exceptions for the frontmatter extractor.

Per-document errors (parse, missing delimiter, read failures) are caught by
the extraction pipeline and turned into failed outcomes. Input path and output
errors abort the run and are reported by the CLI.
"""

from typing import Optional


class FrontmatterExtractorError(Exception):
    """Base exception for all frontmatter extractor errors."""


class FrontmatterParseError(FrontmatterExtractorError):
    """Exception raised when a frontmatter block is not valid YAML.
    
    Attributes:
        message: Description of the parsing error
        line_number: Line number inside the block where parsing failed (if available)
        content_preview: Preview of the problematic block for debugging
    """
    
    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        content_preview: Optional[str] = None
    ):
        self.message = message
        self.line_number = line_number
        self.content_preview = content_preview
        
        error_parts = [message]
        if line_number:
            error_parts.append(f"at line {line_number}")
        if content_preview:
            error_parts.append(f"Content: {content_preview[:100]}...")
        
        super().__init__(" ".join(error_parts))


class FrontmatterNotFoundError(FrontmatterExtractorError):
    """Raised when a document has no opening delimiter line."""


class DocumentReadError(FrontmatterExtractorError):
    """Raised when a document cannot be opened or read."""
    
    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class InputPathError(FrontmatterExtractorError):
    """Raised when the input path cannot be processed with the given options.
    
    Covers a directory given without the recursive flag and a single file
    whose extension does not match the document filter.
    """
    
    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path


class OutputWriteError(FrontmatterExtractorError):
    """Raised when the output file cannot be created or written."""
    
    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path
