"""Utility modules for the frontmatter extractor."""

from .config import ConfigManager, ExtractorConfig

__all__ = ["ConfigManager", "ExtractorConfig"]
