"""
Frontmatter extractor CLI package.

Provides the ``frontmatter-extract`` command that scans markdown documents
and prints their frontmatter as JSON records.
"""

from .cli import app, cli_main

__all__ = ["app", "cli_main"]
