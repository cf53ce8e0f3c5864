"""
Document Locator Module

Enumerates the documents to extract from a single file or a directory tree.
"""

import logging
import os
from typing import List, Optional, Sequence

from ..exceptions import InputPathError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".md",)


class DocumentLocator:
    """
    Find candidate documents below a root path.

    Paths are returned as strings built from the root exactly as given, so
    records report the path the user typed rather than a canonical one.

    Args:
        extensions: File extensions to select, including the leading dot.
            Matching is case-sensitive.
    """

    def __init__(self, extensions: Optional[Sequence[str]] = None):
        self.extensions = tuple(extensions or DEFAULT_EXTENSIONS)

    def matches(self, path: str) -> bool:
        """Check whether a path carries one of the selected extensions."""
        _, ext = os.path.splitext(path)
        return ext in self.extensions

    def locate(self, root: str, recursive: bool = False) -> List[str]:
        """
        Produce the document paths to process.

        Args:
            root: File or directory path
            recursive: Whether a directory root may be traversed

        Returns:
            Sorted list of document paths

        Raises:
            InputPathError: If root is a directory and recursive is False, or
                if root is not a directory and does not match the extension filter
        """
        if os.path.isdir(root):
            if not recursive:
                raise InputPathError(
                    "Input is a directory, but --recursive was not specified", root
                )
            documents = self._walk(root)
            logger.debug(f"Found {len(documents)} documents under {root}")
            return documents

        if not self.matches(root):
            raise InputPathError(
                f"File must have a {' or '.join(self.extensions)} extension", root
            )
        return [root]

    def _walk(self, root: str) -> List[str]:
        documents = []
        for dirpath, _dirnames, filenames in os.walk(root):
            for name in filenames:
                if self.matches(name):
                    documents.append(os.path.join(dirpath, name))
        return sorted(documents)
