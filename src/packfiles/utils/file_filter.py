"""
Extension filtering utilities for packfiles.

This module normalizes user-supplied extension lists and decides whether a
file is selected based on its extension.
"""

import os
from typing import Iterable, List


def normalize_extensions(extensions: Iterable[str]) -> List[str]:
    """
    Canonicalize raw extension tokens.

    Each token is trimmed and given a leading dot; tokens that are empty after
    trimming are dropped. Order is preserved and duplicates are kept.

    Args:
        extensions: Raw tokens such as ``["md", " .go ", ""]``.

    Returns:
        Normalized extensions such as ``[".md", ".go"]``.
    """
    result = []
    for ext in extensions:
        ext = ext.strip()
        if not ext:
            continue
        if not ext.startswith('.'):
            ext = '.' + ext
        result.append(ext)
    return result


def parse_extensions(raw: str) -> List[str]:
    """Split a comma-separated extension list and normalize it."""
    return normalize_extensions(raw.split(','))


def get_extension(file_path: str) -> str:
    """
    Return the extension of a path's base name.

    The extension runs from the last dot to the end of the name, so
    ``.gitignore`` has extension ``.gitignore`` and ``Makefile`` has none.
    """
    name = os.path.basename(file_path)
    index = name.rfind('.')
    if index < 0:
        return ''
    return name[index:]


class ExtensionFilter:
    """Handles include/exclude extension matching."""

    def __init__(self, include: Iterable[str], exclude: Iterable[str]):
        self.include = [ext.casefold() for ext in include]
        self.exclude = [ext.casefold() for ext in exclude]

    def is_included(self, extension: str) -> bool:
        """An empty include list selects every extension."""
        if not self.include:
            return True
        return extension.casefold() in self.include

    def is_excluded(self, extension: str) -> bool:
        return extension.casefold() in self.exclude

    def should_include(self, file_path: str) -> bool:
        """
        Check if a file is selected.

        Exclusion is applied after inclusion and always wins, so an extension
        present in both lists is excluded.

        Args:
            file_path: Path to the file.

        Returns:
            True if the file should be collected, False otherwise.
        """
        extension = get_extension(file_path)
        return self.is_included(extension) and not self.is_excluded(extension)

    def get_excluded_reason(self, file_path: str) -> str:
        """Describe why a file is not selected, or return an empty string."""
        extension = get_extension(file_path)
        if self.is_excluded(extension):
            return f"Excluded extension '{extension}'"
        if not self.is_included(extension):
            return f"Extension '{extension}' not in include list" if extension else "No extension"
        return ''
