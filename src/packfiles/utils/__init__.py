"""Utility modules for packfiles."""

from .file_filter import ExtensionFilter, normalize_extensions, parse_extensions
from .encodings import EncodingDetector
from .path_utils import PathUtils
from .tree_builder import TreeRenderer

__all__ = [
    "ExtensionFilter",
    "normalize_extensions",
    "parse_extensions",
    "EncodingDetector",
    "PathUtils",
    "TreeRenderer",
]
