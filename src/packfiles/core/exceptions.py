"""
Exceptions raised by packfiles.

Every failure is fatal: library code raises one of these and the CLI reports
it and exits with a non-zero status.
"""

from typing import Optional


class PackFilesError(Exception):
    """Base exception for packfiles errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.message = message
        self.path = path
        super().__init__(self.message)


class RootNotFoundError(PackFilesError):
    """Raised when the root directory does not exist or is not a directory."""

    def __init__(self, path: str):
        super().__init__(f"Directory {path} does not exist", path)


class TraversalError(PackFilesError):
    """Raised when an entry cannot be listed or read during the walk."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to read {path}: {reason}", path)


class OutputError(PackFilesError):
    """Raised when an output destination cannot be created or written."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to write {path}: {reason}", path)
