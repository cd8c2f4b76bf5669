"""packfiles: pack a directory tree into structure, content and summary reports."""

__version__ = "0.1.0"
