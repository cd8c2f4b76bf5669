"""
Core data models for packfiles.

This module contains the configuration value passed to every stage, the
record produced for each matched file, and the accumulated statistics.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

from ..utils.file_filter import normalize_extensions, parse_extensions

# Load environment variables from .env file
load_dotenv()

DEFAULT_INCLUDE_EXTS = 'md,go,mbt'
DEFAULT_EXCLUDE_EXTS = 'html,css'

BYTES_PER_KB = 1024.0
BYTES_PER_MB = 1024.0 * 1024.0


@dataclass
class Config:
    """Configuration settings for packfiles."""

    root_dir: str = field(default_factory=lambda: os.getenv('INPUT_DIR', '.'))

    # Extension lists, normalized in __post_init__
    include_extensions: List[str] = field(
        default_factory=lambda: parse_extensions(os.getenv('INCLUDE_EXTS', DEFAULT_INCLUDE_EXTS))
    )
    exclude_extensions: List[str] = field(
        default_factory=lambda: parse_extensions(os.getenv('EXCLUDE_EXTS', DEFAULT_EXCLUDE_EXTS))
    )

    # Report destinations
    structure_file: str = field(
        default_factory=lambda: os.getenv('STRUCTURE_FILE', 'directory-structure.txt')
    )
    content_file: str = field(default_factory=lambda: os.getenv('CONTENT_FILE', 'content.txt'))
    summary_file: str = field(default_factory=lambda: os.getenv('SUMMARY_FILE', 'summary.txt'))

    # Decoding fallbacks; latin-1 accepts any byte sequence
    encoding_fallbacks: List[str] = field(default_factory=lambda: [
        'utf-8', 'cp1252', 'latin-1'
    ])

    show_progress: bool = True

    def __post_init__(self):
        self.include_extensions = normalize_extensions(self.include_extensions)
        self.exclude_extensions = normalize_extensions(self.exclude_extensions)


@dataclass(frozen=True)
class FileRecord:
    """A matched file with its decoded content."""

    path: str
    size: int  # bytes on disk
    content: str
    is_directory: bool = False


@dataclass
class Statistics:
    """Totals accumulated over the matched files."""

    total_files: int = 0
    total_size: int = 0
    average_file_size: float = 0.0
    total_tokens: int = 0
    average_tokens: float = 0.0

    def add(self, size: int, tokens: int) -> None:
        """Account for one file."""
        self.total_files += 1
        self.total_size += size
        self.total_tokens += tokens

    def finalize(self) -> None:
        """Compute averages from the totals; both stay 0 for an empty run."""
        if self.total_files > 0:
            self.average_file_size = self.total_size / self.total_files
            self.average_tokens = self.total_tokens / self.total_files
        else:
            self.average_file_size = 0.0
            self.average_tokens = 0.0

    @property
    def total_size_kb(self) -> float:
        return self.total_size / BYTES_PER_KB

    @property
    def total_size_mb(self) -> float:
        return self.total_size / BYTES_PER_MB

    @property
    def average_file_size_kb(self) -> float:
        return self.average_file_size / BYTES_PER_KB
