"""Core components for packfiles."""

from .models import Config, FileRecord, Statistics
from .exceptions import PackFilesError, RootNotFoundError, TraversalError, OutputError
from .tokenizer import TokenCounter
from .walker import DirectoryWalker
from .aggregator import ContentAggregator
from .summary import SummaryReporter
from .pipeline import PackPipeline, PackResult

__all__ = [
    "Config",
    "FileRecord",
    "Statistics",
    "PackFilesError",
    "RootNotFoundError",
    "TraversalError",
    "OutputError",
    "TokenCounter",
    "DirectoryWalker",
    "ContentAggregator",
    "SummaryReporter",
    "PackPipeline",
    "PackResult",
]
