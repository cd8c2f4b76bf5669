"""Report generation pipeline: walk, structure, content, summary."""
import logging
from dataclasses import dataclass
from typing import Dict, List

from ..utils.tree_builder import TreeRenderer
from .aggregator import ContentAggregator
from .exceptions import OutputError
from .models import Config, FileRecord, Statistics
from .summary import SummaryReporter
from .tokenizer import TokenCounter
from .walker import DirectoryWalker

logger = logging.getLogger(__name__)


@dataclass
class PackResult:
    """Outcome of a completed run."""

    records: List[FileRecord]
    statistics: Statistics
    output_files: Dict[str, str]


class PackPipeline:
    """Runs the report stages one after another."""

    def __init__(self, config: Config):
        """
        Initialize pipeline with configuration.

        Raises:
            RootNotFoundError: If the root directory does not exist.
        """
        self.config = config
        self.walker = DirectoryWalker(config)
        self.renderer = TreeRenderer(config.root_dir)
        self.aggregator = ContentAggregator(TokenCounter(), show_progress=config.show_progress)
        self.reporter = SummaryReporter()

    def _write_report(self, path: str, write) -> object:
        """
        Open path for writing, hand the stream to write, and close it.

        The destination is held only for the duration of one stage. Paths that
        os.walk decoded with surrogate escapes are written as their original bytes.

        Raises:
            OutputError: If the file cannot be created or written.
        """
        try:
            with open(path, 'w', encoding='utf-8', errors='surrogateescape', newline='\n') as f:
                return write(f)
        except OSError as e:
            raise OutputError(path, e.strerror or str(e)) from e

    def write_structure(self, records: List[FileRecord]) -> None:
        """Write the directory structure; sorts records in place."""
        self._write_report(self.config.structure_file, lambda f: self.renderer.render(records, f))
        logger.debug(f"Structure written to {self.config.structure_file}")

    def write_content(self, records: List[FileRecord]) -> Statistics:
        stats = self._write_report(self.config.content_file, lambda f: self.aggregator.aggregate(records, f))
        logger.debug(f"Content written to {self.config.content_file}")
        return stats

    def write_summary(self, stats: Statistics) -> None:
        self._write_report(self.config.summary_file, lambda f: self.reporter.write(stats, f))
        logger.debug(f"Summary written to {self.config.summary_file}")

    def run(self) -> PackResult:
        """
        Generate all three reports.

        The structure stage sorts the records, so the content report lists
        files in the same order as the tree. Any error aborts the run; reports
        already written are left in place.

        Returns:
            PackResult with the records, statistics and written paths.

        Raises:
            TraversalError: If the walk hits an unreadable entry.
            OutputError: If a report cannot be written.
        """
        records = self.walker.walk()

        self.write_structure(records)
        stats = self.write_content(records)
        self.write_summary(stats)

        output_files = {
            'structure': self.config.structure_file,
            'content': self.config.content_file,
            'summary': self.config.summary_file,
        }
        return PackResult(records=records, statistics=stats, output_files=output_files)
