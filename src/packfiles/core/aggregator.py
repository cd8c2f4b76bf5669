"""
Content aggregation for packfiles.

Writes every matched file into one report with numbered headers and
accumulates the run statistics in the same pass.
"""

import logging
import sys
from typing import List, Optional, TextIO

from tqdm import tqdm

from .models import FileRecord, Statistics
from .tokenizer import TokenCounter

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 48


class ContentAggregator:
    """Concatenates file contents and collects statistics."""

    def __init__(self, token_counter: Optional[TokenCounter] = None, show_progress: bool = False):
        self.token_counter = token_counter or TokenCounter()
        self.show_progress = show_progress

    def format_header(self, index: int, path: str) -> str:
        """Header block for the file at 1-based position index."""
        return f"{SEPARATOR}\nFile {index}: {path}\n{SEPARATOR}\n"

    def aggregate(self, records: List[FileRecord], out: TextIO) -> Statistics:
        """
        Write the content report and return the accumulated statistics.

        Records are written in the order given. Entries are separated by a
        blank line; each entry's content is followed by a newline.

        Args:
            records: Matched files
            out: Text stream receiving the report

        Returns:
            Statistics with totals and averages for the records.
        """
        stats = Statistics()

        progress = tqdm(
            records,
            desc="Packing files",
            unit="file",
            file=sys.stderr,
            disable=not self.show_progress,
        )
        for i, record in enumerate(progress):
            if i > 0:
                out.write("\n")
            out.write(self.format_header(i + 1, record.path))
            out.write(record.content)
            out.write("\n")

            tokens = self.token_counter.count(record.content)
            stats.add(record.size, tokens)

        stats.finalize()
        logger.debug(f"Aggregated {stats.total_files} files, {stats.total_tokens} tokens")
        return stats
