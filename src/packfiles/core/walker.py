"""Local directory traversal and extension filtering."""
import logging
import os
from typing import List

from ..utils.encodings import EncodingDetector
from ..utils.file_filter import ExtensionFilter
from .exceptions import RootNotFoundError, TraversalError
from .models import Config, FileRecord

logger = logging.getLogger(__name__)


class DirectoryWalker:
    """Collects the files under a root directory that pass the extension filter."""

    def __init__(self, config: Config):
        """Initialize walker; the root must be an existing directory."""
        if not os.path.isdir(config.root_dir):
            raise RootNotFoundError(config.root_dir)

        self.config = config
        self.root_dir = config.root_dir
        self.file_filter = ExtensionFilter(config.include_extensions, config.exclude_extensions)
        self.decoder = EncodingDetector(config.encoding_fallbacks)

    @staticmethod
    def _raise_walk_error(error: OSError) -> None:
        """os.walk error hook: a directory that cannot be listed ends the walk."""
        path = error.filename or ''
        raise TraversalError(path, error.strerror or str(error)) from error

    def read_file(self, file_path: str) -> FileRecord:
        """
        Read a matched file into a record.

        Raises:
            TraversalError: If the file cannot be opened or read.
        """
        try:
            with open(file_path, 'rb') as f:
                raw_content = f.read()
        except OSError as e:
            raise TraversalError(file_path, e.strerror or str(e)) from e

        content, _ = self.decoder.decode_bytes(raw_content, file_path)
        return FileRecord(path=file_path, size=len(raw_content), content=content)

    def walk(self) -> List[FileRecord]:
        """
        Walk the root depth-first and return records for the selected files.

        Entries are visited in sorted name order. Directories are traversed
        but never recorded. The first I/O error aborts the walk; no partial
        list is returned.

        Returns:
            FileRecords in traversal order.

        Raises:
            TraversalError: If any directory or matched file cannot be read.
        """
        records = []

        for root, dirs, files in os.walk(self.root_dir, onerror=self._raise_walk_error):
            dirs.sort()

            for name in sorted(files):
                file_path = os.path.join(root, name)
                if not self.file_filter.should_include(file_path):
                    logger.debug(f"Skipping {file_path}: {self.file_filter.get_excluded_reason(file_path)}")
                    continue

                records.append(self.read_file(file_path))
                logger.debug(f"Collected {file_path}")

        logger.debug(f"Walk of {self.root_dir} matched {len(records)} files")
        return records
