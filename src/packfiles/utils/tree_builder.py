"""Directory structure rendering from a flat list of file records."""

import io
import logging
from typing import TYPE_CHECKING, List, Set, TextIO

from .path_utils import PathUtils

if TYPE_CHECKING:
    from ..core.models import FileRecord

logger = logging.getLogger(__name__)

STRUCTURE_TITLE = "Directory structure:"
INDENT = "    "
DEPTH_PREFIX = "│   "
BRANCH = "├── "
ROOT_BRANCH = "└── "


class TreeRenderer:
    """Renders matched files as an indented tree without building a node graph."""

    def __init__(self, root_dir: str):
        self.root_dir = root_dir

    @staticmethod
    def sort_records(records: List['FileRecord']) -> None:
        """Sort records in place by full path, ordinal ascending."""
        records.sort(key=lambda record: record.path)

    def format_line(self, name: str, depth: int, is_dir: bool) -> str:
        suffix = "/" if is_dir else ""
        return f"{INDENT}{DEPTH_PREFIX * depth}{BRANCH}{name}{suffix}"

    def render(self, records: List['FileRecord'], out: TextIO) -> None:
        """
        Write the directory structure of the given records.

        The records list is sorted in place first, so two orderings of the
        same files produce identical output. Each directory prefix is written
        once, the first time a file beneath it is seen; each file is written
        exactly once.

        Args:
            records: Matched files, all located under root_dir
            out: Text stream receiving the structure
        """
        self.sort_records(records)

        out.write(f"{STRUCTURE_TITLE}\n")
        out.write(f"{ROOT_BRANCH}{PathUtils.root_name(self.root_dir)}/\n")

        seen_dirs: Set[str] = set()
        for record in records:
            parts = PathUtils.relative_parts(record.path, self.root_dir)
            for depth, part in enumerate(parts):
                if depth == len(parts) - 1:
                    out.write(self.format_line(part, depth, is_dir=False) + "\n")
                    continue

                prefix = PathUtils.join_path_components(parts[:depth + 1])
                if prefix not in seen_dirs:
                    seen_dirs.add(prefix)
                    out.write(self.format_line(part, depth, is_dir=True) + "\n")

        logger.debug(f"Rendered {len(records)} files under {len(seen_dirs)} directories")

    def render_to_string(self, records: List['FileRecord']) -> str:
        """Render the structure and return it as a string."""
        buffer = io.StringIO()
        self.render(records, buffer)
        return buffer.getvalue()
