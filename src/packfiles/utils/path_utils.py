"""Path helpers shared by the walker and the tree renderer."""

import os
from typing import List


class PathUtils:
    """Utilities for consistent path handling across platforms."""

    @staticmethod
    def root_name(root_dir: str) -> str:
        """
        Base name of the root directory.

        Relative roots such as ``.`` resolve against the working directory
        first, so they render with a real name.
        """
        abs_root = os.path.abspath(root_dir)
        return os.path.basename(abs_root) or abs_root

    @staticmethod
    def relative_parts(path: str, root_dir: str) -> List[str]:
        """
        Split a path into its components relative to the root.

        Args:
            path: Path of a file under root_dir
            root_dir: Traversal root

        Returns:
            List of path components, the last one being the file name
        """
        rel_path = os.path.relpath(path, root_dir)
        return rel_path.split(os.sep)

    @staticmethod
    def join_path_components(components: List[str]) -> str:
        """
        Join path components with the platform separator.

        Args:
            components: List of path components

        Returns:
            Joined relative path
        """
        return os.sep.join(components)
