"""Locate node_modules directories beneath a root path."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import TARGET_NAME
from .errors import TraversalError

logger = logging.getLogger(__name__)


class NodeModulesScanner:
    """Depth-first walker that records target directories without entering them."""

    def __init__(self, target_name: str = TARGET_NAME) -> None:
        self.target_name = target_name

    def scan(self, root: Path, max_depth: int | None = None) -> list[Path]:
        """Scan a directory tree for target directories.

        Matches are recorded and pruned: nothing beneath a match is visited,
        so nested node_modules are never reported. Symbolic links below
        root are neither followed nor reported.

        Args:
            root: Directory to start from. Root is depth 0.
            max_depth: Deepest level to inspect, or None for unbounded.

        Returns:
            Matches sorted by path string.

        Raises:
            TraversalError: If root or any directory below it cannot be read.
                Partial results are discarded.

        """
        if max_depth is not None and max_depth < 0:
            msg = f"max_depth must be non-negative, got {max_depth}"
            raise ValueError(msg)

        try:
            root.stat()
            root_is_dir = root.is_dir()
        except OSError as e:
            raise TraversalError(root, e) from e

        if not root_is_dir:
            logger.debug("Root is not a directory: %s", root)
            return []

        if root.name == self.target_name:
            logger.debug("Root is itself a match: %s", root)
            return [root]

        found: list[Path] = []
        stack: list[tuple[Path, int]] = [(root, 0)]

        while stack:
            directory, depth = stack.pop()

            # Children of this directory would sit at depth + 1
            if max_depth is not None and depth >= max_depth:
                continue

            subdirs = self._read_subdirectories(directory, found)
            stack.extend((subdir, depth + 1) for subdir in reversed(subdirs))

        found.sort(key=str)
        logger.debug("Scan of %s found %d matches", root, len(found))
        return found

    def _read_subdirectories(self, directory: Path, found: list[Path]) -> list[Path]:
        """Read one directory, record its matches and return the subdirectories to enter.

        Entering is decided here, before any child is queued: a match is
        appended to ``found`` and never returned for descent.
        """
        subdirs: list[Path] = []

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise TraversalError(directory, e) from e

        for entry in entries:
            path = directory / entry.name
            try:
                if not entry.is_dir(follow_symlinks=False):
                    continue
            except OSError as e:
                raise TraversalError(path, e) from e

            if entry.name == self.target_name:
                logger.debug("Found: %s", path)
                found.append(path)
                continue

            subdirs.append(path)

        return subdirs
