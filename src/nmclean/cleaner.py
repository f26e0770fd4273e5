"""Guarded removal of selected node_modules directories."""

from __future__ import annotations

import logging
import os
import shutil
import stat
from collections.abc import Sequence
from pathlib import Path

from .errors import DeletionError, MetadataError, SymlinkRefusal


class Cleaner:
    """Removes directory trees, refusing symbolic links."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        """Initialize the cleaner.

        Args:
            logger: Logger instance. Defaults to the module logger.

        """
        self.logger = logger or logging.getLogger(__name__)

    def delete_directory(self, path: Path) -> None:
        """Recursively delete one directory.

        The path is inspected with lstat, so a final symbolic link is seen
        as the link itself and is never followed.

        Args:
            path: Directory to delete.

        Raises:
            MetadataError: If the path cannot be stat'ed.
            SymlinkRefusal: If the path is a symbolic link.
            DeletionError: If recursive removal fails part way.

        """
        try:
            st = os.lstat(path)
        except OSError as e:
            self.logger.debug("Cannot stat %s: %s", path, e)
            raise MetadataError(path, e) from e

        if stat.S_ISLNK(st.st_mode):
            self.logger.debug("Refusing to delete symlink: %s", path)
            raise SymlinkRefusal(path)

        try:
            shutil.rmtree(path)
        except OSError as e:
            self.logger.debug("Error deleting %s: %s", path, e)
            raise DeletionError(path, e) from e

        self.logger.info("Deleted directory: %s", path)

    def delete_paths(self, paths: Sequence[Path]) -> list[Path]:
        """Delete directories in order, stopping at the first failure.

        Args:
            paths: Directories to delete, in the order given.

        Returns:
            The deleted paths.

        Raises:
            NmcleanError: From the first failing deletion. Later paths are
                left untouched.

        """
        deleted: list[Path] = []

        for path in paths:
            self.delete_directory(path)
            deleted.append(path)

        return deleted
