"""Error types raised while scanning and deleting."""

from __future__ import annotations

from pathlib import Path


class NmcleanError(Exception):
    """Base class for failures that abort a command."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class TraversalError(NmcleanError):
    """A directory could not be read during a scan."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(path, f"failed to read {path}: {cause}")
        self.cause = cause


class MetadataError(NmcleanError):
    """A selected path could not be stat'ed before deletion."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(path, f"failed to stat {path}: {cause}")
        self.cause = cause


class SymlinkRefusal(NmcleanError):
    """A selected path is a symbolic link and will not be removed."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Refusing to delete symlink: {path}")


class DeletionError(NmcleanError):
    """Recursive removal of a selected directory failed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(path, f"failed to remove {path}: {cause}")
        self.cause = cause
