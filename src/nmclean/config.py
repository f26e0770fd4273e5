"""Per-invocation settings for nmclean."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from pathlib import Path

TARGET_NAME = "node_modules"

LOG_LEVEL_ENV = "NMCLEAN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Invalid setting supplied on the command line or environment."""


@dataclass
class CleanConfig:
    """Settings for one scan or delete command."""

    root: Path = Path(".")

    # None means unbounded; root itself is depth 0
    max_depth: int | None = None

    # Delete mode switches
    select_all: bool = False
    dry_run: bool = False
    assume_yes: bool = False

    # Logging
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None

    target_name: str = TARGET_NAME

    def validate(self) -> None:
        """Check settings, raising ConfigError on the first invalid one."""
        if self.log_level not in VALID_LOG_LEVELS:
            msg = f"Invalid log_level: {self.log_level!r} (expected one of {', '.join(VALID_LOG_LEVELS)})"
            raise ConfigError(msg)

        if self.max_depth is not None and self.max_depth < 0:
            msg = f"max_depth must be non-negative, got {self.max_depth}"
            raise ConfigError(msg)

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for the configured name."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> CleanConfig:
        """Build a validated config from parsed command line arguments.

        Args:
            args: Namespace produced by the nmclean argument parser.

        Returns:
            Validated configuration.

        Raises:
            ConfigError: If a setting is invalid.

        """
        config = cls()

        if getattr(args, "root", None) is not None:
            config.root = args.root
        config.max_depth = getattr(args, "max_depth", None)
        config.select_all = bool(getattr(args, "all", False))
        config.dry_run = bool(getattr(args, "dry_run", False))
        config.assume_yes = bool(getattr(args, "yes", False))

        if getattr(args, "verbose", False):
            config.log_level = "DEBUG"
        elif getattr(args, "log_level", None):
            config.log_level = args.log_level.upper()
        else:
            config.log_level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()

        config.log_file = getattr(args, "log_file", None)

        config.validate()
        return config
