"""Scan and delete workflows with selection and confirmation gates."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from .cleaner import Cleaner
from .scanner import NodeModulesScanner

if TYPE_CHECKING:
    from .config import CleanConfig
    from .prompts import Prompter

logger = logging.getLogger(__name__)

CONFIRM_PROMPT = "Proceed with deletion?"


class DeleteOutcome(Enum):
    """Terminal state reached by a delete command."""

    NO_MATCHES = "no_matches"
    NOTHING_SELECTED = "nothing_selected"
    DRY_RUN = "dry_run"
    CANCELLED = "cancelled"
    DELETED = "deleted"


class CleanupController:
    """Runs the scan and delete commands against one configuration."""

    def __init__(
        self,
        config: CleanConfig,
        prompter: Prompter,
        console: Console | None = None,
        scanner: NodeModulesScanner | None = None,
        cleaner: Cleaner | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            config: Settings for this invocation.
            prompter: Selection and confirmation capability.
            console: Console for user-facing output.
            scanner: Tree scanner. Defaults to one for ``config.target_name``.
            cleaner: Directory remover.

        """
        self.config = config
        self.prompter = prompter
        self.console = console or Console()
        self.scanner = scanner or NodeModulesScanner(config.target_name)
        self.cleaner = cleaner or Cleaner()

    def _scan(self) -> list[Path]:
        logger.info("Scanning %s (max depth: %s)", self.config.root, self.config.max_depth)
        return self.scanner.scan(self.config.root, self.config.max_depth)

    def _print_path(self, line: str) -> None:
        self.console.print(escape(line), soft_wrap=True, highlight=False)

    def _report_empty(self) -> None:
        self._print_path(f"No {self.config.target_name} found under {self.config.root}")

    def list_matches(self) -> list[Path]:
        """Print each match with a 1-based index.

        Returns:
            The matches that were listed.

        """
        items = self._scan()

        if not items:
            self._report_empty()
            return items

        for index, path in enumerate(items, start=1):
            self._print_path(f"{index:>3}: {path}")

        return items

    def select(self, items: list[Path]) -> list[Path]:
        """Resolve the paths to act on, prompting unless --all was given."""
        if self.config.select_all:
            return list(items)

        chosen = self.prompter.present_choices([str(p) for p in items])
        return [items[i] for i in chosen]

    def delete_matches(self) -> DeleteOutcome:
        """Scan, select, confirm and delete.

        Returns:
            Which terminal state was reached.

        Raises:
            NmcleanError: On a traversal failure, or on the first failing
                deletion. Remaining selected paths are not touched.

        """
        items = self._scan()

        if not items:
            self._report_empty()
            return DeleteOutcome.NO_MATCHES

        selected = self.select(items)
        if not selected:
            self.console.print("Nothing selected")
            return DeleteOutcome.NOTHING_SELECTED

        self.console.print(f"Selected {len(selected)} directories")
        for path in selected:
            self._print_path(f" {path}")

        if self.config.dry_run:
            self.console.print("Dry run: nothing deleted.")
            return DeleteOutcome.DRY_RUN

        if not self.config.assume_yes and not self.prompter.present_confirm(CONFIRM_PROMPT, False):
            self.console.print("Cancelled.")
            return DeleteOutcome.CANCELLED

        self.cleaner.delete_paths(selected)
        self.console.print("Done.")
        return DeleteOutcome.DELETED
