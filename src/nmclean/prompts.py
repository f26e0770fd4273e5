"""Interactive selection and confirmation capabilities."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import questionary
from rich.console import Console
from rich.prompt import Confirm

logger = logging.getLogger(__name__)

SELECT_PROMPT = "Select node_modules to delete (space to toggle, enter to confirm)"


@runtime_checkable
class Prompter(Protocol):
    """Interface for asking the user to pick items and confirm actions."""

    def present_choices(self, labels: Sequence[str]) -> list[int]:
        """Present a multi-choice list.

        Args:
            labels: One label per item, in display order.

        Returns:
            Indices of the chosen labels in ascending order; empty if none.

        """
        ...

    def present_confirm(self, prompt: str, default: bool) -> bool:
        """Ask a yes/no question.

        Args:
            prompt: Question to show.
            default: Answer used when the user gives none.

        Returns:
            True if the user agreed.

        """
        ...


class TerminalPrompter:
    """Prompts on an interactive terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def present_choices(self, labels: Sequence[str]) -> list[int]:
        """Show a checkbox list; a cancelled picker selects nothing."""
        choices = [questionary.Choice(label, value=index) for index, label in enumerate(labels)]
        result = questionary.checkbox(SELECT_PROMPT, choices=choices).ask()

        if result is None:
            logger.debug("Selection cancelled")
            return []

        return sorted(result)

    def present_confirm(self, prompt: str, default: bool) -> bool:
        """Ask on the console, falling back to ``default`` on empty input or EOF."""
        try:
            return Confirm.ask(prompt, default=default, console=self.console)
        except EOFError:
            logger.debug("No answer to %r, using default: %s", prompt, default)
            return default


class NonInteractivePrompter:
    """Stand-in used when stdin is not a terminal.

    Selects nothing and answers every question with its default, so
    without --all and --yes no deletion can happen.
    """

    def present_choices(self, labels: Sequence[str]) -> list[int]:
        logger.warning("Not a terminal, cannot prompt for selection (use --all)")
        return []

    def present_confirm(self, prompt: str, default: bool) -> bool:
        logger.warning("Not a terminal, answering %r with default: %s", prompt, default)
        return default
