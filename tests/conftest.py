"""Shared fixtures for nmclean tests."""

from __future__ import annotations

import io
from collections.abc import Callable, Sequence

import pytest
from rich.console import Console


class ScriptedPrompter:
    """Prompter double that returns canned answers and records calls."""

    def __init__(self, choices: Sequence[int] = (), confirm: bool = False) -> None:
        self.choices = list(choices)
        self.confirm = confirm
        self.choice_calls: list[list[str]] = []
        self.confirm_calls: list[tuple[str, bool]] = []

    def present_choices(self, labels: Sequence[str]) -> list[int]:
        self.choice_calls.append(list(labels))
        return list(self.choices)

    def present_confirm(self, prompt: str, default: bool) -> bool:
        self.confirm_calls.append((prompt, default))
        return self.confirm


@pytest.fixture
def scripted_prompter() -> Callable[..., ScriptedPrompter]:
    """Factory for scripted prompters."""
    return ScriptedPrompter


@pytest.fixture
def output() -> io.StringIO:
    """Buffer that receives console output."""
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """Console writing plain text to the output buffer."""
    return Console(file=output, width=200, color_system=None)
