"""
Prompter — the "ask" capability injected into the orchestrator.

The orchestrator never reads from the console itself. Interactive runs
use ``ClickPrompter`` (``termux_devkit.ui.cli.prompts``); scripted runs
and tests use ``ScriptedPrompter``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Sequence

from termux_devkit.core.models.component import Component

logger = logging.getLogger(__name__)


class Prompter(ABC):
    """Interactive selector contract."""

    @abstractmethod
    def select(self, candidates: Sequence[Component], preselected: set[str]) -> set[str]:
        """Let the user pick component ids from ``candidates``.

        ``preselected`` ids (required components) are always part of the
        answer and cannot be deselected.
        """

    @abstractmethod
    def confirm(self, prompt: str, default: bool = True) -> bool:
        """Ask a yes/no question."""

    @abstractmethod
    def choose(self, prompt: str, options: Sequence[str]) -> str:
        """Ask the user to pick one of ``options``; returns the option."""

    def notify(self, message: str, level: str = "info") -> None:
        """Show a message. Default: log it."""
        logger.log(logging.WARNING if level in ("warning", "error") else logging.INFO, message)


class ScriptedPrompter(Prompter):
    """Non-interactive prompter answering from pre-supplied values.

    Args:
        selection: Ids returned by ``select``.
        confirmations: Answers for successive ``confirm`` calls; once
            exhausted, ``default_confirm`` is returned.
        decisions: Answers for successive ``choose`` calls; once exhausted,
            ``default_choice`` is returned.
    """

    def __init__(
        self,
        selection: Iterable[str] = (),
        confirmations: Iterable[bool] = (),
        decisions: Iterable[str] = (),
        default_confirm: bool = True,
        default_choice: str = "abort",
    ):
        self._selection = set(selection)
        self._confirmations = deque(confirmations)
        self._decisions = deque(decisions)
        self._default_confirm = default_confirm
        self._default_choice = default_choice
        self.asked: list[str] = []
        self.messages: list[tuple[str, str]] = []

    def select(self, candidates: Sequence[Component], preselected: set[str]) -> set[str]:
        self.asked.append("select")
        return set(self._selection) | set(preselected)

    def confirm(self, prompt: str, default: bool = True) -> bool:
        self.asked.append(prompt)
        if self._confirmations:
            return self._confirmations.popleft()
        return self._default_confirm

    def choose(self, prompt: str, options: Sequence[str]) -> str:
        self.asked.append(prompt)
        answer = self._decisions.popleft() if self._decisions else self._default_choice
        if answer not in options:
            raise ValueError(f"Scripted answer {answer!r} not in {list(options)}")
        return answer

    def notify(self, message: str, level: str = "info") -> None:
        self.messages.append((level, message))
