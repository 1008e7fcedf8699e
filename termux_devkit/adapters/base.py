"""
Adapter base — the protocol contract between the executor and the
external action bound to each component.

The executor only talks to actions through this protocol, never
directly to scripts or subprocesses.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel

from termux_devkit.core.models.component import Component
from termux_devkit.core.models.result import ExecutionResult


class ExecutionContext(BaseModel):
    """Everything an adapter needs to run one component's action."""

    component: Component
    scripts_dir: str = "."
    dry_run: bool = False
    verbose: bool = False
    assume_yes: bool = False
    timeout: int | None = None      # seconds, None = wait indefinitely

    @property
    def script_path(self) -> Path:
        """Resolved path of the component script."""
        return Path(self.scripts_dir) / self.component.script

    def argv(self) -> list[str]:
        """Command line used to run the script, flags passed through."""
        cmd = [self.component.interpreter, str(self.script_path)]
        if self.dry_run:
            cmd.append("--dry-run")
        if self.verbose:
            cmd.append("--verbose")
        if self.assume_yes:
            cmd.append("--yes")
        return cmd


class Adapter(ABC):
    """Abstract base class for component actions.

    Adapters perform external side effects and return results.
    They NEVER raise for an action that ran and failed — the failure is
    captured in the ExecutionResult.

    ``validate`` answers a different question: can the action be located
    at all? A negative answer means the environment is broken.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The adapter identifier (e.g., 'script', 'mock')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the adapter's underlying tooling exists. Never raises."""

    @abstractmethod
    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        """Check that the action bound to the component can be located.

        Returns:
            (is_valid, error_message). error_message is empty if valid.
        """

    @abstractmethod
    def execute(self, context: ExecutionContext) -> ExecutionResult:
        """Run the action synchronously and return its result."""

    def describe(self, context: ExecutionContext) -> str:
        """Human-readable form of the action (used by verbose and preview)."""
        return " ".join(context.argv())

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
