"""
Run models — options, per-component state and the run summary.

State machine per plan position:

    PENDING → RUNNING → SUCCEEDED
                      → FAILED  → (retry) RUNNING
                                → (skip)  SKIPPED
                                → (abort) run ABORTED, rest stay PENDING
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from termux_devkit.core.models.result import ExecutionResult


@dataclass(frozen=True)
class RunOptions:
    """Immutable per-run configuration, threaded in at construction."""

    dry_run: bool = False       # preview the plan, no side effects
    verbose: bool = False       # echo the exact command per component
    assume_yes: bool = False    # skip confirmation prompts


class ComponentState(StrEnum):
    """Lifecycle of one plan position."""

    PENDING = "pending"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


class RunStatus(StrEnum):
    """Terminal state of a whole run."""

    COMPLETED = "completed"
    ABORTED = "aborted"
    CANCELLED = "cancelled"     # user declined the confirmation prompt
    EMPTY = "empty"             # nothing selected


class Decision(StrEnum):
    """Recovery options offered after a component failure."""

    RETRY = "retry"
    SKIP = "skip"
    ABORT = "abort"


@dataclass
class ComponentOutcome:
    """Tracks one component through the run."""

    component_id: str
    name: str
    state: ComponentState = ComponentState.PENDING
    attempts: int = 0
    last_result: ExecutionResult | None = None

    @property
    def reason(self) -> str:
        if self.last_result and self.last_result.error:
            return self.last_result.error
        return ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.component_id,
            "name": self.name,
            "state": str(self.state),
            "attempts": self.attempts,
            "reason": self.reason,
        }


@dataclass
class RunSummary:
    """Result of a full orchestrated run."""

    status: RunStatus = RunStatus.COMPLETED
    preview: bool = False
    selection: list[str] = field(default_factory=list)
    auto_added: list[str] = field(default_factory=list)
    plan: list[str] = field(default_factory=list)
    outcomes: list[ComponentOutcome] = field(default_factory=list)

    def _count(self, state: ComponentState) -> int:
        return sum(1 for o in self.outcomes if o.state == state)

    @property
    def succeeded(self) -> int:
        return self._count(ComponentState.SUCCEEDED)

    @property
    def failed(self) -> int:
        return self._count(ComponentState.FAILED)

    @property
    def skipped(self) -> int:
        return self._count(ComponentState.SKIPPED)

    @property
    def not_attempted(self) -> list[str]:
        """Components never reached because the run was aborted."""
        return [o.component_id for o in self.outcomes if o.state == ComponentState.PENDING]

    @property
    def failures(self) -> list[ComponentOutcome]:
        """Components that ended failed or were skipped after failing."""
        return [
            o for o in self.outcomes
            if o.state == ComponentState.FAILED
            or (o.state == ComponentState.SKIPPED and o.last_result is not None)
        ]

    @property
    def all_ok(self) -> bool:
        return self.status != RunStatus.ABORTED and self.failed == 0 and self.skipped == 0

    @property
    def exit_code(self) -> int:
        if self.status in (RunStatus.EMPTY, RunStatus.CANCELLED):
            return 0
        return 0 if self.all_ok else 1

    def outcome(self, component_id: str) -> ComponentOutcome | None:
        for o in self.outcomes:
            if o.component_id == component_id:
                return o
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": str(self.status),
            "preview": self.preview,
            "selection": self.selection,
            "auto_added": self.auto_added,
            "plan": self.plan,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "skipped": self.skipped,
            "not_attempted": self.not_attempted,
            "failures": [
                {"id": o.component_id, "name": o.name, "reason": o.reason}
                for o in self.failures
            ],
            "components": [o.to_dict() for o in self.outcomes],
        }
