"""
Mock adapter — test double for component actions.

Simulates script execution without touching the system. Succeeds by
default; can be told to fail a component (always, or a fixed number of
times before succeeding) or to report a component's action as missing.
"""

from __future__ import annotations

from termux_devkit.adapters.base import Adapter, ExecutionContext
from termux_devkit.core.models.result import ExecutionResult


class MockAdapter(Adapter):
    """Universal mock adapter for testing."""

    def __init__(
        self,
        adapter_name: str = "mock",
        available: bool = True,
        default_output: str = "[mock] executed",
    ):
        self._name = adapter_name
        self._available = available
        self._default_output = default_output
        self._failures: dict[str, tuple[str, int | None]] = {}
        self._unavailable: dict[str, str] = {}
        self._call_log: list[ExecutionContext] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[ExecutionContext]:
        """All execution contexts this mock has received."""
        return self._call_log

    @property
    def call_count(self) -> int:
        return len(self._call_log)

    @property
    def executed_ids(self) -> list[str]:
        """Component ids in the order they were executed (with repeats)."""
        return [ctx.component.id for ctx in self._call_log]

    def is_available(self) -> bool:
        return self._available

    def set_failure(
        self,
        component_id: str,
        error: str = "Mock failure",
        times: int | None = None,
    ) -> None:
        """Make a component fail.

        Args:
            component_id: Component to fail.
            error: Diagnostic reported in the result.
            times: Fail this many times, then succeed. None = always fail.
        """
        self._failures[component_id] = (error, times)

    def set_unavailable(self, component_id: str, reason: str = "Mock action missing") -> None:
        """Make ``validate`` reject a component (action cannot be located)."""
        self._unavailable[component_id] = reason

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        reason = self._unavailable.get(context.component.id)
        if reason:
            return False, reason
        return True, ""

    def execute(self, context: ExecutionContext) -> ExecutionResult:
        self._call_log.append(context)
        cid = context.component.id
        command = self.describe(context)

        if cid in self._failures:
            error, remaining = self._failures[cid]
            if remaining is None:
                return ExecutionResult.failure(cid, error=error, command=command)
            if remaining > 0:
                self._failures[cid] = (error, remaining - 1)
                return ExecutionResult.failure(cid, error=error, command=command)

        return ExecutionResult.success(
            cid,
            output=self._default_output,
            command=command,
            metadata={"mock": True},
        )

    def reset(self) -> None:
        """Clear call log and configured behaviour."""
        self._call_log.clear()
        self._failures.clear()
        self._unavailable.clear()
