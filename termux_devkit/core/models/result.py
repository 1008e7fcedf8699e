"""
ExecutionResult — the outcome of running one component's action.

This is the contract between the executor and the adapters: adapters
return results, never exceptions, for every failure they can anticipate.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class ExecutionResult(BaseModel):
    """Result of a single component execution attempt."""

    component_id: str
    status: Literal["ok", "failed", "preview"] = "ok"

    started_at: str = Field(default_factory=_now_iso)
    ended_at: str = Field(default_factory=_now_iso)
    duration_ms: int = 0

    command: str = ""
    output: str = ""
    error: str | None = None

    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the action succeeded (previews count as success)."""
        return self.status in ("ok", "preview")

    @property
    def failed(self) -> bool:
        return self.status == "failed"

    @property
    def is_preview(self) -> bool:
        return self.status == "preview"

    @classmethod
    def success(
        cls,
        component_id: str,
        output: str = "",
        **kwargs: Any,
    ) -> ExecutionResult:
        """Create a success result."""
        return cls(component_id=component_id, status="ok", output=output, **kwargs)

    @classmethod
    def failure(
        cls,
        component_id: str,
        error: str,
        **kwargs: Any,
    ) -> ExecutionResult:
        """Create a failure result carrying the action's diagnostic."""
        return cls(component_id=component_id, status="failed", error=error, **kwargs)

    @classmethod
    def preview(
        cls,
        component_id: str,
        command: str = "",
        **kwargs: Any,
    ) -> ExecutionResult:
        """Create a synthetic success for preview (dry-run) mode."""
        return cls(
            component_id=component_id,
            status="preview",
            command=command,
            output=f"[dry-run] would execute: {command}" if command else "[dry-run]",
            **kwargs,
        )
