"""
Domain models — Pydantic types and run-state dataclasses.

All models are re-exported here for convenient access:

    from termux_devkit.core.models import Component, ExecutionResult, RunSummary
"""

from termux_devkit.core.models.component import Component
from termux_devkit.core.models.result import ExecutionResult
from termux_devkit.core.models.run import (
    ComponentOutcome,
    ComponentState,
    Decision,
    RunOptions,
    RunStatus,
    RunSummary,
)

__all__ = [
    "Component",
    "ComponentOutcome",
    "ComponentState",
    "Decision",
    "ExecutionResult",
    "RunOptions",
    "RunStatus",
    "RunSummary",
]
