"""
Error taxonomy for the toolkit.

Configuration errors are fatal and surface at startup. Usage errors stop
the process before any component runs. Component failures are NOT
exceptions: they travel as ``ExecutionResult(status="failed")`` and are
recovered by the orchestrator. ``ActionUnavailableError`` marks a broken
environment rather than a failed action.
"""

from __future__ import annotations


class DevkitError(Exception):
    """Base class for all toolkit errors."""


class ConfigError(DevkitError):
    """Raised when the component catalogue is invalid or unreadable."""


class RegistryError(ConfigError):
    """Raised when a component registry fails its integrity checks."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        summary = "; ".join(self.problems) if self.problems else "invalid registry"
        super().__init__(f"Invalid component registry: {summary}")


class CycleError(RegistryError):
    """A component depends on itself, directly or transitively."""

    def __init__(self, component_id: str):
        self.component_id = component_id
        super().__init__([f"Dependency cycle detected at '{component_id}'"])


class UsageError(DevkitError):
    """Raised for bad user input (empty or unknown selection)."""


class UnknownComponentError(UsageError, KeyError):
    """A component id is not present in the registry."""

    def __init__(self, component_ids: list[str]):
        self.component_ids = sorted(component_ids)
        UsageError.__init__(
            self, f"Unknown component(s): {', '.join(self.component_ids)}",
        )

    def __str__(self) -> str:
        return str(self.args[0])


class NonInteractiveError(UsageError):
    """Interactive prompts are required but no terminal is attached."""


class ActionUnavailableError(DevkitError):
    """The external action bound to a component cannot be located at all."""

    def __init__(self, component_id: str, reason: str):
        self.component_id = component_id
        self.reason = reason
        super().__init__(f"Action for '{component_id}' is unavailable: {reason}")
