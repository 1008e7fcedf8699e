"""
L5 Orchestration — top-level run coordinator.
"""

from termux_devkit.core.services.component_install.orchestration.orchestrator import (  # noqa: F401
    RunOrchestrator,
)
