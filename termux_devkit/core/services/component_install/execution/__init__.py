"""
L4 Execution — runs component actions through adapters.
"""

from termux_devkit.core.services.component_install.execution.executor import (  # noqa: F401
    ComponentExecutor,
)
