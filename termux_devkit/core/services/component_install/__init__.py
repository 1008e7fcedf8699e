"""
Component installation service — package re-exports.

Layers (each module depends only on the ones above it):

    L0 data          core/data/components.py
    L1 domain        domain/dag.py
    registry         registry.py
    L2 resolver      resolver/closure.py, resolver/ordering.py
    L4 execution     execution/executor.py
    L5 orchestration orchestration/orchestrator.py

    from termux_devkit.core.services.component_install import RunOrchestrator
"""

from termux_devkit.core.services.component_install.execution.executor import (  # noqa: F401
    ComponentExecutor,
)
from termux_devkit.core.services.component_install.orchestration.orchestrator import (  # noqa: F401
    RunOrchestrator,
)
from termux_devkit.core.services.component_install.prompts import (  # noqa: F401
    Prompter,
    ScriptedPrompter,
)
from termux_devkit.core.services.component_install.registry import (  # noqa: F401
    ComponentRegistry,
    default_registry,
    validate_registry,
)
from termux_devkit.core.services.component_install.resolver import (  # noqa: F401
    Closure,
    build_plan,
    close_over,
    order_ids,
    with_required,
)
