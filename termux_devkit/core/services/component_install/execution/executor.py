"""
L4 Execution — component executor.

Runs the external action bound to one component and classifies the
outcome. In preview mode nothing is executed. Expected failures come
back as ``ExecutionResult(status="failed")``; only a missing action
binding raises (``ActionUnavailableError``).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from termux_devkit.adapters.base import Adapter, ExecutionContext
from termux_devkit.core.errors import ActionUnavailableError
from termux_devkit.core.models.component import Component
from termux_devkit.core.models.result import ExecutionResult
from termux_devkit.core.models.run import RunOptions

logger = logging.getLogger(__name__)


class ComponentExecutor:
    """Execute components through an adapter.

    Args:
        adapter: Action adapter (``ScriptAdapter`` in production).
        options: Immutable run options (dry_run / verbose / assume_yes).
        scripts_dir: Directory holding the component scripts.
        echo: Output callable for verbose command echoing.
        timeout: Optional per-component timeout in seconds.
    """

    def __init__(
        self,
        adapter: Adapter,
        options: RunOptions | None = None,
        scripts_dir: Path | str = ".",
        echo: Callable[[str], None] | None = None,
        timeout: int | None = None,
    ):
        self._adapter = adapter
        self._options = options or RunOptions()
        self._scripts_dir = str(scripts_dir)
        self._echo = echo or (lambda _msg: None)
        self._timeout = timeout

    @property
    def options(self) -> RunOptions:
        return self._options

    def context_for(self, component: Component) -> ExecutionContext:
        return ExecutionContext(
            component=component,
            scripts_dir=self._scripts_dir,
            dry_run=self._options.dry_run,
            verbose=self._options.verbose,
            assume_yes=self._options.assume_yes,
            timeout=self._timeout,
        )

    def execute(self, component: Component) -> ExecutionResult:
        """Run one component.

        Raises:
            ActionUnavailableError: The action cannot be located (live mode).
        """
        context = self.context_for(component)
        command = self._adapter.describe(context)

        if self._options.verbose:
            self._echo(f"[verbose] Executing: {command}")

        if self._options.dry_run:
            logger.info("[dry-run] %s → %s", component.id, command)
            return ExecutionResult.preview(component.id, command=command)

        valid, reason = self._adapter.validate(context)
        if not valid:
            logger.error("Action for '%s' unavailable: %s", component.id, reason)
            raise ActionUnavailableError(component.id, reason)

        try:
            result = self._adapter.execute(context)
        except Exception as e:
            logger.exception("Adapter raised while executing '%s'", component.id)
            result = ExecutionResult.failure(
                component.id, error=f"{type(e).__name__}: {e}", command=command,
            )

        status_marker = "✓" if result.ok else "✗"
        logger.info("%s %s → %s", status_marker, component.id, result.status)
        return result
