"""
L5 Orchestration — the installation run.

Drives the full flow:

    selection → required added → closure → canonical order
              → confirmation → sequential execution → summary

Components run strictly one at a time in plan order. A failed component
puts the run on hold until the prompter answers retry / skip / abort.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from termux_devkit.core.models.component import Component
from termux_devkit.core.models.run import (
    ComponentOutcome,
    ComponentState,
    Decision,
    RunOptions,
    RunStatus,
    RunSummary,
)
from termux_devkit.core.services.component_install.execution.executor import (
    ComponentExecutor,
)
from termux_devkit.core.services.component_install.prompts import Prompter
from termux_devkit.core.services.component_install.registry import ComponentRegistry
from termux_devkit.core.services.component_install.resolver.closure import (
    Closure,
    close_over,
    with_required,
)
from termux_devkit.core.services.component_install.resolver.ordering import build_plan

logger = logging.getLogger(__name__)

_DECISIONS = [str(d) for d in Decision]


class RunOrchestrator:
    """Sequential, interactive installation run.

    Args:
        registry: Validated component registry.
        executor: Executor bound to an adapter and the same run options.
        prompter: Selection / confirmation / recovery prompts.
        options: Immutable run options. Defaults to the executor's.
    """

    def __init__(
        self,
        registry: ComponentRegistry,
        executor: ComponentExecutor,
        prompter: Prompter,
        options: RunOptions | None = None,
    ):
        self._registry = registry
        self._executor = executor
        self._prompter = prompter
        self._options = options or executor.options

    # ── Planning ────────────────────────────────────────────────

    def plan(self, selection: Iterable[str]) -> tuple[Closure, list[Component]]:
        """Resolve a selection into its closure and ordered plan.

        Raises:
            UnknownComponentError: The selection references unknown ids.
        """
        closure = close_over(selection, self._registry)
        return closure, build_plan(closure.closure, self._registry)

    # ── Run ─────────────────────────────────────────────────────

    def run(self, selection: Iterable[str] | None = None) -> RunSummary:
        """Execute a full installation run.

        Args:
            selection: Pre-made selection. None = ask the prompter.

        Returns:
            RunSummary. Component failures never raise out of here.

        Raises:
            UnknownComponentError: Selection contains unknown ids.
            ActionUnavailableError: A component's action cannot be located.
        """
        summary = RunSummary(preview=self._options.dry_run)

        if selection is None:
            chosen = self._prompter.select(
                self._registry.list_components(), self._registry.required_ids(),
            )
        else:
            chosen = set(selection)

        if not chosen:
            self._prompter.notify("No components selected. Exiting.", "warning")
            summary.status = RunStatus.EMPTY
            return summary

        chosen = with_required(chosen, self._registry)
        closure, plan = self.plan(chosen)

        summary.selection = sorted(closure.selection)
        summary.auto_added = [c.id for c in plan if c.id in closure.auto_added]
        summary.plan = [c.id for c in plan]
        summary.outcomes = [ComponentOutcome(component_id=c.id, name=c.name) for c in plan]

        self._announce_plan(plan, summary.auto_added)

        if not self._options.assume_yes and not self._options.dry_run:
            if not self._prompter.confirm("Proceed with installation?", default=True):
                self._prompter.notify("Installation cancelled.", "warning")
                summary.status = RunStatus.CANCELLED
                return summary

        logger.info("Starting run: %s", ", ".join(summary.plan))
        for component, outcome in zip(plan, summary.outcomes):
            if not self._run_component(component, outcome):
                summary.status = RunStatus.ABORTED
                self._prompter.notify("Installation aborted.", "error")
                logger.warning(
                    "Run aborted at '%s'; not attempted: %s",
                    component.id, ", ".join(summary.not_attempted) or "-",
                )
                return summary

        summary.status = RunStatus.COMPLETED
        logger.info(
            "Run completed: %d succeeded, %d failed, %d skipped",
            summary.succeeded, summary.failed, summary.skipped,
        )
        return summary

    def _run_component(self, component: Component, outcome: ComponentOutcome) -> bool:
        """Drive one plan position to a terminal state.

        Returns:
            False if the user chose to abort the run.
        """
        while True:
            outcome.state = ComponentState.RUNNING
            outcome.attempts += 1
            self._prompter.notify(f"➤ {component.name}", "info")

            result = self._executor.execute(component)
            outcome.last_result = result

            if result.ok:
                outcome.state = ComponentState.SUCCEEDED
                if result.is_preview:
                    self._prompter.notify(result.output, "info")
                else:
                    self._prompter.notify(f"✓ {component.name} completed", "success")
                return True

            outcome.state = ComponentState.FAILED
            self._prompter.notify(
                f"✗ {component.name} failed: {result.error or 'unknown error'}", "error",
            )

            decision = self._prompter.choose(
                f"{component.name} failed. What would you like to do?", _DECISIONS,
            )
            logger.info("Decision for '%s' after attempt %d: %s",
                        component.id, outcome.attempts, decision)

            if decision == Decision.RETRY:
                continue
            if decision == Decision.SKIP:
                outcome.state = ComponentState.SKIPPED
                return True
            return False

    def _announce_plan(self, plan: list[Component], auto_added: list[str]) -> None:
        if auto_added:
            names = [self._registry.find(cid).name for cid in auto_added]
            self._prompter.notify(
                "Dependencies auto-selected:\n" + "\n".join(f"   - {n}" for n in names),
                "warning",
            )

        lines = [
            f"{i}. {c.name}" + (f" ({c.estimated_time})" if c.estimated_time else "")
            for i, c in enumerate(plan, start=1)
        ]
        self._prompter.notify("Installation Plan:\n" + "\n".join(lines), "heading")
        if self._options.dry_run:
            self._prompter.notify("DRY-RUN MODE: No changes will be made", "warning")
