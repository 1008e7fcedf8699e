"""
Tests for the run orchestrator — selection, confirmation, execution and
the retry / skip / abort recovery menu.
"""

import pytest

from termux_devkit.core.errors import ActionUnavailableError, UnknownComponentError
from termux_devkit.core.models.run import ComponentState, RunOptions, RunStatus
from termux_devkit.core.services.component_install import ScriptedPrompter

RECOVERY_PROMPT = "Bravo failed. What would you like to do?"


class TestSelection:
    def test_empty_selection_is_a_noop(self, make_orchestrator, mock_adapter):
        prompter = ScriptedPrompter(selection=[])
        summary = make_orchestrator(prompter).run()

        assert summary.status == RunStatus.EMPTY
        assert summary.exit_code == 0
        assert mock_adapter.call_count == 0
        assert ("warning", "No components selected. Exiting.") in prompter.messages

    def test_selection_from_prompter(self, make_orchestrator, mock_adapter):
        prompter = ScriptedPrompter(selection=["B"])
        summary = make_orchestrator(prompter).run()

        assert prompter.asked[0] == "select"
        assert summary.plan == ["A", "B"]
        assert mock_adapter.executed_ids == ["A", "B"]

    def test_explicit_selection_skips_menu(self, make_orchestrator):
        prompter = ScriptedPrompter()
        make_orchestrator(prompter).run(selection={"A"})
        assert "select" not in prompter.asked

    def test_unknown_id_raises_before_execution(self, make_orchestrator, mock_adapter):
        with pytest.raises(UnknownComponentError):
            make_orchestrator().run(selection={"A", "Q"})
        assert mock_adapter.call_count == 0


class TestHappyPath:
    def test_leaf_selection_runs_whole_chain(self, make_orchestrator, mock_adapter):
        summary = make_orchestrator().run(selection={"C"})

        assert summary.status == RunStatus.COMPLETED
        assert summary.plan == ["A", "B", "C"]
        assert summary.auto_added == ["A", "B"]
        assert summary.selection == ["C"]
        assert mock_adapter.executed_ids == ["A", "B", "C"]
        assert summary.succeeded == 3
        assert summary.exit_code == 0

    def test_independent_component_kept_in_canonical_order(self, make_orchestrator, mock_adapter):
        make_orchestrator().run(selection={"D", "B"})
        assert mock_adapter.executed_ids == ["A", "B", "D"]

    def test_plan_announced(self, make_orchestrator):
        prompter = ScriptedPrompter()
        make_orchestrator(prompter).run(selection={"B"})

        headings = [m for level, m in prompter.messages if level == "heading"]
        assert headings == ["Installation Plan:\n1. Alpha\n2. Bravo"]
        assert any("Dependencies auto-selected" in m and "Alpha" in m
                   for _, m in prompter.messages)

    def test_attempts_recorded(self, make_orchestrator):
        summary = make_orchestrator().run(selection={"A"})
        assert summary.outcome("A").attempts == 1


class TestConfirmation:
    def test_asks_without_yes(self, make_orchestrator, mock_adapter):
        prompter = ScriptedPrompter(confirmations=[True])
        summary = make_orchestrator(prompter, RunOptions()).run(selection={"A"})

        assert "Proceed with installation?" in prompter.asked
        assert summary.status == RunStatus.COMPLETED
        assert mock_adapter.executed_ids == ["A"]

    def test_declined(self, make_orchestrator, mock_adapter):
        prompter = ScriptedPrompter(confirmations=[False])
        summary = make_orchestrator(prompter, RunOptions()).run(selection={"C"})

        assert summary.status == RunStatus.CANCELLED
        assert summary.exit_code == 0
        assert mock_adapter.call_count == 0
        assert summary.not_attempted == ["A", "B", "C"]

    def test_yes_skips_confirmation(self, make_orchestrator):
        prompter = ScriptedPrompter(confirmations=[False])
        summary = make_orchestrator(prompter, RunOptions(assume_yes=True)).run(selection={"A"})
        assert "Proceed with installation?" not in prompter.asked
        assert summary.status == RunStatus.COMPLETED


class TestRecovery:
    def test_retry_then_success(self, make_orchestrator, mock_adapter):
        mock_adapter.set_failure("B", "flaky network", times=1)
        prompter = ScriptedPrompter(decisions=["retry"])
        summary = make_orchestrator(prompter).run(selection={"C"})

        assert summary.status == RunStatus.COMPLETED
        assert summary.outcome("B").state == ComponentState.SUCCEEDED
        assert summary.outcome("B").attempts == 2
        assert summary.failed == 0
        assert summary.exit_code == 0
        assert mock_adapter.executed_ids == ["A", "B", "B", "C"]
        assert prompter.asked.count(RECOVERY_PROMPT) == 1

    def test_repeated_retries(self, make_orchestrator, mock_adapter):
        mock_adapter.set_failure("B", times=3)
        prompter = ScriptedPrompter(decisions=["retry", "retry", "retry"])
        summary = make_orchestrator(prompter).run(selection={"B"})

        assert summary.outcome("B").attempts == 4
        assert summary.outcome("B").state == ComponentState.SUCCEEDED

    def test_failed_retry_reoffers_menu(self, make_orchestrator, mock_adapter):
        mock_adapter.set_failure("B", "still broken")
        prompter = ScriptedPrompter(decisions=["retry", "abort"])
        summary = make_orchestrator(prompter).run(selection={"C"})

        assert prompter.asked.count(RECOVERY_PROMPT) == 2
        assert summary.status == RunStatus.ABORTED

    def test_abort_leaves_rest_pending(self, make_orchestrator, mock_adapter):
        mock_adapter.set_failure("B", "boom")
        prompter = ScriptedPrompter(decisions=["abort"])
        summary = make_orchestrator(prompter).run(selection={"C"})

        assert summary.status == RunStatus.ABORTED
        assert summary.outcome("A").state == ComponentState.SUCCEEDED
        assert summary.outcome("B").state == ComponentState.FAILED
        assert summary.not_attempted == ["C"]
        assert "C" not in mock_adapter.executed_ids
        assert summary.exit_code == 1
        assert ("error", "Installation aborted.") in prompter.messages

    def test_skip_continues(self, make_orchestrator, mock_adapter):
        mock_adapter.set_failure("B", "boom")
        prompter = ScriptedPrompter(decisions=["skip"])
        summary = make_orchestrator(prompter).run(selection={"C", "D"})

        assert summary.status == RunStatus.COMPLETED
        assert summary.outcome("B").state == ComponentState.SKIPPED
        assert mock_adapter.executed_ids == ["A", "B", "C", "D"]
        assert summary.skipped == 1
        assert [o.reason for o in summary.failures] == ["boom"]
        assert summary.exit_code == 1

    def test_recovery_options(self, make_orchestrator, mock_adapter):
        seen: list = []

        class Recording(ScriptedPrompter):
            def choose(self, prompt, options):
                seen.append(list(options))
                return super().choose(prompt, options)

        mock_adapter.set_failure("A")
        make_orchestrator(Recording()).run(selection={"A"})
        assert seen == [["retry", "skip", "abort"]]

    def test_failure_notified_with_reason(self, make_orchestrator, mock_adapter):
        mock_adapter.set_failure("A", "disk full")
        prompter = ScriptedPrompter(decisions=["skip"])
        make_orchestrator(prompter).run(selection={"A"})
        assert ("error", "✗ Alpha failed: disk full") in prompter.messages


class TestPreview:
    def test_nothing_executed(self, make_orchestrator, mock_adapter):
        prompter = ScriptedPrompter()
        summary = make_orchestrator(prompter, RunOptions(dry_run=True)).run(selection={"C"})

        assert mock_adapter.call_count == 0
        assert summary.preview is True
        assert summary.plan == ["A", "B", "C"]
        assert summary.succeeded == 3
        assert summary.exit_code == 0

    def test_no_confirmation_in_preview(self, make_orchestrator):
        prompter = ScriptedPrompter(confirmations=[False])
        summary = make_orchestrator(prompter, RunOptions(dry_run=True)).run(selection={"A"})
        assert "Proceed with installation?" not in prompter.asked
        assert summary.status == RunStatus.COMPLETED

    def test_preview_never_shows_recovery(self, make_orchestrator, mock_adapter):
        mock_adapter.set_failure("A")
        prompter = ScriptedPrompter()
        make_orchestrator(prompter, RunOptions(dry_run=True)).run(selection={"A"})
        assert not any("What would you like to do?" in q for q in prompter.asked)

    def test_preview_message_shown(self, make_orchestrator):
        prompter = ScriptedPrompter()
        make_orchestrator(prompter, RunOptions(dry_run=True)).run(selection={"A"})
        assert ("warning", "DRY-RUN MODE: No changes will be made") in prompter.messages
        assert ("info", "[dry-run] would execute: bash a.sh --dry-run") in prompter.messages


class TestUnavailableAction:
    def test_propagates(self, make_orchestrator, mock_adapter):
        mock_adapter.set_unavailable("B", "Script not found: b.sh")
        with pytest.raises(ActionUnavailableError):
            make_orchestrator().run(selection={"C"})
        assert mock_adapter.executed_ids == ["A"]


class TestRequired:
    def test_required_always_planned(self, mock_adapter):
        from termux_devkit.core.models.component import Component
        from termux_devkit.core.services.component_install import (
            ComponentExecutor,
            ComponentRegistry,
            RunOrchestrator,
        )

        reg = ComponentRegistry([
            Component(id="core", name="Core", required=True),
            Component(id="extra", name="Extra"),
        ])
        opts = RunOptions(assume_yes=True)
        orch = RunOrchestrator(
            reg, ComponentExecutor(mock_adapter, options=opts), ScriptedPrompter(), opts,
        )
        summary = orch.run(selection={"extra"})
        assert summary.plan == ["core", "extra"]
        assert summary.selection == ["core", "extra"]
