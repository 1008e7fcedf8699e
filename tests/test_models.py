"""
Tests for the domain models.
"""

import pytest
from pydantic import ValidationError

from termux_devkit.core.models import (
    Component,
    ComponentOutcome,
    ComponentState,
    ExecutionResult,
    RunStatus,
    RunSummary,
)


class TestComponent:
    def test_minimal(self):
        comp = Component(id="x", name="X")
        assert comp.dependencies == ()
        assert comp.required is False
        assert comp.standalone is False

    def test_frozen(self):
        comp = Component(id="x", name="X")
        with pytest.raises(ValidationError):
            comp.name = "Y"

    def test_dependencies_from_list(self):
        comp = Component(id="x", name="X", dependencies=["a", "b"])
        assert comp.dependencies == ("a", "b")

    def test_interpreter(self):
        assert Component(id="a", name="A", script="setup.js").interpreter == "node"
        assert Component(id="b", name="B", script="setup.sh").interpreter == "bash"

    def test_label(self):
        comp = Component(id="a", name="Alpha", description="first", estimated_time="1 min")
        assert comp.label == "Alpha - first (1 min)"
        assert Component(id="b", name="Bravo").label == "Bravo"


class TestExecutionResult:
    def test_success(self):
        r = ExecutionResult.success("a", output="done")
        assert r.ok
        assert not r.failed
        assert r.error is None

    def test_failure(self):
        r = ExecutionResult.failure("a", error="boom")
        assert not r.ok
        assert r.failed
        assert r.error == "boom"

    def test_preview_counts_as_ok(self):
        r = ExecutionResult.preview("a", command="bash a.sh")
        assert r.ok
        assert r.is_preview
        assert r.output == "[dry-run] would execute: bash a.sh"

    def test_invalid_status(self):
        with pytest.raises(ValidationError):
            ExecutionResult(component_id="a", status="weird")


def _outcome(cid: str, state: ComponentState, error: str | None = None) -> ComponentOutcome:
    result = ExecutionResult.failure(cid, error=error) if error else None
    return ComponentOutcome(component_id=cid, name=cid.upper(), state=state, last_result=result)


class TestRunSummary:
    def test_all_succeeded(self):
        summary = RunSummary(outcomes=[
            _outcome("a", ComponentState.SUCCEEDED),
            _outcome("b", ComponentState.SUCCEEDED),
        ])
        assert summary.succeeded == 2
        assert summary.all_ok
        assert summary.exit_code == 0

    def test_failed_component_exit_1(self):
        summary = RunSummary(outcomes=[_outcome("a", ComponentState.FAILED, "boom")])
        assert summary.exit_code == 1
        assert [o.reason for o in summary.failures] == ["boom"]

    def test_skipped_after_failure_is_a_failure(self):
        summary = RunSummary(outcomes=[
            _outcome("a", ComponentState.SKIPPED, "boom"),
            _outcome("b", ComponentState.SUCCEEDED),
        ])
        assert summary.skipped == 1
        assert summary.exit_code == 1
        assert summary.failures[0].component_id == "a"

    def test_aborted(self):
        summary = RunSummary(
            status=RunStatus.ABORTED,
            outcomes=[
                _outcome("a", ComponentState.FAILED, "boom"),
                _outcome("b", ComponentState.PENDING),
            ],
        )
        assert summary.not_attempted == ["b"]
        assert summary.exit_code == 1

    @pytest.mark.parametrize("status", [RunStatus.EMPTY, RunStatus.CANCELLED])
    def test_noop_exit_0(self, status):
        assert RunSummary(status=status).exit_code == 0

    def test_to_dict(self):
        summary = RunSummary(
            plan=["a"], outcomes=[_outcome("a", ComponentState.FAILED, "boom")],
        )
        data = summary.to_dict()
        assert data["status"] == "completed"
        assert data["failed"] == 1
        assert data["failures"] == [{"id": "a", "name": "A", "reason": "boom"}]
        assert data["components"][0]["state"] == "failed"

    def test_outcome_lookup(self):
        summary = RunSummary(outcomes=[_outcome("a", ComponentState.SUCCEEDED)])
        assert summary.outcome("a").name == "A"
        assert summary.outcome("zz") is None
