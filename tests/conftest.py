"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from termux_devkit.adapters.mock import MockAdapter
from termux_devkit.core.models.component import Component
from termux_devkit.core.models.run import RunOptions
from termux_devkit.core.services.component_install import (
    ComponentExecutor,
    ComponentRegistry,
    RunOrchestrator,
    ScriptedPrompter,
)


@pytest.fixture
def abc_registry() -> ComponentRegistry:
    """A (no deps) ← B ← C chain plus an independent D."""
    return ComponentRegistry(
        [
            Component(id="A", name="Alpha", script="a.sh"),
            Component(id="B", name="Bravo", script="b.sh", dependencies=("A",)),
            Component(id="C", name="Charlie", script="c.js", dependencies=("B",)),
            Component(id="D", name="Delta", script="d.sh"),
        ],
        ["A", "B", "C", "D"],
    )


@pytest.fixture
def mock_adapter() -> MockAdapter:
    return MockAdapter()


@pytest.fixture
def make_orchestrator(abc_registry: ComponentRegistry, mock_adapter: MockAdapter):
    """Factory building an orchestrator over the ABC registry."""

    def _make(
        prompter: ScriptedPrompter | None = None,
        options: RunOptions | None = None,
        registry: ComponentRegistry | None = None,
    ) -> RunOrchestrator:
        opts = options or RunOptions(assume_yes=True)
        executor = ComponentExecutor(mock_adapter, options=opts)
        return RunOrchestrator(
            registry or abc_registry,
            executor,
            prompter or ScriptedPrompter(),
            opts,
        )

    return _make


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    """A catalog YAML with real shell scripts: ok.sh succeeds, bad.sh fails."""
    scripts = tmp_path / "scripts"
    scripts.mkdir()
    (scripts / "ok.sh").write_text("echo ok\n")
    (scripts / "bad.sh").write_text("echo broken >&2\nexit 3\n")

    (tmp_path / "catalog.yml").write_text(textwrap.dedent("""\
        scripts_dir: scripts
        components:
          - id: base
            name: Base
            script: ok.sh
          - id: broken
            name: Broken
            script: bad.sh
            dependencies: [base]
          - id: after
            name: After
            script: ok.sh
            dependencies: [base]
        execution_order: [base, broken, after]
    """))
    return tmp_path
