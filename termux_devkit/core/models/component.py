"""
Component model — one installable unit of the Termux setup.

Components are declared once at startup (built-in catalogue or a YAML
file) and never mutated afterwards, so the model is frozen.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Component(BaseModel):
    """A named, independently installable unit with declared prerequisites.

    ``name``, ``description`` and ``estimated_time`` are descriptive only.
    ``dependencies`` must reference other component ids of the same
    registry; the registry checks that at construction.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    estimated_time: str = ""
    script: str = ""                # external action (file in the scripts dir)
    dependencies: tuple[str, ...] = Field(default_factory=tuple)

    required: bool = False          # always installed, cannot be deselected
    standalone: bool = False        # orthogonal operation, no dependents
    auto_select: bool = False       # usually pulled in as a dependency

    @property
    def label(self) -> str:
        """Menu label: name, description and time estimate."""
        parts = [self.name]
        if self.description:
            parts.append(f"- {self.description}")
        if self.estimated_time:
            parts.append(f"({self.estimated_time})")
        return " ".join(parts)

    @property
    def interpreter(self) -> str:
        """Interpreter used to run the component script."""
        return "node" if self.script.endswith(".js") else "bash"
