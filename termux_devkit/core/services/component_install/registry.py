"""
Component registry — read-only index of installable components.

The registry is built once at startup and runs every integrity check
during construction. A malformed catalogue therefore fails fast with
``RegistryError`` and can never be observed half-valid.

Checks:
    - no duplicate ids
    - every dependency resolves to a known id
    - the dependency relation is acyclic
    - the canonical execution order is a topological order of the graph
    - standalone components have no dependents
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from termux_devkit.core.errors import CycleError, RegistryError, UnknownComponentError
from termux_devkit.core.models.component import Component
from termux_devkit.core.services.component_install.domain.dag import (
    duplicate_ids,
    find_cycle,
    missing_dependencies,
    order_violations,
)

logger = logging.getLogger(__name__)


def validate_registry(
    components: Sequence[Component],
    execution_order: Sequence[str],
) -> list[str]:
    """Run every integrity check without raising.

    Returns:
        List of problem strings (empty = valid).
    """
    problems: list[str] = []

    for cid in duplicate_ids(c.id for c in components):
        problems.append(f"Duplicate component id: {cid}")

    graph = {c.id: list(c.dependencies) for c in components}
    problems.extend(missing_dependencies(graph))

    cycle = find_cycle(graph)
    if not cycle.ok:
        problems.append(f"Dependency cycle detected at '{cycle.cycle_at}'")
        # Order checks are meaningless on a cyclic graph
        return problems

    problems.extend(order_violations(graph, execution_order))

    for comp in components:
        if not comp.standalone:
            continue
        dependents = [c.id for c in components if comp.id in c.dependencies]
        if dependents:
            problems.append(
                f"Standalone component '{comp.id}' has dependents: "
                f"{', '.join(dependents)}"
            )

    return problems


class ComponentRegistry:
    """Indexed, immutable view of a component catalogue.

    Args:
        components: Component definitions, in display order.
        execution_order: Canonical execution order. Defaults to the
            declaration order of ``components``.

    Raises:
        CycleError: The dependency graph has a cycle.
        RegistryError: Any other integrity violation.
    """

    def __init__(
        self,
        components: Iterable[Component],
        execution_order: Iterable[str] | None = None,
    ):
        comps = tuple(components)
        order = tuple(execution_order) if execution_order is not None else tuple(
            c.id for c in comps
        )

        cycle = find_cycle({c.id: list(c.dependencies) for c in comps})
        if not cycle.ok:
            raise CycleError(cycle.cycle_at or "")

        problems = validate_registry(comps, order)
        if problems:
            raise RegistryError(problems)

        self._components = comps
        self._order = order
        self._index = {c.id: c for c in comps}
        logger.debug("Component registry ready: %d components", len(comps))

    # ── Lookups ─────────────────────────────────────────────────

    def list_components(self) -> list[Component]:
        """All components in declaration order."""
        return list(self._components)

    def find(self, component_id: str) -> Component:
        """Look up a component by id.

        Raises:
            UnknownComponentError: The id is not registered.
        """
        try:
            return self._index[component_id]
        except KeyError:
            raise UnknownComponentError([component_id]) from None

    def get(self, component_id: str) -> Component | None:
        """Look up a component by id, or None."""
        return self._index.get(component_id)

    def canonical_order(self) -> tuple[str, ...]:
        """The fixed total order in which components execute."""
        return self._order

    @property
    def ids(self) -> list[str]:
        return [c.id for c in self._components]

    def required_ids(self) -> set[str]:
        """Ids of components that can never be deselected."""
        return {c.id for c in self._components if c.required}

    def dependents_of(self, component_id: str) -> list[str]:
        """Ids of components that directly depend on ``component_id``."""
        return [c.id for c in self._components if component_id in c.dependencies]

    def unknown_ids(self, ids: Iterable[str]) -> list[str]:
        """Return the subset of ``ids`` that is not registered."""
        return sorted({cid for cid in ids if cid not in self._index})

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._index

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    def __repr__(self) -> str:
        return f"<ComponentRegistry components={len(self)}>"


def default_registry() -> ComponentRegistry:
    """Build the registry from the built-in catalogue."""
    from termux_devkit.core.data.components import COMPONENTS, EXECUTION_ORDER

    return ComponentRegistry(COMPONENTS, EXECUTION_ORDER)
