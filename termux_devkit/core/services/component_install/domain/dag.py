"""
L1 Domain — dependency graph utilities (pure).

Functions for checking the component dependency graph: referential
integrity, cycle detection and canonical-order validation.
No I/O, no subprocess.

A graph here is ``{component_id: [dependency_id, ...]}``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class CycleCheck:
    """Result of a cycle search: ``ok`` or the id where a cycle closed."""

    cycle_at: str | None = None

    @property
    def ok(self) -> bool:
        return self.cycle_at is None


def duplicate_ids(ids: Iterable[str]) -> list[str]:
    """Return ids that appear more than once, in first-repeat order."""
    seen: set[str] = set()
    dupes: list[str] = []
    for cid in ids:
        if cid in seen and cid not in dupes:
            dupes.append(cid)
        seen.add(cid)
    return dupes


def missing_dependencies(graph: Mapping[str, Sequence[str]]) -> list[str]:
    """List every dependency reference that does not resolve.

    Returns:
        Error strings (empty = every reference resolves).
    """
    errors: list[str] = []
    for cid, deps in graph.items():
        for dep in deps:
            if dep not in graph:
                errors.append(f"Component '{cid}' depends on unknown component '{dep}'")
    return errors


def find_cycle(graph: Mapping[str, Sequence[str]]) -> CycleCheck:
    """Depth-first search with ``visited`` and ``in_progress`` sets.

    Iterative, with an explicit stack of ``(id, remaining deps)`` frames,
    so catalogue size is not bounded by the interpreter's recursion limit.
    A node reached while still in progress closes a cycle; that node's id
    is reported. Unknown dependency ids are ignored here (see
    ``missing_dependencies``).
    """
    visited: set[str] = set()
    in_progress: set[str] = set()

    for root in graph:
        if root in visited:
            continue
        in_progress.add(root)
        stack: list[tuple[str, Iterator[str]]] = [(root, iter(graph[root]))]

        while stack:
            cid, deps = stack[-1]
            for dep in deps:
                if dep not in graph or dep in visited:
                    continue
                if dep in in_progress:
                    return CycleCheck(cycle_at=dep)
                in_progress.add(dep)
                stack.append((dep, iter(graph[dep])))
                break
            else:
                stack.pop()
                in_progress.discard(cid)
                visited.add(cid)

    return CycleCheck()


def order_violations(
    graph: Mapping[str, Sequence[str]],
    order: Sequence[str],
) -> list[str]:
    """Check that ``order`` is a valid topological order of ``graph``.

    Every graph node must appear exactly once, no unknown ids may appear,
    and each node must come after all of its dependencies.

    Returns:
        Error strings (empty = valid).
    """
    errors: list[str] = []

    for cid in duplicate_ids(order):
        errors.append(f"Execution order lists '{cid}' more than once")

    for cid in order:
        if cid not in graph:
            errors.append(f"Execution order references unknown component '{cid}'")

    position = {cid: i for i, cid in reversed(list(enumerate(order)))}
    for cid in graph:
        if cid not in position:
            errors.append(f"Component '{cid}' is missing from the execution order")

    for cid, deps in graph.items():
        if cid not in position:
            continue
        for dep in deps:
            if dep in position and position[dep] >= position[cid]:
                errors.append(
                    f"Execution order places '{cid}' before its dependency '{dep}'"
                )

    return errors
