"""
L2 Resolver — dependency closure.

Expands a user selection to include every transitively required
component, and reports which ones were added automatically.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from termux_devkit.core.errors import UnknownComponentError
from termux_devkit.core.services.component_install.registry import ComponentRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Closure:
    """A selection expanded to its transitive dependency closure.

    ``auto_added`` is purely informational (user-facing disclosure);
    nothing downstream branches on it.
    """

    selection: frozenset[str] = field(default_factory=frozenset)
    closure: frozenset[str] = field(default_factory=frozenset)

    @property
    def auto_added(self) -> frozenset[str]:
        return self.closure - self.selection

    @property
    def empty(self) -> bool:
        return not self.closure


def close_over(selection: Iterable[str], registry: ComponentRegistry) -> Closure:
    """Compute the transitive dependency closure of ``selection``.

    Breadth-first: the ``seen`` set is seeded with the selection, and every
    dependency not yet seen is added to the result and enqueued.
    Terminates because the registry guarantees a finite acyclic graph.

    Args:
        selection: Component ids chosen by the user.
        registry: Validated component registry.

    Returns:
        Closure with the original selection and the expanded set.

    Raises:
        UnknownComponentError: ``selection`` contains an unregistered id.
    """
    chosen = frozenset(selection)
    unknown = registry.unknown_ids(chosen)
    if unknown:
        raise UnknownComponentError(unknown)

    seen: set[str] = set(chosen)
    queue: deque[str] = deque(sorted(chosen))

    while queue:
        cid = queue.popleft()
        for dep in registry.find(cid).dependencies:
            if dep not in seen:
                seen.add(dep)
                queue.append(dep)

    result = Closure(selection=chosen, closure=frozenset(seen))
    if result.auto_added:
        logger.info("Auto-selected dependencies: %s", ", ".join(sorted(result.auto_added)))
    return result


def with_required(selection: Iterable[str], registry: ComponentRegistry) -> set[str]:
    """Add every ``required`` component to a user selection."""
    return set(selection) | registry.required_ids()
