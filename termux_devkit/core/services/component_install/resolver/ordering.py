"""
L2 Resolver — execution ordering.

Sorts any subset of component ids by the registry's canonical order.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from termux_devkit.core.models.component import Component
from termux_devkit.core.services.component_install.registry import ComponentRegistry


def order_ids(ids: Iterable[str], canonical_order: Sequence[str]) -> list[str]:
    """Sort ``ids`` consistently with ``canonical_order``.

    Ids absent from the canonical order sort last, among themselves by id,
    so the result is a deterministic function of the input set. In a
    validated registry every id is present.
    """
    position = {cid: i for i, cid in enumerate(canonical_order)}
    last = len(position)
    return sorted(set(ids), key=lambda cid: (position.get(cid, last), cid))


def build_plan(ids: Iterable[str], registry: ComponentRegistry) -> list[Component]:
    """Turn a closure into the ordered execution plan."""
    return [registry.find(cid) for cid in order_ids(ids, registry.canonical_order())]
