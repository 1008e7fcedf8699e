"""
L2 Resolver — ``__init__.py`` re-exports all resolver functions.

These functions turn a user selection into an ordered execution plan:
selection → closure → canonical order.
"""

from termux_devkit.core.services.component_install.resolver.closure import (  # noqa: F401
    Closure,
    close_over,
    with_required,
)
from termux_devkit.core.services.component_install.resolver.ordering import (  # noqa: F401
    build_plan,
    order_ids,
)
