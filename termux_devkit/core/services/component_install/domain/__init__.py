"""
L1 Domain — ``__init__.py`` re-exports all pure domain functions.

These functions have NO subprocess calls, NO filesystem access,
NO network calls. Pure input→output.
"""

from termux_devkit.core.services.component_install.domain.dag import (  # noqa: F401
    CycleCheck,
    duplicate_ids,
    find_cycle,
    missing_dependencies,
    order_violations,
)
