"""
Adapters — the boundary to external actions.

    from termux_devkit.adapters import Adapter, ExecutionContext, MockAdapter
"""

from termux_devkit.adapters.base import Adapter, ExecutionContext
from termux_devkit.adapters.mock import MockAdapter
from termux_devkit.adapters.shell.script import ScriptAdapter

__all__ = ["Adapter", "ExecutionContext", "MockAdapter", "ScriptAdapter"]
