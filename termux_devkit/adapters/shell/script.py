"""
Script adapter — run a component's setup script.

``.js`` scripts run under ``node``, everything else under ``bash``.
The script inherits the terminal by default because most setup scripts
ask their own questions (SSH passphrase, git identity, ...).
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
import time

from termux_devkit.adapters.base import Adapter, ExecutionContext
from termux_devkit.core.models.result import ExecutionResult

logger = logging.getLogger(__name__)

# Keep diagnostics short: only the tail of captured stderr is reported
_MAX_ERROR_CHARS = 2000


class ScriptAdapter(Adapter):
    """Execute component scripts and classify the exit status.

    Args:
        capture_output: Capture stdout/stderr instead of inheriting the
            terminal. Captured stderr becomes the failure diagnostic.
    """

    def __init__(self, capture_output: bool = False):
        self._capture = capture_output

    @property
    def name(self) -> str:
        return "script"

    def is_available(self) -> bool:
        return shutil.which("bash") is not None

    def validate(self, context: ExecutionContext) -> tuple[bool, str]:
        if not context.component.script:
            return False, "Component declares no script"

        if not context.script_path.is_file():
            return False, f"Script not found: {context.script_path}"

        interpreter = context.component.interpreter
        if shutil.which(interpreter) is None:
            return False, f"Interpreter not found on PATH: {interpreter}"

        return True, ""

    def describe(self, context: ExecutionContext) -> str:
        return shlex.join(context.argv())

    def execute(self, context: ExecutionContext) -> ExecutionResult:
        cmd = context.argv()
        command = shlex.join(cmd)
        component_id = context.component.id

        logger.debug("Executing: %s", command)
        start = time.monotonic()

        try:
            result = subprocess.run(
                cmd,
                capture_output=self._capture,
                text=True,
                timeout=context.timeout,
                cwd=context.scripts_dir,
            )
        except subprocess.TimeoutExpired:
            return ExecutionResult.failure(
                component_id,
                error=f"Script timed out after {context.timeout}s",
                command=command,
                duration_ms=int((time.monotonic() - start) * 1000),
            )
        except OSError as e:
            return ExecutionResult.failure(
                component_id,
                error=f"Script execution error: {e}",
                command=command,
                duration_ms=int((time.monotonic() - start) * 1000),
            )

        elapsed_ms = int((time.monotonic() - start) * 1000)
        stdout = (result.stdout or "").strip()
        stderr = (result.stderr or "").strip()

        if result.returncode == 0:
            return ExecutionResult.success(
                component_id,
                output=stdout,
                command=command,
                duration_ms=elapsed_ms,
                metadata={"return_code": 0},
            )

        error = stderr[-_MAX_ERROR_CHARS:] if stderr else (
            f"Script exited with code {result.returncode}"
        )
        return ExecutionResult.failure(
            component_id,
            error=error,
            command=command,
            output=stdout,
            duration_ms=elapsed_ms,
            metadata={"return_code": result.returncode},
        )
