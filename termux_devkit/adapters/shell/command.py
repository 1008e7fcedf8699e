"""
Shell command runner — the single place the CLI suite installer calls
``subprocess.run``.

Install commands are shell strings (``curl ... | sh``), so they run
through the shell. Output is captured and trimmed; failures come back as
data, never as exceptions.
"""

from __future__ import annotations

import logging
import subprocess
import time
from typing import Any

logger = logging.getLogger(__name__)

_TAIL = 2000


def run_command(
    command: str,
    *,
    timeout: int = 600,
    capture: bool = True,
) -> dict[str, Any]:
    """Run a shell command.

    Args:
        command: Shell command line.
        timeout: Seconds before ``TimeoutExpired``.
        capture: Capture output instead of inheriting the terminal.

    Returns:
        ``{"ok": True, "stdout": "...", "returncode": 0, "elapsed_ms": N}``
        on success, ``{"ok": False, "error": "...", ...}`` on failure.
    """
    logger.debug("Running: %s", command)
    start = time.monotonic()
    try:
        result = subprocess.run(
            command,
            shell=True,
            capture_output=capture,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        return {
            "ok": False,
            "error": f"Command timed out after {timeout}s",
            "elapsed_ms": int((time.monotonic() - start) * 1000),
        }
    except OSError as e:
        return {
            "ok": False,
            "error": f"Command execution error: {e}",
            "elapsed_ms": int((time.monotonic() - start) * 1000),
        }

    elapsed_ms = int((time.monotonic() - start) * 1000)
    stdout = (result.stdout or "")[-_TAIL:]
    stderr = (result.stderr or "")[-_TAIL:]

    if result.returncode == 0:
        return {
            "ok": True,
            "stdout": stdout,
            "returncode": 0,
            "elapsed_ms": elapsed_ms,
        }

    return {
        "ok": False,
        "error": f"Command failed (exit {result.returncode})",
        "stderr": stderr,
        "stdout": stdout,
        "returncode": result.returncode,
        "elapsed_ms": elapsed_ms,
    }
