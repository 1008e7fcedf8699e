"""
Results file persistence — atomic read/write of run results.

Results are stored as JSON. Writes are atomic (write to temp file, then
rename) so a crash mid-write never leaves a truncated record behind.
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Default results file of the CLI suite installer (relative to cwd)
DEFAULT_CLI_RESULTS_FILE = ".cli-install-results.json"


def load_results(path: Path) -> dict[str, Any]:
    """Load a results record.

    Returns:
        The decoded mapping, or ``{}`` if the file is missing or corrupt.
    """
    if not path.is_file():
        logger.info("No results file at %s", path)
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.warning("Corrupt results file %s: %s", path, e)
        return {}
    except OSError as e:
        logger.warning("Cannot read results from %s: %s", path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Unexpected results format in %s", path)
        return {}
    return data


def save_results(data: dict[str, Any], path: Path) -> None:
    """Save a results record (atomic write).

    Args:
        data: JSON-serialisable mapping.
        path: Target path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=path.parent,
            prefix=".results_",
            suffix=".tmp",
        )
        tmp = Path(tmp_path)
        try:
            with open(fd, "w", encoding="utf-8") as f:
                f.write(content)
            tmp.replace(path)
            logger.debug("Results saved to %s", path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
    except OSError as e:
        logger.error("Failed to save results to %s: %s", path, e)
        raise
