"""
Logging configuration for the ``termux-devkit`` entrypoint.

Component scripts inherit the terminal's stdout, and ``--json`` output
goes to stdout as well, so log records only ever go to stderr and carry
a ``termux-devkit:`` tag that sets them apart from script output.

Level precedence (resolved here, nowhere else):
    --debug  >  --verbose  >  --quiet  >  TDK_LOG_LEVEL  >  WARNING

A copy of the log can be kept in TDK_LOG_FILE (level TDK_LOG_FILE_LEVEL,
defaulting to the console level).
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "TDK_LOG_LEVEL"
LOG_FILE_ENV = "TDK_LOG_FILE"
LOG_FILE_LEVEL_ENV = "TDK_LOG_FILE_LEVEL"

_FMT_CONSOLE = "termux-devkit: %(levelname)s %(message)s"
_FMT_DEBUG = "termux-devkit: %(levelname)s %(name)s:%(lineno)d %(message)s"
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"


class _ConsoleHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is when a record is emitted."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> int:
    """Pick the console level from the global CLI flags and the environment."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR
    return _parse_level(os.environ.get(LOG_LEVEL_ENV))


def setup_logging(debug: bool = False, verbose: bool = False, quiet: bool = False) -> None:
    """Configure the root logger once per process (called by the root group)."""
    level = resolve_level(debug, verbose, quiet)

    console = _ConsoleHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_FMT_DEBUG if debug else _FMT_CONSOLE))

    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if isinstance(handler, (_ConsoleHandler, logging.FileHandler)):
            handler.close()
    root.addHandler(console)

    effective = level
    log_file = os.environ.get(LOG_FILE_ENV)
    if log_file:
        file_level = _parse_level(os.environ.get(LOG_FILE_LEVEL_ENV), default=level)
        effective = min(effective, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(fh)

    root.setLevel(effective)


def _parse_level(level: str | None, default: int = logging.WARNING) -> int:
    """Convert a level name to its numeric constant (unknown names → default)."""
    if not level:
        return default
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else default
