"""
Tests for logging configuration.
"""

import io
import logging
from pathlib import Path

import pytest

from termux_devkit.core.observability.logging_config import (
    LOG_FILE_ENV,
    LOG_FILE_LEVEL_ENV,
    LOG_LEVEL_ENV,
    _parse_level,
    resolve_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger(monkeypatch):
    for var in (LOG_LEVEL_ENV, LOG_FILE_ENV, LOG_FILE_LEVEL_ENV):
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLevel:
    def test_default_is_warning(self):
        assert resolve_level() == logging.WARNING

    def test_env(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "info")
        assert resolve_level() == logging.INFO

    def test_flags_beat_env(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
        assert resolve_level(quiet=True) == logging.ERROR

    def test_flag_precedence(self):
        assert resolve_level(debug=True, verbose=True, quiet=True) == logging.DEBUG
        assert resolve_level(verbose=True, quiet=True) == logging.INFO

    @pytest.mark.parametrize("name,expected", [
        ("Error", logging.ERROR),
        (None, logging.WARNING),
        ("", logging.WARNING),
        ("LOUD", logging.WARNING),
    ])
    def test_parse_level(self, name, expected):
        assert _parse_level(name) == expected


class TestSetupLogging:
    def test_console_goes_to_current_stderr(self, monkeypatch):
        setup_logging()
        stderr, stdout = io.StringIO(), io.StringIO()
        monkeypatch.setattr("sys.stderr", stderr)
        monkeypatch.setattr("sys.stdout", stdout)

        logging.getLogger("termux_devkit.test").warning("script missing")

        assert stderr.getvalue() == "termux-devkit: WARNING script missing\n"
        assert stdout.getvalue() == ""

    def test_level_applied(self):
        setup_logging(verbose=True)
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler_from_env(self, tmp_path: Path, monkeypatch):
        log_file = tmp_path / "devkit.log"
        monkeypatch.setenv(LOG_FILE_ENV, str(log_file))
        monkeypatch.setenv(LOG_FILE_LEVEL_ENV, "DEBUG")
        setup_logging()

        root = logging.getLogger()
        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG

        logging.getLogger("termux_devkit.test").debug("to file only")
        for h in root.handlers:
            h.flush()
        assert "to file only" in log_file.read_text()

    def test_repeated_setup_does_not_stack(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1
