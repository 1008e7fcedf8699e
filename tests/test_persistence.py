"""
Tests for results file persistence.
"""

import json
from pathlib import Path

from termux_devkit.core.persistence.results_file import load_results, save_results


class TestResultsFile:
    """Tests for atomic results read/write."""

    def test_save_and_load(self, tmp_path: Path):
        path = tmp_path / "results.json"
        save_results({"native": ["codex"], "failed": []}, path)
        assert load_results(path) == {"native": ["codex"], "failed": []}

    def test_load_missing_returns_empty(self, tmp_path: Path):
        assert load_results(tmp_path / "nope.json") == {}

    def test_load_corrupt_returns_empty(self, tmp_path: Path):
        path = tmp_path / "results.json"
        path.write_text("{not json")
        assert load_results(path) == {}

    def test_load_non_mapping_returns_empty(self, tmp_path: Path):
        path = tmp_path / "results.json"
        path.write_text("[1, 2, 3]")
        assert load_results(path) == {}

    def test_save_creates_directories(self, tmp_path: Path):
        path = tmp_path / "deep" / "nested" / "results.json"
        save_results({"ok": True}, path)
        assert path.is_file()

    def test_save_is_valid_json(self, tmp_path: Path):
        path = tmp_path / "results.json"
        save_results({"name": "café"}, path)
        raw = path.read_text(encoding="utf-8")
        assert json.loads(raw) == {"name": "café"}
        assert raw.endswith("\n")

    def test_save_atomic_no_leftovers(self, tmp_path: Path):
        path = tmp_path / "results.json"
        save_results({"a": 1}, path)
        save_results({"a": 2}, path)
        assert [p.name for p in tmp_path.iterdir()] == ["results.json"]
        assert load_results(path) == {"a": 2}
