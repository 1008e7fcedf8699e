"""
L5 Orchestration — CLI suite installer with proot fallback.

For each npm tool:
    already native?  → record native
    already in proot? → record proot
    native install + verify → native
    else proot install (npm bootstrapped first) + verify → proot
    else → failed

Special (curl) installers are installed natively only. The grouped
results record is written once per run.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from termux_devkit.adapters.shell.command import run_command
from termux_devkit.core.persistence.results_file import save_results
from termux_devkit.core.services.cli_suite.tools import (
    CLI_TOOLS,
    SPECIAL_INSTALLERS,
    CliTool,
)

logger = logging.getLogger(__name__)

Runner = Callable[[str], dict[str, Any]]

PROOT_PREFIX = "proot-distro login ubuntu --"
SHIM_SCRIPT = "generate-shims.js"


@dataclass
class CliSuiteResults:
    """Outcome of a suite run, grouped by install method."""

    native: list[str] = field(default_factory=list)
    proot: list[str] = field(default_factory=list)
    curl: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    pending: list[str] = field(default_factory=list)   # dry-run only

    @property
    def total_installed(self) -> int:
        return len(self.native) + len(self.proot) + len(self.curl)

    @property
    def all_ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict[str, list[str]]:
        data = {
            "native": self.native,
            "proot": self.proot,
            "curl": self.curl,
            "failed": self.failed,
        }
        if self.pending:
            data["pending"] = self.pending
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CliSuiteResults:
        return cls(**{
            key: list(data.get(key, []))
            for key in ("native", "proot", "curl", "failed", "pending")
        })


def _binary(verify_cmd: str) -> str:
    return verify_cmd.split()[0]


class CliSuiteInstaller:
    """Install a suite of CLI tools.

    Args:
        runner: Shell runner returning ``{"ok": bool, ...}``.
        scripts_dir: Where ``generate-shims.js`` lives (optional).
        notify: Progress callback ``(message, level)``.
    """

    def __init__(
        self,
        runner: Runner = run_command,
        scripts_dir: Path | None = None,
        notify: Callable[[str, str], None] | None = None,
    ):
        self._run = runner
        self._scripts_dir = scripts_dir
        self._notify = notify or (lambda msg, level: logger.info(msg))

    # ── Probes ──────────────────────────────────────────────────

    def exists_native(self, tool: CliTool) -> bool:
        return self._run(f"command -v {_binary(tool.verify_cmd)}")["ok"]

    def exists_in_proot(self, tool: CliTool) -> bool:
        return self._run(f"{PROOT_PREFIX} command -v {_binary(tool.verify_cmd)}")["ok"]

    # ── Install methods ─────────────────────────────────────────

    def install_native(self, tool: CliTool) -> bool:
        self._notify(f"🔄 Attempting native installation of '{tool.name}'...", "info")
        result = self._run(tool.install_cmd)
        if not result["ok"]:
            logger.debug("Native install of %s failed: %s", tool.name, result.get("error"))
            self._notify(f"❌ Native installation failed for '{tool.name}'.", "error")
            return False
        if not self.exists_native(tool):
            self._notify("⚠️  Installation reported success but command not found.", "warning")
            return False
        self._notify(f"✅ Successfully installed '{tool.name}' natively.", "success")
        return True

    def ensure_proot_npm(self) -> bool:
        if self._run(f"{PROOT_PREFIX} command -v npm")["ok"]:
            return True
        self._notify("📦 Installing Node.js and npm in Ubuntu proot...", "info")
        for cmd in ("apt-get update", "apt-get install -y nodejs npm"):
            if not self._run(f"{PROOT_PREFIX} {cmd}")["ok"]:
                self._notify("❌ Failed to install npm in proot.", "error")
                return False
        return True

    def install_in_proot(self, tool: CliTool) -> bool:
        self._notify(f"🔄 Attempting proot installation of '{tool.name}'...", "info")
        if not self.ensure_proot_npm():
            return False

        if not self._run(f"{PROOT_PREFIX} {tool.install_cmd}")["ok"]:
            self._notify(f"❌ Proot installation failed for '{tool.name}'.", "error")
            return False
        if not self.exists_in_proot(tool):
            self._notify(
                "⚠️  Proot installation reported success but command not found.", "warning",
            )
            return False

        self._notify(f"✅ Successfully installed '{tool.name}' in proot.", "success")
        self._generate_shim(tool)
        return True

    def install_via_curl(self, tool: CliTool) -> bool:
        self._notify(f"🔄 Installing {tool.name} via curl...", "info")
        if not self._run(tool.install_cmd)["ok"]:
            self._notify(f"❌ Curl installation failed for '{tool.name}'.", "error")
            return False
        if not self.exists_native(tool):
            self._notify("⚠️  Installation completed but command not found.", "warning")
            return False
        self._notify(f"✅ Successfully installed '{tool.name}'.", "success")
        return True

    def _generate_shim(self, tool: CliTool) -> None:
        if self._scripts_dir is None:
            return
        shim = self._scripts_dir / SHIM_SCRIPT
        if not shim.is_file():
            return
        result = self._run(f"node {shlex.quote(str(shim))} {shlex.quote(tool.name)}")
        if not result["ok"]:
            logger.warning("Shim generation failed for %s: %s", tool.name, result.get("error"))

    # ── Suite ───────────────────────────────────────────────────

    def install(
        self,
        tools: Sequence[CliTool] = CLI_TOOLS,
        special: Sequence[CliTool] = SPECIAL_INSTALLERS,
        dry_run: bool = False,
    ) -> CliSuiteResults:
        """Install every tool, returning results grouped by method."""
        results = CliSuiteResults()

        for tool in tools:
            self._notify(f"Processing: {tool.name}", "heading")
            self._warn_api_key(tool)

            if self.exists_native(tool):
                self._notify(f"✅ '{tool.name}' is already installed natively.", "success")
                results.native.append(tool.name)
                continue
            if self.exists_in_proot(tool):
                self._notify(f"✅ '{tool.name}' is already installed in proot.", "success")
                results.proot.append(tool.name)
                continue
            if dry_run:
                self._notify(f"[dry-run] Would install: {tool.install_cmd}", "warning")
                results.pending.append(tool.name)
                continue

            if self.install_native(tool):
                results.native.append(tool.name)
                continue

            self._notify(f"🔀 Falling back to proot installation for '{tool.name}'...", "info")
            if self.install_in_proot(tool):
                results.proot.append(tool.name)
            else:
                self._notify(f"❌ All installation methods failed for '{tool.name}'.", "error")
                results.failed.append(tool.name)

        for tool in special:
            self._notify(f"Processing: {tool.name} ({tool.install_method})", "heading")
            self._warn_api_key(tool)

            if self.exists_native(tool):
                self._notify(f"✅ '{tool.name}' is already installed.", "success")
                results.curl.append(tool.name)
                continue
            if dry_run:
                self._notify(f"[dry-run] Would install: {tool.install_cmd}", "warning")
                results.pending.append(tool.name)
                continue

            if self.install_via_curl(tool):
                results.curl.append(tool.name)
            else:
                results.failed.append(tool.name)

        logger.info(
            "CLI suite: %d installed, %d failed", results.total_installed, len(results.failed),
        )
        return results

    def _warn_api_key(self, tool: CliTool) -> None:
        if tool.requires_api_key:
            self._notify(
                f"⚠️  This tool requires {tool.api_key_var} environment variable", "warning",
            )


def install_cli_suite(
    results_path: Path | None = None,
    dry_run: bool = False,
    installer: CliSuiteInstaller | None = None,
    tools: Sequence[CliTool] = CLI_TOOLS,
    special: Sequence[CliTool] = SPECIAL_INSTALLERS,
) -> CliSuiteResults:
    """Run the suite and persist the grouped results (live runs only)."""
    installer = installer or CliSuiteInstaller()
    results = installer.install(tools, special, dry_run=dry_run)
    if results_path is not None and not dry_run:
        save_results(results.to_dict(), results_path)
    return results
