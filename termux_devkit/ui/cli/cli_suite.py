"""
CLI commands for the CLI tool suite installer.

Thin wrappers over ``termux_devkit.core.services.cli_suite``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

_LEVEL_COLORS = {"success": "green", "warning": "yellow", "error": "red", "heading": "cyan"}


def _results_path(path: str | None) -> Path:
    from termux_devkit.core.persistence.results_file import DEFAULT_CLI_RESULTS_FILE

    return Path(path) if path else Path.cwd() / DEFAULT_CLI_RESULTS_FILE


@click.group("cli-suite")
def cli_suite() -> None:
    """CLI suite — install AI coding CLIs with proot fallback."""


@cli_suite.command("install")
@click.option("--dry-run", is_flag=True, help="Check what is installed, install nothing.")
@click.option(
    "--results", "results_file", type=click.Path(dir_okay=False), default=None,
    help="Results file (default: ./.cli-install-results.json).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def install(dry_run: bool, results_file: str | None, as_json: bool) -> None:
    """Install every CLI tool, falling back to proot when native fails."""
    from termux_devkit.core.config.loader import resolve_scripts_dir
    from termux_devkit.core.services.cli_suite import CliSuiteInstaller, install_cli_suite

    def _notify(message: str, level: str) -> None:
        if as_json:
            return
        if level == "heading":
            click.echo()
        click.secho(message, fg=_LEVEL_COLORS.get(level))

    path = _results_path(results_file)
    installer = CliSuiteInstaller(scripts_dir=resolve_scripts_dir(), notify=_notify)
    results = install_cli_suite(results_path=path, dry_run=dry_run, installer=installer)

    if as_json:
        click.echo(json.dumps(results.to_dict(), indent=2))
        sys.exit(0 if results.all_ok else 1)

    click.echo(f"\n{'=' * 60}")
    click.secho("Installation Summary", bold=True)
    click.echo("=" * 60)
    for label, names in (
        ("Native installations", results.native),
        ("Proot installations", results.proot),
        ("Curl installations", results.curl),
        ("Failed installations", results.failed),
    ):
        click.echo(f"{label}: {len(names)}")
        if names:
            click.echo(f"  - {', '.join(names)}")
    if results.pending:
        click.secho(f"Would install: {', '.join(results.pending)}", fg="yellow")
    if not dry_run:
        click.echo(f"\nResults saved to: {path}")

    sys.exit(0 if results.all_ok else 1)


@cli_suite.command("results")
@click.option(
    "--results", "results_file", type=click.Path(dir_okay=False), default=None,
    help="Results file (default: ./.cli-install-results.json).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def results(results_file: str | None, as_json: bool) -> None:
    """Show the results of the last suite installation."""
    from termux_devkit.core.persistence.results_file import load_results
    from termux_devkit.core.services.cli_suite import CliSuiteResults

    path = _results_path(results_file)
    data = load_results(path)

    if as_json:
        click.echo(json.dumps(data, indent=2))
        return

    if not data:
        click.secho(f"⚠️  No results found at {path}", fg="yellow")
        return

    recorded = CliSuiteResults.from_dict(data)
    click.secho(f"📋 CLI suite results ({path.name})", fg="cyan", bold=True)
    click.echo(f"   Installed: {recorded.total_installed}")
    for method in ("native", "proot", "curl"):
        names = getattr(recorded, method)
        if names:
            click.echo(f"   {method:<7} {', '.join(names)}")
    if recorded.failed:
        click.secho(f"   failed  {', '.join(recorded.failed)}", fg="red")
