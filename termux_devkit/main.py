"""
Termux Dev Tools — CLI entrypoint.

Usage:
    termux-devkit --help
    termux-devkit install
    termux-devkit install --dry-run --select repo-cloning
    termux-devkit components
    termux-devkit check
"""

from __future__ import annotations

import json
import sys
from datetime import UTC, datetime
from pathlib import Path

import click

from termux_devkit import __version__
from termux_devkit.core.observability.logging_config import setup_logging

# Exit codes
EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2
EXIT_UNEXPECTED = 3
EXIT_CONFIG = 4


@click.group()
@click.version_option(version=__version__, prog_name="termux-devkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--catalog",
    "-c",
    "catalog_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Component catalog YAML (default: built-in catalog).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    catalog_path: str | None,
) -> None:
    """Termux Dev Tools — set up a development environment on Termux."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["catalog_path"] = Path(catalog_path) if catalog_path else None

    setup_logging(debug=debug, verbose=verbose, quiet=quiet)


def _load_catalog(ctx: click.Context):
    """Load the catalog or exit with the configuration error code."""
    from termux_devkit.core.config.loader import load_catalog
    from termux_devkit.core.errors import ConfigError

    try:
        return load_catalog(ctx.obj.get("catalog_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(EXIT_CONFIG)


# ── Catalog inspection ──────────────────────────────────────────


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def components(ctx: click.Context, as_json: bool) -> None:
    """List installable components."""
    catalog = _load_catalog(ctx)
    registry = catalog.registry

    if as_json:
        click.echo(json.dumps({
            "scripts_dir": str(catalog.scripts_dir),
            "execution_order": list(registry.canonical_order()),
            "components": [c.model_dump(mode="json") for c in registry],
        }, indent=2))
        return

    click.secho(f"\n📦 Components ({len(registry)})", fg="cyan", bold=True)
    for comp in registry:
        flags = [
            label for label, on in (
                ("required", comp.required),
                ("standalone", comp.standalone),
                ("auto-select", comp.auto_select),
            ) if on
        ]
        flag_label = f" [{', '.join(flags)}]" if flags else ""
        click.secho(f"   • {comp.id}", fg="white", bold=True, nl=False)
        click.echo(f"{flag_label}  {comp.name} ({comp.estimated_time or '?'})")
        if ctx.obj.get("verbose") and comp.description:
            click.echo(f"     {comp.description}")
        if comp.dependencies:
            click.echo(f"     needs: {', '.join(comp.dependencies)}")
    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Validate the component catalog (dependencies, cycles, order)."""
    from termux_devkit.core.config.loader import load_catalog
    from termux_devkit.core.errors import ConfigError, RegistryError

    problems: list[str] = []
    try:
        catalog = load_catalog(ctx.obj.get("catalog_path"))
    except RegistryError as e:
        problems = e.problems
    except ConfigError as e:
        problems = [str(e)]

    if as_json:
        click.echo(json.dumps({"valid": not problems, "errors": problems}, indent=2))
        sys.exit(EXIT_CONFIG if problems else EXIT_OK)

    if problems:
        click.secho("❌ Catalog errors:", fg="red", bold=True)
        for problem in problems:
            click.echo(f"   • {problem}")
        click.echo()
        sys.exit(EXIT_CONFIG)

    click.secho("✅ Catalog is valid", fg="green", bold=True)
    click.echo(f"   Components: {len(catalog.registry)}")
    click.echo(f"   Scripts:    {catalog.scripts_dir}")
    click.echo()


@cli.command()
@click.argument("component_ids", nargs=-1, required=True)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def plan(ctx: click.Context, component_ids: tuple[str, ...], as_json: bool) -> None:
    """Show the execution plan for a selection without running it.

    Example:

        termux-devkit plan repo-cloning shell-customization
    """
    from termux_devkit.core.errors import UsageError
    from termux_devkit.core.services.component_install import build_plan, close_over, with_required

    registry = _load_catalog(ctx).registry
    try:
        closure = close_over(with_required(component_ids, registry), registry)
    except UsageError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(EXIT_USAGE)
    ordered = build_plan(closure.closure, registry)

    if as_json:
        click.echo(json.dumps({
            "selection": sorted(closure.selection),
            "auto_added": [c.id for c in ordered if c.id in closure.auto_added],
            "plan": [c.id for c in ordered],
        }, indent=2))
        return

    click.secho("\n🧭 Installation Plan:", fg="blue", bold=True)
    for i, comp in enumerate(ordered, start=1):
        auto = " (auto-selected)" if comp.id in closure.auto_added else ""
        click.echo(f"   {i}. {comp.name} ({comp.estimated_time or '?'}){auto}")
    click.echo()


# ── Install menu ────────────────────────────────────────────────


@cli.command()
@click.option("--dry-run", is_flag=True, help="Preview selections without executing.")
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Skip confirmation prompts.")
@click.option(
    "--verbose", "echo_commands", is_flag=True,
    help="Show the exact command run for each component.",
)
@click.option(
    "--select", "-s", "selected", multiple=True,
    help="Component id to install (repeatable). Skips the selection menu.",
)
@click.option(
    "--results", "results_path", type=click.Path(dir_okay=False), default=None,
    help="Write the run summary to this JSON file.",
)
@click.option("--mock", is_flag=True, help="Use mock adapter (no real execution).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output summary as JSON.")
@click.pass_context
def install(
    ctx: click.Context,
    dry_run: bool,
    assume_yes: bool,
    echo_commands: bool,
    selected: tuple[str, ...],
    results_path: str | None,
    mock: bool,
    as_json: bool,
) -> None:
    """Interactive installation menu.

    Select components, let dependencies be added automatically, and run
    everything in the canonical order. Failed components can be retried,
    skipped, or the whole run aborted.

    Examples:

        termux-devkit install

        termux-devkit install --dry-run

        termux-devkit install --yes --select cli-tools --select github-setup
    """
    from termux_devkit.adapters.mock import MockAdapter
    from termux_devkit.adapters.shell.script import ScriptAdapter
    from termux_devkit.core.errors import ActionUnavailableError, UsageError
    from termux_devkit.core.models.run import RunOptions
    from termux_devkit.core.persistence.results_file import save_results
    from termux_devkit.core.services.component_install import (
        ComponentExecutor,
        RunOrchestrator,
    )
    from termux_devkit.ui.cli.prompts import BatchPrompter, ClickPrompter

    catalog = _load_catalog(ctx)
    options = RunOptions(dry_run=dry_run, verbose=echo_commands, assume_yes=assume_yes)

    interactive = sys.stdin.isatty()
    if selected and not interactive:
        prompter = BatchPrompter(set(selected), quiet=as_json)
    else:
        prompter = ClickPrompter(interactive=interactive, quiet=as_json)

    if not as_json:
        click.secho("\n📲 Termux Dev Tools — Interactive Installation Menu", fg="blue", bold=True)
        if dry_run:
            click.secho("🔍 DRY-RUN MODE: No changes will be made", fg="yellow")
        if echo_commands:
            click.secho("📢 VERBOSE MODE: Commands will be shown", fg="blue")

    adapter = MockAdapter() if mock else ScriptAdapter()
    executor = ComponentExecutor(
        adapter,
        options=options,
        scripts_dir=catalog.scripts_dir,
        echo=lambda msg: prompter.notify(msg, "info"),
    )
    orchestrator = RunOrchestrator(catalog.registry, executor, prompter, options)

    try:
        summary = orchestrator.run(selection=set(selected) if selected else None)
    except UsageError as e:
        click.secho(f"❌ Error: {e}", fg="red", err=True)
        sys.exit(EXIT_USAGE)
    except ActionUnavailableError as e:
        click.secho(f"💥 Environment problem: {e}", fg="red", bold=True, err=True)
        click.echo("   The component could not be started at all; check the scripts directory.",
                   err=True)
        sys.exit(EXIT_UNEXPECTED)

    if results_path:
        record = summary.to_dict()
        record["finished_at"] = datetime.now(UTC).isoformat()
        save_results(record, Path(results_path))

    if as_json:
        click.echo(json.dumps(summary.to_dict(), indent=2))
        sys.exit(summary.exit_code)

    _print_summary(summary)
    sys.exit(summary.exit_code)


def _print_summary(summary) -> None:
    from termux_devkit.core.models.run import RunStatus

    if summary.status in (RunStatus.EMPTY, RunStatus.CANCELLED):
        return

    click.echo(f"\n{'=' * 60}")
    click.secho("Installation Summary", bold=True)
    click.echo("=" * 60)
    click.secho(f"✓ Successful: {summary.succeeded}", fg="green")
    if summary.failed:
        click.secho(f"✗ Failed: {summary.failed}", fg="red")
    if summary.skipped:
        click.secho(f"⊘ Skipped: {summary.skipped}", fg="yellow")
    for outcome in summary.failures:
        click.echo(f"   • {outcome.name}: {outcome.reason or 'failed'}")
    if summary.not_attempted:
        click.secho(f"… Not attempted: {', '.join(summary.not_attempted)}", fg="yellow")

    if summary.preview:
        click.secho("\nDRY-RUN MODE: No actual changes were made.", fg="yellow")

    if summary.status == RunStatus.COMPLETED:
        click.echo("\nInstallation complete!")


# ── Register sub-command groups from termux_devkit/ui/cli/ ──────

from termux_devkit.ui.cli.cli_suite import cli_suite  # noqa: E402

cli.add_command(cli_suite)


if __name__ == "__main__":
    cli()
