"""
Click-based prompter — the interactive front end of the install menu.

Components are shown as a numbered checklist; the user answers with
numbers or ids separated by commas or spaces. Requires a terminal.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

import click

from termux_devkit.core.errors import NonInteractiveError
from termux_devkit.core.models.component import Component
from termux_devkit.core.services.component_install.prompts import Prompter

_LEVEL_STYLE: dict[str, dict] = {
    "info": {},
    "success": {"fg": "green"},
    "warning": {"fg": "yellow"},
    "error": {"fg": "red"},
    "heading": {"fg": "blue", "bold": True},
}


class ClickPrompter(Prompter):
    """Interactive prompter over click.

    Args:
        interactive: Override TTY detection (None = ``sys.stdin.isatty()``).
        quiet: Suppress progress messages and keep the menu and prompts
            on stderr, leaving stdout to ``--json`` output.
    """

    def __init__(self, interactive: bool | None = None, quiet: bool = False):
        self._interactive = sys.stdin.isatty() if interactive is None else interactive
        self._quiet = quiet

    def _require_tty(self) -> None:
        if not self._interactive:
            raise NonInteractiveError(
                "Interactive prompts not supported in this environment "
                "(use --select to choose components)"
            )

    def select(self, candidates: Sequence[Component], preselected: set[str]) -> set[str]:
        self._require_tty()

        click.secho("\nAvailable components:", fg="blue", bold=True, err=self._quiet)
        for i, comp in enumerate(candidates, start=1):
            marker = "[required]" if comp.id in preselected else "[ ]"
            click.echo(f"  {i:>2}. {marker} {comp.label}", err=self._quiet)
            if comp.dependencies:
                click.echo(f"         needs: {', '.join(comp.dependencies)}", err=self._quiet)
        click.echo(err=self._quiet)

        by_number = {str(i): c.id for i, c in enumerate(candidates, start=1)}
        by_id = {c.id for c in candidates}

        while True:
            raw = click.prompt(
                "Select components (numbers or ids, comma separated; empty for none)",
                default="",
                show_default=False,
                err=self._quiet,
            )
            tokens = [t for t in re.split(r"[,\s]+", raw.strip()) if t]
            chosen: set[str] = set()
            bad: list[str] = []
            for token in tokens:
                if token in by_number:
                    chosen.add(by_number[token])
                elif token in by_id:
                    chosen.add(token)
                else:
                    bad.append(token)
            if not bad:
                return chosen | set(preselected)
            click.secho(f"Unknown entries: {', '.join(bad)}", fg="red", err=self._quiet)

    def confirm(self, prompt: str, default: bool = True) -> bool:
        self._require_tty()
        return click.confirm(prompt, default=default, err=self._quiet)

    def choose(self, prompt: str, options: Sequence[str]) -> str:
        self._require_tty()
        return click.prompt(
            prompt,
            type=click.Choice(list(options), case_sensitive=False),
            default=options[0] if options else None,
            err=self._quiet,
        )

    def notify(self, message: str, level: str = "info") -> None:
        if self._quiet:
            return
        style = _LEVEL_STYLE.get(level, {})
        if level == "heading":
            click.echo()
        click.secho(message, err=level == "error", **style)


class BatchPrompter(ClickPrompter):
    """Front end for ``--select`` runs without a terminal.

    The selection comes from the command line, and any component failure
    aborts the run since nobody can answer the recovery menu.
    """

    def __init__(self, selection: set[str], quiet: bool = False):
        super().__init__(interactive=False, quiet=quiet)
        self._selection = set(selection)

    def select(self, candidates: Sequence[Component], preselected: set[str]) -> set[str]:
        return self._selection | set(preselected)

    def choose(self, prompt: str, options: Sequence[str]) -> str:
        self.notify(f"{prompt} → abort (no terminal attached)", "warning")
        return "abort"
