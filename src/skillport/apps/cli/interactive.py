# src/skillport/apps/cli/interactive.py
from __future__ import annotations

import logging
from typing import Optional

from rich.markup import escape

from skillport.apps.cli.console import Output
from skillport.domain import RunResult
from skillport.services.skill.manager import SkillManager
from skillport.services.skill.selection import Command, SelectionState, menu_labels

log = logging.getLogger("skillport.cli")

HINT = "Enter number to toggle, [bold]a[/bold]=all, [bold]n[/bold]=none, [bold]q[/bold]=apply & quit, [bold]c[/bold]=cancel"

_STATUS_STYLE = {
    "will install": "green",
    "will remove": "red",
    "installed": "cyan",
}


def render_menu(out: Output, state: SelectionState) -> None:
    out.echo()
    out.console.print("[bold]Skills:[/bold]")
    for number, name, selected, status in menu_labels(state):
        marker = "[green]\\[x][/green]" if selected else "\\[ ]"
        line = f"  {number}) {marker} {escape(name)}"
        if status:
            style = _STATUS_STYLE[status]
            line += f" [{style}]({status})[/{style}]"
        out.console.print(line)
    out.echo()
    out.console.print(HINT)


def run_interactive(mgr: SkillManager, out: Output) -> Optional[RunResult]:
    """
    Menu loop. Returns the applied RunResult, or None when the session was
    cancelled, ended without input, or had nothing to apply.
    """
    out.header("Skills Manager")
    out.console.print(f"Source: [cyan]{escape(str(mgr.paths.source_dir()))}[/cyan]")
    out.console.print(f"Target: [cyan]{escape(str(mgr.paths.target_dir()))}[/cyan]")

    out.created_dirs(mgr.ensure_target_dir())

    skills = list(mgr.repo.list())
    if not skills:
        out.warning("No skills found in this repo")
        return None

    state = SelectionState.from_installed({s.name: mgr.is_installed(s) for s in skills})

    while True:
        render_menu(out, state)
        try:
            line = out.ask("> ")
        except EOFError:
            out.echo()
            log.info("interactive.eof")
            out.info("Cancelled, no changes made")
            return None

        step = state.handle(line)
        if step.done:
            if step.command is Command.APPLY:
                break
            log.info("interactive.cancelled", extra={"extra": {"pending": len(state.changes())}})
            out.info("Cancelled, no changes made")
            return None
        if step.command is Command.INVALID_NUMBER:
            out.warning(f"Invalid number: {step.raw}")
        elif step.command is Command.UNKNOWN:
            out.warning(f"Unknown command: {step.raw}")

    out.echo()
    out.header("Applying changes")

    changes = state.changes()
    if not changes:
        out.info("No changes to apply")
        return None

    result = mgr.apply_changes(changes, on_outcome=out.outcome)
    out.summary(result)
    return result
