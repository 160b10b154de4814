# src/skillport/apps/cli/console.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from skillport.domain import InstallStatus, OutcomeKind, RunResult, Skill, SkillOutcome

_SUMMARY_PARTS = (
    ("installed", "installed", "green"),
    ("removed", "removed", "yellow"),
    ("skipped", "skipped", "cyan"),
    ("errors", "errors", "red"),
)


def summary_text(result: RunResult) -> str:
    """Plain ``"1 installed, 2 skipped"`` style summary; empty when nothing happened."""
    return ", ".join(f"{getattr(result, attr)} {label}" for attr, label, _ in _SUMMARY_PARTS if getattr(result, attr) > 0)


class Output:
    """User-facing console output. Structured logs go through ``logging`` instead."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False, soft_wrap=True)

    # --- plain lines ---

    def echo(self, text: str = "") -> None:
        self.console.print(text)

    def info(self, msg: str) -> None:
        self.console.print(f"[blue]ℹ[/blue] {escape(msg)}")

    def success(self, msg: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(msg)}")

    def warning(self, msg: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow] {escape(msg)}")

    def error(self, msg: str) -> None:
        self.console.print(f"[red]✗[/red] {escape(msg)}")

    def header(self, msg: str) -> None:
        self.console.print(f"\n[bold cyan]{escape(msg)}[/bold cyan]\n")

    def ask(self, prompt: str = "> ") -> str:
        return self.console.input(prompt)

    # --- domain output ---

    def created_dirs(self, dirs: Iterable[Path]) -> None:
        for d in dirs:
            self.info(f"Creating {d}/")

    def outcome(self, outcome: SkillOutcome) -> None:
        name = outcome.skill
        if outcome.kind is OutcomeKind.INSTALLED:
            self.success(f"Installed: {name}" + (f" ({outcome.reason})" if outcome.reason else ""))
        elif outcome.kind is OutcomeKind.REMOVED:
            self.success(f"Removed: {name}")
        elif outcome.kind is OutcomeKind.SKIPPED:
            self.warning(f"Skip: {name} ({outcome.reason})")
        else:
            self.error(outcome.reason or f"Failed: {name}")

    def status_list(self, source: Path, rows: Sequence[tuple[Skill, InstallStatus]]) -> None:
        self.header(f"Available skills from {source}")
        if not rows:
            self.warning("No skills found")
            return
        for skill, status in rows:
            name = escape(skill.name)
            if status is InstallStatus.INSTALLED:
                self.console.print(f"  [green]\\[x][/green] {name} [cyan](installed)[/cyan]")
            elif status is InstallStatus.OCCUPIED:
                self.console.print(f"  [yellow]\\[!][/yellow] {name} [yellow](exists, not from this repo)[/yellow]")
            else:
                self.console.print(f"  \\[ ] {name}")
        self.echo()

    def summary(self, result: RunResult) -> None:
        parts = [f"[{color}]{getattr(result, attr)} {label}[/{color}]" for attr, label, color in _SUMMARY_PARTS if getattr(result, attr) > 0]
        if parts:
            self.echo()
            self.console.print(f"[bold]Summary:[/bold] {', '.join(parts)}")
