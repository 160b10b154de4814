# src/skillport/apps/cli/app.py
from __future__ import annotations

import functools
import logging
import traceback
from pathlib import Path
from typing import List, Optional

import typer

from skillport.apps.bootstrap import init_ctx
from skillport.apps.cli.console import Output, summary_text
from skillport.apps.cli.interactive import run_interactive
from skillport.domain import RunResult
from skillport.errors import FatalError, NoSkillsSpecified
from skillport.services.app_context import get_ctx
from skillport.services.settings import Settings
from skillport.services.skill.manager import SkillManager

log = logging.getLogger("skillport.cli")

EPILOG = """Examples:

  skillport --all

  skillport netgraph-dev netgraph-dsl

  skillport --uninstall omnigraffle-automation
"""

app = typer.Typer(
    help="Symlinks skills from this repo into ~/.claude/skills/",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# -------- helpers --------


def _run_safe(func):
    """Turn fatal pre-flight errors into a red message and exit code 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FatalError as exc:
            if get_ctx().settings.cli_debug:
                traceback.print_exc()
            Output().error(str(exc))
            raise typer.Exit(code=1)

    return wrapper


def _finish(mode: str, result: Optional[RunResult]) -> None:
    if result is None:
        return
    log.info("run.finished", extra={"extra": {"mode": mode, "summary": summary_text(result), "ok": result.ok}})
    if not result.ok:
        raise typer.Exit(code=1)


# -------- commands --------


def cmd_list(mgr: SkillManager, out: Output) -> None:
    rows = [(s, mgr.status(s)) for s in mgr.repo.list()]
    out.status_list(mgr.paths.source_dir(), rows)


def cmd_install_all(mgr: SkillManager, out: Output, force: bool) -> RunResult:
    out.header("Installing all skills")
    out.created_dirs(mgr.ensure_target_dir())
    result = mgr.install_all(force=force, on_outcome=out.outcome)
    out.summary(result)
    return result


def cmd_install_specific(mgr: SkillManager, out: Output, names: List[str], force: bool) -> RunResult:
    if not names:
        raise NoSkillsSpecified("install")
    out.header("Installing selected skills")
    out.created_dirs(mgr.ensure_target_dir())
    result = mgr.install_many(names, force=force, on_outcome=out.outcome)
    out.summary(result)
    return result


def cmd_uninstall(mgr: SkillManager, out: Output, names: List[str]) -> RunResult:
    if not names:
        raise NoSkillsSpecified("uninstall")
    out.header("Uninstalling skills")
    result = mgr.uninstall_many(names, on_outcome=out.outcome)
    out.summary(result)
    return result


def cmd_uninstall_all(mgr: SkillManager, out: Output) -> RunResult:
    out.header("Uninstalling all skills from this repo")
    result = mgr.uninstall_all(on_outcome=out.outcome)
    out.summary(result)
    return result


# -------- entry point --------


@app.command(
    epilog=EPILOG,
    # unknown dash-tokens are skill names, reported as "Skill not found"
    context_settings={"ignore_unknown_options": True, "help_option_names": ["-h", "--help"]},
)
def main(
    names: Optional[List[str]] = typer.Argument(None, help="Skills to install (or to remove, with --uninstall)", show_default=False),
    install_all: bool = typer.Option(False, "--all", help="Install all skills"),
    list_skills: bool = typer.Option(False, "--list", help="List skills and their status"),
    uninstall: bool = typer.Option(False, "--uninstall", help="Remove the named skills"),
    uninstall_all: bool = typer.Option(False, "--uninstall-all", help="Remove all skills from this repo"),
    force: bool = typer.Option(False, "--force", help="Replace existing skills (use with --all or skill names)"),
    source: Optional[Path] = typer.Option(None, "--source", help="Skills repository (default: current directory or SKILLPORT_SOURCE_DIR)"),
    target: Optional[Path] = typer.Option(None, "--target", help="Install directory (default: ~/.claude/skills or SKILLPORT_TARGET_DIR)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Structured log level on stderr (default: WARNING)"),
):
    """
    Symlinks skills from this repo into ~/.claude/skills/. Runs the interactive menu when called without arguments.

    Run it from inside the skills repository, or point --source at it.
    """
    names = list(names or [])
    modes = [flag for flag, on in (("--all", install_all), ("--list", list_skills), ("--uninstall", uninstall), ("--uninstall-all", uninstall_all)) if on]
    if len(modes) > 1:
        raise typer.BadParameter(f"{' and '.join(modes)} cannot be combined")
    if names and modes and modes[0] != "--uninstall":
        raise typer.BadParameter(f"{modes[0]} does not take skill names")

    settings = Settings.from_sources().with_overrides(source_dir=source, target_dir=target, log_level=log_level)
    ctx = init_ctx(settings)
    _dispatch(SkillManager.from_ctx(ctx), Output(), modes[0] if modes else None, names, force)


@_run_safe
def _dispatch(mgr: SkillManager, out: Output, mode: Optional[str], names: List[str], force: bool) -> None:
    if mode == "--list":
        cmd_list(mgr, out)
    elif mode == "--all":
        _finish("install-all", cmd_install_all(mgr, out, force))
    elif mode == "--uninstall-all":
        _finish("uninstall-all", cmd_uninstall_all(mgr, out))
    elif mode == "--uninstall":
        _finish("uninstall", cmd_uninstall(mgr, out, names))
    elif names or force:
        _finish("install", cmd_install_specific(mgr, out, names, force))
    else:
        _finish("interactive", run_interactive(mgr, out))


if __name__ == "__main__":
    app()
