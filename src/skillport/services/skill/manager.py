# src/skillport/services/skill/manager.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from skillport.adapters.fs.path_provider import PathProvider
from skillport.adapters.skills.fs_repo import FsSkillRepository, is_valid_name
from skillport.domain import InstallStatus, OutcomeKind, RunResult, Selection, Skill, SkillOutcome
from skillport.errors import (
    NoSkillsSpecified,
    SkillNotFound,
    TargetDirUnavailable,
    TargetExists,
    TargetIsSymlinkDirectory,
)
from skillport.services.app_context import AppContext, get_ctx
from skillport.services.fs.safe_io import make_link, read_link, remove_entry

log = logging.getLogger("skillport.skill")

OutcomeCallback = Callable[[SkillOutcome], None]


class SkillManager:
    """
    Links skills from the source root into the target root.

    Only ever creates links pointing into the source root and only ever
    removes links whose value is exactly this repo's copy of the skill.
    """

    def __init__(self, *, paths: PathProvider, repo: FsSkillRepository):
        self.paths = paths
        self.repo = repo

    @classmethod
    def from_ctx(cls, ctx: Optional[AppContext] = None) -> "SkillManager":
        ctx = ctx or get_ctx()
        return cls(paths=ctx.paths, repo=ctx.skills_repo)

    # --- status ---

    def target_path(self, skill: Skill) -> Path:
        return self.paths.skill_target(skill.name)

    def is_installed(self, skill: Skill) -> bool:
        target = self.target_path(skill)
        if not target.is_symlink():
            return False
        return read_link(target) == skill.link_value

    def target_exists(self, skill: Skill) -> bool:
        target = self.target_path(skill)
        # is_symlink() catches dangling links that exists() reports as absent
        return target.is_symlink() or target.exists()

    def status(self, skill: Skill) -> InstallStatus:
        if self.is_installed(skill):
            return InstallStatus.INSTALLED
        if self.target_exists(skill):
            return InstallStatus.OCCUPIED
        return InstallStatus.NOT_INSTALLED

    # --- target root ---

    def check_target_dir(self) -> None:
        target = self.paths.target_dir()
        if target.is_symlink():
            log.error("target.symlink", extra={"extra": {"target": str(target), "points_to": read_link(target)}})
            raise TargetIsSymlinkDirectory(target)

    def ensure_target_dir(self) -> list[Path]:
        """Guard the target root and create it (and its parent) if missing. Returns created dirs."""
        self.check_target_dir()
        created: list[Path] = []
        for d in (self.paths.host_dir(), self.paths.target_dir()):
            if d.is_dir():
                continue
            try:
                d.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                log.error("target.unavailable", extra={"extra": {"target": str(d), "error": str(exc)}})
                raise TargetDirUnavailable(d, exc.strerror or str(exc)) from exc
            log.info("target.created", extra={"extra": {"path": str(d)}})
            created.append(d)
        return created

    # --- single skill ---

    def _error(self, event: str, name: str, exc: Exception) -> SkillOutcome:
        log.warning(event, extra={"extra": {"skill": name, "error": str(exc), "kind": type(exc).__name__}})
        return SkillOutcome(skill=name, kind=OutcomeKind.ERROR, reason=str(exc))

    def _skipped(self, event: str, name: str, reason: str, level: int = logging.INFO) -> SkillOutcome:
        log.log(level, event, extra={"extra": {"skill": name, "reason": reason}})
        return SkillOutcome(skill=name, kind=OutcomeKind.SKIPPED, reason=reason)

    def install(self, name: str, *, force: bool = False) -> SkillOutcome:
        skill = self.repo.get(name)
        if skill is None:
            return self._error("skill.install.error", name, SkillNotFound(name))

        if self.is_installed(skill):
            return self._skipped("skill.install.skipped", name, "already installed")

        target = self.target_path(skill)
        replaced = False
        if self.target_exists(skill):
            if not force:
                return self._error("skill.install.error", name, TargetExists(name, target))
            log.warning("skill.install.replacing", extra={"extra": {"skill": name, "target": str(target)}})
            try:
                remove_entry(target)
            except OSError as exc:
                return self._error("skill.install.error", name, OSError(f"Failed to replace: {name} ({exc.strerror or exc})"))
            replaced = True

        try:
            make_link(skill.source_path, target)
        except OSError as exc:
            return self._error("skill.install.error", name, OSError(f"Failed to install: {name} ({exc.strerror or exc})"))

        log.info("skill.installed", extra={"extra": {"skill": name, "target": str(target), "source": skill.link_value, "replaced": replaced}})
        return SkillOutcome(skill=name, kind=OutcomeKind.INSTALLED, reason="replaced existing" if replaced else "")

    def uninstall(self, name: str) -> SkillOutcome:
        if not is_valid_name(name):
            return self._error("skill.uninstall.error", name, SkillNotFound(name))

        skill = self.repo.locate(name)
        target = self.target_path(skill)

        if target.is_symlink():
            if not self.is_installed(skill):
                # never delete a link we do not own
                return self._skipped("skill.uninstall.skipped", name, "symlink points elsewhere", logging.WARNING)
            try:
                target.unlink()
            except OSError as exc:
                return self._error("skill.uninstall.error", name, OSError(f"Failed to remove: {name} ({exc.strerror or exc})"))
            log.info("skill.removed", extra={"extra": {"skill": name, "target": str(target)}})
            return SkillOutcome(skill=name, kind=OutcomeKind.REMOVED)

        if target.exists():
            return self._skipped("skill.uninstall.skipped", name, "not a symlink, won't remove", logging.WARNING)
        return self._skipped("skill.uninstall.skipped", name, "not installed")

    # --- batches ---

    @staticmethod
    def _run(outcomes: Iterable[SkillOutcome], on_outcome: Optional[OutcomeCallback]) -> RunResult:
        def _reported():
            for outcome in outcomes:
                if on_outcome is not None:
                    on_outcome(outcome)
                yield outcome

        return RunResult.from_outcomes(_reported())

    def install_all(self, *, force: bool = False, on_outcome: Optional[OutcomeCallback] = None) -> RunResult:
        self.ensure_target_dir()
        return self._run((self.install(s.name, force=force) for s in self.repo.list()), on_outcome)

    def install_many(self, names: Iterable[str], *, force: bool = False, on_outcome: Optional[OutcomeCallback] = None) -> RunResult:
        names = list(names)
        if not names:
            raise NoSkillsSpecified("install")
        self.ensure_target_dir()
        return self._run((self.install(n, force=force) for n in names), on_outcome)

    def uninstall_all(self, *, on_outcome: Optional[OutcomeCallback] = None) -> RunResult:
        self.check_target_dir()
        return self._run((self.uninstall(s.name) for s in self.repo.list()), on_outcome)

    def uninstall_many(self, names: Iterable[str], *, on_outcome: Optional[OutcomeCallback] = None) -> RunResult:
        names = list(names)
        if not names:
            raise NoSkillsSpecified("uninstall")
        self.check_target_dir()
        return self._run((self.uninstall(n) for n in names), on_outcome)

    def apply_changes(self, changes: Iterable[tuple[str, Selection]], *, on_outcome: Optional[OutcomeCallback] = None) -> RunResult:
        """Install newly selected skills and uninstall deselected ones."""
        self.check_target_dir()

        def _apply():
            for name, sel in changes:
                if sel is Selection.SELECTED:
                    yield self.install(name, force=False)
                else:
                    yield self.uninstall(name)

        return self._run(_apply(), on_outcome)
