# src/skillport/services/app_context.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
from contextvars import ContextVar

from skillport.services.settings import Settings
from skillport.adapters.fs.path_provider import PathProvider
from skillport.adapters.skills.fs_repo import FsSkillRepository

_CTX: ContextVar[Optional["AppContext"]] = ContextVar("skillport_app_ctx", default=None)


def set_ctx(ctx: AppContext) -> None:
    """Publish the current AppContext (makes it reachable through get_ctx)."""
    _CTX.set(ctx)


def get_ctx() -> AppContext:
    """Return the current AppContext or fail if bootstrap has not run."""
    ctx = _CTX.get()
    if ctx is None:
        raise RuntimeError("AppContext is not initialized. Call init_ctx(...) during app bootstrap.")
    return ctx


def clear_ctx() -> None:
    _CTX.set(None)


@dataclass(slots=True)
class AppContext:
    settings: Settings
    paths: PathProvider

    _skills_repo: Optional[FsSkillRepository] = field(default=None, init=False, repr=False)

    @property
    def skills_repo(self) -> FsSkillRepository:
        repo = self._skills_repo
        if repo is None:
            repo = FsSkillRepository(paths=self.paths)
            self._skills_repo = repo
        return repo
