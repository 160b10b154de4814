"""Error hierarchy shared by the skill manager and the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SkillportError(RuntimeError):
    """Base class for all skillport errors."""


class FatalError(SkillportError):
    """Pre-flight problem that aborts the whole run before any mutation."""


class SkillNotFound(SkillportError):
    """Raised when a named skill has no valid directory in the source root."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Skill not found: {name}")


class TargetExists(SkillportError):
    """Raised when the target path is occupied by an entry this repo does not own."""

    def __init__(self, name: str, path: Optional[Path] = None) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Exists: {name} (use --force to replace)")


class TargetIsSymlinkDirectory(FatalError):
    """Raised when the target root itself is a symbolic link."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path} is a symlink. This may conflict with the install. Please remove or rename it first.")


class TargetDirUnavailable(FatalError):
    """Raised when the target root cannot be created as a directory."""

    def __init__(self, path: Path, detail: Optional[str] = None) -> None:
        self.path = path
        self.detail = detail
        message = f"Cannot use {path} as the skills directory"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NoSkillsSpecified(FatalError):
    """Raised when an install/uninstall batch is given no names."""

    def __init__(self, action: str = "install") -> None:
        self.action = action
        message = "No skills specified" if action == "install" else f"No skills specified for {action}"
        super().__init__(message)


__all__ = [
    "SkillportError",
    "FatalError",
    "SkillNotFound",
    "TargetExists",
    "TargetIsSymlinkDirectory",
    "TargetDirUnavailable",
    "NoSkillsSpecified",
]
