from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

from skillport.adapters.fs.path_provider import PathProvider
from skillport.config import const
from skillport.domain import Skill


def is_valid_name(name: str) -> bool:
    """A skill name is a single path component."""
    if not name or name in (".", ".."):
        return False
    return Path(name).name == name and "/" not in name and "\\" not in name


def is_skill_dir(path: Path) -> bool:
    return path.is_dir() and (path / const.SKILL_DESCRIPTOR).is_file()


class FsSkillRepository:
    """
    Skills living in the source root:
      - every immediate subdirectory holding a SKILL.md is a skill
      - the directory name is the skill name
    Nothing is cached; each call rescans the disk.
    """

    def __init__(self, *, paths: PathProvider):
        self.paths = paths

    def _root(self) -> Path:
        return Path(self.paths.source_dir())

    def list(self) -> Iterator[Skill]:
        root = self._root()
        if not root.is_dir():
            return
        for child in sorted(root.iterdir(), key=lambda p: p.name):
            if child.name.startswith("."):  # skip hidden
                continue
            if is_skill_dir(child):
                yield Skill(name=child.name, source_path=child)

    def locate(self, name: str) -> Skill:
        """Skill record for ``name`` without checking that it is a valid skill."""
        return Skill(name=name, source_path=self.paths.skill_source(name))

    def get(self, name: str) -> Optional[Skill]:
        if not is_valid_name(name):
            return None
        skill = self.locate(name)
        if not is_skill_dir(skill.source_path):
            return None
        return skill
