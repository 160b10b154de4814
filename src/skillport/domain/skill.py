# src/skillport/domain/skill.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Skill:
    name: str
    source_path: Path  # absolute path of the skill directory in the source root

    @property
    def link_value(self) -> str:
        """String a link owned by this repo must hold."""
        return str(self.source_path)
