# src/skillport/adapters/fs/path_provider.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from skillport.services.settings import Settings


@dataclass(slots=True)
class PathProvider:
    """Single source of truth for paths. Always works with pathlib.Path."""

    source: Path
    target: Path

    @classmethod
    def from_settings(cls, settings: Settings) -> "PathProvider":
        return cls(source=Path(settings.source_dir), target=Path(settings.target_dir))

    # --- roots ---
    def source_dir(self) -> Path:
        return self.source

    def target_dir(self) -> Path:
        return self.target

    def host_dir(self) -> Path:
        return self.target.parent

    # --- per skill ---
    def skill_source(self, name: str) -> Path:
        return self.source / name

    def skill_target(self, name: str) -> Path:
        return self.target / name
