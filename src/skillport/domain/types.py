# src/skillport/domain/types.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class InstallStatus(str, Enum):
    NOT_INSTALLED = "not_installed"
    INSTALLED = "installed"  # symlink pointing into this repo
    OCCUPIED = "occupied"  # anything else at the target path


class Selection(str, Enum):
    UNSELECTED = "unselected"
    SELECTED = "selected"

    @classmethod
    def of(cls, flag: bool) -> "Selection":
        return cls.SELECTED if flag else cls.UNSELECTED

    def toggled(self) -> "Selection":
        return Selection.UNSELECTED if self is Selection.SELECTED else Selection.SELECTED


class OutcomeKind(str, Enum):
    INSTALLED = "installed"
    REMOVED = "removed"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class SkillOutcome:
    skill: str
    kind: OutcomeKind
    reason: str = ""


@dataclass(frozen=True, slots=True)
class RunResult:
    installed: int = 0
    removed: int = 0
    skipped: int = 0
    errors: int = 0

    @property
    def ok(self) -> bool:
        return self.errors == 0

    def add(self, outcome: SkillOutcome) -> "RunResult":
        field = {
            OutcomeKind.INSTALLED: "installed",
            OutcomeKind.REMOVED: "removed",
            OutcomeKind.SKIPPED: "skipped",
            OutcomeKind.ERROR: "errors",
        }[outcome.kind]
        counts = {k: getattr(self, k) for k in ("installed", "removed", "skipped", "errors")}
        counts[field] += 1
        return RunResult(**counts)

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[SkillOutcome]) -> "RunResult":
        result = cls()
        for o in outcomes:
            result = result.add(o)
        return result
