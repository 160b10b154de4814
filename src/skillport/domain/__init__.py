from .skill import Skill
from .types import InstallStatus, Selection, OutcomeKind, SkillOutcome, RunResult

__all__ = ["Skill", "InstallStatus", "Selection", "OutcomeKind", "SkillOutcome", "RunResult"]
