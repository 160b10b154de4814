# src/skillport/services/skill/selection.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Sequence

from skillport.domain import Selection


class Command(str, Enum):
    TOGGLE = "toggle"
    ALL = "all"
    NONE = "none"
    APPLY = "apply"
    CANCEL = "cancel"
    INVALID_NUMBER = "invalid_number"
    UNKNOWN = "unknown"


_LETTERS = {
    "q": Command.APPLY,
    "c": Command.CANCEL,
    "a": Command.ALL,
    "n": Command.NONE,
}


@dataclass(frozen=True, slots=True)
class Step:
    command: Command
    raw: str
    name: Optional[str] = None  # skill toggled by TOGGLE

    @property
    def done(self) -> bool:
        return self.command in (Command.APPLY, Command.CANCEL)


@dataclass(slots=True)
class SelectionState:
    """
    Interactive selection keyed by skill name.

    ``original`` is the snapshot taken on entry; ``changes()`` is the diff
    between it and the current selection.
    """

    names: tuple[str, ...]
    original: Mapping[str, Selection]
    selected: dict[str, Selection] = field(default_factory=dict)

    @classmethod
    def from_installed(cls, installed: Mapping[str, bool]) -> "SelectionState":
        original = {name: Selection.of(flag) for name, flag in installed.items()}
        return cls(names=tuple(installed), original=dict(original), selected=dict(original))

    def __post_init__(self) -> None:
        if not self.selected:
            self.selected = dict(self.original)

    # --- queries ---

    def is_selected(self, name: str) -> bool:
        return self.selected[name] is Selection.SELECTED

    def is_changed(self, name: str) -> bool:
        return self.selected[name] is not self.original[name]

    def changes(self) -> list[tuple[str, Selection]]:
        """Skills whose selection differs from the snapshot, in display order."""
        return [(n, self.selected[n]) for n in self.names if self.is_changed(n)]

    def name_at(self, number: int) -> Optional[str]:
        """Skill shown at 1-based ``number`` in the menu."""
        if 1 <= number <= len(self.names):
            return self.names[number - 1]
        return None

    # --- transitions ---

    def toggle(self, name: str) -> None:
        self.selected[name] = self.selected[name].toggled()

    def select_all(self) -> None:
        for n in self.names:
            self.selected[n] = Selection.SELECTED

    def select_none(self) -> None:
        for n in self.names:
            self.selected[n] = Selection.UNSELECTED

    def handle(self, line: str) -> Step:
        """Apply one line of user input; unrecognised input leaves the state untouched."""
        raw = line.strip()
        cmd = _LETTERS.get(raw.lower())
        if cmd is Command.ALL:
            self.select_all()
        elif cmd is Command.NONE:
            self.select_none()
        if cmd is not None:
            return Step(command=cmd, raw=raw)

        if raw[:1].isdecimal():
            # an index never has more digits than the skill count
            digits = raw.lstrip("0") or "0"
            fits = raw.isdecimal() and len(digits) <= len(str(len(self.names)))
            name = self.name_at(int(digits)) if fits else None
            if name is None:
                return Step(command=Command.INVALID_NUMBER, raw=raw)
            self.toggle(name)
            return Step(command=Command.TOGGLE, raw=raw, name=name)

        return Step(command=Command.UNKNOWN, raw=raw)


def menu_labels(state: SelectionState) -> Sequence[tuple[int, str, bool, str]]:
    """(number, name, selected, status) rows for the menu."""
    rows = []
    for i, name in enumerate(state.names, start=1):
        selected = state.is_selected(name)
        if state.is_changed(name):
            status = "will install" if selected else "will remove"
        elif selected:
            status = "installed"
        else:
            status = ""
        rows.append((i, name, selected, status))
    return rows
