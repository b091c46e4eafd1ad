"""Detection of conflicting bindings and chords."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from awase.action import Action, ActionKind
from awase.chord import KeyChord
from awase.hotkey import Hotkey
from awase.mode import KeyMode


@dataclass(frozen=True)
class ConflictEntry:
    """One conflict: where it was found and what collides."""

    mode: str
    hotkey: Hotkey
    existing: str
    new: str


@dataclass
class ConflictReport:
    """All conflicts found in a configuration."""

    conflicts: list[ConflictEntry] = field(default_factory=list)

    def is_clean(self) -> bool:
        """True if no conflicts were found."""
        return not self.conflicts


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _describe(action: Action) -> str:
    if action.kind is ActionKind.CHAIN:
        inner = ", ".join(_describe(item) for item in action.value)
        return f"{action.kind.value}([{inner}])"
    return f"{action.kind.value}({_quote(action.value)})"


def detect_conflicts(
    modes: Iterable[KeyMode], chords: Iterable[KeyChord]
) -> ConflictReport:
    """Find chord leaders that are also bound as plain bindings in a mode."""
    chord_list = list(chords)
    report = ConflictReport()
    for mode in modes:
        for chord in chord_list:
            binding = mode.bindings.get(chord.leader)
            if binding is None:
                continue
            report.conflicts.append(
                ConflictEntry(
                    mode=mode.name,
                    hotkey=chord.leader,
                    existing=f"binding: {_describe(binding.action)}",
                    new=f"chord leader (follower: {chord.follower})",
                )
            )
    return report