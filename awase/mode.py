"""Keybinding modes and the mode-aware binding map with chords and remaps."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from awase.action import Action
from awase.binding import Binding
from awase.chord import ChordState, KeyChord
from awase.condition import MatchContext
from awase.errors import ModeNotFoundError
from awase.hotkey import Hotkey
from awase.remap import KeyRemap

DEFAULT_MODE = "default"


@dataclass
class KeyMode:
    """A named set of bindings, indexed by hotkey.

    With ``passthrough`` set, unmatched keys reach the focused app; without
    it every key is consumed.
    """

    name: str
    passthrough: bool = True
    bindings: dict[Hotkey, Binding] = field(default_factory=dict)

    def add_binding(self, binding: Binding) -> Binding | None:
        """Add ``binding``; return the binding it replaced, if any."""
        previous = self.bindings.get(binding.hotkey)
        self.bindings[binding.hotkey] = binding
        return previous

    def find_binding(self, hotkey: Hotkey, ctx: MatchContext) -> Binding | None:
        """The binding for ``hotkey`` if its condition holds in ``ctx``."""
        binding = self.bindings.get(hotkey)
        if binding is not None and binding.matches_context(ctx):
            return binding
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialized form; bindings are listed, each carrying its hotkey."""
        return {
            "name": self.name,
            "bindings": [binding.to_dict() for binding in self.bindings.values()],
            "passthrough": self.passthrough,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KeyMode:
        """Build a mode; ``passthrough`` defaults to True."""
        if not isinstance(data, Mapping):
            raise ValueError("a mode is a mapping")
        for name in ("name", "bindings"):
            if name not in data:
                raise ValueError(f"missing mode field: {name}")
        name = data["name"]
        if not isinstance(name, str):
            raise ValueError("mode field 'name' must be a string")
        passthrough = data.get("passthrough", True)
        if not isinstance(passthrough, bool):
            raise ValueError("mode field 'passthrough' must be a boolean")
        raw_bindings = data["bindings"]
        if not isinstance(raw_bindings, list):
            raise ValueError("mode field 'bindings' must be a list")
        mode = cls(name, passthrough)
        for raw in raw_bindings:
            mode.add_binding(Binding.from_dict(raw))
        return mode


@dataclass(frozen=True)
class Matched:
    """A binding matched: perform the action."""

    action: Action
    consume: bool


@dataclass(frozen=True)
class ChordPending:
    """A chord leader was pressed; a follower is awaited."""

    leader: Hotkey
    timeout_ms: int


@dataclass(frozen=True)
class Remapped:
    """The key should be re-emitted as another hotkey."""

    to: Hotkey


@dataclass(frozen=True)
class NoMatch:
    """Nothing matched."""


MatchResult = Union[Matched, ChordPending, Remapped, NoMatch]


class BindingMap:
    """Mode-aware key lookup with chord and remap support.

    ``clock`` returns seconds from a monotonic source and times chords.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._modes: dict[str, KeyMode] = {DEFAULT_MODE: KeyMode(DEFAULT_MODE, True)}
        self._chords: list[KeyChord] = []
        self._remaps: list[KeyRemap] = []
        self._current_mode = DEFAULT_MODE
        self._chord_state = ChordState(clock)

    def __repr__(self) -> str:
        return (
            f"BindingMap(current_mode={self._current_mode!r}, "
            f"modes={sorted(self._modes)!r}, chords={len(self._chords)}, "
            f"remaps={len(self._remaps)})"
        )

    def current_mode(self) -> str:
        """The name of the active mode."""
        return self._current_mode

    def set_mode(self, mode: str) -> None:
        """Switch modes, cancelling any pending chord.

        Raises ModeNotFoundError if no such mode exists.
        """
        if mode not in self._modes:
            raise ModeNotFoundError(mode)
        self._current_mode = mode
        self._chord_state.reset()

    def add_mode(self, mode: KeyMode) -> None:
        """Add a mode, replacing one of the same name."""
        self._modes[mode.name] = mode

    def mode(self, name: str) -> KeyMode | None:
        """The mode with this name, or None."""
        return self._modes.get(name)

    def add_chord(self, chord: KeyChord) -> None:
        """Add a chord definition."""
        self._chords.append(chord)

    def add_remap(self, remap: KeyRemap) -> None:
        """Add a key remap."""
        self._remaps.append(remap)

    def match_key(self, hotkey: Hotkey, ctx: MatchContext) -> MatchResult:
        """Match a key event.

        Order: remaps, then a pending chord's follower (or its timeout), then
        chord leaders, then bindings of the current mode.
        """
        for remap in self._remaps:
            if remap.from_ != hotkey:
                continue
            if remap.condition is not None and not remap.condition.matches(ctx):
                continue
            return Remapped(remap.to)

        if self._chord_state.is_pending():
            if self._chord_state.is_timed_out():
                self._chord_state.reset()
            else:
                leader = self._chord_state.pending_leader()
                self._chord_state.reset()
                for chord in self._chords:
                    if chord.leader == leader and chord.follower == hotkey:
                        return Matched(chord.action, True)

        for chord in self._chords:
            if chord.leader == hotkey:
                self._chord_state.begin(hotkey, chord.timeout_ms)
                return ChordPending(hotkey, chord.timeout_ms)

        mode = self._modes.get(self._current_mode)
        if mode is not None:
            binding = mode.find_binding(hotkey, ctx)
            if binding is not None:
                return Matched(binding.action, binding.consume)

        return NoMatch()

    def current_mode_passthrough(self) -> bool:
        """Whether unmatched keys in the current mode pass through."""
        mode = self._modes.get(self._current_mode)
        return mode is not None and mode.passthrough

    def list_bindings(self) -> list[tuple[Hotkey, Action]]:
        """Every (hotkey, action) pair of the current mode."""
        mode = self._modes.get(self._current_mode)
        if mode is None:
            return []
        return [(hotkey, binding.action) for hotkey, binding in mode.bindings.items()]

    def mode_names(self) -> list[str]:
        """Names of all modes."""
        return list(self._modes)