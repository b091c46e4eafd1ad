"""Two-step key chords and the state machine that tracks them."""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from awase.action import Action
from awase.hotkey import Hotkey

_MAX_TIMEOUT_MS = 0xFFFF_FFFF


@dataclass(frozen=True)
class KeyChord:
    """A leader hotkey followed within a timeout by a follower hotkey."""

    leader: Hotkey
    follower: Hotkey
    timeout_ms: int
    action: Action

    def to_dict(self) -> dict[str, Any]:
        """Serialized form."""
        return {
            "leader": self.leader.to_dict(),
            "follower": self.follower.to_dict(),
            "timeout_ms": self.timeout_ms,
            "action": self.action.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> KeyChord:
        """Build a chord from its serialized form."""
        if not isinstance(data, Mapping):
            raise ValueError("a chord is a mapping")
        for name in ("leader", "follower", "timeout_ms", "action"):
            if name not in data:
                raise ValueError(f"missing chord field: {name}")
        timeout = data["timeout_ms"]
        if (
            isinstance(timeout, bool)
            or not isinstance(timeout, int)
            or not 0 <= timeout <= _MAX_TIMEOUT_MS
        ):
            raise ValueError("chord field 'timeout_ms' must be a 32-bit unsigned integer")
        return cls(
            leader=Hotkey.from_dict(data["leader"]),
            follower=Hotkey.from_dict(data["follower"]),
            timeout_ms=timeout,
            action=Action.from_dict(data["action"]),
        )


class ChordState:
    """Tracks whether a chord leader was pressed and when.

    ``clock`` returns seconds from a monotonic source.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._leader: Hotkey | None = None
        self._started = 0.0
        self._timeout_ms = 0

    def __repr__(self) -> str:
        if self._leader is None:
            return "ChordState(idle)"
        return f"ChordState(pending leader={self._leader}, timeout_ms={self._timeout_ms})"

    def is_pending(self) -> bool:
        """True while waiting for a follower key."""
        return self._leader is not None

    def is_timed_out(self) -> bool:
        """True if a pending chord has run past its timeout."""
        if self._leader is None:
            return False
        elapsed_ms = int((self._clock() - self._started) * 1000)
        return elapsed_ms >= self._timeout_ms

    def begin(self, leader: Hotkey, timeout_ms: int) -> None:
        """Start waiting for a follower of ``leader``."""
        self._leader = leader
        self._started = self._clock()
        self._timeout_ms = timeout_ms

    def reset(self) -> None:
        """Return to idle."""
        self._leader = None

    def pending_leader(self) -> Hotkey | None:
        """The pending leader hotkey, or None when idle."""
        return self._leader