import json
import time

import pytest

from awase.action import Action
from awase.chord import ChordState, KeyChord
from awase.hotkey import Hotkey, Modifiers
from awase.keys import Key


def _leader():
    return Hotkey(Modifiers.CTRL, Key.A)


def _follower():
    return Hotkey(Modifiers.NONE, Key.C)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_chord_state_default_idle():
    state = ChordState()
    assert state.is_pending() is False
    assert state.pending_leader() is None


def test_chord_state_begin_pending():
    state = ChordState()
    state.begin(_leader(), 1000)
    assert state.is_pending() is True
    assert state.pending_leader() == _leader()


def test_chord_state_reset():
    state = ChordState()
    state.begin(_leader(), 1000)
    state.reset()
    assert state.is_pending() is False
    assert state.pending_leader() is None


def test_chord_state_not_timed_out_initially():
    state = ChordState()
    state.begin(_leader(), 5000)
    assert state.is_timed_out() is False


def test_chord_state_times_out():
    state = ChordState()
    state.begin(_leader(), 0)
    time.sleep(0.001)
    assert state.is_timed_out() is True


def test_idle_never_timed_out():
    assert ChordState().is_timed_out() is False


def test_timeout_boundary_with_clock():
    clock = FakeClock()
    state = ChordState(clock)
    state.begin(_leader(), 1000)
    clock.now = 0.5
    assert state.is_timed_out() is False
    clock.now = 1.0
    assert state.is_timed_out() is True


def test_reset_clears_timeout():
    clock = FakeClock()
    state = ChordState(clock)
    state.begin(_leader(), 10)
    clock.now = 5.0
    state.reset()
    assert state.is_timed_out() is False


def test_key_chord_serde():
    chord = KeyChord(_leader(), _follower(), 1000, Action.command("new_window"))
    text = json.dumps(chord.to_dict())
    assert KeyChord.from_dict(json.loads(text)) == chord


@pytest.mark.parametrize("timeout", [-1, "1000", True, 2**32])
def test_key_chord_rejects_bad_timeout(timeout):
    data = KeyChord(_leader(), _follower(), 1000, Action.command("x")).to_dict()
    data["timeout_ms"] = timeout
    with pytest.raises(ValueError):
        KeyChord.from_dict(data)


def test_key_chord_missing_field():
    data = KeyChord(_leader(), _follower(), 1000, Action.command("x")).to_dict()
    del data["follower"]
    with pytest.raises(ValueError):
        KeyChord.from_dict(data)