import json

import pytest

from awase.action import Action
from awase.binding import Binding
from awase.condition import Condition, MatchContext
from awase.hotkey import Hotkey, Modifiers
from awase.keys import Key


def _hotkey():
    return Hotkey(Modifiers.CMD, Key.H)


def test_new_binding_defaults():
    b = Binding(_hotkey(), Action.command("focus_west"))
    assert b.consume is True
    assert b.condition is None


def test_builder_consume():
    b = Binding(_hotkey(), Action.command("focus_west")).with_consume(False)
    assert b.consume is False


def test_builder_condition():
    c = Condition(app_exclude="com.apple.Terminal")
    b = Binding(_hotkey(), Action.command("focus_west")).with_condition(c)
    assert b.condition == c


def test_builder_returns_copy():
    original = Binding(_hotkey(), Action.command("x"))
    changed = original.with_consume(False)
    assert original.consume is True
    assert changed.consume is False


def test_matches_context_no_condition():
    b = Binding(_hotkey(), Action.command("test"))
    assert b.matches_context(MatchContext()) is True


def test_matches_context_with_condition():
    b = Binding(_hotkey(), Action.command("test")).with_condition(Condition(app="Safari"))
    assert b.matches_context(MatchContext(focused_app_bundle_id="com.apple.Safari"))
    assert not b.matches_context(MatchContext(focused_app_bundle_id="com.mitchellh.ghostty"))


def test_serde_roundtrip():
    b = (
        Binding(
            Hotkey.parse("cmd+shift+h"),
            Action.chain([Action.command("focus_west"), Action.mode_switch("default")]),
        )
        .with_consume(False)
        .with_condition(Condition(app_exclude="Terminal|ghostty", display=0))
    )
    text = json.dumps(b.to_dict(), indent=2)
    assert Binding.from_dict(json.loads(text)) == b


def test_serde_minimal():
    text = """{
        "hotkey": { "modifiers": 1, "key": "Space" },
        "action": { "Command": "test" }
    }"""
    b = Binding.from_dict(json.loads(text))
    assert b.consume is True
    assert b.condition is None
    assert b.hotkey == Hotkey(Modifiers.CMD, Key.SPACE)
    assert b.action == Action.command("test")


def test_to_dict_omits_missing_condition():
    data = Binding(_hotkey(), Action.command("a")).to_dict()
    assert "condition" not in data
    assert data["consume"] is True


@pytest.mark.parametrize(
    "data",
    [
        {"action": {"Command": "x"}},
        {"hotkey": {"modifiers": 1, "key": "H"}},
        {"hotkey": {"modifiers": 1, "key": "H"}, "action": {"Command": "x"}, "consume": "yes"},
        [],
    ],
)
def test_from_dict_rejects_bad_input(data):
    with pytest.raises(ValueError):
        Binding.from_dict(data)